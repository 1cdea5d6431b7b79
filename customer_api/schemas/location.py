"""Pydantic schemas for IP geolocation results."""

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class LocationInfo(BaseModel):
    """Approximate caller location resolved from an IP address."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "ip": "103.4.145.2",
                "country_name": "Bangladesh",
                "country_code": "BD",
                "region_code": "C",
                "region_name": "Dhaka Division",
                "city_name": "Dhaka",
                "zip_code": "1000",
                "latitude": 23.7104,
                "longitude": 90.4074,
                "timezone": "Asia/Dhaka",
                "driver": "ip-api"
            }
        }
    )

    ip: str = Field(..., description="Resolved IP address")
    country_name: Optional[str] = Field(None, description="Country name")
    country_code: Optional[str] = Field(None, description="ISO 3166-1 alpha-2 country code")
    region_code: Optional[str] = Field(None, description="Region/state code")
    region_name: Optional[str] = Field(None, description="Region/state name")
    city_name: Optional[str] = Field(None, description="City name")
    zip_code: Optional[str] = Field(None, description="Postal/ZIP code")
    latitude: Optional[float] = Field(None, ge=-90, le=90, description="Latitude in decimal degrees")
    longitude: Optional[float] = Field(None, ge=-180, le=180, description="Longitude in decimal degrees")
    timezone: Optional[str] = Field(None, description="IANA time-zone identifier")
    driver: str = Field("ip-api", description="Resolver that produced this result")
