"""Zone schemas for API responses."""
import uuid
from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ZoneRead(BaseModel):
    """Zone record with its boundary rendered as GeoJSON."""
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "1f0c6f8e-5a4b-4f7e-9b2a-3c1d2e4f5a6b",
                "name": "Dhaka",
                "coordinates": {
                    "type": "Polygon",
                    "coordinates": [[[90.3, 23.7], [90.5, 23.7], [90.5, 23.9], [90.3, 23.9], [90.3, 23.7]]]
                },
                "is_active": True,
                "created_at": "2026-01-01T00:00:00Z",
                "updated_at": None
            }
        }
    )

    id: uuid.UUID
    name: str
    coordinates: Optional[dict] = Field(
        None,
        validation_alias=AliasChoices("geojson", "coordinates"),
        description="Zone boundary as a GeoJSON Polygon"
    )
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
