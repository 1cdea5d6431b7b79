"""Customer configuration API endpoints."""

import logging
import math
from typing import List

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from customer_api.dependencies import (
    get_configuration_service,
    get_geolocation_service,
    get_maps_service,
    get_zone_service,
    settings,
)
from customer_api.responses import (
    DEFAULT_200,
    DEFAULT_400,
    ZONE_404,
    envelope_response,
)
from customer_api.schemas.envelope import Envelope, FieldError
from customer_api.schemas.zone import ZoneRead
from customer_api.services.configuration_service import ConfigurationService
from customer_api.services.geolocation_service import GeolocationService
from customer_api.services.maps_service import MapsService
from customer_api.services.zone_service import ZoneService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/customer/config",
    responses={
        400: {
            "description": "Missing required parameters",
            "model": Envelope,
            "content": {
                "application/json": {
                    "example": {
                        "result": False,
                        "response_code": "default_400",
                        "message": "Invalid or missing information",
                        "data": None,
                        "errors": [{"error_code": "lat", "message": "The lat field is required."}]
                    }
                }
            }
        }
    }
)


def public_base_url(request: Request) -> str:
    """Base URL of this service as seen by the caller, without trailing slash."""
    return str(request.base_url).rstrip("/")


def parse_coordinates(**values: str) -> tuple[dict[str, float], List[FieldError]]:
    """Convert coordinate parameters to floats, collecting a field error for each bad value."""
    parsed: dict[str, float] = {}
    errors: List[FieldError] = []
    for field, value in values.items():
        try:
            number = float(value)
        except ValueError:
            number = None
        if number is None or not math.isfinite(number):
            errors.append(FieldError(error_code=field, message=f"The {field} must be a number."))
        else:
            parsed[field] = number
    return parsed, errors


@router.get(
    "",
    response_model=Envelope,
    summary="Customer app configuration",
    description="""
    Everything a customer app needs at start-up: business identity, currency
    formatting, legal page links, feature toggles, enabled payment gateways,
    static enumerations and the caller's approximate location.

    Missing or inactive settings are returned as null (or 0 for toggles).
    """,
)
async def configuration(
    request: Request,
    configuration_service: ConfigurationService = Depends(get_configuration_service),
    geolocation_service: GeolocationService = Depends(get_geolocation_service),
) -> JSONResponse:
    client_ip = request.client.host if request.client else None
    location = await geolocation_service.resolve(client_ip)

    base_url = public_base_url(request)
    data = await configuration_service.build_configuration(
        base_url=base_url,
        image_base_url=f"{base_url}{settings.storage_url}",
        location=location,
    )
    return envelope_response(DEFAULT_200, data.model_dump(mode="json"))


@router.get(
    "/pages",
    response_model=Envelope,
    summary="Policy pages",
    description="The six stored page documents, returned as stored whether active or not.",
)
async def pages(
    configuration_service: ConfigurationService = Depends(get_configuration_service),
) -> JSONResponse:
    data = await configuration_service.build_pages()
    return envelope_response(DEFAULT_200, data.model_dump(mode="json"))


@router.get(
    "/get-zone-id",
    response_model=Envelope,
    summary="Resolve zone for a point",
    description="""
    Find the service zone covering a coordinate.

    Returns the most recently created active zone containing the point. A
    point outside every zone is a normal outcome: the response is 200 with
    `response_code` `zone_404` and no data.
    """,
)
async def get_zone(
    lat: str = Query(..., min_length=1, description="Latitude in decimal degrees", examples=["23.81"]),
    lng: str = Query(..., min_length=1, description="Longitude in decimal degrees", examples=["90.41"]),
    zone_service: ZoneService = Depends(get_zone_service),
) -> JSONResponse:
    coordinates, errors = parse_coordinates(lat=lat, lng=lng)
    if errors:
        return envelope_response(DEFAULT_400, errors=errors, status_code=400)

    zone = await zone_service.find_containing(coordinates["lat"], coordinates["lng"])
    if zone is None:
        return envelope_response(ZONE_404)

    return envelope_response(DEFAULT_200, ZoneRead.model_validate(zone).model_dump(mode="json"))


@router.get(
    "/place-api-autocomplete",
    response_model=Envelope,
    summary="Place autocomplete (Google passthrough)",
)
async def place_api_autocomplete(
    search_text: str = Query(..., min_length=1, description="Free-text search input"),
    maps_service: MapsService = Depends(get_maps_service),
) -> JSONResponse:
    logger.info("Forwarding place autocomplete request")
    data = await maps_service.autocomplete(search_text)
    return envelope_response(DEFAULT_200, data)


@router.get(
    "/distance-api",
    response_model=Envelope,
    summary="Distance matrix (Google passthrough)",
)
async def distance_api(
    origin_lat: str = Query(..., min_length=1),
    origin_lng: str = Query(..., min_length=1),
    destination_lat: str = Query(..., min_length=1),
    destination_lng: str = Query(..., min_length=1),
    maps_service: MapsService = Depends(get_maps_service),
) -> JSONResponse:
    logger.info("Forwarding distance matrix request")
    data = await maps_service.distance_matrix(origin_lat, origin_lng, destination_lat, destination_lng)
    return envelope_response(DEFAULT_200, data)


@router.get(
    "/place-api-details",
    response_model=Envelope,
    summary="Place details (Google passthrough)",
)
async def place_api_details(
    placeid: str = Query(..., min_length=1, description="Google place id"),
    maps_service: MapsService = Depends(get_maps_service),
) -> JSONResponse:
    logger.info("Forwarding place details request")
    data = await maps_service.place_details(placeid)
    return envelope_response(DEFAULT_200, data)


@router.get(
    "/geocode-api",
    response_model=Envelope,
    summary="Reverse geocoding (Google passthrough)",
)
async def geocode_api(
    lat: str = Query(..., min_length=1, description="Latitude in decimal degrees"),
    lng: str = Query(..., min_length=1, description="Longitude in decimal degrees"),
    maps_service: MapsService = Depends(get_maps_service),
) -> JSONResponse:
    logger.info("Forwarding reverse geocoding request")
    data = await maps_service.reverse_geocode(lat, lng)
    return envelope_response(DEFAULT_200, data)
