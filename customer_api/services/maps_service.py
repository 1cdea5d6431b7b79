"""Passthrough client for the Google Maps web service APIs."""

import logging
from typing import Any, Dict, Optional

import httpx

from customer_api.config import Settings
from customer_api.services.settings_service import SettingsRepository

logger = logging.getLogger(__name__)


class MapsService:
    """
    Forward requests to Google Maps and relay the JSON body unchanged.

    The server-side API key is read from the ``google_map`` setting when the
    first request is made, added to the query string, and never returned to
    callers. Provider error statuses are not interpreted; there is no caching
    and no retrying. A transport failure is reported in the provider's own
    error shape (``status`` / ``error_message``) so clients handle it the
    same way.
    """

    def __init__(
        self,
        settings: Settings,
        settings_repo: SettingsRepository,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize maps service.

        Args:
            settings: Application settings
            settings_repo: Request-scoped settings repository holding the keys
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = settings.maps_api_base_url
        self.timeout = settings.maps_timeout
        self.settings_repo = settings_repo
        self.transport = transport

    async def server_key(self) -> str:
        """Server key for outbound calls, empty when not configured."""
        api_key = await self.settings_repo.map_api_key("server")
        if not api_key:
            logger.warning("Google Maps server key is not configured")
        return api_key or ""

    async def _get(self, path: str, params: Dict[str, str]) -> Optional[Any]:
        """
        Issue one GET against the provider.

        Returns:
            The decoded JSON body whatever the status code, None when the body
            is not JSON, or an ``UNKNOWN_ERROR`` body on transport failure.
        """
        url = f"{self.base_url}{path}"
        api_key = await self.server_key()
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url, params={**params, "key": api_key})
        except httpx.TimeoutException:
            logger.error(f"Maps request timeout: {path}")
            return {"status": "UNKNOWN_ERROR", "error_message": "Mapping provider request timed out"}
        except httpx.RequestError as e:
            logger.error(f"Maps request error: {path}: {e}")
            return {"status": "UNKNOWN_ERROR", "error_message": "Mapping provider unreachable"}

        if response.is_error:
            logger.warning(f"Maps provider returned HTTP {response.status_code} for {path}")

        try:
            return response.json()
        except ValueError:
            logger.warning(f"Maps provider returned a non-JSON body for {path}")
            return None

    async def autocomplete(self, search_text: str) -> Optional[Any]:
        """Place Autocomplete for free-text input."""
        return await self._get("/place/autocomplete/json", {"input": search_text})

    async def distance_matrix(
        self,
        origin_lat: str,
        origin_lng: str,
        destination_lat: str,
        destination_lng: str,
    ) -> Optional[Any]:
        """Distance Matrix between a single origin and destination."""
        return await self._get(
            "/distancematrix/json",
            {
                "origins": f"{origin_lat},{origin_lng}",
                "destinations": f"{destination_lat},{destination_lng}",
            },
        )

    async def place_details(self, place_id: str) -> Optional[Any]:
        """Place Details for a place id."""
        return await self._get("/place/details/json", {"placeid": place_id})

    async def reverse_geocode(self, lat: str, lng: str) -> Optional[Any]:
        """Reverse geocoding of a coordinate pair."""
        return await self._get("/geocode/json", {"latlng": f"{lat},{lng}"})
