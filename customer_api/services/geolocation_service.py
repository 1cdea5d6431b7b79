"""IP geolocation service with ip-api integration, caching, and rate limiting."""

import ipaddress
import json
import logging
from typing import Optional

import httpx
from aiolimiter import AsyncLimiter
from redis.asyncio import Redis

from customer_api.config import Settings
from customer_api.schemas.location import LocationInfo

logger = logging.getLogger(__name__)


def build_rate_limiter(settings: Settings) -> AsyncLimiter:
    """Limiter allowing ``geolocation_requests_per_minute`` lookups per minute."""
    return AsyncLimiter(
        max_rate=settings.geolocation_requests_per_minute,
        time_period=60.0
    )


class GeolocationService:
    """
    Resolve a caller's approximate location from their IP address.

    Features:
    - ip-api JSON lookups
    - Rate limiting per minute, shared by every instance given the same limiter
    - Redis caching with a configurable TTL
    - Graceful degradation: any failure resolves to None
    """

    def __init__(
        self,
        settings: Settings,
        redis_client: Optional[Redis] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        rate_limiter: Optional[AsyncLimiter] = None,
    ):
        """
        Initialize geolocation service.

        Args:
            settings: Application settings
            redis_client: Optional Redis client for caching
            transport: Optional httpx transport (used by tests)
            rate_limiter: Limiter shared across requests; a private one is
                built from settings when omitted
        """
        self.settings = settings
        self.redis_client = redis_client
        self.transport = transport
        self.base_url = settings.geolocation_url
        self.rate_limiter = rate_limiter or build_rate_limiter(settings)

    @staticmethod
    def is_public_ip(ip: Optional[str]) -> bool:
        """Whether ``ip`` is a globally routable address worth looking up."""
        if not ip:
            return False
        try:
            return ipaddress.ip_address(ip).is_global
        except ValueError:
            return False

    async def resolve(self, ip: Optional[str]) -> Optional[LocationInfo]:
        """
        Resolve an IP address to a location.

        Checks cache first, then calls ip-api if needed.

        Args:
            ip: Caller IP address

        Returns:
            LocationInfo, or None for private/unknown addresses and failures
        """
        if not self.is_public_ip(ip):
            logger.debug(f"Skipping geolocation for non-public address: {ip}")
            return None

        cache_key = f"geolocation:ip:{ip}"

        if self.redis_client:
            try:
                cached = await self.redis_client.get(cache_key)
                if cached:
                    logger.info(f"Cache hit for IP: {ip}")
                    return LocationInfo(**json.loads(cached))
            except Exception as e:
                logger.warning(f"Cache read error: {e}")

        try:
            await self.rate_limiter.acquire()
        except ValueError as e:
            logger.error(f"Geolocation rate limiter rejected request: {e}")
            return None

        logger.info(f"Resolving location for IP: {ip}")

        try:
            async with httpx.AsyncClient(
                timeout=self.settings.geolocation_timeout,
                transport=self.transport,
            ) as client:
                response = await client.get(f"{self.base_url}/{ip}")
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Geolocation HTTP error: {e}")
            return None
        except httpx.TimeoutException:
            logger.error("Geolocation request timeout")
            return None
        except httpx.RequestError as e:
            logger.error(f"Geolocation request error: {e}")
            return None
        except ValueError:
            logger.error("Geolocation response was not valid JSON")
            return None

        if not isinstance(data, dict) or data.get("status") != "success":
            reason = data.get("message") if isinstance(data, dict) else "unexpected payload"
            logger.warning(f"Geolocation failed for {ip}: {reason}")
            return None

        result = LocationInfo(
            ip=data.get("query") or ip,
            country_name=data.get("country"),
            country_code=data.get("countryCode"),
            region_code=data.get("region"),
            region_name=data.get("regionName"),
            city_name=data.get("city"),
            zip_code=data.get("zip") or None,
            latitude=data.get("lat"),
            longitude=data.get("lon"),
            timezone=data.get("timezone"),
        )

        if self.redis_client:
            try:
                await self.redis_client.setex(
                    cache_key,
                    self.settings.geolocation_cache_ttl,
                    result.model_dump_json()
                )
                logger.info(f"Cached location for IP: {ip}")
            except Exception as e:
                logger.warning(f"Cache write error: {e}")

        return result
