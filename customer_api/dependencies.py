"""FastAPI dependencies for database-backed stores and external services."""
import logging
from typing import Optional

from aiolimiter import AsyncLimiter
from fastapi import Depends
from redis.asyncio import Redis
from sqlalchemy.ext.asyncio import AsyncSession

from customer_api.config import Settings
from customer_api.database import get_async_session
from customer_api.services.configuration_service import ConfigurationService
from customer_api.services.geolocation_service import GeolocationService, build_rate_limiter
from customer_api.services.maps_service import MapsService
from customer_api.services.settings_service import SettingsRepository
from customer_api.services.user_service import UserService
from customer_api.services.zone_service import ZoneService

logger = logging.getLogger(__name__)


# Initialize settings
settings = Settings()


# Redis client singleton
_redis_client: Optional[Redis] = None

# Geolocation limiter singleton
_geolocation_limiter: Optional[AsyncLimiter] = None


async def get_redis() -> Optional[Redis]:
    """
    Dependency to get Redis client for caching.

    Returns None if Redis connection fails (graceful degradation).
    """
    global _redis_client

    if _redis_client is None:
        try:
            _redis_client = Redis.from_url(
                settings.redis_url,
                encoding="utf-8",
                decode_responses=True
            )
            await _redis_client.ping()
        except Exception as e:
            logger.warning(f"Redis connection failed: {e}. Caching disabled.")
            _redis_client = None

    return _redis_client


def get_settings_repository(
    session: AsyncSession = Depends(get_async_session)
) -> SettingsRepository:
    """
    Dependency to get the settings repository.

    FastAPI caches dependency results per request, so every handler and
    sub-dependency of one request shares this instance and its memoised
    lookups.
    """
    return SettingsRepository(session)


def get_zone_service(
    session: AsyncSession = Depends(get_async_session)
) -> ZoneService:
    """Dependency to get the zone store."""
    return ZoneService(session)


def get_user_service(
    session: AsyncSession = Depends(get_async_session)
) -> UserService:
    """Dependency to get the user store."""
    return UserService(session, admin_user_type=settings.admin_user_type)


def get_geolocation_limiter() -> AsyncLimiter:
    """
    Process-wide geolocation rate limiter.

    Every request shares this instance so the per-minute budget applies to
    the whole process.
    """
    global _geolocation_limiter

    if _geolocation_limiter is None:
        _geolocation_limiter = build_rate_limiter(settings)

    return _geolocation_limiter


def get_geolocation_service(
    redis_client: Optional[Redis] = Depends(get_redis)
) -> GeolocationService:
    """Dependency to get geolocation service instance."""
    return GeolocationService(settings, redis_client, rate_limiter=get_geolocation_limiter())


def get_configuration_service(
    settings_repo: SettingsRepository = Depends(get_settings_repository),
    user_service: UserService = Depends(get_user_service),
) -> ConfigurationService:
    """Dependency to get the configuration assembler."""
    return ConfigurationService(settings_repo, user_service)


def get_maps_service(
    settings_repo: SettingsRepository = Depends(get_settings_repository)
) -> MapsService:
    """
    Dependency to get a maps client.

    The server key is read from settings when the client makes its first
    call, after request validation has passed.
    """
    return MapsService(settings, settings_repo)
