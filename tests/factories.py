"""Row builders and in-memory stand-ins for the database-backed stores."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, List, Optional

import httpx
from fastapi import Depends
from geoalchemy2.shape import to_shape
from shapely.geometry import Point

from customer_api.config import Settings
from customer_api.models.business_setting import BusinessSetting
from customer_api.models.zone import Zone
from customer_api.schemas.location import LocationInfo
from customer_api.schemas.user import AdminSummary
from customer_api.services.geolocation_service import GeolocationService
from customer_api.services.maps_service import MapsService
from customer_api.services.settings_service import SettingsRepository
from customer_api.services.user_service import UserService
from customer_api.services.zone_service import ZoneService


BASE_TIME = datetime(2026, 1, 1, tzinfo=timezone.utc)

# Rough outline of Dhaka city as (lat, lng)
DHAKA = [(23.70, 90.33), (23.70, 90.50), (23.90, 90.50), (23.90, 90.33)]


def make_setting(
    key_name: str,
    settings_type: str,
    live_values: Any,
    is_active: bool = True,
) -> BusinessSetting:
    """Build a detached setting row as it would come back from the database."""
    return BusinessSetting(
        id=uuid.uuid4(),
        key_name=key_name,
        settings_type=settings_type,
        live_values=live_values,
        test_values=live_values,
        mode="live",
        is_active=is_active,
        created_at=BASE_TIME,
    )


def make_zone(
    name: str,
    boundary: List[tuple],
    is_active: bool = True,
    created_offset_minutes: int = 0,
) -> Zone:
    """Build a detached zone from (lat, lng) vertices."""
    zone = Zone(
        id=uuid.uuid4(),
        name=name,
        is_active=is_active,
        created_at=BASE_TIME + timedelta(minutes=created_offset_minutes),
    )
    zone.set_boundary(boundary)
    return zone


class InMemorySettingsRepository(SettingsRepository):
    """Settings repository over a list of rows instead of a database session."""

    def __init__(self, rows: List[BusinessSetting]):
        super().__init__(session=None)
        self.rows = rows
        self.fetch_count = 0

    async def fetch(self, key: str, category: str) -> Optional[BusinessSetting]:
        self.fetch_count += 1
        for row in self.rows:
            if row.key_name == key and row.settings_type == category:
                return row
        return None

    async def enabled_payment_configs(self) -> List[Any]:
        return [
            row.live_values for row in self.rows
            if row.settings_type == "payment_config"
            and isinstance(row.live_values, dict)
            and str(row.live_values.get("status")) == "1"
        ]


class UnavailableSettingsRepository(SettingsRepository):
    """Settings repository whose database is down."""

    def __init__(self):
        super().__init__(session=None)

    async def fetch(self, key: str, category: str) -> Optional[BusinessSetting]:
        raise RuntimeError("settings database unavailable")


class InMemoryZoneService(ZoneService):
    """Zone store evaluating containment with Shapely."""

    def __init__(self, zones: List[Zone]):
        super().__init__(session=None)
        self.zones = zones

    async def find_containing(self, latitude: float, longitude: float) -> Optional[Zone]:
        point = Point(longitude, latitude)
        matches = [
            zone for zone in self.zones
            if zone.is_active
            and zone.coordinates is not None
            and to_shape(zone.coordinates).contains(point)
        ]
        return max(matches, key=lambda zone: zone.created_at, default=None)


class InMemoryUserService(UserService):
    def __init__(self, admin: Optional[AdminSummary]):
        super().__init__(session=None)
        self.admin = admin

    async def find_first_admin(self) -> Optional[AdminSummary]:
        return self.admin


class StaticGeolocationService(GeolocationService):
    """Geolocation resolver returning a fixed result and recording callers."""

    def __init__(self, location: Optional[LocationInfo]):
        super().__init__(Settings())
        self.location = location
        self.resolved_ips: List[Optional[str]] = []

    async def resolve(self, ip: Optional[str]) -> Optional[LocationInfo]:
        self.resolved_ips.append(ip)
        return self.location


def json_handler(payload: Any, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    """MockTransport handler answering every request with ``payload``."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)
    return handler


@dataclass
class FakeBackend:
    """Everything the endpoints read, held in memory."""
    settings: List[BusinessSetting] = field(default_factory=list)
    zones: List[Zone] = field(default_factory=list)
    admin: Optional[AdminSummary] = None
    location: Optional[LocationInfo] = None
    maps_handler: Callable[[httpx.Request], httpx.Response] = field(
        default_factory=lambda: json_handler({"status": "OK"})
    )
    maps_requests: List[httpx.Request] = field(default_factory=list)

    def add_setting(self, key_name: str, settings_type: str, live_values: Any, is_active: bool = True) -> BusinessSetting:
        setting = make_setting(key_name, settings_type, live_values, is_active)
        self.settings.append(setting)
        return setting

    def maps_transport(self) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            self.maps_requests.append(request)
            return self.maps_handler(request)
        return httpx.MockTransport(handler)


def install_overrides(app, backend: FakeBackend) -> None:
    """Point every store and external service dependency at ``backend``."""
    from customer_api import dependencies

    def override_settings_repository() -> SettingsRepository:
        return InMemorySettingsRepository(backend.settings)

    def override_zone_service() -> ZoneService:
        return InMemoryZoneService(backend.zones)

    def override_user_service() -> UserService:
        return InMemoryUserService(backend.admin)

    def override_geolocation_service() -> GeolocationService:
        return StaticGeolocationService(backend.location)

    def override_maps_service(
        settings_repo: SettingsRepository = Depends(dependencies.get_settings_repository)
    ) -> MapsService:
        return MapsService(dependencies.settings, settings_repo, transport=backend.maps_transport())

    app.dependency_overrides[dependencies.get_settings_repository] = override_settings_repository
    app.dependency_overrides[dependencies.get_zone_service] = override_zone_service
    app.dependency_overrides[dependencies.get_user_service] = override_user_service
    app.dependency_overrides[dependencies.get_geolocation_service] = override_geolocation_service
    app.dependency_overrides[dependencies.get_maps_service] = override_maps_service
