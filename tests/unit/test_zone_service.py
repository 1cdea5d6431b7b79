"""Unit tests for zone boundaries and the containment query."""

import pytest
from geoalchemy2.shape import to_shape
from sqlalchemy.dialects import postgresql

from customer_api.schemas.zone import ZoneRead
from customer_api.services.zone_service import containing_zone_query
from tests.factories import DHAKA, InMemoryZoneService, make_zone


class TestZoneBoundary:
    """Test storing and rendering zone polygons."""

    def test_set_boundary_stores_lng_lat_polygon(self):
        zone = make_zone("Dhaka", DHAKA)

        polygon = to_shape(zone.coordinates)

        assert polygon.geom_type == "Polygon"
        assert zone.coordinates.srid == 4326
        # x is longitude, y is latitude
        assert list(polygon.exterior.coords)[0] == (90.33, 23.70)

    def test_ring_is_closed(self):
        zone = make_zone("Dhaka", DHAKA)

        coords = list(to_shape(zone.coordinates).exterior.coords)

        assert coords[0] == coords[-1]
        assert len(coords) == len(DHAKA) + 1

    def test_geojson(self):
        zone = make_zone("Dhaka", DHAKA)

        geojson = zone.geojson

        assert geojson["type"] == "Polygon"
        assert tuple(geojson["coordinates"][0][0]) == (90.33, 23.70)

    def test_geojson_none_without_boundary(self):
        zone = make_zone("Dhaka", DHAKA)
        zone.coordinates = None

        assert zone.geojson is None

    def test_zone_read_renders_boundary(self):
        zone = make_zone("Dhaka", DHAKA)

        data = ZoneRead.model_validate(zone).model_dump(mode="json")

        assert data["name"] == "Dhaka"
        assert data["is_active"] is True
        assert data["id"] == str(zone.id)
        assert data["coordinates"]["type"] == "Polygon"
        assert data["coordinates"]["coordinates"][0][0] == [90.33, 23.70]


class TestContainingZoneQuery:
    """Test the SQL used to find the zone covering a point."""

    def compile(self, latitude, longitude) -> str:
        return str(
            containing_zone_query(latitude, longitude).compile(
                dialect=postgresql.dialect(),
                compile_kwargs={"literal_binds": True},
            )
        )

    def test_uses_point_containment(self):
        sql = self.compile(23.81, 90.41)

        assert "ST_Contains(zones.coordinates" in sql
        # longitude first
        assert "ST_MakePoint(90.41, 23.81)" in sql
        assert "4326" in sql

    def test_only_active_zones(self):
        sql = self.compile(23.81, 90.41)

        assert "zones.is_active IS true" in sql

    def test_newest_zone_wins(self):
        sql = self.compile(23.81, 90.41)

        assert "ORDER BY zones.created_at DESC, zones.id DESC" in sql
        assert "LIMIT 1" in sql


class TestInMemoryContainment:
    """Check the in-memory store used by endpoint tests agrees with the query's rules."""

    @pytest.mark.asyncio
    async def test_overlapping_zones_pick_latest(self):
        older = make_zone("Dhaka", DHAKA, created_offset_minutes=0)
        newer = make_zone("Dhaka North", DHAKA, created_offset_minutes=5)
        service = InMemoryZoneService([older, newer])

        assert await service.find_containing(23.81, 90.41) is newer

    @pytest.mark.asyncio
    async def test_inactive_zone_ignored(self):
        service = InMemoryZoneService([make_zone("Dhaka", DHAKA, is_active=False)])

        assert await service.find_containing(23.81, 90.41) is None
