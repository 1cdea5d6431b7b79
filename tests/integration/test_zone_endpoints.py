"""Integration tests for zone resolution."""

import pytest

from tests.factories import DHAKA, make_zone


ZONE_URL = "/api/v1/customer/config/get-zone-id"


class TestGetZoneId:
    """Test GET /api/v1/customer/config/get-zone-id."""

    @pytest.mark.asyncio
    async def test_point_inside_zone(self, client, backend):
        zone = make_zone("Dhaka", DHAKA)
        backend.zones.append(zone)

        response = await client.get(ZONE_URL, params={"lat": "23.81", "lng": "90.41"})

        assert response.status_code == 200
        body = response.json()
        assert body["result"] is True
        assert body["response_code"] == "default_200"
        assert body["data"]["id"] == str(zone.id)
        assert body["data"]["name"] == "Dhaka"
        assert body["data"]["coordinates"]["type"] == "Polygon"

    @pytest.mark.asyncio
    async def test_point_outside_every_zone(self, client, backend):
        backend.zones.append(make_zone("Dhaka", DHAKA))

        response = await client.get(ZONE_URL, params={"lat": "0", "lng": "0"})

        assert response.status_code == 200
        body = response.json()
        assert body["result"] is False
        assert body["response_code"] == "zone_404"
        assert body["data"] is None

    @pytest.mark.asyncio
    async def test_no_zones_at_all(self, client):
        response = await client.get(ZONE_URL, params={"lat": "23.81", "lng": "90.41"})

        assert response.status_code == 200
        assert response.json()["response_code"] == "zone_404"

    @pytest.mark.asyncio
    async def test_overlapping_zones_return_latest(self, client, backend):
        backend.zones.append(make_zone("Dhaka", DHAKA, created_offset_minutes=0))
        newer = make_zone("Dhaka Central", DHAKA, created_offset_minutes=10)
        backend.zones.append(newer)

        response = await client.get(ZONE_URL, params={"lat": "23.81", "lng": "90.41"})

        assert response.json()["data"]["id"] == str(newer.id)

    @pytest.mark.asyncio
    async def test_inactive_zone_ignored(self, client, backend):
        backend.zones.append(make_zone("Dhaka", DHAKA, is_active=False))

        response = await client.get(ZONE_URL, params={"lat": "23.81", "lng": "90.41"})

        assert response.json()["response_code"] == "zone_404"

    @pytest.mark.asyncio
    async def test_coordinates_are_lat_lng_not_swapped(self, client, backend):
        backend.zones.append(make_zone("Dhaka", DHAKA))

        response = await client.get(ZONE_URL, params={"lat": "90.41", "lng": "23.81"})

        assert response.json()["response_code"] == "zone_404"

    @pytest.mark.asyncio
    async def test_missing_lat(self, client):
        response = await client.get(ZONE_URL, params={"lng": "90.41"})

        assert response.status_code == 400
        body = response.json()
        assert body["result"] is False
        assert body["response_code"] == "default_400"
        assert body["errors"] == [{"error_code": "lat", "message": "The lat field is required."}]

    @pytest.mark.asyncio
    async def test_missing_both(self, client):
        response = await client.get(ZONE_URL)

        assert response.status_code == 400
        codes = [error["error_code"] for error in response.json()["errors"]]
        assert codes == ["lat", "lng"]

    @pytest.mark.asyncio
    async def test_empty_value_is_missing(self, client):
        response = await client.get(ZONE_URL, params={"lat": "", "lng": "90.41"})

        assert response.status_code == 400
        assert response.json()["errors"][0]["message"] == "The lat field is required."

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", ["abc", "nan", "inf"])
    async def test_non_numeric_coordinate(self, client, value):
        response = await client.get(ZONE_URL, params={"lat": value, "lng": "90.41"})

        assert response.status_code == 400
        assert response.json()["errors"] == [{"error_code": "lat", "message": "The lat must be a number."}]
