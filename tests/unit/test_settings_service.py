"""Unit tests for settings decoding and per-request memoisation."""

import pytest
from sqlalchemy.dialects import postgresql

from customer_api.services.settings_service import (
    decode_json,
    enabled_payment_configs_query,
    is_truthy,
    to_int,
)
from tests.factories import InMemorySettingsRepository, make_setting


class TestValueDecoding:
    """Test decoding helpers for untyped setting values."""

    @pytest.mark.parametrize("value, expected", [
        (None, 0),
        (True, 1),
        (False, 0),
        (1, 1),
        (0, 0),
        (2.9, 2),
        ("1", 1),
        (" 1 ", 1),
        ("0", 0),
        ("1.0", 1),
        ("yes", 0),
        ({"status": 1}, 0),
        ("inf", 0),
        ("-inf", 0),
        ("1e999", 0),
        ("nan", 0),
        (float("inf"), 0),
        (float("nan"), 0),
    ])
    def test_to_int(self, value, expected):
        assert to_int(value) == expected

    def test_decode_json_from_string(self):
        assert decode_json('{"min_version_for_android": "1.2"}') == {"min_version_for_android": "1.2"}

    def test_decode_json_passes_documents_through(self):
        value = {"min_version_for_ios": "2.0"}
        assert decode_json(value) is value

    def test_decode_json_invalid_or_absent_is_none(self):
        assert decode_json("not json {") is None
        assert decode_json(None) is None
        assert decode_json(5) is None

    @pytest.mark.parametrize("value, expected", [
        (True, True),
        (False, False),
        (1, True),
        (0, False),
        ("1", True),
        ("0", False),
        ("", False),
        (None, False),
    ])
    def test_is_truthy(self, value, expected):
        assert is_truthy(value) is expected


class TestSettingsRepository:
    """Test repository lookups over in-memory rows."""

    @pytest.mark.asyncio
    async def test_absent_setting_is_none(self):
        repo = InMemorySettingsRepository([])

        assert await repo.get("business_name", "business_information") is None
        assert await repo.value("business_name", "business_information") is None
        assert await repo.active_value("app_url_playstore", "landing_button_and_links") is None
        assert await repo.flag("customer_wallet", "customer_config") == 0
        assert await repo.is_active("refund_policy", "pages_setup") is False

    @pytest.mark.asyncio
    async def test_infinite_toggle_is_zero(self):
        repo = InMemorySettingsRepository([
            make_setting("customer_wallet", "customer_config", "inf"),
        ])

        assert await repo.flag("customer_wallet", "customer_config") == 0

    @pytest.mark.asyncio
    async def test_map_api_keys(self):
        repo = InMemorySettingsRepository([
            make_setting("google_map", "third_party", {"map_api_key_server": "s", "map_api_key_client": "c"}),
        ])

        assert await repo.map_api_key("server") == "s"
        assert await repo.map_api_key("client") == "c"
        assert await InMemorySettingsRepository([]).map_api_key("server") is None

    @pytest.mark.asyncio
    async def test_lookup_is_memoised_per_repository(self):
        repo = InMemorySettingsRepository([
            make_setting("business_name", "business_information", "Acme"),
        ])

        assert await repo.value("business_name", "business_information") == "Acme"
        assert await repo.value("business_name", "business_information") == "Acme"
        await repo.get("missing", "business_information")
        await repo.get("missing", "business_information")

        assert repo.fetch_count == 2

    @pytest.mark.asyncio
    async def test_category_is_part_of_the_key(self):
        repo = InMemorySettingsRepository([
            make_setting("web_url", "landing_button_and_links", "https://example.com"),
        ])

        assert await repo.value("web_url", "business_information") is None
        assert await repo.value("web_url", "landing_button_and_links") == "https://example.com"

    @pytest.mark.asyncio
    async def test_inactive_setting_suppresses_active_value_only(self):
        repo = InMemorySettingsRepository([
            make_setting("app_url_playstore", "landing_button_and_links", "https://play", is_active=False),
        ])

        assert await repo.active_value("app_url_playstore", "landing_button_and_links") is None
        assert await repo.value("app_url_playstore", "landing_button_and_links") == "https://play"

    @pytest.mark.asyncio
    async def test_value_default_for_null_payload(self):
        repo = InMemorySettingsRepository([
            make_setting("footer_text", "business_information", None),
        ])

        assert await repo.value("footer_text", "business_information", default="") == ""

    @pytest.mark.asyncio
    async def test_payment_gateways_lists_enabled_names(self):
        repo = InMemorySettingsRepository([
            make_setting("ssl_commerz", "payment_config", {"gateway": "ssl_commerz", "status": "1"}),
            make_setting("stripe", "payment_config", {"gateway": "stripe", "status": "0"}),
            make_setting("paypal", "payment_config", {"gateway": "paypal", "status": 1}),
        ])

        assert await repo.payment_gateways() == ["ssl_commerz", "paypal"]


class TestPaymentGatewayQuery:
    """Test the SQL used to find enabled payment configurations."""

    def test_query_filters_on_category_and_json_status(self):
        sql = str(
            enabled_payment_configs_query().compile(
                dialect=postgresql.dialect(),
                compile_kwargs={"literal_binds": True},
            )
        )

        assert "business_settings.settings_type = 'payment_config'" in sql
        assert "business_settings.live_values ->> 'status'" in sql
        assert "= '1'" in sql
        assert "ORDER BY business_settings.created_at" in sql
