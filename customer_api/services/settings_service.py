"""Read-only access to business settings with per-request memoisation."""
import json
import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from customer_api.models.business_setting import BusinessSetting

logger = logging.getLogger(__name__)

_MISSING = object()


def to_int(value: Any) -> int:
    """
    Integer form of a toggle-style setting value.

    Accepts booleans, numbers and numeric strings; anything else, including
    NaN and infinities, is 0.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    try:
        if isinstance(value, (int, float)):
            return int(value)
        if isinstance(value, str):
            return int(float(value.strip()))
    except (ValueError, OverflowError):
        logger.warning(f"Setting value {value!r} is not an integer; using 0")
    return 0


def decode_json(value: Any) -> Optional[Any]:
    """
    Decode a setting stored either as a JSON document or as a JSON string.

    Returns None for absent or undecodable values.
    """
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        return value
    if isinstance(value, str):
        try:
            return json.loads(value)
        except ValueError:
            logger.warning("Setting value is not valid JSON; returning null")
            return None
    return None


def is_truthy(value: Any) -> bool:
    """Truthiness of an ``is_active``-style flag that may be stored as text."""
    if isinstance(value, str):
        return value.strip() not in ("", "0", "false")
    return bool(value)


def enabled_payment_configs_query() -> Select:
    """
    Select ``live_values`` of payment configurations that are switched on.

    The JSON text comparison matches both a stored "1" and a numeric 1.
    """
    return (
        select(BusinessSetting.live_values)
        .where(
            BusinessSetting.settings_type == "payment_config",
            BusinessSetting.live_values["status"].astext == "1",
        )
        .order_by(BusinessSetting.created_at)
    )


class SettingsRepository:
    """
    Settings store for a single request.

    Every ``(key, category)`` pair is fetched at most once; results (including
    misses) are kept only for the lifetime of this instance, which the
    dependency layer ties to one request.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self._cache: Dict[Tuple[str, str], Optional[BusinessSetting]] = {}

    async def fetch(self, key: str, category: str) -> Optional[BusinessSetting]:
        """Load one setting from the database."""
        result = await self.session.execute(
            select(BusinessSetting)
            .where(
                BusinessSetting.key_name == key,
                BusinessSetting.settings_type == category,
            )
            .limit(1)
        )
        return result.scalars().first()

    async def get(self, key: str, category: str) -> Optional[BusinessSetting]:
        """Return the setting, or None when it does not exist."""
        cached = self._cache.get((key, category), _MISSING)
        if cached is not _MISSING:
            return cached
        setting = await self.fetch(key, category)
        if setting is None:
            logger.debug(f"Setting not found: {category}.{key}")
        self._cache[(key, category)] = setting
        return setting

    async def value(self, key: str, category: str, default: Any = None) -> Any:
        """Stored value regardless of activity; ``default`` when absent or null."""
        setting = await self.get(key, category)
        if setting is None or setting.live_values is None:
            return default
        return setting.live_values

    async def active_value(self, key: str, category: str) -> Any:
        """Stored value, or None when the setting is absent or inactive."""
        setting = await self.get(key, category)
        if setting is None or not is_truthy(setting.is_active):
            return None
        return setting.live_values

    async def is_active(self, key: str, category: str) -> bool:
        """Whether the setting exists and is switched on."""
        setting = await self.get(key, category)
        return setting is not None and is_truthy(setting.is_active)

    async def flag(self, key: str, category: str) -> int:
        """Integer toggle value, 0 when absent."""
        return to_int(await self.value(key, category))

    async def json_value(self, key: str, category: str) -> Optional[Any]:
        """Value decoded as JSON, None when absent or undecodable."""
        return decode_json(await self.value(key, category))

    async def map_api_key(self, kind: str = "server") -> Optional[str]:
        """
        One of the Google Maps keys stored in the ``google_map`` setting.

        Args:
            kind: ``server`` for outbound calls, ``client`` for apps
        """
        values = await self.json_value("google_map", "third_party")
        if not isinstance(values, dict):
            return None
        return values.get(f"map_api_key_{kind}")

    async def enabled_payment_configs(self) -> List[Any]:
        """Stored values of every payment configuration whose status is "1"."""
        result = await self.session.execute(enabled_payment_configs_query())
        return list(result.scalars().all())

    async def payment_gateways(self) -> List[str]:
        """Gateway names of every enabled payment configuration."""
        return [
            values["gateway"]
            for values in await self.enabled_payment_configs()
            if isinstance(values, dict) and values.get("gateway")
        ]
