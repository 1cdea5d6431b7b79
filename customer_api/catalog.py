"""
Static reference data published in the customer configuration.

Languages, currencies and countries ship as JSON files next to this module and
are loaded once per process. The lists are shared by reference, so callers
must treat them as read-only.
"""
import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Tuple
from zoneinfo import available_timezones

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"

PAGINATION_LIMIT = 20

# Top-level IANA areas. Names outside them such as "US/Eastern" or "Etc/GMT+3" are
# left out; regional backward links such as "Asia/Calcutta" are kept
TIME_ZONE_REGIONS = (
    "Africa",
    "America",
    "Antarctica",
    "Arctic",
    "Asia",
    "Atlantic",
    "Australia",
    "Europe",
    "Indian",
    "Pacific",
)


def _load(name: str) -> Tuple[Dict[str, Any], ...]:
    path = DATA_DIR / f"{name}.json"
    with open(path, "r", encoding="utf-8") as fh:
        entries = json.load(fh)
    logger.info(f"Loaded {len(entries)} {name} from {path.name}")
    return tuple(entries)


@lru_cache(maxsize=None)
def languages() -> Tuple[Dict[str, Any], ...]:
    """ISO 639-1 languages as ``{"code", "name", "nativeName"}``."""
    return _load("languages")


@lru_cache(maxsize=None)
def currencies() -> Tuple[Dict[str, Any], ...]:
    """ISO 4217 currencies as ``{"code", "symbol", "name"}``."""
    return _load("currencies")


@lru_cache(maxsize=None)
def countries() -> Tuple[Dict[str, Any], ...]:
    """ISO 3166-1 countries as ``{"name", "code"}``."""
    return _load("countries")


@lru_cache(maxsize=None)
def time_zones() -> Tuple[str, ...]:
    """Sorted region time-zone identifiers, plus ``UTC``."""
    zones = {
        name for name in available_timezones()
        if name.split("/", 1)[0] in TIME_ZONE_REGIONS and "/" in name
    }
    zones.add("UTC")
    return tuple(sorted(zones))


def preload() -> None:
    """Load every catalog so the first request does not pay for it."""
    languages()
    currencies()
    countries()
    time_zones()


def as_lists() -> Dict[str, List[Any]]:
    """Catalog payload fields for the configuration response."""
    return {
        "languages": list(languages()),
        "currencies": list(currencies()),
        "countries": list(countries()),
        "time_zones": list(time_zones()),
    }
