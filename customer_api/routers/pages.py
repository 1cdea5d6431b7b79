"""Public policy pages linked from the customer configuration."""

import html
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, Response

from customer_api.dependencies import get_settings_repository
from customer_api.responses import DEFAULT_404, envelope_response
from customer_api.services.configuration_service import PAGE_KEYS_BY_SLUG, PAGES_SETUP
from customer_api.services.settings_service import SettingsRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/page")


def page_content(live_values) -> str:
    """HTML body of a page setting, stored either as text or as ``{"content": ...}``."""
    if isinstance(live_values, dict):
        live_values = live_values.get("content")
    return live_values if isinstance(live_values, str) else ""


@router.get(
    "/{slug}",
    response_class=HTMLResponse,
    summary="Render a policy page",
    responses={404: {"description": "Unknown or inactive page"}},
)
async def show_page(
    slug: str,
    settings_repo: SettingsRepository = Depends(get_settings_repository),
) -> Response:
    key = PAGE_KEYS_BY_SLUG.get(slug)
    if key is None:
        return envelope_response(DEFAULT_404, status_code=404)

    setting = await settings_repo.get(key, PAGES_SETUP)
    if setting is None or not await settings_repo.is_active(key, PAGES_SETUP):
        logger.info(f"Page not available: {slug}")
        return envelope_response(DEFAULT_404, status_code=404)

    title = html.escape(key.replace("_", " ").title())
    body = page_content(setting.live_values)
    return HTMLResponse(
        f"<!DOCTYPE html><html><head><meta charset=\"utf-8\"><title>{title}</title></head>"
        f"<body>{body}</body></html>"
    )
