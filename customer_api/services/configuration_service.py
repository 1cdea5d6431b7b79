"""Assembly of the customer configuration and pages payloads."""
import logging
from typing import Optional

from customer_api import catalog
from customer_api.schemas.configuration import (
    ConfigurationData,
    DefaultLocation,
    DefaultPoint,
    PagesData,
)
from customer_api.schemas.location import LocationInfo
from customer_api.schemas.setting import BusinessSettingRead
from customer_api.services.settings_service import SettingsRepository
from customer_api.services.user_service import UserService

logger = logging.getLogger(__name__)

# Setting categories
BUSINESS_INFORMATION = "business_information"
PAGES_SETUP = "pages_setup"
SERVICE_SETUP = "service_setup"
LANDING_LINKS = "landing_button_and_links"
SOCIAL_LOGIN = "social_login"
CUSTOMER_CONFIG = "customer_config"
APP_SETTINGS = "app_settings"

# Page setting key -> public URL slug
PAGES = {
    "about_us": "about-us",
    "terms_and_conditions": "terms-and-conditions",
    "refund_policy": "refund-policy",
    "return_policy": "return-policy",
    "cancellation_policy": "cancellation-policy",
    "privacy_policy": "privacy-policy",
}
PAGE_KEYS_BY_SLUG = {slug: key for key, slug in PAGES.items()}


def page_url(base_url: str, key: str) -> str:
    return f"{base_url}/page/{PAGES[key]}"


class ConfigurationService:
    """Builds the read-only payloads served by the customer config router."""

    def __init__(
        self,
        settings_repo: SettingsRepository,
        user_service: UserService,
    ):
        self.settings_repo = settings_repo
        self.user_service = user_service

    async def _business(self, key: str):
        return await self.settings_repo.value(key, BUSINESS_INFORMATION)

    async def _conditional_page_url(self, base_url: str, key: str) -> str:
        if await self.settings_repo.is_active(key, PAGES_SETUP):
            return page_url(base_url, key)
        return ""

    async def build_configuration(
        self,
        base_url: str,
        image_base_url: str,
        location: Optional[LocationInfo],
    ) -> ConfigurationData:
        """
        Assemble the configuration object.

        Absent settings become null (or 0 for integer toggles); inactive
        link settings are suppressed rather than exposed.

        Args:
            base_url: Public base URL of this service without trailing slash
            image_base_url: Public URL of the image storage
            location: Caller location, None when it could not be resolved
        """
        repo = self.settings_repo

        return ConfigurationData(
            business_name=await self._business("business_name"),
            logo=await self._business("business_logo"),
            country_code=await self._business("country_code"),
            business_address=await self._business("business_address"),
            business_phone=await self._business("business_phone"),
            business_email=await self._business("business_email"),
            base_url=f"{base_url}/api/v1/",
            currency_decimal_point=await self._business("currency_decimal_point"),
            currency_code=await self._business("currency_code"),
            currency_symbol_position=await self._business("currency_symbol_position"),
            about_us=page_url(base_url, "about_us"),
            privacy_policy=page_url(base_url, "privacy_policy"),
            terms_and_conditions=await self._conditional_page_url(base_url, "terms_and_conditions"),
            refund_policy=await self._conditional_page_url(base_url, "refund_policy"),
            cancellation_policy=await self._conditional_page_url(base_url, "cancellation_policy"),
            default_location=DefaultLocation(
                default=DefaultPoint(
                    lat=location.latitude if location else None,
                    lon=location.longitude if location else None,
                )
            ),
            user_location_info=location,
            app_url_android="",
            app_url_ios="",
            sms_verification=await repo.value("sms_verification", SERVICE_SETUP),
            email_verification=await repo.value("email_verification", SERVICE_SETUP),
            map_api_key=await repo.map_api_key("client"),
            image_base_url=image_base_url,
            pagination_limit=catalog.PAGINATION_LIMIT,
            **catalog.as_lists(),
            payment_gateways=await repo.payment_gateways(),
            footer_text=await self._business("footer_text"),
            cookies_text=await self._business("cookies_text"),
            admin_details=await self.user_service.find_first_admin(),
            min_versions=await repo.json_value("customer_app_settings", APP_SETTINGS),
            app_url_playstore=await repo.active_value("app_url_playstore", LANDING_LINKS),
            app_url_appstore=await repo.active_value("app_url_appstore", LANDING_LINKS),
            web_url=await repo.active_value("web_url", LANDING_LINKS),
            google_social_login=await repo.flag("google_social_login", SOCIAL_LOGIN),
            facebook_social_login=await repo.flag("facebook_social_login", SOCIAL_LOGIN),
            phone_number_visibility_for_chatting=await repo.flag(
                "phone_number_visibility_for_chatting", BUSINESS_INFORMATION
            ),
            wallet_status=await repo.flag("customer_wallet", CUSTOMER_CONFIG),
            loyalty_point_status=await repo.flag("customer_loyalty_point", CUSTOMER_CONFIG),
            referral_earning_status=await repo.flag("customer_referral_earning", CUSTOMER_CONFIG),
        )

    async def build_pages(self) -> PagesData:
        """All page settings as stored, active or not."""
        pages = {}
        for key in PAGES:
            setting = await self.settings_repo.get(key, PAGES_SETUP)
            pages[key] = BusinessSettingRead.model_validate(setting) if setting else None
        return PagesData(**pages)
