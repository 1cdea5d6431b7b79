"""Schemas for the aggregated customer configuration and pages payloads."""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from customer_api.schemas.location import LocationInfo
from customer_api.schemas.setting import BusinessSettingRead
from customer_api.schemas.user import AdminSummary


class DefaultPoint(BaseModel):
    lat: Optional[float] = None
    lon: Optional[float] = None


class DefaultLocation(BaseModel):
    default: DefaultPoint


class ConfigurationData(BaseModel):
    """Everything a customer app needs at start-up, in one flat object."""

    # Business identity
    business_name: Optional[Any] = None
    logo: Optional[Any] = None
    country_code: Optional[Any] = None
    business_address: Optional[Any] = None
    business_phone: Optional[Any] = None
    business_email: Optional[Any] = None
    base_url: str

    # Currency formatting
    currency_decimal_point: Optional[Any] = None
    currency_code: Optional[Any] = None
    currency_symbol_position: Optional[Any] = None

    # Legal pages
    about_us: str
    privacy_policy: str
    terms_and_conditions: str = ""
    refund_policy: str = ""
    cancellation_policy: str = ""

    # Caller location
    default_location: DefaultLocation
    user_location_info: Optional[LocationInfo] = None

    app_url_android: str = ""
    app_url_ios: str = ""

    # Verification
    sms_verification: Optional[Any] = None
    email_verification: Optional[Any] = None

    map_api_key: Optional[str] = None
    image_base_url: str
    pagination_limit: int = 20

    # Static enumerations
    languages: List[Dict[str, Any]] = Field(default_factory=list)
    currencies: List[Dict[str, Any]] = Field(default_factory=list)
    countries: List[Dict[str, Any]] = Field(default_factory=list)
    time_zones: List[str] = Field(default_factory=list)

    payment_gateways: List[str] = Field(default_factory=list)
    footer_text: Optional[Any] = None
    cookies_text: Optional[Any] = None
    admin_details: Optional[AdminSummary] = None
    min_versions: Optional[Any] = None

    # Landing links
    app_url_playstore: Optional[Any] = None
    app_url_appstore: Optional[Any] = None
    web_url: Optional[Any] = None

    # Feature toggles
    google_social_login: int = 0
    facebook_social_login: int = 0
    phone_number_visibility_for_chatting: int = 0
    wallet_status: int = 0
    loyalty_point_status: int = 0
    referral_earning_status: int = 0


class PagesData(BaseModel):
    """Stored page documents, returned verbatim regardless of activity."""
    about_us: Optional[BusinessSettingRead] = None
    terms_and_conditions: Optional[BusinessSettingRead] = None
    refund_policy: Optional[BusinessSettingRead] = None
    return_policy: Optional[BusinessSettingRead] = None
    cancellation_policy: Optional[BusinessSettingRead] = None
    privacy_policy: Optional[BusinessSettingRead] = None
