"""Pydantic schemas for API request/response validation."""
from customer_api.schemas.configuration import ConfigurationData, PagesData
from customer_api.schemas.envelope import Envelope, FieldError
from customer_api.schemas.location import LocationInfo
from customer_api.schemas.setting import BusinessSettingRead
from customer_api.schemas.user import AdminSummary
from customer_api.schemas.zone import ZoneRead

__all__ = [
    "AdminSummary",
    "BusinessSettingRead",
    "ConfigurationData",
    "Envelope",
    "FieldError",
    "LocationInfo",
    "PagesData",
    "ZoneRead",
]
