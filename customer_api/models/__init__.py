"""SQLAlchemy models for the application."""
from customer_api.models.user import User
from customer_api.models.business_setting import BusinessSetting
from customer_api.models.zone import Zone

__all__ = [
    "User",
    "BusinessSetting",
    "Zone",
]
