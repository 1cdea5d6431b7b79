"""Business setting schemas."""
import uuid
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class BusinessSettingRead(BaseModel):
    """Stored setting record as exposed to clients (test values omitted)."""
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    key_name: str
    settings_type: str
    live_values: Optional[Any] = None
    mode: str = "live"
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
