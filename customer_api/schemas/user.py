"""User projection schemas."""
import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict


class AdminSummary(BaseModel):
    """Public-facing projection of the administrator account."""
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image: Optional[str] = None
