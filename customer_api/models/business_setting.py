"""Business setting model for key/value application configuration."""
import uuid
from datetime import datetime
from typing import Any, Optional

from sqlalchemy import String, Boolean, DateTime, UniqueConstraint, func
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column

from customer_api.database import Base


class BusinessSetting(Base):
    """
    A named configuration value within a category.

    Settings are addressed by ``(key_name, settings_type)``. ``live_values``
    holds an untyped JSON payload: a string, number, boolean or object
    depending on the key. Callers decode it per key through
    ``SettingsRepository``.
    """
    __tablename__ = "business_settings"
    __table_args__ = (
        UniqueConstraint("key_name", "settings_type", name="uq_business_settings_key_type"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        nullable=False
    )
    key_name: Mapped[str] = mapped_column(
        String(191),
        nullable=False,
        index=True
    )
    settings_type: Mapped[str] = mapped_column(
        String(191),
        nullable=False,
        index=True,
        comment="Category, e.g. business_information or payment_config"
    )
    live_values: Mapped[Optional[Any]] = mapped_column(
        JSONB,
        nullable=True
    )
    test_values: Mapped[Optional[Any]] = mapped_column(
        JSONB,
        nullable=True
    )
    mode: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="live",
        server_default="live"
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default="true"
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        onupdate=func.now(),
        nullable=True
    )

    def __repr__(self) -> str:
        return f"<BusinessSetting(key_name={self.key_name}, settings_type={self.settings_type}, is_active={self.is_active})>"
