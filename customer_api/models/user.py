"""User model (read-only projection source for admin details)."""
import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import String, Boolean, DateTime, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from customer_api.database import Base


class User(Base):
    """
    User account.

    Only the public profile of the first administrator is ever read by this
    service; accounts are managed elsewhere.
    """
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        nullable=False
    )
    first_name: Mapped[Optional[str]] = mapped_column(
        String(191),
        nullable=True
    )
    last_name: Mapped[Optional[str]] = mapped_column(
        String(191),
        nullable=True
    )
    email: Mapped[Optional[str]] = mapped_column(
        String(191),
        unique=True,
        index=True,
        nullable=True
    )
    phone: Mapped[Optional[str]] = mapped_column(
        String(25),
        nullable=True
    )
    profile_image: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True
    )
    user_type: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        index=True,
        comment="e.g. super-admin, admin-employee, customer"
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        nullable=False
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
        return f"<User(id={self.id}, user_type={self.user_type})>"
