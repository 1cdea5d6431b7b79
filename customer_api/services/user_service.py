"""Lookups against the user store."""
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from customer_api.models.user import User
from customer_api.schemas.user import AdminSummary


class UserService:
    """Read-only user store."""

    def __init__(self, session: AsyncSession, admin_user_type: str = "super-admin"):
        self.session = session
        self.admin_user_type = admin_user_type

    async def find_first_admin(self) -> Optional[AdminSummary]:
        """Public summary of the earliest administrator account, if any."""
        result = await self.session.execute(
            select(User.id, User.first_name, User.last_name, User.profile_image)
            .where(User.user_type == self.admin_user_type)
            .order_by(User.created_at)
            .limit(1)
        )
        row = result.first()
        if row is None:
            return None
        return AdminSummary.model_validate(row)
