"""Zone lookup by point containment using PostGIS."""
import logging
from typing import Optional

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from customer_api.models.zone import Zone

logger = logging.getLogger(__name__)


def containing_zone_query(latitude: float, longitude: float) -> Select:
    """
    Select the newest active zone whose boundary contains the point.

    Overlapping zones are resolved by creation time only; the id ordering
    just makes equal timestamps deterministic.
    """
    point = func.ST_SetSRID(
        func.ST_MakePoint(longitude, latitude),
        4326  # WGS84, same SRID as the stored polygons
    )
    return (
        select(Zone)
        .where(
            Zone.is_active.is_(True),
            Zone.coordinates.isnot(None),
            func.ST_Contains(Zone.coordinates, point),
        )
        .order_by(Zone.created_at.desc(), Zone.id.desc())
        .limit(1)
    )


class ZoneService:
    """Read-only zone store."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_containing(self, latitude: float, longitude: float) -> Optional[Zone]:
        """
        Find the zone covering a point.

        Args:
            latitude: Point latitude in decimal degrees
            longitude: Point longitude in decimal degrees

        Returns:
            The most recently created active zone containing the point, or
            None when the point is outside every active zone.
        """
        result = await self.session.execute(containing_zone_query(latitude, longitude))
        zone = result.scalars().first()
        if zone is None:
            logger.info(f"No active zone contains point ({latitude}, {longitude})")
        return zone
