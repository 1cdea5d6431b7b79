"""Zone model for delivery/service areas."""
import uuid
from datetime import datetime
from typing import Any, Optional

import sqlalchemy as sa
from sqlalchemy import String, DateTime, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column
from geoalchemy2 import Geometry
from geoalchemy2.shape import to_shape, from_shape
from shapely.geometry import Polygon, mapping

from customer_api.database import Base


class Zone(Base):
    """
    Zone model representing a service area.

    The boundary is stored in a PostGIS polygon column (SRID 4326, x=lng,
    y=lat) so containment checks run in the database with ST_Contains.
    """
    __tablename__ = "zones"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        nullable=False
    )
    name: Mapped[str] = mapped_column(
        String(191),
        nullable=False,
        unique=True
    )
    coordinates: Mapped[Optional[Any]] = mapped_column(
        Geometry(geometry_type='POLYGON', srid=4326, spatial_index=True),
        nullable=True
    )
    is_active: Mapped[bool] = mapped_column(
        sa.Boolean,
        nullable=False,
        default=True,
        server_default='true'
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        index=True
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        onupdate=func.now(),
        nullable=True
    )

    def set_boundary(self, points: list[tuple[float, float]]) -> None:
        """
        Set the zone boundary from (latitude, longitude) pairs.

        Args:
            points: Boundary vertices as (lat, lng); the ring is closed
                automatically.
        """
        polygon = Polygon([(lng, lat) for lat, lng in points])
        self.coordinates = from_shape(polygon, srid=4326)

    @property
    def geojson(self) -> Optional[dict]:
        """Boundary as a GeoJSON mapping, or None when not set."""
        if self.coordinates is None:
            return None
        return mapping(to_shape(self.coordinates))

    def __repr__(self) -> str:
        return f"<Zone(id={self.id}, name={self.name}, is_active={self.is_active})>"
