"""create_business_settings_zones_and_users

Revision ID: 3c5e7a9b1d20
Revises:
Create Date: 2026-10-19 10:12:41.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql
from geoalchemy2 import Geometry


# revision identifiers, used by Alembic.
revision: str = '3c5e7a9b1d20'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create settings, zones and users tables."""
    # Zone containment queries need PostGIS
    op.execute('CREATE EXTENSION IF NOT EXISTS postgis')

    op.create_table(
        'business_settings',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column('key_name', sa.String(191), nullable=False),
        sa.Column('settings_type', sa.String(191), nullable=False),
        sa.Column('live_values', postgresql.JSONB(), nullable=True),
        sa.Column('test_values', postgresql.JSONB(), nullable=True),
        sa.Column('mode', sa.String(20), nullable=False, server_default='live'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint('key_name', 'settings_type', name='uq_business_settings_key_type'),
    )
    op.create_index('ix_business_settings_key_name', 'business_settings', ['key_name'])
    op.create_index('ix_business_settings_settings_type', 'business_settings', ['settings_type'])

    op.create_table(
        'zones',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column('name', sa.String(191), nullable=False, unique=True),
        sa.Column(
            'coordinates',
            Geometry(geometry_type='POLYGON', srid=4326, spatial_index=False),
            nullable=True
        ),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('idx_zones_coordinates', 'zones', ['coordinates'], postgresql_using='gist')
    op.create_index('ix_zones_created_at', 'zones', ['created_at'])

    op.create_table(
        'users',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column('first_name', sa.String(191), nullable=True),
        sa.Column('last_name', sa.String(191), nullable=True),
        sa.Column('email', sa.String(191), nullable=True),
        sa.Column('phone', sa.String(25), nullable=True),
        sa.Column('profile_image', sa.String(255), nullable=True),
        sa.Column('user_type', sa.String(50), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_user_type', 'users', ['user_type'])


def downgrade() -> None:
    """Drop settings, zones and users tables."""
    op.drop_index('ix_users_user_type', 'users')
    op.drop_index('ix_users_email', 'users')
    op.drop_table('users')

    op.drop_index('ix_zones_created_at', 'zones')
    op.drop_index('idx_zones_coordinates', 'zones')
    op.drop_table('zones')

    op.drop_index('ix_business_settings_settings_type', 'business_settings')
    op.drop_index('ix_business_settings_key_name', 'business_settings')
    op.drop_table('business_settings')
