"""create farms and crops tables

Revision ID: 002_create_farms_and_crops
Revises: 001_create_carbon_assessments
Create Date: 2026-10-18
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = '002_create_farms_and_crops'
down_revision: Union[str, Sequence[str], None] = '001_create_carbon_assessments'
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'farms',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('location', sa.String(), nullable=False),
        sa.Column('area_hectares', sa.Float(), nullable=False),
        sa.Column('latitude', sa.Float(), nullable=True),
        sa.Column('longitude', sa.Float(), nullable=True),
        sa.Column('soil_type', sa.String(), nullable=True),
        sa.Column('irrigation_type', sa.String(), nullable=True),
        sa.Column('status', sa.String(), nullable=True),
        sa.Column('health_score', sa.Integer(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_farms_user_id', 'farms', ['user_id'])
    op.create_index('ix_farms_location', 'farms', ['location'])
    op.create_index('ix_farms_status', 'farms', ['status'])
    op.create_index('ix_farms_created_at', 'farms', ['created_at'])

    op.create_table(
        'crops',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('farm_id', sa.String(length=36), sa.ForeignKey('farms.id'), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('name', sa.String(length=50), nullable=False),
        sa.Column('variety', sa.String(length=50), nullable=True),
        sa.Column('sowing_date', sa.Date(), nullable=False),
        sa.Column('expected_harvest_date', sa.Date(), nullable=False),
        sa.Column('actual_harvest_date', sa.Date(), nullable=True),
        sa.Column('area_hectares', sa.Float(), nullable=False),
        sa.Column('status', sa.String(), nullable=True),
        sa.Column('health_status', sa.String(), nullable=True),
        sa.Column('estimated_yield', sa.Float(), nullable=True),
        sa.Column('actual_yield', sa.Float(), nullable=True),
        sa.Column('yield_unit', sa.String(), nullable=True),
        sa.Column('seed_cost', sa.Float(), nullable=True),
        sa.Column('fertilizer_cost', sa.Float(), nullable=True),
        sa.Column('pesticide_cost', sa.Float(), nullable=True),
        sa.Column('disease_incidents', sa.Integer(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_crops_farm_id', 'crops', ['farm_id'])
    op.create_index('ix_crops_user_id', 'crops', ['user_id'])
    op.create_index('ix_crops_status', 'crops', ['status'])


def downgrade() -> None:
    op.drop_index('ix_crops_status', table_name='crops')
    op.drop_index('ix_crops_user_id', table_name='crops')
    op.drop_index('ix_crops_farm_id', table_name='crops')
    op.drop_table('crops')
    op.drop_index('ix_farms_created_at', table_name='farms')
    op.drop_index('ix_farms_status', table_name='farms')
    op.drop_index('ix_farms_location', table_name='farms')
    op.drop_index('ix_farms_user_id', table_name='farms')
    op.drop_table('farms')
