"""create carbon assessments table

Revision ID: 001_create_carbon_assessments
Revises:
Create Date: 2026-10-18
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = '001_create_carbon_assessments'
down_revision: Union[str, Sequence[str], None] = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'carbon_assessments',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('farm_id', sa.String(), nullable=True),
        sa.Column('area_hectares', sa.Float(), nullable=False),
        sa.Column('usage', sa.Text(), nullable=False),
        sa.Column('baseline_footprint', sa.Float(), nullable=False),
        sa.Column('ecofriendly_footprint', sa.Float(), nullable=False),
        sa.Column('reduction_percent', sa.Integer(), nullable=False),
        sa.Column('sustainability_score', sa.Integer(), nullable=False),
        sa.Column('credit_tons', sa.Float(), nullable=False),
        sa.Column('credit_value', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )

    op.create_index('ix_carbon_assessments_user_id', 'carbon_assessments', ['user_id'])
    op.create_index('ix_carbon_assessments_farm_id', 'carbon_assessments', ['farm_id'])
    op.create_index('ix_carbon_assessments_created_at', 'carbon_assessments', ['created_at'])


def downgrade() -> None:
    op.drop_index('ix_carbon_assessments_created_at', table_name='carbon_assessments')
    op.drop_index('ix_carbon_assessments_farm_id', table_name='carbon_assessments')
    op.drop_index('ix_carbon_assessments_user_id', table_name='carbon_assessments')
    op.drop_table('carbon_assessments')
