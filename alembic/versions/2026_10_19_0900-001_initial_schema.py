"""Initial schema: daily metrics, readiness scores, engine settings

Revision ID: 001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create daily_metrics, readiness_scores and engine_settings tables."""
    op.create_table('daily_metrics', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('hrv', sa.Float(), nullable=True),
        sa.Column('resting_heart_rate', sa.Float(), nullable=True),
        sa.Column('sleep_hours', sa.Float(), nullable=True),
        sa.Column('sleep_quality', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_daily_metrics_date'), 'daily_metrics', ['date'], unique=True)

    op.create_table('readiness_scores', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('score', sa.Float(), nullable=False, server_default='0'),
        sa.Column('category', sqlmodel.sql.sqltypes.AutoString(length=16), nullable=False,
                  server_default='unknown'),
        sa.Column('hrv_baseline', sa.Float(), nullable=False, server_default='0'),
        sa.Column('hrv_deviation_percent', sa.Float(), nullable=False, server_default='0'),
        sa.Column('rhr_baseline', sa.Float(), nullable=False, server_default='0'),
        sa.Column('rhr_adjustment', sa.Float(), nullable=False, server_default='0'),
        sa.Column('sleep_baseline', sa.Float(), nullable=False, server_default='0'),
        sa.Column('sleep_adjustment', sa.Float(), nullable=False, server_default='0'),
        sa.Column('baseline_period_days', sa.Integer(), nullable=False, server_default='7'),
        sa.Column('minimum_days_for_baseline', sa.Integer(), nullable=False, server_default='2'),
        sa.Column('calculation_timestamp', sa.DateTime(), nullable=False,
                  server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_readiness_scores_date'), 'readiness_scores', ['date'], unique=True)

    op.create_table('engine_settings', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('baseline_period_days', sa.Integer(), nullable=False, server_default='7'),
        sa.Column('minimum_days_for_baseline', sa.Integer(), nullable=False, server_default='2'),
        sa.Column('use_rhr_adjustment', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('use_sleep_adjustment', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('retention_days', sa.Integer(), nullable=False, server_default='365'),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table('engine_settings')
    op.drop_index(op.f('ix_readiness_scores_date'), table_name='readiness_scores')
    op.drop_table('readiness_scores')
    op.drop_index(op.f('ix_daily_metrics_date'), table_name='daily_metrics')
    op.drop_table('daily_metrics')
