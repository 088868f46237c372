"""add_mart_and_pipeline_run_tables

Revision ID: 8e4b6d0c5a21
Revises: 3f1c2a9d7b10
Create Date: 2026-10-14 16:30:00.000000
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB


revision: str = '8e4b6d0c5a21'
down_revision: Union[str, None] = '3f1c2a9d7b10'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # --- pipeline_runs ---
    op.create_table('pipeline_runs',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('pipeline_name', sa.String(100), nullable=False),
        sa.Column('selected_model', sa.String(100)),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('started_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('completed_at', sa.DateTime(timezone=True)),
        sa.Column('records_processed', sa.Integer),
        sa.Column('records_created', sa.Integer),
        sa.Column('error_message', sa.Text),
        sa.Column('metadata', JSONB),
    )

    # --- mart_biomarker_trends ---
    op.create_table('mart_biomarker_trends',
        sa.Column('user_id', sa.Integer, nullable=False),
        sa.Column('biomarker_type_id', sa.Integer, nullable=False),
        sa.Column('biomarker_name', sa.String(100), nullable=False),
        sa.Column('loinc_code', sa.String(10)),
        sa.Column('category', sa.String(100)),
        sa.Column('test_date', sa.Date, nullable=False),
        sa.Column('value_numeric', sa.Numeric(10, 2), nullable=False),
        sa.Column('unit', sa.String(20)),
        sa.Column('flag', sa.String(20)),
        sa.Column('result_status', sa.String(20), nullable=False),
        sa.Column('previous_value', sa.Numeric(10, 2)),
        sa.Column('change_from_previous', sa.Numeric(11, 2)),
        sa.Column('test_sequence', sa.Integer, nullable=False),
        sa.PrimaryKeyConstraint('user_id', 'biomarker_type_id', 'test_sequence',
                                name='pk_mart_biomarker_trends'),
    )

    # --- mart_biomarker_statistics ---
    op.create_table('mart_biomarker_statistics',
        sa.Column('user_id', sa.Integer, nullable=False),
        sa.Column('biomarker_type_id', sa.Integer, nullable=False),
        sa.Column('biomarker_name', sa.String(100), nullable=False),
        sa.Column('loinc_code', sa.String(10)),
        sa.Column('category', sa.String(100)),
        sa.Column('unit', sa.String(20)),
        sa.Column('measurement_count', sa.Integer, nullable=False),
        sa.Column('min_value', sa.Numeric(10, 2)),
        sa.Column('max_value', sa.Numeric(10, 2)),
        sa.Column('avg_value', sa.Numeric(16, 6)),
        sa.Column('std_deviation', sa.Float),
        sa.Column('first_measurement_date', sa.Date),
        sa.Column('latest_measurement_date', sa.Date),
    )
    op.create_index('ix_mart_biomarker_statistics_user_type', 'mart_biomarker_statistics',
                    ['user_id', 'biomarker_type_id'])

    # --- mart_user_health_summary ---
    op.create_table('mart_user_health_summary',
        sa.Column('user_id', sa.Integer, primary_key=True, autoincrement=False),
        sa.Column('first_name', sa.String(100)),
        sa.Column('last_name', sa.String(100)),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('total_tests', sa.Integer, nullable=False),
        sa.Column('latest_test_date', sa.Date),
        sa.Column('unique_biomarkers_tracked', sa.Integer, nullable=False),
        sa.Column('abnormal_results_count', sa.Integer, nullable=False),
    )


def downgrade() -> None:
    op.drop_table('mart_user_health_summary')
    op.drop_index('ix_mart_biomarker_statistics_user_type', table_name='mart_biomarker_statistics')
    op.drop_table('mart_biomarker_statistics')
    op.drop_table('mart_biomarker_trends')
    op.drop_table('pipeline_runs')
