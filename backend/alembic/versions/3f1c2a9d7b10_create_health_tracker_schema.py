"""create_health_tracker_schema

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-12 09:00:00.000000
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import ARRAY


revision: str = '3f1c2a9d7b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # --- users ---
    op.create_table('users',
        sa.Column('user_id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('first_name', sa.String(100)),
        sa.Column('last_name', sa.String(100)),
        sa.Column('date_of_birth', sa.Date),
        sa.Column('gender', sa.String(20)),
        sa.Column('created_at', sa.DateTime, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime, server_default=sa.func.now()),
        sa.Column('deleted_at', sa.DateTime, nullable=True),
        sa.CheckConstraint(
            "gender IS NULL OR gender IN ('Male', 'Female', 'Other', 'Prefer not to say')",
            name='ck_users_gender'),
    )
    op.create_index('idx_users_email', 'users', ['email'])
    op.create_index('idx_users_active', 'users', ['user_id'],
                    postgresql_where=sa.text('deleted_at IS NULL'))

    # --- blood_tests ---
    op.create_table('blood_tests',
        sa.Column('test_id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer, sa.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False),
        sa.Column('test_date', sa.Date, nullable=False),
        sa.Column('lab_name', sa.String(200)),
        sa.Column('uploaded_at', sa.DateTime, server_default=sa.func.now()),
        sa.Column('pdf_filename', sa.String(255)),
        sa.Column('pdf_storage_path', sa.String(500)),
        sa.Column('raw_text', sa.Text),
        sa.Column('status', sa.String(20), server_default='processed'),
        sa.Column('created_at', sa.DateTime, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime, server_default=sa.func.now()),
        sa.Column('deleted_at', sa.DateTime, nullable=True),
        sa.CheckConstraint("status IN ('pending', 'processed', 'failed', 'archived')",
                           name='ck_blood_tests_status'),
    )
    op.create_index('idx_blood_tests_user_date', 'blood_tests', ['user_id', sa.text('test_date DESC')],
                    postgresql_where=sa.text('deleted_at IS NULL'))
    op.create_index('idx_blood_tests_uploaded', 'blood_tests', [sa.text('uploaded_at DESC')])

    # --- biomarker_types (LOINC reference) ---
    op.create_table('biomarker_types',
        sa.Column('biomarker_type_id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('loinc_code', sa.String(10), unique=True),
        sa.Column('loinc_long_name', sa.String(255)),
        sa.Column('display_name', sa.String(100), nullable=False),
        sa.Column('category', sa.String(100)),
        sa.Column('typical_unit', sa.String(20)),
        sa.Column('common_aliases', ARRAY(sa.String)),
        sa.Column('description', sa.Text),
        sa.Column('created_at', sa.DateTime, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime, server_default=sa.func.now()),
    )
    op.create_index('idx_biomarker_types_loinc', 'biomarker_types', ['loinc_code'])
    op.create_index('idx_biomarker_types_category', 'biomarker_types', ['category'])
    op.create_index('idx_biomarker_types_aliases', 'biomarker_types', ['common_aliases'],
                    postgresql_using='gin')

    # --- biomarkers (results) ---
    op.create_table('biomarkers',
        sa.Column('biomarker_id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('test_id', sa.Integer, sa.ForeignKey('blood_tests.test_id', ondelete='CASCADE'), nullable=False),
        sa.Column('biomarker_type_id', sa.Integer,
                  sa.ForeignKey('biomarker_types.biomarker_type_id'), nullable=False),
        sa.Column('value_numeric', sa.Numeric(10, 2)),
        sa.Column('value_operator', sa.String(2)),
        sa.Column('value_text', sa.String(100)),
        sa.Column('unit', sa.String(20)),
        sa.Column('flag', sa.String(20)),
        sa.Column('created_at', sa.DateTime, server_default=sa.func.now()),
        sa.CheckConstraint("value_operator IS NULL OR value_operator IN ('<', '>', '<=', '>=')",
                           name='ck_biomarkers_value_operator'),
        sa.CheckConstraint("flag IS NULL OR flag IN ('Low', 'High', 'Normal', 'Abnormal', 'H', 'L')",
                           name='ck_biomarkers_flag'),
        sa.CheckConstraint('value_numeric IS NOT NULL OR value_text IS NOT NULL', name='value_check'),
    )
    op.create_index('idx_biomarkers_timeseries', 'biomarkers', ['biomarker_type_id', 'test_id'])
    op.create_index('idx_biomarkers_test', 'biomarkers', ['test_id'])
    op.create_index('idx_biomarkers_user_type', 'biomarkers', ['test_id', 'biomarker_type_id'])

    # --- biomarker_mappings (written by the mapping service) ---
    op.create_table('biomarker_mappings',
        sa.Column('mapping_id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('raw_name', sa.String(200), nullable=False),
        sa.Column('biomarker_type_id', sa.Integer,
                  sa.ForeignKey('biomarker_types.biomarker_type_id'), nullable=False),
        sa.Column('loinc_code', sa.String(10)),
        sa.Column('confidence_score', sa.Numeric(3, 2)),
        sa.Column('user_verified', sa.Boolean, server_default=sa.text('false')),
        sa.Column('created_at', sa.DateTime, server_default=sa.func.now()),
        sa.CheckConstraint('confidence_score >= 0 AND confidence_score <= 1',
                           name='ck_biomarker_mappings_confidence'),
        sa.UniqueConstraint('raw_name', 'biomarker_type_id', name='uq_mapping_raw_name_type'),
    )
    op.create_index('idx_mappings_raw_name', 'biomarker_mappings', ['raw_name'])
    op.create_index('idx_mappings_unverified', 'biomarker_mappings', ['user_verified'],
                    postgresql_where=sa.text('user_verified = false'))

    # --- updated_at trigger ---
    op.execute("""
        CREATE OR REPLACE FUNCTION update_updated_at_column()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = CURRENT_TIMESTAMP;
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
    """)
    for table in ('users', 'blood_tests', 'biomarker_types'):
        op.execute(f"""
            CREATE TRIGGER update_{table}_updated_at BEFORE UPDATE ON {table}
            FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()
        """)

    # --- convenience views ---
    op.execute("""
        CREATE VIEW user_latest_tests AS
        SELECT DISTINCT ON (user_id)
            user_id, test_id, test_date, lab_name, uploaded_at
        FROM blood_tests
        WHERE deleted_at IS NULL
        ORDER BY user_id, test_date DESC
    """)
    op.execute("""
        CREATE VIEW biomarker_trends AS
        SELECT
            u.user_id, u.email,
            bt.test_id, bt.test_date, bt.lab_name,
            btype.biomarker_type_id, btype.loinc_code, btype.display_name, btype.category,
            b.value_numeric, b.value_operator, b.value_text, b.unit, b.flag
        FROM biomarkers b
        JOIN blood_tests bt ON b.test_id = bt.test_id
        JOIN users u ON bt.user_id = u.user_id
        JOIN biomarker_types btype ON b.biomarker_type_id = btype.biomarker_type_id
        WHERE bt.deleted_at IS NULL AND u.deleted_at IS NULL
    """)


def downgrade() -> None:
    op.execute('DROP VIEW IF EXISTS biomarker_trends')
    op.execute('DROP VIEW IF EXISTS user_latest_tests')
    for table in ('users', 'blood_tests', 'biomarker_types'):
        op.execute(f'DROP TRIGGER IF EXISTS update_{table}_updated_at ON {table}')
    op.execute('DROP FUNCTION IF EXISTS update_updated_at_column()')
    op.drop_table('biomarker_mappings')
    op.drop_table('biomarkers')
    op.drop_table('biomarker_types')
    op.drop_table('blood_tests')
    op.drop_table('users')
