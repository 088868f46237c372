"""Mart tables, rebuilt in full on every pipeline run.

Plain Core tables with exactly the mart columns. Statistics groups are keyed
on nullable columns, so that table has no primary key.
"""
from sqlalchemy import Table, Column, Integer, String, Date, Numeric, Float, Index, PrimaryKeyConstraint
from app.database import Base


mart_biomarker_trends = Table(
    "mart_biomarker_trends",
    Base.metadata,
    Column("user_id", Integer, nullable=False),
    Column("biomarker_type_id", Integer, nullable=False),
    Column("biomarker_name", String(100), nullable=False),
    Column("loinc_code", String(10)),
    Column("category", String(100)),
    Column("test_date", Date, nullable=False),
    Column("value_numeric", Numeric(10, 2), nullable=False),
    Column("unit", String(20)),
    Column("flag", String(20)),
    Column("result_status", String(20), nullable=False),
    Column("previous_value", Numeric(10, 2)),
    Column("change_from_previous", Numeric(11, 2)),
    Column("test_sequence", Integer, nullable=False),
    PrimaryKeyConstraint("user_id", "biomarker_type_id", "test_sequence",
                         name="pk_mart_biomarker_trends"),
)

mart_biomarker_statistics = Table(
    "mart_biomarker_statistics",
    Base.metadata,
    Column("user_id", Integer, nullable=False),
    Column("biomarker_type_id", Integer, nullable=False),
    Column("biomarker_name", String(100), nullable=False),
    Column("loinc_code", String(10)),
    Column("category", String(100)),
    Column("unit", String(20)),
    Column("measurement_count", Integer, nullable=False),
    Column("min_value", Numeric(10, 2)),
    Column("max_value", Numeric(10, 2)),
    Column("avg_value", Numeric(16, 6)),
    Column("std_deviation", Float),
    Column("first_measurement_date", Date),
    Column("latest_measurement_date", Date),
    Index("ix_mart_biomarker_statistics_user_type", "user_id", "biomarker_type_id"),
)

mart_user_health_summary = Table(
    "mart_user_health_summary",
    Base.metadata,
    Column("user_id", Integer, primary_key=True, autoincrement=False),
    Column("first_name", String(100)),
    Column("last_name", String(100)),
    Column("email", String(255), nullable=False),
    Column("total_tests", Integer, nullable=False),
    Column("latest_test_date", Date),
    Column("unique_biomarkers_tracked", Integer, nullable=False),
    Column("abnormal_results_count", Integer, nullable=False),
)
