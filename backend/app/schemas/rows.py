"""Pydantic row schemas for the mart tables.

Field names match the mart table columns one to one so a row can be inserted
with ``row.model_dump()``.
"""
from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class TrendRow(BaseModel):
    user_id: int
    biomarker_type_id: int
    biomarker_name: str
    loinc_code: Optional[str] = None
    category: Optional[str] = None
    test_date: date
    value_numeric: Decimal
    unit: Optional[str] = None
    flag: Optional[str] = None
    result_status: str
    previous_value: Optional[Decimal] = None
    change_from_previous: Optional[Decimal] = None
    # 1 is the most recent test for this user and biomarker
    test_sequence: int = Field(ge=1)


class StatRow(BaseModel):
    user_id: int
    biomarker_type_id: int
    biomarker_name: str
    loinc_code: Optional[str] = None
    category: Optional[str] = None
    unit: Optional[str] = None
    measurement_count: int = Field(ge=1)
    min_value: Decimal
    max_value: Decimal
    avg_value: Decimal
    std_deviation: Optional[float] = None
    first_measurement_date: date
    latest_measurement_date: date


class HealthSummaryRow(BaseModel):
    user_id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: str
    total_tests: int
    latest_test_date: Optional[date] = None
    unique_biomarkers_tracked: int
    abnormal_results_count: int
