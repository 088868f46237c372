"""Staging models: one cleaning pass per raw table.

Each transform returns one row per surviving input row with a fixed column
set. No joins, no aggregation. Each transform applies its own soft-delete and status
predicates; there is no shared notion of an "active" record.
"""
from decimal import Decimal
from typing import Optional

USER_COLUMNS = (
    "user_id", "email", "first_name", "last_name",
    "date_of_birth", "gender", "created_at", "updated_at",
)

BLOOD_TEST_COLUMNS = (
    "test_id", "user_id", "test_date", "lab_name",
    "uploaded_at", "pdf_filename", "status",
)

BIOMARKER_TYPE_COLUMNS = (
    "biomarker_type_id", "loinc_code", "loinc_long_name", "display_name",
    "category", "typical_unit", "common_aliases", "description",
)

BIOMARKER_COLUMNS = (
    "biomarker_id", "test_id", "biomarker_type_id", "value_display",
    "value_numeric", "value_operator", "value_text", "unit", "flag", "created_at",
)

PROCESSED = "processed"


def _select(row: dict, columns: tuple[str, ...]) -> dict:
    return {column: row.get(column) for column in columns}


def format_value_display(value_numeric, value_operator: Optional[str], value_text: Optional[str]) -> Optional[str]:
    """Render a result for display: '<5.00', '14.50', or the free-text value."""
    if value_numeric is not None:
        # DECIMAL(10,2) renders with two places, as the database would
        number = Decimal(str(value_numeric)).quantize(Decimal("0.01"))
        return f"{value_operator or ''}{number}"
    return value_text


def stg_users(users: list[dict]) -> list[dict]:
    return [_select(row, USER_COLUMNS) for row in users if row.get("deleted_at") is None]


def stg_blood_tests(blood_tests: list[dict]) -> list[dict]:
    """Only processed, non-deleted tests reach analytics."""
    return [
        _select(row, BLOOD_TEST_COLUMNS)
        for row in blood_tests
        if row.get("deleted_at") is None and row.get("status") == PROCESSED
    ]


def stg_biomarker_types(biomarker_types: list[dict]) -> list[dict]:
    return [_select(row, BIOMARKER_TYPE_COLUMNS) for row in biomarker_types]


def stg_biomarkers(biomarkers: list[dict]) -> list[dict]:
    staged = []
    for row in biomarkers:
        out = _select(row, BIOMARKER_COLUMNS)
        out["value_display"] = format_value_display(
            row.get("value_numeric"), row.get("value_operator"), row.get("value_text")
        )
        staged.append(out)
    return staged
