"""Mart models built from the enriched result stream.

The window and aggregate computations are done per partition: group, sort,
then scan once carrying the previous row.
"""
import statistics
from collections import defaultdict
from decimal import Decimal

from app.schemas.rows import TrendRow, StatRow, HealthSummaryRow

ABNORMAL_FLAGS = frozenset({"High", "H", "Low", "L"})
AVG_SCALE = Decimal("0.000001")


def _numeric(results: list[dict]) -> list[dict]:
    return [row for row in results if row.get("value_numeric") is not None]


def _chronological(row: dict) -> tuple:
    # Equal dates fall back to test_id, then biomarker_id, ascending
    return (row["test_date"], row["test_id"], row.get("biomarker_id") or 0)


def mart_biomarker_trends(results: list[dict]) -> list[TrendRow]:
    partitions: dict[tuple, list[dict]] = defaultdict(list)
    for row in _numeric(results):
        partitions[(row["user_id"], row["biomarker_type_id"])].append(row)

    trends = []
    for key in sorted(partitions):
        ordered = sorted(partitions[key], key=_chronological)
        total = len(ordered)
        previous = None
        for position, row in enumerate(ordered):
            value = row["value_numeric"]
            trends.append(TrendRow(
                user_id=row["user_id"],
                biomarker_type_id=row["biomarker_type_id"],
                biomarker_name=row["biomarker_name"],
                loinc_code=row.get("loinc_code"),
                category=row.get("category"),
                test_date=row["test_date"],
                value_numeric=value,
                unit=row.get("unit"),
                flag=row.get("flag"),
                result_status=row["result_status"],
                previous_value=previous,
                change_from_previous=None if previous is None else value - previous,
                test_sequence=total - position,
            ))
            previous = value
    return trends


def mart_biomarker_statistics(results: list[dict]) -> list[StatRow]:
    groups: dict[tuple, list[dict]] = {}
    for row in _numeric(results):
        key = (
            row["user_id"], row["biomarker_type_id"], row["biomarker_name"],
            row.get("loinc_code"), row.get("category"), row.get("unit"),
        )
        groups.setdefault(key, []).append(row)

    stats = []
    for key, rows in groups.items():
        if not rows:
            continue
        user_id, biomarker_type_id, biomarker_name, loinc_code, category, unit = key
        values = [row["value_numeric"] for row in rows]
        exact = [Decimal(str(v)) for v in values]
        floats = [float(v) for v in values]
        dates = [row["test_date"] for row in rows]
        stats.append(StatRow(
            user_id=user_id,
            biomarker_type_id=biomarker_type_id,
            biomarker_name=biomarker_name,
            loinc_code=loinc_code,
            category=category,
            unit=unit,
            measurement_count=len(rows),
            min_value=min(values),
            max_value=max(values),
            avg_value=statistics.mean(exact).quantize(AVG_SCALE),
            # Sample deviation (n - 1); undefined for a single measurement
            std_deviation=statistics.stdev(floats) if len(floats) > 1 else None,
            first_measurement_date=min(dates),
            latest_measurement_date=max(dates),
        ))
    # Stable sort keeps first-seen order inside a (user, type) pair
    stats.sort(key=lambda s: (s.user_id, s.biomarker_type_id))
    return stats


def mart_user_health_summary(results: list[dict]) -> list[HealthSummaryRow]:
    groups: dict[tuple, list[dict]] = {}
    for row in results:
        key = (row["user_id"], row.get("first_name"), row.get("last_name"), row.get("email"))
        groups.setdefault(key, []).append(row)

    summaries = []
    for (user_id, first_name, last_name, email), rows in groups.items():
        dates = [row["test_date"] for row in rows if row.get("test_date") is not None]
        summaries.append(HealthSummaryRow(
            user_id=user_id,
            first_name=first_name,
            last_name=last_name,
            email=email,
            total_tests=len({row["test_id"] for row in rows}),
            latest_test_date=max(dates) if dates else None,
            unique_biomarkers_tracked=len({row["biomarker_type_id"] for row in rows}),
            # Only High/Low flags count; a literal "Abnormal" does not
            abnormal_results_count=sum(1 for row in rows if row.get("flag") in ABNORMAL_FLAGS),
        ))
    summaries.sort(key=lambda s: s.user_id)
    return summaries
