"""
End-to-end tests: raw store -> run_pipeline -> mart tables.
"""
from datetime import date, datetime
from decimal import Decimal

import pytest
from sqlalchemy import select, func

from app.models import (
    PipelineRun, mart_biomarker_trends, mart_biomarker_statistics, mart_user_health_summary,
    User, BiomarkerType,
)
from app.pipeline import orchestrator
from app.pipeline.orchestrator import run_pipeline
from app.pipeline.graph import UnknownModelError


@pytest.fixture
def populated(db, raw):
    ana = raw.user("ana@example.com", first_name="Ana")
    bo = raw.user("bo@example.com", first_name="Bo", deleted_at=datetime(2024, 1, 1))

    hgb = raw.biomarker_type("Hemoglobin", loinc_code="718-7")
    hiv = raw.biomarker_type("HIV Screen", category="Serology")

    t1 = raw.blood_test(ana, date(2023, 1, 1))
    t2 = raw.blood_test(ana, date(2023, 6, 1))
    t3 = raw.blood_test(ana, date(2023, 12, 1))
    pending = raw.blood_test(ana, date(2024, 2, 1), status="pending")
    deleted = raw.blood_test(ana, date(2024, 3, 1), deleted_at=datetime(2024, 3, 2))
    bo_test = raw.blood_test(bo, date(2023, 5, 1))

    raw.result(t1, hgb, value_numeric=Decimal("10"), flag="H")
    raw.result(t2, hgb, value_numeric=Decimal("12"), flag="Abnormal")
    raw.result(t3, hgb, value_numeric=Decimal("9"), flag="L")
    raw.result(t3, hiv, value_text="Negative", unit=None)
    raw.result(pending, hgb, value_numeric=Decimal("20"), flag="H")
    raw.result(deleted, hgb, value_numeric=Decimal("30"), flag="H")
    raw.result(bo_test, hgb, value_numeric=Decimal("15"))
    db.commit()
    return {"ana": ana, "bo": bo, "hgb": hgb, "hiv": hiv}


def _rows(db, table, *order_by):
    return [dict(r) for r in db.execute(select(table).order_by(*order_by)).mappings()]


def test_full_run_builds_all_marts(db, populated):
    run = run_pipeline(db)

    assert run.status == "success"
    assert run.records_created == 3 + 1 + 1
    assert run.metadata_["int_biomarker_results"] == 4

    trends = _rows(db, mart_biomarker_trends, mart_biomarker_trends.c.test_sequence)
    assert [t["test_sequence"] for t in trends] == [1, 2, 3]
    assert trends[0]["test_date"] == date(2023, 12, 1)
    assert trends[0]["previous_value"] == Decimal("12")
    assert trends[0]["change_from_previous"] == Decimal("-3")
    assert trends[2]["previous_value"] is None

    stats = _rows(db, mart_biomarker_statistics)
    assert len(stats) == 1
    assert stats[0]["measurement_count"] == 3
    assert stats[0]["avg_value"] == Decimal("10.333333")
    assert stats[0]["std_deviation"] == pytest.approx(1.5275, rel=1e-3)

    summary = _rows(db, mart_user_health_summary)
    assert len(summary) == 1
    assert summary[0]["user_id"] == populated["ana"].user_id
    assert summary[0]["total_tests"] == 3
    assert summary[0]["unique_biomarkers_tracked"] == 2
    assert summary[0]["abnormal_results_count"] == 2


def test_text_results_only_reach_summary(db, populated):
    run_pipeline(db)
    hiv_id = populated["hiv"].biomarker_type_id

    for table in (mart_biomarker_trends, mart_biomarker_statistics):
        count = db.execute(
            select(func.count()).select_from(table).where(table.c.biomarker_type_id == hiv_id)
        ).scalar()
        assert count == 0


def test_marts_reference_existing_rows(db, populated):
    run_pipeline(db)
    user_ids = set(db.execute(select(User.user_id)).scalars())
    type_ids = set(db.execute(select(BiomarkerType.biomarker_type_id)).scalars())

    for table in (mart_biomarker_trends, mart_biomarker_statistics):
        for row in _rows(db, table):
            assert row["user_id"] in user_ids
            assert row["biomarker_type_id"] in type_ids
    for row in _rows(db, mart_user_health_summary):
        assert row["user_id"] in user_ids


def test_rerun_is_idempotent(db, populated):
    run_pipeline(db)
    first = [_rows(db, mart_biomarker_trends, mart_biomarker_trends.c.test_sequence),
             _rows(db, mart_biomarker_statistics),
             _rows(db, mart_user_health_summary)]

    run_pipeline(db)
    second = [_rows(db, mart_biomarker_trends, mart_biomarker_trends.c.test_sequence),
              _rows(db, mart_biomarker_statistics),
              _rows(db, mart_user_health_summary)]

    assert first == second
    assert db.execute(select(func.count()).select_from(PipelineRun)).scalar() == 2


def test_select_rebuilds_only_that_mart(db, populated):
    run = run_pipeline(db, select="mart_biomarker_trends")

    assert run.selected_model == "mart_biomarker_trends"
    assert run.records_created == 3
    assert _rows(db, mart_user_health_summary) == []


def test_empty_store_produces_empty_marts(db):
    run = run_pipeline(db)

    assert run.status == "success"
    assert run.records_created == 0
    assert _rows(db, mart_user_health_summary) == []


def test_unknown_select_fails_before_recording_a_run(db):
    with pytest.raises(UnknownModelError):
        run_pipeline(db, select="mart_nope")

    assert db.execute(select(func.count()).select_from(PipelineRun)).scalar() == 0


def test_failed_run_rolls_back_partially_rewritten_marts(db, populated, monkeypatch):
    run_pipeline(db)
    before = [_rows(db, mart_biomarker_trends, mart_biomarker_trends.c.test_sequence),
              _rows(db, mart_biomarker_statistics),
              _rows(db, mart_user_health_summary)]

    # With Ana deleted the next run would empty every mart
    populated["ana"].deleted_at = datetime(2024, 6, 1)
    db.commit()

    real_materialize = orchestrator.materialize
    calls = []

    def fails_on_third_mart(db, name, rows):
        calls.append(name)
        if len(calls) == 3:
            raise RuntimeError("disk full")
        return real_materialize(db, name, rows)

    monkeypatch.setattr(orchestrator, "materialize", fails_on_third_mart)
    with pytest.raises(RuntimeError):
        run_pipeline(db)

    assert len(calls) == 3
    after = [_rows(db, mart_biomarker_trends, mart_biomarker_trends.c.test_sequence),
             _rows(db, mart_biomarker_statistics),
             _rows(db, mart_user_health_summary)]
    assert after == before
    assert all(after)

    failed = db.execute(select(PipelineRun).order_by(PipelineRun.id.desc())).scalars().first()
    assert failed.status == "failed"
    assert failed.error_message == "disk full"
    assert failed.completed_at is not None


def test_main_returns_nonzero_on_failure(monkeypatch):
    def broken(db, select=None):
        raise RuntimeError("boom")

    monkeypatch.setattr(orchestrator, "run_pipeline", broken)

    assert orchestrator.main([]) == 1
