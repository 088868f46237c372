"""
Raw store constraints.
"""
from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError

from app.models import Biomarker, BiomarkerMapping, BiomarkerType, BloodTest, User


@pytest.fixture
def panel(raw):
    user = raw.user("ana@example.com")
    return raw.blood_test(user, date(2024, 1, 1)), raw.biomarker_type("Hemoglobin", loinc_code="718-7")


def _assert_rejected(db, obj):
    db.add(obj)
    with pytest.raises(IntegrityError):
        db.flush()
    db.rollback()


def test_result_needs_a_value(db, panel):
    test, btype = panel
    _assert_rejected(db, Biomarker(test_id=test.test_id, biomarker_type_id=btype.biomarker_type_id))


def test_value_operator_is_enumerated(db, panel):
    test, btype = panel
    _assert_rejected(db, Biomarker(test_id=test.test_id, biomarker_type_id=btype.biomarker_type_id,
                                   value_numeric=Decimal("5"), value_operator="!="))


def test_value_operator_may_be_null(db, panel):
    test, btype = panel
    db.add(Biomarker(test_id=test.test_id, biomarker_type_id=btype.biomarker_type_id,
                     value_numeric=Decimal("5"), value_operator=None))
    db.flush()


def test_flag_is_enumerated(db, panel):
    test, btype = panel
    _assert_rejected(db, Biomarker(test_id=test.test_id, biomarker_type_id=btype.biomarker_type_id,
                                   value_text="Positive", flag="Critical"))


def test_blood_test_status_is_enumerated(db, raw):
    user = raw.user("ana@example.com")
    _assert_rejected(db, BloodTest(user_id=user.user_id, test_date=date(2024, 1, 1), status="queued"))


def test_blood_test_defaults_to_processed(db, raw):
    user = raw.user("ana@example.com")
    test = BloodTest(user_id=user.user_id, test_date=date(2024, 1, 1))
    db.add(test)
    db.flush()

    assert test.status == "processed"


def test_email_is_unique(db, raw):
    raw.user("ana@example.com")
    _assert_rejected(db, User(email="ana@example.com", password_hash="x"))


def test_gender_is_enumerated(db):
    _assert_rejected(db, User(email="ana@example.com", password_hash="x", gender="Unknown"))


def test_mapping_confidence_range(db, panel):
    _, btype = panel
    _assert_rejected(db, BiomarkerMapping(raw_name="HGB", biomarker_type_id=btype.biomarker_type_id,
                                          confidence_score=Decimal("1.5")))


def test_mapping_raw_name_unique_per_type(db, panel):
    _, btype = panel
    db.add(BiomarkerMapping(raw_name="HGB", biomarker_type_id=btype.biomarker_type_id,
                            confidence_score=Decimal("0.95")))
    db.flush()

    _assert_rejected(db, BiomarkerMapping(raw_name="HGB", biomarker_type_id=btype.biomarker_type_id,
                                          confidence_score=Decimal("0.50")))


def test_new_mapping_is_unverified(db, panel):
    _, btype = panel
    mapping = BiomarkerMapping(raw_name="Hb", biomarker_type_id=btype.biomarker_type_id,
                               confidence_score=Decimal("0.80"))
    db.add(mapping)
    db.flush()

    assert mapping.user_verified is False


def test_result_needs_a_known_biomarker_type(db, panel):
    test, _ = panel
    _assert_rejected(db, Biomarker(test_id=test.test_id, biomarker_type_id=9999,
                                   value_numeric=Decimal("5")))


def test_deleting_a_user_cascades_to_tests_and_results(db, raw, panel):
    test, btype = panel
    raw.result(test, btype, value_numeric=Decimal("13.5"))
    user = db.get(User, test.user_id)
    db.commit()

    db.delete(user)
    db.commit()

    assert db.execute(select(func.count()).select_from(BloodTest)).scalar() == 0
    assert db.execute(select(func.count()).select_from(Biomarker)).scalar() == 0
    assert db.execute(select(func.count()).select_from(BiomarkerType)).scalar() == 1


def test_deleting_a_test_cascades_to_results(db, raw, panel):
    test, btype = panel
    raw.result(test, btype, value_numeric=Decimal("13.5"))
    raw.result(test, btype, value_text="Hemolyzed")
    db.commit()

    db.delete(test)
    db.commit()

    assert db.execute(select(func.count()).select_from(Biomarker)).scalar() == 0
    assert db.execute(select(func.count()).select_from(User)).scalar() == 1
