"""
Pytest configuration and fixtures.

Points the app at in-memory SQLite before any app module is imported, and
provides a session on a fresh schema plus a small raw-store factory.
"""
import os
from datetime import date

os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base
from app.models import User, BloodTest, BiomarkerType, Biomarker


@pytest.fixture
def db():
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


class RawStore:
    """Inserts raw rows the way the ingestion service would."""

    def __init__(self, db):
        self.db = db

    def _add(self, obj):
        self.db.add(obj)
        self.db.flush()
        return obj

    def user(self, email, first_name="Test", last_name="User", **kwargs):
        return self._add(User(email=email, password_hash="bcrypt$hash",
                              first_name=first_name, last_name=last_name, **kwargs))

    def blood_test(self, user, test_date, status="processed", **kwargs):
        return self._add(BloodTest(user_id=user.user_id, test_date=test_date,
                                   status=status, lab_name="Quest", **kwargs))

    def biomarker_type(self, display_name, loinc_code=None, category="Complete Blood Count", **kwargs):
        return self._add(BiomarkerType(display_name=display_name, loinc_code=loinc_code,
                                       category=category, **kwargs))

    def result(self, blood_test, biomarker_type, value_numeric=None, value_text=None,
               unit="g/dL", flag=None, **kwargs):
        return self._add(Biomarker(test_id=blood_test.test_id,
                                   biomarker_type_id=biomarker_type.biomarker_type_id,
                                   value_numeric=value_numeric, value_text=value_text,
                                   unit=unit, flag=flag, **kwargs))


@pytest.fixture
def raw(db) -> RawStore:
    return RawStore(db)


@pytest.fixture
def enriched_row():
    """Build one intermediate-layer row with overridable fields."""
    def _make(**overrides):
        row = {
            "user_id": 1,
            "email": "ana@example.com",
            "first_name": "Ana",
            "last_name": "Lopez",
            "test_id": 1,
            "test_date": date(2023, 1, 1),
            "lab_name": "Quest",
            "biomarker_id": 1,
            "biomarker_type_id": 10,
            "loinc_code": "718-7",
            "biomarker_name": "Hemoglobin",
            "category": "Complete Blood Count",
            "value_numeric": 14,
            "value_operator": None,
            "value_text": None,
            "unit": "g/dL",
            "flag": None,
            "result_status": "Normal",
        }
        row.update(overrides)
        return row
    return _make
