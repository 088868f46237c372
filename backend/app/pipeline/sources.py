"""Read raw tables into in-memory relations."""
import logging
from typing import Iterable, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models import User, BloodTest, BiomarkerType, Biomarker, BiomarkerMapping

logger = logging.getLogger(__name__)

# biomarker_mappings is loaded only on request; no model reads it yet
SOURCE_TABLES = {
    "users": User.__table__,
    "blood_tests": BloodTest.__table__,
    "biomarker_types": BiomarkerType.__table__,
    "biomarkers": Biomarker.__table__,
    "biomarker_mappings": BiomarkerMapping.__table__,
}


def extract_source(db: Session, name: str) -> list[dict]:
    table = SOURCE_TABLES[name]
    stmt = select(table).order_by(*table.primary_key.columns)
    return [dict(row) for row in db.execute(stmt).mappings()]


def extract_sources(db: Session, names: Optional[Iterable[str]] = None) -> dict[str, list[dict]]:
    """One relation per raw table, rows in primary-key order."""
    if names is None:
        names = SOURCE_TABLES
    sources = {}
    for name in names:
        sources[name] = extract_source(db, name)
        logger.info(f"  source {name}: {len(sources[name])} rows")
    return sources
