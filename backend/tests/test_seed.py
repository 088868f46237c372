"""
Reference data seeding and source extraction.
"""
from sqlalchemy import select, func

from app.models import BiomarkerType
from app.pipeline.sources import extract_sources
from app.seed.data import BIOMARKER_TYPES
from app.seed.run_seed import seed_biomarker_types


def test_seed_loads_loinc_reference_types(db):
    seed_biomarker_types(db)

    count = db.execute(select(func.count()).select_from(BiomarkerType)).scalar()
    assert count == len(BIOMARKER_TYPES) == 19

    hgb = db.execute(select(BiomarkerType).where(BiomarkerType.loinc_code == "718-7")).scalar_one()
    assert hgb.display_name == "Hemoglobin"
    assert "HGB" in hgb.common_aliases


def test_seed_is_idempotent(db):
    seed_biomarker_types(db)
    seed_biomarker_types(db)

    count = db.execute(select(func.count()).select_from(BiomarkerType)).scalar()
    assert count == 19


def test_extract_sources_orders_by_primary_key(db):
    seed_biomarker_types(db)
    sources = extract_sources(db, ["biomarker_types", "users"])

    ids = [row["biomarker_type_id"] for row in sources["biomarker_types"]]
    assert ids == sorted(ids)
    assert sources["users"] == []
    assert set(sources) == {"biomarker_types", "users"}
