"""Seed the database with reference biomarker types."""
import logging

from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session

from app.database import SessionLocal, engine, Base
from app.models import BiomarkerType
from app.seed.data import BIOMARKER_TYPES

logger = logging.getLogger(__name__)


def seed_biomarker_types(db: Session) -> int:
    """Insert the reference types, skipping LOINC codes that already exist."""
    insert = sqlite_insert if db.get_bind().dialect.name == "sqlite" else pg_insert
    for bt in BIOMARKER_TYPES:
        stmt = insert(BiomarkerType).values(**bt).on_conflict_do_nothing(index_elements=["loinc_code"])
        db.execute(stmt)
    db.commit()
    logger.info(f"Seeded {len(BIOMARKER_TYPES)} biomarker types")
    return len(BIOMARKER_TYPES)


def seed_all():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_biomarker_types(db)
        print("Seeding complete!")
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    seed_all()
