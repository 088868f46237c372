"""Write table-materialized models to their mart tables."""
import logging

from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.models.marts import (
    mart_biomarker_trends, mart_biomarker_statistics, mart_user_health_summary,
)
from app.pipeline.graph import PipelineError

logger = logging.getLogger(__name__)

MART_TABLES = {
    "mart_biomarker_trends": mart_biomarker_trends,
    "mart_biomarker_statistics": mart_biomarker_statistics,
    "mart_user_health_summary": mart_user_health_summary,
}


def materialize(db: Session, name: str, rows: list) -> int:
    """Replace the contents of mart ``name`` with ``rows``.

    Does not commit: the caller owns the transaction, so a failed run leaves
    the previous mart contents in place.
    """
    table = MART_TABLES.get(name)
    if table is None:
        raise PipelineError(f"No mart table is bound to model '{name}'")

    records = [row.model_dump() if isinstance(row, BaseModel) else dict(row) for row in rows]

    db.execute(table.delete())
    if records:
        db.execute(table.insert(), records)
    logger.info(f"  Materialized {len(records)} rows into {table.name}")
    return len(records)
