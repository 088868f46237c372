"""Pipeline orchestrator - runs the model graph and rebuilds the marts."""
import argparse
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from app.config import get_settings
from app.database import SessionLocal
from app.models import PipelineRun
from app.pipeline.graph import run_models
from app.pipeline.materialize import materialize
from app.pipeline.project import build_graph
from app.pipeline.sources import extract_sources

logger = logging.getLogger(__name__)


def run_pipeline(db: Session, select: Optional[str] = None) -> PipelineRun:
    """Run every model (or ``select`` and its ancestors) and replace the marts.

    The run is recorded in ``pipeline_runs``. Mart writes share one
    transaction; on failure they are rolled back, the run is marked failed and
    the exception is re-raised.
    """
    settings = get_settings()
    graph = build_graph()
    # Scheduling errors surface before anything is written
    order = graph.order(select)

    run = PipelineRun(pipeline_name=settings.pipeline_name, selected_model=select, status="running")
    db.add(run)
    db.commit()

    try:
        source_names = [m.name for m in order if m.materialized == "source"]
        sources = extract_sources(db, source_names)
        relations = run_models(graph, sources, select=select)

        written = 0
        for model in order:
            if model.materialized == "table":
                written += materialize(db, model.name, relations[model.name])

        run.status = "success"
        run.records_processed = sum(len(rows) for rows in sources.values())
        run.records_created = written
        run.metadata_ = {name: len(rows) for name, rows in relations.items()}
        run.completed_at = datetime.now(timezone.utc)
        db.commit()
    except Exception as e:
        db.rollback()
        run.status = "failed"
        run.error_message = str(e)
        run.completed_at = datetime.now(timezone.utc)
        db.commit()
        raise

    logger.info(f"Run {run.id} complete: {run.records_processed} rows read, {run.records_created} rows written")
    return run


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Rebuild the blood-test analytics marts.")
    parser.add_argument("--select", help="run only this model and its upstream models")
    parser.add_argument("--seed", action="store_true", help="load reference biomarker types first")
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(message)s")

    print("=" * 70)
    print("  Blood Test Analytics Pipeline")
    print("=" * 70)

    db = SessionLocal()
    try:
        if args.seed:
            from app.seed.run_seed import seed_biomarker_types
            seed_biomarker_types(db)
        run = run_pipeline(db, select=args.select)
    except Exception:
        logger.exception("Pipeline failed")
        return 1
    finally:
        db.close()

    print("\n" + "=" * 70)
    print(f"  Pipeline Complete! ({run.records_created} mart rows)")
    print("=" * 70)
    return 0


if __name__ == "__main__":
    sys.exit(main())
