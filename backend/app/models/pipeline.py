from sqlalchemy import Column, Integer, String, Text, DateTime, JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.sql import func
from app.database import Base


class PipelineRun(Base):
    __tablename__ = "pipeline_runs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    pipeline_name = Column(String(100), nullable=False)
    selected_model = Column(String(100))
    status = Column(String(20), nullable=False)
    started_at = Column(DateTime(timezone=True), server_default=func.now())
    completed_at = Column(DateTime(timezone=True))
    records_processed = Column(Integer, default=0)
    records_created = Column(Integer, default=0)
    error_message = Column(Text)
    # Row count per model, e.g. {"stg_users": 12, "mart_biomarker_trends": 340}
    metadata_ = Column("metadata", JSON().with_variant(JSONB(), "postgresql"))
