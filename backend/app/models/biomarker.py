from sqlalchemy import (
    Column, Integer, String, Text, ARRAY, JSON, Numeric, Boolean, DateTime, ForeignKey,
    CheckConstraint, UniqueConstraint, Index, text,
)
from sqlalchemy.sql import func
from app.database import Base


class BiomarkerType(Base):
    """LOINC-standardized reference definition of a measurable quantity."""

    __tablename__ = "biomarker_types"

    biomarker_type_id = Column(Integer, primary_key=True, autoincrement=True)
    loinc_code = Column(String(10), unique=True)
    loinc_long_name = Column(String(255))
    display_name = Column(String(100), nullable=False)
    category = Column(String(100))
    typical_unit = Column(String(20))
    common_aliases = Column(ARRAY(String).with_variant(JSON(), "sqlite"))
    description = Column(Text)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index("idx_biomarker_types_loinc", "loinc_code"),
        Index("idx_biomarker_types_category", "category"),
        Index("idx_biomarker_types_aliases", "common_aliases", postgresql_using="gin"),
    )


class Biomarker(Base):
    """A single measured result inside one blood test."""

    __tablename__ = "biomarkers"

    biomarker_id = Column(Integer, primary_key=True, autoincrement=True)
    test_id = Column(Integer, ForeignKey("blood_tests.test_id", ondelete="CASCADE"), nullable=False)
    biomarker_type_id = Column(Integer, ForeignKey("biomarker_types.biomarker_type_id"), nullable=False)
    value_numeric = Column(Numeric(10, 2))
    value_operator = Column(String(2))
    value_text = Column(String(100))
    unit = Column(String(20))
    flag = Column(String(20))
    created_at = Column(DateTime, server_default=func.now())

    __table_args__ = (
        CheckConstraint(
            "value_operator IS NULL OR value_operator IN ('<', '>', '<=', '>=')",
            name="ck_biomarkers_value_operator",
        ),
        CheckConstraint(
            "flag IS NULL OR flag IN ('Low', 'High', 'Normal', 'Abnormal', 'H', 'L')",
            name="ck_biomarkers_flag",
        ),
        CheckConstraint(
            "value_numeric IS NOT NULL OR value_text IS NOT NULL",
            name="value_check",
        ),
        Index("idx_biomarkers_timeseries", "biomarker_type_id", "test_id"),
        Index("idx_biomarkers_test", "test_id"),
        Index("idx_biomarkers_user_type", "test_id", "biomarker_type_id"),
    )


class BiomarkerMapping(Base):
    """Learned raw lab name -> BiomarkerType association, written by the mapping service."""

    __tablename__ = "biomarker_mappings"

    mapping_id = Column(Integer, primary_key=True, autoincrement=True)
    raw_name = Column(String(200), nullable=False)
    biomarker_type_id = Column(Integer, ForeignKey("biomarker_types.biomarker_type_id"), nullable=False)
    loinc_code = Column(String(10))
    confidence_score = Column(Numeric(3, 2))
    user_verified = Column(Boolean, default=False, server_default=text("false"))
    created_at = Column(DateTime, server_default=func.now())

    __table_args__ = (
        CheckConstraint(
            "confidence_score >= 0 AND confidence_score <= 1",
            name="ck_biomarker_mappings_confidence",
        ),
        UniqueConstraint("raw_name", "biomarker_type_id", name="uq_mapping_raw_name_type"),
        Index("idx_mappings_raw_name", "raw_name"),
        Index("idx_mappings_unverified", "user_verified",
              postgresql_where=text("user_verified = false")),
    )
