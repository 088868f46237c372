from app.models.user import User
from app.models.blood_test import BloodTest
from app.models.biomarker import BiomarkerType, Biomarker, BiomarkerMapping
from app.models.marts import (
    mart_biomarker_trends, mart_biomarker_statistics, mart_user_health_summary,
)
from app.models.pipeline import PipelineRun

__all__ = [
    "User", "BloodTest",
    "BiomarkerType", "Biomarker", "BiomarkerMapping",
    "mart_biomarker_trends", "mart_biomarker_statistics", "mart_user_health_summary",
    "PipelineRun",
]
