"""
MedFact Reports

Storable records built from completed symptom checks.
"""

from .models import HealthReport
from .builder import (
    ReportBuildError,
    build_diet_plan,
    build_health_report,
    collect_condition_names,
)

__all__ = [
    "HealthReport",
    "ReportBuildError",
    "build_diet_plan",
    "build_health_report",
    "collect_condition_names",
]
