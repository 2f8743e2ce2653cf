"""
Health Report and Diet Plan Builder

Packages completed sessions into storable records:
- build_health_report: one completed SymptomSession -> HealthReport
- build_diet_plan: a user's reports -> DietPlan covering every condition seen

Principle: The engine decides. The hosting application stores.
Nothing here touches storage.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from medfact.diet.models import DietPlan, DietRecommendation, DietRecommendationCategory
from medfact.diet.plans import get_diet_plan_for_conditions
from medfact.engine.traversal import SymptomSession
from medfact.shared.hashing import canonicalize_and_hash
from .models import HealthReport

logger = logging.getLogger(__name__)


class ReportBuildError(Exception):
    """Raised when a report is requested for a session that has not completed."""


# ============================================================
# DIET RECOMMENDATION COPY
# ============================================================

DIET_REASONING = {
    DietRecommendationCategory.FOODS_TO_INCLUDE: "These foods support healing and provide essential nutrients for your conditions.",
    DietRecommendationCategory.FOODS_TO_AVOID: "These foods may worsen symptoms or interfere with recovery.",
    DietRecommendationCategory.SUPPLEMENTS: "These supplements may help support your recovery and overall health.",
    DietRecommendationCategory.LIFESTYLE: "These lifestyle changes can significantly improve your symptoms and overall well-being.",
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def build_health_report(
    user_id: str,
    session: SymptomSession,
    follow_up_date: Optional[datetime] = None,
) -> HealthReport:
    """
    Build a HealthReport from a completed session.

    Raises:
        ReportBuildError: session is not complete
    """
    if not session.is_complete or session.results is None:
        raise ReportBuildError(f"Cannot build report: session is {session.state.value}")

    results = session.results
    report = HealthReport(
        id=f"report_{uuid.uuid4().hex}",
        user_id=user_id,
        timestamp=_utcnow(),
        initial_symptom=session.symptom or "",
        questions=session.responses,
        results=results,
        follow_up_date=follow_up_date,
        results_hash=canonicalize_and_hash(results),
    )
    logger.info(f"Built health report {report.id} for user {user_id} (severity={results.severity})")
    return report


def collect_condition_names(reports: Iterable[HealthReport]) -> List[str]:
    """Condition names across reports, deduplicated first-seen."""
    names: List[str] = []
    for report in reports:
        for condition in report.results.possible_conditions:
            if condition.name not in names:
                names.append(condition.name)
    return names


def build_diet_plan(user_id: str, reports: Iterable[HealthReport]) -> Optional[DietPlan]:
    """
    Build one combined diet plan from a user's reports.

    Returns:
        DietPlan, or None when the reports name no conditions
    """
    condition_names = collect_condition_names(reports)
    if not condition_names:
        return None

    combined = get_diet_plan_for_conditions(condition_names)
    sections = [
        (DietRecommendationCategory.FOODS_TO_INCLUDE, combined.eat),
        (DietRecommendationCategory.FOODS_TO_AVOID, combined.avoid),
        (DietRecommendationCategory.SUPPLEMENTS, combined.supplements),
        (DietRecommendationCategory.LIFESTYLE, combined.lifestyle),
    ]

    now = _utcnow()
    return DietPlan(
        id=f"diet_{uuid.uuid4().hex}",
        user_id=user_id,
        condition_ids=condition_names,
        recommendations=[
            DietRecommendation(category=category, items=list(items), reasoning=DIET_REASONING[category])
            for category, items in sections
        ],
        restrictions=[],
        created_at=now,
        updated_at=now,
    )
