"""
MedFact Diet Database

Condition-to-diet guidance used to build diet plans from health reports.

Version: diet_database_v1
"""

from .models import (
    CombinedDietPlan,
    DietPlan,
    DietPlanEntry,
    DietRecommendation,
    DietRecommendationCategory,
    DietSearchResult,
)
from .plans import (
    get_diet_plan_for_condition,
    get_diet_plan_for_conditions,
    list_conditions_with_diet_plans,
    search_diet_recommendations,
)

__all__ = [
    # Models
    "CombinedDietPlan",
    "DietPlan",
    "DietPlanEntry",
    "DietRecommendation",
    "DietRecommendationCategory",
    "DietSearchResult",
    # Functions
    "get_diet_plan_for_condition",
    "get_diet_plan_for_conditions",
    "list_conditions_with_diet_plans",
    "search_diet_recommendations",
]

__version__ = "diet_database_v1"
