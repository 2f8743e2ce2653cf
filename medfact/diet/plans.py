"""
Diet Database Lookups

Read-only helpers over DIET_DATABASE:
- get_diet_plan_for_condition: one condition by name
- get_diet_plan_for_conditions: union across several names
- list_conditions_with_diet_plans: names with an entry
- search_diet_recommendations: case-insensitive substring search

Lifestyle items are combined but not searched.
"""

from typing import Dict, Iterable, List, Optional

from .diet_data import DIET_DATABASE
from .models import CombinedDietPlan, DietPlanEntry, DietSearchResult

# Search section -> result prefix, in result order
SEARCH_SECTIONS = (
    ("eat", "Eat"),
    ("avoid", "Avoid"),
    ("supplements", "Supplement"),
)


def get_diet_plan_for_condition(condition_name: str) -> Optional[DietPlanEntry]:
    """Diet entry for an exact condition name, or None."""
    plan = DIET_DATABASE.get(condition_name)
    if plan is None:
        return None
    return DietPlanEntry(
        condition_name=condition_name,
        eat=list(plan.get("eat", [])),
        avoid=list(plan.get("avoid", [])),
        supplements=list(plan.get("supplements", [])),
        lifestyle=list(plan.get("lifestyle", [])),
    )


def get_diet_plan_for_conditions(condition_names: Iterable[str]) -> CombinedDietPlan:
    """Combine entries for several conditions. Unknown names are skipped."""
    combined: Dict[str, List[str]] = {"eat": [], "avoid": [], "supplements": [], "lifestyle": []}

    for name in condition_names:
        plan = DIET_DATABASE.get(name)
        if not plan:
            continue
        for section, items in combined.items():
            for item in plan.get(section, []):
                if item not in items:
                    items.append(item)

    return CombinedDietPlan(**combined)


def list_conditions_with_diet_plans() -> List[str]:
    return list(DIET_DATABASE.keys())


def search_diet_recommendations(search_term: str) -> List[DietSearchResult]:
    """
    Find diet items containing the search term.

    Returns one DietSearchResult per condition with at least one hit,
    in database order.
    """
    needle = search_term.lower()
    results: List[DietSearchResult] = []

    for condition, plan in DIET_DATABASE.items():
        matches: List[str] = []
        for section, prefix in SEARCH_SECTIONS:
            for item in plan.get(section, []):
                if needle in item.lower():
                    matches.append(f"{prefix}: {item}")
        if matches:
            results.append(DietSearchResult(condition=condition, matches=matches))

    return results
