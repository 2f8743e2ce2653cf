"""
Diet Database Models

Pydantic models for diet lookups and generated diet plans.

CRITICAL CONSTRAINTS:
- Diet content is informational, never a prescription
- Items are copied verbatim from DIET_DATABASE

Version: diet_database_v1
"""

from datetime import datetime
from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class DietRecommendationCategory(str, Enum):
    FOODS_TO_INCLUDE = "foods_to_include"
    FOODS_TO_AVOID = "foods_to_avoid"
    SUPPLEMENTS = "supplements"
    LIFESTYLE = "lifestyle"


class DietPlanEntry(BaseModel):
    """Diet guidance for a single condition."""
    condition_name: str = Field(..., description="Condition.name this entry belongs to")
    eat: List[str] = Field(default_factory=list)
    avoid: List[str] = Field(default_factory=list)
    supplements: List[str] = Field(default_factory=list)
    lifestyle: List[str] = Field(default_factory=list)

    class Config:
        frozen = True


class CombinedDietPlan(BaseModel):
    """Union of several DietPlanEntry lists, deduplicated first-seen."""
    eat: List[str] = Field(default_factory=list)
    avoid: List[str] = Field(default_factory=list)
    supplements: List[str] = Field(default_factory=list)
    lifestyle: List[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.eat or self.avoid or self.supplements or self.lifestyle)


class DietSearchResult(BaseModel):
    """Search hits for one condition, each prefixed 'Eat: ', 'Avoid: ' or 'Supplement: '."""
    condition: str
    matches: List[str] = Field(default_factory=list)


class DietRecommendation(BaseModel):
    category: DietRecommendationCategory
    items: List[str] = Field(default_factory=list)
    reasoning: str

    class Config:
        use_enum_values = True


class DietPlan(BaseModel):
    """Diet plan generated from a user's health reports."""
    id: str = Field(..., description="diet_<uuid>")
    user_id: str = Field(..., description="Owner, supplied by the hosting application")
    condition_ids: List[str] = Field(default_factory=list, description="Condition names the plan covers")
    recommendations: List[DietRecommendation] = Field(default_factory=list)
    restrictions: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime
