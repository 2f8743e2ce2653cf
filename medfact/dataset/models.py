"""
MedFact Verified Dataset Models

Frozen Pydantic records for the static dataset:
- Condition: entry in the condition catalog
- QuestionOption / Question: nodes and edges of the question graph
- SymptomMapping: entry question + related conditions for a symptom key

Records are built once at load time from the literal tables in
conditions_data.py, questions_data.py and symptoms_data.py and are
never mutated afterwards. Sequences are stored as tuples.

Version: verified_dataset_v1
"""

from __future__ import annotations
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ENUMS
# =============================================================================

class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class QuestionCategory(str, Enum):
    SEVERITY = "severity"
    DURATION = "duration"
    LOCATION = "location"
    ASSOCIATED = "associated"


# =============================================================================
# CONDITION CATALOG
# =============================================================================

class Condition(BaseModel):
    """A medical condition the engine can report as possible."""
    id: str = Field(..., min_length=1, description="Unique condition identifier (e.g., 'migraine')")
    name: str = Field(..., min_length=1, description="Display name")
    description: str = Field(..., description="Short plain-language description")
    common_symptoms: Tuple[str, ...] = Field(..., min_length=1, description="Common symptoms (non-empty)")
    severity: Severity = Field(..., description="Typical severity of the condition")
    category: str = Field(..., min_length=1, description="Free-text classifier (e.g., 'neurological')")
    prevalence: float = Field(..., ge=0.0, le=1.0, description="Population prevalence (0.0-1.0)")

    class Config:
        frozen = True
        use_enum_values = True
        json_schema_extra = {
            "example": {
                "id": "migraine",
                "name": "Migraine",
                "description": "A neurological condition characterized by intense, throbbing headaches.",
                "common_symptoms": ["severe headache", "nausea"],
                "severity": "medium",
                "category": "neurological",
                "prevalence": 0.12
            }
        }


# =============================================================================
# QUESTION GRAPH
# =============================================================================

class QuestionOption(BaseModel):
    """
    One answer to a question.

    An option without next_question_id is terminal: selecting it
    ends the questionnaire.
    """
    value: str = Field(..., min_length=1, description="Answer code, unique within its question")
    label: str = Field(..., min_length=1, description="Display text")
    next_question_id: Optional[str] = Field(None, description="Question shown next; None = terminal")

    class Config:
        frozen = True

    @property
    def is_terminal(self) -> bool:
        return self.next_question_id is None


class Question(BaseModel):
    """A node of the question graph."""
    id: str = Field(..., min_length=1, description="Unique question identifier")
    text: str = Field(..., min_length=1, description="Prompt shown to the user")
    category: QuestionCategory = Field(..., description="severity, duration, location or associated")
    options: Tuple[QuestionOption, ...] = Field(..., min_length=1, description="Ordered answer options")

    class Config:
        frozen = True
        use_enum_values = True

    @field_validator('options')
    @classmethod
    def option_values_unique(cls, v):
        seen = set()
        for option in v:
            if option.value in seen:
                raise ValueError(f"duplicate option value '{option.value}'")
            seen.add(option.value)
        return v

    def get_option(self, value: str) -> Optional[QuestionOption]:
        """Return the option with the given value, or None."""
        for option in self.options:
            if option.value == value:
                return option
        return None


# =============================================================================
# SYMPTOM MAPPINGS
# =============================================================================

class SymptomMapping(BaseModel):
    """Entry question and related conditions for a normalized symptom key."""
    symptom: str = Field(..., min_length=1, description="Lowercase, trimmed symptom key")
    initial_question_id: str = Field(..., min_length=1, description="Entry question for this symptom")
    related_conditions: Tuple[str, ...] = Field(default_factory=tuple, description="Ordered condition ids")

    class Config:
        frozen = True

    @field_validator('symptom')
    @classmethod
    def symptom_is_normalized(cls, v):
        if v != v.lower().strip():
            raise ValueError(f"symptom key '{v}' must be lowercase and trimmed")
        return v
