"""
MedFact Engine Contract v1.0
Canonical Pydantic Schemas for the Decision Engine

This module defines the stable contract between:
- Symptom Resolver -> Traversal Engine
- Traversal Engine -> Result Aggregator
- Traversal Engine -> hosting application (UI, persistence)

IMPORTANT: These schemas are versioned. Any breaking changes
require a version bump (e.g., "1.0" -> "2.0").

Usage:
    from medfact.engine.contracts import (
        SymptomResolution,
        QuestionResponse,
        AnalysisResults,
        AnswerOutcome,
    )
"""

from __future__ import annotations
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from medfact.config import CONTRACT_VERSION
from medfact.dataset.models import Condition, Question, Severity


# =============================================================================
# ENUMS
# =============================================================================

class SessionState(str, Enum):
    AWAITING_ENTRY = "awaiting_entry"
    IN_QUESTION = "in_question"
    COMPLETE = "complete"


class AnswerRejectedCode(Enum):
    NO_ACTIVE_QUESTION = "NO_ACTIVE_QUESTION"
    UNKNOWN_OPTION = "UNKNOWN_OPTION"
    ALREADY_STARTED = "ALREADY_STARTED"


class AnswerRejected(Exception):
    """Raised when an answer does not belong to the currently active question."""

    def __init__(self, error_code: AnswerRejectedCode, message: str):
        self.error_code = error_code
        self.message = message
        super().__init__(f"{error_code.value}: {message}")


# =============================================================================
# RESOLUTION
# =============================================================================

class SymptomResolution(BaseModel):
    """
    Result of resolving a user-entered symptom.

    initial_question_id None means the symptom was not recognized;
    related_conditions is then empty.
    """
    initial_question_id: Optional[str] = Field(None, description="Entry question, None if unrecognized")
    related_conditions: List[str] = Field(default_factory=list, description="Ordered condition ids")
    matched_keywords: List[str] = Field(default_factory=list, description="Keywords hit by the free-text fallback")

    class Config:
        frozen = True

    @property
    def is_resolved(self) -> bool:
        return self.initial_question_id is not None


# =============================================================================
# SESSION RECORDS
# =============================================================================

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class QuestionResponse(BaseModel):
    """One recorded answer. question_text is captured when answered, not re-derived."""
    question_id: str = Field(..., description="Question that was answered")
    question_text: str = Field(..., description="Prompt as shown at answer time")
    selected_option: str = Field(..., description="Selected option value")
    timestamp: datetime = Field(default_factory=_utcnow, description="When the answer was recorded (UTC)")

    class Config:
        frozen = True


class AnalysisResults(BaseModel):
    """
    Assessment produced when a questionnaire completes.

    Sequences are tuples, always present (possibly empty), so a result
    cannot change after it is handed out. preventive_measures and
    recommended_actions never contain duplicates; symptoms may.
    """
    contract_version: str = Field(default=CONTRACT_VERSION, description="Schema version")
    possible_conditions: Tuple[Condition, ...] = Field(default_factory=tuple, description="Conditions in related order")
    symptoms: Tuple[str, ...] = Field(default_factory=tuple, description="Input symptom followed by selected option values")
    preventive_measures: Tuple[str, ...] = Field(default_factory=tuple, description="Deduplicated preventive measures")
    severity: Severity = Field(..., description="low, medium or high")
    recommended_actions: Tuple[str, ...] = Field(default_factory=tuple, description="Deduplicated recommended actions")

    class Config:
        frozen = True
        use_enum_values = True
        json_schema_extra = {
            "example": {
                "contract_version": "1.0",
                "possible_conditions": [],
                "symptoms": ["fever", "very_high", "chills", "runny_nose"],
                "preventive_measures": ["Wash hands frequently"],
                "severity": "high",
                "recommended_actions": [
                    "Seek immediate medical attention",
                    "Contact your healthcare provider today"
                ]
            }
        }


class AnswerOutcome(BaseModel):
    """
    Outcome of one submitted answer.

    Exactly one of next_question / results is set.
    """
    next_question: Optional[Question] = Field(None, description="Question to show next")
    results: Optional[AnalysisResults] = Field(None, description="Final results if the questionnaire completed")

    class Config:
        frozen = True

    @property
    def is_complete(self) -> bool:
        return self.results is not None
