"""
MedFact Decision Engine

Symptom -> question -> result:
- resolver: symptom text -> entry question + related conditions
- traversal: explicit questionnaire state machine
- aggregate: rule-based severity, preventive measures, recommended actions

The engine decides. The hosting application renders and persists.
"""

from .contracts import (
    AnalysisResults,
    AnswerOutcome,
    AnswerRejected,
    AnswerRejectedCode,
    QuestionResponse,
    SessionState,
    SymptomResolution,
)
from .resolver import RESOLVER_VERSION, normalize_symptom, resolve_symptom, search_symptom_keywords
from .aggregate import aggregate, determine_severity
from .traversal import SymptomSession, start_session, submit_answer

__all__ = [
    # Contracts
    "AnalysisResults",
    "AnswerOutcome",
    "AnswerRejected",
    "AnswerRejectedCode",
    "QuestionResponse",
    "SessionState",
    "SymptomResolution",
    # Resolver
    "RESOLVER_VERSION",
    "normalize_symptom",
    "resolve_symptom",
    "search_symptom_keywords",
    # Aggregator
    "aggregate",
    "determine_severity",
    # Traversal
    "SymptomSession",
    "start_session",
    "submit_answer",
]
