"""
MedFact Symptom Engine

Verified dataset + symptom resolver + questionnaire state machine +
rule-based result aggregation for the MedFact symptom checker.

Usage:
    from medfact import start_session, submit_answer

    session = start_session("headache")
    outcome = submit_answer(session, "throbbing")
"""

from medfact.config import DATASET_VERSION, ENGINE_VERSION, EngineSettings
from medfact.dataset import get_condition_by_id, get_question_by_id
from medfact.engine import (
    AnalysisResults,
    AnswerOutcome,
    AnswerRejected,
    SymptomSession,
    resolve_symptom,
    start_session,
    submit_answer,
)

__all__ = [
    "DATASET_VERSION",
    "ENGINE_VERSION",
    "EngineSettings",
    "get_condition_by_id",
    "get_question_by_id",
    "AnalysisResults",
    "AnswerOutcome",
    "AnswerRejected",
    "SymptomSession",
    "resolve_symptom",
    "start_session",
    "submit_answer",
]

__version__ = ENGINE_VERSION
