"""
MedFact Traversal Engine v1.0
Questionnaire State Machine

One SymptomSession drives one user's walk through the question graph:

    AWAITING_ENTRY --start()--> IN_QUESTION --answer()--> IN_QUESTION
                                     |                        |
                                     +------answer()----------+--> COMPLETE

- start(symptom): resolve the symptom; enter IN_QUESTION at the entry
  question, or stay in AWAITING_ENTRY with no current question when
  the symptom is not recognized.
- answer(value): record a QuestionResponse for the current question and
  follow the option's next_question_id. A terminal option completes the
  session through the Result Aggregator.

Defensive completion (logged, never raised):
- next_question_id does not resolve (malformed graph)
- settings.max_steps answers recorded (cyclic graph)

Answering when no question is active, or with a value that is not an
option of the current question, raises AnswerRejected and leaves the
session unchanged.

Sessions own their state exclusively and share only the read-only
dataset, so independent sessions need no locking.

Usage:
    from medfact.engine.traversal import start_session, submit_answer

    session = start_session("fever")
    outcome = submit_answer(session, "very_high")
"""

from __future__ import annotations
import logging
from typing import List, Optional, Tuple

from medfact.config import DEFAULT_SETTINGS, EngineSettings
from medfact.dataset.catalog import VerifiedDataset, get_dataset
from medfact.dataset.models import Condition, Question
from .aggregate import aggregate
from .contracts import (
    AnalysisResults,
    AnswerOutcome,
    AnswerRejected,
    AnswerRejectedCode,
    QuestionResponse,
    SessionState,
)
from .resolver import resolve_symptom

logger = logging.getLogger(__name__)


class SymptomSession:
    """Explicit state machine for one symptom-check questionnaire."""

    def __init__(
        self,
        dataset: Optional[VerifiedDataset] = None,
        settings: EngineSettings = DEFAULT_SETTINGS,
    ):
        self._dataset = dataset or get_dataset()
        self._settings = settings
        self._state = SessionState.AWAITING_ENTRY
        self._symptom: Optional[str] = None
        self._related_conditions: Tuple[str, ...] = ()
        self._current_question: Optional[Question] = None
        self._responses: List[QuestionResponse] = []
        self._results: Optional[AnalysisResults] = None

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def symptom(self) -> Optional[str]:
        return self._symptom

    @property
    def current_question(self) -> Optional[Question]:
        return self._current_question

    @property
    def related_conditions(self) -> Tuple[str, ...]:
        return self._related_conditions

    @property
    def responses(self) -> Tuple[QuestionResponse, ...]:
        return tuple(self._responses)

    @property
    def results(self) -> Optional[AnalysisResults]:
        return self._results

    @property
    def is_complete(self) -> bool:
        return self._state == SessionState.COMPLETE

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start(self, symptom: str) -> Optional[Question]:
        """
        Resolve the symptom and enter its first question.

        Returns:
            The entry Question, or None if the symptom is not recognized.
        """
        if self._state != SessionState.AWAITING_ENTRY:
            raise AnswerRejected(
                AnswerRejectedCode.ALREADY_STARTED,
                f"session already started (state={self._state.value})",
            )

        resolution = resolve_symptom(symptom, self._dataset)
        if not resolution.is_resolved:
            return None

        question = self._dataset.get_question_by_id(resolution.initial_question_id)
        if question is None:
            logger.warning(f"Entry question {resolution.initial_question_id!r} for {symptom!r} does not resolve")
            return None

        self._symptom = symptom
        self._related_conditions = tuple(resolution.related_conditions)
        self._current_question = question
        self._state = SessionState.IN_QUESTION
        logger.info(f"Session started for {symptom!r} at {question.id} ({len(self._related_conditions)} related conditions)")
        return question

    def answer(self, option_value: str) -> AnswerOutcome:
        """
        Record an answer to the current question and advance.

        Raises:
            AnswerRejected: no active question, or value not an option of it
        """
        question = self._current_question
        if self._state != SessionState.IN_QUESTION or question is None:
            raise AnswerRejected(
                AnswerRejectedCode.NO_ACTIVE_QUESTION,
                f"no active question (state={self._state.value})",
            )

        option = question.get_option(option_value)
        if option is None:
            raise AnswerRejected(
                AnswerRejectedCode.UNKNOWN_OPTION,
                f"'{option_value}' is not an option of question '{question.id}'",
            )

        self._responses.append(QuestionResponse(
            question_id=question.id,
            question_text=question.text,
            selected_option=option.value,
        ))

        if option.next_question_id is None:
            return self._complete()

        next_question = self._dataset.get_question_by_id(option.next_question_id)
        if next_question is None:
            logger.warning(
                f"Question {question.id!r} option {option.value!r} points to unknown question "
                f"{option.next_question_id!r}; completing session"
            )
            return self._complete()

        if len(self._responses) >= self._settings.max_steps:
            logger.warning(f"Session reached max_steps={self._settings.max_steps}; completing session")
            return self._complete()

        self._current_question = next_question
        return AnswerOutcome(next_question=next_question)

    def _complete(self) -> AnswerOutcome:
        conditions: List[Condition] = []
        for condition_id in self._related_conditions:
            condition = self._dataset.get_condition_by_id(condition_id)
            if condition is not None:
                conditions.append(condition)

        self._results = aggregate(self._symptom or "", self._responses, conditions)
        self._current_question = None
        self._state = SessionState.COMPLETE
        logger.info(
            f"Session complete for {self._symptom!r}: severity={self._results.severity}, "
            f"{len(self._responses)} answers, {len(conditions)} conditions"
        )
        return AnswerOutcome(results=self._results)

    def __repr__(self) -> str:
        current = self._current_question.id if self._current_question else None
        return f"SymptomSession(state={self._state.value}, symptom={self._symptom!r}, question={current!r})"


# =============================================================================
# FUNCTIONAL API
# =============================================================================

def start_session(
    symptom: str,
    dataset: Optional[VerifiedDataset] = None,
    settings: EngineSettings = DEFAULT_SETTINGS,
) -> Optional[SymptomSession]:
    """Start a questionnaire for a symptom. Returns None when the symptom is not recognized."""
    session = SymptomSession(dataset=dataset, settings=settings)
    if session.start(symptom) is None:
        return None
    return session


def submit_answer(session: Optional[SymptomSession], option_value: str) -> AnswerOutcome:
    """
    Submit one answer to a session.

    Raises:
        AnswerRejected: no session, no active question, or unknown option value
    """
    if session is None:
        raise AnswerRejected(AnswerRejectedCode.NO_ACTIVE_QUESTION, "no session")
    return session.answer(option_value)
