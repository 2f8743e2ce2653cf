"""
Verified Dataset Catalog

Builds the immutable condition catalog, question graph and symptom
tables from the literal data modules, validates them once, and exposes
read-only accessors.

IMPORTANT: This is the ONLY way the engine reads the dataset.
Callers never receive the underlying containers: indexes are
MappingProxyType views and records are frozen models with tuple fields.

Usage:
    from medfact.dataset.catalog import get_condition_by_id, get_question_by_id

    question = get_question_by_id("headache_type")
    condition = get_condition_by_id("migraine")
"""

from __future__ import annotations
import logging
import threading
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from medfact.config import DATASET_VERSION
from .models import Condition, Question, SymptomMapping
from .validate import DatasetIntegrityError, validate_dataset
from .conditions_data import CONDITIONS
from .questions_data import QUESTIONS
from .symptoms_data import SYMPTOM_KEYWORDS, SYMPTOM_MAPPINGS

logger = logging.getLogger(__name__)


class VerifiedDataset:
    """
    Read-only view over one validated dataset.

    The process-wide instance comes from get_dataset(). Tests and
    tooling may build their own from custom tables via from_tables().
    """

    def __init__(
        self,
        conditions: Sequence[Condition],
        questions: Sequence[Question],
        mappings: Sequence[SymptomMapping],
        keywords: Sequence[Tuple[str, Sequence[str]]],
        version: str = DATASET_VERSION,
        validate: bool = True,
    ):
        if validate:
            is_valid, errors = validate_dataset(conditions, questions, mappings, keywords)
            if not is_valid:
                raise DatasetIntegrityError(errors)

        self.version = version
        self._conditions: Tuple[Condition, ...] = tuple(conditions)
        self._questions: Tuple[Question, ...] = tuple(questions)
        self._condition_index: Mapping[str, Condition] = MappingProxyType({c.id: c for c in conditions})
        self._question_index: Mapping[str, Question] = MappingProxyType({q.id: q for q in questions})
        self._mappings: Mapping[str, SymptomMapping] = MappingProxyType({m.symptom: m for m in mappings})
        self._keywords: Tuple[Tuple[str, Tuple[str, ...]], ...] = tuple(
            (keyword, tuple(ids)) for keyword, ids in keywords
        )

    @classmethod
    def from_tables(
        cls,
        conditions: List[Dict[str, Any]] = CONDITIONS,
        questions: List[Dict[str, Any]] = QUESTIONS,
        mappings: Dict[str, Dict[str, Any]] = SYMPTOM_MAPPINGS,
        keywords: Dict[str, List[str]] = SYMPTOM_KEYWORDS,
        version: str = DATASET_VERSION,
        validate: bool = True,
    ) -> "VerifiedDataset":
        """
        Build a dataset from literal tables.

        Raises:
            pydantic.ValidationError: an entry is missing a field or has a bad value
            DatasetIntegrityError: cross-record invariants fail (validate=True)
        """
        condition_records = [Condition(**c) for c in conditions]
        question_records = [Question(**q) for q in questions]
        mapping_records = [SymptomMapping(symptom=key, **entry) for key, entry in mappings.items()]
        keyword_pairs = list(keywords.items())
        return cls(
            condition_records,
            question_records,
            mapping_records,
            keyword_pairs,
            version=version,
            validate=validate,
        )

    # ------------------------------------------------------------------
    # Lookups (not-found is None, never an exception)
    # ------------------------------------------------------------------

    def get_condition_by_id(self, condition_id: str) -> Optional[Condition]:
        return self._condition_index.get(condition_id)

    def get_question_by_id(self, question_id: str) -> Optional[Question]:
        return self._question_index.get(question_id)

    def get_symptom_mapping(self, symptom_key: str) -> Optional[SymptomMapping]:
        """Exact lookup by an already-normalized symptom key."""
        return self._mappings.get(symptom_key)

    # ------------------------------------------------------------------
    # Read-only listings
    # ------------------------------------------------------------------

    @property
    def conditions(self) -> Tuple[Condition, ...]:
        return self._conditions

    @property
    def questions(self) -> Tuple[Question, ...]:
        return self._questions

    @property
    def symptom_keys(self) -> Tuple[str, ...]:
        return tuple(self._mappings.keys())

    @property
    def keywords(self) -> Tuple[Tuple[str, Tuple[str, ...]], ...]:
        """Keyword table in precedence (insertion) order."""
        return self._keywords

    def __repr__(self) -> str:
        return (
            f"VerifiedDataset(version={self.version!r}, conditions={len(self._conditions)}, "
            f"questions={len(self._questions)}, symptoms={len(self._mappings)})"
        )


# =============================================================================
# PROCESS-WIDE DATASET
# =============================================================================

_dataset: Optional[VerifiedDataset] = None
_lock = threading.Lock()


def get_dataset() -> VerifiedDataset:
    """Return the process-wide verified dataset, building it on first use."""
    global _dataset
    if _dataset is None:
        with _lock:
            if _dataset is None:
                _dataset = VerifiedDataset.from_tables()
                logger.info(f"Loaded {_dataset!r}")
    return _dataset


def get_condition_by_id(condition_id: str) -> Optional[Condition]:
    """Look up a condition in the verified catalog. Returns None if unknown."""
    return get_dataset().get_condition_by_id(condition_id)


def get_question_by_id(question_id: str) -> Optional[Question]:
    """Look up a question in the verified graph. Returns None if unknown."""
    return get_dataset().get_question_by_id(question_id)
