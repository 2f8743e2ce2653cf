"""
MedFact Symptom Resolver v1.0

Maps a user-entered symptom to an entry question and related conditions.

Resolution order:
1. Normalize (lowercase, strip). Blank input is unrecognized.
2. Exact match against SYMPTOM_MAPPINGS.
3. Free-text fallback: substring search for every registered keyword.
   Condition ids are unioned in first-seen order; the FIRST matching
   keyword in table order supplies the entry question.
4. Nothing matched -> unrecognized (None, []).

IMPORTANT: All functions are DETERMINISTIC and side-effect free.

Usage:
    from medfact.engine.resolver import resolve_symptom

    resolution = resolve_symptom("Headache")
    resolution.initial_question_id   # "headache_type"
"""

from __future__ import annotations
import logging
from typing import List, Optional

from medfact.dataset.catalog import VerifiedDataset, get_dataset
from .contracts import SymptomResolution

logger = logging.getLogger(__name__)

RESOLVER_VERSION = "1.0.0"


def normalize_symptom(text: str) -> str:
    """Lowercase and strip surrounding whitespace."""
    return text.lower().strip()


def _match_keywords(normalized: str, dataset: VerifiedDataset) -> List[str]:
    """Keywords contained in the text, in table precedence order."""
    return [keyword for keyword, _ in dataset.keywords if keyword in normalized]


def search_symptom_keywords(text: str, dataset: Optional[VerifiedDataset] = None) -> List[str]:
    """
    Free-text keyword search.

    Returns the deduplicated union of condition ids for every keyword
    found in the text, in first-seen order.
    """
    dataset = dataset or get_dataset()
    normalized = text.lower()

    matched: List[str] = []
    for keyword, condition_ids in dataset.keywords:
        if keyword in normalized:
            for condition_id in condition_ids:
                if condition_id not in matched:
                    matched.append(condition_id)
    return matched


def resolve_symptom(text: str, dataset: Optional[VerifiedDataset] = None) -> SymptomResolution:
    """
    Resolve a symptom string to its entry question and related conditions.

    Args:
        text: Free-text symptom as entered by the user
        dataset: Dataset to resolve against (process-wide dataset if None)

    Returns:
        SymptomResolution; initial_question_id is None when unrecognized
    """
    dataset = dataset or get_dataset()
    normalized = normalize_symptom(text)

    if not normalized:
        return SymptomResolution()

    # Exact match
    mapping = dataset.get_symptom_mapping(normalized)
    if mapping is not None:
        return SymptomResolution(
            initial_question_id=mapping.initial_question_id,
            related_conditions=list(mapping.related_conditions),
        )

    # Free-text fallback
    keywords = _match_keywords(normalized, dataset)
    if not keywords:
        logger.debug(f"Symptom not recognized: {normalized!r}")
        return SymptomResolution()

    entry = dataset.get_symptom_mapping(keywords[0])
    if entry is None:
        # validate_dataset guarantees every keyword has a mapping
        logger.warning(f"Keyword {keywords[0]!r} has no symptom mapping; treating input as unrecognized")
        return SymptomResolution()

    related = search_symptom_keywords(normalized, dataset)
    logger.debug(f"Resolved {normalized!r} via keywords {keywords} -> {entry.initial_question_id}")

    return SymptomResolution(
        initial_question_id=entry.initial_question_id,
        related_conditions=related,
        matched_keywords=keywords,
    )
