"""
Verified Dataset Validation

Load-time integrity pass over the dataset records.

Principle: a dataset that fails referential integrity is UNSAFE and
must never reach a session. Field-level problems (missing fields,
bad enum values, prevalence out of range) are already rejected by the
Pydantic models; this pass checks what crosses records.

Rules:
- Condition ids unique
- Question ids unique, option values unique within a question
- Every next_question_id resolves to a question
- Every mapping's initial_question_id resolves to a question
- Every mapping's related condition resolves to a condition
- Every keyword is normalized, has a mapping entry and only lists known conditions

Version: verified_dataset_v1
"""

from typing import Iterable, List, Sequence, Tuple

from .models import Condition, Question, SymptomMapping


class DatasetIntegrityError(Exception):
    """Raised when the dataset fails validation at load time."""

    def __init__(self, errors: Sequence[str]):
        self.errors = list(errors)
        super().__init__(f"Dataset failed validation with {len(self.errors)} error(s): " + "; ".join(self.errors))


def _duplicates(values: Iterable[str]) -> List[str]:
    seen = set()
    dupes: List[str] = []
    for v in values:
        if v in seen and v not in dupes:
            dupes.append(v)
        seen.add(v)
    return dupes


def validate_dataset(
    conditions: Sequence[Condition],
    questions: Sequence[Question],
    mappings: Sequence[SymptomMapping],
    keywords: Sequence[Tuple[str, Sequence[str]]],
) -> Tuple[bool, List[str]]:
    """
    Validate cross-record invariants of the dataset.

    Args:
        conditions: Condition catalog records
        questions: Question graph nodes
        mappings: Exact-match symptom mappings
        keywords: Ordered (keyword, condition_ids) pairs

    Returns:
        Tuple of (is_valid, list of error messages)
    """
    errors: List[str] = []

    condition_ids = {c.id for c in conditions}
    question_ids = {q.id for q in questions}
    mapping_keys = {m.symptom for m in mappings}

    for dupe in _duplicates(c.id for c in conditions):
        errors.append(f"duplicate condition id '{dupe}'")
    for dupe in _duplicates(q.id for q in questions):
        errors.append(f"duplicate question id '{dupe}'")
    for dupe in _duplicates(m.symptom for m in mappings):
        errors.append(f"duplicate symptom mapping '{dupe}'")

    # Question graph
    for question in questions:
        for dupe in _duplicates(o.value for o in question.options):
            errors.append(f"question '{question.id}' has duplicate option value '{dupe}'")
        for option in question.options:
            if option.next_question_id is not None and option.next_question_id not in question_ids:
                errors.append(
                    f"question '{question.id}' option '{option.value}' points to unknown question "
                    f"'{option.next_question_id}'"
                )

    # Symptom mappings
    for mapping in mappings:
        if mapping.initial_question_id not in question_ids:
            errors.append(
                f"symptom '{mapping.symptom}' has unknown initial question '{mapping.initial_question_id}'"
            )
        for condition_id in mapping.related_conditions:
            if condition_id not in condition_ids:
                errors.append(f"symptom '{mapping.symptom}' references unknown condition '{condition_id}'")

    # Keywords
    for dupe in _duplicates(k for k, _ in keywords):
        errors.append(f"duplicate keyword '{dupe}'")
    for keyword, condition_list in keywords:
        if keyword != keyword.lower().strip() or not keyword:
            errors.append(f"keyword '{keyword}' must be lowercase, trimmed and non-empty")
        if keyword not in mapping_keys:
            errors.append(f"keyword '{keyword}' has no symptom mapping (no entry question)")
        for condition_id in condition_list:
            if condition_id not in condition_ids:
                errors.append(f"keyword '{keyword}' references unknown condition '{condition_id}'")

    return len(errors) == 0, errors
