"""
MedFact Verified Dataset

Static condition catalog, question graph and symptom tables,
validated once and exposed through read-only accessors.

Version: verified_dataset_v1
"""

from .models import (
    Condition,
    Question,
    QuestionCategory,
    QuestionOption,
    Severity,
    SymptomMapping,
)
from .validate import DatasetIntegrityError, validate_dataset
from .catalog import (
    VerifiedDataset,
    get_condition_by_id,
    get_dataset,
    get_question_by_id,
)

__all__ = [
    # Models
    "Condition",
    "Question",
    "QuestionCategory",
    "QuestionOption",
    "Severity",
    "SymptomMapping",
    # Validation
    "DatasetIntegrityError",
    "validate_dataset",
    # Catalog
    "VerifiedDataset",
    "get_condition_by_id",
    "get_dataset",
    "get_question_by_id",
]

__version__ = "verified_dataset_v1"
