"""MedFact Shared Utilities"""

from .hashing import (
    canonicalize,
    canonicalize_and_hash,
    verify_hash,
)
from .disclaimer import (
    MEDICAL_DISCLAIMER,
    MEDICAL_DISCLAIMER_COMPACT,
    render_disclaimer_block,
)

__all__ = [
    "canonicalize",
    "canonicalize_and_hash",
    "verify_hash",
    "MEDICAL_DISCLAIMER",
    "MEDICAL_DISCLAIMER_COMPACT",
    "render_disclaimer_block",
]
