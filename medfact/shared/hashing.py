"""
MedFact Canonical Hashing Layer
Single source of truth for result and report hashes.

Hashes let the hosting application detect identical assessments
(e.g., the same answers replayed) without comparing full payloads.
"""

import hashlib
import json
from datetime import date, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel

# Fields to exclude from hashing (volatile/generated)
VOLATILE_FIELDS = frozenset([
    "id",
    "timestamp",
    "created_at",
    "updated_at",
    "results_hash",
])

HASH_PREFIX = "sha256:"


def canonicalize(obj: Any, exclude_volatile: bool = True) -> str:
    """
    Convert object to canonical JSON string.
    Deterministic: same input always produces same output.
    Pydantic models are dumped to plain data first.

    Volatile fields are dropped from the top-level record only; nested
    records keep theirs, so a nested Condition.id still counts.
    """
    def _clean(o: Any, top: bool = False) -> Any:
        if isinstance(o, BaseModel):
            return _clean(o.model_dump(mode="json"), top)
        if isinstance(o, dict):
            return {
                str(k): _clean(v)
                for k, v in sorted(o.items(), key=lambda kv: str(kv[0]))
                if not (top and exclude_volatile and k in VOLATILE_FIELDS)
            }
        if isinstance(o, (list, tuple)):
            return [_clean(i) for i in o]
        if isinstance(o, Enum):
            return o.value
        if isinstance(o, (datetime, date)):
            return o.isoformat()
        if isinstance(o, float):
            return round(o, 10)
        return o

    return json.dumps(_clean(obj, top=True), sort_keys=True, separators=(',', ':'), ensure_ascii=True)


def canonicalize_and_hash(obj: Any, exclude_volatile: bool = True) -> str:
    """
    THE canonical hash function for MedFact records.
    Returns: "sha256:<64-char-hex>"
    """
    canonical = canonicalize(obj, exclude_volatile)
    digest = hashlib.sha256(canonical.encode('utf-8')).hexdigest()
    return f"{HASH_PREFIX}{digest}"


def verify_hash(obj: Any, expected_hash: str, exclude_volatile: bool = True) -> bool:
    return canonicalize_and_hash(obj, exclude_volatile) == expected_hash
