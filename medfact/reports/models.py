"""
Health Report Models

The record a hosting application stores after a completed
symptom check. The engine builds these; it never persists them.
"""

from datetime import datetime
from typing import Optional, Tuple

from pydantic import BaseModel, Field

from medfact.config import CONTRACT_VERSION
from medfact.engine.contracts import AnalysisResults, QuestionResponse
from medfact.shared.disclaimer import MEDICAL_DISCLAIMER


class HealthReport(BaseModel):
    """A completed symptom check, ready for storage keyed by user_id."""
    contract_version: str = Field(default=CONTRACT_VERSION, description="Schema version")
    id: str = Field(..., description="report_<uuid>")
    user_id: str = Field(..., description="Owner, supplied by the hosting application")
    timestamp: datetime = Field(..., description="When the report was built (UTC)")
    initial_symptom: str = Field(..., description="Symptom as entered")
    questions: Tuple[QuestionResponse, ...] = Field(default_factory=tuple, description="Answers in order")
    results: AnalysisResults
    follow_up_date: Optional[datetime] = Field(None, description="Optional follow-up reminder")
    results_hash: str = Field(..., description="Canonical sha256 of results")
    disclaimer: str = Field(default=MEDICAL_DISCLAIMER, description="Locked medical disclaimer")

    class Config:
        frozen = True
