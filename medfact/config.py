"""
MedFact Engine Configuration

Version constants and engine settings.

The engine reads no environment variables, files or network state.
Settings are passed in explicitly by the hosting application; the
defaults below are what every session uses when none are given.

Usage:
    from medfact.config import EngineSettings, DEFAULT_SETTINGS

    session = SymptomSession(settings=EngineSettings(max_steps=10))
"""

from pydantic import BaseModel, Field


# =============================================================================
# VERSIONS
# =============================================================================
DATASET_VERSION = "verified_dataset_v1"
ENGINE_VERSION = "1.0.0"
CONTRACT_VERSION = "1.0"


# =============================================================================
# ENGINE SETTINGS
# =============================================================================

class EngineSettings(BaseModel):
    """
    Tunables for a questionnaire session.

    max_steps bounds the number of answers a single session accepts.
    The verified dataset terminates within 4 hops; the bound only
    matters for a graph edited to contain a cycle.
    """
    max_steps: int = Field(default=25, ge=1, le=1000, description="Maximum answers per session before forced completion")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "max_steps": 25
            }
        }


DEFAULT_SETTINGS = EngineSettings()
