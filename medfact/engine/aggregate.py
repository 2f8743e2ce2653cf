"""
MedFact Result Aggregator v1.0

Turns the recorded answers and related conditions of a finished
questionnaire into AnalysisResults.

Rules (NOT ML, intentionally coarse):
- Severity: first match wins
    1. any selected value contains "severe", "high" or "very_high" -> high
    2. any selected value contains "moderate"                      -> medium
    3. otherwise                                                    -> low
  Matched on the raw option VALUE, never the label.
- Symptoms: input symptom followed by every selected value (no dedupe)
- Preventive measures: per condition category, deduplicated first-seen
- Recommended actions: severity template, then one evaluation line per
  high-severity condition, deduplicated

IMPORTANT: Deterministic. Never raises for well-typed input; empty
sequences are valid output.
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Sequence

from medfact.dataset.models import Condition, Severity
from .contracts import AnalysisResults, QuestionResponse


# =============================================================================
# RULE TABLES
# =============================================================================

HIGH_SEVERITY_TOKENS = ("severe", "high", "very_high")
MEDIUM_SEVERITY_TOKENS = ("moderate",)

PREVENTIVE_MEASURES_BY_CATEGORY: Dict[str, List[str]] = {
    "neurological": ["Maintain regular sleep schedule", "Manage stress levels", "Stay hydrated"],
    "respiratory": ["Wash hands frequently", "Avoid close contact with sick individuals", "Get adequate rest"],
    "gastrointestinal": ["Practice food safety", "Stay hydrated", "Eat bland foods"],
    "infectious": ["Complete any prescribed medications", "Rest and recover", "Monitor symptoms"],
}

RECOMMENDED_ACTIONS_BY_SEVERITY: Dict[str, List[str]] = {
    Severity.HIGH.value: ["Seek immediate medical attention", "Contact your healthcare provider today"],
    Severity.MEDIUM.value: ["Consider consulting a healthcare provider", "Monitor symptoms closely"],
    Severity.LOW.value: ["Rest and self-care measures", "Monitor for worsening symptoms"],
}

CONDITION_EVALUATION_TEMPLATE = "Consider evaluation for {name}"


def _dedupe(items: Iterable[str]) -> List[str]:
    """Remove duplicates, keeping first-seen order."""
    seen = set()
    result: List[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


# =============================================================================
# RULES
# =============================================================================

def determine_severity(responses: Sequence[QuestionResponse]) -> Severity:
    """Classify severity from selected option values."""
    values = [r.selected_option for r in responses]
    if any(token in value for value in values for token in HIGH_SEVERITY_TOKENS):
        return Severity.HIGH
    if any(token in value for value in values for token in MEDIUM_SEVERITY_TOKENS):
        return Severity.MEDIUM
    return Severity.LOW


def generate_preventive_measures(conditions: Sequence[Condition]) -> List[str]:
    measures: List[str] = []
    for condition in conditions:
        measures.extend(PREVENTIVE_MEASURES_BY_CATEGORY.get(condition.category, []))
    return _dedupe(measures)


def generate_recommended_actions(severity: Severity, conditions: Sequence[Condition]) -> List[str]:
    severity_value = Severity(severity).value
    actions: List[str] = list(RECOMMENDED_ACTIONS_BY_SEVERITY[severity_value])

    for condition in conditions:
        if condition.severity == Severity.HIGH.value:
            actions.append(CONDITION_EVALUATION_TEMPLATE.format(name=condition.name))

    return _dedupe(actions)


def aggregate(
    symptom: str,
    responses: Sequence[QuestionResponse],
    conditions: Sequence[Condition],
) -> AnalysisResults:
    """
    Build the final assessment for a completed questionnaire.

    Args:
        symptom: The symptom exactly as the user entered it
        responses: Recorded answers in answer order
        conditions: Related conditions already resolved from the catalog, in related order

    Returns:
        AnalysisResults
    """
    severity = determine_severity(responses)

    return AnalysisResults(
        possible_conditions=tuple(conditions),
        symptoms=tuple([symptom] + [r.selected_option for r in responses]),
        preventive_measures=generate_preventive_measures(conditions),
        severity=severity,
        recommended_actions=generate_recommended_actions(severity, conditions),
    )
