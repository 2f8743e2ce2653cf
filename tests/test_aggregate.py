"""
MedFact Result Aggregator Tests

Validates:
- Severity rules (first match wins, value not label)
- Symptoms list shape
- Preventive measures by category, deduplicated
- Recommended actions by severity + high-severity conditions
- Determinism
"""

import pytest

from medfact.dataset import Condition, get_condition_by_id
from medfact.engine.aggregate import (
    PREVENTIVE_MEASURES_BY_CATEGORY,
    RECOMMENDED_ACTIONS_BY_SEVERITY,
    aggregate,
    determine_severity,
    generate_preventive_measures,
    generate_recommended_actions,
)
from medfact.engine.contracts import QuestionResponse


def _responses(*values):
    return [
        QuestionResponse(question_id=f"q{i}", question_text=f"Question {i}?", selected_option=v)
        for i, v in enumerate(values)
    ]


def _conditions(*ids):
    return [get_condition_by_id(i) for i in ids]


@pytest.fixture
def headache_conditions():
    return _conditions("migraine", "tension_headache", "cluster_headache")


@pytest.fixture
def fever_conditions():
    return _conditions("flu", "common_cold", "bacterial_infection")


# =============================================================================
# SEVERITY
# =============================================================================

class TestDetermineSeverity:
    """First matching rule wins."""

    def test_very_high_is_high(self):
        assert determine_severity(_responses("very_high")) == "high"

    def test_very_high_wins_over_everything(self):
        responses = _responses("mild", "moderate", "very_high", "few_hours")
        assert determine_severity(responses) == "high"

    def test_severe_is_high(self):
        assert determine_severity(_responses("severe", "yes_frequent")) == "high"

    def test_high_is_high(self):
        assert determine_severity(_responses("high")) == "high"

    def test_moderate_is_medium(self):
        assert determine_severity(_responses("moderate", "chills")) == "medium"

    def test_default_low(self):
        assert determine_severity(_responses("throbbing", "one_side", "nausea", "stress")) == "low"

    def test_no_responses_low(self):
        assert determine_severity([]) == "low"

    def test_substring_match(self):
        # tokens match anywhere in the value
        assert determine_severity(_responses("highly_unusual")) == "high"
        assert determine_severity(_responses("moderately")) == "medium"

    def test_low_grade_is_low(self):
        assert determine_severity(_responses("low_grade", "few_hours", "body_aches", "cough_sore_throat")) == "low"


# =============================================================================
# PREVENTIVE MEASURES
# =============================================================================

class TestPreventiveMeasures:

    def test_neurological(self, headache_conditions):
        measures = generate_preventive_measures(headache_conditions)
        assert measures == PREVENTIVE_MEASURES_BY_CATEGORY["neurological"]

    def test_mixed_categories_first_seen(self, fever_conditions):
        measures = generate_preventive_measures(fever_conditions)
        assert measures == [
            "Wash hands frequently",
            "Avoid close contact with sick individuals",
            "Get adequate rest",
            "Complete any prescribed medications",
            "Rest and recover",
            "Monitor symptoms",
        ]

    def test_shared_measure_deduplicated(self):
        measures = generate_preventive_measures(_conditions("gastroenteritis", "food_poisoning", "migraine"))
        assert measures == [
            "Practice food safety",
            "Stay hydrated",
            "Eat bland foods",
            "Maintain regular sleep schedule",
            "Manage stress levels",
        ]

    def test_unknown_category_contributes_nothing(self):
        condition = Condition(
            id="rash", name="Rash", description="d", common_symptoms=["itch"],
            severity="low", category="dermatological", prevalence=0.1,
        )
        assert generate_preventive_measures([condition]) == []

    def test_no_conditions(self):
        assert generate_preventive_measures([]) == []


# =============================================================================
# RECOMMENDED ACTIONS
# =============================================================================

class TestRecommendedActions:

    def test_templates(self):
        for severity, template in RECOMMENDED_ACTIONS_BY_SEVERITY.items():
            assert generate_recommended_actions(severity, []) == template

    def test_high_severity_condition_appended(self, headache_conditions):
        actions = generate_recommended_actions("low", headache_conditions)
        assert actions == [
            "Rest and self-care measures",
            "Monitor for worsening symptoms",
            "Consider evaluation for Cluster Headache",
        ]

    def test_no_high_severity_conditions(self, fever_conditions):
        actions = generate_recommended_actions("high", fever_conditions)
        assert actions == ["Seek immediate medical attention", "Contact your healthcare provider today"]

    def test_duplicate_condition_listed_once(self):
        cluster = get_condition_by_id("cluster_headache")
        actions = generate_recommended_actions("medium", [cluster, cluster])
        assert actions.count("Consider evaluation for Cluster Headache") == 1


# =============================================================================
# AGGREGATE
# =============================================================================

class TestAggregate:

    def test_full_result(self, fever_conditions):
        responses = _responses("very_high", "chills", "runny_nose")
        results = aggregate("fever", responses, fever_conditions)

        assert results.severity == "high"
        assert results.symptoms == ("fever", "very_high", "chills", "runny_nose")
        assert [c.id for c in results.possible_conditions] == ["flu", "common_cold", "bacterial_infection"]
        assert results.recommended_actions[0] == "Seek immediate medical attention"

    def test_symptom_kept_as_entered(self):
        results = aggregate("  HeadAche ", _responses("dull"), [])
        assert results.symptoms == ("  HeadAche ", "dull")

    def test_symptoms_keep_duplicates(self):
        results = aggregate("nausea", _responses("nausea", "nausea"), [])
        assert results.symptoms == ("nausea", "nausea", "nausea")

    def test_empty_inputs_well_formed(self):
        results = aggregate("xyz", [], [])

        assert results.possible_conditions == ()
        assert results.symptoms == ("xyz",)
        assert results.preventive_measures == ()
        assert results.severity == "low"
        assert list(results.recommended_actions) == RECOMMENDED_ACTIONS_BY_SEVERITY["low"]

    def test_no_duplicates_in_measures_or_actions(self):
        conditions = _conditions("migraine", "gastroenteritis", "food_poisoning", "cluster_headache", "migraine")
        results = aggregate("nausea", _responses("severe", "yes_frequent", "diarrhea"), conditions)

        assert len(results.preventive_measures) == len(set(results.preventive_measures))
        assert len(results.recommended_actions) == len(set(results.recommended_actions))
        assert results.severity in ("low", "medium", "high")

    def test_deterministic(self, headache_conditions):
        responses = _responses("throbbing", "one_side", "nausea", "stress")
        first = aggregate("headache", responses, headache_conditions)
        second = aggregate("headache", responses, headache_conditions)

        assert first == second
        assert first.model_dump_json() == second.model_dump_json()

    def test_very_high_always_high(self, headache_conditions):
        for others in ([], ["mild"], ["moderate", "none"], ["low_grade", "few_days"]):
            results = aggregate("fever", _responses(*others, "very_high"), headache_conditions)
            assert results.severity == "high"
