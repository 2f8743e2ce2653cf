"""
MedFact Verified Dataset Tests
Unit tests for dataset models, load-time validation and catalog accessors.

Run with:
    pytest tests/test_dataset.py -v

Coverage:
    pytest tests/test_dataset.py --cov=medfact.dataset --cov-report=html
"""

import pytest
from pydantic import ValidationError

from medfact.dataset import (
    Condition,
    DatasetIntegrityError,
    Question,
    VerifiedDataset,
    get_condition_by_id,
    get_dataset,
    get_question_by_id,
    validate_dataset,
)
from medfact.dataset.conditions_data import CONDITIONS
from medfact.dataset.questions_data import QUESTIONS
from medfact.dataset.symptoms_data import SYMPTOM_KEYWORDS, SYMPTOM_MAPPINGS


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def dataset():
    return get_dataset()


@pytest.fixture
def small_tables():
    """Minimal valid tables: one condition, two questions, one symptom."""
    conditions = [
        {
            "id": "cond_a",
            "name": "Condition A",
            "description": "Test condition",
            "common_symptoms": ["ache"],
            "severity": "low",
            "category": "neurological",
            "prevalence": 0.5,
        }
    ]
    questions = [
        {
            "id": "q1",
            "text": "First?",
            "category": "severity",
            "options": [{"value": "yes", "label": "Yes", "next_question_id": "q2"}],
        },
        {
            "id": "q2",
            "text": "Second?",
            "category": "duration",
            "options": [{"value": "done", "label": "Done"}],
        },
    ]
    mappings = {"ache": {"initial_question_id": "q1", "related_conditions": ["cond_a"]}}
    keywords = {"ache": ["cond_a"]}
    return conditions, questions, mappings, keywords


# =============================================================================
# MODEL TESTS
# =============================================================================

class TestModels:
    """Test field-level validation of dataset records."""

    def test_condition_missing_field_rejected(self):
        with pytest.raises(ValidationError):
            Condition(id="x", name="X", description="d", severity="low", category="c", prevalence=0.1)

    def test_condition_empty_symptoms_rejected(self):
        with pytest.raises(ValidationError):
            Condition(id="x", name="X", description="d", common_symptoms=[], severity="low",
                      category="c", prevalence=0.1)

    def test_condition_invalid_severity_rejected(self):
        with pytest.raises(ValidationError):
            Condition(id="x", name="X", description="d", common_symptoms=["a"], severity="critical",
                      category="c", prevalence=0.1)

    def test_condition_prevalence_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            Condition(id="x", name="X", description="d", common_symptoms=["a"], severity="low",
                      category="c", prevalence=1.5)

    def test_question_invalid_category_rejected(self):
        with pytest.raises(ValidationError):
            Question(id="q", text="?", category="mood", options=[{"value": "a", "label": "A"}])

    def test_question_empty_options_rejected(self):
        with pytest.raises(ValidationError):
            Question(id="q", text="?", category="severity", options=[])

    def test_question_duplicate_option_values_rejected(self):
        with pytest.raises(ValidationError):
            Question(id="q", text="?", category="severity", options=[
                {"value": "a", "label": "A"},
                {"value": "a", "label": "Also A"},
            ])

    def test_records_are_frozen(self, dataset):
        condition = dataset.get_condition_by_id("migraine")
        with pytest.raises(ValidationError):
            condition.name = "Changed"

    def test_sequences_are_tuples(self, dataset):
        question = dataset.get_question_by_id("headache_type")
        assert isinstance(question.options, tuple)
        assert isinstance(dataset.get_condition_by_id("flu").common_symptoms, tuple)

    def test_terminal_option(self, dataset):
        triggers = dataset.get_question_by_id("headache_triggers")
        assert all(o.is_terminal for o in triggers.options)
        assert not dataset.get_question_by_id("headache_type").options[0].is_terminal


# =============================================================================
# VALIDATION TESTS
# =============================================================================

class TestValidateDataset:
    """Test cross-record integrity checks."""

    def test_shipped_dataset_is_valid(self, dataset):
        mappings = [dataset.get_symptom_mapping(k) for k in dataset.symptom_keys]
        is_valid, errors = validate_dataset(dataset.conditions, dataset.questions, mappings, dataset.keywords)

        assert is_valid is True
        assert errors == []

    def test_small_tables_valid(self, small_tables):
        ds = VerifiedDataset.from_tables(*small_tables)
        assert ds.get_question_by_id("q1") is not None

    def test_dangling_next_question_rejected(self, small_tables):
        conditions, questions, mappings, keywords = small_tables
        questions[1]["options"] = [{"value": "done", "label": "Done", "next_question_id": "missing"}]

        with pytest.raises(DatasetIntegrityError) as exc_info:
            VerifiedDataset.from_tables(conditions, questions, mappings, keywords)

        assert any("unknown question 'missing'" in e for e in exc_info.value.errors)

    def test_unknown_entry_question_rejected(self, small_tables):
        conditions, questions, mappings, keywords = small_tables
        mappings["ache"]["initial_question_id"] = "nope"

        with pytest.raises(DatasetIntegrityError) as exc_info:
            VerifiedDataset.from_tables(conditions, questions, mappings, keywords)

        assert any("unknown initial question 'nope'" in e for e in exc_info.value.errors)

    def test_unknown_related_condition_rejected(self, small_tables):
        conditions, questions, mappings, keywords = small_tables
        mappings["ache"]["related_conditions"] = ["cond_a", "ghost"]

        with pytest.raises(DatasetIntegrityError) as exc_info:
            VerifiedDataset.from_tables(conditions, questions, mappings, keywords)

        assert any("unknown condition 'ghost'" in e for e in exc_info.value.errors)

    def test_keyword_without_mapping_rejected(self, small_tables):
        conditions, questions, mappings, keywords = small_tables
        keywords["throb"] = ["cond_a"]

        with pytest.raises(DatasetIntegrityError) as exc_info:
            VerifiedDataset.from_tables(conditions, questions, mappings, keywords)

        assert any("keyword 'throb' has no symptom mapping" in e for e in exc_info.value.errors)

    def test_duplicate_condition_ids_rejected(self, small_tables):
        conditions, questions, mappings, keywords = small_tables
        conditions.append(dict(conditions[0]))

        with pytest.raises(DatasetIntegrityError) as exc_info:
            VerifiedDataset.from_tables(conditions, questions, mappings, keywords)

        assert any("duplicate condition id 'cond_a'" in e for e in exc_info.value.errors)

    def test_unnormalized_symptom_key_rejected(self, small_tables):
        conditions, questions, mappings, keywords = small_tables
        mappings["Ache "] = mappings["ache"]

        with pytest.raises(ValidationError):
            VerifiedDataset.from_tables(conditions, questions, mappings, keywords)

    def test_all_errors_reported(self, small_tables):
        conditions, questions, mappings, keywords = small_tables
        mappings["ache"]["initial_question_id"] = "nope"
        mappings["ache"]["related_conditions"] = ["ghost"]

        with pytest.raises(DatasetIntegrityError) as exc_info:
            VerifiedDataset.from_tables(conditions, questions, mappings, keywords)

        assert len(exc_info.value.errors) == 2

    def test_validation_can_be_skipped(self, small_tables):
        conditions, questions, mappings, keywords = small_tables
        questions[1]["options"] = [{"value": "done", "label": "Done", "next_question_id": "missing"}]

        ds = VerifiedDataset.from_tables(conditions, questions, mappings, keywords, validate=False)

        assert ds.get_question_by_id("missing") is None


# =============================================================================
# INTEGRITY PROPERTIES OVER THE SHIPPED DATASET
# =============================================================================

class TestDatasetIntegrity:
    """Properties that must hold for every entry of the verified dataset."""

    def test_every_next_question_resolves(self, dataset):
        for question in dataset.questions:
            for option in question.options:
                if option.next_question_id:
                    assert get_question_by_id(option.next_question_id) is not None, (
                        f"{question.id}.{option.value} -> {option.next_question_id}"
                    )

    def test_every_related_condition_resolves(self):
        for symptom, entry in SYMPTOM_MAPPINGS.items():
            for condition_id in entry["related_conditions"]:
                assert get_condition_by_id(condition_id) is not None, f"{symptom} -> {condition_id}"

    def test_every_entry_question_resolves(self):
        for symptom, entry in SYMPTOM_MAPPINGS.items():
            assert get_question_by_id(entry["initial_question_id"]) is not None, symptom

    def test_every_keyword_has_mapping(self):
        for keyword in SYMPTOM_KEYWORDS:
            assert keyword in SYMPTOM_MAPPINGS

    def test_every_flow_terminates_within_four_hops(self, dataset):
        # longest_path counts questions answered; hops are the edges between them
        def longest_path(question_id, depth=0):
            assert depth <= len(dataset.questions), "cycle detected"
            question = dataset.get_question_by_id(question_id)
            lengths = [
                1 + (longest_path(o.next_question_id, depth + 1) if o.next_question_id else 0)
                for o in question.options
            ]
            return max(lengths)

        for symptom in dataset.symptom_keys:
            entry = dataset.get_symptom_mapping(symptom).initial_question_id
            assert longest_path(entry) - 1 <= 4, symptom

    def test_headache_longest_flow_is_four_hops(self, dataset):
        entry = dataset.get_symptom_mapping("headache").initial_question_id
        path = [entry]
        for value in ("throbbing", "both_sides", "less_hour", "nausea"):
            option = dataset.get_question_by_id(path[-1]).get_option(value)
            path.append(option.next_question_id)

        assert path == [
            "headache_type", "headache_location", "headache_duration",
            "headache_associated", "headache_triggers",
        ]
        assert all(o.is_terminal for o in dataset.get_question_by_id(path[-1]).options)

    def test_counts_match_tables(self, dataset):
        assert len(dataset.conditions) == len(CONDITIONS)
        assert len(dataset.questions) == len(QUESTIONS)
        assert len(dataset.symptom_keys) == len(SYMPTOM_MAPPINGS)
        assert [k for k, _ in dataset.keywords] == list(SYMPTOM_KEYWORDS.keys())


# =============================================================================
# ACCESSOR TESTS
# =============================================================================

class TestAccessors:
    """Test read-only lookups."""

    def test_get_condition_by_id(self):
        condition = get_condition_by_id("cluster_headache")
        assert condition.name == "Cluster Headache"
        assert condition.severity == "high"
        assert condition.category == "neurological"

    def test_get_condition_unknown_returns_none(self):
        assert get_condition_by_id("does_not_exist") is None

    def test_get_question_by_id(self):
        question = get_question_by_id("fever_severity")
        assert question.text == "How high is your fever?"
        assert [o.value for o in question.options] == ["low_grade", "moderate", "high", "very_high"]

    def test_get_question_unknown_returns_none(self):
        assert get_question_by_id("does_not_exist") is None

    def test_lookups_idempotent(self):
        first = get_condition_by_id("flu")
        for _ in range(5):
            assert get_condition_by_id("flu") == first
        q_first = get_question_by_id("nausea_severity")
        for _ in range(5):
            assert get_question_by_id("nausea_severity") == q_first

    def test_dataset_is_singleton(self):
        assert get_dataset() is get_dataset()

    def test_get_option(self):
        question = get_question_by_id("nausea_severity")
        assert question.get_option("severe").next_question_id == "nausea_vomiting"
        assert question.get_option("nope") is None
