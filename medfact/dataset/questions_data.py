"""
MedFact Question Graph
Version: verified_dataset_v1

QUESTIONS: directed graph of follow-up questions, one flow per symptom family.

Each option either points at the next question (next_question_id) or
omits the pointer, which ends the questionnaire. Option values carry the
severity tokens ("moderate", "severe", "high", "very_high") that the
result aggregator keys on, so renaming a value changes the assessment.

Every flow terminates within 4 hops (at most 5 answers).
"""

from typing import Any, Dict, List

# ============================================================================
# QUESTIONS
# ============================================================================

QUESTIONS: List[Dict[str, Any]] = [
    # ===== HEADACHE FLOW =====
    {
        "id": "headache_type",
        "text": "What type of headache are you experiencing?",
        "category": "severity",
        "options": [
            {"value": "throbbing", "label": "Throbbing/Pulsing pain", "next_question_id": "headache_location"},
            {"value": "pressure", "label": "Pressure/Tight sensation", "next_question_id": "headache_duration"},
            {"value": "sharp", "label": "Sharp/Stabbing pain", "next_question_id": "headache_location"},
            {"value": "dull", "label": "Dull/Constant ache", "next_question_id": "headache_duration"}
        ]
    },
    {
        "id": "headache_location",
        "text": "Where is the headache located?",
        "category": "location",
        "options": [
            {"value": "one_side", "label": "One side of head", "next_question_id": "headache_associated"},
            {"value": "both_sides", "label": "Both sides of head", "next_question_id": "headache_duration"},
            {"value": "forehead", "label": "Forehead area", "next_question_id": "headache_duration"},
            {"value": "back_head", "label": "Back of head/neck", "next_question_id": "headache_duration"},
            {"value": "around_eye", "label": "Around one eye", "next_question_id": "headache_associated"}
        ]
    },
    {
        "id": "headache_duration",
        "text": "How long have you had this headache?",
        "category": "duration",
        "options": [
            {"value": "less_hour", "label": "Less than 1 hour", "next_question_id": "headache_associated"},
            {"value": "few_hours", "label": "A few hours", "next_question_id": "headache_associated"},
            {"value": "all_day", "label": "All day", "next_question_id": "headache_triggers"},
            {"value": "several_days", "label": "Several days", "next_question_id": "headache_triggers"}
        ]
    },
    {
        "id": "headache_associated",
        "text": "Are you experiencing any of these symptoms along with your headache?",
        "category": "associated",
        "options": [
            {"value": "nausea", "label": "Nausea or vomiting", "next_question_id": "headache_triggers"},
            {"value": "light_sensitivity", "label": "Sensitivity to light", "next_question_id": "headache_triggers"},
            {"value": "sound_sensitivity", "label": "Sensitivity to sound", "next_question_id": "headache_triggers"},
            {"value": "visual_changes", "label": "Visual changes (aura, blurred vision)", "next_question_id": "headache_triggers"},
            {"value": "none", "label": "None of these"}
        ]
    },
    {
        "id": "headache_triggers",
        "text": "What might have triggered your headache?",
        "category": "associated",
        "options": [
            {"value": "stress", "label": "Stress or tension"},
            {"value": "lack_sleep", "label": "Lack of sleep"},
            {"value": "certain_foods", "label": "Certain foods or drinks"},
            {"value": "weather", "label": "Weather changes"},
            {"value": "unknown", "label": "Not sure"}
        ]
    },

    # ===== FEVER FLOW =====
    {
        "id": "fever_severity",
        "text": "How high is your fever?",
        "category": "severity",
        "options": [
            {"value": "low_grade", "label": "Low-grade (99-100.4°F)", "next_question_id": "fever_duration"},
            {"value": "moderate", "label": "Moderate (100.5-102°F)", "next_question_id": "fever_associated"},
            {"value": "high", "label": "High (102.1-104°F)", "next_question_id": "fever_associated"},
            {"value": "very_high", "label": "Very high (above 104°F)", "next_question_id": "fever_associated"}
        ]
    },
    {
        "id": "fever_duration",
        "text": "How long have you had the fever?",
        "category": "duration",
        "options": [
            {"value": "few_hours", "label": "A few hours", "next_question_id": "fever_associated"},
            {"value": "one_day", "label": "1 day", "next_question_id": "fever_associated"},
            {"value": "few_days", "label": "2-3 days", "next_question_id": "fever_other_symptoms"},
            {"value": "week_plus", "label": "More than a week", "next_question_id": "fever_other_symptoms"}
        ]
    },
    {
        "id": "fever_associated",
        "text": "What other symptoms are you experiencing with the fever?",
        "category": "associated",
        "options": [
            {"value": "body_aches", "label": "Body aches and pains", "next_question_id": "fever_other_symptoms"},
            {"value": "chills", "label": "Chills or shivering", "next_question_id": "fever_other_symptoms"},
            {"value": "headache", "label": "Headache", "next_question_id": "fever_other_symptoms"},
            {"value": "fatigue", "label": "Extreme fatigue", "next_question_id": "fever_other_symptoms"}
        ]
    },
    {
        "id": "fever_other_symptoms",
        "text": "Are you experiencing any respiratory or digestive symptoms?",
        "category": "associated",
        "options": [
            {"value": "cough_sore_throat", "label": "Cough or sore throat"},
            {"value": "runny_nose", "label": "Runny or stuffy nose"},
            {"value": "nausea_vomiting", "label": "Nausea or vomiting"},
            {"value": "none_respiratory", "label": "None of these"}
        ]
    },

    # ===== NAUSEA FLOW =====
    {
        "id": "nausea_severity",
        "text": "How severe is your nausea?",
        "category": "severity",
        "options": [
            {"value": "mild", "label": "Mild - feeling queasy", "next_question_id": "nausea_duration"},
            {"value": "moderate", "label": "Moderate - strong urge to vomit", "next_question_id": "nausea_vomiting"},
            {"value": "severe", "label": "Severe - actively vomiting", "next_question_id": "nausea_vomiting"}
        ]
    },
    {
        "id": "nausea_duration",
        "text": "How long have you been feeling nauseous?",
        "category": "duration",
        "options": [
            {"value": "few_hours", "label": "A few hours", "next_question_id": "nausea_triggers"},
            {"value": "one_day", "label": "Since yesterday", "next_question_id": "nausea_associated"},
            {"value": "few_days", "label": "Several days", "next_question_id": "nausea_associated"}
        ]
    },
    {
        "id": "nausea_vomiting",
        "text": "Have you been vomiting?",
        "category": "severity",
        "options": [
            {"value": "yes_frequent", "label": "Yes, frequently", "next_question_id": "nausea_associated"},
            {"value": "yes_occasional", "label": "Yes, occasionally", "next_question_id": "nausea_triggers"},
            {"value": "no_just_nausea", "label": "No, just nauseous", "next_question_id": "nausea_triggers"}
        ]
    },
    {
        "id": "nausea_triggers",
        "text": "What might have caused your nausea?",
        "category": "associated",
        "options": [
            {"value": "food_eaten", "label": "Something I ate or drank"},
            {"value": "motion", "label": "Motion or travel"},
            {"value": "medication", "label": "Medication or supplements"},
            {"value": "unknown", "label": "Not sure"}
        ]
    },
    {
        "id": "nausea_associated",
        "text": "Are you experiencing any other symptoms?",
        "category": "associated",
        "options": [
            {"value": "diarrhea", "label": "Diarrhea"},
            {"value": "abdominal_pain", "label": "Abdominal pain or cramps"},
            {"value": "fever", "label": "Fever or chills"},
            {"value": "none_other", "label": "None of these"}
        ]
    },
]
