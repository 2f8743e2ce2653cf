"""
MedFact Symptom Tables
Version: verified_dataset_v1

This module contains:
1. SYMPTOM_MAPPINGS: exact-match table, normalized symptom -> entry question + related conditions
2. SYMPTOM_KEYWORDS: free-text fallback table, keyword -> condition ids

SYMPTOM_KEYWORDS is ordered. When free text contains several keywords,
the first keyword in this table decides the entry question, so
"fever" outranks "hot" and "cough". Do not reorder entries casually.
Every keyword must also appear in SYMPTOM_MAPPINGS.
"""

from typing import Dict, List, Any

# ============================================================================
# SYMPTOM MAPPINGS
# ============================================================================

SYMPTOM_MAPPINGS: Dict[str, Dict[str, Any]] = {
    # ===== HEAD =====
    "headache": {
        "initial_question_id": "headache_type",
        "related_conditions": ["migraine", "tension_headache", "cluster_headache"]
    },
    "head pain": {
        "initial_question_id": "headache_type",
        "related_conditions": ["migraine", "tension_headache", "cluster_headache"]
    },
    "migraine": {
        "initial_question_id": "headache_type",
        "related_conditions": ["migraine"]
    },

    # ===== FEVER =====
    "fever": {
        "initial_question_id": "fever_severity",
        "related_conditions": ["flu", "common_cold", "bacterial_infection"]
    },
    "temperature": {
        "initial_question_id": "fever_severity",
        "related_conditions": ["flu", "common_cold", "bacterial_infection"]
    },
    "hot": {
        "initial_question_id": "fever_severity",
        "related_conditions": ["flu", "bacterial_infection"]
    },

    # ===== DIGESTIVE =====
    "nausea": {
        "initial_question_id": "nausea_severity",
        "related_conditions": ["gastroenteritis", "food_poisoning", "migraine"]
    },
    "vomiting": {
        "initial_question_id": "nausea_severity",
        "related_conditions": ["gastroenteritis", "food_poisoning"]
    },
    "stomach pain": {
        "initial_question_id": "nausea_severity",
        "related_conditions": ["gastroenteritis", "food_poisoning"]
    },
    "diarrhea": {
        "initial_question_id": "nausea_severity",
        "related_conditions": ["gastroenteritis", "food_poisoning"]
    },

    # ===== RESPIRATORY / SYSTEMIC =====
    "cough": {
        "initial_question_id": "fever_severity",
        "related_conditions": ["flu", "common_cold"]
    },
    "sore throat": {
        "initial_question_id": "fever_severity",
        "related_conditions": ["flu", "common_cold"]
    },
    "runny nose": {
        "initial_question_id": "fever_severity",
        "related_conditions": ["common_cold", "flu"]
    },
    "body aches": {
        "initial_question_id": "fever_severity",
        "related_conditions": ["flu"]
    },
    "fatigue": {
        "initial_question_id": "fever_severity",
        "related_conditions": ["flu", "bacterial_infection"]
    },
    "chills": {
        "initial_question_id": "fever_severity",
        "related_conditions": ["flu", "bacterial_infection"]
    },
}


# ============================================================================
# SYMPTOM KEYWORDS
# Substring matched against free text, in this order
# ============================================================================

SYMPTOM_KEYWORDS: Dict[str, List[str]] = {
    "headache": ["migraine", "tension_headache", "cluster_headache"],
    "head pain": ["migraine", "tension_headache", "cluster_headache"],
    "migraine": ["migraine"],
    "fever": ["flu", "common_cold", "bacterial_infection"],
    "temperature": ["flu", "common_cold", "bacterial_infection"],
    "hot": ["flu", "bacterial_infection"],
    "nausea": ["gastroenteritis", "food_poisoning", "migraine"],
    "vomiting": ["gastroenteritis", "food_poisoning"],
    "stomach pain": ["gastroenteritis", "food_poisoning"],
    "diarrhea": ["gastroenteritis", "food_poisoning"],
    "cough": ["flu", "common_cold"],
    "sore throat": ["flu", "common_cold"],
    "runny nose": ["common_cold", "flu"],
    "body aches": ["flu"],
    "fatigue": ["flu", "bacterial_infection"],
    "chills": ["flu", "bacterial_infection"],
}
