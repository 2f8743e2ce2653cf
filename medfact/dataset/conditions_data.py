"""
MedFact Condition Catalog
Version: verified_dataset_v1

CONDITIONS: the medical conditions the symptom checker can report.

Each entry is loaded into a frozen Condition record by catalog.py.
Catalog order matters: result aggregation walks conditions in the
order a symptom mapping lists them, and ties are never re-sorted.
"""

from typing import Any, Dict, List

# ============================================================================
# CONDITIONS
# ============================================================================

CONDITIONS: List[Dict[str, Any]] = [
    # ===== NEUROLOGICAL =====
    {
        "id": "migraine",
        "name": "Migraine",
        "description": "A neurological condition characterized by intense, throbbing headaches often accompanied by nausea and sensitivity to light.",
        "common_symptoms": ["severe headache", "nausea", "light sensitivity", "sound sensitivity", "visual disturbances"],
        "severity": "medium",
        "category": "neurological",
        "prevalence": 0.12
    },
    {
        "id": "tension_headache",
        "name": "Tension Headache",
        "description": "The most common type of headache, often described as a tight band around the head.",
        "common_symptoms": ["mild to moderate headache", "pressure sensation", "muscle tension", "stress"],
        "severity": "low",
        "category": "neurological",
        "prevalence": 0.78
    },
    {
        "id": "cluster_headache",
        "name": "Cluster Headache",
        "description": "Severe headaches that occur in cyclical patterns or clusters, often around one eye.",
        "common_symptoms": ["severe one-sided headache", "eye pain", "nasal congestion", "restlessness"],
        "severity": "high",
        "category": "neurological",
        "prevalence": 0.001
    },

    # ===== RESPIRATORY =====
    {
        "id": "flu",
        "name": "Influenza",
        "description": "A viral respiratory infection causing fever, body aches, and fatigue.",
        "common_symptoms": ["fever", "body aches", "fatigue", "cough", "sore throat", "runny nose"],
        "severity": "medium",
        "category": "respiratory",
        "prevalence": 0.05
    },
    {
        "id": "common_cold",
        "name": "Common Cold",
        "description": "A mild viral infection of the upper respiratory tract.",
        "common_symptoms": ["runny nose", "sneezing", "mild cough", "sore throat", "low-grade fever"],
        "severity": "low",
        "category": "respiratory",
        "prevalence": 0.15
    },

    # ===== INFECTIOUS =====
    {
        "id": "bacterial_infection",
        "name": "Bacterial Infection",
        "description": "An infection caused by bacteria that may require antibiotic treatment.",
        "common_symptoms": ["high fever", "chills", "localized pain", "swelling", "pus formation"],
        "severity": "medium",
        "category": "infectious",
        "prevalence": 0.08
    },

    # ===== GASTROINTESTINAL =====
    {
        "id": "gastroenteritis",
        "name": "Gastroenteritis",
        "description": "Inflammation of the stomach and intestines, often called stomach flu.",
        "common_symptoms": ["nausea", "vomiting", "diarrhea", "abdominal pain", "fever"],
        "severity": "medium",
        "category": "gastrointestinal",
        "prevalence": 0.10
    },
    {
        "id": "food_poisoning",
        "name": "Food Poisoning",
        "description": "Illness caused by consuming contaminated food or beverages.",
        "common_symptoms": ["sudden nausea", "vomiting", "diarrhea", "abdominal cramps", "fever"],
        "severity": "medium",
        "category": "gastrointestinal",
        "prevalence": 0.06
    },
]
