"""
Symptom Checker — Оцінювач діагнозів (Diagnosis Engine)

Компоненти:
- ConditionProfile / CONDITION_PROFILES: таблиця станів
- DiagnosisScorer: ранжування станів за симптомами та відповідями

Приклад використання:
    from symptom_checker.diagnosis_engine import DiagnosisScorer

    scorer = DiagnosisScorer()
    diagnoses = scorer.score(selected, questions, answers)

    top = diagnoses[0]
    print(f"{top.condition_key}: {top.probability}%")
"""

from .conditions import (
    ConditionProfile,
    CONDITION_PROFILES,
)
from .scorer import (
    DiagnosisScorer,
    EMERGENCY_RECOMMENDATION,
)


__all__ = [
    "ConditionProfile",
    "CONDITION_PROFILES",
    "DiagnosisScorer",
    "EMERGENCY_RECOMMENDATION",
]
