"""
Symptom Checker — Таблиця станів

Профілі станів для оцінювача. Порядок визначення важливий: при рівних
ймовірностях раніше визначений стан іде першим, а перший стан таблиці
є запасним результатом, коли жоден профіль не збігся.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

from symptom_checker.schemas import DiagnosisSeverity


@dataclass(frozen=True)
class ConditionProfile:
    """Профіль стану"""
    condition_key: str
    base_probability: int
    severity: DiagnosisSeverity
    description_key: str
    recommendations_keys: Tuple[str, ...]

    # name_key симптому → вага [0, 1]
    affinities: Dict[str, float] = field(default_factory=dict)

    # Минає сам (ліки та тривалість знижують ймовірність)
    self_limiting: bool = False

    # Потребує невідкладної допомоги
    urgent: bool = False

    def __post_init__(self):
        if not 0 <= self.base_probability <= 100:
            raise ValueError(f"{self.condition_key}: base_probability must be in [0, 100]")
        for key, weight in self.affinities.items():
            if not 0.0 <= weight <= 1.0:
                raise ValueError(f"{self.condition_key}: affinity for {key} must be in [0, 1]")


CONDITION_PROFILES: Tuple[ConditionProfile, ...] = (
    ConditionProfile(
        condition_key="common_cold",
        base_probability=75,
        severity=DiagnosisSeverity.LOW,
        description_key="common_cold_desc",
        recommendations_keys=("get_rest", "stay_hydrated", "otc_medicine", "monitor_symptoms"),
        affinities={"cough": 1.0, "sore_throat": 1.0, "fever": 0.6, "headache": 0.4, "fatigue": 0.5},
        self_limiting=True,
    ),
    ConditionProfile(
        condition_key="viral_infection",
        base_probability=60,
        severity=DiagnosisSeverity.MEDIUM,
        description_key="viral_infection_desc",
        recommendations_keys=("rest_fluids", "monitor_temperature", "consult_if_worse", "avoid_contact"),
        affinities={
            "fever": 1.0, "fatigue": 0.8, "cough": 0.6, "headache": 0.6,
            "sore_throat": 0.5, "nausea": 0.3,
        },
        self_limiting=True,
    ),
    ConditionProfile(
        condition_key="influenza",
        base_probability=55,
        severity=DiagnosisSeverity.MEDIUM,
        description_key="influenza_desc",
        recommendations_keys=("rest_fluids", "monitor_temperature", "antiviral_consult", "avoid_contact"),
        affinities={
            "fever": 1.0, "fatigue": 0.9, "cough": 0.8, "headache": 0.7,
            "sore_throat": 0.4, "shortness_breath": 0.3,
        },
    ),
    ConditionProfile(
        condition_key="migraine",
        base_probability=50,
        severity=DiagnosisSeverity.MEDIUM,
        description_key="migraine_desc",
        recommendations_keys=("rest_dark_room", "stay_hydrated", "otc_medicine", "track_triggers"),
        affinities={"headache": 1.0, "dizziness": 0.8, "nausea": 0.7, "fatigue": 0.3},
    ),
    ConditionProfile(
        condition_key="gastroenteritis",
        base_probability=50,
        severity=DiagnosisSeverity.MEDIUM,
        description_key="gastroenteritis_desc",
        recommendations_keys=("oral_rehydration", "bland_diet", "consult_if_worse"),
        affinities={"nausea": 1.0, "stomach_pain": 1.0, "fever": 0.4, "fatigue": 0.3, "dizziness": 0.2},
        self_limiting=True,
    ),
    ConditionProfile(
        condition_key="respiratory_infection",
        base_probability=45,
        severity=DiagnosisSeverity.HIGH,
        description_key="respiratory_infection_desc",
        recommendations_keys=("consult_doctor_soon", "monitor_breathing", "rest_fluids"),
        affinities={
            "shortness_breath": 1.0, "cough": 0.8, "fever": 0.6,
            "chest_pain": 0.5, "fatigue": 0.3,
        },
    ),
    ConditionProfile(
        condition_key="cardiac_evaluation",
        base_probability=40,
        severity=DiagnosisSeverity.HIGH,
        description_key="cardiac_evaluation_desc",
        recommendations_keys=("seek_emergency_care", "avoid_exertion"),
        affinities={
            "chest_pain": 1.0, "shortness_breath": 0.8, "dizziness": 0.6,
            "nausea": 0.3, "fatigue": 0.2,
        },
        urgent=True,
    ),
)
