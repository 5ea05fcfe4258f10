"""
Symptom Checker — Схеми результатів оцінювання

Pydantic моделі для:
- DiagnosisSeverity: рівень тяжкості стану
- Diagnosis: один ймовірний стан з рекомендаціями
- ConsultationHandoff: контекст для переходу до живої консультації
"""

from typing import Optional, Tuple
from enum import Enum
from pydantic import BaseModel, Field


class DiagnosisSeverity(str, Enum):
    """Рівень тяжкості стану"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Diagnosis(BaseModel):
    """
    Кандидат-стан з ймовірністю та рекомендаціями.

    Приклад:
        diagnosis = Diagnosis(
            condition_key="common_cold",
            probability=75,
            severity=DiagnosisSeverity.LOW,
            description_key="common_cold_desc",
            recommendations_keys=("get_rest", "stay_hydrated")
        )
    """
    condition_key: str = Field(..., min_length=1, description="Ключ перекладу стану")
    probability: int = Field(..., ge=0, le=100, description="Ймовірність у відсотках")
    severity: DiagnosisSeverity = Field(..., description="Рівень тяжкості")
    description_key: str = Field(..., description="Ключ перекладу опису")
    recommendations_keys: Tuple[str, ...] = Field(
        default=(),
        description="Ключі рекомендацій (впорядковані)"
    )

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "condition_key": "common_cold",
                "probability": 75,
                "severity": "low",
                "description_key": "common_cold_desc",
                "recommendations_keys": ["get_rest", "stay_hydrated", "otc_medicine", "monitor_symptoms"]
            }
        }


class ConsultationHandoff(BaseModel):
    """Контекст, що передається на екран консультації з лікарем"""
    reason: str = Field(default="symptom_assessment", description="Причина переходу")
    symptom_ids: Tuple[str, ...] = Field(default=(), description="Обрані симптоми")
    top_condition_key: Optional[str] = Field(default=None, description="Найімовірніший стан")

    class Config:
        frozen = True
