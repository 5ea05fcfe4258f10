"""
Symptom Checker — Схема симптому

Symptom — елемент статичного каталогу. Завантажується один раз,
ніколи не змінюється.
"""

from enum import Enum
from pydantic import BaseModel, Field, field_validator


class SymptomSeverity(str, Enum):
    """Тяжкість симптому"""
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class Symptom(BaseModel):
    """
    Симптом, який користувач може обрати.

    Приклад:
        symptom = Symptom(
            id="1",
            name_key="fever",
            severity=SymptomSeverity.MODERATE,
            category="general",
            icon="thermometer"
        )
    """
    id: str = Field(..., min_length=1, description="Стабільний ідентифікатор")
    name_key: str = Field(..., min_length=1, description="Ключ перекладу назви")
    severity: SymptomSeverity = Field(..., description="Тяжкість")
    category: str = Field(..., description="Категорія (вільний тег)")
    icon: str = Field(default="medical", description="Назва іконки")

    @field_validator("category")
    @classmethod
    def normalize_category(cls, v: str) -> str:
        return v.strip().lower()

    @property
    def is_severe(self) -> bool:
        return self.severity == SymptomSeverity.SEVERE

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "id": "1",
                "name_key": "fever",
                "severity": "moderate",
                "category": "general",
                "icon": "thermometer"
            }
        }
