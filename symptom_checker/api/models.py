"""
Symptom Checker API — Pydantic Models

Моделі для запитів та відповідей REST API.
Всі ключі вже перекладені активною мовою.
"""

from typing import Dict, List, Optional, Union
from pydantic import BaseModel, Field

from symptom_checker.wizard import WizardPhase


# === Request Models ===

class CreateSessionRequest(BaseModel):
    """Запит на створення сесії"""
    symptoms: List[str] = Field(
        default_factory=list,
        description="Початково обрані id симптомів",
        examples=[["1", "3"]]
    )


class AnswerRequest(BaseModel):
    """Відповідь на поточне питання"""
    value: Union[bool, int, str] = Field(
        ...,
        description="true/false, число шкали або ключ варіанту",
        examples=["1_3_days", 5, False]
    )


class LanguageRequest(BaseModel):
    """Зміна мови"""
    language: str = Field(..., description="Код мови (en, pa)")


# === Response Models ===

class SymptomInfo(BaseModel):
    """Симптом каталогу"""
    id: str
    name_key: str
    name: str
    severity: str
    severity_label: str
    category: str
    icon: str


class OptionView(BaseModel):
    key: str
    text: str


class QuestionView(BaseModel):
    """Поточне питання"""
    id: str
    question_key: str
    text: str
    type: str
    options: List[OptionView] = Field(default_factory=list)
    scale_min: Optional[int] = None
    scale_max: Optional[int] = None
    scale_min_label: Optional[str] = None
    scale_max_label: Optional[str] = None


class ProgressView(BaseModel):
    current: int
    total: int
    fraction: float
    label: str


class DiagnosisView(BaseModel):
    """Ймовірний стан"""
    condition_key: str
    condition: str
    probability: int
    severity: str
    description: str
    recommendations: List[str]


class NoticeView(BaseModel):
    title_key: str
    title: str
    message: str


class SessionState(BaseModel):
    """Стан сесії майстра"""
    session_id: str
    phase: WizardPhase
    title: str
    language: str
    generation: int
    selected_symptoms: List[SymptomInfo] = Field(default_factory=list)
    current_question: Optional[QuestionView] = None
    progress: Optional[ProgressView] = None
    answers: List[Union[bool, int, str]] = Field(default_factory=list)
    is_analyzing: bool = False
    diagnoses: List[DiagnosisView] = Field(default_factory=list)
    disclaimer: Optional[str] = None
    notice: Optional[NoticeView] = None
    created_at: str
    updated_at: str


class TransitionResponse(BaseModel):
    """Результат тригера"""
    accepted: bool
    session_state: SessionState


class ConsultationResponse(BaseModel):
    """Передача на консультацію"""
    route: str
    reason: str
    symptom_ids: List[str]
    top_condition_key: Optional[str] = None


class LanguageResponse(BaseModel):
    language: str
    supported: List[str]


class TextsResponse(BaseModel):
    """Всі UI тексти активною мовою"""
    language: str
    texts: Dict[str, str]


class HealthResponse(BaseModel):
    """Health check response"""
    status: str = "ok"
    version: str = "1.0.0"
    catalog_symptoms: int = 0
    question_strategy: str = "baseline"
    active_sessions: int = 0

    class Config:
        json_schema_extra = {
            "example": {
                "status": "ok",
                "version": "1.0.0",
                "catalog_symptoms": 10,
                "question_strategy": "baseline",
                "active_sessions": 2
            }
        }
