"""
Symptom Checker — Модуль схем даних (schemas)

Pydantic моделі для валідації та серіалізації даних.

Компоненти:
- symptom.py: SymptomSeverity, Symptom
- question.py: QuestionType, Question, AnswerValue
- diagnosis.py: DiagnosisSeverity, Diagnosis, ConsultationHandoff

Приклад використання:
    from symptom_checker.schemas import Question, QuestionType

    question = Question(
        id="3",
        question_key="taken_medication",
        type=QuestionType.BOOLEAN
    )
    question.validate_answer(False)
"""

from .symptom import (
    SymptomSeverity,
    Symptom,
)

from .question import (
    AnswerValue,
    QuestionType,
    Question,
)

from .diagnosis import (
    DiagnosisSeverity,
    Diagnosis,
    ConsultationHandoff,
)


__all__ = [
    # Symptom
    "SymptomSeverity",
    "Symptom",

    # Question
    "AnswerValue",
    "QuestionType",
    "Question",

    # Diagnosis
    "DiagnosisSeverity",
    "Diagnosis",
    "ConsultationHandoff",
]
