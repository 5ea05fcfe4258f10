"""
Symptom Checker — Модуль Question Engine

Генерує послідовність питань для оцінювання симптомів.

Приклад використання:
    from symptom_checker.question_engine import QuestionGenerator
    from symptom_checker.config import QuestionEngineConfig, QuestionStrategy

    generator = QuestionGenerator(
        QuestionEngineConfig(strategy=QuestionStrategy.SYMPTOM_AWARE)
    )
    questions = generator.generate(selected_symptoms)
"""

from .generator import (
    QuestionGenerator,
    FollowUpRule,
    FOLLOW_UP_RULES,
    DURATION_OPTIONS,
    TEMPERATURE_OPTIONS,
)


__all__ = [
    "QuestionGenerator",
    "FollowUpRule",
    "FOLLOW_UP_RULES",
    "DURATION_OPTIONS",
    "TEMPERATURE_OPTIONS",
]
