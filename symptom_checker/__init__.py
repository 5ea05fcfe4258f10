"""
Symptom Checker — Майстер оцінювання симптомів для телемедицини

Потік: вибір симптомів → питання → аналіз → ймовірні стани з рекомендаціями

Модулі:
- config: Конфігурація системи
- schemas: Моделі даних (Symptom, Question, Diagnosis)
- catalog: Каталог симптомів
- question_engine: Генерація питань
- diagnosis_engine: Оцінювання станів
- wizard: Кінцевий автомат майстра та прогрес
- i18n: Переклад ключів та мовна настройка
- api: Backend API
- web_ui: Веб-інтерфейс
"""

__version__ = "1.0.0"

from .config import SymptomCheckerConfig, get_default_config
