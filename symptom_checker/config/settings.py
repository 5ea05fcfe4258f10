"""
Symptom Checker — Налаштування системи

Всі параметри системи зібрані в dataclass-и для:
- Типізації та валідації
- Легкого доступу через config.wizard.analyzing_delay_seconds
- Серіалізації в YAML/JSON
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple
from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================

class QuestionStrategy(str, Enum):
    """Політика генерації питань"""
    BASELINE = "baseline"              # фіксований базовий набір
    SYMPTOM_AWARE = "symptom_aware"    # базовий набір + уточнення за категоріями


# =============================================================================
# WIZARD CONFIGURATION
# =============================================================================

@dataclass
class WizardConfig:
    """Параметри майстра оцінювання"""

    # Імітована затримка фази ANALYZING
    analyzing_delay_seconds: float = 2.0

    # Маршрут екрану живої консультації
    consultation_route: str = "doctor-call"

    def __post_init__(self):
        if self.analyzing_delay_seconds < 0:
            raise ValueError("analyzing_delay_seconds must be >= 0")


# =============================================================================
# QUESTION ENGINE CONFIGURATION
# =============================================================================

@dataclass
class QuestionEngineConfig:
    """Параметри генератора питань"""

    strategy: QuestionStrategy = QuestionStrategy.BASELINE

    # Шкала болю 1..10
    scale_min: int = 1
    scale_max: int = 10

    def __post_init__(self):
        self.strategy = QuestionStrategy(self.strategy)
        if self.scale_min >= self.scale_max:
            raise ValueError("scale_min must be lower than scale_max")


# =============================================================================
# SCORER CONFIGURATION
# =============================================================================

@dataclass
class ScorerConfig:
    """Параметри оцінювача діагнозів"""

    max_results: int = 3

    # Вплив відповідей
    long_duration_bonus: int = 10      # симптоми тривають 4+ днів
    high_pain_threshold: int = 7
    high_pain_bonus: int = 10
    medication_penalty: int = 5        # вже приймав ліки

    def __post_init__(self):
        if self.max_results < 1:
            raise ValueError("max_results must be >= 1")


# =============================================================================
# I18N CONFIGURATION
# =============================================================================

@dataclass
class I18nConfig:
    """Параметри локалізації"""

    default_language: str = "en"
    fallback_language: str = "en"
    supported_languages: Tuple[str, ...] = ("en", "pa")

    # Файл збереження мовної настройки (None = тільки в пам'яті)
    preferences_path: Optional[str] = None

    def __post_init__(self):
        self.supported_languages = tuple(self.supported_languages)
        if self.default_language not in self.supported_languages:
            raise ValueError(f"Unsupported default language: {self.default_language}")


# =============================================================================
# MAIN CONFIGURATION
# =============================================================================

@dataclass
class SymptomCheckerConfig:
    """
    Головна конфігурація Symptom Checker

    Приклад використання:
        config = SymptomCheckerConfig()
        print(config.wizard.analyzing_delay_seconds)  # 2.0
        print(config.question_engine.scale_max)       # 10
    """

    # Метадані
    version: str = "1.0.0"
    project_name: str = "Symptom Checker"

    # Компоненти
    wizard: WizardConfig = field(default_factory=WizardConfig)
    question_engine: QuestionEngineConfig = field(default_factory=QuestionEngineConfig)
    scorer: ScorerConfig = field(default_factory=ScorerConfig)
    i18n: I18nConfig = field(default_factory=I18nConfig)


# =============================================================================
# DEFAULT CONFIG INSTANCE
# =============================================================================

def get_default_config() -> SymptomCheckerConfig:
    """Отримати конфігурацію за замовчуванням"""
    return SymptomCheckerConfig()
