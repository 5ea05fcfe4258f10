"""Symptom Checker — Модуль конфігурації"""
from .settings import (
    SymptomCheckerConfig,
    get_default_config,
    WizardConfig,
    QuestionEngineConfig,
    ScorerConfig,
    I18nConfig,
    QuestionStrategy,
)
from .loader import (
    save_config,
    load_config,
    save_yaml,
    load_yaml,
    config_to_dict,
    config_from_dict,
)

__all__ = [
    "SymptomCheckerConfig",
    "get_default_config",
    "WizardConfig",
    "QuestionEngineConfig",
    "ScorerConfig",
    "I18nConfig",
    "QuestionStrategy",
    "save_config",
    "load_config",
    "save_yaml",
    "load_yaml",
    "config_to_dict",
    "config_from_dict",
]
