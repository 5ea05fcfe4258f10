"""Symptom Checker — Завантаження конфігурації"""
import yaml
from enum import Enum
from pathlib import Path
from dataclasses import asdict
from typing import Any, Dict

from .settings import (
    SymptomCheckerConfig,
    WizardConfig,
    QuestionEngineConfig,
    ScorerConfig,
    I18nConfig,
)


def _plain(value: Any) -> Any:
    """Enum та tuple → прості типи для YAML"""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def config_to_dict(config: SymptomCheckerConfig) -> Dict[str, Any]:
    return _plain(asdict(config))


def config_from_dict(data: Dict[str, Any]) -> SymptomCheckerConfig:
    """Відновити dataclass-и з словника (невідомі секції ігноруються)"""
    data = dict(data or {})
    return SymptomCheckerConfig(
        version=data.get("version", "1.0.0"),
        project_name=data.get("project_name", "Symptom Checker"),
        wizard=WizardConfig(**data.get("wizard", {})),
        question_engine=QuestionEngineConfig(**data.get("question_engine", {})),
        scorer=ScorerConfig(**data.get("scorer", {})),
        i18n=I18nConfig(**data.get("i18n", {})),
    )


def save_yaml(config: SymptomCheckerConfig, path: str) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config_to_dict(config), f, default_flow_style=False, allow_unicode=True)


def load_yaml(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def save_config(config: SymptomCheckerConfig, path: str) -> None:
    save_yaml(config, path)


def load_config(path: str) -> SymptomCheckerConfig:
    return config_from_dict(load_yaml(path))
