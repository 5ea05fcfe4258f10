"""
Symptom Checker — Переклад ключів

Translator перетворює стабільні ключі на локалізований текст.
Порядок пошуку: активна мова → мова за замовчуванням → сам ключ.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, Optional

logger = logging.getLogger(__name__)


LOCALES_DIR = Path(__file__).parent / "locales"
SUPPORTED_LANGUAGES = ("en", "pa")


def load_resources(
    languages: Iterable[str] = SUPPORTED_LANGUAGES,
    locales_dir: Optional[Path] = None
) -> Dict[str, Dict[str, str]]:
    """
    Завантажити JSON ресурси перекладів.

    Args:
        languages: Коди мов
        locales_dir: Папка з <lang>.json

    Returns:
        {lang: {key: text}}
    """
    locales_dir = Path(locales_dir) if locales_dir else LOCALES_DIR
    resources = {}

    for lang in languages:
        path = locales_dir / f"{lang}.json"
        with open(path, "r", encoding="utf-8") as f:
            resources[lang] = json.load(f)

    return resources


class Translator:
    """
    Переклад ключів у текст.

    Приклад використання:
        translator = Translator(language="pa")

        translator.t("fever")          # "ਬੁਖਾਰ"
        translator.t("pain_level")     # англійський текст (fallback)
        translator.t("unknown_key")    # "unknown_key"
    """

    def __init__(
        self,
        language: str = "en",
        fallback_language: str = "en",
        resources: Optional[Dict[str, Dict[str, str]]] = None
    ):
        self.resources = resources if resources is not None else load_resources()

        if fallback_language not in self.resources:
            raise ValueError(f"No resources for fallback language: {fallback_language}")

        self.fallback_language = fallback_language
        self._language = fallback_language
        self.change_language(language)

    @property
    def language(self) -> str:
        return self._language

    @property
    def supported_languages(self) -> tuple:
        return tuple(self.resources.keys())

    def change_language(self, language: str) -> None:
        """
        Змінити активну мову.

        Raises:
            ValueError: Якщо мова не підтримується
        """
        if language not in self.resources:
            raise ValueError(f"Unsupported language: {language}")
        if language != self._language:
            logger.debug("Language changed: %s → %s", self._language, language)
        self._language = language

    def t(self, key: str) -> str:
        """Перекласти ключ"""
        text = self.resources[self._language].get(key)
        if text is None:
            text = self.resources[self.fallback_language].get(key, key)
        return text

    def has(self, key: str) -> bool:
        return any(key in table for table in self.resources.values())

    def __call__(self, key: str) -> str:
        return self.t(key)

    def __repr__(self) -> str:
        return f"Translator(language={self._language}, fallback={self.fallback_language})"
