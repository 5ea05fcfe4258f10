"""
Symptom Checker — Збереження мовної настройки

Єдине значення під ключем LANGUAGE_KEY у key-value сховищі.
Збої сховища логуються та ігноруються: потік оцінювання ніколи не
блокується через мову, перекладач лишається на останній робочій мові.
"""

import json
import logging
import threading
from pathlib import Path
from typing import Dict, Optional

from .translator import Translator

logger = logging.getLogger(__name__)


LANGUAGE_KEY = "user-language"


class MemoryStore:
    """Key-value сховище в пам'яті"""

    def __init__(self, data: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JSONFileStore:
    """
    Key-value сховище в JSON файлі.

    Приклад:
        store = JSONFileStore("~/.symptom_checker/preferences.json")
        store.set("user-language", "pa")
    """

    def __init__(self, path: str):
        self.path = Path(path).expanduser()
        self._lock = threading.Lock()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Preferences file is not a JSON object: {self.path}")
        return data

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read()
            data[key] = value
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)


class LanguagePreferences:
    """
    Мовна настройка користувача.

    Приклад використання:
        prefs = LanguagePreferences(JSONFileStore(path), translator)
        prefs.load()                 # застосувати збережену мову
        prefs.change_language("pa")  # змінити та зберегти
    """

    def __init__(self, store, translator: Translator, default_language: str = "en"):
        self.store = store
        self.translator = translator
        self.default_language = default_language

    def saved_language(self) -> Optional[str]:
        """Збережена мова або None (збій читання → None)"""
        try:
            return self.store.get(LANGUAGE_KEY)
        except (OSError, ValueError) as e:
            logger.warning("Language preference read failed: %s", e)
            return None

    def initial_language(self, device_language: Optional[str] = None) -> str:
        """
        Мова при старті.

        Збережена → мова пристрою (якщо підтримується) → за замовчуванням.
        """
        saved = self.saved_language()
        if saved and saved in self.translator.supported_languages:
            return saved

        if device_language and device_language != self.default_language \
                and device_language in self.translator.supported_languages:
            return device_language

        return self.default_language

    def load(self, device_language: Optional[str] = None) -> str:
        """Застосувати початкову мову до перекладача"""
        language = self.initial_language(device_language)
        self.translator.change_language(language)
        return self.translator.language

    def change_language(self, language: str) -> str:
        """
        Змінити мову та зберегти.

        Raises:
            ValueError: Якщо мова не підтримується (перекладач не змінюється)
        """
        self.translator.change_language(language)

        try:
            self.store.set(LANGUAGE_KEY, language)
        except (OSError, ValueError) as e:
            logger.warning("Language preference write failed: %s", e)

        return self.translator.language
