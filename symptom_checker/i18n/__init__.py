"""
Symptom Checker — Локалізація (i18n)

Компоненти:
- Translator: ключ → текст з fallback на англійську
- LanguagePreferences: збереження вибраної мови
- MemoryStore / JSONFileStore: key-value сховища

Приклад використання:
    from symptom_checker.i18n import Translator, LanguagePreferences, MemoryStore

    translator = Translator()
    prefs = LanguagePreferences(MemoryStore(), translator)
    prefs.change_language("pa")

    print(translator.t("fever"))
"""

from .translator import (
    LOCALES_DIR,
    SUPPORTED_LANGUAGES,
    Translator,
    load_resources,
)
from .preferences import (
    LANGUAGE_KEY,
    JSONFileStore,
    LanguagePreferences,
    MemoryStore,
)


__all__ = [
    "LOCALES_DIR",
    "SUPPORTED_LANGUAGES",
    "Translator",
    "load_resources",
    "LANGUAGE_KEY",
    "JSONFileStore",
    "LanguagePreferences",
    "MemoryStore",
]
