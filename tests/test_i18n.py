"""
Тести для модуля i18n

Запуск: pytest tests/test_i18n.py -v
Або демо: python tests/test_i18n.py
"""

import json

import pytest


class FailingStore:
    """Сховище, яке завжди падає"""

    def get(self, key):
        raise OSError("storage unavailable")

    def set(self, key, value):
        raise OSError("storage unavailable")


def test_translator_lookup():
    """Переклад з fallback на англійську"""
    from symptom_checker.i18n import Translator

    translator = Translator(language="pa")

    assert translator.t("fever") == "ਬੁਖਾਰ"
    assert translator("fever") == "ਬੁਖਾਰ"
    assert translator.t("pain_level").startswith("On a scale")   # fallback
    assert translator.t("unknown_key") == "unknown_key"
    assert translator.has("pain_level")
    assert not translator.has("unknown_key")

    print(f"✓ {translator!r}: fever → {translator.t('fever')}")


def test_all_keys_have_english_text():
    """Кожен ключ каталогу, питань та станів має англійський текст"""
    from symptom_checker.catalog import default_catalog
    from symptom_checker.config import QuestionEngineConfig, QuestionStrategy
    from symptom_checker.diagnosis_engine import CONDITION_PROFILES, EMERGENCY_RECOMMENDATION
    from symptom_checker.i18n import load_resources
    from symptom_checker.question_engine import FOLLOW_UP_RULES, QuestionGenerator
    from symptom_checker.wizard import NO_SYMPTOMS_NOTICE, TITLE_KEYS

    english = load_resources(["en"])["en"]

    keys = {s.name_key for s in default_catalog}
    generator = QuestionGenerator(QuestionEngineConfig(strategy=QuestionStrategy.SYMPTOM_AWARE))
    for q in generator.core_questions:
        keys.add(q.question_key)
        keys.update(q.options_keys)
    for rule in FOLLOW_UP_RULES:
        keys.add(rule.question_key)
        keys.update(rule.options_keys)
    for profile in CONDITION_PROFILES:
        keys.update([profile.condition_key, profile.description_key])
        keys.update(profile.recommendations_keys)
    keys.update(TITLE_KEYS.values())
    keys.update([NO_SYMPTOMS_NOTICE.title_key, NO_SYMPTOMS_NOTICE.message_key, EMERGENCY_RECOMMENDATION])

    missing = sorted(k for k in keys if k not in english)
    assert missing == []

    print(f"✓ {len(keys)} keys translated")


def test_change_language():
    """Зміна мови; непідтримувана мова відкидається"""
    from symptom_checker.i18n import Translator

    translator = Translator()
    assert translator.language == "en"
    assert translator.supported_languages == ("en", "pa")

    translator.change_language("pa")
    assert translator.language == "pa"

    with pytest.raises(ValueError):
        translator.change_language("de")
    assert translator.language == "pa"

    print(f"✓ Language: {translator.language}")


def test_custom_resources():
    """Власні ресурси; fallback мова обов'язкова"""
    from symptom_checker.i18n import Translator

    translator = Translator(resources={"en": {"hello": "Hello"}, "uk": {"hello": "Привіт"}}, language="uk")
    assert translator.t("hello") == "Привіт"

    with pytest.raises(ValueError):
        Translator(resources={"uk": {}}, fallback_language="en")

    print("✓ Custom resources")


def test_preferences_roundtrip(tmp_path):
    """Мова зберігається та відновлюється"""
    from symptom_checker.i18n import JSONFileStore, LanguagePreferences, Translator, LANGUAGE_KEY

    path = tmp_path / "prefs.json"

    prefs = LanguagePreferences(JSONFileStore(str(path)), Translator())
    assert prefs.load() == "en"

    prefs.change_language("pa")
    assert json.loads(path.read_text(encoding="utf-8")) == {LANGUAGE_KEY: "pa"}

    # Новий запуск
    translator = Translator()
    assert LanguagePreferences(JSONFileStore(str(path)), translator).load() == "pa"
    assert translator.language == "pa"

    print(f"✓ Saved language restored from {path.name}")


def test_initial_language():
    """Збережена → мова пристрою → за замовчуванням"""
    from symptom_checker.i18n import LanguagePreferences, MemoryStore, Translator, LANGUAGE_KEY

    prefs = LanguagePreferences(MemoryStore(), Translator())
    assert prefs.initial_language() == "en"
    assert prefs.initial_language("pa") == "pa"
    assert prefs.initial_language("fr") == "en"

    saved = LanguagePreferences(MemoryStore({LANGUAGE_KEY: "en"}), Translator())
    assert saved.initial_language("pa") == "en"

    unsupported = LanguagePreferences(MemoryStore({LANGUAGE_KEY: "xx"}), Translator())
    assert unsupported.initial_language() == "en"

    print("✓ Initial language resolution")


def test_storage_failures_are_ignored():
    """Збій сховища не блокує зміну мови"""
    from symptom_checker.i18n import LanguagePreferences, Translator

    translator = Translator()
    prefs = LanguagePreferences(FailingStore(), translator)

    assert prefs.load() == "en"
    assert prefs.change_language("pa") == "pa"
    assert translator.language == "pa"

    print("✓ Storage failures ignored")


def test_corrupted_preferences_file(tmp_path):
    """Пошкоджений файл настройок — мова за замовчуванням"""
    from symptom_checker.i18n import JSONFileStore, LanguagePreferences, Translator

    path = tmp_path / "prefs.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")

    prefs = LanguagePreferences(JSONFileStore(str(path)), Translator())

    assert prefs.saved_language() is None
    assert prefs.load() == "en"

    print("✓ Corrupted file ignored")


def test_unsupported_language_not_saved():
    """Непідтримувана мова: ValueError, нічого не зберігається"""
    from symptom_checker.i18n import LanguagePreferences, MemoryStore, Translator, LANGUAGE_KEY

    store = MemoryStore()
    prefs = LanguagePreferences(store, Translator())

    with pytest.raises(ValueError):
        prefs.change_language("de")
    assert store.get(LANGUAGE_KEY) is None

    print("✓ Unsupported language rejected")


def demo():
    """Повна демонстрація модуля i18n"""
    print("=" * 60)
    print("Symptom Checker — Демонстрація локалізації")
    print("=" * 60)

    test_translator_lookup()
    test_all_keys_have_english_text()
    test_change_language()
    test_custom_resources()
    test_initial_language()
    test_storage_failures_are_ignored()
    test_unsupported_language_not_saved()

    print("\n" + "=" * 60)
    print("✅ Всі тести пройдено успішно!")
    print("=" * 60)


if __name__ == "__main__":
    demo()
