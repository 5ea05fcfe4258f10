"""
Тести для модуля question_engine

Запуск: pytest tests/test_question_engine.py -v
Або демо: python tests/test_question_engine.py
"""

import pytest


def _symptoms(*ids):
    from symptom_checker.catalog import default_catalog
    return default_catalog.by_ids(ids)


def test_baseline_questions():
    """Базовий набір: 5 питань у фіксованому порядку"""
    from symptom_checker.question_engine import QuestionGenerator, DURATION_OPTIONS
    from symptom_checker.schemas import QuestionType

    generator = QuestionGenerator()
    questions = generator.generate(_symptoms("1", "3"))

    assert [q.id for q in questions] == ["1", "2", "3", "4", "5"]
    assert [q.question_key for q in questions] == [
        "symptom_duration",
        "pain_level",
        "taken_medication",
        "existing_conditions",
        "current_medications",
    ]
    assert [q.type for q in questions] == [
        QuestionType.MULTIPLE_CHOICE,
        QuestionType.SCALE,
        QuestionType.BOOLEAN,
        QuestionType.BOOLEAN,
        QuestionType.BOOLEAN,
    ]
    assert questions[0].options_keys == DURATION_OPTIONS
    assert (questions[1].scale_min, questions[1].scale_max) == (1, 10)

    print(f"✓ Baseline: {[q.question_key for q in questions]}")


def test_generation_is_deterministic():
    """Той самий набір симптомів → та сама послідовність"""
    from symptom_checker.config import QuestionEngineConfig, QuestionStrategy
    from symptom_checker.question_engine import QuestionGenerator

    for strategy in QuestionStrategy:
        generator = QuestionGenerator(QuestionEngineConfig(strategy=strategy))

        first = generator.generate(_symptoms("5", "1", "6"))
        second = QuestionGenerator(QuestionEngineConfig(strategy=strategy)).generate(_symptoms("5", "1", "6"))

        assert first == second
        print(f"✓ Deterministic ({strategy.value}): {len(first)} questions")


def test_baseline_ignores_symptoms():
    """BASELINE не залежить від набору симптомів"""
    from symptom_checker.question_engine import QuestionGenerator

    generator = QuestionGenerator()

    assert generator.generate(_symptoms("1")) == generator.generate(_symptoms("5", "9"))

    print("✓ Baseline is symptom-independent")


def test_empty_selection():
    """Порожній набір — порушення контракту"""
    from symptom_checker.errors import EmptySelectionError
    from symptom_checker.question_engine import QuestionGenerator

    with pytest.raises(EmptySelectionError):
        QuestionGenerator().generate([])

    print("✓ Empty selection rejected")


def test_symptom_aware_follow_ups():
    """SYMPTOM_AWARE: базовий набір + уточнення"""
    from symptom_checker.config import QuestionEngineConfig, QuestionStrategy
    from symptom_checker.question_engine import QuestionGenerator
    from symptom_checker.schemas import QuestionType

    generator = QuestionGenerator(QuestionEngineConfig(strategy=QuestionStrategy.SYMPTOM_AWARE))

    # fever + cough: температура, дихання
    questions = generator.generate(_symptoms("1", "3"))
    keys = [q.question_key for q in questions]

    assert keys[:5] == [q.question_key for q in generator.core_questions]
    assert keys[5:] == ["temperature_range", "breathing_at_rest"]
    assert questions[5].type == QuestionType.MULTIPLE_CHOICE

    print(f"✓ fever+cough follow-ups: {keys[5:]}")

    # chest_pain (severe, cardiovascular)
    keys = [q.question_key for q in generator.generate(_symptoms("5"))]
    assert keys[5:] == ["sudden_onset", "pain_radiates"]

    print(f"✓ chest_pain follow-ups: {keys[5:]}")

    # fatigue — без уточнень
    assert len(generator.generate(_symptoms("7"))) == 5

    print("✓ fatigue: no follow-ups")


def test_follow_up_order_independent_of_selection_order():
    """Порядок уточнень не залежить від порядку вибору"""
    from symptom_checker.config import QuestionEngineConfig, QuestionStrategy
    from symptom_checker.question_engine import QuestionGenerator

    generator = QuestionGenerator(QuestionEngineConfig(strategy=QuestionStrategy.SYMPTOM_AWARE))

    a = generator.generate(_symptoms("2", "6", "9"))
    b = generator.generate(_symptoms("9", "6", "2"))

    assert a == b
    assert len({q.id for q in a}) == len(a)

    print(f"✓ Follow-ups: {[q.question_key for q in a[5:]]}")


def test_custom_scale():
    """Межі шкали з конфігурації"""
    from symptom_checker.config import QuestionEngineConfig
    from symptom_checker.question_engine import QuestionGenerator

    generator = QuestionGenerator(QuestionEngineConfig(scale_min=0, scale_max=5))
    pain = generator.generate(_symptoms("2"))[1]

    assert pain.scale_values == (0, 1, 2, 3, 4, 5)

    print(f"✓ Custom scale: {pain.scale_min}..{pain.scale_max}")


def demo():
    """Повна демонстрація модуля question_engine"""
    print("=" * 60)
    print("Symptom Checker — Демонстрація генератора питань")
    print("=" * 60)

    test_baseline_questions()
    test_generation_is_deterministic()
    test_baseline_ignores_symptoms()
    test_empty_selection()
    test_symptom_aware_follow_ups()
    test_follow_up_order_independent_of_selection_order()
    test_custom_scale()

    print("\n" + "=" * 60)
    print("✅ Всі тести пройдено успішно!")
    print("=" * 60)


if __name__ == "__main__":
    demo()
