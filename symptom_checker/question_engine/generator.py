"""
Symptom Checker — Генератор питань

QuestionGenerator будує впорядковану послідовність питань для обраних
симптомів. Послідовність генерується один раз на прогін майстра і має
бути детермінованою: той самий набір симптомів → ті самі id, типи,
варіанти та порядок.

Стратегії:
1. BASELINE — фіксований базовий набір (тривалість, біль, ліки,
   хронічні стани, поточні ліки) незалежно від симптомів
2. SYMPTOM_AWARE — базовий набір + уточнення за категоріями/тяжкістю
"""

import logging
from dataclasses import dataclass
from typing import Callable, FrozenSet, List, Optional, Sequence, Tuple

from symptom_checker.config import QuestionEngineConfig, QuestionStrategy
from symptom_checker.errors import EmptySelectionError
from symptom_checker.schemas import Question, QuestionType, Symptom, SymptomSeverity

logger = logging.getLogger(__name__)


DURATION_OPTIONS: Tuple[str, ...] = ("less_24_hours", "1_3_days", "4_7_days", "more_week")
TEMPERATURE_OPTIONS: Tuple[str, ...] = ("below_38", "38_39", "above_39")


@dataclass(frozen=True)
class FollowUpRule:
    """Правило уточнюючого питання"""
    question_id: str
    question_key: str
    trigger: Callable[[FrozenSet[str], FrozenSet[str], bool], bool]
    type: QuestionType = QuestionType.BOOLEAN
    options_keys: Tuple[str, ...] = ()


# Аргументи trigger: (name_keys, categories, has_severe)
FOLLOW_UP_RULES: Tuple[FollowUpRule, ...] = (
    FollowUpRule(
        question_id="f1",
        question_key="sudden_onset",
        trigger=lambda keys, cats, severe: severe,
    ),
    FollowUpRule(
        question_id="f2",
        question_key="temperature_range",
        trigger=lambda keys, cats, severe: "fever" in keys,
        type=QuestionType.MULTIPLE_CHOICE,
        options_keys=TEMPERATURE_OPTIONS,
    ),
    FollowUpRule(
        question_id="f3",
        question_key="breathing_at_rest",
        trigger=lambda keys, cats, severe: "respiratory" in cats,
    ),
    FollowUpRule(
        question_id="f4",
        question_key="pain_radiates",
        trigger=lambda keys, cats, severe: "cardiovascular" in cats,
    ),
    FollowUpRule(
        question_id="f5",
        question_key="able_to_keep_fluids",
        trigger=lambda keys, cats, severe: "digestive" in cats,
    ),
    FollowUpRule(
        question_id="f6",
        question_key="vision_changes",
        trigger=lambda keys, cats, severe: "neurological" in cats,
    ),
)


class QuestionGenerator:
    """
    Генератор питань оцінювання.

    Приклад використання:
        generator = QuestionGenerator()

        questions = generator.generate(catalog.by_ids(["1", "3"]))
        for q in questions:
            print(q.id, q.question_key, q.type.value)
    """

    def __init__(self, config: Optional[QuestionEngineConfig] = None):
        self.config = config or QuestionEngineConfig()
        self._core = self._build_core_questions()

    @property
    def strategy(self) -> QuestionStrategy:
        return self.config.strategy

    def _build_core_questions(self) -> Tuple[Question, ...]:
        """Базовий набір питань"""
        return (
            Question(
                id="1",
                question_key="symptom_duration",
                type=QuestionType.MULTIPLE_CHOICE,
                options_keys=DURATION_OPTIONS,
            ),
            Question(
                id="2",
                question_key="pain_level",
                type=QuestionType.SCALE,
                scale_min=self.config.scale_min,
                scale_max=self.config.scale_max,
            ),
            Question(id="3", question_key="taken_medication", type=QuestionType.BOOLEAN),
            Question(id="4", question_key="existing_conditions", type=QuestionType.BOOLEAN),
            Question(id="5", question_key="current_medications", type=QuestionType.BOOLEAN),
        )

    @property
    def core_questions(self) -> List[Question]:
        return list(self._core)

    def generate(self, selected: Sequence[Symptom]) -> List[Question]:
        """
        Згенерувати питання для обраних симптомів.

        Args:
            selected: Обрані симптоми (непорожні)

        Returns:
            Впорядкований список питань

        Raises:
            EmptySelectionError: Якщо симптоми не обрано
        """
        if not selected:
            raise EmptySelectionError("Cannot generate questions for an empty symptom set")

        questions = list(self._core)

        if self.strategy == QuestionStrategy.SYMPTOM_AWARE:
            questions.extend(self._follow_ups(selected))

        logger.debug(
            "Generated %d questions for %d symptoms (strategy=%s)",
            len(questions), len(selected), self.strategy.value
        )
        return questions

    def _follow_ups(self, selected: Sequence[Symptom]) -> List[Question]:
        """Уточнюючі питання (фіксований порядок правил)"""
        keys = frozenset(s.name_key for s in selected)
        categories = frozenset(s.category for s in selected)
        has_severe = any(s.severity == SymptomSeverity.SEVERE for s in selected)

        questions = []
        for rule in FOLLOW_UP_RULES:
            if rule.trigger(keys, categories, has_severe):
                questions.append(Question(
                    id=rule.question_id,
                    question_key=rule.question_key,
                    type=rule.type,
                    options_keys=rule.options_keys,
                ))
        return questions

    def __repr__(self) -> str:
        return f"QuestionGenerator(strategy={self.strategy.value})"
