"""
Symptom Checker — Схема питання

Pydantic моделі для:
- QuestionType: тип питання (boolean / scale / multiple-choice)
- Question: одне питання оцінювання, генерується на кожен прогін
"""

from typing import Optional, Tuple, Union
from enum import Enum
from pydantic import BaseModel, Field, model_validator

from symptom_checker.errors import AnswerContractError


# Значення відповіді залежить від типу питання
AnswerValue = Union[bool, int, str]


class QuestionType(str, Enum):
    """Тип питання"""
    BOOLEAN = "boolean"
    SCALE = "scale"
    MULTIPLE_CHOICE = "multiple-choice"

    @classmethod
    def _missing_(cls, value):
        # "multiple" — старе позначення з мобільного клієнта
        if isinstance(value, str) and value.lower() in ("multiple", "multiple_choice"):
            return cls.MULTIPLE_CHOICE
        return None


class Question(BaseModel):
    """
    Питання оцінювання.

    Приклад:
        question = Question(
            id="1",
            question_key="symptom_duration",
            type=QuestionType.MULTIPLE_CHOICE,
            options_keys=("less_24_hours", "1_3_days", "4_7_days", "more_week")
        )

        question.validate_answer("1_3_days")  # OK
        question.validate_answer(5)           # AnswerContractError
    """
    id: str = Field(..., min_length=1, description="Стабільний ідентифікатор")
    question_key: str = Field(..., min_length=1, description="Ключ перекладу тексту")
    type: QuestionType = Field(..., description="Тип питання")

    # Тільки для multiple-choice
    options_keys: Tuple[str, ...] = Field(
        default=(),
        description="Ключі варіантів відповіді (впорядковані)"
    )

    # Тільки для scale
    scale_min: Optional[int] = Field(default=None, description="Мінімум шкали")
    scale_max: Optional[int] = Field(default=None, description="Максимум шкали")

    @model_validator(mode="after")
    def check_type_payload(self) -> "Question":
        if self.type == QuestionType.MULTIPLE_CHOICE:
            if not self.options_keys:
                raise ValueError("multiple-choice question requires options_keys")
            if len(set(self.options_keys)) != len(self.options_keys):
                raise ValueError("options_keys must be unique")
        elif self.options_keys:
            raise ValueError(f"options_keys are only allowed for multiple-choice, got {self.type.value}")

        if self.type == QuestionType.SCALE:
            if self.scale_min is None or self.scale_max is None:
                raise ValueError("scale question requires scale_min and scale_max")
            if self.scale_min >= self.scale_max:
                raise ValueError("scale_min must be lower than scale_max")
        elif self.scale_min is not None or self.scale_max is not None:
            raise ValueError("scale bounds are only allowed for scale questions")

        return self

    def validate_answer(self, value: AnswerValue) -> AnswerValue:
        """
        Перевірити відповідь на відповідність типу питання.

        Args:
            value: Відповідь користувача

        Returns:
            Ту саму відповідь

        Raises:
            AnswerContractError: Якщо тип або діапазон не збігаються
        """
        if self.type == QuestionType.BOOLEAN:
            if not isinstance(value, bool):
                raise AnswerContractError(
                    f"Question {self.id} expects a boolean, got {value!r}"
                )

        elif self.type == QuestionType.SCALE:
            # bool є підкласом int — відкидаємо явно
            if isinstance(value, bool) or not isinstance(value, int):
                raise AnswerContractError(
                    f"Question {self.id} expects an integer, got {value!r}"
                )
            if not self.scale_min <= value <= self.scale_max:
                raise AnswerContractError(
                    f"Question {self.id} expects {self.scale_min}..{self.scale_max}, got {value}"
                )

        else:
            if not isinstance(value, str) or value not in self.options_keys:
                raise AnswerContractError(
                    f"Question {self.id} expects one of {list(self.options_keys)}, got {value!r}"
                )

        return value

    @property
    def scale_values(self) -> Tuple[int, ...]:
        """Всі допустимі значення шкали (порожньо для інших типів)"""
        if self.type != QuestionType.SCALE:
            return ()
        return tuple(range(self.scale_min, self.scale_max + 1))

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "id": "2",
                "question_key": "pain_level",
                "type": "scale",
                "scale_min": 1,
                "scale_max": 10
            }
        }
