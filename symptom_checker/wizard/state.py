"""
Symptom Checker — Стан майстра оцінювання

Стан майстра — це тегований union: тег фази + дані, допустимі лише в
цій фазі. Неможливі комбінації (наприклад, RESULTS без питань)
неможливо навіть сконструювати.

    SymptomsPhase   → обрані симптоми
    QuestionsPhase  → + питання, відповіді, поточний індекс
    AnalyzingPhase  → + повний набір відповідей, квиток аналізу
    ResultsPhase    → + ранжовані діагнози
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

from symptom_checker.schemas import AnswerValue, Diagnosis, Question


class WizardPhase(str, Enum):
    """Фаза майстра"""
    SYMPTOMS = "symptoms"
    QUESTIONS = "questions"
    ANALYZING = "analyzing"
    RESULTS = "results"


@dataclass(frozen=True)
class Notice:
    """Повідомлення для користувача (ключі перекладу)"""
    title_key: str
    message_key: str


NO_SYMPTOMS_NOTICE = Notice(title_key="no_symptoms", message_key="select_symptoms_msg")


@dataclass(frozen=True)
class AnalysisTicket:
    """Квиток відкладеного аналізу, прив'язаний до покоління сесії"""
    generation: int


@dataclass
class SymptomsPhase:
    selected: Tuple[str, ...] = ()

    phase = WizardPhase.SYMPTOMS


@dataclass
class QuestionsPhase:
    selected: Tuple[str, ...]
    questions: Tuple[Question, ...]
    answers: List[AnswerValue] = field(default_factory=list)
    index: int = 0

    phase = WizardPhase.QUESTIONS

    def __post_init__(self):
        if not self.selected:
            raise ValueError("QUESTIONS phase requires selected symptoms")
        if not self.questions:
            raise ValueError("QUESTIONS phase requires generated questions")
        self.check_invariants()

    def check_invariants(self) -> None:
        """len(answers) ≤ index + 1 ≤ len(questions)"""
        if not len(self.answers) <= self.index + 1 <= len(self.questions):
            raise AssertionError(
                f"Answer/index invariant broken: answers={len(self.answers)}, "
                f"index={self.index}, questions={len(self.questions)}"
            )

    @property
    def current_question(self) -> Question:
        return self.questions[self.index]

    @property
    def is_last(self) -> bool:
        return self.index + 1 == len(self.questions)


@dataclass
class AnalyzingPhase:
    selected: Tuple[str, ...]
    questions: Tuple[Question, ...]
    answers: Tuple[AnswerValue, ...]
    ticket: AnalysisTicket

    phase = WizardPhase.ANALYZING

    def __post_init__(self):
        if len(self.answers) != len(self.questions):
            raise ValueError("ANALYZING phase requires an answer for every question")


@dataclass
class ResultsPhase:
    selected: Tuple[str, ...]
    questions: Tuple[Question, ...]
    answers: Tuple[AnswerValue, ...]
    diagnoses: Tuple[Diagnosis, ...]

    phase = WizardPhase.RESULTS

    def __post_init__(self):
        if not self.diagnoses:
            raise ValueError("RESULTS phase requires at least one diagnosis")
        probs = [d.probability for d in self.diagnoses]
        if any(a < b for a, b in zip(probs, probs[1:])):
            raise ValueError("Diagnoses must be sorted by descending probability")

    @property
    def top_diagnosis(self) -> Diagnosis:
        return self.diagnoses[0]


WizardState = Union[SymptomsPhase, QuestionsPhase, AnalyzingPhase, ResultsPhase]


@dataclass(frozen=True)
class TransitionResult:
    """Результат тригера майстра"""
    accepted: bool
    phase: WizardPhase
    notice: Optional[Notice] = None
