"""
Symptom Checker — Майстер оцінювання симптомів

AssessmentWizard — кінцевий автомат потоку:

    SYMPTOMS ──start──▶ QUESTIONS ──останнє answer──▶ ANALYZING ──(затримка)──▶ RESULTS
        ▲                  │ back (index == 0)                                   │
        └──────────────────┴─────────────────────── restart ─────────────────────┘

Майстер володіє всім змінним станом сесії і викликає:
- QuestionGenerator — рівно один раз, на переході SYMPTOMS → QUESTIONS
- DiagnosisScorer — рівно один раз, на переході ANALYZING → RESULTS

Відкладений аналіз прив'язаний до покоління сесії (generation). Кожне
скидання збільшує покоління, тож запізнілий результат для старої сесії
нічого не змінює.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional, Tuple

from symptom_checker.catalog import SymptomCatalog, default_catalog
from symptom_checker.config import WizardConfig
from symptom_checker.diagnosis_engine import DiagnosisScorer
from symptom_checker.errors import InvalidTransitionError
from symptom_checker.question_engine import QuestionGenerator
from symptom_checker.schemas import (
    AnswerValue,
    ConsultationHandoff,
    Diagnosis,
    Question,
    Symptom,
)
from .navigation import Navigator
from .progress import Progress, progress_for
from .state import (
    NO_SYMPTOMS_NOTICE,
    AnalysisTicket,
    AnalyzingPhase,
    Notice,
    QuestionsPhase,
    ResultsPhase,
    SymptomsPhase,
    TransitionResult,
    WizardPhase,
    WizardState,
)

logger = logging.getLogger(__name__)


TITLE_KEYS = {
    WizardPhase.SYMPTOMS: "symptom_checker",
    WizardPhase.QUESTIONS: "health_assessment",
    WizardPhase.ANALYZING: "health_assessment",
    WizardPhase.RESULTS: "your_results",
}


class AssessmentWizard:
    """
    Майстер оцінювання симптомів.

    Приклад використання:
        wizard = AssessmentWizard()

        wizard.toggle("1")   # fever
        wizard.toggle("3")   # cough
        wizard.start_assessment()

        while wizard.phase == WizardPhase.QUESTIONS:
            question = wizard.current_question
            wizard.answer(pick_answer(question))

        asyncio.run(wizard.run_analysis())

        for d in wizard.diagnoses:
            print(d.condition_key, d.probability)
    """

    def __init__(
        self,
        catalog: Optional[SymptomCatalog] = None,
        generator: Optional[QuestionGenerator] = None,
        scorer: Optional[DiagnosisScorer] = None,
        navigator: Optional[Navigator] = None,
        config: Optional[WizardConfig] = None
    ):
        self.catalog = catalog or default_catalog
        self.generator = generator or QuestionGenerator()
        self.scorer = scorer or DiagnosisScorer(catalog=self.catalog)
        self.navigator = navigator or Navigator()
        self.config = config or WizardConfig()

        self._state: WizardState = SymptomsPhase()
        self._generation = 0
        self._notice: Optional[Notice] = None
        self._analysis_task: Optional[asyncio.Task] = None

    # =========================================================================
    # Стан
    # =========================================================================

    @property
    def state(self) -> WizardState:
        return self._state

    @property
    def phase(self) -> WizardPhase:
        return self._state.phase

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def notice(self) -> Optional[Notice]:
        """Останнє повідомлення валідації (скидається наступним тригером)"""
        return self._notice

    @property
    def selected_symptom_ids(self) -> Tuple[str, ...]:
        return self._state.selected

    @property
    def selected_symptoms(self) -> List[Symptom]:
        return self.catalog.by_ids(self._state.selected)

    @property
    def symptoms_selected_count(self) -> int:
        return len(self._state.selected)

    def is_selected(self, symptom_id: str) -> bool:
        return symptom_id in self._state.selected

    @property
    def questions(self) -> Tuple[Question, ...]:
        return getattr(self._state, "questions", ())

    @property
    def answers(self) -> Tuple[AnswerValue, ...]:
        return tuple(getattr(self._state, "answers", ()))

    @property
    def current_index(self) -> int:
        if isinstance(self._state, QuestionsPhase):
            return self._state.index
        return 0

    @property
    def current_question(self) -> Optional[Question]:
        if isinstance(self._state, QuestionsPhase):
            return self._state.current_question
        return None

    @property
    def diagnoses(self) -> Tuple[Diagnosis, ...]:
        if isinstance(self._state, ResultsPhase):
            return self._state.diagnoses
        return ()

    @property
    def progress(self) -> Optional[Progress]:
        return progress_for(self._state)

    @property
    def is_analyzing(self) -> bool:
        return isinstance(self._state, AnalyzingPhase)

    @property
    def pending_analysis(self) -> Optional[AnalysisTicket]:
        if isinstance(self._state, AnalyzingPhase):
            return self._state.ticket
        return None

    @property
    def title_key(self) -> str:
        return TITLE_KEYS[self.phase]

    # =========================================================================
    # Тригери
    # =========================================================================

    def toggle(self, symptom_id: str) -> TransitionResult:
        """
        Додати/прибрати симптом (тільки в SYMPTOMS).

        Raises:
            UnknownSymptomError: Якщо симптому немає в каталозі
            InvalidTransitionError: Якщо фаза не SYMPTOMS
        """
        self._require(WizardPhase.SYMPTOMS, "toggle")
        self.catalog.get(symptom_id)

        selected = self._state.selected
        if symptom_id in selected:
            selected = tuple(s for s in selected if s != symptom_id)
        else:
            selected = selected + (symptom_id,)

        self._state = SymptomsPhase(selected=selected)
        self._notice = None
        return self._result(True)

    def start_assessment(self) -> TransitionResult:
        """
        SYMPTOMS → QUESTIONS.

        Порожній вибір — помилка валідації для користувача: стан не
        змінюється, повертається Notice.
        """
        self._require(WizardPhase.SYMPTOMS, "start_assessment")

        selected = self._state.selected
        if not selected:
            logger.info("Assessment start rejected: no symptoms selected")
            self._notice = NO_SYMPTOMS_NOTICE
            return self._result(False)

        questions = tuple(self.generator.generate(self.catalog.by_ids(selected)))

        self._generation += 1
        self._notice = None
        self._transition(QuestionsPhase(selected=selected, questions=questions))
        return self._result(True)

    def answer(self, value: AnswerValue) -> TransitionResult:
        """
        Відповісти на поточне питання.

        Raises:
            AnswerContractError: Значення не відповідає типу питання
            InvalidTransitionError: Якщо фаза не QUESTIONS
        """
        self._require(WizardPhase.QUESTIONS, "answer")
        state: QuestionsPhase = self._state

        value = state.current_question.validate_answer(value)

        if len(state.answers) > state.index:
            state.answers[state.index] = value
        else:
            state.answers.append(value)

        if not state.is_last:
            state.index += 1
            state.check_invariants()
            logger.debug("Answered question %d/%d", state.index, len(state.questions))
        else:
            ticket = AnalysisTicket(generation=self._generation)
            self._transition(AnalyzingPhase(
                selected=state.selected,
                questions=state.questions,
                answers=tuple(state.answers),
                ticket=ticket,
            ))

        self._notice = None
        return self._result(True)

    def back(self) -> TransitionResult:
        """
        Крок назад.

        - QUESTIONS, index > 0 → попереднє питання (його відповідь лишається)
        - QUESTIONS, index == 0 → SYMPTOMS (питання та відповіді відкидаються)
        - RESULTS → як restart()
        - SYMPTOMS → вихід з потоку
        - ANALYZING → ігнорується
        """
        self._notice = None
        state = self._state

        if isinstance(state, QuestionsPhase):
            if state.index > 0:
                state.index -= 1
                # Відповіді після поточного питання відкидаються
                del state.answers[state.index + 1:]
                state.check_invariants()
                return self._result(True)

            self._generation += 1
            self._transition(SymptomsPhase(selected=state.selected))
            return self._result(True)

        if isinstance(state, ResultsPhase):
            return self.restart()

        if isinstance(state, AnalyzingPhase):
            return self._result(False)

        return self.exit()

    def restart(self) -> TransitionResult:
        """RESULTS → SYMPTOMS з повним очищенням"""
        self._require(WizardPhase.RESULTS, "restart")
        self._reset()
        return self._result(True)

    def exit(self) -> TransitionResult:
        """Вийти з потоку з будь-якої фази (відкладений аналіз стає застарілим)"""
        self._reset()
        self.navigator.back()
        return self._result(True)

    def consult_doctor(self) -> ConsultationHandoff:
        """Передати контекст оцінювання на екран консультації (тільки RESULTS)"""
        self._require(WizardPhase.RESULTS, "consult_doctor")
        state: ResultsPhase = self._state

        handoff = ConsultationHandoff(
            symptom_ids=state.selected,
            top_condition_key=state.top_diagnosis.condition_key,
        )
        self.navigator.push(self.config.consultation_route, handoff)
        logger.info("Consultation requested for %d symptoms", len(state.selected))
        return handoff

    # =========================================================================
    # Аналіз
    # =========================================================================

    def complete_analysis(self, ticket: Optional[AnalysisTicket] = None) -> bool:
        """
        ANALYZING → RESULTS.

        Застосовується тільки якщо квиток належить поточному поколінню;
        інакше нічого не робить і повертає False.
        """
        state = self._state
        if not isinstance(state, AnalyzingPhase):
            logger.info("Discarding analysis result: wizard is in phase %s", self.phase.value)
            return False

        ticket = ticket or state.ticket
        if ticket != state.ticket or ticket.generation != self._generation:
            logger.info(
                "Discarding stale analysis (ticket=%d, current=%d)",
                ticket.generation, self._generation
            )
            return False

        diagnoses = self.scorer.score(
            self.catalog.by_ids(state.selected),
            state.questions,
            state.answers,
        )

        self._transition(ResultsPhase(
            selected=state.selected,
            questions=state.questions,
            answers=state.answers,
            diagnoses=tuple(diagnoses),
        ))
        return True

    async def run_analysis(self, ticket: Optional[AnalysisTicket] = None) -> bool:
        """Дочекатися імітованої затримки та завершити аналіз"""
        ticket = ticket or self.pending_analysis
        if ticket is None:
            return False

        await asyncio.sleep(self.config.analyzing_delay_seconds)
        return self.complete_analysis(ticket)

    def schedule_analysis(self) -> Optional[asyncio.Task]:
        """Запустити run_analysis як задачу в поточному event loop"""
        ticket = self.pending_analysis
        if ticket is None:
            return None

        self._cancel_task()
        self._analysis_task = asyncio.get_running_loop().create_task(self.run_analysis(ticket))
        return self._analysis_task

    # =========================================================================
    # Внутрішнє
    # =========================================================================

    def _require(self, phase: WizardPhase, trigger: str) -> None:
        if self.phase != phase:
            raise InvalidTransitionError(trigger, self.phase.value)

    def _transition(self, state: WizardState) -> None:
        logger.debug("Wizard %s → %s (generation=%d)", self.phase.value, state.phase.value, self._generation)
        self._state = state

    def _reset(self) -> None:
        self._generation += 1
        self._cancel_task()
        self._notice = None
        self._transition(SymptomsPhase())

    def _cancel_task(self) -> None:
        if self._analysis_task is not None and not self._analysis_task.done():
            self._analysis_task.cancel()
        self._analysis_task = None

    def _result(self, accepted: bool) -> TransitionResult:
        return TransitionResult(accepted=accepted, phase=self.phase, notice=self._notice)

    def to_dict(self) -> Dict[str, Any]:
        """Знімок стану (тільки ключі, без перекладу)"""
        progress = self.progress
        return {
            "phase": self.phase.value,
            "generation": self._generation,
            "title_key": self.title_key,
            "selected_symptoms": list(self.selected_symptom_ids),
            "questions": [q.model_dump(mode="json") for q in self.questions],
            "answers": list(self.answers),
            "current_index": self.current_index,
            "progress": None if progress is None else {
                "current": progress.current,
                "total": progress.total,
                "fraction": progress.fraction,
            },
            "diagnoses": [d.model_dump(mode="json") for d in self.diagnoses],
            "notice": None if self._notice is None else {
                "title_key": self._notice.title_key,
                "message_key": self._notice.message_key,
            },
        }

    def __repr__(self) -> str:
        return (
            f"AssessmentWizard("
            f"phase={self.phase.value}, "
            f"symptoms={self.symptoms_selected_count}, "
            f"answers={len(self.answers)}/{len(self.questions)}, "
            f"generation={self._generation}"
            f")"
        )
