"""
Тести для модуля wizard

Запуск: pytest tests/test_wizard.py -v
Або демо: python tests/test_wizard.py
"""

import asyncio

import pytest

FEVER, COUGH, CHEST_PAIN = "1", "3", "5"
BASELINE_ANSWERS = ["1_3_days", 5, False, False, False]


def _make_wizard(**kwargs):
    from symptom_checker.config import WizardConfig
    from symptom_checker.wizard import AssessmentWizard, RecordingNavigator

    kwargs.setdefault("navigator", RecordingNavigator())
    kwargs.setdefault("config", WizardConfig(analyzing_delay_seconds=0.0))
    return AssessmentWizard(**kwargs)


def _to_analyzing(wizard, symptom_ids=(FEVER, COUGH), answers=BASELINE_ANSWERS):
    for symptom_id in symptom_ids:
        wizard.toggle(symptom_id)
    wizard.start_assessment()
    for value in answers:
        wizard.answer(value)


def _to_results(wizard, symptom_ids=(FEVER, COUGH), answers=BASELINE_ANSWERS):
    _to_analyzing(wizard, symptom_ids, answers)
    assert wizard.complete_analysis()


def test_initial_state():
    """Початковий стан: SYMPTOMS, нічого не обрано"""
    from symptom_checker.wizard import WizardPhase

    wizard = _make_wizard()

    assert wizard.phase == WizardPhase.SYMPTOMS
    assert wizard.selected_symptom_ids == ()
    assert wizard.questions == ()
    assert wizard.answers == ()
    assert wizard.diagnoses == ()
    assert wizard.progress is None
    assert wizard.title_key == "symptom_checker"

    print(f"✓ {wizard!r}")


def test_toggle():
    """Подвійне перемикання повертає вибір до початкового"""
    from symptom_checker.errors import UnknownSymptomError

    wizard = _make_wizard()

    wizard.toggle(FEVER)
    wizard.toggle(COUGH)
    assert wizard.selected_symptom_ids == (FEVER, COUGH)
    assert wizard.is_selected(COUGH)
    assert wizard.symptoms_selected_count == 2

    wizard.toggle(COUGH)
    wizard.toggle(COUGH)
    assert wizard.selected_symptom_ids == (FEVER, COUGH)

    wizard.toggle(FEVER)
    assert wizard.selected_symptom_ids == (COUGH,)
    assert [s.name_key for s in wizard.selected_symptoms] == ["cough"]

    with pytest.raises(UnknownSymptomError):
        wizard.toggle("99")
    assert wizard.selected_symptom_ids == (COUGH,)

    print(f"✓ Toggle: {wizard.selected_symptom_ids}")


def test_start_without_symptoms():
    """Порожній вибір: повідомлення, стан не змінюється"""
    from symptom_checker.wizard import NO_SYMPTOMS_NOTICE, WizardPhase

    wizard = _make_wizard()
    generation = wizard.generation

    result = wizard.start_assessment()

    assert not result.accepted
    assert result.phase == WizardPhase.SYMPTOMS
    assert result.notice == NO_SYMPTOMS_NOTICE
    assert result.notice.title_key == "no_symptoms"
    assert result.notice.message_key == "select_symptoms_msg"
    assert wizard.phase == WizardPhase.SYMPTOMS
    assert wizard.generation == generation
    assert wizard.notice == NO_SYMPTOMS_NOTICE

    # Наступний тригер скидає повідомлення
    wizard.toggle(FEVER)
    assert wizard.notice is None

    print(f"✓ Notice: {result.notice.title_key}")


def test_full_flow():
    """fever + cough → питання → аналіз → результати"""
    from symptom_checker.wizard import WizardPhase

    wizard = _make_wizard()
    wizard.toggle(FEVER)
    wizard.toggle(COUGH)

    result = wizard.start_assessment()
    assert result.accepted
    assert wizard.phase == WizardPhase.QUESTIONS
    assert wizard.title_key == "health_assessment"
    assert len(wizard.questions) == 5
    assert wizard.current_index == 0

    progress = wizard.progress
    assert (progress.current, progress.total) == (1, 5)
    assert progress.percent == pytest.approx(20.0)
    assert progress.label == "1 of 5"

    for i, value in enumerate(BASELINE_ANSWERS):
        assert wizard.current_question.id == str(i + 1)
        wizard.answer(value)

        if wizard.phase == WizardPhase.QUESTIONS:
            assert len(wizard.answers) <= wizard.current_index + 1 <= len(wizard.questions)

    assert wizard.phase == WizardPhase.ANALYZING
    assert wizard.is_analyzing
    assert wizard.answers == tuple(BASELINE_ANSWERS)
    assert wizard.progress is None
    assert wizard.current_question is None

    assert wizard.complete_analysis()

    assert wizard.phase == WizardPhase.RESULTS
    assert wizard.title_key == "your_results"
    assert wizard.diagnoses[0].condition_key == "common_cold"
    assert wizard.diagnoses[0].probability == 68
    probs = [d.probability for d in wizard.diagnoses]
    assert probs == sorted(probs, reverse=True)

    print("✓ Full flow:")
    for d in wizard.diagnoses:
        print(f"  {d.condition_key}: {d.probability}%")


def test_progress_monotonic():
    """Прогрес зростає на 1 з кожною відповіддю"""
    wizard = _make_wizard()
    wizard.toggle(CHEST_PAIN)
    wizard.start_assessment()

    seen = []
    for value in BASELINE_ANSWERS[:-1]:
        seen.append(wizard.progress.current)
        wizard.answer(value)
    seen.append(wizard.progress.current)

    assert seen == [1, 2, 3, 4, 5]

    print(f"✓ Progress: {seen}")


def test_collaborators_called_once():
    """Генератор — рівно раз на старті, оцінювач — рівно раз на завершенні"""
    from symptom_checker.diagnosis_engine import DiagnosisScorer
    from symptom_checker.question_engine import QuestionGenerator

    class CountingGenerator(QuestionGenerator):
        calls = 0

        def generate(self, selected):
            CountingGenerator.calls += 1
            return super().generate(selected)

    class CountingScorer(DiagnosisScorer):
        calls = 0

        def score(self, selected, questions=(), answers=()):
            CountingScorer.calls += 1
            return super().score(selected, questions, answers)

    wizard = _make_wizard(generator=CountingGenerator(), scorer=CountingScorer())

    wizard.toggle(FEVER)
    wizard.start_assessment()
    assert CountingGenerator.calls == 1

    for value in BASELINE_ANSWERS[:3]:
        wizard.answer(value)
    wizard.back()
    wizard.answer(False)
    for value in BASELINE_ANSWERS[3:]:
        wizard.answer(value)

    assert CountingGenerator.calls == 1
    assert CountingScorer.calls == 0

    wizard.complete_analysis()
    assert CountingScorer.calls == 1

    print(f"✓ generate={CountingGenerator.calls}, score={CountingScorer.calls}")


def test_answer_validation():
    """Невалідна відповідь не змінює стан"""
    from symptom_checker.errors import AnswerContractError

    wizard = _make_wizard()
    wizard.toggle(FEVER)
    wizard.start_assessment()

    with pytest.raises(AnswerContractError):
        wizard.answer(5)               # duration — multiple-choice

    assert wizard.current_index == 0
    assert wizard.answers == ()

    wizard.answer("4_7_days")
    with pytest.raises(AnswerContractError):
        wizard.answer(11)              # pain — 1..10

    assert wizard.current_index == 1
    assert wizard.answers == ("4_7_days",)

    print("✓ Invalid answers rejected")


def test_back_to_previous_question():
    """Назад: попереднє питання, його відповідь зберігається"""
    from symptom_checker.wizard import WizardPhase

    wizard = _make_wizard()
    wizard.toggle(FEVER)
    wizard.start_assessment()

    wizard.answer("1_3_days")
    wizard.answer(7)
    wizard.answer(True)
    assert wizard.current_index == 3

    result = wizard.back()
    assert result.accepted
    assert wizard.phase == WizardPhase.QUESTIONS
    assert wizard.current_index == 2
    assert wizard.answers == ("1_3_days", 7, True)

    wizard.back()
    assert wizard.current_index == 1
    assert wizard.answers == ("1_3_days", 7)

    # Повторна відповідь перезаписує
    wizard.answer(3)
    assert wizard.answers == ("1_3_days", 3)
    assert wizard.current_index == 2

    print(f"✓ Back: answers={wizard.answers}")


def test_back_from_first_question():
    """Назад з першого питання: SYMPTOMS, вибір зберігається"""
    from symptom_checker.wizard import WizardPhase

    wizard = _make_wizard()
    wizard.toggle(FEVER)
    wizard.toggle(COUGH)
    wizard.start_assessment()
    generation = wizard.generation

    wizard.back()

    assert wizard.phase == WizardPhase.SYMPTOMS
    assert wizard.selected_symptom_ids == (FEVER, COUGH)
    assert wizard.questions == ()
    assert wizard.answers == ()
    assert wizard.generation > generation

    print("✓ Back to symptoms, selection kept")


def test_back_while_analyzing_is_ignored():
    """Назад під час аналізу ігнорується"""
    from symptom_checker.wizard import WizardPhase

    wizard = _make_wizard()
    _to_analyzing(wizard)
    ticket = wizard.pending_analysis

    result = wizard.back()

    assert not result.accepted
    assert wizard.phase == WizardPhase.ANALYZING
    assert wizard.pending_analysis == ticket

    print("✓ Back ignored while analyzing")


def test_back_from_results_restarts():
    """Назад з результатів — як restart"""
    from symptom_checker.wizard import WizardPhase

    wizard = _make_wizard()
    _to_results(wizard)

    wizard.back()

    assert wizard.phase == WizardPhase.SYMPTOMS
    assert wizard.selected_symptom_ids == ()
    assert wizard.navigator.events == []

    print("✓ Back from results resets")


def test_back_from_symptoms_exits():
    """Назад з SYMPTOMS — вихід з потоку"""
    from symptom_checker.wizard import WizardPhase

    wizard = _make_wizard()
    wizard.toggle(FEVER)

    wizard.back()

    assert wizard.phase == WizardPhase.SYMPTOMS
    assert wizard.selected_symptom_ids == ()
    assert wizard.navigator.last.action == "back"

    print(f"✓ Exit: {wizard.navigator.last}")


def test_restart():
    """Restart: повне очищення"""
    from symptom_checker.wizard import WizardPhase

    wizard = _make_wizard()
    _to_results(wizard)

    result = wizard.restart()

    assert result.accepted
    assert wizard.phase == WizardPhase.SYMPTOMS
    assert wizard.selected_symptom_ids == ()
    assert wizard.questions == ()
    assert wizard.answers == ()
    assert wizard.diagnoses == ()

    print("✓ Restart")


def test_invalid_transitions():
    """Тригери поза своєю фазою — порушення контракту"""
    from symptom_checker.errors import InvalidTransitionError

    wizard = _make_wizard()

    with pytest.raises(InvalidTransitionError):
        wizard.answer(True)
    with pytest.raises(InvalidTransitionError):
        wizard.restart()
    with pytest.raises(InvalidTransitionError):
        wizard.consult_doctor()

    wizard.toggle(FEVER)
    wizard.start_assessment()

    with pytest.raises(InvalidTransitionError):
        wizard.toggle(COUGH)
    with pytest.raises(InvalidTransitionError):
        wizard.start_assessment()

    print("✓ Invalid transitions rejected")


def test_stale_analysis_after_exit():
    """Вихід під час аналізу: запізнілий результат відкидається"""
    from symptom_checker.wizard import WizardPhase

    wizard = _make_wizard()
    _to_analyzing(wizard)
    ticket = wizard.pending_analysis

    wizard.exit()

    assert not wizard.complete_analysis(ticket)
    assert wizard.phase == WizardPhase.SYMPTOMS
    assert wizard.diagnoses == ()

    print("✓ Stale analysis discarded after exit")


def test_stale_analysis_after_restart():
    """Старий квиток не завершує новий прогін"""
    from symptom_checker.wizard import WizardPhase

    wizard = _make_wizard()
    _to_analyzing(wizard)
    old_ticket = wizard.pending_analysis

    wizard.exit()
    _to_analyzing(wizard, symptom_ids=(CHEST_PAIN,))
    new_ticket = wizard.pending_analysis

    assert old_ticket != new_ticket
    assert not wizard.complete_analysis(old_ticket)
    assert wizard.phase == WizardPhase.ANALYZING

    assert wizard.complete_analysis(new_ticket)
    assert wizard.phase == WizardPhase.RESULTS
    assert wizard.selected_symptom_ids == (CHEST_PAIN,)

    print(f"✓ Tickets: old={old_ticket.generation}, new={new_ticket.generation}")


def test_run_analysis():
    """Асинхронний аналіз із затримкою"""
    from symptom_checker.wizard import WizardPhase

    wizard = _make_wizard()
    _to_analyzing(wizard)

    assert asyncio.run(wizard.run_analysis())
    assert wizard.phase == WizardPhase.RESULTS

    # Повторний запуск нічого не робить
    assert not asyncio.run(wizard.run_analysis())

    print("✓ run_analysis completed")


def test_scheduled_analysis_cancelled_on_exit():
    """Запланований аналіз скасовується при виході"""
    from symptom_checker.config import WizardConfig
    from symptom_checker.wizard import WizardPhase

    wizard = _make_wizard(config=WizardConfig(analyzing_delay_seconds=0.05))
    _to_analyzing(wizard)

    async def scenario():
        task = wizard.schedule_analysis()
        wizard.exit()
        await asyncio.sleep(0.1)
        return task

    task = asyncio.run(scenario())

    assert task.cancelled()
    assert wizard.phase == WizardPhase.SYMPTOMS

    print("✓ Scheduled analysis cancelled")


def test_consult_doctor():
    """Консультація: перехід на doctor-call з контекстом"""
    from symptom_checker.wizard import DOCTOR_CALL_ROUTE, WizardPhase

    wizard = _make_wizard()
    _to_results(wizard)

    handoff = wizard.consult_doctor()

    assert handoff.symptom_ids == (FEVER, COUGH)
    assert handoff.top_condition_key == "common_cold"
    assert wizard.navigator.last.action == "push"
    assert wizard.navigator.last.route == DOCTOR_CALL_ROUTE
    assert wizard.navigator.last.handoff == handoff

    # Стан майстра не змінюється
    assert wizard.phase == WizardPhase.RESULTS

    print(f"✓ Handoff: {handoff.model_dump()}")


def test_to_dict():
    """Знімок стану"""
    wizard = _make_wizard()
    wizard.toggle(FEVER)
    wizard.start_assessment()
    wizard.answer("less_24_hours")

    snapshot = wizard.to_dict()

    assert snapshot["phase"] == "questions"
    assert snapshot["selected_symptoms"] == [FEVER]
    assert snapshot["answers"] == ["less_24_hours"]
    assert snapshot["progress"]["current"] == 2
    assert len(snapshot["questions"]) == 5

    print(f"✓ Snapshot: phase={snapshot['phase']}, progress={snapshot['progress']}")


def test_state_invariants():
    """Стан неможливо сконструювати з порушенням інваріантів"""
    from symptom_checker.question_engine import QuestionGenerator
    from symptom_checker.wizard import QuestionsPhase, ResultsPhase

    questions = tuple(QuestionGenerator().core_questions)

    with pytest.raises(ValueError):
        QuestionsPhase(selected=(), questions=questions)
    with pytest.raises(ValueError):
        ResultsPhase(selected=(FEVER,), questions=questions, answers=(), diagnoses=())
    with pytest.raises(AssertionError):
        QuestionsPhase(selected=(FEVER,), questions=questions, answers=["a", "b"], index=0)

    print("✓ Invariants enforced")


def demo():
    """Повна демонстрація модуля wizard"""
    print("=" * 60)
    print("Symptom Checker — Демонстрація майстра")
    print("=" * 60)

    tests = [
        test_initial_state,
        test_toggle,
        test_start_without_symptoms,
        test_full_flow,
        test_progress_monotonic,
        test_collaborators_called_once,
        test_answer_validation,
        test_back_to_previous_question,
        test_back_from_first_question,
        test_back_while_analyzing_is_ignored,
        test_back_from_results_restarts,
        test_back_from_symptoms_exits,
        test_restart,
        test_invalid_transitions,
        test_stale_analysis_after_exit,
        test_stale_analysis_after_restart,
        test_run_analysis,
        test_scheduled_analysis_cancelled_on_exit,
        test_consult_doctor,
        test_to_dict,
        test_state_invariants,
    ]

    for test in tests:
        print(f"\n--- {test.__name__} ---")
        test()

    print("\n" + "=" * 60)
    print("✅ Всі тести пройдено успішно!")
    print("=" * 60)


if __name__ == "__main__":
    demo()
