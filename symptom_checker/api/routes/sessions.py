"""
Symptom Checker — Sessions Routes

Endpoints для сесій майстра оцінювання:
- Створення сесії
- Вибір симптомів
- Старт оцінювання
- Відповідь на питання / крок назад
- Результати, консультація, перезапуск
- Закриття сесії
"""

from typing import Callable, TypeVar
from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException

from symptom_checker.errors import (
    AnswerContractError,
    InvalidTransitionError,
    UnknownSymptomError,
)
from symptom_checker.wizard import WizardPhase

from ..dependencies import get_sessions, get_state, AppState, SessionManager, WizardSession
from ..models import (
    AnswerRequest,
    ConsultationResponse,
    CreateSessionRequest,
    DiagnosisView,
    NoticeView,
    OptionView,
    ProgressView,
    QuestionView,
    SessionState,
    TransitionResponse,
)
from .symptoms import symptom_info

router = APIRouter(prefix="/sessions", tags=["Sessions"])

T = TypeVar("T")


def session_to_response(session: WizardSession, state: AppState) -> SessionState:
    """Конвертувати сесію в Pydantic модель (тексти активною мовою)"""
    wizard = session.wizard
    t = state.translator.t

    question = None
    q = wizard.current_question
    if q is not None:
        question = QuestionView(
            id=q.id,
            question_key=q.question_key,
            text=t(q.question_key),
            type=q.type.value,
            options=[OptionView(key=k, text=t(k)) for k in q.options_keys],
            scale_min=q.scale_min,
            scale_max=q.scale_max,
            scale_min_label=t("mild") if q.scale_min is not None else None,
            scale_max_label=t("severe") if q.scale_max is not None else None,
        )

    progress = None
    p = wizard.progress
    if p is not None:
        progress = ProgressView(
            current=p.current,
            total=p.total,
            fraction=p.fraction,
            label=f"{p.current} {t('progress_of')} {p.total}",
        )

    diagnoses = [
        DiagnosisView(
            condition_key=d.condition_key,
            condition=t(d.condition_key),
            probability=d.probability,
            severity=d.severity.value,
            description=t(d.description_key),
            recommendations=[t(k) for k in d.recommendations_keys],
        )
        for d in wizard.diagnoses
    ]

    notice = None
    if wizard.notice is not None:
        notice = NoticeView(
            title_key=wizard.notice.title_key,
            title=t(wizard.notice.title_key),
            message=t(wizard.notice.message_key),
        )

    return SessionState(
        session_id=session.session_id,
        phase=wizard.phase,
        title=t(wizard.title_key),
        language=state.translator.language,
        generation=wizard.generation,
        selected_symptoms=[symptom_info(s, state.translator) for s in wizard.selected_symptoms],
        current_question=question,
        progress=progress,
        answers=list(wizard.answers),
        is_analyzing=wizard.is_analyzing,
        diagnoses=diagnoses,
        disclaimer=t("disclaimer") if wizard.phase == WizardPhase.RESULTS else None,
        notice=notice,
        created_at=session.created_at.isoformat(),
        updated_at=session.updated_at.isoformat(),
    )


def _get_or_404(sessions: SessionManager, session_id: str) -> WizardSession:
    session = sessions.get_session(session_id)

    if not session:
        raise HTTPException(
            status_code=404,
            detail=f"Session {session_id} not found"
        )

    session.touch()
    return session


def _apply(action: Callable[..., T], *args) -> T:
    """Виконати тригер майстра, перетворивши порушення контракту на HTTP помилки"""
    try:
        return action(*args)
    except UnknownSymptomError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except AnswerContractError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except InvalidTransitionError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("", response_model=SessionState)
async def create_session(
    request: CreateSessionRequest,
    state: AppState = Depends(get_state),
    sessions: SessionManager = Depends(get_sessions)
) -> SessionState:
    """
    Створити нову сесію майстра.

    Приклад:
    ```json
    {
        "symptoms": ["1", "3"]
    }
    ```
    """
    for symptom_id in request.symptoms:
        if symptom_id not in state.catalog:
            raise HTTPException(status_code=404, detail=f"Unknown symptom id: {symptom_id!r}")

    session = sessions.create_session(state)

    for symptom_id in dict.fromkeys(request.symptoms):
        session.wizard.toggle(symptom_id)

    return session_to_response(session, state)


@router.get("", response_model=dict)
async def list_sessions(
    sessions: SessionManager = Depends(get_sessions)
) -> dict:
    """
    Отримати список активних сесій (для адміністрування).
    """
    return {
        "active_sessions": sessions.get_active_count(),
        "session_ids": list(sessions.sessions.keys())
    }


@router.get("/{session_id}", response_model=SessionState)
async def get_session(
    session_id: str,
    state: AppState = Depends(get_state),
    sessions: SessionManager = Depends(get_sessions)
) -> SessionState:
    """
    Отримати поточний стан сесії.

    Повертає:
    - Фазу майстра
    - Обрані симптоми
    - Поточне питання та прогрес (QUESTIONS)
    - Діагнози (RESULTS)
    """
    session = _get_or_404(sessions, session_id)
    return session_to_response(session, state)


@router.post("/{session_id}/symptoms/{symptom_id}/toggle", response_model=TransitionResponse)
async def toggle_symptom(
    session_id: str,
    symptom_id: str,
    state: AppState = Depends(get_state),
    sessions: SessionManager = Depends(get_sessions)
) -> TransitionResponse:
    """Додати/прибрати симптом (фаза symptoms)"""
    session = _get_or_404(sessions, session_id)
    result = _apply(session.wizard.toggle, symptom_id)

    return TransitionResponse(
        accepted=result.accepted,
        session_state=session_to_response(session, state)
    )


@router.post("/{session_id}/start", response_model=TransitionResponse)
async def start_assessment(
    session_id: str,
    state: AppState = Depends(get_state),
    sessions: SessionManager = Depends(get_sessions)
) -> TransitionResponse:
    """
    Почати оцінювання.

    Якщо симптоми не обрано — `accepted=false` та повідомлення в
    `session_state.notice`; стан не змінюється.
    """
    session = _get_or_404(sessions, session_id)
    result = _apply(session.wizard.start_assessment)

    return TransitionResponse(
        accepted=result.accepted,
        session_state=session_to_response(session, state)
    )


@router.post("/{session_id}/answer", response_model=TransitionResponse)
async def answer_question(
    session_id: str,
    request: AnswerRequest,
    background_tasks: BackgroundTasks,
    state: AppState = Depends(get_state),
    sessions: SessionManager = Depends(get_sessions)
) -> TransitionResponse:
    """
    Відповісти на поточне питання.

    - **value**: `true`/`false`, число шкали або ключ варіанту

    Після останньої відповіді сесія переходить у `analyzing`, а
    результати з'являються після імітованої затримки.
    """
    session = _get_or_404(sessions, session_id)
    wizard = session.wizard

    result = _apply(wizard.answer, request.value)

    ticket = wizard.pending_analysis
    if ticket is not None:
        background_tasks.add_task(wizard.run_analysis, ticket)

    return TransitionResponse(
        accepted=result.accepted,
        session_state=session_to_response(session, state)
    )


@router.post("/{session_id}/back", response_model=TransitionResponse)
async def go_back(
    session_id: str,
    state: AppState = Depends(get_state),
    sessions: SessionManager = Depends(get_sessions)
) -> TransitionResponse:
    """Крок назад (з фази symptoms — вихід з потоку)"""
    session = _get_or_404(sessions, session_id)
    result = _apply(session.wizard.back)

    return TransitionResponse(
        accepted=result.accepted,
        session_state=session_to_response(session, state)
    )


@router.post("/{session_id}/restart", response_model=TransitionResponse)
async def restart(
    session_id: str,
    state: AppState = Depends(get_state),
    sessions: SessionManager = Depends(get_sessions)
) -> TransitionResponse:
    """Почати заново з результатів"""
    session = _get_or_404(sessions, session_id)
    result = _apply(session.wizard.restart)

    return TransitionResponse(
        accepted=result.accepted,
        session_state=session_to_response(session, state)
    )


@router.post("/{session_id}/consult", response_model=ConsultationResponse)
async def consult_doctor(
    session_id: str,
    state: AppState = Depends(get_state),
    sessions: SessionManager = Depends(get_sessions)
) -> ConsultationResponse:
    """Передати контекст оцінювання на консультацію з лікарем"""
    session = _get_or_404(sessions, session_id)
    handoff = _apply(session.wizard.consult_doctor)

    return ConsultationResponse(
        route=state.config.wizard.consultation_route,
        reason=handoff.reason,
        symptom_ids=list(handoff.symptom_ids),
        top_condition_key=handoff.top_condition_key,
    )


@router.delete("/{session_id}")
async def delete_session(
    session_id: str,
    sessions: SessionManager = Depends(get_sessions)
) -> dict:
    """
    Закрити та видалити сесію.
    """
    success = sessions.delete_session(session_id)

    if not success:
        raise HTTPException(
            status_code=404,
            detail=f"Session {session_id} not found"
        )

    return {"deleted": True, "session_id": session_id}
