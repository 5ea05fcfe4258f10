"""
Symptom Checker — Health Routes

Health check та інформація про систему.
"""

from fastapi import APIRouter, Depends

from symptom_checker import __version__

from ..dependencies import get_state, get_sessions, AppState, SessionManager
from ..models import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    state: AppState = Depends(get_state),
    sessions: SessionManager = Depends(get_sessions)
) -> HealthResponse:
    """
    Перевірка стану сервера.

    Повертає:
    - Статус сервера
    - Розмір каталогу симптомів
    - Стратегію генерації питань
    - Кількість активних сесій
    """
    return HealthResponse(
        status="ok",
        version=__version__,
        catalog_symptoms=len(state.catalog),
        question_strategy=state.generator.strategy.value,
        active_sessions=sessions.get_active_count()
    )


@router.get("/")
async def root():
    """Головна сторінка API"""
    return {
        "name": "Symptom Checker API",
        "version": __version__,
        "description": "Майстер оцінювання симптомів",
        "docs": "/docs",
        "health": "/health",
    }
