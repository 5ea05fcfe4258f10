"""
Symptom Checker — Language Routes

Читання та зміна мовної настройки.
"""

from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import get_state, AppState
from ..models import LanguageRequest, LanguageResponse, TextsResponse

router = APIRouter(prefix="/language", tags=["Language"])


@router.get("", response_model=LanguageResponse)
async def get_language(state: AppState = Depends(get_state)) -> LanguageResponse:
    """Поточна мова"""
    return LanguageResponse(
        language=state.translator.language,
        supported=list(state.translator.supported_languages),
    )


@router.get("/texts", response_model=TextsResponse)
async def get_texts(state: AppState = Depends(get_state)) -> TextsResponse:
    """Всі ключі перекладу активною мовою (з fallback)"""
    translator = state.translator
    keys = translator.resources[translator.fallback_language]

    return TextsResponse(
        language=translator.language,
        texts={key: translator.t(key) for key in keys},
    )


@router.put("", response_model=LanguageResponse)
async def set_language(
    request: LanguageRequest,
    state: AppState = Depends(get_state)
) -> LanguageResponse:
    """
    Змінити мову.

    Збій збереження не є помилкою запиту — мова змінюється в пам'яті.
    """
    try:
        state.preferences.change_language(request.language)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return LanguageResponse(
        language=state.translator.language,
        supported=list(state.translator.supported_languages),
    )
