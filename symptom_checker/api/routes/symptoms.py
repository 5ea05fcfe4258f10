"""
Symptom Checker — Symptoms Routes

Endpoints для каталогу симптомів:
- Список симптомів
- Пошук за відображуваним текстом
"""

from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query

from symptom_checker.errors import UnknownSymptomError
from symptom_checker.i18n import Translator
from symptom_checker.schemas import Symptom

from ..dependencies import get_state, AppState
from ..models import SymptomInfo

router = APIRouter(prefix="/symptoms", tags=["Symptoms"])


def symptom_info(symptom: Symptom, translator: Translator) -> SymptomInfo:
    """Symptom → перекладена модель відповіді"""
    return SymptomInfo(
        id=symptom.id,
        name_key=symptom.name_key,
        name=translator.t(symptom.name_key),
        severity=symptom.severity.value,
        severity_label=translator.t(f"severity_{symptom.severity.value}"),
        category=symptom.category,
        icon=symptom.icon,
    )


@router.get("", response_model=List[SymptomInfo])
async def list_symptoms(
    q: Optional[str] = Query(default=None, max_length=100),
    state: AppState = Depends(get_state)
) -> List[SymptomInfo]:
    """
    Отримати каталог симптомів.

    - **q**: Пошук за назвою активною мовою (без урахування регістру)
    """
    symptoms = state.catalog.search(q or "", translate=state.translator.t)
    return [symptom_info(s, state.translator) for s in symptoms]


@router.get("/{symptom_id}", response_model=SymptomInfo)
async def get_symptom(
    symptom_id: str,
    state: AppState = Depends(get_state)
) -> SymptomInfo:
    """Отримати симптом за id"""
    try:
        symptom = state.catalog.get(symptom_id)
    except UnknownSymptomError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return symptom_info(symptom, state.translator)
