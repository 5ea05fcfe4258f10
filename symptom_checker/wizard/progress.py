"""Symptom Checker — Індикатор прогресу (похідний від стану майстра)"""

from dataclasses import dataclass
from typing import Optional

from .state import QuestionsPhase, WizardState


@dataclass(frozen=True)
class Progress:
    """Позиція в послідовності питань"""
    current: int    # 1-based
    total: int

    @property
    def fraction(self) -> float:
        return self.current / self.total

    @property
    def percent(self) -> float:
        """Ширина смуги прогресу у відсотках"""
        return self.fraction * 100

    @property
    def label(self) -> str:
        return f"{self.current} of {self.total}"


def progress_for(state: WizardState) -> Optional[Progress]:
    """Прогрес для QUESTIONS; None для інших фаз"""
    if not isinstance(state, QuestionsPhase):
        return None
    return Progress(current=state.index + 1, total=len(state.questions))
