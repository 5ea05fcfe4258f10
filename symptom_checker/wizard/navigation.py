"""
Symptom Checker — Навігація

Майстер не знає про екрани; він лише просить навігатор:
- push(route, handoff) — перейти на екран консультації
- back() — вийти з потоку (найзовнішній стан)
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from symptom_checker.schemas import ConsultationHandoff

logger = logging.getLogger(__name__)


DOCTOR_CALL_ROUTE = "doctor-call"


class Navigator:
    """Базовий навігатор — нічого не робить"""

    def push(self, route: str, handoff: Optional[ConsultationHandoff] = None) -> None:
        logger.debug("push %s (ignored)", route)

    def back(self) -> None:
        logger.debug("back (ignored)")


@dataclass(frozen=True)
class NavigationEvent:
    action: str                 # "push" | "back"
    route: Optional[str] = None
    handoff: Optional[ConsultationHandoff] = None


class RecordingNavigator(Navigator):
    """Навігатор, що зберігає історію переходів у пам'яті"""

    def __init__(self):
        self.events: List[NavigationEvent] = []

    def push(self, route: str, handoff: Optional[ConsultationHandoff] = None) -> None:
        self.events.append(NavigationEvent(action="push", route=route, handoff=handoff))

    def back(self) -> None:
        self.events.append(NavigationEvent(action="back"))

    @property
    def last(self) -> Optional[NavigationEvent]:
        return self.events[-1] if self.events else None

    def clear(self) -> None:
        self.events.clear()
