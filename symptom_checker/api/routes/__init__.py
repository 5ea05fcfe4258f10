"""
Symptom Checker — API Routes

Експорт всіх роутерів.
"""

from .health import router as health_router
from .symptoms import router as symptoms_router
from .sessions import router as sessions_router
from .language import router as language_router

__all__ = [
    'health_router',
    'symptoms_router',
    'sessions_router',
    'language_router',
]
