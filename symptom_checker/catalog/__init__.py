"""
Symptom Checker — Модуль каталогу симптомів

Приклад використання:
    from symptom_checker.catalog import SymptomCatalog

    catalog = SymptomCatalog()
    respiratory = [s for s in catalog if s.category == "respiratory"]
"""

from .symptom_catalog import (
    COMMON_SYMPTOMS,
    SymptomCatalog,
    Translate,
    default_catalog,
)


__all__ = [
    "COMMON_SYMPTOMS",
    "SymptomCatalog",
    "Translate",
    "default_catalog",
]
