"""
Symptom Checker — REST API

FastAPI сервер для майстра оцінювання симптомів.

Запуск:
    python scripts/run_api.py
"""

from .config import APIConfig, config

__all__ = ['APIConfig', 'config']
