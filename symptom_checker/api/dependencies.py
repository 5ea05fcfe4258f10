"""
Symptom Checker — API Dependencies

Dependency Injection для FastAPI.
Спільні компоненти (каталог, генератор, оцінювач, перекладач) та
менеджер сесій майстра.
"""

import logging
import threading
import uuid
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Dict, Optional

from symptom_checker.catalog import SymptomCatalog, default_catalog
from symptom_checker.config import SymptomCheckerConfig, get_default_config, load_config
from symptom_checker.diagnosis_engine import DiagnosisScorer
from symptom_checker.i18n import (
    JSONFileStore,
    LanguagePreferences,
    MemoryStore,
    Translator,
)
from symptom_checker.question_engine import QuestionGenerator
from symptom_checker.wizard import AssessmentWizard, RecordingNavigator

from .config import APIConfig, config as default_api_config

logger = logging.getLogger(__name__)


class AppState:
    """
    Спільний стан застосунку — створюється один раз.
    Singleton pattern.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self.configure(default_api_config)

    def configure(self, api_config: APIConfig) -> None:
        """(Пере)створити компоненти з конфігурації"""
        self.api_config = api_config
        self.config = self._load_core_config(api_config)

        self.catalog: SymptomCatalog = default_catalog
        self.generator = QuestionGenerator(self.config.question_engine)
        self.scorer = DiagnosisScorer(self.config.scorer, catalog=self.catalog)

        i18n = self.config.i18n
        self.translator = Translator(
            language=i18n.default_language,
            fallback_language=i18n.fallback_language,
        )
        store = JSONFileStore(i18n.preferences_path) if i18n.preferences_path else MemoryStore()
        self.preferences = LanguagePreferences(store, self.translator, i18n.default_language)
        self.preferences.load()

        logger.info(
            "App state configured: strategy=%s, delay=%.1fs, language=%s",
            self.config.question_engine.strategy.value,
            self.config.wizard.analyzing_delay_seconds,
            self.translator.language,
        )

    @staticmethod
    def _load_core_config(api_config: APIConfig) -> SymptomCheckerConfig:
        core = load_config(api_config.config_path) if api_config.config_path else get_default_config()

        if api_config.analyzing_delay_seconds is not None:
            core.wizard = replace(core.wizard, analyzing_delay_seconds=api_config.analyzing_delay_seconds)
        if api_config.default_language is not None:
            core.i18n = replace(core.i18n, default_language=api_config.default_language)
        if api_config.preferences_path is not None:
            core.i18n = replace(core.i18n, preferences_path=api_config.preferences_path)

        return core

    def create_wizard(self, navigator: RecordingNavigator) -> AssessmentWizard:
        return AssessmentWizard(
            catalog=self.catalog,
            generator=self.generator,
            scorer=self.scorer,
            navigator=navigator,
            config=self.config.wizard,
        )


class WizardSession:
    """
    Сесія майстра для одного користувача.
    Обгортка над AssessmentWizard з ідентифікатором та часом активності.
    """

    def __init__(self, session_id: str, wizard: AssessmentWizard, navigator: RecordingNavigator):
        self.session_id = session_id
        self.wizard = wizard
        self.navigator = navigator

        self.created_at = datetime.now()
        self.updated_at = datetime.now()

    def touch(self) -> None:
        self.updated_at = datetime.now()


class SessionManager:
    """
    Менеджер сесій майстра.
    Зберігає активні сесії в пам'яті.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self.sessions: Dict[str, WizardSession] = {}
        self.lock = threading.Lock()

    def create_session(self, state: AppState) -> WizardSession:
        """Створити нову сесію"""
        session_id = str(uuid.uuid4())[:8]
        navigator = RecordingNavigator()
        session = WizardSession(session_id, state.create_wizard(navigator), navigator)

        with self.lock:
            # Очистка старих сесій
            self._cleanup_old_sessions(state.api_config)

            if len(self.sessions) >= state.api_config.max_sessions:
                oldest = min(self.sessions.values(), key=lambda s: s.updated_at)
                self._discard(oldest.session_id)

            self.sessions[session_id] = session

        logger.info("Session %s created", session_id)
        return session

    def get_session(self, session_id: str) -> Optional[WizardSession]:
        """Отримати сесію"""
        return self.sessions.get(session_id)

    def delete_session(self, session_id: str) -> bool:
        """Видалити сесію (відкладений аналіз стає застарілим)"""
        with self.lock:
            if session_id in self.sessions:
                self._discard(session_id)
                return True
        return False

    def get_active_count(self) -> int:
        """Кількість активних сесій"""
        return len(self.sessions)

    def _discard(self, session_id: str) -> None:
        session = self.sessions.pop(session_id)
        session.wizard.exit()
        logger.info("Session %s closed", session_id)

    def _cleanup_old_sessions(self, api_config: APIConfig) -> None:
        """Видалити застарілі сесії"""
        timeout = timedelta(minutes=api_config.session_timeout_minutes)
        now = datetime.now()

        expired = [
            sid for sid, session in self.sessions.items()
            if now - session.updated_at > timeout
        ]

        for sid in expired:
            self._discard(sid)


# Глобальні менеджери
app_state = AppState()
session_manager = SessionManager()


# Dependency functions для FastAPI
def get_state() -> AppState:
    """Dependency: спільний стан застосунку"""
    return app_state


def get_sessions() -> SessionManager:
    """Dependency: менеджер сесій"""
    return session_manager
