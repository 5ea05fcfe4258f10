"""
Symptom Checker — API Configuration

Налаштування FastAPI сервера.
"""

from dataclasses import dataclass, field
from typing import Optional
import os


def _optional_float(value: Optional[str]) -> Optional[float]:
    return float(value) if value not in (None, "") else None


@dataclass
class APIConfig:
    """Конфігурація API сервера"""

    # Сервер
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = True
    reload: bool = False
    log_level: str = "INFO"

    # CORS
    cors_origins: list = field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list = field(default_factory=lambda: ["*"])
    cors_allow_headers: list = field(default_factory=lambda: ["*"])

    # YAML з SymptomCheckerConfig (None = за замовчуванням)
    config_path: Optional[str] = None

    # Перевизначення конфігурації ядра
    default_language: Optional[str] = None
    analyzing_delay_seconds: Optional[float] = None
    preferences_path: Optional[str] = None

    # Сесії
    max_sessions: int = 1000
    session_timeout_minutes: int = 60

    # API
    api_prefix: str = "/api"
    api_title: str = "Symptom Checker API"
    api_description: str = "Майстер оцінювання симптомів"

    @classmethod
    def from_env(cls) -> "APIConfig":
        """Створити конфігурацію з environment variables"""
        return cls(
            host=os.getenv("API_HOST", "0.0.0.0"),
            port=int(os.getenv("API_PORT", "8000")),
            debug=os.getenv("API_DEBUG", "true").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            config_path=os.getenv("CONFIG_PATH") or None,
            default_language=os.getenv("DEFAULT_LANGUAGE") or None,
            analyzing_delay_seconds=_optional_float(os.getenv("ANALYZING_DELAY_SECONDS")),
            preferences_path=os.getenv("PREFERENCES_PATH") or None,
            session_timeout_minutes=int(os.getenv("SESSION_TIMEOUT_MINUTES", "60")),
        )


# Глобальна конфігурація
config = APIConfig.from_env()
