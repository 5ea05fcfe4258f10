"""
Symptom Checker — FastAPI Application

Головний файл FastAPI додатку.

Запуск:
    uvicorn symptom_checker.api.app:app --reload --host 0.0.0.0 --port 8000

    або:

    python scripts/run_api.py
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
import time

from symptom_checker import __version__
from symptom_checker.errors import ContractViolation

from .config import config
from .dependencies import app_state
from .routes import (
    health_router,
    symptoms_router,
    sessions_router,
    language_router,
)

logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifecycle manager — інформація про конфігурацію при старті.
    """
    logger.info("=" * 60)
    logger.info("Symptom Checker API starting (v%s)", __version__)
    logger.info(
        "Catalog: %d symptoms, strategy: %s, language: %s",
        len(app_state.catalog),
        app_state.generator.strategy.value,
        app_state.translator.language,
    )
    logger.info("Swagger UI: http://%s:%d/docs", config.host, config.port)
    logger.info("=" * 60)

    yield

    logger.info("Symptom Checker API stopping...")


# Створюємо додаток
app = FastAPI(
    title=config.api_title,
    description=config.api_description,
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=config.cors_allow_credentials,
    allow_methods=config.cors_allow_methods,
    allow_headers=config.cors_allow_headers,
)


# Middleware для логування запитів
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    process_time = time.time() - start_time

    # Логуємо тільки API запити
    if request.url.path.startswith(config.api_prefix):
        logger.info(
            "%s %s → %d (%.1fms)",
            request.method, request.url.path, response.status_code, process_time * 1000
        )

    return response


@app.exception_handler(ContractViolation)
async def contract_violation_handler(request: Request, exc: ContractViolation):
    logger.warning("Contract violation on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


# Глобальний обробник помилок
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc) if config.debug else None
        }
    )


# Підключаємо роутери
app.include_router(health_router)
app.include_router(symptoms_router, prefix=config.api_prefix)
app.include_router(sessions_router, prefix=config.api_prefix)
app.include_router(language_router, prefix=config.api_prefix)
