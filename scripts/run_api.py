#!/usr/bin/env python3
"""
Symptom Checker — Запуск API сервера

Конфігурація ядра (YAML) перевіряється до старту uvicorn, тож помилка
в файлі видна одразу, а не в першому запиті.

Запуск:
    python scripts/run_api.py
    python scripts/run_api.py --config configs/default.yaml --delay 0.5
    python scripts/run_api.py --language pa --preferences ~/.symptom_checker.json
"""

import os
import sys
import argparse
from pathlib import Path

# Додаємо корінь проекту до path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import yaml

from symptom_checker.config import get_default_config, load_config


def resolve_core_config(path):
    """Завантажити YAML або конфігурацію за замовчуванням; завершити процес при помилці"""
    if path is None:
        return get_default_config()

    if not Path(path).exists():
        print(f"❌ Конфігурацію не знайдено: {path}")
        sys.exit(1)

    try:
        return load_config(path)
    except (yaml.YAMLError, ValueError, TypeError) as e:
        print(f"❌ Невалідна конфігурація {path}: {e}")
        sys.exit(1)


def main():
    parser = argparse.ArgumentParser(description='Symptom Checker API Server')
    parser.add_argument('--host', default='0.0.0.0', help='Host (default: 0.0.0.0)')
    parser.add_argument('--port', type=int, default=8000, help='Port (default: 8000)')
    parser.add_argument('--reload', action='store_true', help='Enable auto-reload')
    parser.add_argument('--config', default=None, help='YAML конфігурація ядра')
    parser.add_argument('--delay', type=float, default=None, help='Затримка аналізу, секунди')
    parser.add_argument('--language', default=None, help='Мова за замовчуванням (en, pa)')
    parser.add_argument('--preferences', default=None, help='JSON файл збереженої мови')
    parser.add_argument('--log-level', default='info',
                        choices=['debug', 'info', 'warning', 'error'], help='Рівень логування')

    args = parser.parse_args()

    core = resolve_core_config(args.config)
    if args.language and args.language not in core.i18n.supported_languages:
        print(f"❌ Мова '{args.language}' не підтримується: {', '.join(core.i18n.supported_languages)}")
        sys.exit(1)

    # APIConfig.from_env() читає ці змінні при імпорті застосунку
    overrides = {
        "API_HOST": args.host,
        "API_PORT": str(args.port),
        "CONFIG_PATH": args.config,
        "ANALYZING_DELAY_SECONDS": None if args.delay is None else str(args.delay),
        "DEFAULT_LANGUAGE": args.language,
        "PREFERENCES_PATH": args.preferences,
        "LOG_LEVEL": args.log_level.upper(),
    }
    os.environ.update({k: v for k, v in overrides.items() if v is not None})

    delay = core.wizard.analyzing_delay_seconds if args.delay is None else args.delay

    print("=" * 60)
    print(f"🩺 {core.project_name} — API Server v{core.version}")
    print("=" * 60)
    print(f"   URL:       http://{args.host}:{args.port}")
    print(f"   Docs:      http://{args.host}:{args.port}/docs")
    print(f"   Config:    {args.config or 'default'}")
    print(f"   Questions: {core.question_engine.strategy.value}")
    print(f"   Analysis:  {delay:.1f}s, top {core.scorer.max_results}")
    print(f"   Language:  {args.language or core.i18n.default_language}")
    print("=" * 60)

    import uvicorn

    uvicorn.run(
        "symptom_checker.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
