#!/usr/bin/env python3
"""
Symptom Checker — Запуск Web UI (Streamlit)

Перед стартом перевіряє /health API сервера; Web UI не має власної
логіки майстра і без API не працює.

Запуск:
    python scripts/run_web.py
    python scripts/run_web.py --api-url http://localhost:8000 --port 8501
    python scripts/run_web.py --skip-check
"""

import os
import sys
import subprocess
import argparse
from pathlib import Path

import requests

project_root = Path(__file__).parent.parent
web_ui_path = project_root / "symptom_checker" / "web_ui" / "app.py"


def probe_api(api_url: str, timeout: float = 3.0):
    """Повернути відповідь /health або None, якщо сервер недоступний"""
    try:
        response = requests.get(f"{api_url.rstrip('/')}/health", timeout=timeout)
    except requests.RequestException:
        return None
    if response.status_code != 200:
        return None
    return response.json()


def main():
    parser = argparse.ArgumentParser(description='Symptom Checker Web UI')
    parser.add_argument('--port', type=int, default=8501, help='Port (default: 8501)')
    parser.add_argument('--host', default='localhost', help='Host (default: localhost)')
    parser.add_argument('--api-url', default='http://localhost:8000', help='URL API сервера')
    parser.add_argument('--skip-check', action='store_true', help='Не перевіряти API перед стартом')

    args = parser.parse_args()

    print("=" * 60)
    print("🩺 Symptom Checker — Web UI")
    print("=" * 60)
    print(f"   UI:  http://{args.host}:{args.port}")
    print(f"   API: {args.api_url}")

    if not args.skip_check:
        health = probe_api(args.api_url)
        if health is None:
            print("=" * 60)
            print(f"❌ API недоступний: {args.api_url}")
            print("   Запустіть: python scripts/run_api.py")
            print("   Або: python scripts/run_web.py --skip-check")
            sys.exit(1)

        print(f"   API v{health['version']}: {health['catalog_symptoms']} симптомів, "
              f"питання '{health['question_strategy']}', сесій {health['active_sessions']}")

    print("=" * 60)

    env = dict(os.environ, SYMPTOM_CHECKER_API_URL=args.api_url)
    cmd = [
        sys.executable, "-m", "streamlit", "run",
        str(web_ui_path),
        "--server.port", str(args.port),
        "--server.address", args.host,
        "--browser.gatherUsageStats", "false",
    ]

    try:
        subprocess.run(cmd, env=env)
    except KeyboardInterrupt:
        print("\n🛑 Зупинено")


if __name__ == "__main__":
    main()
