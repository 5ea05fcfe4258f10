"""
Symptom Checker — Web UI Module

Streamlit веб-інтерфейс майстра оцінювання симптомів.

Запуск:
    streamlit run symptom_checker/web_ui/app.py

    або:

    python scripts/run_web.py

Вимоги:
    - Streamlit >= 1.29
    - Requests
    - API сервер (python scripts/run_api.py)
"""
