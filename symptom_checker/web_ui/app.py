"""
Symptom Checker — Web UI (Streamlit)

Майстер оцінювання симптомів поверх REST API:
симптоми → питання → аналіз → результати.

Запуск:
    streamlit run symptom_checker/web_ui/app.py

    або:

    python scripts/run_web.py
"""

import os
import time
from typing import Optional

import requests
import streamlit as st

API_URL = os.getenv("SYMPTOM_CHECKER_API_URL", "http://localhost:8000")

SEVERITY_BADGES = {
    "mild": "🟢",
    "moderate": "🟡",
    "severe": "🔴",
    "low": "🟢",
    "medium": "🟡",
    "high": "🔴",
}

POLL_INTERVAL = 0.5


# =============================================================================
# API клієнт
# =============================================================================

def api(method: str, path: str, **kwargs) -> Optional[dict]:
    """Виклик API; None при мережевій помилці або статусі != 200"""
    try:
        r = requests.request(method, f"{API_URL}{path}", timeout=5, **kwargs)
    except requests.RequestException as e:
        st.error(f"❌ API недоступний: {e}")
        return None

    if r.status_code != 200:
        st.error(f"❌ {r.status_code}: {r.json().get('detail', r.text)}")
        return None

    return r.json()


def check_api() -> bool:
    try:
        r = requests.get(f"{API_URL}/health", timeout=2)
        return r.status_code == 200
    except requests.RequestException:
        return False


def apply_transition(data: Optional[dict]) -> Optional[dict]:
    """Зберегти стан сесії з відповіді тригера"""
    if data is None:
        return None

    st.session_state.session_data = data["session_state"]
    return data


def new_session() -> None:
    data = api("POST", "/api/sessions", json={"symptoms": []})
    if data:
        st.session_state.session_id = data["session_id"]
        st.session_state.session_data = data


def trigger(action: str, **kwargs) -> Optional[dict]:
    session_id = st.session_state.session_id
    return apply_transition(api("POST", f"/api/sessions/{session_id}/{action}", **kwargs))


# =============================================================================
# Фази
# =============================================================================

def render_symptoms(data: dict) -> None:
    query = st.text_input("🔍", placeholder=t("search_symptoms"))
    symptoms = api("GET", "/api/symptoms", params={"q": query} if query else None) or []

    selected_ids = {s["id"] for s in data["selected_symptoms"]}

    cols = st.columns(2)
    for i, symptom in enumerate(symptoms):
        badge = SEVERITY_BADGES.get(symptom["severity"], "")
        checked = symptom["id"] in selected_ids
        label = f"{'✅' if checked else '⬜'} {symptom['name']} {badge}"

        if cols[i % 2].button(label, key=f"symptom_{symptom['id']}", use_container_width=True):
            trigger(f"symptoms/{symptom['id']}/toggle")
            st.rerun()

    st.divider()
    st.caption(f"{len(selected_ids)} {t('symptoms_selected')}")

    if st.button(t("continue_assessment"), type="primary", use_container_width=True):
        result = trigger("start")
        if result and not result["accepted"]:
            notice = result["session_state"]["notice"]
            st.session_state.flash = notice
        st.rerun()


def render_questions(data: dict) -> None:
    progress = data["progress"]
    question = data["current_question"]

    st.progress(progress["fraction"], text=progress["label"])
    st.subheader(question["text"])

    if question["type"] == "boolean":
        col1, col2 = st.columns(2)
        if col1.button(t("yes"), use_container_width=True, key=f"yes_{question['id']}"):
            trigger("answer", json={"value": True})
            st.rerun()
        if col2.button(t("no"), use_container_width=True, key=f"no_{question['id']}"):
            trigger("answer", json={"value": False})
            st.rerun()

    elif question["type"] == "scale":
        value = st.select_slider(
            "scale",
            options=list(range(question["scale_min"], question["scale_max"] + 1)),
            value=question["scale_min"],
            label_visibility="collapsed",
            key=f"scale_{question['id']}",
        )
        st.caption(f"{question['scale_min_label']} ↔ {question['scale_max_label']}")
        if st.button("➡️", type="primary", key=f"submit_{question['id']}"):
            trigger("answer", json={"value": value})
            st.rerun()

    else:
        for option in question["options"]:
            if st.button(option["text"], use_container_width=True, key=f"opt_{question['id']}_{option['key']}"):
                trigger("answer", json={"value": option["key"]})
                st.rerun()


def render_analyzing() -> None:
    with st.spinner(t("ai_processing")):
        time.sleep(POLL_INTERVAL)

    data = api("GET", f"/api/sessions/{st.session_state.session_id}")
    if data:
        st.session_state.session_data = data
    st.rerun()


def render_results(data: dict) -> None:
    st.success(t("analysis_complete"))
    st.markdown(t("possible_conditions"))

    for d in data["diagnoses"]:
        badge = SEVERITY_BADGES.get(d["severity"], "")
        with st.container(border=True):
            col1, col2 = st.columns([4, 1])
            col1.markdown(f"### {badge} {d['condition']}")
            col2.metric("probability", f"{d['probability']}%", label_visibility="collapsed")
            st.progress(d["probability"] / 100)
            st.write(d["description"])

            st.markdown(f"**{t('recommendations')}**")
            for rec in d["recommendations"]:
                st.markdown(f"- {rec}")

    st.warning(f"⚠️ {data['disclaimer']}")

    col1, col2 = st.columns(2)
    if col1.button(f"🩺 {t('consult_doctor')}", type="primary", use_container_width=True):
        handoff = api("POST", f"/api/sessions/{st.session_state.session_id}/consult")
        if handoff:
            st.info(f"➡️ /{handoff['route']} ({', '.join(handoff['symptom_ids'])})")

    if col2.button(f"🔄 {t('restart')}", use_container_width=True):
        trigger("restart")
        st.rerun()


# =============================================================================
# Переклад
# =============================================================================

@st.cache_data(ttl=300)
def ui_texts(language: str) -> dict:
    """UI тексти активною мовою (кеш за кодом мови)"""
    try:
        r = requests.get(f"{API_URL}/api/language/texts", timeout=5)
    except requests.RequestException:
        return {}

    if r.status_code != 200:
        return {}
    return r.json()["texts"]


def t(key: str) -> str:
    return ui_texts(st.session_state.get("language", "en")).get(key, key)


# =============================================================================
# Головна
# =============================================================================

def main():
    st.set_page_config(
        page_title="Symptom Checker",
        page_icon="🩺",
        layout="centered",
    )

    if not check_api():
        st.error("❌ API сервер недоступний!")
        st.info("Запустіть: `python scripts/run_api.py`")
        st.stop()

    # Мова
    lang = api("GET", "/api/language") or {"language": "en", "supported": ["en"]}
    with st.sidebar:
        st.title("🩺 Symptom Checker")
        choice = st.selectbox(
            "Language",
            options=lang["supported"],
            index=lang["supported"].index(lang["language"]),
        )
        if choice != lang["language"]:
            api("PUT", "/api/language", json={"language": choice})
            st.session_state.session_data = None
            st.rerun()

    st.session_state.language = lang["language"]

    if st.session_state.get("session_id") is None:
        new_session()

    session_id = st.session_state.get("session_id")
    if session_id is None:
        st.stop()

    data = st.session_state.get("session_data")
    if data is None:
        data = api("GET", f"/api/sessions/{session_id}")
        if data is None:
            # Сесія могла застаріти — створюємо нову
            st.session_state.session_id = None
            st.rerun()
        st.session_state.session_data = data

    # Заголовок та кнопка «назад»
    col_back, col_title = st.columns([1, 6])
    col_title.title(data["title"])
    if col_back.button("⬅️", help=t("back"), disabled=data["phase"] == "analyzing"):
        if data["phase"] == "symptoms":
            # Вихід з потоку: починаємо нову сесію
            api("DELETE", f"/api/sessions/{session_id}")
            st.session_state.session_id = None
        else:
            trigger("back")
        st.rerun()

    flash = st.session_state.pop("flash", None)
    if flash:
        st.warning(f"**{flash['title']}**\n\n{flash['message']}")

    phase = data["phase"]
    if phase == "symptoms":
        render_symptoms(data)
    elif phase == "questions":
        render_questions(data)
    elif phase == "analyzing":
        render_analyzing()
    else:
        render_results(data)


if __name__ == "__main__":
    main()
