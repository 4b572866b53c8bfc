# tanker_app_ui.py
# Run: streamlit run tanker_app_ui.py
import streamlit as st

from auth import current_actor, sign_in, sign_out
from config import AppConfig
from db import init_db
from logger import log_info
from translations import DEFAULT_LANGUAGE, LANGUAGE_NAMES, SUPPORTED_LANGUAGES, resolve
from ui import apply_direction
from pages import dashboard, data_entry, export
from pages.helpers import st_safe_rerun

init_db()
st.set_page_config(page_title="Situation Citerne", page_icon="⛽", layout="wide")
st.session_state.setdefault("auth_user", None)

_default_language = AppConfig.DEFAULT_LANGUAGE if AppConfig.DEFAULT_LANGUAGE in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE
st.session_state.setdefault("language", _default_language)

language = st.sidebar.selectbox(
    "🌐",
    SUPPORTED_LANGUAGES,
    index=SUPPORTED_LANGUAGES.index(st.session_state["language"]),
    format_func=lambda code: LANGUAGE_NAMES[code],
    key="_language_select",
)
st.session_state["language"] = language
apply_direction(language)


def t(key: str) -> str:
    return resolve(language, key)


# ---- Operator ----
actor = current_actor()
with st.sidebar:
    if actor is None:
        st.markdown(f"#### {t('login.title')}")
        job_card = st.text_input(t("login.jobCard"), key="login_job_card")
        name = st.text_input(t("login.name"), key="login_name")
        if st.button(f"🔐 {t('login.login')}", key="login_btn", type="primary"):
            if not job_card.strip():
                st.error(t("login.fillAllFields"))
            else:
                sign_in(job_card, name)
                st_safe_rerun()
    else:
        st.caption(f"{t('header.userId')}: {actor.display_name or actor.id}")
        if st.button(t("header.logout"), key="logout_btn"):
            sign_out()
            st_safe_rerun()

PAGES = {
    "form.title": data_entry.render,
    "header.title": dashboard.render,
    "export.title": export.render,
}
page = st.sidebar.radio("Page", list(PAGES), format_func=t, key="_nav_page")
log_info(f"Rendering page {page} ({language})")
PAGES[page](language)
