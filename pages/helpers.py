"""
Helper functions shared across Streamlit page modules.

They give every page the same access to the record store, the export
manager and error display without module-level globals in the core.
"""

from __future__ import annotations
import streamlit as st

from db import get_session, init_db
from errors import SCGError
from export_manager import ExportManager
from logger import log_error
from record_store import KeyValueStorage, RecordStore
from translations import resolve


def st_safe_rerun() -> None:
    """Trigger a rerun of the Streamlit app.

    Uses ``st.rerun`` and falls back to ``st.experimental_rerun`` on older
    Streamlit releases.
    """
    if hasattr(st, "rerun"):
        st.rerun()
    else:
        st.experimental_rerun()


@st.cache_resource
def get_store() -> RecordStore:
    """Process-wide record store bound to the application database"""
    init_db()
    return RecordStore(KeyValueStorage(get_session))


def get_export_manager() -> ExportManager:
    return ExportManager(get_store())


def show_error(exc: SCGError, language: str) -> None:
    """Log ``exc`` and show its localized message"""
    log_error(f"{type(exc).__name__}: {exc}")
    st.error(resolve(language, exc.message_key))
