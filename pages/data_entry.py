"""
Data entry page: record one tanker movement.
"""
from __future__ import annotations
import streamlit as st

from auth import current_actor
from errors import PersistenceError, Unauthenticated, ValidationError
from logger import log_warning
from pages.helpers import get_store, show_error
from record_input import SERIAL_NUMBER_OPTIONS, next_serial_number, parse_record_form
from translations import translator
from ui import header

SERIAL_KEY = "entry_serial_number"

# (field, label key, is numeric)
FORM_FIELDS = [
    ("tanker_number", "form.tankerNumber", False),
    ("entry_time", "form.entryTime", False),
    ("exit_time", "form.exitTime", False),
    ("bc_number", "form.bcNumber", False),
    ("ordered_quantity", "form.orderedQuantity", True),
    ("loaded_quantity", "form.loadedQuantity", True),
    ("old_index", "form.oldIndex", True),
    ("current_index", "form.currentIndex", True),
    ("destination", "form.destination", False),
]


def render(language: str) -> None:
    t = translator(language)
    header(t("form.title"), language)

    st.session_state.setdefault(SERIAL_KEY, SERIAL_NUMBER_OPTIONS[0])

    with st.form("tanker_entry_form", clear_on_submit=False):
        cols = st.columns(3)
        values = {}
        with cols[0]:
            values["serial_number"] = st.selectbox(
                t("form.serialNumber"),
                SERIAL_NUMBER_OPTIONS,
                index=SERIAL_NUMBER_OPTIONS.index(st.session_state[SERIAL_KEY])
                if st.session_state[SERIAL_KEY] in SERIAL_NUMBER_OPTIONS else 0,
            )
        for i, (name, label_key, numeric) in enumerate(FORM_FIELDS, start=1):
            with cols[i % 3]:
                placeholder = "0" if numeric else ("HH:MM" if name.endswith("_time") else "")
                values[name] = st.text_input(t(label_key), key=f"entry_{name}", placeholder=placeholder)

        submit = st.form_submit_button(f"💾 {t('form.save')}", type="primary", use_container_width=True)

    if not submit:
        return

    try:
        data = parse_record_form(values)
    except ValidationError as exc:
        log_warning(f"Entry form rejected: {exc}")
        st.error(t("login.fillAllFields"))
        labels = {name: label_key for name, label_key, _ in FORM_FIELDS}
        for name, message_key in exc.errors.items():
            st.caption(f"• {t(labels.get(name, name))}: {t(message_key)}")
        return

    try:
        record = get_store().add(data, current_actor())
    except (Unauthenticated, PersistenceError) as exc:
        show_error(exc, language)
        return

    st.session_state[SERIAL_KEY] = next_serial_number(record.serial_number)
    st.success(f"✅ {t('form.success')} ({record.tanker_number})")
