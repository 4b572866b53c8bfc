# auth.py
"""
Operator identity for the tanker loading log.

Credential checks live outside this application; this module only keeps the
signed-in operator in the Streamlit session and hands it to the record
store as an Actor.
"""

from typing import Optional

import streamlit as st

from logger import log_info
from models import Actor

SESSION_KEY = "auth_user"


def current_actor() -> Optional[Actor]:
    """The signed-in operator, or None"""
    user = st.session_state.get(SESSION_KEY)
    if not user:
        return None
    return Actor(id=user["id"], display_name=user.get("name", ""))


def sign_in(operator_id: str, display_name: str) -> Actor:
    operator_id = (operator_id or "").strip()
    if not operator_id:
        raise ValueError("Operator id is required")
    st.session_state[SESSION_KEY] = {"id": operator_id, "name": (display_name or "").strip()}
    log_info(f"Operator {operator_id} signed in")
    return current_actor()


def sign_out() -> None:
    user = st.session_state.pop(SESSION_KEY, None)
    if user:
        log_info(f"Operator {user['id']} signed out")
