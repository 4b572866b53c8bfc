# ui.py
import streamlit as st

from translations import is_rtl, resolve


def header(title: str, language: str):
    """Simple top bar with title and operator pill."""
    mid, right = st.columns([0.76, 0.24])

    with mid:
        st.markdown(f"<h2 style='margin:0'>{title}</h2>", unsafe_allow_html=True)
        st.caption(resolve(language, "header.subtitle"))

    with right:
        user = st.session_state.get("auth_user")
        pill = f"{user['name'] or user['id']} · {user['id']}" if user else "Guest"
        st.markdown(
            f"<div style='text-align:right;border:1px solid #334155;"
            f"padding:6px 10px;border-radius:999px;display:inline-block'>{pill}</div>",
            unsafe_allow_html=True,
        )

    st.divider()


def apply_direction(language: str):
    """Mirror the page for right-to-left languages"""
    direction = "rtl" if is_rtl(language) else "ltr"
    st.markdown(
        f"<style>.main .block-container {{direction: {direction};}}</style>",
        unsafe_allow_html=True,
    )
