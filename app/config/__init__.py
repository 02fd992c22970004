import streamlit as st

from pi_casso.session import Session, new_session

from .sections import (
    canvas_section,
    generator_section,
    palette_section,
    preset_section,
)

__all__ = [
    "canvas_section",
    "generator_section",
    "get_session",
    "palette_section",
    "preset_section",
    "set_default_session",
    "store_session",
]


def set_default_session() -> None:
    if "session" not in st.session_state:
        st.session_state["session"] = new_session()


def get_session() -> Session:
    return st.session_state["session"]


def store_session(session: Session) -> None:
    st.session_state["session"] = session
