"""Streamlit home screen showing the Magic 8 Ball."""

from __future__ import annotations

import asyncio
from typing import Any, Dict

import streamlit as st

from lib.defaults import BACKGROUND_EMOJI, SHAKE_BUTTON_LABEL
from lib.eight_ball import EightBall
from lib.settings import AppSettings, configure_logging, load_settings
from lib.store import JsonFileStore
from lib.ui_theme import answer_markup, apply_app_theme

EIGHT_BALL_STATE_KEY = "magic8ball"
LOADING_TEXT = "Consulting the spirits..."


def _secrets() -> Dict[str, Any]:
    """Return Streamlit secrets as a plain mapping, or ``{}`` without a file."""

    try:
        return {key: st.secrets[key] for key in st.secrets.keys()}
    except Exception:  # pylint: disable=broad-except
        # Running without a secrets.toml is the normal local setup.
        return {}


def get_settings() -> AppSettings:
    """Return the application settings resolved from secrets."""

    return load_settings(_secrets())


def get_eight_ball() -> EightBall:
    """Return the session's :class:`EightBall`, loading it on first use.

    ``pages/01_Configuration.py`` imports this helper so both pages share the
    same instance through ``st.session_state``.
    """

    eight_ball = st.session_state.get(EIGHT_BALL_STATE_KEY)
    if isinstance(eight_ball, EightBall) and not eight_ball.picker.closed:
        return eight_ball

    settings = get_settings()
    configure_logging(settings.log_level)
    eight_ball = EightBall.from_store(JsonFileStore(settings.store_path))
    st.session_state[EIGHT_BALL_STATE_KEY] = eight_ball
    return eight_ball


def main() -> None:
    """Render the 8-ball screen."""

    apply_app_theme(page_title="Magic 8 Ball", page_icon="🎱")
    eight_ball = get_eight_ball()

    answer_slot = st.empty()
    answer_slot.markdown(
        answer_markup(eight_ball.current_answer, BACKGROUND_EMOJI),
        unsafe_allow_html=True,
    )

    if st.button(SHAKE_BUTTON_LABEL, type="primary", use_container_width=True):
        with answer_slot, st.spinner(LOADING_TEXT):
            answer = asyncio.run(eight_ball.shake())
        answer_slot.markdown(
            answer_markup(answer, BACKGROUND_EMOJI),
            unsafe_allow_html=True,
        )

    if not eight_ball.responses:
        st.caption("There are no responses yet. Add some on the configuration page.")
    st.page_link("pages/01_Configuration.py", label="Configuration", icon="⚙️")


if __name__ == "__main__":
    main()
