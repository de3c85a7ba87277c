"""Streamlit page for editing the 8-ball responses and reveal delay."""

from __future__ import annotations

from pathlib import Path
import sys
from typing import List, Sequence

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pandas as pd
import streamlit as st

from Home import get_eight_ball
from lib.defaults import DELAY_STEP_MS, MAX_DELAY_SLIDER_MS, MIN_DELAY_MS
from lib.eight_ball import EightBall
from lib.ui_theme import apply_app_theme, page_header, render_card

SELECT_COLUMN = "Select"
RESPONSE_COLUMN = "Response"
DELAY_SLIDER_KEY = "config_delay_ms"
RESPONSES_TABLE_KEY = "config_responses_table"
ADD_FORM_KEY = "config_add_response"


def responses_frame(responses: Sequence[str]) -> pd.DataFrame:
    """Return the responses as a table with an unticked selection column."""

    frame = pd.DataFrame({RESPONSE_COLUMN: list(responses)})
    frame.insert(0, SELECT_COLUMN, False)
    return frame


def selected_indices(frame: pd.DataFrame) -> List[int]:
    """Return the row positions whose selection box is ticked."""

    if frame.empty or SELECT_COLUMN not in frame.columns:
        return []
    mask = frame[SELECT_COLUMN].fillna(False).astype(bool).tolist()
    return [position for position, ticked in enumerate(mask) if ticked]


def slider_value(delay_ms: int) -> int:
    """Fit ``delay_ms`` into the slider range."""

    return max(MIN_DELAY_MS, min(MAX_DELAY_SLIDER_MS, delay_ms))


def _rerun() -> None:
    """Trigger a Streamlit rerun using the available API."""

    try:
        st.rerun()
    except AttributeError:
        st.experimental_rerun()


def _save_delay(eight_ball: EightBall) -> None:
    """Persist the slider value; used as the slider's change callback."""

    try:
        eight_ball.delay_ms = int(st.session_state[DELAY_SLIDER_KEY])
    except OSError as exc:
        st.error(f"Failed to save delay: {exc}.")


def _render_responses(eight_ball: EightBall) -> None:
    st.subheader("Edit responses")
    responses = eight_ball.responses
    if not responses:
        st.info("No responses yet. The 8 ball will answer \"Error!\" until you add one.")
    else:
        edited = st.data_editor(
            responses_frame(responses),
            hide_index=True,
            width="stretch",
            num_rows="fixed",
            key=f"{RESPONSES_TABLE_KEY}::{len(responses)}",
            column_config={
                SELECT_COLUMN: st.column_config.CheckboxColumn(
                    SELECT_COLUMN,
                    help="Tick the responses you want to delete.",
                ),
                RESPONSE_COLUMN: st.column_config.Column(RESPONSE_COLUMN, disabled=True),
            },
        )
        chosen = selected_indices(edited)
        if st.button("Delete selected", type="secondary", disabled=not chosen):
            try:
                removed = eight_ball.remove_responses(chosen)
            except (IndexError, OSError) as exc:
                st.error(f"Failed to delete responses: {exc}.")
            else:
                st.success(f"Deleted {len(removed)} response(s).")
                _rerun()

    with st.form(ADD_FORM_KEY, clear_on_submit=True):
        new_response = st.text_input("Add a new response")
        submitted = st.form_submit_button("Add response")
    if submitted:
        try:
            added = eight_ball.add_response(new_response)
        except OSError as exc:
            st.error(f"Failed to save response: {exc}.")
        else:
            if added:
                _rerun()
            else:
                st.warning("Enter some text before adding a response.")


def _render_delay(eight_ball: EightBall) -> None:
    st.subheader("Response delay")
    st.slider(
        "Response delay (ms)",
        min_value=MIN_DELAY_MS,
        max_value=MAX_DELAY_SLIDER_MS,
        value=slider_value(eight_ball.delay_ms),
        step=DELAY_STEP_MS,
        key=DELAY_SLIDER_KEY,
        on_change=_save_delay,
        args=(eight_ball,),
    )
    render_card(f"<p>Response Delay (ms): {eight_ball.delay_ms}</p>")


def main() -> None:
    """Render the configuration page."""

    apply_app_theme(page_title="Configuration", page_icon="⚙️")
    page_header(
        "Configuration",
        "Edit the answers the 8 ball can give and how long it keeps you waiting.",
        icon="⚙️",
    )
    eight_ball = get_eight_ball()
    _render_responses(eight_ball)
    _render_delay(eight_ball)


if __name__ == "__main__":
    main()
