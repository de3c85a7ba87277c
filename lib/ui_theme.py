"""Utilities for applying a shared visual identity across Streamlit pages."""

from __future__ import annotations

from html import escape as html_escape
from typing import Any, Optional

import streamlit as st


_THEME_CSS = """
<style>
:root {
    --app-accent: #2563EB;
    --app-accent-dark: #1D4ED8;
    --app-surface: rgba(255, 255, 255, 0.08);
    --app-border: rgba(255, 255, 255, 0.18);
    --app-shadow: 0 18px 40px rgba(0, 0, 0, 0.35);
    --app-text: #F8FAFC;
    --app-muted: #CBD5E1;
    --app-answer: #60A5FA;
}

html, body {
    font-family: "Inter", "Segoe UI", system-ui, -apple-system, sans-serif;
    color: var(--app-text);
}

[data-testid="stAppViewContainer"] {
    background: linear-gradient(180deg, #6B21A8 0%, #000000 100%);
}

[data-testid="stHeader"] {
    background: transparent;
}

.block-container {
    padding-top: 2.5rem;
    padding-bottom: 4rem;
    max-width: 42rem;
}

.app-header {
    display: flex;
    align-items: center;
    gap: 1.25rem;
    padding: 1.25rem 1.75rem;
    background: var(--app-surface);
    border-radius: 1.5rem;
    border: 1px solid var(--app-border);
    box-shadow: var(--app-shadow);
    margin-bottom: 2rem;
}

.app-header__icon {
    font-size: 2.5rem;
    line-height: 1;
}

.app-header__title {
    margin: 0;
    font-size: 2rem;
    font-weight: 700;
    color: var(--app-text);
}

.app-header__subtitle {
    margin: 0.25rem 0 0 0;
    font-size: 1rem;
    color: var(--app-muted);
}

.app-card {
    background: var(--app-surface);
    border-radius: 1.5rem;
    border: 1px solid var(--app-border);
    box-shadow: var(--app-shadow);
    padding: 1.5rem 1.75rem;
    margin-bottom: 1.5rem;
}

.app-card__title {
    margin: 0 0 1rem 0;
    font-size: 1.3rem;
    font-weight: 600;
    color: var(--app-text);
}

.app-ball {
    position: relative;
    min-height: 22rem;
    display: flex;
    align-items: center;
    justify-content: center;
    overflow: hidden;
}

.app-ball__emoji {
    position: absolute;
    font-size: 18rem;
    opacity: 0.1;
    transform: scale(1.2);
    user-select: none;
    pointer-events: none;
}

.app-ball__answer {
    position: relative;
    margin: 0;
    padding: 1rem;
    font-size: 2rem;
    font-weight: 600;
    color: var(--app-answer);
    text-align: center;
}

.stButton > button[kind="primary"] {
    width: 100%;
    padding: 0.9rem 1rem;
    font-size: 1.3rem;
    font-weight: 700;
    border-radius: 0.75rem;
    background: var(--app-accent);
    border: none;
    box-shadow: 0 4px 10px rgba(0, 0, 0, 0.35);
}

.stButton > button[kind="primary"]:hover {
    background: var(--app-accent-dark);
}
</style>
"""


def apply_app_theme(page_title: str, page_icon: Optional[str] = None) -> None:
    """Set up consistent page configuration and inject the shared CSS theme."""

    st.set_page_config(
        page_title=page_title,
        page_icon=page_icon,
        layout="centered",
        initial_sidebar_state="collapsed",
    )
    st.markdown(_THEME_CSS, unsafe_allow_html=True)


def page_header(
    title: str,
    subtitle: Optional[str] = None,
    icon: Optional[str] = None,
    *,
    container: Optional[Any] = None,
) -> None:
    """Render a hero-style header with a title, subtitle, and optional icon."""

    icon_markup = f"<span class='app-header__icon'>{icon}</span>" if icon else ""
    subtitle_markup = (
        f"<p class='app-header__subtitle'>{subtitle}</p>" if subtitle else ""
    )
    target = container.markdown if container is not None else st.markdown
    target(
        f"""
        <div class="app-header">
            {icon_markup}
            <div>
                <h1 class="app-header__title">{title}</h1>
                {subtitle_markup}
            </div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def answer_markup(answer: str, emoji: str) -> str:
    """Return the HTML for the answer text laid over the background emoji.

    The answer is user supplied, so it is escaped before being embedded.
    """

    return (
        "<div class='app-card app-ball'>"
        f"<span class='app-ball__emoji'>{emoji}</span>"
        f"<p class='app-ball__answer'>{html_escape(answer)}</p>"
        "</div>"
    )


def render_card(content: str, title: Optional[str] = None) -> None:
    """Render pre-formatted HTML content inside a themed surface."""

    heading = f"<h3 class='app-card__title'>{title}</h3>" if title else ""
    st.markdown(
        f"<div class='app-card'>{heading}{content}</div>",
        unsafe_allow_html=True,
    )
