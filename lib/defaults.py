"""Default values shared between the 8-ball screen and the configuration page."""

from __future__ import annotations

from typing import List

RESPONSES_KEY = "magic8BallResponses"
DELAY_KEY = "magic8BallDelay"

DEFAULT_RESPONSES: tuple[str, ...] = (
    "It is certain.",
    "Ask again later.",
    "Don't count on it.",
    "Yes, definitely!",
    "No way!",
    "Outlook good.",
    "Very doubtful.",
    "Try again.",
)
DEFAULT_DELAY_MS = 1000
MIN_DELAY_MS = 0
# Slider bounds for the configuration page; the core accepts any non-negative delay.
MAX_DELAY_SLIDER_MS = 5000
DELAY_STEP_MS = 100

FALLBACK_ANSWER = "Error!"
INITIAL_ANSWER = "Do you Dare?"
SHAKE_BUTTON_LABEL = "Shake or Press if You Dare"
BACKGROUND_EMOJI = "😈"


def default_responses_list() -> List[str]:
    """Return a mutable list of the built-in responses."""

    return list(DEFAULT_RESPONSES)
