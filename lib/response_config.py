"""The editable response list and reveal delay, backed by a persistent store."""

from __future__ import annotations

import logging
from typing import Iterable, List

from lib.defaults import (
    DEFAULT_DELAY_MS,
    DELAY_KEY,
    MIN_DELAY_MS,
    RESPONSES_KEY,
    default_responses_list,
)
from lib.store import PersistentStore

logger = logging.getLogger(__name__)


def clean_response(text: object) -> str:
    """Return ``text`` converted to a trimmed string."""

    if isinstance(text, str):
        return text.strip()
    if text is None:
        return ""
    return str(text).strip()


def clamp_delay(ms: int) -> int:
    """Clamp negative delays to zero."""

    return max(MIN_DELAY_MS, int(ms))


class ResponseConfig:
    """Owns the response list and delay, saving after every change.

    Instances are created with :meth:`load`; each mutating method writes the
    affected value to the store straight away. Nothing is batched, so the
    last write wins.
    """

    def __init__(self, store: PersistentStore, responses: List[str], delay_ms: int) -> None:
        self._store = store
        self._responses = list(responses)
        self._delay_ms = clamp_delay(delay_ms)

    @classmethod
    def load(cls, store: PersistentStore) -> "ResponseConfig":
        """Read saved state, falling back to the built-in defaults."""

        saved_responses = store.get_string_list(RESPONSES_KEY)
        saved_delay = store.get_int(DELAY_KEY)
        if saved_responses is None:
            responses = default_responses_list()
        else:
            responses = [text for text in saved_responses if clean_response(text)]
            if len(responses) != len(saved_responses):
                logger.warning(
                    "Dropped %d blank saved responses", len(saved_responses) - len(responses)
                )
        delay_ms = DEFAULT_DELAY_MS if saved_delay is None else saved_delay
        logger.debug(
            "Loaded %d responses (saved=%s) and delay %dms (saved=%s)",
            len(responses),
            saved_responses is not None,
            delay_ms,
            saved_delay is not None,
        )
        return cls(store, responses, delay_ms)

    @property
    def store(self) -> PersistentStore:
        return self._store

    @property
    def responses(self) -> List[str]:
        return list(self._responses)

    @property
    def delay_ms(self) -> int:
        return self._delay_ms

    def _save_responses(self) -> None:
        self._store.set_string_list(RESPONSES_KEY, self._responses)

    def add_response(self, text: str) -> bool:
        """Append ``text`` unless it is blank. Returns whether it was added."""

        cleaned = clean_response(text)
        if not cleaned:
            logger.debug("Ignoring blank response")
            return False
        self._responses.append(cleaned)
        self._save_responses()
        logger.info("Added response %r (%d total)", cleaned, len(self._responses))
        return True

    def remove_response(self, index: int) -> str:
        """Remove and return the response at ``index``.

        Raises ``IndexError`` when ``index`` is outside ``0 <= index < len``;
        negative positions are not accepted.
        """

        if not 0 <= index < len(self._responses):
            raise IndexError(f"response index {index} out of range")
        removed = self._responses.pop(index)
        self._save_responses()
        logger.info("Removed response %r (%d left)", removed, len(self._responses))
        return removed

    def remove_responses(self, indices: Iterable[int]) -> List[str]:
        """Remove every position in ``indices`` with a single save."""

        positions = sorted(set(indices))
        for index in positions:
            if not 0 <= index < len(self._responses):
                raise IndexError(f"response index {index} out of range")
        if not positions:
            return []

        removed = [self._responses[index] for index in positions]
        for index in reversed(positions):
            del self._responses[index]
        self._save_responses()
        logger.info("Removed %d responses (%d left)", len(removed), len(self._responses))
        return removed

    def set_delay(self, ms: int) -> int:
        """Store the reveal delay, clamping negative values to zero."""

        self._delay_ms = clamp_delay(ms)
        self._store.set_int(DELAY_KEY, self._delay_ms)
        logger.info("Delay set to %dms", self._delay_ms)
        return self._delay_ms


__all__ = ["ResponseConfig", "clamp_delay", "clean_response"]
