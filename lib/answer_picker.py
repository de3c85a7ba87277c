"""Random answer selection with a delayed reveal."""

from __future__ import annotations

import asyncio
import logging
import random
from enum import Enum
from typing import Callable, List, Optional, Sequence

from lib.defaults import FALLBACK_ANSWER, INITIAL_ANSWER

logger = logging.getLogger(__name__)

RevealListener = Callable[[str], None]


class PickerState(str, Enum):
    """Whether an answer is waiting to be revealed."""

    IDLE = "idle"
    PENDING = "pending"


def choose(responses: Sequence[str], rng: Optional[random.Random] = None) -> str:
    """Return one of ``responses`` with equal probability.

    An empty sequence yields :data:`FALLBACK_ANSWER` instead of raising.
    """

    if not responses:
        return FALLBACK_ANSWER
    return (rng or random).choice(list(responses))


def _delay_seconds(delay_ms: int) -> float:
    return max(0, delay_ms) / 1000.0


async def pick(
    responses: Sequence[str],
    delay_ms: int,
    rng: Optional[random.Random] = None,
) -> str:
    """Choose an answer now and hand it back once ``delay_ms`` has elapsed."""

    answer = choose(responses, rng)
    await asyncio.sleep(_delay_seconds(delay_ms))
    return answer


class AnswerPicker:
    """Two-state machine driving the loading indicator and the reveal.

    ``trigger`` samples the answer immediately and schedules its reveal on the
    running event loop. Triggers that arrive while a reveal is pending are
    ignored. Once :meth:`close` has been called, pending reveals are dropped
    and new triggers are ignored.
    """

    def __init__(
        self,
        initial_answer: str = INITIAL_ANSWER,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._answer = initial_answer
        self._rng = rng
        self._state = PickerState.IDLE
        self._task: Optional[asyncio.Task] = None
        self._closed = False
        self._listeners: List[RevealListener] = []

    @property
    def state(self) -> PickerState:
        return self._state

    @property
    def current_answer(self) -> str:
        return self._answer

    @property
    def is_pending(self) -> bool:
        return self._state is PickerState.PENDING

    @property
    def closed(self) -> bool:
        return self._closed

    def add_reveal_listener(self, listener: RevealListener) -> None:
        """Call ``listener`` with each answer as it is revealed."""

        self._listeners.append(listener)

    def trigger(self, responses: Sequence[str], delay_ms: int) -> Optional[asyncio.Task]:
        """Start a pick cycle, returning the reveal task or ``None`` if ignored.

        Must be called from inside a running event loop.
        """

        if self._closed:
            logger.debug("Ignoring trigger on a closed picker")
            return None
        if self._task is not None and self._task.done():
            # The loop that owned the reveal went away before it fired.
            logger.debug("Discarding stale reveal task")
            self._task = None
            self._state = PickerState.IDLE
        if self._state is PickerState.PENDING:
            logger.debug("Ignoring trigger while a reveal is pending")
            return None

        loop = asyncio.get_running_loop()
        answer = choose(responses, self._rng)
        self._state = PickerState.PENDING
        self._task = loop.create_task(self._reveal_after(answer, delay_ms))
        return self._task

    async def _reveal_after(self, answer: str, delay_ms: int) -> None:
        await asyncio.sleep(_delay_seconds(delay_ms))
        self._reveal(answer)

    def _reveal(self, answer: str) -> None:
        if self._closed:
            logger.debug("Dropping reveal for a closed picker")
            return
        self._answer = answer
        self._state = PickerState.IDLE
        self._task = None
        for listener in list(self._listeners):
            listener(answer)

    async def wait(self) -> str:
        """Wait for the pending reveal, if any, and return the current answer."""

        task = self._task
        if task is not None and not task.done():
            await asyncio.wait({task})
        return self._answer

    def close(self) -> None:
        """Drop any pending reveal and stop accepting triggers."""

        self._closed = True
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
        self._state = PickerState.IDLE


__all__ = ["AnswerPicker", "PickerState", "choose", "pick"]
