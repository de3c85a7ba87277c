"""The state object the Streamlit pages bind to."""

from __future__ import annotations

import asyncio
import random
from typing import Iterable, List, Optional

from lib.answer_picker import AnswerPicker
from lib.response_config import ResponseConfig
from lib.store import PersistentStore


class EightBall:
    """Combine the saved configuration with the answer picker.

    One instance is created per browser session and kept in
    ``st.session_state``; pages read and mutate it through this surface only.
    """

    def __init__(self, config: ResponseConfig, picker: Optional[AnswerPicker] = None) -> None:
        self.config = config
        self.picker = picker or AnswerPicker()

    @classmethod
    def from_store(
        cls, store: PersistentStore, *, rng: Optional[random.Random] = None
    ) -> "EightBall":
        return cls(ResponseConfig.load(store), AnswerPicker(rng=rng))

    @property
    def current_answer(self) -> str:
        return self.picker.current_answer

    @property
    def is_pending(self) -> bool:
        return self.picker.is_pending

    @property
    def responses(self) -> List[str]:
        return self.config.responses

    def add_response(self, text: str) -> bool:
        return self.config.add_response(text)

    def remove_response(self, index: int) -> str:
        return self.config.remove_response(index)

    def remove_responses(self, indices: Iterable[int]) -> List[str]:
        return self.config.remove_responses(indices)

    @property
    def delay_ms(self) -> int:
        return self.config.delay_ms

    @delay_ms.setter
    def delay_ms(self, value: int) -> None:
        self.config.set_delay(value)

    def trigger(self) -> Optional[asyncio.Task]:
        """Start a pick cycle with the responses and delay as they are now."""

        return self.picker.trigger(self.config.responses, self.config.delay_ms)

    async def shake(self) -> str:
        """Trigger a pick and wait for its reveal."""

        self.trigger()
        return await self.picker.wait()

    def close(self) -> None:
        self.picker.close()


__all__ = ["EightBall"]
