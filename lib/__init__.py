"""Library helpers for the Magic 8 Ball application."""

from .answer_picker import AnswerPicker, PickerState, choose, pick  # noqa: F401
from .eight_ball import EightBall  # noqa: F401
from .response_config import ResponseConfig  # noqa: F401
from .store import JsonFileStore, MemoryStore, PersistentStore  # noqa: F401
