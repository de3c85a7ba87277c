"""Key-value stores that persist the 8-ball configuration between launches."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

logger = logging.getLogger(__name__)


class PersistentStore(Protocol):
    """Durable storage for string lists and integers keyed by name."""

    def get_string_list(self, key: str) -> Optional[List[str]]:
        ...

    def set_string_list(self, key: str, values: List[str]) -> None:
        ...

    def get_int(self, key: str) -> Optional[int]:
        ...

    def set_int(self, key: str, value: int) -> None:
        ...


def _as_string_list(value: Any) -> Optional[List[str]]:
    """Return ``value`` as a list of strings or ``None`` when it is not one."""

    if not isinstance(value, list):
        return None
    if not all(isinstance(item, str) for item in value):
        return None
    return list(value)


def _as_int(value: Any) -> Optional[int]:
    """Return ``value`` if it is a plain integer, otherwise ``None``."""

    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


@dataclass
class MemoryStore:
    """Dict-backed store, mainly useful as a stand-in during tests."""

    data: Dict[str, Any] = field(default_factory=dict)

    def get_string_list(self, key: str) -> Optional[List[str]]:
        return _as_string_list(self.data.get(key))

    def set_string_list(self, key: str, values: List[str]) -> None:
        self.data[key] = list(values)

    def get_int(self, key: str) -> Optional[int]:
        return _as_int(self.data.get(key))

    def set_int(self, key: str, value: int) -> None:
        self.data[key] = int(value)


@dataclass
class JsonFileStore:
    """Store every key inside a single JSON object on disk.

    The file is re-read on every access and rewritten on every update so a
    fresh instance pointed at the same ``path`` always observes the latest
    saved values. A missing or unreadable file behaves like an empty store.
    """

    path: Path

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    def _read(self) -> Dict[str, Any]:
        """Return the stored JSON object, or an empty dict when unavailable."""

        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable store file %s: %s", self.path, exc)
            return {}
        if not isinstance(payload, dict):
            logger.warning("Ignoring store file %s: top level is not an object", self.path)
            return {}
        return payload

    def _write(self, key: str, value: Any) -> None:
        """Update ``key`` and rewrite the whole file."""

        payload = self._read()
        payload[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # The target is only replaced once the whole document has been written.
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=self.path.parent,
            prefix=f".{self.path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            temp_path = Path(handle.name)
            try:
                json.dump(payload, handle, indent=2, ensure_ascii=False)
                handle.write("\n")
            except BaseException:
                handle.close()
                temp_path.unlink(missing_ok=True)
                raise
        os.replace(temp_path, self.path)
        logger.debug("Saved %s to %s", key, self.path)

    def get_string_list(self, key: str) -> Optional[List[str]]:
        return _as_string_list(self._read().get(key))

    def set_string_list(self, key: str, values: List[str]) -> None:
        self._write(key, list(values))

    def get_int(self, key: str) -> Optional[int]:
        return _as_int(self._read().get(key))

    def set_int(self, key: str, value: int) -> None:
        self._write(key, int(value))


__all__ = ["JsonFileStore", "MemoryStore", "PersistentStore"]
