"""Resolve application settings from Streamlit secrets."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_STORE_PATH = PROJECT_ROOT / "data" / "magic8ball.json"
DEFAULT_LOG_LEVEL = "INFO"
SECRETS_SECTION = "magic8ball"

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class AppSettings:
    """Where the configuration is saved and how chatty the logs are."""

    store_path: Path = DEFAULT_STORE_PATH
    log_level: str = DEFAULT_LOG_LEVEL


def _section(secrets: Mapping[str, Any], name: str) -> Dict[str, Any]:
    """Return the table stored under ``name``, or an empty dict."""

    value = secrets.get(name, {})
    if isinstance(value, Mapping):
        return dict(value)
    return {}


def _clean_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def load_settings(secrets: Optional[Mapping[str, Any]] = None) -> AppSettings:
    """Build :class:`AppSettings` from a secrets mapping.

    Values in the ``[magic8ball]`` table win; top-level
    ``magic8ball_store_path`` / ``magic8ball_log_level`` keys are used when
    the table does not set them. Relative store paths resolve against the
    project root.
    """

    secrets = secrets or {}
    section = _section(secrets, SECRETS_SECTION)

    store_path = _clean_text(section.get("store_path")) or _clean_text(
        secrets.get("magic8ball_store_path")
    )
    log_level = _clean_text(section.get("log_level")) or _clean_text(
        secrets.get("magic8ball_log_level")
    )

    path = Path(store_path) if store_path else DEFAULT_STORE_PATH
    if not path.is_absolute():
        path = PROJECT_ROOT / path

    return AppSettings(store_path=path, log_level=(log_level or DEFAULT_LOG_LEVEL).upper())


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> logging.Logger:
    """Set the level of the ``lib`` logger and attach a stream handler once."""

    logger = logging.getLogger("lib")
    resolved = logging.getLevelName(level.upper())
    logger.setLevel(resolved if isinstance(resolved, int) else logging.INFO)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
    return logger


__all__ = [
    "AppSettings",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_STORE_PATH",
    "configure_logging",
    "load_settings",
]
