"""Tests for resolving settings from Streamlit secrets."""

from __future__ import annotations

import importlib
import logging
from pathlib import Path


def _settings_module():
    return importlib.import_module("lib.settings")


def test_load_settings_defaults_without_secrets() -> None:
    module = _settings_module()

    settings = module.load_settings({})

    assert settings.store_path == module.DEFAULT_STORE_PATH
    assert settings.log_level == "INFO"
    assert module.load_settings(None) == settings


def test_load_settings_prefers_section_values(tmp_path: Path) -> None:
    module = _settings_module()
    target = tmp_path / "store.json"

    settings = module.load_settings(
        {
            "magic8ball": {"store_path": str(target), "log_level": "debug"},
            "magic8ball_store_path": "ignored.json",
            "magic8ball_log_level": "ERROR",
        }
    )

    assert settings.store_path == target
    assert settings.log_level == "DEBUG"


def test_load_settings_falls_back_to_top_level_keys() -> None:
    module = _settings_module()

    settings = module.load_settings(
        {
            "magic8ball": "not a table",
            "magic8ball_store_path": "custom/answers.json",
            "magic8ball_log_level": "warning",
        }
    )

    assert settings.store_path == module.PROJECT_ROOT / "custom" / "answers.json"
    assert settings.log_level == "WARNING"


def test_configure_logging_sets_level_and_adds_one_handler() -> None:
    module = _settings_module()
    logger = logging.getLogger("lib")
    original_level = logger.level
    original_handlers = list(logger.handlers)
    try:
        logger.handlers = []
        module.configure_logging("debug")
        module.configure_logging("DEBUG")

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

        module.configure_logging("nonsense")
        assert logger.level == logging.INFO
    finally:
        logger.handlers = original_handlers
        logger.setLevel(original_level)
