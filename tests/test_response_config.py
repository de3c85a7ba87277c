"""Tests for the persisted response list and delay."""

from __future__ import annotations

import importlib
from pathlib import Path

import pytest

from lib.defaults import DEFAULT_DELAY_MS, DEFAULT_RESPONSES, DELAY_KEY, RESPONSES_KEY
from lib.store import JsonFileStore, MemoryStore


def _config_module():
    return importlib.import_module("lib.response_config")


def test_load_without_saved_state_uses_defaults() -> None:
    config = _config_module().ResponseConfig.load(MemoryStore())

    assert config.responses == list(DEFAULT_RESPONSES)
    assert len(config.responses) == 8
    assert config.delay_ms == DEFAULT_DELAY_MS == 1000


def test_load_without_saved_state_writes_nothing() -> None:
    store = MemoryStore()
    _config_module().ResponseConfig.load(store)

    assert store.data == {}


def test_load_reads_saved_values() -> None:
    store = MemoryStore({RESPONSES_KEY: ["Maybe"], DELAY_KEY: 300})
    config = _config_module().ResponseConfig.load(store)

    assert config.responses == ["Maybe"]
    assert config.delay_ms == 300


def test_saved_empty_list_is_kept() -> None:
    store = MemoryStore({RESPONSES_KEY: []})
    config = _config_module().ResponseConfig.load(store)

    assert config.responses == []
    assert config.delay_ms == DEFAULT_DELAY_MS


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_add_response_ignores_blank_input(text: str) -> None:
    store = MemoryStore()
    config = _config_module().ResponseConfig.load(store)

    assert config.add_response(text) is False
    assert config.responses == list(DEFAULT_RESPONSES)
    assert RESPONSES_KEY not in store.data


def test_add_response_persists_across_reload(tmp_path: Path) -> None:
    module = _config_module()
    path = tmp_path / "store.json"
    config = module.ResponseConfig.load(JsonFileStore(path))
    before = config.responses.count("Yes")

    assert config.add_response("Yes") is True

    reloaded = module.ResponseConfig.load(JsonFileStore(path))
    assert reloaded.responses.count("Yes") == before + 1
    assert reloaded.responses[-1] == "Yes"


def test_add_response_strips_surrounding_whitespace_and_allows_duplicates() -> None:
    config = _config_module().ResponseConfig.load(MemoryStore({RESPONSES_KEY: ["Yes"]}))

    config.add_response("  Yes  ")

    assert config.responses == ["Yes", "Yes"]


def test_remove_response_drops_first_entry_and_keeps_order() -> None:
    store = MemoryStore()
    config = _config_module().ResponseConfig.load(store)
    original = config.responses

    removed = config.remove_response(0)

    assert removed == original[0]
    assert config.responses == original[1:]
    assert store.get_string_list(RESPONSES_KEY) == original[1:]


@pytest.mark.parametrize("index", [-1, 8, 100])
def test_remove_response_rejects_out_of_range_index(index: int) -> None:
    store = MemoryStore()
    config = _config_module().ResponseConfig.load(store)

    with pytest.raises(IndexError):
        config.remove_response(index)

    assert config.responses == list(DEFAULT_RESPONSES)
    assert store.data == {}


def test_remove_responses_removes_several_positions_at_once() -> None:
    store = MemoryStore({RESPONSES_KEY: ["a", "b", "c", "d"]})
    config = _config_module().ResponseConfig.load(store)

    removed = config.remove_responses([3, 1, 1])

    assert removed == ["b", "d"]
    assert config.responses == ["a", "c"]
    assert store.get_string_list(RESPONSES_KEY) == ["a", "c"]


def test_remove_responses_validates_before_changing_anything() -> None:
    store = MemoryStore({RESPONSES_KEY: ["a", "b"]})
    config = _config_module().ResponseConfig.load(store)

    with pytest.raises(IndexError):
        config.remove_responses([0, 5])

    assert config.responses == ["a", "b"]


def test_set_delay_clamps_negative_values_to_zero() -> None:
    store = MemoryStore()
    config = _config_module().ResponseConfig.load(store)

    assert config.set_delay(-5) == 0
    assert config.delay_ms == 0
    assert store.get_int(DELAY_KEY) == 0


def test_zero_delay_survives_reload(tmp_path: Path) -> None:
    module = _config_module()
    path = tmp_path / "store.json"
    module.ResponseConfig.load(JsonFileStore(path)).set_delay(0)

    assert module.ResponseConfig.load(JsonFileStore(path)).delay_ms == 0


def test_set_delay_has_no_upper_bound() -> None:
    config = _config_module().ResponseConfig.load(MemoryStore())

    assert config.set_delay(60000) == 60000


def test_responses_property_returns_a_copy() -> None:
    config = _config_module().ResponseConfig.load(MemoryStore())

    config.responses.append("Sneaky")

    assert "Sneaky" not in config.responses


def test_load_drops_blank_saved_entries() -> None:
    store = MemoryStore({RESPONSES_KEY: ["Yes", "", "   ", "No"]})
    config = _config_module().ResponseConfig.load(store)

    assert config.responses == ["Yes", "No"]
