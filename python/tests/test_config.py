"""Environment-driven settings."""

from __future__ import annotations

import importlib
from collections.abc import Iterator

import pytest

from sichuan import config
from sichuan.engine.candidates import CandidateOrder


@pytest.fixture
def reload_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    yield monkeypatch
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(reload_config: pytest.MonkeyPatch) -> None:
    reload_config.delenv("SICHUAN_CANDIDATE_ORDER", raising=False)
    reload_config.delenv("SICHUAN_LOG_LEVEL", raising=False)
    importlib.reload(config)
    assert config.CANDIDATE_ORDER == "position"
    assert config.LOG_LEVEL == "WARNING"


def test_values_are_case_insensitive(reload_config: pytest.MonkeyPatch) -> None:
    reload_config.setenv("SICHUAN_CANDIDATE_ORDER", " Scarcity ")
    reload_config.setenv("SICHUAN_LOG_LEVEL", "debug")
    importlib.reload(config)
    assert CandidateOrder(config.CANDIDATE_ORDER) is CandidateOrder.SCARCITY
    assert config.LOG_LEVEL == "DEBUG"


def test_unknown_values_fall_back(reload_config: pytest.MonkeyPatch) -> None:
    reload_config.setenv("SICHUAN_CANDIDATE_ORDER", "alphabetical")
    reload_config.setenv("SICHUAN_LOG_LEVEL", "LOUD")
    importlib.reload(config)
    assert config.CANDIDATE_ORDER == "position"
    assert config.LOG_LEVEL == "WARNING"


def test_cli_imports_with_bad_settings(reload_config: pytest.MonkeyPatch) -> None:
    reload_config.setenv("SICHUAN_CANDIDATE_ORDER", "alphabetical")
    reload_config.setenv("SICHUAN_LOG_LEVEL", "LOUD")
    importlib.reload(config)
    import sichuan.main as main

    importlib.reload(main)
    main._setup_logging(verbose=False)
