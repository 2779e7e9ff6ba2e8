from __future__ import annotations

import logging

import pytest

from webtoolkit.config import logging as logging_config
from webtoolkit.config.errors import ConfigurationError
from webtoolkit.config.logging import LOG_LEVEL_ENV, configure_logging, level_from_environment


def test_level_defaults_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)

    assert level_from_environment() == logging.INFO


def test_level_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, " debug ")

    assert level_from_environment() == logging.DEBUG


def test_blank_level_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "   ")

    assert level_from_environment(default=logging.WARNING) == logging.WARNING


def test_unknown_level_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "loud")

    with pytest.raises(ConfigurationError, match=LOG_LEVEL_ENV):
        level_from_environment()


def test_configure_logging_prefers_explicit_level(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_basic_config(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")
    monkeypatch.setattr(logging_config.logging, "basicConfig", fake_basic_config)

    configure_logging(level=logging.ERROR, force=True)

    assert captured["level"] == logging.ERROR
    assert captured["force"] is True


def test_configure_logging_uses_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_basic_config(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setenv(LOG_LEVEL_ENV, "warning")
    monkeypatch.setattr(logging_config.logging, "basicConfig", fake_basic_config)

    configure_logging()

    assert captured["level"] == logging.WARNING
    assert captured["force"] is False
