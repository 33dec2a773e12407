"""Tests for library configuration and initialization."""

from __future__ import annotations

import logging
import os
from typing import Any
from unittest.mock import patch

import pytest

from fallible import FallibleConfig, from_try_catch, get_config, init
from fallible._config import _config_from_env
from fallible._logging import add_log_hook


class TestFallibleConfig:
    """Tests for the FallibleConfig dataclass."""

    def test_default_values(self) -> None:
        config = FallibleConfig()
        assert config.log_level is None
        assert config.json_output is True
        assert config.log_captures is False

    def test_config_is_frozen(self) -> None:
        config = FallibleConfig()
        with pytest.raises(AttributeError):
            config.log_captures = True  # type: ignore[misc]


class TestConfigFromEnv:
    """Tests for _config_from_env()."""

    def test_empty_env(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _config_from_env() == FallibleConfig()

    def test_level_enables_captures(self) -> None:
        with patch.dict(os.environ, {"FALLIBLE_LOG_LEVEL": "DEBUG"}, clear=True):
            config = _config_from_env()
        assert config.log_level == "DEBUG"
        assert config.log_captures is True

    def test_explicit_flags(self) -> None:
        env = {
            "FALLIBLE_LOG_LEVEL": "INFO",
            "FALLIBLE_LOG_JSON": "false",
            "FALLIBLE_LOG_CAPTURES": "0",
        }
        with patch.dict(os.environ, env, clear=True):
            config = _config_from_env()
        assert config.json_output is False
        assert config.log_captures is False

    def test_unknown_flag_value_uses_default(self, caplog: pytest.LogCaptureFixture) -> None:
        with (
            patch.dict(os.environ, {"FALLIBLE_LOG_JSON": "maybe"}, clear=True),
            caplog.at_level(logging.WARNING, logger="fallible"),
        ):
            config = _config_from_env()
        assert config.json_output is True
        assert "FALLIBLE_LOG_JSON" in caplog.text


class TestInit:
    """Tests for init() and get_config()."""

    def test_get_config_without_init_reads_env(self) -> None:
        with patch.dict(os.environ, {"FALLIBLE_LOG_CAPTURES": "yes"}, clear=True):
            assert get_config().log_captures is True

    def test_init_sets_config(self) -> None:
        config = init("INFO", json_output=False)
        assert get_config() is config
        assert config.log_level == "INFO"
        assert config.json_output is False
        assert config.log_captures is True

    def test_init_without_level_is_silent(self) -> None:
        config = init()
        assert config.log_level is None
        assert config.log_captures is False

    def test_init_configures_library_logger(self) -> None:
        init("WARNING")
        logger = logging.getLogger("fallible")
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_env_level_configures_library_logger(self) -> None:
        env = {"FALLIBLE_LOG_LEVEL": "ERROR", "FALLIBLE_LOG_JSON": "0"}
        with patch.dict(os.environ, env, clear=True):
            config = get_config()
        assert get_config() is config
        assert config.json_output is False
        assert logging.getLogger("fallible").level == logging.ERROR


class TestEnvLevelFiltering:
    """A level from the environment applies to captures without init()."""

    def test_capture_below_env_level_is_silent(self, capsys: pytest.CaptureFixture[str]) -> None:
        events: list[dict[str, Any]] = []
        add_log_hook(events.append)

        with patch.dict(os.environ, {"FALLIBLE_LOG_LEVEL": "WARNING"}, clear=True):
            result = from_try_catch(lambda: int("x"))

        assert result.is_err()
        assert events == []
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_capture_at_env_level_is_logged(self) -> None:
        events: list[dict[str, Any]] = []
        add_log_hook(events.append)

        with patch.dict(os.environ, {"FALLIBLE_LOG_LEVEL": "DEBUG"}, clear=True):
            from_try_catch(lambda: int("x"))

        assert [e["event"] for e in events] == ["exception captured"]
        assert events[0]["logger"] == "fallible.interop"
