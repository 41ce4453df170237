"""Tests for library configuration and initialization."""

from __future__ import annotations

import logging
import os
from unittest.mock import patch

import pytest

from option_result import LibraryConfig, get_config, init
from option_result._config import _detect_json_logs, _detect_log_level

pytestmark = pytest.mark.usefixtures('reset_config')


class TestLibraryConfig:
    """Tests for the LibraryConfig dataclass."""

    def test_default_values(self) -> None:
        config = LibraryConfig()
        assert config.log_level is None
        assert config.json_logs is True

    def test_config_is_frozen(self) -> None:
        config = LibraryConfig()
        with pytest.raises(AttributeError):
            config.log_level = 'DEBUG'  # type: ignore[misc]


class TestDetectFromEnvironment:
    """Tests for environment detection."""

    def test_log_level_unset(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_log_level() is None

    def test_log_level_normalized(self) -> None:
        with patch.dict(os.environ, {'OPTION_RESULT_LOG_LEVEL': ' debug '}):
            assert _detect_log_level() == 'DEBUG'

    def test_log_format_console(self) -> None:
        with patch.dict(os.environ, {'OPTION_RESULT_LOG_FORMAT': 'Console'}):
            assert _detect_json_logs() is False

    def test_log_format_json(self) -> None:
        with patch.dict(os.environ, {'OPTION_RESULT_LOG_FORMAT': 'json'}):
            assert _detect_json_logs() is True

    def test_log_format_unknown_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with patch.dict(os.environ, {'OPTION_RESULT_LOG_FORMAT': 'xml'}), caplog.at_level(logging.WARNING):
            assert _detect_json_logs() is True
        assert 'xml' in caplog.text


class TestInit:
    """Tests for init() and get_config()."""

    def test_get_config_before_init_raises(self) -> None:
        with pytest.raises(RuntimeError, match='not initialized'):
            get_config()

    def test_init_silent_by_default(self) -> None:
        with (
            patch.dict(os.environ, {}, clear=True),
            patch('option_result._config.configure_logging') as configure,
        ):
            config = init()
        assert config == LibraryConfig()
        assert get_config() is config
        configure.assert_not_called()

    def test_init_explicit_values(self) -> None:
        with patch('option_result._config.configure_logging') as configure:
            config = init(log_level='DEBUG', json_logs=False)
        assert config.log_level == 'DEBUG'
        assert config.json_logs is False
        configure.assert_called_once_with('DEBUG', json_output=False)

    def test_init_from_environment(self) -> None:
        env = {'OPTION_RESULT_LOG_LEVEL': 'info', 'OPTION_RESULT_LOG_FORMAT': 'console'}
        with patch.dict(os.environ, env, clear=True), patch('option_result._config.configure_logging') as configure:
            config = init()
        assert config == LibraryConfig(log_level='INFO', json_logs=False)
        configure.assert_called_once_with('INFO', json_output=False)

    def test_explicit_overrides_environment(self) -> None:
        with (
            patch.dict(os.environ, {'OPTION_RESULT_LOG_LEVEL': 'info'}),
            patch('option_result._config.configure_logging'),
        ):
            assert init(log_level='WARNING').log_level == 'WARNING'

    def test_explicit_level_normalized(self) -> None:
        with patch('option_result._config.configure_logging') as configure:
            config = init(log_level='debug')
        assert config.log_level == 'DEBUG'
        assert get_config().log_level == 'DEBUG'
        configure.assert_called_once_with('DEBUG', json_output=config.json_logs)
