"""Library configuration: LibraryConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from option_result._logging import configure_logging

__all__ = [
    'LibraryConfig',
    'get_config',
    'init',
]

LOG_LEVEL_ENV = 'OPTION_RESULT_LOG_LEVEL'
LOG_FORMAT_ENV = 'OPTION_RESULT_LOG_FORMAT'


@dataclass(frozen=True)
class LibraryConfig:
    """Configuration for option-result.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Emit JSON logs when True, console logs otherwise.
    """

    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init())
_config: LibraryConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from OPTION_RESULT_LOG_LEVEL, if set."""
    level = os.environ.get(LOG_LEVEL_ENV, '').strip()
    return level.upper() or None


def _detect_json_logs() -> bool:
    """Read the log format from OPTION_RESULT_LOG_FORMAT ("json" or "console")."""
    log_format = os.environ.get(LOG_FORMAT_ENV, '').lower()
    if log_format == 'console':
        return False
    if log_format and log_format != 'json':
        logging.warning("Unknown %s value '%s', defaulting to json", LOG_FORMAT_ENV, log_format)
    return True


def init(
    log_level: str | None = None,
    json_logs: bool | None = None,
) -> LibraryConfig:
    """Initialize option-result with the specified configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from the
            environment if None; silent if still unset.
        json_logs: JSON (True) or console (False) output. Read from the
            environment if None.

    Returns:
        The LibraryConfig that was set.

    Example:
        ```python
        from option_result import init

        # Take everything from the environment
        init()

        # Show unwrap failures while debugging
        init(log_level="DEBUG", json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    _config = LibraryConfig(
        log_level=log_level.upper() if log_level is not None else _detect_log_level(),
        json_logs=json_logs if json_logs is not None else _detect_json_logs(),
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_logs)

    return _config


def get_config() -> LibraryConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'option-result not initialized. Call option_result.init() first.'
        raise RuntimeError(msg)
    return _config
