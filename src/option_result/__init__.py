"""option-result: immutable Option and Result containers for Python 3.13+.

Flat imports (preferred):
    from option_result import Option, Some, Nothing, Result, Ok, Err
    from option_result import safe, try_catch

Submodule imports (for organization):
    from option_result.option import Some, Nothing, Option
    from option_result.result import Ok, Err, Result
    from option_result.errors import UnwrapNoneError, UnwrapErrError, UnwrapOkError
"""

# Configuration
from option_result._config import LibraryConfig, get_config, init

# Logging
from option_result._logging import configure_logging, get_logger

# Decorators
from option_result.decorators import safe

# Errors
from option_result.errors import (
    UnwrapErr,
    UnwrapErrError,
    UnwrapError,
    UnwrapNone,
    UnwrapNoneError,
    UnwrapOk,
    UnwrapOkError,
)

# Option types
from option_result.option import Nothing, NothingType, Option, Some

# Result types
from option_result.result import Err, Ok, Result, try_catch

__all__ = [
    'Err',
    'LibraryConfig',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Some',
    'UnwrapErr',
    'UnwrapErrError',
    'UnwrapError',
    'UnwrapNone',
    'UnwrapNoneError',
    'UnwrapOk',
    'UnwrapOkError',
    'configure_logging',
    'get_config',
    'get_logger',
    'init',
    'safe',
    'try_catch',
]
