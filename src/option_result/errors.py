"""Unwrap error types: dual struct+exception for Result and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'UnwrapErr',
    'UnwrapErrError',
    'UnwrapError',
    'UnwrapNone',
    'UnwrapNoneError',
    'UnwrapOk',
    'UnwrapOkError',
]


class UnwrapError(RuntimeError):
    """Base class for failed unwrap-style extractions.

    Subclasses define ``default_message``; passing ``message=None`` selects it.

    Attributes:
        message: The message the error was raised with.
    """

    default_message = 'Attempted to unwrap a value that is not present'

    def __init__(self, message: str | None = None) -> None:
        self.message = self.default_message if message is None else message
        super().__init__(self.message)


# --- Option Errors ---


class UnwrapNone(msgspec.Struct, frozen=True, gc=False):
    """Unwrap on Nothing - struct variant for Result[T, UnwrapNone]."""

    message: str | None = None

    def to_exception(self) -> UnwrapNoneError:
        """Convert to exception for raise-based code."""
        return UnwrapNoneError(self.message)


class UnwrapNoneError(UnwrapError):
    """Unwrap on Nothing - exception variant."""

    default_message = 'Attempted to call `unwrap()` on `Nothing` value'

    def to_struct(self) -> UnwrapNone:
        """Convert to struct for Result-based code."""
        return UnwrapNone(self.message)


# --- Result Errors ---


class UnwrapErr(msgspec.Struct, frozen=True, gc=False):
    """Unwrap on Err - struct variant for Result[T, UnwrapErr]."""

    message: str | None = None

    def to_exception(self) -> UnwrapErrError:
        """Convert to exception for raise-based code."""
        return UnwrapErrError(self.message)


class UnwrapErrError(UnwrapError):
    """Unwrap on Err - exception variant."""

    default_message = 'Attempted to call `unwrap()` on `Err` value'

    def to_struct(self) -> UnwrapErr:
        """Convert to struct for Result-based code."""
        return UnwrapErr(self.message)


class UnwrapOk(msgspec.Struct, frozen=True, gc=False):
    """unwrap_err on Ok - struct variant for Result[T, UnwrapOk]."""

    message: str | None = None

    def to_exception(self) -> UnwrapOkError:
        """Convert to exception for raise-based code."""
        return UnwrapOkError(self.message)


class UnwrapOkError(UnwrapError):
    """unwrap_err on Ok - exception variant."""

    default_message = 'Attempted to call `unwrap_err()` on `Ok` value'

    def to_struct(self) -> UnwrapOk:
        """Convert to struct for Result-based code."""
        return UnwrapOk(self.message)
