"""Result type: Ok[T] | Err[E] for explicit error handling.

Example:
    ```python
    from option_result import Err, Ok

    Ok(5).map(lambda x: x * 2)              # Ok(value=10)
    Err('boom').map_err(str.upper)          # Err(error='BOOM')
    Err('boom').unwrap_or(lambda: 0)        # 0
    Ok(2).get_ok()                          # Some(value=2)
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, NoReturn, TypeIs

from option_result._internal import resolve
from option_result._logging import get_logger
from option_result.errors import UnwrapErrError, UnwrapOkError
from option_result.option import Nothing, NothingType, Option, Some

__all__ = ['Err', 'Ok', 'Result', 'try_catch']

_log = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class Ok[T]:
    """Success variant of Result containing a value of type T.

    Unlike Some, Ok(None) is a success holding None. ``Ok()`` holds ``True``.

    Attributes:
        value: The successful result value.

    Examples:
        >>> Ok(42).unwrap()
        42
        >>> Ok(None).is_ok()
        True
    """

    value: T = True  # type: ignore[assignment]
    __match_args__ = ('value',)

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok."""
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since Ok has no error to unwrap.

        Raises:
            UnwrapOkError: Always, with the default message.
        """
        _log.debug('unwrap_failed', kind='ok', message=UnwrapOkError.default_message)
        raise UnwrapOkError

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value

    def expect_err(self, msg: str) -> NoReturn:
        """Raise with a custom message since Ok has no error.

        Raises:
            UnwrapOkError: Always, with ``msg``.
        """
        _log.debug('unwrap_failed', kind='ok', message=msg)
        raise UnwrapOkError(msg)

    def unwrap_or(self, _default: object) -> T:
        """Return the contained Ok value; the default is never resolved."""
        return self.value

    def unwrap_or_else(self, _f: Callable[[Any], object]) -> T:
        """Return the contained Ok value without calling the fallback."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err(self, _f: Callable[[Any], object]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def map_or[U](self, _default: object, f: Callable[[T], U]) -> U:
        """Return f(value); the default is never resolved."""
        return f(self.value)

    def map_or_else[U](self, _default_f: Callable[[Any], object], f: Callable[[T], U]) -> U:
        """Return f(value); the error handler is never called."""
        return f(self.value)

    def and_then[U, E](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or bind.
        """
        return f(self.value)

    def get_ok(self) -> Option[T]:
        """Convert to Option, returning Some(value).

        Follows the Some constructor, so Ok(None).get_ok() is Nothing.
        """
        return Some(self.value)

    def get_err(self) -> NothingType:
        """Convert to Option, returning Nothing since this is Ok."""
        return Nothing


@dataclass(slots=True, frozen=True)
class Err[E]:
    """Error variant of Result containing an error of type E.

    Attributes:
        error: The error value.

    Examples:
        >>> Err('something went wrong').is_err()
        True
        >>> Err('something went wrong').unwrap_or(0)
        0
    """

    error: E
    __match_args__ = ('error',)

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since Err has no Ok value to unwrap.

        Raises:
            UnwrapErrError: Always, with the default message.
        """
        _log.debug('unwrap_failed', kind='err', message=UnwrapErrError.default_message)
        raise UnwrapErrError

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            UnwrapErrError: Always, with ``msg``.
        """
        _log.debug('unwrap_failed', kind='err', message=msg)
        raise UnwrapErrError(msg)

    def expect_err(self, _msg: str) -> E:
        """Return the contained error, ignoring the message."""
        return self.error

    def unwrap_or[V](self, default: V | Callable[[], V]) -> V:
        """Return the default, calling it first if it is callable."""
        return resolve(default)

    def unwrap_or_else[V](self, f: Callable[[E], V]) -> V:
        """Return f(error).

        f always receives the concrete error; it is not treated as a thunk.
        """
        return f(self.error)

    def map(self, _f: Callable[[Any], object]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def map_or[V](self, default: V | Callable[[], V], _f: Callable[[Any], object]) -> V:
        """Return the default, calling it first if it is callable."""
        return resolve(default)

    def map_or_else[V](self, default_f: Callable[[E], V], _f: Callable[[Any], object]) -> V:
        """Return default_f(error)."""
        return default_f(self.error)

    def and_then(self, _f: Callable[[Any], object]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def get_ok(self) -> NothingType:
        """Convert to Option, returning Nothing since this is Err."""
        return Nothing

    def get_err(self) -> Option[E]:
        """Convert to Option, returning Some(error)."""
        return Some(self.error)


type Result[T, E] = Ok[T] | Err[E]


def try_catch[T, F](
    f: Callable[[], T],
    on_error: Callable[[Exception], F] | None = None,
) -> Result[T, F | Exception]:
    """Run f and capture a raised exception as Err.

    Args:
        f: Zero-argument function to run.
        on_error: Optional mapping applied to the caught exception.

    Returns:
        Ok(f()) on success, otherwise Err(on_error(exc)) or Err(exc).

    Examples:
        >>> try_catch(lambda: 'success')
        Ok(value='success')
        >>> try_catch(lambda: 1 / 0, lambda e: f'Error: {e}')
        Err(error='Error: division by zero')
    """
    try:
        value = f()
    except Exception as e:  # noqa: BLE001
        _log.debug('exception_captured', error_type=type(e).__name__)
        return Err(on_error(e) if on_error is not None else e)
    return Ok(value)
