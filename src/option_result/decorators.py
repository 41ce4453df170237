"""@safe decorator for turning raised exceptions into Err."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

import wrapt

from option_result._logging import get_logger
from option_result.result import Err, Ok

__all__ = ['safe']

_log = get_logger(__name__)


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Ok[T] | Err[Exception]]: ...


@overload
def safe[**P, T, E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Ok[T] | Err[E]]]: ...


def safe(
    func: Callable[..., Any] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that catches exceptions and returns Err.

    Wraps a function so that it returns Ok(value) on success and
    Err(exception) if one of ``exceptions`` is raised. Anything else
    propagates unchanged.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(KeyError,))
        def lookup(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Exception types to catch. Defaults to (Exception,).

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        divide(10, 2)  # Ok(value=5.0)
        divide(10, 0)  # Err(error=ZeroDivisionError('division by zero'))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[Any] | Err[Any]:
        try:
            result = wrapped(*args, **kwargs)
        except catch as e:
            _log.debug('exception_captured', error_type=type(e).__name__)
            return Err(e)
        return Ok(result)

    if func is not None:
        return wrapper(func)
    return wrapper
