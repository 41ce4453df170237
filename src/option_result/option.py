"""Option type: Some[T] | Nothing for optional values.

Example:
    ```python
    from option_result import Nothing, Some

    Some(42).map(lambda x: x * 2)          # Some(value=84)
    Some(None)                             # Nothing
    Nothing.unwrap_or(lambda: 'fallback')  # 'fallback'
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, NoReturn, TypeIs

from option_result._internal import resolve
from option_result._logging import get_logger
from option_result.errors import UnwrapNoneError

__all__ = ['Nothing', 'NothingType', 'Option', 'Some']

_log = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class Some[T]:
    """Some variant of Option containing a value of type T.

    ``Some(None)`` does not build a Some: it returns ``Nothing``, so a present
    Option never holds ``None``. ``Some()`` holds ``True``.

    Attributes:
        value: The present value.

    Examples:
        >>> Some(42).unwrap()
        42
        >>> Some(None) == Nothing
        True
        >>> Some().unwrap()
        True
    """

    value: T = True  # type: ignore[assignment]
    __match_args__ = ('value',)

    def __new__(cls, value: Any = True) -> Any:
        if value is None:
            return Nothing
        return object.__new__(cls)

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some."""
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def unwrap_or(self, _default: object) -> T:
        """Return the contained value; the default is never resolved."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some(f(value)), which is Nothing when f returns None.
        """
        return Some(f(self.value))

    def map_or[U](self, _default: object, f: Callable[[T], U]) -> U:
        """Return f(value); the default is never resolved."""
        return f(self.value)

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or bind. The returned Option is not wrapped again.
        """
        return f(self.value)

    def and_[U](self, other: Option[U]) -> Option[U]:
        """Return other since this is Some."""
        return other

    def or_(self, _other: object) -> Some[T]:
        """Return self since this is Some."""
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Return self if the predicate holds for the value, else Nothing."""
        if predicate(self.value):
            return self
        return Nothing

    def inspect(self, f: Callable[[T], object]) -> Some[T]:
        """Call f with the contained value for its side effect and return self."""
        f(self.value)
        return self

    def reduce[U, V](self, other: Option[U], f: Callable[[T, U], V]) -> Option[T | V]:
        """Combine with another Option.

        Returns Some(f(self.value, other.value)) if other is Some, otherwise
        self unchanged.
        """
        if isinstance(other, Some):
            return Some(f(self.value, other.value))
        return self


@dataclass(slots=True, frozen=True)
class NothingType:
    """Nothing variant of Option representing absence of a value.

    Use the ``Nothing`` constant; every NothingType instance compares equal.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def __repr__(self) -> str:
        return 'Nothing'

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise since Nothing has no value to unwrap.

        Raises:
            UnwrapNoneError: Always, with the default message.
        """
        _log.debug('unwrap_failed', kind='none', message=UnwrapNoneError.default_message)
        raise UnwrapNoneError

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Args:
            msg: Message carried verbatim by the exception.

        Raises:
            UnwrapNoneError: Always, with ``msg``.
        """
        _log.debug('unwrap_failed', kind='none', message=msg)
        raise UnwrapNoneError(msg)

    def unwrap_or[V](self, default: V | Callable[[], V]) -> V:
        """Return the default, calling it first if it is callable."""
        return resolve(default)

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def map_or[T, U, V](self, default: V | Callable[[], V], _f: Callable[[T], U]) -> V:
        """Return the default, calling it first if it is callable."""
        return resolve(default)

    def and_then[T, U](self, _f: Callable[[T], Option[U]]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def and_[U](self, _other: Option[U]) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def or_[T](self, other: Option[T] | Callable[[], Option[T]]) -> Option[T]:
        """Return other, calling it first if it is callable."""
        return resolve(other)

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def inspect[T](self, _f: Callable[[T], object]) -> NothingType:
        """Return Nothing without calling f."""
        return self

    def reduce[T, U, V](self, other: Option[U], _f: Callable[[T, U], V]) -> Option[U]:
        """Return other if it is Some, otherwise Nothing."""
        if isinstance(other, Some):
            return other
        return self


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType
