"""Helpers shared by Option and Result."""

from __future__ import annotations

from typing import Any

__all__ = ['resolve']


def resolve(default: Any) -> Any:
    """Return ``default()`` if it is callable, otherwise ``default`` itself.

    Used on the fallback path only, so a thunk runs at most once and never
    when the container holds a value.
    """
    if callable(default):
        return default()
    return default
