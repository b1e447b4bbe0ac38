"""Receiver binding for plain callables."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


def bind(func: Callable[..., Any], context: Any) -> Callable[..., Any]:
    """Bind context as the receiver of func.

    The returned callable invokes ``func(context, *args, **kwargs)`` and returns
    its result unchanged. Any context is accepted, None included.

    Example:
        >>> def describe(self, suffix):
        ...     return f"{self['name']}{suffix}"
        >>> bind(describe, {"name": "rect"})("!")
        'rect!'
    """

    def bound(*args: Any, **kwargs: Any) -> Any:
        return func(context, *args, **kwargs)

    return bound
