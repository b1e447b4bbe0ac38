"""Class composition helpers.

inherits() never rewires an existing class. It builds a new class that places
the original class in front of the base in the MRO, so methods declared on the
original win and everything else is looked up on the base.
"""

from __future__ import annotations

import types
from collections.abc import Callable
from typing import Any


def _require_class(value: Any, role: str) -> None:
    if not isinstance(value, type):
        raise TypeError(f"{role} must be a class, got {type(value).__name__}")


def inherits(clazz: type, base_clazz: type) -> type:
    """Compose clazz on top of base_clazz.

    Args:
        clazz: Class whose own methods must survive.
        base_clazz: Class providing the inherited behavior.

    Returns:
        A new class named like clazz with MRO (new, clazz, ..., base_clazz, ...).
        Instances are instances of both clazz and base_clazz. clazz itself and
        any instances created before the call are untouched.

    Raises:
        TypeError: If either argument is not a class, or the two classes cannot
            share an MRO or a metaclass.
    """
    _require_class(clazz, "clazz")
    _require_class(base_clazz, "base_clazz")

    def body(ns: dict[str, Any]) -> None:
        ns["__module__"] = clazz.__module__
        ns["__qualname__"] = clazz.__qualname__
        ns["__doc__"] = clazz.__doc__

    return types.new_class(clazz.__name__, (clazz, base_clazz), exec_body=body)


def extends(base_clazz: type) -> Callable[[type], type]:
    """Decorator form of inherits().

    Usage:
        @extends(Displayable)
        class Circle:
            def brush(self, ctx): ...
    """
    _require_class(base_clazz, "base_clazz")

    def decorator(clazz: type) -> type:
        return inherits(clazz, base_clazz)

    return decorator
