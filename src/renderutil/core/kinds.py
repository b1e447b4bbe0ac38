"""Value classification.

Every value handled by renderutil falls into exactly one ValueKind. The kind is
derived once by classify() and the structural and iteration operations dispatch
on it instead of re-testing types on each step.

Usage:
    from renderutil.core import ValueKind, classify, register_opaque_type

    classify([1, 2])        # ValueKind.ARRAY
    classify({"a": 1})      # ValueKind.MAPPING

    @register_opaque_type
    class LinearGradient:
        ...

    classify(LinearGradient())  # ValueKind.OPAQUE
"""

from __future__ import annotations

import datetime
import re
import warnings
from collections.abc import Mapping
from enum import Enum, auto
from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T", bound=type)

ELEMENT_NODE = 1

_PRIMITIVE_TYPES: tuple[type, ...] = (type(None), bool, int, float, complex, str, bytes, Enum)

_BUILTIN_OPAQUE_TYPES: tuple[type, ...] = (
    re.Pattern,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    BaseException,
)


class ValueKind(Enum):
    """Closed set of value shapes."""

    ARRAY = auto()  # list or tuple
    MAPPING = auto()  # plain mapping, copied key by key
    OPAQUE = auto()  # atomic, shared by reference
    DOM_NODE = auto()  # element node, shared by reference
    PRIMITIVE = auto()  # immutable scalar or None


@runtime_checkable
class DomNode(Protocol):
    """Anything shaped like a document element node."""

    node_type: int
    node_name: str


class OpaqueTypeRegistry:
    """Process-local set of types that are never structurally copied.

    Seeded with the built-in opaque kinds (patterns, dates, times, durations,
    exceptions). Callables are always opaque and need no registration.
    """

    def __init__(self) -> None:
        """Initialize registry with the built-in opaque types."""
        self._types: list[type] = list(_BUILTIN_OPAQUE_TYPES)

    def register(self, cls: T) -> T:
        """Mark a type as opaque.

        Args:
            cls: Class whose instances should be treated as atomic.

        Returns:
            The class unchanged, so the method works as a decorator.

        Raises:
            TypeError: If cls is not a class.
        """
        if not isinstance(cls, type):
            raise TypeError(f"Opaque types must be classes, got {type(cls).__name__}")
        if issubclass(cls, (Mapping, list, tuple)):
            warnings.warn(
                f"Registering {cls.__name__} as opaque hides it from clone() and merge(); "
                f"its instances will be shared by reference.",
                stacklevel=2,
            )
        if cls not in self._types:
            self._types.append(cls)
        return cls

    def unregister(self, cls: type) -> None:
        """Remove a previously registered type. Unknown types are ignored."""
        if cls in self._types:
            self._types.remove(cls)

    def is_registered(self, value: Any) -> bool:
        """Check whether value is an instance of a registered opaque type."""
        return isinstance(value, tuple(self._types))

    def __contains__(self, cls: object) -> bool:
        return cls in self._types


# Module-level registry instance
_registry = OpaqueTypeRegistry()


def get_opaque_registry() -> OpaqueTypeRegistry:
    """Access the global opaque type registry.

    Returns:
        The process-local OpaqueTypeRegistry instance.
    """
    return _registry


def register_opaque_type(cls: T) -> T:
    """Register cls with the global registry. Usable as a class decorator."""
    return _registry.register(cls)


def _looks_like_dom(value: Any) -> bool:
    if not isinstance(value, DomNode):
        return False
    node_type = value.node_type
    return (
        node_type == ELEMENT_NODE
        and not isinstance(node_type, bool)
        and isinstance(value.node_name, str)
    )


def is_atomic(value: Any) -> bool:
    """Check whether value is a callable or an instance of a registered opaque type.

    Atomic values are OPAQUE and are never entered, not even by iteration.
    Other OPAQUE values (arbitrary class instances) may still be iterated by
    index or by attribute.
    """
    return callable(value) or _registry.is_registered(value)


def classify(value: Any) -> ValueKind:
    """Determine the kind of a value.

    Args:
        value: Any Python value.

    Returns:
        The ValueKind tag for value.
    """
    if isinstance(value, _PRIMITIVE_TYPES):
        return ValueKind.PRIMITIVE
    if _looks_like_dom(value):
        return ValueKind.DOM_NODE
    if is_atomic(value):
        return ValueKind.OPAQUE
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    return ValueKind.OPAQUE


def is_absent(value: Any) -> bool:
    """Check whether value counts as a missing required argument.

    None and false-valued primitives (False, 0, "", b"") are absent. Containers
    are present even when empty.
    """
    if value is None:
        return True
    return classify(value) is ValueKind.PRIMITIVE and not value
