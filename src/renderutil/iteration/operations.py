"""Polymorphic iteration over sequences, array-likes and mappings.

Dispatch is on classify(collection):
    ARRAY: native forward pass.
    MAPPING: keys in insertion order, callback gets the key as index.
    PRIMITIVE: strings are walked by character, other scalars visit nothing.
    DOM_NODE and atomic OPAQUE values (callables, registered types): nothing.
    Other OPAQUE objects: indices 0..len-1 when array-like, otherwise their
    instance attributes, like a mapping.

The callback is called as ``callback(value, index_or_key, collection)``. With a
context it is bound first, so it receives the context as its receiver.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from renderutil.core.kinds import ValueKind, classify, is_absent, is_atomic
from renderutil.core.predicates import is_array_like
from renderutil.functional.binding import bind


def _entries(obj: Any) -> Iterator[tuple[Any, Any]]:
    """Yield (index_or_key, value) pairs in visit order."""
    kind = classify(obj)

    if kind is ValueKind.ARRAY:
        yield from enumerate(obj)
    elif kind is ValueKind.MAPPING:
        yield from obj.items()
    elif kind is ValueKind.PRIMITIVE:
        if isinstance(obj, str):
            yield from enumerate(obj)
    elif kind is ValueKind.OPAQUE and not is_atomic(obj):
        if is_array_like(obj):
            for i in range(len(obj)):
                yield i, obj[i]
        elif hasattr(obj, "__dict__"):
            yield from vars(obj).items()


def _prepare(obj: Any, cb: Any, context: Any) -> Callable[..., Any] | None:
    if is_absent(obj) or is_absent(cb):
        return None
    return cb if context is None else bind(cb, context)


def each(obj: Any, cb: Callable[..., Any] | None, context: Any = None) -> None:
    """Call cb for every entry of obj.

    Does nothing if obj or cb is absent.
    """
    fn = _prepare(obj, cb, context)
    if fn is None:
        return
    for key, value in list(_entries(obj)):
        fn(value, key, obj)


def map(obj: Any, cb: Callable[..., Any] | None, context: Any = None) -> list[Any] | None:
    """Collect cb's result for every entry of obj into a new list.

    Returns:
        List of results in visit order, or None if obj or cb is absent.
    """
    fn = _prepare(obj, cb, context)
    if fn is None:
        return None
    return [fn(value, key, obj) for key, value in list(_entries(obj))]


def filter(obj: Any, cb: Callable[..., Any] | None, context: Any = None) -> list[Any] | None:
    """Collect the values of obj for which cb returns a truthy result.

    Returns:
        List of kept values in visit order, or None if obj or cb is absent.
    """
    fn = _prepare(obj, cb, context)
    if fn is None:
        return None
    return [value for key, value in list(_entries(obj)) if fn(value, key, obj)]


def index_of(array: Any, value: Any) -> int:
    """Find the first index of value in array.

    Uses the collection's own index() when it has one, otherwise scans
    indices 0..len-1 of an array-like. Both paths compare with ``==``, so
    ``index_of([1, True], True) == 0``.

    Returns:
        The index, or -1 if value is not present or array is not indexable
        (mappings, scalars).
    """
    native = getattr(array, "index", None)
    if callable(native):
        try:
            return native(value)
        except ValueError:
            return -1

    if not is_array_like(array):
        return -1
    for i in range(len(array)):
        if array[i] == value:
            return i
    return -1
