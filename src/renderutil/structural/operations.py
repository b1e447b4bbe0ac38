"""Pure functions for structural copy and recursive merge.

Both functions dispatch on ValueKind. Opaque values and DOM nodes are atomic:
they are shared by reference and never descended into.
"""

from __future__ import annotations

from typing import Any

from renderutil.core.kinds import ValueKind, classify, is_absent


def _rebuild_sequence(source: Any, items: list[Any]) -> Any:
    """Build a sequence of the same type as source from items."""
    cls = type(source)
    if cls is list:
        return items
    if cls is tuple:
        return tuple(items)
    if isinstance(source, tuple) and hasattr(cls, "_make"):
        return cls._make(items)
    return cls(items)


def clone(source: Any, deep: bool = False) -> Any:
    """Produce a structural copy of source.

    Args:
        source: Value to copy.
        deep: If True, nested arrays and mappings are copied recursively.
            Otherwise they are shared with the source.

    Returns:
        A new sequence of the same type for arrays (namedtuples and other
        list/tuple subclasses included), a new dict for mappings, source itself for
        primitives, opaque values and DOM nodes.

    Note:
        There is no cycle detection. Deep-cloning a self-referential structure
        raises RecursionError.
    """
    kind = classify(source)

    if kind is ValueKind.ARRAY:
        items = [clone(item, deep) if deep else item for item in source]
        return _rebuild_sequence(source, items)

    if kind is ValueKind.MAPPING:
        return {key: clone(value, deep) if deep else value for key, value in source.items()}

    return source


def merge(target: Any, source: Any, overwrite: bool = False, deep: bool = True) -> Any:
    """Merge source's keys into target in place.

    Args:
        target: Mapping to update. If absent, nothing happens.
        source: Mapping whose keys are merged in.
        overwrite: Replace values already present in target.
        deep: Recurse into target values that are plain mappings.

    Returns:
        target, or None when target is absent.

    Note:
        Keys missing from target are always assigned, by reference, even when
        deep is True. Existing target values that are not plain mappings
        (lists, dates, scalars) are never descended into.
    """
    if is_absent(target):
        return None
    if classify(source) is not ValueKind.MAPPING:
        return target

    for key, value in source.items():
        if deep and key in target and classify(target[key]) is ValueKind.MAPPING:
            merge(target[key], value, overwrite, deep)
        elif overwrite or key not in target:
            target[key] = value

    return target
