"""Type predicates built on value classification."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from renderutil.core.kinds import ValueKind, classify, is_absent


def is_array(value: Any) -> bool:
    """True iff value is a real list or tuple, not merely array-like."""
    return classify(value) is ValueKind.ARRAY


def is_object(value: Any) -> bool:
    """True for callables and for any non-None, non-primitive value.

    Functions count as objects here; merge and clone rely on that.
    """
    if callable(value):
        return True
    return value is not None and classify(value) is not ValueKind.PRIMITIVE


def is_array_like(value: Any) -> bool:
    """True iff value is sized and integer-indexable.

    Strings, bytes, mappings and absent values are never array-like. A true
    result only promises len() and indexing over range(len(value)).
    """
    if is_absent(value) or isinstance(value, (str, bytes)):
        return False
    if isinstance(value, Mapping):
        return False
    return hasattr(value, "__len__") and hasattr(value, "__getitem__")


def is_dom(value: Any) -> bool:
    """True iff value looks like a single element node."""
    return classify(value) is ValueKind.DOM_NODE
