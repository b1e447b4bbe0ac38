"""Core primitives: value classification and type predicates."""

from renderutil.core.kinds import (
    DomNode,
    OpaqueTypeRegistry,
    ValueKind,
    classify,
    get_opaque_registry,
    is_absent,
    is_atomic,
    register_opaque_type,
)
from renderutil.core.predicates import is_array, is_array_like, is_dom, is_object

__all__ = [
    # Kinds
    "ValueKind",
    "DomNode",
    "classify",
    "is_absent",
    "is_atomic",
    "OpaqueTypeRegistry",
    "get_opaque_registry",
    "register_opaque_type",
    # Predicates
    "is_array",
    "is_array_like",
    "is_dom",
    "is_object",
]
