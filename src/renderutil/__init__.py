"""renderutil: object and array helpers for rendering libraries.

Usage:
    from renderutil import clone, merge, each, filter, inherits

    defaults = {"style": {"fill": "#000", "line_width": 1}}
    options = merge(clone(defaults, deep=True), {"style": {"fill": "#f00"}}, overwrite=True)

    evens = filter([1, 2, 3, 4], lambda value, index, arr: value % 2 == 0)  # [2, 4]

    class Shape:
        def area(self): return 0

    class Circle:
        def brush(self, draw): ...

    Circle = inherits(Circle, Shape)
"""

__version__ = "0.1.0"

# Settings
from renderutil.config import SurfaceSettings

# Drawing context
from renderutil.context import (
    RenderContext,
    get_context,
    reset_default_context,
)

# Core primitives
from renderutil.core import (
    DomNode,
    ValueKind,
    classify,
    is_array,
    is_array_like,
    is_dom,
    is_object,
    register_opaque_type,
)

# Function helpers
from renderutil.functional import bind, extends, inherits

# Iteration
from renderutil.iteration import each, filter, index_of, map

# Structural operations
from renderutil.structural import clone, merge

__all__ = [
    # Version
    "__version__",
    # Core
    "ValueKind",
    "DomNode",
    "classify",
    "register_opaque_type",
    "is_array",
    "is_array_like",
    "is_dom",
    "is_object",
    # Structural
    "clone",
    "merge",
    # Iteration
    "each",
    "map",
    "filter",
    "index_of",
    # Functional
    "bind",
    "inherits",
    "extends",
    # Context
    "RenderContext",
    "get_context",
    "reset_default_context",
    # Config
    "SurfaceSettings",
]
