"""Drawing context ownership and lazy initialization."""

from renderutil.context.surface import (
    RenderContext,
    create_pillow_context,
    get_context,
    get_default_context,
    reset_default_context,
)

__all__ = [
    "RenderContext",
    "create_pillow_context",
    "get_context",
    "get_default_context",
    "reset_default_context",
]
