"""Function binding and class composition."""

from renderutil.functional.binding import bind
from renderutil.functional.inheritance import extends, inherits

__all__ = [
    "bind",
    "inherits",
    "extends",
]
