"""Iteration helpers: each, map, filter and linear search."""

from renderutil.iteration.operations import each, filter, index_of, map

__all__ = [
    "each",
    "map",
    "filter",
    "index_of",
]
