"""Structural operations: copy and recursive merge of arrays and mappings."""

from renderutil.structural.operations import clone, merge

__all__ = [
    "clone",
    "merge",
]
