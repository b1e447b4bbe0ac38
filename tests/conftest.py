"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass

from renderutil.core import OpaqueTypeRegistry


@dataclass
class Element:
    """Minimal stand-in for a document element node."""

    node_name: str
    node_type: int = 1


class LengthOnly:
    """Array-like that is not a list: sized and indexable."""

    def __init__(self, *items):
        self._items = list(items)

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]


@pytest.fixture
def element():
    return Element(node_name="DIV")


@pytest.fixture
def element_cls():
    return Element


@pytest.fixture
def length_only_cls():
    return LengthOnly


@pytest.fixture
def registry():
    """Fresh OpaqueTypeRegistry for testing."""
    return OpaqueTypeRegistry()
