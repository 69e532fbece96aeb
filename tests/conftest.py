"""Shared test fixtures for unilib tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

import unilib.sequence


@dataclass(eq=False)
class Cell:
    """Mutable element with identity semantics, used to track ownership."""

    value: int

    def clone(self) -> "Cell":
        return Cell(self.value)


@pytest.fixture
def released() -> list:
    """Records every element handed to a releaser, in order."""
    return []


@pytest.fixture
def recorder(released: list):
    return released.append


@pytest.fixture
def failing_allocator(monkeypatch: pytest.MonkeyPatch):
    """Make every backing-store allocation fail with MemoryError."""

    def _fail(capacity: int):
        raise MemoryError(f"cannot allocate {capacity} slots")

    monkeypatch.setattr(unilib.sequence, "allocate_slots", _fail)
    return _fail


@pytest.fixture
def cell_type() -> type[Cell]:
    return Cell


@pytest.fixture
def cells() -> list[Cell]:
    return [Cell(i) for i in range(4)]
