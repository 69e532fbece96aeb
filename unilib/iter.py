"""External (pull) iterator over an opaque state.

An :class:`ExternalIterator` bundles three pieces:

- ``state``: whatever the source needs to produce elements
- ``advance_fn``: ``state -> element | None``; ``None`` marks the end and must
  keep being returned once the source is exhausted
- ``release_fn``: ``state -> None``; frees whatever the state owns

Sources that prefer an object form can implement :class:`IteratorSource`
and be wrapped with :meth:`ExternalIterator.from_source`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

AdvanceFn = Callable[[Any], Any]
ReleaseFn = Callable[[Any], None]


@runtime_checkable
class IteratorSource(Protocol[T_co]):
    """Capability set of an iterator source."""

    def advance(self) -> T_co | None:
        """Return the next element, or ``None`` once exhausted."""

    def release(self) -> None:
        """Free whatever the source owns."""


def _release_nothing(_state: object) -> None:
    pass


@dataclass(slots=True)
class ExternalIterator(Generic[T]):
    """Single-pass pull iterator."""

    state: Any
    advance_fn: AdvanceFn
    release_fn: ReleaseFn = _release_nothing

    @classmethod
    def from_source(cls, source: IteratorSource[T]) -> ExternalIterator[T]:
        return cls(source, lambda src: src.advance(), lambda src: src.release())

    @classmethod
    def from_iterable(cls, iterable: Iterable[T]) -> ExternalIterator[T]:
        """Wrap a Python iterable; ``None`` items would read as the end."""
        return cls(iter(iterable), lambda it: next(it, None))

    def next(self) -> T | None:
        """Advance once and return the element, or ``None`` at the end."""
        return self.advance_fn(self.state)

    def advance_by(self, count: int) -> int:
        """Advance at most ``count`` times; return how many advances succeeded."""
        advanced = 0
        while advanced < count:
            if self.next() is None:
                break
            advanced += 1
        return advanced

    def count(self) -> int:
        """Consume the iterator and return the number of remaining elements."""
        remaining = 0
        while self.next() is not None:
            remaining += 1
        return remaining

    def free(self) -> None:
        """Release the state through ``release_fn``."""
        self.release_fn(self.state)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        elem = self.next()
        if elem is None:
            raise StopIteration
        return elem


__all__ = [
    "ExternalIterator",
    "IteratorSource",
]
