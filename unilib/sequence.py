"""Slot-backed double-ended sequence shared by :class:`Deque` and :class:`Queue`.

The sequence keeps its elements in a contiguous backing store of ``capacity``
slots (a one-dimensional ``numpy`` object array). The first ``length`` slots
are occupied and hold the elements in logical order, front at index 0; the
remaining slots hold ``None``.

Ownership
=========

A sequence owns every element stored in its occupied slots:

- ``push_front`` / ``push_back`` take ownership of the caller's element.
- ``push_front_copy`` / ``push_back_copy`` clone the element with the
  sequence's ``copier`` and own the clone; the caller keeps the original.
- ``pop_front`` / ``pop_back`` hand ownership back to the caller.
- Elements dropped by the sequence itself (truncating ``resize``, ``empty``,
  ``release`` and the rollback of a failed copy push) are passed to the
  sequence's ``releaser`` exactly once.

Growth happens one slot at a time: a push into a full sequence resizes it to
``capacity + 1``. Capacity is never reduced implicitly.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Iterator
from typing import Final, Generic, TypeVar

import numpy as np

from unilib.status import Status

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_CAPACITY: Final[int] = 1

Copier = Callable[[T], T]
Releaser = Callable[[T], None]


def allocate_slots(capacity: int) -> np.ndarray:
    """Return a backing store of ``capacity`` empty slots.

    Raises ``MemoryError`` when the store cannot be allocated.
    """
    return np.full(capacity, None, dtype=object)


def _discard(_element: object) -> None:
    """Default releaser: dropping the reference is enough."""


class BaseSequence(Generic[T]):
    """Ordered, index-addressable sequence of owned elements.

    Parameters
    ----------
    capacity : int
        Initial number of slots (must be >= 1).
    copier : Callable[[T], T] | None
        Clones an element for the ``push_*_copy`` operations.
        Defaults to :func:`copy.copy`.
    releaser : Callable[[T], None] | None
        Invoked once for every element the sequence drops on its own.
        Defaults to a no-op.
    """

    __slots__ = ("_slots", "_length", "_capacity", "_copier", "_releaser")

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        *,
        copier: Copier | None = None,
        releaser: Releaser | None = None,
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self._setup(capacity, copier, releaser)

    def _setup(self, capacity: int, copier: Copier | None, releaser: Releaser | None) -> None:
        # Allocate before touching any field so a failure leaves the record as it was.
        slots = allocate_slots(capacity)
        self._slots = slots
        self._length = 0
        self._capacity = capacity
        self._copier = copier or copy.copy
        self._releaser = releaser or _discard

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def init(
        cls,
        target: BaseSequence[T] | None,
        *,
        copier: Copier | None = None,
        releaser: Releaser | None = None,
    ) -> Status:
        """Initialize a caller-provided record with the default capacity."""
        return cls.init_with_capacity(target, DEFAULT_CAPACITY, copier=copier, releaser=releaser)

    @classmethod
    def init_with_capacity(
        cls,
        target: BaseSequence[T] | None,
        capacity: int,
        *,
        copier: Copier | None = None,
        releaser: Releaser | None = None,
    ) -> Status:
        """Initialize a caller-provided record in place.

        Any elements the record held before are forgotten, not released.
        On failure ``target`` is left untouched.
        """
        if target is None:
            return Status.NULL_RECEIVER
        if capacity < 0:
            raise ValueError("capacity must be >= 0")
        if capacity == 0:
            return Status.ZERO_CAPACITY
        try:
            target._setup(capacity, copier, releaser)
        except MemoryError:
            _LOGGER.warning(f"Could not allocate {capacity} slots for {cls.__name__}")
            return Status.ALLOC_FAILED
        return Status.OK

    @classmethod
    def new(
        cls,
        *,
        copier: Copier | None = None,
        releaser: Releaser | None = None,
    ) -> tuple[Status, BaseSequence[T] | None]:
        """Allocate a new sequence with the default capacity."""
        return cls.new_with_capacity(DEFAULT_CAPACITY, copier=copier, releaser=releaser)

    @classmethod
    def new_with_capacity(
        cls,
        capacity: int,
        *,
        copier: Copier | None = None,
        releaser: Releaser | None = None,
    ) -> tuple[Status, BaseSequence[T] | None]:
        """Allocate a new sequence.

        Returns
        -------
        tuple[Status, BaseSequence | None]
            The status and the new sequence; the sequence is ``None``
            whenever the status is not ``OK``.
        """
        instance = cls.__new__(cls)
        status = cls.init_with_capacity(instance, capacity, copier=copier, releaser=releaser)
        if status is not Status.OK:
            return status, None
        return status, instance

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def length(self) -> int:
        return self._length

    @property
    def capacity(self) -> int:
        return self._capacity

    def front(self) -> T | None:
        """Return the front element without removing it, or ``None`` if empty."""
        if self._length == 0:
            return None
        return self._slots[0]

    def back(self) -> T | None:
        """Return the back element without removing it, or ``None`` if empty."""
        if self._length == 0:
            return None
        return self._slots[self._length - 1]

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def _reserve_one(self) -> Status:
        if self._length < self._capacity:
            return Status.OK
        return self.resize(self._capacity + 1)

    def push_front(self, elem: T) -> Status:
        """Insert ``elem`` before the front element, taking ownership of it."""
        if elem is None:
            return Status.NULL_RECEIVER
        status = self._reserve_one()
        if status is not Status.OK:
            return status
        n = self._length
        self._slots[1 : n + 1] = self._slots[0:n]
        self._slots[0] = elem
        self._length = n + 1
        return Status.OK

    def push_back(self, elem: T) -> Status:
        """Insert ``elem`` after the back element, taking ownership of it."""
        if elem is None:
            return Status.NULL_RECEIVER
        status = self._reserve_one()
        if status is not Status.OK:
            return status
        self._slots[self._length] = elem
        self._length += 1
        return Status.OK

    def push_front_copy(self, elem: T) -> Status:
        """Insert a copy of ``elem`` at the front; the caller keeps ``elem``."""
        return self._push_copy(elem, self.push_front)

    def push_back_copy(self, elem: T) -> Status:
        """Insert a copy of ``elem`` at the back; the caller keeps ``elem``."""
        return self._push_copy(elem, self.push_back)

    def _push_copy(self, elem: T, push: Callable[[T], Status]) -> Status:
        if elem is None:
            return Status.NULL_RECEIVER
        try:
            clone = self._copier(elem)
        except MemoryError:
            _LOGGER.warning("Could not allocate an element copy")
            return Status.ALLOC_FAILED
        status = push(clone)
        if status is not Status.OK:
            self._release(clone)
        return status

    # ------------------------------------------------------------------
    # Removal
    # ------------------------------------------------------------------

    def pop_front(self) -> T | None:
        """Remove and return the front element, or ``None`` if empty.

        Ownership of the returned element moves to the caller.
        """
        n = self._length
        if n == 0:
            return None
        elem = self._slots[0]
        self._slots[0 : n - 1] = self._slots[1:n]
        self._slots[n - 1] = None
        self._length = n - 1
        return elem

    def pop_back(self) -> T | None:
        """Remove and return the back element, or ``None`` if empty."""
        if self._length == 0:
            return None
        self._length -= 1
        elem = self._slots[self._length]
        self._slots[self._length] = None
        return elem

    # ------------------------------------------------------------------
    # Capacity
    # ------------------------------------------------------------------

    def resize(self, capacity: int) -> Status:
        """Change the number of slots to ``capacity``.

        Growing appends empty slots. Shrinking below ``length`` releases the
        elements in ``[capacity, length)`` and truncates ``length``. If the new
        store cannot be allocated the sequence is left unchanged and
        ``ALLOC_FAILED`` is returned.
        """
        if capacity < 0:
            raise ValueError("capacity must be >= 0")
        if capacity == 0:
            return Status.ZERO_CAPACITY
        if capacity == self._capacity:
            return Status.OK

        try:
            slots = allocate_slots(capacity)
        except MemoryError:
            _LOGGER.warning(
                f"Could not resize {type(self).__name__} from {self._capacity} to {capacity} slots"
            )
            return Status.ALLOC_FAILED

        keep = min(self._length, capacity)
        slots[:keep] = self._slots[:keep]
        dropped = list(self._slots[capacity : self._length]) if capacity < self._length else []

        _LOGGER.debug(
            f"Resized {type(self).__name__} {self._capacity} -> {capacity} "
            f"(length {self._length} -> {keep}, released {len(dropped)})"
        )
        self._slots = slots
        self._capacity = capacity
        self._length = keep
        for elem in dropped:
            self._release(elem)
        return Status.OK

    # ------------------------------------------------------------------
    # Emptying and release
    # ------------------------------------------------------------------

    def empty(self) -> Status:
        """Release every element; capacity is unchanged."""
        dropped = list(self._slots[: self._length])
        self._slots[: self._length] = None
        self._length = 0
        if dropped:
            _LOGGER.debug(f"Emptied {type(self).__name__} ({len(dropped)} released)")
        for elem in dropped:
            self._release(elem)
        return Status.OK

    def release(self) -> Status:
        """Release every element and the backing store.

        Afterwards ``length`` and ``capacity`` are both 0. Only
        re-initialisation through :meth:`init` makes the sequence usable again.
        """
        dropped = list(self._slots[: self._length])
        self._slots = np.empty(0, dtype=object)
        self._length = 0
        self._capacity = 0
        _LOGGER.debug(f"Released {type(self).__name__} ({len(dropped)} elements)")
        for elem in dropped:
            self._release(elem)
        return Status.OK

    def _release(self, elem: T) -> None:
        try:
            self._releaser(elem)
        except Exception:
            _LOGGER.warning(f"Releaser failed for element {elem!r}")
            raise

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._length > 0

    def __iter__(self) -> Iterator[T]:
        for i in range(self._length):
            yield self._slots[i]

    def __repr__(self) -> str:
        content = ", ".join(repr(elem) for elem in self)
        return f"{type(self).__name__}([{content}], capacity={self._capacity})"


__all__ = [
    "DEFAULT_CAPACITY",
    "BaseSequence",
    "allocate_slots",
]
