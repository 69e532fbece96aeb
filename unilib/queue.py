"""FIFO queue built on the slot-backed sequence."""

from __future__ import annotations

from typing import TypeVar

from unilib.sequence import BaseSequence
from unilib.status import Status

T = TypeVar("T")


class Queue(BaseSequence[T]):
    """Sequence with FIFO vocabulary on top of the double-ended operations.

    ``enqueue`` appends at the back, ``dequeue`` removes from the front and
    ``peek`` inspects the front. All double-ended operations stay available.
    """

    __slots__ = ()

    def enqueue(self, elem: T) -> Status:
        return self.push_back(elem)

    def enqueue_copy(self, elem: T) -> Status:
        return self.push_back_copy(elem)

    def dequeue(self) -> T | None:
        return self.pop_front()

    def peek(self) -> T | None:
        return self.front()


__all__ = ["Queue"]
