"""Double-ended queue."""

from __future__ import annotations

from typing import TypeVar

from unilib.sequence import BaseSequence

T = TypeVar("T")


class Deque(BaseSequence[T]):
    """Sequence used from both ends.

    See :class:`unilib.sequence.BaseSequence` for the ownership and growth
    contract.
    """

    __slots__ = ()


__all__ = ["Deque"]
