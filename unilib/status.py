"""Status codes returned by mutating sequence operations."""

from __future__ import annotations

from enum import IntEnum


class Status(IntEnum):
    """Outcome of a mutating sequence operation.

    - ``OK``: the operation succeeded
    - ``NULL_RECEIVER``: a required reference (target or element) was ``None``
    - ``ALLOC_FAILED``: the backing store or an element copy could not be allocated
    - ``ZERO_CAPACITY``: a capacity of 0 was requested
    """

    OK = 0
    NULL_RECEIVER = 1
    ALLOC_FAILED = 2
    ZERO_CAPACITY = 3

    @property
    def is_ok(self) -> bool:
        return self is Status.OK

    def raise_for_status(self) -> None:
        """Raise :class:`StatusError` unless the status is ``OK``."""
        if self is not Status.OK:
            raise StatusError(self)


class StatusError(RuntimeError):
    """Exception form of a non-OK :class:`Status`."""

    def __init__(self, status: Status) -> None:
        super().__init__(f"sequence operation failed: {status.name}")
        self.status = status


def is_ok(status: Status) -> bool:
    return status == Status.OK


__all__ = [
    "Status",
    "StatusError",
    "is_ok",
]
