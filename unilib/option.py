"""Optional value holder."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class OptionStatus(Enum):
    """Whether an :class:`Option` carries a value."""

    NONE = 0
    SOME = 1


@dataclass(frozen=True, slots=True)
class Option(Generic[T]):
    """Either empty or present with a value.

    ``Option(OptionStatus.SOME, None)`` is rejected; a value passed together
    with ``OptionStatus.NONE`` is discarded.
    """

    status: OptionStatus
    value: T | None = None

    def __post_init__(self) -> None:
        if self.status is OptionStatus.SOME and self.value is None:
            raise ValueError("a present option needs a value")
        if self.status is OptionStatus.NONE and self.value is not None:
            object.__setattr__(self, "value", None)

    @classmethod
    def none(cls) -> Option[T]:
        return cls(OptionStatus.NONE)

    @classmethod
    def some(cls, value: T) -> Option[T]:
        return cls(OptionStatus.SOME, value)

    def is_none(self) -> bool:
        return self.status is OptionStatus.NONE

    def is_some(self) -> bool:
        return self.status is OptionStatus.SOME

    def unwrap(self) -> T:
        if self.value is None:
            raise ValueError("unwrap called on an empty option")
        return self.value

    def unwrap_or(self, default: T) -> T:
        return default if self.value is None else self.value

    def free(self, releaser: Callable[[T], None] | None = None) -> None:
        """Hand the payload to ``releaser`` if the option is present."""
        if self.is_some() and releaser is not None:
            releaser(self.value)  # type: ignore[arg-type]


__all__ = [
    "Option",
    "OptionStatus",
]
