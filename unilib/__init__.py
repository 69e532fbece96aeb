"""unilib public interface.

Small in-memory primitives: a slot-backed double-ended sequence (``Deque``
and ``Queue``), an optional value holder (``Option``) and an external pull
iterator (``ExternalIterator``).
"""

from __future__ import annotations

from .deque import Deque
from .factory import SequenceConfig, SequenceFactory
from .iter import ExternalIterator, IteratorSource
from .option import Option, OptionStatus
from .queue import Queue
from .sequence import DEFAULT_CAPACITY, BaseSequence
from .status import Status, StatusError, is_ok

__all__ = [
    "DEFAULT_CAPACITY",
    "BaseSequence",
    "Deque",
    "ExternalIterator",
    "IteratorSource",
    "Option",
    "OptionStatus",
    "Queue",
    "SequenceConfig",
    "SequenceFactory",
    "Status",
    "StatusError",
    "is_ok",
]

__version__ = "0.1.0"
