"""Factory for building sequences from configuration.

Supports dataclass configs, plain dicts and YAML/JSON files. Element
``copier`` and ``releaser`` callables are code, not configuration, so they are
passed to :meth:`SequenceFactory.build` directly.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import yaml

from unilib.deque import Deque
from unilib.queue import Queue
from unilib.sequence import DEFAULT_CAPACITY, BaseSequence

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SequenceConfig:
    """Configuration for a sequence.

    Attributes
    ----------
    kind : str
        Registered sequence kind: "deque" or "queue".
    capacity : int
        Initial number of slots.
    """

    kind: str = "deque"
    capacity: int = DEFAULT_CAPACITY


class SequenceFactory:
    """Build sequences by kind.

    Example
    -------
    >>> queue = SequenceFactory.build({"kind": "queue", "capacity": 8})
    >>> queue.capacity
    8
    """

    _KINDS: dict[str, type[BaseSequence]] = {
        "deque": Deque,
        "queue": Queue,
    }

    @classmethod
    def register(cls, name: str, sequence_class: type[BaseSequence]) -> None:
        cls._KINDS[name] = sequence_class
        _LOGGER.info(f"Registered sequence kind: {name}")

    @classmethod
    def available(cls) -> list[str]:
        return sorted(cls._KINDS)

    @classmethod
    def build(
        cls,
        config: dict[str, Any] | SequenceConfig,
        **callables: Any,
    ) -> BaseSequence:
        """Build a sequence from configuration.

        Parameters
        ----------
        config : dict | SequenceConfig
            Sequence configuration.
        **callables
            ``copier`` and/or ``releaser`` forwarded to the constructor.

        Returns
        -------
        BaseSequence
            The new, empty sequence.

        Raises
        ------
        ValueError
            If the config is not a dict or SequenceConfig, or has unknown keys.
        KeyError
            If the sequence kind is not registered.
        StatusError
            If the sequence could not be constructed.
        """
        if isinstance(config, SequenceConfig):
            cfg = config
        elif isinstance(config, dict):
            unknown = set(config) - {"kind", "capacity"}
            if unknown:
                raise ValueError(f"Unknown sequence config keys: {sorted(unknown)}")
            cfg = SequenceConfig(**config)
        else:
            raise ValueError(f"Invalid config type: {type(config)}")

        kind = cfg.kind.lower()
        if kind not in cls._KINDS:
            raise KeyError(f"Unknown sequence kind: {cfg.kind}. Available: {cls.available()}")

        status, sequence = cls._KINDS[kind].new_with_capacity(cfg.capacity, **callables)
        status.raise_for_status()
        _LOGGER.debug(f"Built {kind} from config {asdict(cfg)}")
        return sequence

    @classmethod
    def from_yaml(cls, path: str | Path, **callables: Any) -> BaseSequence:
        """Build a sequence from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            config = yaml.safe_load(f)

        _LOGGER.info(f"Loaded sequence config from {path}")
        return cls.build(config, **callables)

    @classmethod
    def from_json(cls, path: str | Path, **callables: Any) -> BaseSequence:
        """Build a sequence from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            config = json.load(f)

        _LOGGER.info(f"Loaded sequence config from {path}")
        return cls.build(config, **callables)


__all__ = [
    "SequenceConfig",
    "SequenceFactory",
]
