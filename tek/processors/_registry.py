"""
Processor Registry for tek

This module provides the ordered table of processor classes that compete for
filenames. The first registered processor whose ``search`` claims a filename
wins, so registration order is part of the behaviour.
"""
from __future__ import annotations

import logging
from typing import Any, Iterator, List, Optional, Tuple, Type

from tek.exceptions import RegistryError
from tek.processors.base import BaseProcessor

logger = logging.getLogger(__name__)


class ProcessorRegistry:
    """Append-only, write-once table of processor classes."""

    def __init__(self):
        self._processors: List[Type[BaseProcessor]] = []
        self._booted = False

    def register(self, cls: Type[BaseProcessor]) -> Type[BaseProcessor]:
        if self._booted:
            raise RegistryError(f"Cannot register {cls!r}: registry is already booted")
        if not (isinstance(cls, type) and issubclass(cls, BaseProcessor)):
            raise RegistryError(f"{cls!r} does not inherit from BaseProcessor")
        if cls in self._processors:
            logger.warning("Processor %s registered twice, ignoring", cls.__name__)
            return cls
        self._processors.append(cls)
        logger.debug("Registered processor %s at position %d", cls.__name__, len(self._processors) - 1)
        return cls

    def boot(self, context: Any = None) -> None:
        """Run every processor's boot hook in registration order."""
        if self._booted:
            return
        for cls in self._processors:
            cls.boot(context)
        self._booted = True
        logger.debug("Booted %d processor(s): %s", len(self._processors), self.names())

    def teardown(self) -> None:
        self._processors.clear()
        self._booted = False

    @property
    def booted(self) -> bool:
        return self._booted

    def dispatch(self, filename: str) -> Optional[BaseProcessor]:
        """Return the first claim for *filename*, or None when nobody claims it."""
        if not self._booted:
            raise RegistryError("dispatch() called before boot()")
        for cls in self._processors:
            claim = cls.search(filename)
            if claim is not None:
                logger.debug("%s claimed %s", cls.__name__, filename)
                return claim
        logger.debug("No processor claimed %s", filename)
        return None

    @property
    def processors(self) -> Tuple[Type[BaseProcessor], ...]:
        return tuple(self._processors)

    def names(self) -> List[str]:
        return [cls.__name__ for cls in self._processors]

    def __len__(self) -> int:
        return len(self._processors)

    def __iter__(self) -> Iterator[Type[BaseProcessor]]:
        return iter(tuple(self._processors))

    def __contains__(self, cls: object) -> bool:
        return cls in self._processors


def register_processor(registry: ProcessorRegistry):
    """Class decorator registering a processor into *registry*."""
    def decorator(cls):
        return registry.register(cls)
    return decorator
