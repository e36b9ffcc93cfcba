"""stack.py
The dependency stack threaded through processors.

It records the chain of targets currently being built. Processors pass it
along untouched unless they push and pop a frame of their own.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List, Optional


class DependencyStack:
    """Chain of in-progress targets, bottom first."""

    def __init__(self, entries: Optional[List[str]] = None):
        self._entries: List[str] = list(entries) if entries else []

    def push(self, name: str) -> None:
        self._entries.append(name)

    def pop(self) -> str:
        if not self._entries:
            raise IndexError("pop from empty dependency stack")
        return self._entries.pop()

    def peek(self) -> Optional[str]:
        """Return the innermost target, or None when the stack is empty."""
        return self._entries[-1] if self._entries else None

    @contextmanager
    def frame(self, name: str) -> Iterator["DependencyStack"]:
        """Push *name* for the duration of a ``with`` block."""
        self.push(name)
        try:
            yield self
        finally:
            self.pop()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __repr__(self) -> str:
        return f"DependencyStack({self._entries!r})"
