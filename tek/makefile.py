"""makefile.py
The build-description sink: accumulates Makefile rules emitted by processors.

Every target is written through the same ordered sequence of calls::

    create_target -> start_deps -> add_dep* -> end_deps
                  -> start_cmds -> (add_cmd | nam_cmd)* -> end_cmds

Calling them out of order is a bug in the generator and raises
``MakefileStateError``. A finished target becomes one immutable fragment;
fragments are only ever appended.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from typing import IO, Iterator, List, Optional, Union

from .exceptions import MakefileStateError

logger = logging.getLogger(__name__)

HEADER = "# Generated by tek, do not edit.\n\n"


class _State(Enum):
    IDLE = "idle"
    TARGET = "target"
    DEPS = "deps"
    DEPS_DONE = "deps_done"
    CMDS = "cmds"


def escape_name(name: str) -> str:
    """Escape a target or prerequisite name for use in a rule line."""
    return (name.replace("$", "$$").replace("#", "\\#").replace(" ", "\\ ")
            .replace(":", "\\:").replace("%", "\\%"))


def escape_command(command: str) -> str:
    """Escape a shell command line for use in a recipe."""
    return command.replace("$", "$$")


class Makefile:
    """Append-only Makefile builder."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self._fragments: List[str] = []
        self._targets: List[str] = []
        self._state = _State.IDLE
        self._name: Optional[str] = None
        self._deps: List[str] = []
        self._cmds: List[str] = []

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #
    def _expect(self, operation: str, *states: _State) -> None:
        if self._state not in states:
            expected = ", ".join(s.value for s in states)
            raise MakefileStateError(
                f"{operation}() called in state '{self._state.value}', expected one of: {expected}"
            )

    def _reset_current(self) -> None:
        self._state = _State.IDLE
        self._name = None
        self._deps = []
        self._cmds = []

    # ------------------------------------------------------------------ #
    # Target structure
    # ------------------------------------------------------------------ #
    def create_target(self, name: str) -> None:
        self._expect("create_target", _State.IDLE)
        self._name = name
        self._state = _State.TARGET

    def start_deps(self) -> None:
        self._expect("start_deps", _State.TARGET)
        self._state = _State.DEPS

    def add_dep(self, name: str) -> None:
        self._expect("add_dep", _State.DEPS)
        self._deps.append(name)

    def end_deps(self) -> None:
        self._expect("end_deps", _State.DEPS)
        self._state = _State.DEPS_DONE

    def start_cmds(self) -> None:
        self._expect("start_cmds", _State.DEPS_DONE)
        self._state = _State.CMDS

    def add_cmd(self, fmt: str, *args) -> None:
        """Add a shell command, printf-style: ``add_cmd('cp "%s" "%s"', a, b)``."""
        self._expect("add_cmd", _State.CMDS)
        command = escape_command(fmt % args if args else fmt)
        self._cmds.append(command if self.verbose else "@" + command)

    def nam_cmd(self, fmt: str, *args) -> None:
        """Add a command whose only effect is printing a progress label.

        Verbose builds echo the real commands instead, so the label is dropped.
        """
        self._expect("nam_cmd", _State.CMDS)
        if self.verbose:
            return
        self._cmds.append("@" + escape_command(fmt % args if args else fmt))

    def end_cmds(self) -> None:
        self._expect("end_cmds", _State.CMDS)
        rule = escape_name(self._name or "") + ":"
        if self._deps:
            rule += " " + " ".join(escape_name(d) for d in self._deps)
        lines = [rule] + ["\t" + cmd for cmd in self._cmds]
        if self._name in self._targets:
            # make keeps only the last recipe for a target and warns about the first
            logger.warning("Target %s emitted more than once, its earlier rule will be overridden", self._name)
        self._fragments.append("\n".join(lines) + "\n\n")
        self._targets.append(self._name or "")
        logger.debug("Emitted target %s (%d deps, %d cmds)", self._name, len(self._deps), len(self._cmds))
        self._reset_current()

    # ------------------------------------------------------------------ #
    # Atomic emission
    # ------------------------------------------------------------------ #
    @contextmanager
    def transaction(self) -> Iterator["Makefile"]:
        """Make everything emitted inside the block all-or-nothing.

        On an exception the fragments added inside the block are discarded and
        the exception propagates. Leaving the block with a target still open is
        a generator bug: the partial target is discarded and
        ``MakefileStateError`` is raised.
        """
        self._expect("transaction", _State.IDLE)
        mark = len(self._fragments)
        try:
            yield self
        except BaseException:
            self._rollback(mark)
            raise
        if self._state is not _State.IDLE:
            open_target = self._name
            self._rollback(mark)
            raise MakefileStateError(f"Target '{open_target}' was left unfinished")

    def _rollback(self, mark: int) -> None:
        dropped = len(self._fragments) - mark
        del self._fragments[mark:]
        del self._targets[mark:]
        self._reset_current()
        if dropped:
            logger.debug("Rolled back %d fragment(s)", dropped)

    # ------------------------------------------------------------------ #
    # Output
    # ------------------------------------------------------------------ #
    @property
    def fragments(self) -> List[str]:
        return list(self._fragments)

    @property
    def targets(self) -> List[str]:
        return list(self._targets)

    def render(self) -> str:
        return HEADER + "".join(self._fragments)

    def write(self, destination: Union[str, Path, IO[str]]) -> None:
        """Write the rendered Makefile to a path or an open text stream."""
        if self._state is not _State.IDLE:
            raise MakefileStateError(f"Cannot write while target '{self._name}' is unfinished")
        text = self.render()
        if hasattr(destination, "write"):
            destination.write(text)
        else:
            Path(destination).write_text(text, encoding="utf-8")
            logger.info("Wrote %d target(s) to %s", len(self._targets), destination)

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self._fragments)
