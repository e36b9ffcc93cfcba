"""
Processor Runner Module

Drives dispatch for a list of filenames: asks the registry which processor
claims each one and lets that processor emit its rules into the Makefile.
Each filename is handled on its own; a failure for one file never touches
the rules already emitted for others.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from tek.exceptions import TekError, UnclaimedFileError
from tek.makefile import Makefile
from tek.processors._registry import ProcessorRegistry
from tek.stack import DependencyStack

logger = logging.getLogger(__name__)


@dataclass
class ProcessResult:
    """Outcome of running one filename through the registry."""

    filename: str
    processor: Optional[str] = None
    emitted: bool = False
    error: Optional[str] = None

    @property
    def claimed(self) -> bool:
        return self.processor is not None


class ProcessorRunner:
    """
    Runs filenames through a booted registry into a single Makefile.

    Args:
        registry: Booted processor registry; its order decides ownership.
        makefile: The shared sink.
        stack: Dependency stack passed to every processor; a fresh one by default.
        strict: Raise UnclaimedFileError instead of skipping unclaimed files.
    """

    def __init__(self,
                 registry: ProcessorRegistry,
                 makefile: Makefile,
                 stack: Optional[DependencyStack] = None,
                 strict: bool = False):
        self.registry = registry
        self.makefile = makefile
        self.stack = stack if stack is not None else DependencyStack()
        self.strict = strict

    def run(self, filename: str) -> ProcessResult:
        result = ProcessResult(filename=filename)

        claim = self.registry.dispatch(filename)
        if claim is None:
            if self.strict:
                raise UnclaimedFileError(f"No processor claims {filename}")
            logger.debug(f"Skipping unclaimed file: {filename}")
            return result

        result.processor = claim.name
        try:
            with self.makefile.transaction():
                result.emitted = bool(claim.process(filename, self.stack, self.makefile))
        except TekError as e:
            logger.error(f"Error in processor {claim.name} for {filename}: {e}")
            result.error = str(e)
        return result

    def run_all(self, filenames: Iterable[str]) -> List[ProcessResult]:
        """Run every filename in order and log a summary."""
        results = [self.run(filename) for filename in filenames]

        emitted = sum(1 for r in results if r.emitted)
        unclaimed = sum(1 for r in results if not r.claimed)
        failed = sum(1 for r in results if r.claimed and not r.emitted)
        logger.info(f"Processed {len(results)} files: {emitted} emitted, {unclaimed} unclaimed, {failed} failed")
        return results
