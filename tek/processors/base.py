from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from tek.makefile import Makefile
from tek.stack import DependencyStack


class BaseProcessor(ABC):
    """
    Abstract Base Class for all processors.
    A processor claims filenames it knows how to build and emits the Makefile
    rules that produce them.

    An instance is a *claim*: ``search`` returns one configured for a single
    filename, and it is dropped once ``process`` has run.
    """

    # Display label shown in progress output. Set by ``boot``.
    NAME: str = ""

    @classmethod
    def boot(cls, context: Any = None) -> None:
        """
        Prepare class-level data that outlives individual claims.

        Called once per processor class when the registry boots.

        Args:
            context: The long-lived application context (normally the Settings
                     instance). Processors may ignore it.
        """
        pass

    @classmethod
    @abstractmethod
    def search(cls, filename: str) -> Optional["BaseProcessor"]:
        """
        Decide whether this processor handles *filename*.

        Must only look at the string itself, never at the filesystem.

        Returns:
            A configured instance (the claim) or None.
        """
        pass

    @abstractmethod
    def process(self,
                filename: str,
                stack: DependencyStack,
                makefile: Makefile) -> bool:
        """
        Emit the rules that build *filename*.

        Args:
            filename: The claimed filename.
            stack: The chain of targets currently being built; passed through.
            makefile: The sink receiving targets, dependencies and commands.

        Returns:
            True when rules were emitted, False when the file was skipped
            after reporting an inconsistency.
        """
        pass

    @property
    def name(self) -> str:
        return self.NAME or self.__class__.__name__
