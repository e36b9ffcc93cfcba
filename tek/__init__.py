__version__ = "0.1.0"

"""tek package

Generates Makefile rules for files that need converting before a document
build. Processors claim filenames; the first claimant emits the rules.
"""
from .exceptions import TekError
from .makefile import Makefile
from .processor_loader import build_registry
from .processor_runner import ProcessorRunner, ProcessResult
from .processors import BaseProcessor, ImageMagickProcessor, ProcessorRegistry
from .stack import DependencyStack

__all__ = [
    "BaseProcessor",
    "DependencyStack",
    "ImageMagickProcessor",
    "Makefile",
    "ProcessorRegistry",
    "ProcessorRunner",
    "ProcessResult",
    "TekError",
    "build_registry",
]
