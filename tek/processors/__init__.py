"""
Processors for tek.

This package contains the processor classes that claim filenames and emit
the Makefile rules building them.
"""
from __future__ import annotations

from ._registry import ProcessorRegistry, register_processor
from .base import BaseProcessor
from .imagemagick import ImageMagickProcessor

__all__ = [
    'BaseProcessor',
    'ImageMagickProcessor',
    'ProcessorRegistry',
    'register_processor',
]
