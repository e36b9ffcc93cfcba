"""
Image conversion processor.

Claims cached PDF renderings of images, ``<name>.<format>.pdf`` with format
one of png, jpeg or svg, and emits the rules that convert the original image
into that PDF. Two extra name segments change the rules:

* ``.uncrop.`` before the format: the converter output is cropped with
  pdfcrop afterwards. Yes, the token that requests cropping is "uncrop".
* ``.inkscape.`` before ``svg.pdf``: inkscape converts the SVG instead of
  ImageMagick.

The claimed filename always lives below a ``.tek_cache/`` directory; the
source image is found by cutting that segment back out of the path.
"""
from __future__ import annotations

import logging
from typing import Any, Optional, Tuple

from tek.constants import (
    CACHE_DIR_MARKER,
    PDF_SUFFIX,
    TAG_CONVERT,
    TAG_CROP,
    TAG_IMGCP,
    TAG_INKCONV,
    TOCROP_SUFFIX,
)
from tek.exceptions import CacheLayoutError
from tek.makefile import Makefile
from tek.paths import dirname_of, splice_out, string_ends_with, string_index, strip_suffix
from tek.processors.base import BaseProcessor
from tek.stack import DependencyStack

logger = logging.getLogger(__name__)

IMAGE_FORMATS = ("png", "jpeg", "svg")

MKDIR_CMD = 'mkdir -p "%s" >& /dev/null || true'


def locate_cache_marker(filename: str) -> Tuple[int, int]:
    """Return the ``[start, end)`` offsets of the cache marker in *filename*.

    Raises:
        CacheLayoutError: the marker is missing, so the source path cannot be recovered.
    """
    start = string_index(filename, CACHE_DIR_MARKER)
    if start == -1:
        raise CacheLayoutError(f"{CACHE_DIR_MARKER} not found in {filename}", filename=filename)
    return start, start + len(CACHE_DIR_MARKER)


class ImageMagickProcessor(BaseProcessor):
    """Builds ``*.{png,jpeg,svg}.pdf`` from the matching source image."""

    def __init__(self, image_format: str, crop: bool = False, inkscape: bool = False):
        self.image_format = image_format
        self.crop = crop
        self.inkscape = inkscape

    @classmethod
    def boot(cls, context: Any = None) -> None:
        cls.NAME = TAG_CONVERT

    @classmethod
    def search(cls, filename: str) -> Optional["ImageMagickProcessor"]:
        claim = None
        for image_format in IMAGE_FORMATS:
            if string_ends_with(filename, f".{image_format}{PDF_SUFFIX}"):
                claim = cls(image_format)
        if claim is None:
            return None

        if string_ends_with(filename, f".uncrop.{claim.image_format}{PDF_SUFFIX}"):
            claim.crop = True
        if string_ends_with(filename, f".inkscape.svg{PDF_SUFFIX}"):
            claim.inkscape = True
        return claim

    @property
    def crop_suffix(self) -> str:
        return f".uncrop.{self.image_format}{PDF_SUFFIX}"

    def out_name(self, filename: str) -> str:
        """Where the converter writes: the claimed file, or a to-be-cropped sibling."""
        if not self.crop:
            return filename
        return strip_suffix(filename, len(self.crop_suffix)) + TOCROP_SUFFIX

    def process(self,
                filename: str,
                stack: DependencyStack,
                makefile: Makefile) -> bool:
        try:
            cachedir_index, marker_end = locate_cache_marker(filename)
        except CacheLayoutError as e:
            logger.error("Bad cachedir for image: %s", e)
            return False

        # Everything up to and including the marker. Only proves the layout;
        # the mkdir rules use the claimed file's own directory below.
        cache_dir = filename[:marker_end]
        infile = strip_suffix(splice_out(filename, cachedir_index, marker_end), len(PDF_SUFFIX))

        cache_dir = dirname_of(filename)
        cache_name = strip_suffix(filename, len(PDF_SUFFIX))
        out_name = self.out_name(filename)

        # Convert the cached copy of the image into a PDF
        makefile.create_target(out_name)
        makefile.start_deps()
        makefile.add_dep(cache_name)
        makefile.end_deps()

        makefile.start_cmds()
        if not self.inkscape:
            makefile.nam_cmd('echo -e "%s\\t%s"', TAG_CONVERT, infile)
            makefile.add_cmd(MKDIR_CMD, cache_dir)
            makefile.add_cmd('convert "%s" "%s"', infile, out_name)
        else:
            makefile.nam_cmd('echo -e "%s\\t%s"', TAG_INKCONV, infile)
            makefile.add_cmd(MKDIR_CMD, cache_dir)
            makefile.add_cmd('inkscape "%s" --export-pdf="%s" -D', infile, out_name)
        makefile.end_cmds()

        # Crop the converter output into the claimed file
        if self.crop:
            makefile.create_target(filename)
            makefile.start_deps()
            makefile.add_dep(out_name)
            makefile.end_deps()

            makefile.start_cmds()
            makefile.nam_cmd('echo -e "%s\\t%s"', TAG_CROP, infile)
            makefile.add_cmd(MKDIR_CMD, cache_dir)
            makefile.add_cmd('pdfcrop "%s" "%s" >& /dev/null', out_name, filename)
            makefile.end_cmds()

        # Keep a copy of the source image in the cache, document stages depend on it
        makefile.create_target(cache_name)
        makefile.start_deps()
        makefile.add_dep(infile)
        makefile.end_deps()

        makefile.start_cmds()
        makefile.nam_cmd('echo -e "%s\\t%s"', TAG_IMGCP, infile)
        makefile.add_cmd(MKDIR_CMD, cache_dir)
        makefile.add_cmd('cp "%s" "%s"', infile, cache_name)
        makefile.end_cmds()

        return True

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(image_format={self.image_format!r}, "
                f"crop={self.crop!r}, inkscape={self.inkscape!r})")
