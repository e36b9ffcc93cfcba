"""Tests for the processor registry and dispatch order."""
from typing import Optional

import pytest

from tek.exceptions import RegistryError
from tek.makefile import Makefile
from tek.processors import BaseProcessor, ImageMagickProcessor, ProcessorRegistry, register_processor
from tek.stack import DependencyStack


class AnyPdfProcessor(BaseProcessor):
    """Claims every .pdf and emits a single touch rule."""

    booted_with = None

    @classmethod
    def boot(cls, context=None):
        cls.NAME = "TOUCH"
        cls.booted_with = context

    @classmethod
    def search(cls, filename: str) -> Optional["AnyPdfProcessor"]:
        return cls() if filename.endswith(".pdf") else None

    def process(self, filename, stack, makefile):
        makefile.create_target(filename)
        makefile.start_deps()
        makefile.end_deps()
        makefile.start_cmds()
        makefile.add_cmd('touch "%s"', filename)
        makefile.end_cmds()
        return True


def _booted(*classes):
    reg = ProcessorRegistry()
    for cls in classes:
        reg.register(cls)
    reg.boot()
    return reg


def test_unclaimed_returns_none(registry):
    assert registry.dispatch("notes.txt") is None


def test_dispatch_returns_configured_claim(registry):
    claim = registry.dispatch("a/.tek_cache/b.uncrop.png.pdf")
    assert isinstance(claim, ImageMagickProcessor)
    assert claim.crop is True


def test_first_registered_wins():
    """Swapping registration order changes which processor emits the rules."""
    filename = "a/.tek_cache/b.png.pdf"

    first = _booted(AnyPdfProcessor, ImageMagickProcessor)
    second = _booted(ImageMagickProcessor, AnyPdfProcessor)
    assert isinstance(first.dispatch(filename), AnyPdfProcessor)
    assert isinstance(second.dispatch(filename), ImageMagickProcessor)

    m1, m2 = Makefile(), Makefile()
    first.dispatch(filename).process(filename, DependencyStack(), m1)
    second.dispatch(filename).process(filename, DependencyStack(), m2)
    assert m1.fragments != m2.fragments
    assert m1.targets == [filename]


def test_later_processor_still_gets_what_earlier_ones_skip():
    reg = _booted(ImageMagickProcessor, AnyPdfProcessor)
    assert isinstance(reg.dispatch("report.pdf"), AnyPdfProcessor)


def test_boot_passes_context_and_freezes():
    reg = ProcessorRegistry()
    reg.register(AnyPdfProcessor)
    context = object()
    reg.boot(context)
    assert AnyPdfProcessor.booted_with is context
    assert reg.booted
    with pytest.raises(RegistryError):
        reg.register(ImageMagickProcessor)


def test_dispatch_before_boot_raises():
    reg = ProcessorRegistry()
    reg.register(ImageMagickProcessor)
    with pytest.raises(RegistryError):
        reg.dispatch("a.png.pdf")


def test_register_rejects_non_processors():
    reg = ProcessorRegistry()
    with pytest.raises(RegistryError):
        reg.register(Makefile)
    with pytest.raises(RegistryError):
        reg.register("ImageMagickProcessor")


def test_duplicate_registration_is_ignored():
    reg = ProcessorRegistry()
    reg.register(ImageMagickProcessor)
    reg.register(ImageMagickProcessor)
    assert len(reg) == 1
    assert reg.names() == ["ImageMagickProcessor"]


def test_teardown_resets():
    reg = _booted(ImageMagickProcessor)
    reg.teardown()
    assert len(reg) == 0
    assert not reg.booted
    reg.register(AnyPdfProcessor)
    assert AnyPdfProcessor in reg


def test_register_processor_decorator():
    reg = ProcessorRegistry()

    @register_processor(reg)
    class Decorated(AnyPdfProcessor):
        pass

    assert reg.processors == (Decorated,)
