"""Shared fixtures for the tek test-suite."""
import pytest

from tek.makefile import Makefile
from tek.processors import ImageMagickProcessor, ProcessorRegistry
from tek.stack import DependencyStack


class RecordingMakefile(Makefile):
    """Makefile that also records the order of sink calls."""

    def __init__(self, verbose: bool = False):
        super().__init__(verbose=verbose)
        self.calls = []

    def create_target(self, name):
        self.calls.append(("create_target", name))
        super().create_target(name)

    def start_deps(self):
        self.calls.append(("start_deps",))
        super().start_deps()

    def add_dep(self, name):
        self.calls.append(("add_dep", name))
        super().add_dep(name)

    def end_deps(self):
        self.calls.append(("end_deps",))
        super().end_deps()

    def start_cmds(self):
        self.calls.append(("start_cmds",))
        super().start_cmds()

    def add_cmd(self, fmt, *args):
        self.calls.append(("add_cmd", fmt % args if args else fmt))
        super().add_cmd(fmt, *args)

    def nam_cmd(self, fmt, *args):
        self.calls.append(("nam_cmd", fmt % args if args else fmt))
        super().nam_cmd(fmt, *args)

    def end_cmds(self):
        self.calls.append(("end_cmds",))
        super().end_cmds()


@pytest.fixture
def makefile():
    return Makefile()


@pytest.fixture
def recording_makefile():
    return RecordingMakefile()


@pytest.fixture
def stack():
    return DependencyStack()


@pytest.fixture
def registry():
    """A booted registry holding the built-in image processor."""
    reg = ProcessorRegistry()
    reg.register(ImageMagickProcessor)
    reg.boot()
    yield reg
    reg.teardown()
