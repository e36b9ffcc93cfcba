"""Tests for building registries from tek.yml."""
import pytest

from tek.config_schema import TekConfig
from tek.exceptions import ProcessorConfigurationError
from tek.processor_loader import DEFAULT_PROCESSORS, build_registry, load_config, load_processor_class
from tek.processors import ImageMagickProcessor


def _write(tmp_path, text):
    path = tmp_path / "tek.yml"
    path.write_text(text, encoding="utf-8")
    return path


def test_default_registry():
    reg = build_registry()
    assert reg.booted
    assert list(reg) == DEFAULT_PROCESSORS
    assert ImageMagickProcessor.NAME == "CONVERT"


def test_load_config_and_build(tmp_path):
    path = _write(tmp_path, "processors:\n  - module: tek.processors.imagemagick.ImageMagickProcessor\n")
    config = load_config(path)
    assert [p.module for p in config.processors] == ["tek.processors.imagemagick.ImageMagickProcessor"]
    reg = build_registry(config)
    assert reg.names() == ["ImageMagickProcessor"]


def test_disabled_processors_are_skipped(tmp_path):
    path = _write(tmp_path, (
        "processors:\n"
        "  - module: tek.processors.imagemagick.ImageMagickProcessor\n"
        "    enabled: false\n"
    ))
    reg = build_registry(load_config(path))
    assert len(reg) == 0
    assert reg.dispatch("a.png.pdf") is None


def test_empty_file_means_no_processors(tmp_path):
    config = load_config(_write(tmp_path, ""))
    assert config == TekConfig()


def test_missing_default_file_returns_none(tmp_path):
    assert load_config(tmp_path / "tek.yml") is None


def test_missing_required_file_raises(tmp_path):
    with pytest.raises(ProcessorConfigurationError):
        load_config(tmp_path / "tek.yml", required=True)


@pytest.mark.parametrize(
    "text",
    [
        "processors: [",
        "- just a list\n",
        "processors:\n  - module: NoDots\n",
        "processors:\n  - module: tek.processors.imagemagick.ImageMagickProcessor\n    params: 1\n",
        "unknown_key: true\n",
    ],
)
def test_invalid_config_raises(tmp_path, text):
    with pytest.raises(ProcessorConfigurationError):
        load_config(_write(tmp_path, text))


@pytest.mark.parametrize(
    "dotted_path",
    [
        "tek.does_not_exist.Processor",
        "tek.processors.imagemagick.NoSuchProcessor",
        "tek.makefile.Makefile",
        "tek.constants.PDF_SUFFIX",
    ],
)
def test_load_processor_class_errors(dotted_path):
    with pytest.raises(ProcessorConfigurationError):
        load_processor_class(dotted_path)


def test_load_processor_class():
    assert load_processor_class("tek.processors.ImageMagickProcessor") is ImageMagickProcessor
