"""
Processor Loader Module

Builds the processor registry, either from the processors listed in a tek.yml
file or from the built-in list. Configured processors are imported
dynamically from their ``module.ClassName`` paths.
"""
from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Any, List, Optional, Type

import yaml
from pydantic import ValidationError

from tek.config_schema import TekConfig
from tek.exceptions import ProcessorConfigurationError
from tek.processors._registry import ProcessorRegistry
from tek.processors.base import BaseProcessor
from tek.processors.imagemagick import ImageMagickProcessor

logger = logging.getLogger(__name__)

# Dispatch order used when no tek.yml is present
DEFAULT_PROCESSORS: List[Type[BaseProcessor]] = [
    ImageMagickProcessor,
]


def load_config(path: Path, required: bool = False) -> Optional[TekConfig]:
    """
    Read and validate a tek.yml file.

    Args:
        path: Location of the file.
        required: When False a missing file means "use the defaults" and None
                  is returned; when True it is an error.

    Raises:
        ProcessorConfigurationError: unreadable file, bad YAML or schema violation.
    """
    if not path.exists():
        if required:
            raise ProcessorConfigurationError(f"Processor config file not found: {path}")
        logger.debug("No processor config at %s, using built-in processors", path)
        return None

    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ProcessorConfigurationError(f"Error parsing YAML from {path}: {e}") from e
    except OSError as e:
        raise ProcessorConfigurationError(f"Error reading file {path}: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ProcessorConfigurationError(f"{path} must contain a mapping, got {type(raw).__name__}")

    try:
        config = TekConfig(**raw)
    except ValidationError as e:
        raise ProcessorConfigurationError(f"Invalid processor config in {path}: {e}") from e

    logger.info("Loaded %d processor entries from %s", len(config.processors), path)
    return config


def load_processor_class(dotted_path: str) -> Type[BaseProcessor]:
    """Import ``module.ClassName`` and check that it is a processor."""
    module_path, class_name = dotted_path.rsplit('.', 1)

    try:
        module = importlib.import_module(module_path)
    except ImportError as import_err:
        logger.error(f"Failed to import processor module '{module_path}': {import_err}")
        raise ProcessorConfigurationError(
            f"Processor module '{module_path}' could not be imported. "
            f"Check that the module exists and is correctly specified in tek.yml. Error: {import_err}"
        ) from import_err

    try:
        processor_class = getattr(module, class_name)
    except AttributeError as attr_err:
        logger.error(f"Processor class '{class_name}' not found in module '{module_path}': {attr_err}")
        raise ProcessorConfigurationError(
            f"Processor class '{class_name}' not found in module '{module_path}'. "
            f"Check that the class name is correct in tek.yml. Error: {attr_err}"
        ) from attr_err

    if not (isinstance(processor_class, type) and issubclass(processor_class, BaseProcessor)):
        raise ProcessorConfigurationError(
            f"Processor class {module_path}.{class_name} does not inherit from BaseProcessor."
        )
    return processor_class


def build_registry(config: Optional[TekConfig] = None, context: Any = None) -> ProcessorRegistry:
    """
    Create and boot a registry.

    Args:
        config: Parsed tek.yml; None means the built-in processor list.
        context: Long-lived context handed to every processor's boot hook.

    Returns:
        A booted, read-only ProcessorRegistry.
    """
    registry = ProcessorRegistry()

    if config is None:
        classes = list(DEFAULT_PROCESSORS)
    else:
        classes = []
        for entry in config.processors:
            if not entry.enabled:
                logger.info("Skipping disabled processor %s", entry.module)
                continue
            classes.append(load_processor_class(entry.module))

    for cls in classes:
        registry.register(cls)
    registry.boot(context)

    if not len(registry):
        logger.warning("No processors registered, every file will be unclaimed")
    else:
        logger.info(f"Loaded {len(registry)} processors")
    return registry
