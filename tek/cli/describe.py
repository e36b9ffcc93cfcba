"""CLI commands for inspecting the processor registry."""
import logging
from pathlib import Path
from typing import Optional

import typer

from . import app
from ..config import get_settings
from ..exceptions import ConfigurationError
from ..processor_loader import build_registry, load_config

logger = logging.getLogger(__name__)


def _registry(config: Optional[Path]):
    settings = get_settings()
    try:
        tek_config = load_config(config or settings.TEK_CONFIG_FILE, required=config is not None)
        return build_registry(tek_config, context=settings)
    except ConfigurationError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(1)


@app.command("processors")
def processors(
    config: Optional[Path] = typer.Option(None, "--config", help="Processor configuration file (tek.yml)"),
):
    """List registered processors in dispatch order."""
    registry = _registry(config)
    for position, cls in enumerate(registry, start=1):
        typer.echo(f"{position}. {cls.__name__} ({cls.NAME})")
    registry.teardown()


@app.command("claim")
def claim(
    filename: str = typer.Argument(..., help="Filename to dispatch"),
    config: Optional[Path] = typer.Option(None, "--config", help="Processor configuration file (tek.yml)"),
):
    """Show which processor claims FILENAME."""
    registry = _registry(config)
    try:
        result = registry.dispatch(filename)
    finally:
        registry.teardown()

    if result is None:
        typer.echo(f"{filename}: unclaimed")
        raise typer.Exit(1)
    typer.echo(f"{filename}: {result!r}")
