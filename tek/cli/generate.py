"""CLI command for generating a Makefile from a list of filenames."""
import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer

from . import app
from ..config import configure_logging, get_settings
from ..exceptions import ConfigurationError, UnclaimedFileError
from ..makefile import Makefile
from ..processor_loader import build_registry, load_config
from ..processor_runner import ProcessorRunner

logger = logging.getLogger(__name__)


def read_filenames(files: Optional[List[str]]) -> List[str]:
    """Filenames from the arguments, or one per line from stdin when none were given."""
    if files:
        return list(files)
    return [line.strip() for line in sys.stdin if line.strip()]


@app.command("makefile")
def makefile(
    files: Optional[List[str]] = typer.Argument(None, help="Files to build rules for (default: read from stdin)"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Makefile to write, '-' for stdout"),
    config: Optional[Path] = typer.Option(None, "--config", help="Processor configuration file (tek.yml)"),
    verbose: Optional[bool] = typer.Option(None, "--verbose/--quiet", help="Echo full commands instead of progress labels"),
    strict: bool = typer.Option(False, "--strict", help="Fail when a file is not claimed by any processor"),
    log_level: Optional[str] = typer.Option(None, help="Logging level (DEBUG, INFO, WARNING, ERROR)"),
):
    """Generate Makefile rules for every claimed file."""
    settings = get_settings()
    configure_logging(log_level or settings.TEK_LOG_LEVEL)

    try:
        tek_config = load_config(config or settings.TEK_CONFIG_FILE, required=config is not None)
        registry = build_registry(tek_config, context=settings)
    except ConfigurationError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(1)

    sink = Makefile(verbose=settings.TEK_VERBOSE if verbose is None else verbose)
    runner = ProcessorRunner(registry, sink, strict=strict)

    try:
        results = runner.run_all(read_filenames(files))
    except UnclaimedFileError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)
    finally:
        registry.teardown()

    destination = output or str(settings.TEK_OUTPUT)
    if destination == "-":
        typer.echo(sink.render(), nl=False)
    else:
        sink.write(Path(destination))
        typer.echo(f"Wrote {len(sink)} targets for {sum(1 for r in results if r.emitted)} files to {destination}")
