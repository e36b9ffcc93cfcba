"""CLI commands for the tek package."""
import typer

app = typer.Typer(add_completion=False, pretty_exceptions_show_locals=False)

__all__ = ["app"]
