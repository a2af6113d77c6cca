"""
triadcalc CLI utilities.

Shared helpers for version reporting and logging setup.
"""

import logging
import platform

import typer

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_version() -> str:
    """Get triadcalc version from package metadata."""
    from triadcalc import __version__

    return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        python_version = platform.python_version()
        python_impl = platform.python_implementation()

        typer.echo(f"triadcalc {get_version()}")
        typer.echo(f"Python {python_version} ({python_impl})")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    """Send log records to stderr at ``level``."""
    logging.basicConfig(level=getattr(logging, level, logging.WARNING), format=LOG_FORMAT, force=True)
    logging.getLogger("triadcalc").setLevel(level)
