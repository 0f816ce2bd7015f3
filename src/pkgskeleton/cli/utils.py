"""
pkgskeleton CLI utilities.

Shared utility functions used across CLI modules.
"""

import logging
import os
import platform
import shutil
from pathlib import Path

import typer

from pkgskeleton._version import get_version

LOG_LEVEL_ENV_VAR = "PKGSKELETON_LOG_LEVEL"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        python_version = platform.python_version()
        python_impl = platform.python_implementation()

        try:
            import pkgskeleton

            install_location = Path(pkgskeleton.__file__).parent
        except Exception:
            install_location = Path.cwd()

        git_path = shutil.which("git")

        typer.echo(f"pkgskeleton version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {python_impl} {python_version}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        typer.echo(f"  Location:      {install_location}")
        typer.echo(f"  Git:           {git_path or '✗ Not found (required)'}")

        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Configure root logging from --verbose or PKGSKELETON_LOG_LEVEL."""
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.getenv(LOG_LEVEL_ENV_VAR, "WARNING").upper()
        level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def parse_assignments(assignments: list[str]) -> dict[str, str]:
    """
    Parse ``KEY=VALUE`` options into a dict.

    Raises:
        typer.BadParameter: If an item has no ``=`` or an empty key
    """
    values: dict[str, str] = {}
    for item in assignments:
        key, sep, value = item.partition("=")
        key = key.strip()
        if not sep or not key:
            raise typer.BadParameter(f"expected KEY=VALUE, got '{item}'", param_hint="--set")
        values[key] = value
    return values
