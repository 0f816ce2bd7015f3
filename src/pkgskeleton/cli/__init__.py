"""
pkgskeleton CLI package.

- project.py: generate and templates commands
- utils.py: Shared utilities
"""

import typer

from pkgskeleton.cli.project import generate_command, templates_command
from pkgskeleton.cli.utils import version_callback

app = typer.Typer(
    help="""pkgskeleton – generate package skeletons from templates

Re-running on an existing package updates it from the template, without
touching files that have uncommitted changes.
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """pkgskeleton CLI main callback for global options."""
    pass


app.command(name="generate")(generate_command)
app.command(name="templates")(templates_command)


def main() -> None:
    """Console script entry point."""
    app()


__all__ = ["app", "main"]
