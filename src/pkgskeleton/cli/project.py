"""
Project commands for pkgskeleton CLI.

- generate: Generate or update a package from a template
- templates: List available templates
"""

from __future__ import annotations

from pathlib import Path

import typer

from pkgskeleton.cli.utils import configure_logging, parse_assignments
from pkgskeleton.cli_ui import print_error, print_info, print_report, print_success
from pkgskeleton.core.config import load_config
from pkgskeleton.core.errors import SkeletonError
from pkgskeleton.core.generate import generate
from pkgskeleton.core.template import BUILTIN_TEMPLATES_DIR, list_templates


def generate_command(
    dest: str = typer.Argument(..., help="Package directory, e.g. ~/code/Foo.jl"),
    template: str | None = typer.Option(
        None, "--template", "-t", help="Template name or directory (default: 'default')"
    ),
    set_values: list[str] = typer.Option(  # noqa: B008
        [], "--set", "-s", help="Placeholder value as KEY=VALUE (repeatable)"
    ),
    overwrite_uncommitted: bool = typer.Option(
        False,
        "--overwrite-uncommitted",
        help="Also overwrite files that have uncommitted changes",
    ),
    no_git: bool = typer.Option(
        False, "--no-git", help="Fail instead of creating a git repository"
    ),
    config_path: Path | None = typer.Option(  # noqa: B008
        None, "--config", help="Configuration file"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logging"),
) -> None:
    """
    Generate or update a package skeleton.

    Placeholders like {PKGNAME} in template file names and contents are
    replaced. Values not given with --set come from the configuration file
    and git config (user.name, user.email, github.user).

    Files that already match are left alone, files with uncommitted changes
    are skipped unless --overwrite-uncommitted is given.

    Examples:
        pkgskeleton generate ~/code/Foo.jl
        pkgskeleton generate ./Bar --template ./my-template
        pkgskeleton generate ./Baz --set GHUSER=someone --set YEAR=2020
    """
    configure_logging(verbose)
    replacements = parse_assignments(set_values)

    try:
        config = load_config(config_path)
        result = generate(
            dest,
            template=template,
            replacements=replacements,
            overwrite_uncommitted=overwrite_uncommitted or None,
            git_init=False if no_git else None,
            config=config,
            progress_callback=print_info,
        )
    except SkeletonError as e:
        print_error(f"Generation failed: {e}")
        raise typer.Exit(code=1)

    print_report(result.report)
    print_success(f"{result.package_name} generated in {result.target_dir}")


def templates_command(
    config_path: Path | None = typer.Option(  # noqa: B008
        None, "--config", help="Configuration file"
    ),
) -> None:
    """
    List available templates.
    """
    try:
        config = load_config(config_path)
    except SkeletonError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    names = list_templates(config.template_dirs)
    if not names:
        typer.echo("No templates available.")
        return

    typer.echo("Available templates:\n")
    for name in names:
        marker = " (built-in)" if (BUILTIN_TEMPLATES_DIR / name).is_dir() else ""
        typer.echo(f"  {name}{marker}")
    typer.echo("\nUse: pkgskeleton generate <dir> --template <name>")
