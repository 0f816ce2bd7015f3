"""
Rich console output for the pkgskeleton CLI.

Provides styled status lines and the per-bucket generation report.
"""

from rich.console import Console
from rich.style import Style
from rich.text import Text

from pkgskeleton.core.writer import WriteReport

console = Console()
err_console = Console(stderr=True)


# Style definitions
STYLES = {
    "title": Style(color="bright_cyan", bold=True),
    "subtitle": Style(color="bright_black"),
    "success": Style(color="green", bold=True),
    "error": Style(color="red", bold=True),
    "warning": Style(color="yellow"),
    "info": Style(color="cyan"),
    "muted": Style(color="bright_black"),
    "path": Style(color="white"),
}


def print_header(title: str, subtitle: str = "") -> None:
    """Print a styled header."""
    console.print()
    console.print(Text(title, style=STYLES["title"]))
    if subtitle:
        console.print(Text(subtitle, style=STYLES["subtitle"]))


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(Text(f"✓ {message}", style=STYLES["success"]))


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(Text(f"✗ {message}", style=STYLES["error"]))


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(Text(f"⚠ {message}", style=STYLES["warning"]))


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(Text(f"ℹ {message}", style=STYLES["info"]))


def _print_paths(paths: list[str], style: Style) -> None:
    for path in paths:
        console.print(Text(f"  {path}", style=style))


def print_report(report: WriteReport) -> None:
    """
    Print what happened to each template file, grouped by outcome.

    Empty groups are omitted.
    """
    if report.unchanged:
        print_header("Unchanged (already up to date):")
        _print_paths(report.unchanged, STYLES["muted"])

    if report.skipped_dirty:
        print_header("Skipped (uncommitted local changes):")
        _print_paths(report.skipped_dirty, STYLES["warning"])

    if report.overwritten_dirty:
        print_header("Overwritten (uncommitted local changes):")
        _print_paths(report.overwritten_dirty, STYLES["warning"])

    if report.written:
        print_header("Written:")
        _print_paths(report.written, STYLES["path"])

    console.print()
    if report.skipped_dirty:
        print_warning(
            f"{len(report.skipped_dirty)} file(s) with uncommitted changes were not "
            "overwritten. Commit or stash them, or use --overwrite-uncommitted."
        )
