"""
Template resolution, reading and application.

A template is a directory tree whose file paths and contents may contain
{KEY} placeholders. It is read into memory as a sorted list of entries and
substituted there; nothing is written by this module.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from .errors import (
    SkeletonIOError,
    TemplateCollisionError,
    TemplateNotFoundError,
    UnsafePathError,
)
from .substitution import replacement_pairs, substitute

logger = logging.getLogger(__name__)

# Built-in templates shipped with the package
BUILTIN_TEMPLATES_DIR = Path(__file__).parent.parent / "templates"

DEFAULT_TEMPLATE = "default"

# Never read from a template nor written into a target
GIT_DIR = ".git"


@dataclass(frozen=True)
class TemplateEntry:
    """A template file: relative POSIX path and raw content."""

    path: str
    content: bytes


# =============================================================================
# Template sources
# =============================================================================


@dataclass(frozen=True)
class BuiltinTemplate:
    """A template selected by name."""

    name: str


@dataclass(frozen=True)
class PathTemplate:
    """A template given as a directory on the filesystem."""

    path: Path


TemplateSource = BuiltinTemplate | PathTemplate


def parse_template_source(value: str | Path | TemplateSource) -> TemplateSource:
    """
    Interpret a user-supplied template reference.

    Plain names (``default``) select a named template, anything that looks
    like a path (contains a separator, starts with ``.`` or ``~``) is taken
    as a directory.

    Examples:
        parse_template_source("default")  # -> BuiltinTemplate("default")
        parse_template_source("./mine")  # -> PathTemplate(Path("mine"))
    """
    if isinstance(value, (BuiltinTemplate, PathTemplate)):
        return value
    if isinstance(value, Path):
        return PathTemplate(value)
    if "/" in value or "\\" in value or value.startswith((".", "~")):
        return PathTemplate(Path(value).expanduser())
    return BuiltinTemplate(value)


def _search_dirs(extra_dirs: Sequence[Path]) -> list[Path]:
    return [*extra_dirs, BUILTIN_TEMPLATES_DIR]


def list_templates(extra_dirs: Sequence[Path] = ()) -> list[str]:
    """
    List available named templates.

    Args:
        extra_dirs: Additional directories holding named templates

    Returns:
        Sorted, de-duplicated template names
    """
    names: set[str] = set()
    for directory in _search_dirs(extra_dirs):
        if not directory.is_dir():
            continue
        for item in directory.iterdir():
            if item.is_dir() and not item.name.startswith((".", "_")):
                names.add(item.name)
    return sorted(names)


def resolve_template_dir(
    source: str | Path | TemplateSource, extra_dirs: Sequence[Path] = ()
) -> Path:
    """
    Resolve a template source to an existing directory.

    Named templates are looked up in ``extra_dirs`` first, then among the
    built-in templates.

    Raises:
        TemplateNotFoundError: If no directory matches
    """
    source = parse_template_source(source)

    if isinstance(source, PathTemplate):
        if not source.path.is_dir():
            raise TemplateNotFoundError("Could not find template directory", source.path)
        return source.path.resolve()

    for directory in _search_dirs(extra_dirs):
        candidate = directory / source.name
        if candidate.is_dir():
            return candidate.resolve()

    available = list_templates(extra_dirs)
    raise TemplateNotFoundError(
        f"Could not find built-in template '{source.name}'. "
        f"Available templates: {', '.join(available) if available else 'none'}"
    )


# =============================================================================
# Reading and applying
# =============================================================================


def read_template(source_dir: Path) -> list[TemplateEntry]:
    """
    Load every regular file under ``source_dir``.

    Anything under a ``.git`` directory, and a ``.git`` file, is skipped.

    Args:
        source_dir: Template root directory

    Returns:
        Entries sorted by relative path

    Raises:
        TemplateNotFoundError: If ``source_dir`` is not a directory
        SkeletonIOError: If a file cannot be read
    """
    source_dir = Path(source_dir)
    if not source_dir.is_dir():
        raise TemplateNotFoundError("Could not find template directory", source_dir)

    entries = []
    for src_path in source_dir.rglob("*"):
        rel = src_path.relative_to(source_dir)
        if GIT_DIR in rel.parts or not src_path.is_file():
            continue
        rel_path = rel.as_posix()
        try:
            content = src_path.read_bytes()
        except OSError as e:
            raise SkeletonIOError(f"Failed to read template file ({e.strerror})", src_path) from e
        entries.append(TemplateEntry(rel_path, content))

    entries.sort(key=lambda entry: entry.path)
    logger.debug("Read %d template files from %s", len(entries), source_dir)
    return entries


def _substitute_content(content: bytes, pairs: list[tuple[str, str]]) -> bytes:
    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError:
        # Binary asset, copied as is
        return content
    return substitute(text, pairs).encode("utf-8")


def _check_relative(path: str, source: str) -> None:
    segments = [s for s in re.split(r"[\\/]", path) if s not in ("", ".")]
    if path.startswith(("/", "\\")) or re.match(r"[A-Za-z]:", path):
        raise UnsafePathError(f"Template file '{source}' maps to an absolute path", path)
    if ".." in segments:
        raise UnsafePathError(f"Template file '{source}' maps outside the target", path)
    if GIT_DIR in segments:
        raise UnsafePathError(f"Template file '{source}' maps into the git directory", path)


def apply_template(
    template: Sequence[TemplateEntry], table: Mapping[str, str]
) -> list[TemplateEntry]:
    """
    Substitute placeholders in the paths and contents of a template.

    Args:
        template: Entries from :func:`read_template`
        table: Placeholder table, substituted in insertion order

    Returns:
        Applied entries sorted by substituted path

    Raises:
        TemplateCollisionError: If two entries end up with the same path
        UnsafePathError: If a path is absolute, leaves the target or enters .git
    """
    pairs = replacement_pairs(table)
    applied: dict[str, TemplateEntry] = {}
    sources: dict[str, str] = {}

    for entry in template:
        path = substitute(entry.path, pairs)
        _check_relative(path, entry.path)
        if path in applied:
            raise TemplateCollisionError(
                f"Template files '{sources[path]}' and '{entry.path}' "
                f"both map to the same path",
                path,
            )
        applied[path] = TemplateEntry(path, _substitute_content(entry.content, pairs))
        sources[path] = entry.path

    return [applied[path] for path in sorted(applied)]
