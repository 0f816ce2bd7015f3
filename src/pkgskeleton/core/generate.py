"""
Main package generation logic.

Resolves placeholder values and the template, then applies the template to
the destination working tree:

    read -> substitute -> reconcile -> write
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path

from .config import SkeletonConfig
from .errors import InvalidTargetError, NotARepositoryError, SkeletonIOError
from .git import init_repository, is_repository
from .reconcile import Reconciliation, reconcile
from .template import TemplateSource, apply_template, read_template, resolve_template_dir
from .values import ValueLookup, fill_replacement_values
from .writer import WriteReport, execute

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of :func:`generate`."""

    target_dir: Path
    package_name: str
    template_dir: Path
    values: dict[str, str]
    reconciliation: Reconciliation
    report: WriteReport


def generate(
    dest_dir: str | os.PathLike[str],
    *,
    template: str | Path | TemplateSource | None = None,
    replacements: Mapping[str, object] | None = None,
    overwrite_uncommitted: bool | None = None,
    git_init: bool | None = None,
    config: SkeletonConfig | None = None,
    lookup: ValueLookup | None = None,
    progress_callback: Callable[[str], None] | None = None,
) -> GenerationResult:
    """
    Generate or update a package skeleton in ``dest_dir``.

    Files with uncommitted changes are left alone unless
    ``overwrite_uncommitted`` is set. Arguments left as None fall back to the
    configuration.

    Args:
        dest_dir: Destination directory, its name is the default package name
        template: Template name or directory
        replacements: Explicit placeholder values
        overwrite_uncommitted: Overwrite files with uncommitted changes
        git_init: Create a git repository when ``dest_dir`` is not one
        config: Configuration (defaults when omitted)
        lookup: Git configuration reader, for placeholder defaults
        progress_callback: Optional callback for progress messages

    Returns:
        GenerationResult

    Raises:
        SkeletonError: On any failure, nothing is rolled back
    """

    def log(msg: str) -> None:
        """Log progress message, and pass it to the callback if provided."""
        logger.info(msg)
        if progress_callback:
            progress_callback(msg)

    config = config or SkeletonConfig()
    if template is None:
        template = config.template
    if overwrite_uncommitted is None:
        overwrite_uncommitted = config.overwrite_uncommitted
    if git_init is None:
        git_init = config.git_init

    target = Path(dest_dir).expanduser().resolve()
    if target.exists() and not target.is_dir():
        raise InvalidTargetError("Destination is a file", target)

    log("Getting template values...")
    values = fill_replacement_values(
        replacements, dest_dir=target, defaults=config.values, lookup=lookup
    )
    package_name = values["PKGNAME"]
    log(f"  Package name: {package_name}")

    template_dir = resolve_template_dir(template, config.template_dirs)
    log(f"Applying template {template_dir}...")
    applied = apply_template(read_template(template_dir), values)

    if not is_repository(target):
        if not git_init:
            raise NotARepositoryError(
                "Not the top level of a git working tree (enable git_init to create one)",
                target,
            )
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise SkeletonIOError(f"Failed to create directory ({e.strerror})", target) from e
        init_repository(target)
        log("  Git repository initialized")

    log("Reconciling with the working tree...")
    reconciliation = reconcile(target, applied)

    report = execute(target, reconciliation, overwrite_uncommitted=overwrite_uncommitted)
    log(f"Generated {package_name} in {target}")

    return GenerationResult(
        target_dir=target,
        package_name=package_name,
        template_dir=template_dir,
        values=values,
        reconciliation=reconciliation,
        report=report,
    )
