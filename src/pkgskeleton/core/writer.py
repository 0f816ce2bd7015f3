"""
Writing reconciled template files to the destination.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .errors import SkeletonIOError
from .reconcile import Reconciliation
from .template import TemplateEntry

logger = logging.getLogger(__name__)


@dataclass
class WriteReport:
    """
    What happened to each applied file.

    Attributes:
        unchanged: Already had the template content, not written
        skipped_dirty: Uncommitted local changes, left untouched
        overwritten_dirty: Uncommitted local changes, overwritten on request
        written: Missing or committed files, written
    """

    unchanged: list[str] = field(default_factory=list)
    skipped_dirty: list[str] = field(default_factory=list)
    overwritten_dirty: list[str] = field(default_factory=list)
    written: list[str] = field(default_factory=list)

    @property
    def files_written(self) -> int:
        return len(self.overwritten_dirty) + len(self.written)


def _write(target_dir: Path, entry: TemplateEntry) -> None:
    dest = target_dir / entry.path
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_bytes(entry.content)
    except OSError as e:
        raise SkeletonIOError(f"Failed to write file ({e.strerror})", dest) from e
    logger.debug("Wrote %s", dest)


def execute(
    target_dir: Path,
    reconciliation: Reconciliation,
    overwrite_uncommitted: bool = False,
) -> WriteReport:
    """
    Write the dirty (on request) and clean buckets to ``target_dir``.

    Files are replaced whole. A failed write stops the run, files written
    before it stay written.

    Args:
        target_dir: Destination directory
        reconciliation: Result of :func:`~pkgskeleton.core.reconcile.reconcile`
        overwrite_uncommitted: Also overwrite files with uncommitted changes

    Returns:
        WriteReport

    Raises:
        SkeletonIOError: If a write fails
    """
    report = WriteReport()
    report.unchanged.extend(entry.path for entry in reconciliation.same)

    for entry in reconciliation.dirty:
        if overwrite_uncommitted:
            _write(target_dir, entry)
            report.overwritten_dirty.append(entry.path)
        else:
            report.skipped_dirty.append(entry.path)

    for entry in reconciliation.clean:
        _write(target_dir, entry)
        report.written.append(entry.path)

    logger.info("Wrote %d files to %s", report.files_written, target_dir)
    return report
