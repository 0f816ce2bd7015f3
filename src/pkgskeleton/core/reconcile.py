"""
Classification of applied template files against the destination.

Every applied entry lands in exactly one bucket:

- same: the file on disk already has this content
- dirty: the file differs and has changes git does not have committed
- clean: the file is missing, or differs but is committed (recoverable)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .errors import NotAFileError, SkeletonIOError
from .git import WorkingTreeStatus, working_tree_status
from .template import TemplateEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Reconciliation:
    """Applied template entries partitioned into buckets, in template order."""

    same: tuple[TemplateEntry, ...] = ()
    dirty: tuple[TemplateEntry, ...] = ()
    clean: tuple[TemplateEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.same) + len(self.dirty) + len(self.clean)


def _read_existing(target_dir: Path, rel_path: str) -> bytes | None:
    """
    Return the content of an existing regular file, None if absent.

    Every parent between ``target_dir`` and the file must be a directory or
    missing.
    """
    path = target_dir / rel_path
    parent = target_dir
    for part in Path(rel_path).parts[:-1]:
        parent = parent / part
        if parent.is_symlink() or (parent.exists() and not parent.is_dir()):
            raise NotAFileError("Refusing to write below a path that is not a directory", parent)
        if not parent.exists():
            break
    if path.is_symlink() or (path.exists() and not path.is_file()):
        raise NotAFileError("Refusing to replace a path that is not a regular file", path)
    if not path.exists():
        return None
    try:
        return path.read_bytes()
    except OSError as e:
        raise SkeletonIOError(f"Failed to read existing file ({e.strerror})", path) from e


def reconcile(
    target_dir: Path,
    applied: Sequence[TemplateEntry],
    status: WorkingTreeStatus | None = None,
) -> Reconciliation:
    """
    Classify applied entries against ``target_dir``.

    Identity is checked before git status, so a file that already has the
    template content is never reported dirty.

    Args:
        target_dir: Top level of a git working tree
        applied: Entries from :func:`~pkgskeleton.core.template.apply_template`
        status: Working tree status; read from git when omitted

    Returns:
        Reconciliation with same, dirty and clean buckets

    Raises:
        NotARepositoryError: If ``target_dir`` is not a working tree
        NotAFileError: If a destination path exists but is not a regular file,
            or one of its parents is not a directory
    """
    if status is None:
        status = working_tree_status(target_dir)

    same: list[TemplateEntry] = []
    dirty: list[TemplateEntry] = []
    clean: list[TemplateEntry] = []

    for entry in applied:
        existing = _read_existing(target_dir, entry.path)
        if existing is None:
            clean.append(entry)
        elif existing == entry.content:
            same.append(entry)
        elif status.is_dirty(entry.path):
            dirty.append(entry)
        else:
            clean.append(entry)

    logger.debug(
        "Reconciled %d files: %d same, %d dirty, %d clean",
        len(applied),
        len(same),
        len(dirty),
        len(clean),
    )
    return Reconciliation(tuple(same), tuple(dirty), tuple(clean))
