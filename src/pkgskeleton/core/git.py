"""
Git working tree queries.

All access goes through the git command line. The working tree is only
read, apart from :func:`init_repository` for a brand new destination.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from .errors import GitError, NotARepositoryError

logger = logging.getLogger(__name__)


def _run(argv: list[str], cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    try:
        return subprocess.run(
            argv,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError as e:
        raise GitError("git command not found, install git to continue") from e


def _check(proc: subprocess.CompletedProcess[str], cwd: Path | None = None) -> str:
    if proc.returncode != 0:
        msg = proc.stderr.strip() or proc.stdout.strip() or "command failed"
        raise GitError(f"{' '.join(proc.args)}: {msg}", cwd)
    return proc.stdout


# =============================================================================
# Repository
# =============================================================================


def is_repository(path: Path) -> bool:
    """Check whether ``path`` is the top level of a git working tree."""
    if not path.is_dir():
        return False
    proc = _run(["git", "rev-parse", "--show-toplevel"], cwd=path)
    if proc.returncode != 0:
        return False
    return Path(proc.stdout.strip()).resolve() == path.resolve()


def ensure_repository(path: Path) -> None:
    """
    Raise unless ``path`` is the top level of a git working tree.

    Raises:
        NotARepositoryError: If it is not
    """
    if not is_repository(path):
        raise NotARepositoryError("Not the top level of a git working tree", path)


def init_repository(path: Path) -> None:
    """Run ``git init`` in ``path``."""
    logger.info("Initializing git repository in %s", path)
    _check(_run(["git", "init"], cwd=path), path)


# =============================================================================
# Status
# =============================================================================


@dataclass(frozen=True)
class WorkingTreeStatus:
    """
    Paths git reports as differing from HEAD.

    Attributes:
        paths: Modified, staged, untracked or ignored files (POSIX, relative)
        directories: Whole directories reported as ignored, with trailing ``/``
    """

    paths: frozenset[str] = frozenset()
    directories: tuple[str, ...] = ()

    def is_dirty(self, path: str) -> bool:
        """Whether ``path`` has changes that are not committed."""
        if path in self.paths:
            return True
        return any(path.startswith(directory) for directory in self.directories)


def parse_porcelain(output: str) -> WorkingTreeStatus:
    """
    Parse ``git status --porcelain -z`` output.

    Records are ``XY path`` separated by NUL; renames and copies are followed
    by an extra record holding the original path, which is skipped.
    """
    paths: set[str] = set()
    directories: list[str] = []
    records = iter(output.split("\0"))
    for record in records:
        if len(record) < 4:
            continue
        code, path = record[:2], record[3:]
        if code[0] in "RC":
            next(records, None)
        if path.endswith("/"):
            directories.append(path)
        else:
            paths.add(path)
    return WorkingTreeStatus(frozenset(paths), tuple(directories))


def working_tree_status(path: Path) -> WorkingTreeStatus:
    """
    Read the status of the working tree rooted at ``path``.

    Raises:
        NotARepositoryError: If ``path`` is not the top level of a working tree
        GitError: If git fails
    """
    ensure_repository(path)
    output = _check(
        _run(
            ["git", "status", "--porcelain", "-z", "--untracked-files=all", "--ignored"],
            cwd=path,
        ),
        path,
    )
    status = parse_porcelain(output)
    logger.debug("git status in %s: %d dirty paths", path, len(status.paths))
    return status


# =============================================================================
# Configuration
# =============================================================================


class GitConfig:
    """Read values from the user's git configuration."""

    def get(self, option: str) -> str | None:
        """Return the value of ``option``, or None when it is not set."""
        proc = _run(["git", "config", "--get", option])
        if proc.returncode != 0:
            return None
        value = proc.stdout.strip()
        return value or None
