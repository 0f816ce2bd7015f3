"""
pkgskeleton - generate and update package skeletons from templates.

Templates are directory trees with {KEY} placeholders in file names and
contents. Existing files with uncommitted changes are never overwritten
unless asked to.
"""

from __future__ import annotations

from ._version import get_version
from .core import (
    GenerationResult,
    MissingValueError,
    SkeletonError,
    generate,
    name_from_path,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "generate",
    "GenerationResult",
    "name_from_path",
    "SkeletonError",
    "MissingValueError",
]
