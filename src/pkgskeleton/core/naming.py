"""
Package name derivation from destination paths.
"""

from __future__ import annotations

import os
import re

from .errors import InvalidNameError

# Conventional suffix of package directories in the Julia ecosystem
PACKAGE_SUFFIX = ".jl"

_SEPARATORS_RE = re.compile(r"[\\/]+$")


def name_from_path(path: str | os.PathLike[str], suffix: str = PACKAGE_SUFFIX) -> str:
    """
    Derive a package name from the last component of a path.

    Trailing separators are ignored and a single ``suffix`` extension is
    stripped. Any other extension is rejected.

    Args:
        path: Destination path, e.g. ``/tmp/Foo.jl/``
        suffix: The one extension that may be stripped

    Returns:
        Package name

    Raises:
        InvalidNameError: If the extension is not ``suffix`` or the name is empty

    Examples:
        name_from_path("/tmp/FooBar.jl/")  # -> "FooBar"
        name_from_path("/tmp/FooBar")  # -> "FooBar"
    """
    raw = os.fspath(path)
    component = os.path.basename(_SEPARATORS_RE.sub("", raw))
    base, ext = os.path.splitext(component)
    if ext and ext != suffix:
        raise InvalidNameError(
            f"Unrecognized extension '{ext}' (only '{suffix}' is allowed)", raw
        )
    if not base:
        raise InvalidNameError("Cannot derive a package name", raw)
    return base
