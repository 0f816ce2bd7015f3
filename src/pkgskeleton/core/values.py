"""
Placeholder values.

Builds the placeholder table from explicit overrides, configured defaults and
the environment (git configuration, a fresh UUID, the current year). The
template engine itself only ever sees the finished table.
"""

from __future__ import annotations

import datetime
import logging
import os
import uuid
from collections.abc import Callable, Mapping
from typing import Protocol

from .errors import MissingValueError
from .git import GitConfig
from .naming import name_from_path

logger = logging.getLogger(__name__)


class ValueLookup(Protocol):
    """Source of externally configured values, e.g. git config."""

    def get(self, option: str) -> str | None: ...


# Placeholders read from git configuration: key -> (option, purpose)
GIT_OPTIONS = {
    "GHUSER": ("github.user", "GitHub user name, used in repository URLs"),
    "USERNAME": ("user.name", "author name, used in the license and package metadata"),
    "USEREMAIL": ("user.email", "author e-mail, used in package metadata"),
}

# Substitution order of the standard placeholders
STANDARD_KEYS = ("UUID", "PKGNAME", "GHUSER", "USERNAME", "USEREMAIL", "YEAR")


def _git_value(key: str, lookup: ValueLookup) -> str:
    option, purpose = GIT_OPTIONS[key]
    value = lookup.get(option)
    if value is None:
        raise MissingValueError(key, option, purpose)
    return value


def fill_replacement_values(
    overrides: Mapping[str, object] | None = None,
    *,
    dest_dir: str | os.PathLike[str],
    defaults: Mapping[str, str] | None = None,
    lookup: ValueLookup | None = None,
) -> dict[str, str]:
    """
    Resolve the placeholder table.

    Precedence per key: ``overrides``, then ``defaults`` (configuration
    file), then the environment. A key that is given explicitly is never
    looked up, so a missing git option only matters when it is needed.
    Extra keys in ``overrides`` or ``defaults`` are passed through.

    Args:
        overrides: Explicit values, converted with ``str``
        dest_dir: Destination path, the package name is derived from it
        defaults: Configured default values
        lookup: Git configuration reader (default: :class:`GitConfig`)

    Returns:
        Placeholder table, standard keys first

    Raises:
        MissingValueError: If a git option is needed but not set
        InvalidNameError: If the package name cannot be derived
    """
    given = {key: str(value) for key, value in (defaults or {}).items()}
    given.update({key: str(value) for key, value in (overrides or {}).items()})
    lookup = lookup or GitConfig()

    resolvers: dict[str, Callable[[], str]] = {
        "UUID": lambda: str(uuid.uuid4()),
        "PKGNAME": lambda: name_from_path(dest_dir),
        "GHUSER": lambda: _git_value("GHUSER", lookup),
        "USERNAME": lambda: _git_value("USERNAME", lookup),
        "USEREMAIL": lambda: _git_value("USEREMAIL", lookup),
        "YEAR": lambda: str(datetime.date.today().year),
    }

    table: dict[str, str] = {}
    for key in STANDARD_KEYS:
        if key in given:
            table[key] = given[key]
        else:
            table[key] = resolvers[key]()
            logger.debug("Resolved {%s} = %r", key, table[key])

    for key, value in given.items():
        table.setdefault(key, value)

    return table
