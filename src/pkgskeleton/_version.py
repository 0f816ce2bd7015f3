"""Installed version of pkgskeleton."""

from importlib.metadata import PackageNotFoundError, version

# Reported when running from a source tree that was never installed
UNKNOWN_VERSION = "0.0.0+unknown"


def get_version(distribution: str = "pkgskeleton") -> str:
    """Return the version recorded in the installed distribution metadata."""
    try:
        return version(distribution)
    except PackageNotFoundError:
        return UNKNOWN_VERSION
