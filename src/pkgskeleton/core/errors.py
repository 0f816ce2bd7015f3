"""
Error types for pkgskeleton template application and reconciliation.
"""

from pathlib import Path


class SkeletonError(Exception):
    """Base exception for all pkgskeleton errors."""

    def __init__(self, message: str, path: Path | str | None = None):
        self.message = message
        self.path = path
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the offending path if available."""
        if self.path is not None:
            return f"{self.message}: {self.path}"
        return self.message


class InvalidNameError(SkeletonError):
    """
    Raised when a package name cannot be derived from a path.

    Examples:
    - Unrecognized file extension (``Foo.bin``)
    - Empty final path component
    """

    pass


class InvalidTargetError(SkeletonError):
    """Raised when the destination exists but is a regular file."""

    pass


class TemplateNotFoundError(SkeletonError):
    """
    Raised when a template source does not resolve to a directory.

    Examples:
    - Unknown built-in template name
    - Path that does not exist or is a file
    """

    pass


class TemplateCollisionError(SkeletonError):
    """Raised when two template files map to the same path after substitution."""

    pass


class UnsafePathError(SkeletonError):
    """
    Raised when a substituted template path would land outside the target.

    Examples:
    - An absolute path, or one with a ``..`` segment
    - A path inside the target's ``.git`` directory
    """

    pass


class SkeletonIOError(SkeletonError):
    """Raised when reading a template file or writing a target file fails."""

    pass


class NotARepositoryError(SkeletonError):
    """Raised when the target directory is not the top level of a git working tree."""

    pass


class NotAFileError(SkeletonError):
    """
    Raised when a target path expected to be a file is something else.

    Examples:
    - A directory where the template has a file
    - A symlink in place of a regular file
    """

    pass


class GitError(SkeletonError):
    """Raised when the git executable is missing or a git command fails."""

    pass


class ConfigError(SkeletonError):
    """Raised when the configuration file cannot be read or validated."""

    pass


class MissingValueError(SkeletonError):
    """
    Raised when a placeholder default cannot be resolved.

    Carries the placeholder key, the external option it is read from and a
    hint on how to supply it, so the message is actionable on its own.
    """

    def __init__(self, key: str, option: str, purpose: str):
        self.key = key
        self.option = option
        self.purpose = purpose
        message = (
            f"Could not determine a value for {{{key}}} ({purpose}). "
            f"Set it with `git config --global {option} <value>`, "
            f"or pass it explicitly, e.g. `--set {key}=<value>`."
        )
        super().__init__(message)
