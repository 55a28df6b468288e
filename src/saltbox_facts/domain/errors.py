"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

from pathlib import Path


class ConfigurationError(Exception):
    """Missing, invalid, or inconsistent configuration.

    Raised when the ``[saltbox_facts]`` section cannot be turned into valid
    settings (negative timeout, non-list endpoint values, ...). Caught at the
    CLI boundary and reported with ``ExitCode.CONFIG_ERROR``.

    Example:
        >>> from saltbox_facts.domain.errors import ConfigurationError
        >>> err = ConfigurationError("timeout_seconds must be positive")
        >>> str(err)
        'timeout_seconds must be positive'
    """


class FactSourceError(Exception):
    """A mandatory fact source could not be read.

    Wraps the underlying ``OSError`` or ``UnicodeDecodeError`` raised while
    reading an account database so the CLI can name the offending file and
    choose an exit code from the original cause.

    Attributes:
        path: File that failed to load.
        cause: Original exception.

    Example:
        >>> from pathlib import Path
        >>> err = FactSourceError(Path("/etc/group"), FileNotFoundError(2, "No such file or directory"))
        >>> str(err)
        'Cannot read /etc/group: [Errno 2] No such file or directory'
        >>> isinstance(err.cause, FileNotFoundError)
        True
    """

    def __init__(self, path: Path, cause: Exception) -> None:
        super().__init__(f"Cannot read {path}: {cause}")
        self.path = path
        self.cause = cause


__all__ = [
    "ConfigurationError",
    "FactSourceError",
]
