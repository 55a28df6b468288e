"""POSIX-conventional exit codes for CLI error paths.

Signals are translated into exit codes by lib_cli_exit_tools itself.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes following sysexits.h and errno conventions.

    Example:
        >>> int(ExitCode.FILE_NOT_FOUND)
        2
        >>> ExitCode.CONFIG_ERROR
        <ExitCode.CONFIG_ERROR: 78>
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    FILE_NOT_FOUND = 2
    PERMISSION_DENIED = 13
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78

    @classmethod
    def for_os_error(cls, exc: BaseException) -> ExitCode:
        """Pick the exit code matching the cause of a failed file read.

        Example:
            >>> ExitCode.for_os_error(PermissionError("denied"))
            <ExitCode.PERMISSION_DENIED: 13>
            >>> ExitCode.for_os_error(UnicodeDecodeError("utf-8", b"\\xff", 0, 1, "invalid start byte"))
            <ExitCode.GENERAL_ERROR: 1>
        """
        if isinstance(exc, FileNotFoundError):
            return cls.FILE_NOT_FOUND
        if isinstance(exc, PermissionError):
            return cls.PERMISSION_DENIED
        return cls.GENERAL_ERROR


__all__ = ["ExitCode"]
