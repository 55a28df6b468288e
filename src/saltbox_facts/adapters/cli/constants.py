"""Shared CLI constants.

Contents:
    * :data:`CLICK_CONTEXT_SETTINGS` - Shared Click settings for help display.
    * :data:`TRACEBACK_SUMMARY_LIMIT` - Character budget for truncated tracebacks.
    * :data:`TRACEBACK_VERBOSE_LIMIT` - Character budget for verbose tracebacks.
    * :data:`GITHUB_REF_ENV` / :data:`GITHUB_EVENT_ENV` - CI variables read by ``release-plan``.
"""

from __future__ import annotations

from typing import Final

#: Shared Click context flags so help output stays consistent across commands.
CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

#: Character budget used when printing truncated tracebacks.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500

#: Character budget used when verbose tracebacks are enabled.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

#: Environment variables GitHub Actions sets for the triggering ref and event.
GITHUB_REF_ENV: Final[str] = "GITHUB_REF"
GITHUB_EVENT_ENV: Final[str] = "GITHUB_EVENT_NAME"

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "GITHUB_EVENT_ENV",
    "GITHUB_REF_ENV",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]
