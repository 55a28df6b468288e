"""CLI package providing the command-line interface.

Public facade for the CLI subsystem; consumers import from here and stay
insulated from the internal module layout.
"""

from __future__ import annotations

from .commands import cli_collect, cli_config, cli_info, cli_release_plan
from .constants import CLICK_CONTEXT_SETTINGS, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    TracebackState,
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)
from .main import main
from .root import cli

__all__ = [
    # Constants
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    # Traceback management
    "TracebackState",
    "apply_traceback_preferences",
    "restore_traceback_state",
    "snapshot_traceback_state",
    # Root command
    "cli",
    # Entry point
    "main",
    # Commands
    "cli_collect",
    "cli_config",
    "cli_info",
    "cli_release_plan",
]
