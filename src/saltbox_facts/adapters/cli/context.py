"""Click context helpers: typed CLI state and traceback flag management."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from saltbox_facts.composition import AppServices

TracebackState = tuple[bool, bool]
"""Captured traceback configuration: (traceback_enabled, force_color)."""


@dataclass(frozen=True, slots=True)
class CLIContext:
    """State the root group hands down to every subcommand.

    ``set_overrides`` is kept so subcommands that reload configuration for
    another profile can reapply the root-level ``--set`` values.
    """

    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the CLIContext stored by the root group.

    Raises:
        RuntimeError: If the root group did not run first.

    Example:
        >>> from unittest.mock import MagicMock
        >>> ctx = MagicMock()
        >>> ctx.obj = CLIContext(config=MagicMock(), services=MagicMock())
        >>> get_cli_context(ctx).profile is None
        True
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized; the root group must run first.")
    return ctx.obj


def apply_traceback_preferences(enabled: bool) -> None:
    """Mirror ``--traceback`` into lib_cli_exit_tools (tracebacks and colour)."""
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    """Capture the current traceback flags for :func:`restore_traceback_state`.

    Example:
        >>> state = snapshot_traceback_state()
        >>> len(state)
        2
    """
    return (
        bool(getattr(lib_cli_exit_tools.config, "traceback", False)),
        bool(getattr(lib_cli_exit_tools.config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Reapply flags captured by :func:`snapshot_traceback_state`."""
    lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = state


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
]
