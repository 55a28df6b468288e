"""Root CLI command group and global option handling.

Contents:
    * :func:`cli` - Root command group with global options.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from saltbox_facts import __init__conf__
from saltbox_facts.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext, apply_traceback_preferences

if TYPE_CHECKING:
    from saltbox_facts.composition import AppServices


def _apply_cli_overrides(config: Config, set_overrides: tuple[str, ...]) -> Config:
    """Apply ``--set`` overrides, turning malformed ones into a UsageError."""
    try:
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'production', 'test')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Load configuration, start logging, and collect facts when no subcommand is given.

    Ansible runs local fact scripts without arguments, so the bare command
    prints the facts document rather than help.
    """
    # ctx.obj is always the services factory (production or test)
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = services.get_config(profile=profile)
    config = _apply_cli_overrides(config, set_overrides)
    services.init_logging(config)
    cli_ctx = CLIContext(config=config, services=services, profile=profile, set_overrides=set_overrides)
    # Subcommands read the resolved CLIContext instead of the services factory.
    ctx.obj = cli_ctx
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        from .commands import emit_facts

        emit_facts(cli_ctx)


# Deferred import: command modules import from package ancestors that import this module.
def _register_commands() -> None:
    from .commands import cli_collect, cli_config, cli_info, cli_release_plan

    for cmd in (cli_collect, cli_config, cli_info, cli_release_plan):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
