"""Fact collection command.

The root group runs :func:`emit_facts` when invoked without a subcommand,
which is how Ansible executes a local fact script; ``collect`` exposes the
same behaviour with formatting options.

Contents:
    * :func:`cli_collect` - Collect host facts and print them as JSON.
    * :func:`emit_facts` - Shared collection and error translation.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from saltbox_facts import __init__conf__
from saltbox_facts.adapters.config.settings import load_facts_settings
from saltbox_facts.adapters.output.render import render_facts
from saltbox_facts.application.collect import collect_facts
from saltbox_facts.domain.errors import ConfigurationError, FactSourceError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def emit_facts(cli_ctx: CLIContext, *, pretty: bool = False) -> None:
    """Collect facts with the context's services and print the JSON document.

    Raises:
        SystemExit: ``CONFIG_ERROR`` for invalid settings, or the code
            matching the I/O failure when an account database is unreadable.
    """
    try:
        settings = load_facts_settings(cli_ctx.config)
    except ConfigurationError as exc:
        logger.error("Invalid fact collection settings", extra={"error": str(exc)})
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc

    try:
        report = collect_facts(settings, cli_ctx.services, version=__init__conf__.version)
    except FactSourceError as exc:
        logger.error("Fact collection failed", extra={"path": str(exc.path), "error": str(exc.cause)})
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.for_os_error(exc.cause)) from exc

    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()
    click.echo(render_facts(report, pretty=pretty))


@click.command("collect", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--pretty", is_flag=True, default=False, help="Indent the JSON output for reading")
@click.pass_context
def cli_collect(ctx: click.Context, pretty: bool) -> None:
    """Collect host facts and print them as one JSON document.

    Public IPv4 (and IPv6 when the host has a global address), local groups
    and users, and the system timezone. Keys are sorted at every level.
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-collect", extra={"command": "collect", "pretty": pretty}):
        logger.info("Collecting facts")
        emit_facts(cli_ctx, pretty=pretty)


__all__ = ["cli_collect", "emit_facts"]
