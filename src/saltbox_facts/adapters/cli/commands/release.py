"""Release plan command.

Evaluates the release workflow guards for a ref/event pair and prints which
steps the run executes. Inside GitHub Actions the ref and event default to
``GITHUB_REF`` and ``GITHUB_EVENT_NAME``.

Contents:
    * :func:`cli_release_plan` - Print the release plan as JSON.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from saltbox_facts.adapters.output.render import render_document
from saltbox_facts.domain.release import plan_release

from ..constants import CLICK_CONTEXT_SETTINGS, GITHUB_EVENT_ENV, GITHUB_REF_ENV
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("release-plan", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--ref",
    envvar=GITHUB_REF_ENV,
    default=None,
    help=f"Triggering git ref, e.g. refs/tags/v1.2.0 (default: ${GITHUB_REF_ENV})",
)
@click.option(
    "--event",
    "event_name",
    envvar=GITHUB_EVENT_ENV,
    default="workflow_dispatch",
    show_default=True,
    help=f"Triggering event name (default: ${GITHUB_EVENT_ENV})",
)
@click.option("--pretty", is_flag=True, default=False, help="Indent the JSON output for reading")
def cli_release_plan(ref: str | None, event_name: str, pretty: bool) -> None:
    r"""Show which release steps run for a ref and event.

    \b
    - non-tag refs upload the build as the ``ansible-facts`` artifact
    - tag refs outside pull requests attach the build to a release
    """
    if not ref:
        click.echo(f"Error: no ref given. Pass --ref or set {GITHUB_REF_ENV}.", err=True)
        raise SystemExit(ExitCode.INVALID_ARGUMENT)

    extra = {"command": "release-plan", "ref": ref, "event_name": event_name}
    with lib_log_rich.runtime.bind(job_id="cli-release-plan", extra=extra):
        plan = plan_release(ref, event_name)
        logger.info(
            "Release plan evaluated",
            extra={"upload_artifact": plan.uploads_artifact, "publish_release": plan.publishes_release},
        )
        click.echo(render_document(plan.to_document(), pretty=pretty))


__all__ = ["cli_release_plan"]
