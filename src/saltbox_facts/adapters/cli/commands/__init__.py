"""CLI command implementations, re-exported for registration on the root group.

Contents:
    * Fact collection from :mod:`.collect`
    * Configuration display from :mod:`.config`
    * Package metadata from :mod:`.info`
    * Release plan from :mod:`.release`
"""

from __future__ import annotations

from .collect import cli_collect, emit_facts
from .config import cli_config
from .info import cli_info
from .release import cli_release_plan

__all__ = [
    "cli_collect",
    "cli_config",
    "cli_info",
    "cli_release_plan",
    "emit_facts",
]
