"""Application layer - use cases and port definitions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
    * :mod:`.collect` - Fact collection use case
"""

from __future__ import annotations

from .collect import FactSources, collect_facts, collect_facts_async, gather_ip_facts
from .ports import (
    DetectTimezone,
    DisplayConfig,
    GetConfig,
    InitLogging,
    ProbeIpv6,
    ReadGroups,
    ReadUsers,
    ResolvePublicIp,
)

__all__ = [
    # Use cases
    "FactSources",
    "collect_facts",
    "collect_facts_async",
    "gather_ip_facts",
    # Ports
    "DetectTimezone",
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "ProbeIpv6",
    "ReadGroups",
    "ReadUsers",
    "ResolvePublicIp",
]
