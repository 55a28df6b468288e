"""In-memory adapter implementations for testing.

Lightweight implementations of the application ports that operate entirely
in memory -- no filesystem, no network, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration and logging adapters
    * :mod:`.host` - In-memory host fact sources (FakeHost class)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
    init_logging_in_memory,
)
from .host import FakeHost

# Static conformance assertions
if TYPE_CHECKING:
    from saltbox_facts.application.ports import (
        DetectTimezone,
        GetConfig,
        InitLogging,
        ProbeIpv6,
        ReadGroups,
        ReadUsers,
        ResolvePublicIp,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_read_groups: ReadGroups = FakeHost().read_groups
    _assert_read_users: ReadUsers = FakeHost().read_users
    _assert_probe_ipv6: ProbeIpv6 = FakeHost().probe_ipv6
    _assert_detect_timezone: DetectTimezone = FakeHost().detect_timezone
    _assert_resolve_public_ip: ResolvePublicIp = FakeHost().resolve_public_ip

__all__ = [
    "FakeHost",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
