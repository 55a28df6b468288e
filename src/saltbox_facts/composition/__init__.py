"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config

# Logging services
from ..adapters.logging.setup import init_logging

# Fact sources
from ..adapters.network.public_ip import resolve_public_ip
from ..adapters.system.accounts import read_groups, read_users
from ..adapters.system.network import probe_ipv6
from ..adapters.system.timezone import detect_timezone

# Static conformance assertions: the type checker verifies that each adapter
# function structurally satisfies its Protocol.
if TYPE_CHECKING:
    from ..adapters.memory.host import FakeHost
    from ..application.ports import (
        DetectTimezone,
        DisplayConfig,
        GetConfig,
        InitLogging,
        ProbeIpv6,
        ReadGroups,
        ReadUsers,
        ResolvePublicIp,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_read_groups: ReadGroups = read_groups
    _assert_read_users: ReadUsers = read_users
    _assert_probe_ipv6: ProbeIpv6 = probe_ipv6
    _assert_detect_timezone: DetectTimezone = detect_timezone
    _assert_resolve_public_ip: ResolvePublicIp = resolve_public_ip


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging
    read_groups: ReadGroups
    read_users: ReadUsers
    probe_ipv6: ProbeIpv6
    detect_timezone: DetectTimezone
    resolve_public_ip: ResolvePublicIp


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        init_logging=init_logging,
        read_groups=read_groups,
        read_users=read_users,
        probe_ipv6=probe_ipv6,
        detect_timezone=detect_timezone,
        resolve_public_ip=resolve_public_ip,
    )


def build_testing(*, host: FakeHost | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        host: Optional FakeHost with canned facts. A default one (no IPv6,
            documentation-range IPv4, empty account databases) is created
            when None; pass your own to assert on recorded lookups.
    """
    from ..adapters.memory import (
        FakeHost,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    fake_host = host if host is not None else FakeHost()

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        read_groups=fake_host.read_groups,
        read_users=fake_host.read_users,
        probe_ipv6=fake_host.probe_ipv6,
        detect_timezone=fake_host.detect_timezone,
        resolve_public_ip=fake_host.resolve_public_ip,
    )


__all__ = [
    # Configuration
    "get_config",
    "display_config",
    # Logging
    "init_logging",
    # Fact sources
    "read_groups",
    "read_users",
    "probe_ipv6",
    "detect_timezone",
    "resolve_public_ip",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
