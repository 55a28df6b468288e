"""Fact collection use case.

Runs the public IP lookups on the event loop while the blocking file readers
run in worker threads, then assembles one :class:`FactsReport`.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import IpFamily
from ..domain.models import FactsReport, IpFacts, IpLookupResult

if TYPE_CHECKING:
    from ..adapters.config.settings import FactsSettings
    from .ports import DetectTimezone, ProbeIpv6, ReadGroups, ReadUsers, ResolvePublicIp

logger = logging.getLogger(__name__)


class FactSources(Protocol):
    """The adapter functions fact collection depends on.

    ``AppServices`` from the composition root satisfies this structurally.
    """

    @property
    def read_groups(self) -> ReadGroups: ...
    @property
    def read_users(self) -> ReadUsers: ...
    @property
    def probe_ipv6(self) -> ProbeIpv6: ...
    @property
    def detect_timezone(self) -> DetectTimezone: ...
    @property
    def resolve_public_ip(self) -> ResolvePublicIp: ...


async def gather_ip_facts(settings: FactsSettings, sources: FactSources) -> IpFacts:
    """Look up the public IPv4 address, and IPv6 alongside it when the host has one.

    Without a global IPv6 address the IPv6 lookup is skipped entirely and
    reported as failed with no error.
    """
    probe = sources.probe_ipv6(settings.if_inet6_file)
    ipv4_lookup = sources.resolve_public_ip(settings.ipv4_urls, IpFamily.V4, settings.timeout_seconds)
    if probe.present:
        ipv6_lookup = sources.resolve_public_ip(settings.ipv6_urls, IpFamily.V6, settings.timeout_seconds)
        ipv4, ipv6 = await asyncio.gather(ipv4_lookup, ipv6_lookup)
    else:
        ipv4 = await ipv4_lookup
        ipv6 = IpLookupResult.skipped()
    return IpFacts(ipv4=ipv4, ipv6=ipv6, ipv6_check_error=probe.error)


async def collect_facts_async(settings: FactsSettings, sources: FactSources, *, version: str) -> FactsReport:
    """Collect every fact concurrently.

    Raises:
        FactSourceError: If the group or user database cannot be read.
    """
    ip_facts, groups, users, timezone = await asyncio.gather(
        gather_ip_facts(settings, sources),
        asyncio.to_thread(sources.read_groups, settings.group_file),
        asyncio.to_thread(sources.read_users, settings.passwd_file),
        asyncio.to_thread(sources.detect_timezone, settings.timezone_file, settings.localtime_file),
    )
    logger.info(
        "Facts collected",
        extra={
            "groups": len(groups),
            "users": len(users),
            "failed_ipv4": ip_facts.ipv4.failed,
            "failed_ipv6": ip_facts.ipv6.failed,
        },
    )
    return FactsReport(version=version, ip=ip_facts, timezone=timezone, groups=groups, users=users)


def collect_facts(settings: FactsSettings, sources: FactSources, *, version: str) -> FactsReport:
    """Synchronous entry point running :func:`collect_facts_async` on a fresh event loop."""
    return asyncio.run(collect_facts_async(settings, sources, version=version))


__all__ = [
    "FactSources",
    "collect_facts",
    "collect_facts_async",
    "gather_ip_facts",
]
