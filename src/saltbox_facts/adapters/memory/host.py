"""In-memory host adapters for testing.

Provides fact source functions that satisfy the same Protocols as the
production adapters but read nothing from the filesystem or network.

Contents:
    * :class:`FakeHost` - Canned host data plus call capture.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ...domain.enums import IpFamily
from ...domain.errors import FactSourceError
from ...domain.models import GroupEntry, IpLookupResult, Ipv6Probe, UserEntry


def _default_lookups() -> dict[IpFamily, IpLookupResult]:
    return {
        IpFamily.V4: IpLookupResult(address="203.0.113.10"),
        IpFamily.V6: IpLookupResult(address="2001:db8::10"),
    }


def _empty_call_list() -> list[dict[str, Any]]:
    return []


@dataclass
class FakeHost:
    """Canned host facts whose methods match the fact source Protocols.

    Each test should create its own instance. ``missing_files`` makes the
    account readers raise ``FactSourceError`` as if the path did not exist.

    Example:
        >>> host = FakeHost(groups={"docker": GroupEntry(gid="999", members=("alice",))})
        >>> host.read_groups(Path("/etc/group"))["docker"].gid
        '999'
        >>> host.ip_lookups
        []
    """

    groups: dict[str, GroupEntry] = field(default_factory=dict)
    users: dict[str, UserEntry] = field(default_factory=dict)
    ipv6_probe: Ipv6Probe = field(default_factory=lambda: Ipv6Probe(present=False))
    timezone: str = "Etc/UTC"
    lookups: dict[IpFamily, IpLookupResult] = field(default_factory=_default_lookups)
    missing_files: frozenset[Path] = frozenset()
    ip_lookups: list[dict[str, Any]] = field(default_factory=_empty_call_list)

    def _check(self, path: Path) -> None:
        if path in self.missing_files:
            raise FactSourceError(path, FileNotFoundError(2, "No such file or directory", str(path)))

    def read_groups(self, path: Path) -> dict[str, GroupEntry]:
        self._check(path)
        return dict(self.groups)

    def read_users(self, path: Path) -> dict[str, UserEntry]:
        self._check(path)
        return dict(self.users)

    def probe_ipv6(self, path: Path) -> Ipv6Probe:
        return self.ipv6_probe

    def detect_timezone(
        self,
        timezone_file: Path,
        localtime_file: Path,
        environ: Mapping[str, str] | None = None,
    ) -> str:
        return self.timezone

    async def resolve_public_ip(self, urls: Sequence[str], family: IpFamily, timeout: float) -> IpLookupResult:
        self.ip_lookups.append({"urls": tuple(urls), "family": family, "timeout": timeout})
        return self.lookups[family]


__all__ = ["FakeHost"]
