"""Immutable value objects describing collected host facts.

Each model exposes ``to_document()`` returning the plain-dict shape that
Ansible consumers read from the facts JSON. Key names in those documents
(``group-list``, ``public_ip``, ...) are part of the output contract.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

DEFAULT_TIMEZONE = "Etc/UTC"


@dataclass(frozen=True, slots=True)
class GroupEntry:
    """One ``/etc/group`` record, keyed by group name in the report."""

    gid: str
    members: tuple[str, ...] = ()

    def to_document(self) -> dict[str, Any]:
        return {"gid": self.gid, "group-list": list(self.members)}


@dataclass(frozen=True, slots=True)
class UserEntry:
    """One ``/etc/passwd`` record, keyed by user name in the report."""

    uid: str
    gid: str
    comment: str
    home: str
    shell: str

    def to_document(self) -> dict[str, Any]:
        return {
            "uid": self.uid,
            "gid": self.gid,
            "comment": self.comment,
            "home": self.home,
            "shell": self.shell,
        }


@dataclass(frozen=True, slots=True)
class IpLookupResult:
    """Outcome of querying every endpoint of one address family.

    Exactly one of ``address`` and ``error`` is normally set. Both are
    ``None`` when the lookup was skipped (no global IPv6 on the host).

    Example:
        >>> IpLookupResult(address="203.0.113.7").failed
        False
        >>> IpLookupResult.skipped().failed
        True
    """

    address: str | None = None
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.address is None

    @classmethod
    def skipped(cls) -> IpLookupResult:
        return cls(address=None, error=None)


@dataclass(frozen=True, slots=True)
class Ipv6Probe:
    """Whether the host has a global IPv6 address, and why it may not know."""

    present: bool
    error: str | None = None


@dataclass(frozen=True, slots=True)
class IpFacts:
    """Public address facts for both families."""

    ipv4: IpLookupResult
    ipv6: IpLookupResult
    ipv6_check_error: str | None = None

    def to_document(self) -> dict[str, Any]:
        return {
            "public_ip": self.ipv4.address or "",
            "public_ipv6": self.ipv6.address or "",
            "error_ipv4": self.ipv4.error,
            "error_ipv6": self.ipv6.error,
            "failed_ipv4": self.ipv4.failed,
            "failed_ipv6": self.ipv6.failed,
            "ipv6_check_error": self.ipv6_check_error,
        }


@dataclass(frozen=True, slots=True)
class FactsReport:
    """Complete set of facts printed for Ansible.

    Example:
        >>> report = FactsReport(
        ...     version="1.0.0",
        ...     ip=IpFacts(ipv4=IpLookupResult(address="198.51.100.1"), ipv6=IpLookupResult.skipped()),
        ...     timezone="Europe/Copenhagen",
        ... )
        >>> doc = report.to_document()
        >>> doc["timezone"]
        {'timezone': 'Europe/Copenhagen'}
        >>> doc["ip"]["failed_ipv6"]
        True
    """

    version: str
    ip: IpFacts
    timezone: str = DEFAULT_TIMEZONE
    groups: Mapping[str, GroupEntry] = field(default_factory=dict)
    users: Mapping[str, UserEntry] = field(default_factory=dict)

    def to_document(self) -> dict[str, Any]:
        return {
            "saltbox_facts_version": self.version,
            "ip": self.ip.to_document(),
            "groups": {name: entry.to_document() for name, entry in self.groups.items()},
            "users": {name: entry.to_document() for name, entry in self.users.items()},
            "timezone": {"timezone": self.timezone},
        }


__all__ = [
    "DEFAULT_TIMEZONE",
    "FactsReport",
    "GroupEntry",
    "IpFacts",
    "IpLookupResult",
    "Ipv6Probe",
    "UserEntry",
]
