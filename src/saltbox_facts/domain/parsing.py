"""Pure parsers for the host databases and files fact collection reads.

Every function here takes already-loaded text so it can be exercised without
touching the filesystem; the adapters in :mod:`saltbox_facts.adapters.system`
own the I/O.
"""

from __future__ import annotations

import ipaddress
from pathlib import PurePath

from .enums import IpFamily
from .models import GroupEntry, UserEntry

_GLOBAL_SCOPE = "00"
_ZONEINFO_MARKER = "zoneinfo/"


def _lines(content: str) -> list[str]:
    """Split on ``\\n`` only, dropping one trailing ``\\r`` per line.

    ``str.splitlines`` also breaks on form feeds and other separators that
    may legitimately appear inside a GECOS or member field.

    Example:
        >>> _lines("a:\\x0cb\\r\\nc\\n")
        ['a:\\x0cb', 'c', '']
    """
    return [line.removesuffix("\r") for line in content.split("\n")]


def parse_groups(content: str) -> dict[str, GroupEntry]:
    """Parse ``/etc/group`` content into entries keyed by group name.

    Lines with fewer than three ``:``-separated fields are skipped. The
    member field is split on ``,`` as-is, so an empty member field yields a
    single empty string. Later duplicates replace earlier ones.

    Example:
        >>> groups = parse_groups("docker:x:999:alice,bob\\nstaff:x:50\\nbroken\\n")
        >>> groups["docker"]
        GroupEntry(gid='999', members=('alice', 'bob'))
        >>> groups["staff"].members
        ()
        >>> "broken" in groups
        False
    """
    groups: dict[str, GroupEntry] = {}
    for line in _lines(content):
        parts = line.split(":")
        if len(parts) < 3:
            continue
        name, _password, gid = parts[:3]
        members = tuple(parts[3].split(",")) if len(parts) > 3 else ()
        groups[name] = GroupEntry(gid=gid, members=members)
    return groups


def parse_users(content: str) -> dict[str, UserEntry]:
    """Parse ``/etc/passwd`` content into entries keyed by user name.

    Lines with fewer than seven ``:``-separated fields are skipped.

    Example:
        >>> users = parse_users("alice:x:1000:1000:Alice:/home/alice:/bin/bash\\n")
        >>> users["alice"].home
        '/home/alice'
    """
    users: dict[str, UserEntry] = {}
    for line in _lines(content):
        parts = line.split(":")
        if len(parts) < 7:
            continue
        name, _password, uid, gid, comment, home, shell = parts[:7]
        users[name] = UserEntry(uid=uid, gid=gid, comment=comment, home=home, shell=shell)
    return users


def has_global_ipv6(if_inet6: str) -> bool:
    """Return True when ``/proc/net/if_inet6`` lists a global-scope address.

    Each well-formed line carries at least six whitespace-separated fields;
    the fourth is the scope, ``00`` meaning global. Malformed lines are
    ignored.

    Example:
        >>> has_global_ipv6("fe800000000000000000000000000001 02 40 20 80 eth0\\n")
        False
        >>> has_global_ipv6("2a0104f9c014e6d90000000000000001 02 40 00 80 eth0\\n")
        True
    """
    for line in _lines(if_inet6):
        fields = line.split()
        if len(fields) < 6:
            continue
        if fields[3] == _GLOBAL_SCOPE:
            return True
    return False


def timezone_from_etc_timezone(content: str) -> str | None:
    """Return the trimmed zone name from ``/etc/timezone`` or None when blank.

    Example:
        >>> timezone_from_etc_timezone("Europe/Copenhagen\\n")
        'Europe/Copenhagen'
        >>> timezone_from_etc_timezone("  \\n\\t") is None
        True
    """
    zone = content.strip()
    return zone or None


def timezone_from_localtime_target(target: str | PurePath) -> str | None:
    """Extract the zone name from an ``/etc/localtime`` symlink target.

    Example:
        >>> timezone_from_localtime_target("/usr/share/zoneinfo/Europe/Copenhagen")
        'Europe/Copenhagen'
        >>> timezone_from_localtime_target("/var/lib/custom/localtime") is None
        True
    """
    text = str(target)
    index = text.find(_ZONEINFO_MARKER)
    if index < 0:
        return None
    zone = text[index + len(_ZONEINFO_MARKER) :].strip()
    return zone or None


def is_valid_ip(candidate: str, family: IpFamily) -> bool:
    """Return True when *candidate* is a literal address of *family*.

    Scoped IPv6 literals (``fe80::1%eth0``) are rejected; a public lookup
    never legitimately returns one.

    Example:
        >>> is_valid_ip("203.0.113.9", IpFamily.V4)
        True
        >>> is_valid_ip("203.0.113.9", IpFamily.V6)
        False
        >>> is_valid_ip("2001:db8::1", IpFamily.V6)
        True
        >>> is_valid_ip("<html>", IpFamily.V4)
        False
    """
    if "%" in candidate:
        return False
    address_type = ipaddress.IPv4Address if family is IpFamily.V4 else ipaddress.IPv6Address
    try:
        address_type(candidate)
    except ValueError:
        return False
    return True


__all__ = [
    "has_global_ipv6",
    "is_valid_ip",
    "parse_groups",
    "parse_users",
    "timezone_from_etc_timezone",
    "timezone_from_localtime_target",
]
