"""System adapter - host files read during fact collection.

Contents:
    * :mod:`.accounts` - ``/etc/group`` and ``/etc/passwd`` readers
    * :mod:`.network` - ``/proc/net/if_inet6`` IPv6 probe
    * :mod:`.timezone` - Timezone detection
"""

from __future__ import annotations

from .accounts import read_groups, read_users
from .network import probe_ipv6
from .timezone import detect_timezone

__all__ = [
    "detect_timezone",
    "probe_ipv6",
    "read_groups",
    "read_users",
]
