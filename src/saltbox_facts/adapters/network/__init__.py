"""Network adapter - public IP discovery over HTTPS with httpx.

Contents:
    * :mod:`.public_ip` - Concurrent endpoint race per address family
"""

from __future__ import annotations

from .public_ip import build_async_client, lookup_public_ip, resolve_public_ip

__all__ = ["build_async_client", "lookup_public_ip", "resolve_public_ip"]
