"""Local IPv6 presence probe."""

from __future__ import annotations

import logging
from pathlib import Path

from saltbox_facts.domain.models import Ipv6Probe
from saltbox_facts.domain.parsing import has_global_ipv6

logger = logging.getLogger(__name__)


def probe_ipv6(path: Path) -> Ipv6Probe:
    """Report whether the kernel lists a global IPv6 address.

    An unreadable *path* is not fatal: IPv6 is treated as absent and the
    read error is carried in the result for the ``ipv6_check_error`` fact.

    Example:
        >>> probe_ipv6(Path("/nonexistent/if_inet6")).present
        False
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("IPv6 probe failed", extra={"path": str(path), "error": str(exc)})
        return Ipv6Probe(present=False, error=f"Error checking IPv6: {exc}")
    present = has_global_ipv6(content)
    logger.debug("IPv6 probe finished", extra={"path": str(path), "present": present})
    return Ipv6Probe(present=present)


__all__ = ["probe_ipv6"]
