"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature matches the
corresponding adapter function, so plain module-level functions satisfy them
through structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters. ``Config`` is imported under
    ``TYPE_CHECKING`` only so the application layer carries no runtime
    dependency on lib_layered_config.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import IpFamily, OutputFormat
from ..domain.models import GroupEntry, IpLookupResult, Ipv6Probe, UserEntry

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize the logging runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class ReadGroups(Protocol):
    """Load the group database at *path*."""

    def __call__(self, path: Path) -> dict[str, GroupEntry]: ...


class ReadUsers(Protocol):
    """Load the user database at *path*."""

    def __call__(self, path: Path) -> dict[str, UserEntry]: ...


class ProbeIpv6(Protocol):
    """Report whether the host has a global IPv6 address."""

    def __call__(self, path: Path) -> Ipv6Probe: ...


class DetectTimezone(Protocol):
    """Resolve the host timezone name."""

    def __call__(
        self, timezone_file: Path, localtime_file: Path, environ: Mapping[str, str] | None = ...
    ) -> str: ...


class ResolvePublicIp(Protocol):
    """Query public IP endpoints of one family, first valid answer wins."""

    async def __call__(self, urls: Sequence[str], family: IpFamily, timeout: float) -> IpLookupResult: ...


__all__ = [
    "DetectTimezone",
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "ProbeIpv6",
    "ReadGroups",
    "ReadUsers",
    "ResolvePublicIp",
]
