"""In-memory configuration adapters for testing.

Configuration functions satisfying the production Protocols without touching
the filesystem or lib_layered_config's layer discovery.
"""

from __future__ import annotations

from lib_layered_config import Config

from ...domain.enums import OutputFormat


def get_config_in_memory(*, profile: str | None = None) -> Config:
    """Return an empty in-memory Config (settings fall back to model defaults)."""
    return Config({}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """No-op display."""


def init_logging_in_memory(config: Config) -> None:
    """No-op logging initializer."""


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
