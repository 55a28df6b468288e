"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.cli` - rich-click command-line interface
    * :mod:`.config` - Configuration loading, settings, display
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.network` - Public IP discovery with httpx
    * :mod:`.system` - Host file readers
    * :mod:`.output` - JSON rendering with orjson
    * :mod:`.memory` - In-memory adapters for tests
"""

from __future__ import annotations

__all__: list[str] = []
