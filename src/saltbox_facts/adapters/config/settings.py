"""Fact collection settings model and loader.

Provides the FactsSettings Pydantic model validating the ``[saltbox_facts]``
section and :func:`load_facts_settings` to build it from a layered Config.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from saltbox_facts.domain.errors import ConfigurationError

SECTION = "saltbox_facts"

DEFAULT_IPV4_URLS: tuple[str, ...] = ("https://ipify.saltbox.dev", "https://ipv4.icanhazip.com")
DEFAULT_IPV6_URLS: tuple[str, ...] = ("https://ipify6.saltbox.dev", "https://ipv6.icanhazip.com")


class FactsSettings(BaseModel):
    """Validated, immutable fact collection settings.

    Example:
        >>> settings = FactsSettings(timeout_seconds=5, ipv6_urls="https://v6.example")
        >>> settings.ipv6_urls
        ('https://v6.example',)
        >>> settings.group_file
        PosixPath('/etc/group')
    """

    model_config = ConfigDict(frozen=True)

    timeout_seconds: float = Field(default=3.0, gt=0)
    ipv4_urls: tuple[str, ...] = DEFAULT_IPV4_URLS
    ipv6_urls: tuple[str, ...] = DEFAULT_IPV6_URLS
    group_file: Path = Path("/etc/group")
    passwd_file: Path = Path("/etc/passwd")
    if_inet6_file: Path = Path("/proc/net/if_inet6")
    timezone_file: Path = Path("/etc/timezone")
    localtime_file: Path = Path("/etc/localtime")

    @field_validator("ipv4_urls", "ipv6_urls", mode="before")
    @classmethod
    def _coerce_string_to_tuple(cls, v: Any) -> Any:
        """Accept a single URL from env or ``.env`` layers.

        Empty strings become an empty tuple.

        Examples:
            >>> FactsSettings._coerce_string_to_tuple("https://a.example")
            ('https://a.example',)
            >>> FactsSettings._coerce_string_to_tuple("  ")
            ()
        """
        if isinstance(v, str):
            return (v.strip(),) if v.strip() else ()
        return v


def load_facts_settings(config: Config | Mapping[str, Any]) -> FactsSettings:
    """Build FactsSettings from the ``[saltbox_facts]`` section.

    Missing keys fall back to the model defaults.

    Raises:
        ConfigurationError: If the section is not a table or fails validation.

    Example:
        >>> load_facts_settings(Config({"saltbox_facts": {"timeout_seconds": 1}}, {})).timeout_seconds
        1.0
    """
    raw: object = config.get(SECTION, default={}) if isinstance(config, Config) else config.get(SECTION, {})
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"[{SECTION}] must be a table, got {type(raw).__name__}")
    try:
        return FactsSettings.model_validate(dict(cast("Mapping[str, Any]", raw)))
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
        )
        raise ConfigurationError(f"Invalid [{SECTION}] settings: {problems}") from exc


__all__ = [
    "DEFAULT_IPV4_URLS",
    "DEFAULT_IPV6_URLS",
    "SECTION",
    "FactsSettings",
    "load_facts_settings",
]
