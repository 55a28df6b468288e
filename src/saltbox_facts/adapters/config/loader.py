"""Layered configuration loading with per-process caching."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from saltbox_facts import __init__conf__


class ConfigLoaderProtocol(Protocol):
    """Config loader callable that also exposes ``cache_clear``."""

    def __call__(self, *, profile: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str) -> None:
    """Reject profile names that are empty, too long, or path-like.

    Delegates to ``lib_layered_config.validate_profile_name``.

    Raises:
        ValueError: If the profile name is invalid.

    Examples:
        >>> validate_profile("production")

        >>> validate_profile("../etc/passwd")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc/passwd
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the bundled ``defaultconfig.toml`` next to this module.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


# One short-lived process per Ansible fact run; caching for its lifetime is enough.
@lru_cache(maxsize=4)
def _get_config_impl(*, profile: str | None = None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
    )


def _get_config(*, profile: str | None = None) -> Config:
    """Load layered configuration on top of the bundled defaults.

    Precedence: defaults -> app -> host -> user -> dotenv -> env. With a
    profile, every layer is read from its ``profile/<name>/`` subdirectory.

    Args:
        profile: Optional profile name (``production``, ``staging-v2``, ...).

    Returns:
        Immutable configuration object with provenance tracking.

    Example:
        >>> config = get_config()
        >>> config.get("saltbox_facts.timeout_seconds")
        3
    """
    if profile is not None:
        validate_profile(profile)
    return _get_config_impl(profile=profile)


def _cache_clear() -> None:
    _get_config_impl.cache_clear()


# lru_cache's cache_clear is invisible once the wrapper is cast to the Protocol.
_get_config.cache_clear = _cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
