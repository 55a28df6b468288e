"""Centralized logging initialization for all entry points.

Single source of truth for the lib_log_rich runtime configuration. The
console script, ``python -m saltbox_facts`` and the tests all go through
:func:`init_logging`, which initialises the runtime at most once per process.

System Role:
    Lives in the adapters layer. Domain and application code log through the
    standard ``logging`` module; :func:`init_logging` bridges those records
    into lib_log_rich.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from saltbox_facts import __init__conf__


class LoggingConfigModel(BaseModel):
    """Pydantic model for the ``[lib_log_rich]`` config section.

    Extra fields pass through to ``lib_log_rich.runtime.RuntimeConfig``.

    Example:
        >>> LoggingConfigModel(service="facts", environment="staging").environment
        'staging'
        >>> LoggingConfigModel().service is None
        True
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a RuntimeConfig.

    ``service`` defaults to the package name; unspecified options keep
    lib_log_rich's own defaults.
    """
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", log_raw) if log_raw else {})

    extra_config = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **extra_config,
    )


def init_logging(config: Config) -> None:
    """Initialize lib_log_rich once and attach standard logging to it.

    Loads ``.env`` files first so ``LOG_*`` variables take part in the
    configuration. Later calls return immediately.

    Args:
        config: Loaded layered configuration holding the ``[lib_log_rich]``
            section.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
