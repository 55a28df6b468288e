"""System timezone detection."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from saltbox_facts.domain.models import DEFAULT_TIMEZONE
from saltbox_facts.domain.parsing import timezone_from_etc_timezone, timezone_from_localtime_target

logger = logging.getLogger(__name__)


def _is_utf8(value: str) -> bool:
    # Undecodable environment bytes surface as lone surrogates.
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def detect_timezone(
    timezone_file: Path,
    localtime_file: Path,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Return the host timezone name.

    Sources, first hit wins: the ``TZ`` variable (verbatim, even when
    empty, but skipped when it is not valid UTF-8), the trimmed
    *timezone_file*, the zone encoded in the *localtime_file* symlink
    target (undecodable bytes replaced with U+FFFD), then ``Etc/UTC``.
    Read errors fall through to the next source.

    Example:
        >>> detect_timezone(Path("/nonexistent"), Path("/nonexistent"), environ={"TZ": "Asia/Tokyo"})
        'Asia/Tokyo'
        >>> detect_timezone(Path("/nonexistent"), Path("/nonexistent"), environ={})
        'Etc/UTC'
    """
    env = os.environ if environ is None else environ
    if "TZ" in env:
        tz_value = env["TZ"]
        if _is_utf8(tz_value):
            return tz_value
        logger.debug("TZ is not valid UTF-8, ignoring it")

    try:
        zone = timezone_from_etc_timezone(timezone_file.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Timezone file unavailable", extra={"path": str(timezone_file), "error": str(exc)})
    else:
        if zone:
            return zone

    try:
        target = os.fsencode(os.readlink(localtime_file)).decode("utf-8", "replace")
        zone = timezone_from_localtime_target(target)
    except OSError as exc:
        logger.debug("Localtime link unavailable", extra={"path": str(localtime_file), "error": str(exc)})
    else:
        if zone:
            return zone

    return DEFAULT_TIMEZONE


__all__ = ["detect_timezone"]
