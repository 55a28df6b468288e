"""Readers for the local group and user databases."""

from __future__ import annotations

import logging
from pathlib import Path

from saltbox_facts.domain.errors import FactSourceError
from saltbox_facts.domain.models import GroupEntry, UserEntry
from saltbox_facts.domain.parsing import parse_groups, parse_users

logger = logging.getLogger(__name__)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Cannot read account database", extra={"path": str(path), "error": str(exc)})
        raise FactSourceError(path, exc) from exc


def read_groups(path: Path) -> dict[str, GroupEntry]:
    """Load and parse a group database such as ``/etc/group``.

    Raises:
        FactSourceError: If the file is missing, unreadable, or not UTF-8.
    """
    groups = parse_groups(_read_text(path))
    logger.debug("Parsed group database", extra={"path": str(path), "groups": len(groups)})
    return groups


def read_users(path: Path) -> dict[str, UserEntry]:
    """Load and parse a user database such as ``/etc/passwd``.

    Raises:
        FactSourceError: If the file is missing, unreadable, or not UTF-8.
    """
    users = parse_users(_read_text(path))
    logger.debug("Parsed user database", extra={"path": str(path), "users": len(users)})
    return users


__all__ = ["read_groups", "read_users"]
