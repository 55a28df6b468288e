"""JSON rendering of fact reports and release plans with orjson.

Keys are sorted at every nesting level so the output is stable between runs
and diffs cleanly in Ansible's fact cache.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import orjson

from saltbox_facts.domain.models import FactsReport

_COMPACT = orjson.OPT_SORT_KEYS
_PRETTY = orjson.OPT_SORT_KEYS | orjson.OPT_INDENT_2


def render_document(document: Mapping[str, Any], *, pretty: bool = False) -> str:
    """Serialize *document* with recursively sorted keys.

    Example:
        >>> render_document({"z": 1, "a": {"d": 2, "b": 3}, "m": [{"k": 1, "c": 2}]})
        '{"a":{"b":3,"d":2},"m":[{"c":2,"k":1}],"z":1}'
    """
    return orjson.dumps(dict(document), option=_PRETTY if pretty else _COMPACT).decode("utf-8")


def render_facts(report: FactsReport, *, pretty: bool = False) -> str:
    """Serialize a :class:`FactsReport` into the Ansible facts document."""
    return render_document(report.to_document(), pretty=pretty)


__all__ = ["render_document", "render_facts"]
