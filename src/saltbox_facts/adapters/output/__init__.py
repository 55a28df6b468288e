"""Output adapter - JSON rendering with orjson."""

from __future__ import annotations

from .render import render_document, render_facts

__all__ = ["render_document", "render_facts"]
