"""Public package surface: fact collection, models, configuration and metadata.

Routes imports through the architectural layers:
- Domain exports: fact models and release guards
- Application exports: the collection use case
- Composition exports: wired configuration loader
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.collect import collect_facts

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.models import FactsReport
from .domain.release import plan_release

__all__ = [
    "FactsReport",
    "collect_facts",
    "get_config",
    "plan_release",
    "print_info",
]
