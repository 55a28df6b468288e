"""Domain layer - pure fact models, parsers and release guards.

No I/O or framework dependencies live here.

Contents:
    * :mod:`.models` - Immutable fact value objects
    * :mod:`.parsing` - Parsers for group/passwd/if_inet6/timezone data
    * :mod:`.release` - Release pipeline guard evaluation
    * :mod:`.enums` - Domain enumerations
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .enums import IpFamily, OutputFormat, ReleaseStep
from .errors import ConfigurationError, FactSourceError
from .models import (
    DEFAULT_TIMEZONE,
    FactsReport,
    GroupEntry,
    IpFacts,
    IpLookupResult,
    Ipv6Probe,
    UserEntry,
)
from .release import ReleasePlan, plan_release

__all__ = [
    # Enums
    "IpFamily",
    "OutputFormat",
    "ReleaseStep",
    # Errors
    "ConfigurationError",
    "FactSourceError",
    # Models
    "DEFAULT_TIMEZONE",
    "FactsReport",
    "GroupEntry",
    "IpFacts",
    "IpLookupResult",
    "Ipv6Probe",
    "UserEntry",
    # Release
    "ReleasePlan",
    "plan_release",
]
