"""Type-safe domain enums for output formats, address families and release steps."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class IpFamily(str, Enum):
    """Internet address family of a public IP lookup.

    The ``label`` property is the spelling used in user-facing error
    messages.

    Example:
        >>> IpFamily.V6.label
        'IPv6'
        >>> IpFamily("ipv4") is IpFamily.V4
        True
    """

    V4 = "ipv4"
    V6 = "ipv6"

    @property
    def label(self) -> str:
        return "IPv4" if self is IpFamily.V4 else "IPv6"


class ReleaseStep(str, Enum):
    """Steps of the release pipeline, in execution order.

    Example:
        >>> [step.value for step in ReleaseStep][:3]
        ['checkout', 'install-toolchain', 'build']
    """

    CHECKOUT = "checkout"
    INSTALL_TOOLCHAIN = "install-toolchain"
    BUILD = "build"
    UPLOAD_ARTIFACT = "upload-artifact"
    RELEASE = "release"


__all__ = [
    "IpFamily",
    "OutputFormat",
    "ReleaseStep",
]
