"""Console script entry point with production wiring.

Sits at package level (outside adapters) so composition can be wired into
the adapters layer without breaking the layer rules.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Console script entry point with production services wired.

    Returns:
        Exit code from CLI execution.
    """
    return cli_main(services_factory=build_production)


__all__ = ["main"]
