"""Static package metadata surfaced to CLI commands and documentation.

The ``version`` line is kept in sync with ``pyproject.toml``; the
``LAYEREDCONF_*`` identifiers select the platform configuration directories
used by lib_layered_config (``/etc/xdg/saltbox-facts``,
``~/.config/saltbox-facts`` on Linux).
"""

from __future__ import annotations

name = "saltbox_facts"
title = "Ansible local facts for Saltbox hosts: public IPs, accounts and timezone"
version = "1.0.0"
homepage = "https://github.com/saltyorg/saltbox-facts"
author = "Saltbox"
author_email = "support@saltbox.dev"
shell_command = "saltbox-facts"

LAYEREDCONF_VENDOR: str = "saltbox"
LAYEREDCONF_APP: str = "saltbox-facts"
LAYEREDCONF_SLUG: str = "saltbox-facts"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for saltbox_facts:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
