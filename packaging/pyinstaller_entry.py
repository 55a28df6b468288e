"""PyInstaller entry script for the single-file ``saltbox-facts`` executable."""

from __future__ import annotations

from saltbox_facts.entry import main

if __name__ == "__main__":
    raise SystemExit(main())
