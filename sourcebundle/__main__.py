"""Entry point for ``python -m sourcebundle``."""

from __future__ import annotations

from sourcebundle.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
