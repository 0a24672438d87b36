"""``python -m lib_catalog_log`` runs the catalog CLI (lookup, check, emit, encode)."""

from __future__ import annotations

import sys

from .cli import main

if __name__ == "__main__":  # pragma: no cover - exercised via python -m
    sys.exit(main(sys.argv[1:]))
