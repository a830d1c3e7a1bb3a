"""Entry point for running the Blitzumfrage server."""
from __future__ import annotations

from .web.server import main

if __name__ == '__main__':
    main()
