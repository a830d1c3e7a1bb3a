"""HTTP surface for Blitzumfrage."""
from __future__ import annotations

from .app import PUBLIC_DIR, create_app, get_recorder, get_validator

__all__ = ['create_app', 'get_recorder', 'get_validator', 'PUBLIC_DIR']
