"""Services for Blitzumfrage."""
from __future__ import annotations

from .recorder import Recorder
from .validator import Validator, validate

__all__ = ['Recorder', 'Validator', 'validate']
