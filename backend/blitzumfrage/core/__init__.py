"""Core domain layer for Blitzumfrage.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Local imports (core first, then alphabetical)
from .exceptions import (
    BlitzumfrageError,
    BodyReadError,
    CapacityError,
    ClientInputError,
    DecodeError,
    SerializationError,
    StorageError,
    ValidationError,
)
from .models import Submission
from .settings import BlitzumfrageSettings, load_settings

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = (
    "Submission",
    "BlitzumfrageSettings",
    "load_settings",
    "BlitzumfrageError",
    "ClientInputError",
    "BodyReadError",
    "DecodeError",
    "ValidationError",
    "StorageError",
    "CapacityError",
    "SerializationError",
)
