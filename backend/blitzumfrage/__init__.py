"""Blitzumfrage package initialization.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Local imports (core first, then alphabetical)
from ._version import __version__
from .core.models import Submission
from .services.recorder import Recorder
from .services.validator import Validator, validate
from .web.app import create_app

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = (
    "__version__",
    "Submission",
    "Recorder",
    "Validator",
    "validate",
    "create_app",
)
