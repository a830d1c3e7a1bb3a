"""Runtime settings for Blitzumfrage.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from pathlib import Path
from typing import Literal

# Third-party (alphabetical)
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Local imports (core first, then alphabetical)
from .constants import (
    DATA_FILE_MAX_SIZE,
    DEFAULT_DATA_FILE,
    DEFAULT_HOST,
    DEFAULT_PORT,
    MAX_BODY_BYTES,
)

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("BlitzumfrageSettings", "load_settings")


# =============================================================================
# Section 11: Classes
# =============================================================================
class BlitzumfrageSettings(BaseSettings):
    """Server settings, read from ``BLITZUMFRAGE_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BLITZUMFRAGE_",
        env_file=".env",
        extra="ignore",
        validate_default=True,
    )

    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535)
    data_file: Path = Path(DEFAULT_DATA_FILE)
    data_file_max_size: int = Field(default=DATA_FILE_MAX_SIZE, ge=0)
    size_guard: bool = True
    max_body_bytes: int = Field(default=MAX_BODY_BYTES, gt=0)
    environment: str = "development"
    send_to_logfire: bool | Literal["if-token-present"] = "if-token-present"

    @property
    def address(self) -> str:
        """Listen address as ``host:port``."""
        return f"{self.host}:{self.port}"


# =============================================================================
# Section 12: Functions
# =============================================================================
def load_settings() -> BlitzumfrageSettings:
    """Load settings from the environment."""
    return BlitzumfrageSettings()
