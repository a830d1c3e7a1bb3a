"""Module-level constants for Blitzumfrage.

All constants are declared with Final type annotation for immutability
and IDE support.
"""
from __future__ import annotations

from typing import Final

# =============================================================================
# Section 1: Module Exports
# =============================================================================
__all__ = [
    # Server
    'DEFAULT_HOST',
    'DEFAULT_PORT',
    'SAVE_PATH',
    'SERVICE_NAME',
    # Storage
    'DEFAULT_DATA_FILE',
    'DATA_FILE_MAX_SIZE',
    'DATA_FILE_MODE',
    'RECORD_TERMINATOR',
    # Limits
    'MAX_TEXT_LENGTH',
    'MIN_AMOUNT',
    'MAX_AMOUNT',
    'MAX_BODY_BYTES',
    # Messages
    'SUCCESS_MESSAGE',
]

# =============================================================================
# Section 2: Server Constants
# =============================================================================
DEFAULT_HOST: Final[str] = 'localhost'
DEFAULT_PORT: Final[int] = 8000
SAVE_PATH: Final[str] = '/save'
SERVICE_NAME: Final[str] = 'blitzumfrage'

# =============================================================================
# Section 3: Storage Constants
# =============================================================================
DEFAULT_DATA_FILE: Final[str] = 'data.jsonl'
DATA_FILE_MAX_SIZE: Final[int] = 1_000_000  # bytes
DATA_FILE_MODE: Final[int] = 0o640
RECORD_TERMINATOR: Final[bytes] = b'\n'

# =============================================================================
# Section 4: Limit Constants
# =============================================================================
MAX_TEXT_LENGTH: Final[int] = 255
MIN_AMOUNT: Final[int] = 0
MAX_AMOUNT: Final[int] = 1000
MAX_BODY_BYTES: Final[int] = 64 * 1024

# =============================================================================
# Section 5: Messages
# =============================================================================
SUCCESS_MESSAGE: Final[str] = 'Request successfully processed.'
