"""Exception hierarchy for Blitzumfrage.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

# Standard library (alphabetical)
from typing import Any, Literal

__all__ = (
    'BlitzumfrageError',
    'ClientInputError',
    'BodyReadError',
    'DecodeError',
    'ValidationError',
    'StorageError',
    'StorageOperation',
    'CapacityError',
    'SerializationError',
)

StorageOperation = Literal['stat', 'open', 'write', 'close']


class BlitzumfrageError(Exception):
    """Base exception for all Blitzumfrage errors.

    Every error is terminal for the request that raised it. The HTTP layer
    turns it into a plain-text response carrying ``status_code``.

    Attributes:
        context: Additional context for structured logging.
    """

    status_code: int = 500

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        self.context = context or {}
        super().__init__(message)


# =============================================================================
# Client Exceptions
# =============================================================================
class ClientInputError(BlitzumfrageError):
    """Base exception for malformed or constraint-violating submissions."""

    status_code = 400


class BodyReadError(ClientInputError):
    """Raised when the request body cannot be read from the connection."""

    def __init__(self, cause: BaseException | str) -> None:
        self.cause = cause
        super().__init__(f'reading request body: {cause}', context={'cause_type': type(cause).__name__})


class DecodeError(ClientInputError):
    """Raised when the request body cannot be decoded into a record."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        super().__init__(f'decoding request: {message}', context=context)


class ValidationError(ClientInputError):
    """Raised when a decoded record violates a field constraint.

    Attributes:
        errors: One ``field: reason`` entry per violated constraint.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f'invalid request: {"; ".join(errors)}', context={'errors': errors})


# =============================================================================
# Server Exceptions
# =============================================================================
class StorageError(BlitzumfrageError):
    """Raised when a stat, open, write or close on the log file fails."""

    def __init__(self, operation: StorageOperation, path: str, cause: BaseException | str) -> None:
        self.operation = operation
        self.path = path
        self.cause = cause
        super().__init__(
            f'{_STORAGE_ACTIONS[operation]}: {cause}',
            context={'operation': operation, 'path': path, 'cause_type': type(cause).__name__},
        )


class CapacityError(BlitzumfrageError):
    """Raised when the log file is at or above its size ceiling."""

    def __init__(self, current_size: int, max_size: int) -> None:
        self.current_size = current_size
        self.max_size = max_size
        super().__init__(
            f'database file is too large: {current_size} / {max_size} bytes',
            context={'current_size': current_size, 'max_size': max_size},
        )


class SerializationError(BlitzumfrageError):
    """Raised when a validated submission cannot be encoded."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        self.cause = cause
        ctx: dict[str, Any] = {}
        if cause:
            ctx['cause_type'] = type(cause).__name__
        super().__init__(f'encoding request: {message}', context=ctx)


_STORAGE_ACTIONS: dict[str, str] = {
    'stat': 'retrieving database file information',
    'open': 'opening database file',
    'write': 'writing to database file',
    'close': 'closing database file',
}
