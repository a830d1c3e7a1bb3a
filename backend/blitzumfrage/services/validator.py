"""Submission validation.

Turns raw request body bytes into a validated :class:`Submission`. Decoding
problems and constraint violations are reported as distinct client errors;
nothing here touches the filesystem.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
from dataclasses import dataclass
from typing import Any

# Third-party (alphabetical)
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import from_json

# Local imports (core first, then alphabetical)
from ..core.constants import MAX_BODY_BYTES
from ..core.exceptions import DecodeError, ValidationError
from ..core.models import Submission

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("Validator", "validate", "decode", "format_errors")


# =============================================================================
# Section 9: Dataclasses
# =============================================================================
@dataclass(frozen=True, kw_only=True)
class Validator:
    """Injectable validator with a bound on accepted body size."""

    max_body_bytes: int = MAX_BODY_BYTES

    def __call__(self, raw: bytes) -> Submission:
        self.check_size(len(raw))
        return validate(raw)

    def check_size(self, size: int) -> None:
        """Reject a body, or the part of it read so far, over the limit."""
        if size > self.max_body_bytes:
            raise DecodeError(
                f"body of {size} bytes exceeds limit of {self.max_body_bytes} bytes",
                context={"size": size, "limit": self.max_body_bytes},
            )


# =============================================================================
# Section 12: Functions
# =============================================================================
def validate(raw: bytes) -> Submission:
    """Decode and validate a submission.

    Args:
        raw: Request body bytes, expected to hold one JSON object.

    Returns:
        A submission satisfying every field constraint.

    Raises:
        DecodeError: The body is not a JSON object.
        ValidationError: A field is missing, mistyped or out of range.
    """
    data = decode(raw)
    try:
        return Submission.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(format_errors(exc)) from exc


def decode(raw: bytes) -> dict[str, Any]:
    """Decode body bytes into a JSON object without checking its fields."""
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"body is not valid UTF-8: {exc}") from exc

    try:
        data = from_json(text)
    except ValueError as exc:
        raise DecodeError(str(exc)) from exc

    if not isinstance(data, dict):
        raise DecodeError(f"expected a JSON object, got {_json_type(data)}")
    return data


def format_errors(exc: PydanticValidationError) -> list[str]:
    """Render pydantic errors as ``field: reason`` strings."""
    messages = []
    for error in exc.errors(include_url=False):
        location = ".".join(str(part) for part in error["loc"]) or "body"
        messages.append(f"{location}: {error['msg']}")
    return messages


def _json_type(value: Any) -> str:
    if isinstance(value, list):
        return "array"
    if isinstance(value, str):
        return "string"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    return "null"
