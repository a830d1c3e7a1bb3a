"""Core domain models for Blitzumfrage.

A Submission is built transiently per request, validated, serialized into
one line of the append-only log and then discarded.

Models are immutable (frozen=True) and strictly typed: ``amount`` must be a
JSON integer and the text fields must be JSON strings.
"""
from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field

from .constants import MAX_AMOUNT, MAX_TEXT_LENGTH, MIN_AMOUNT, RECORD_TERMINATOR

__all__ = ['Submission']


class Submission(BaseModel):
    """One form submission.

    Field declaration order is the serialized field order of a log line.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra='ignore',
    )

    name: str = Field(
        ...,
        min_length=1,
        max_length=MAX_TEXT_LENGTH,
        description='Name of the submitting person',
    )
    child: str = Field(
        ...,
        min_length=1,
        max_length=MAX_TEXT_LENGTH,
        description='Name of the child the submission is for',
    )
    # Zero is a present value, not a missing one.
    amount: int = Field(
        ...,
        ge=MIN_AMOUNT,
        le=MAX_AMOUNT,
        description='Pledged amount',
    )

    def to_line(self) -> bytes:
        """Return the compact JSON wire form followed by the record terminator."""
        return self.model_dump_json().encode('utf-8') + RECORD_TERMINATOR

    @classmethod
    def from_line(cls, line: str | bytes) -> Self:
        """Parse one log line back into a submission."""
        return cls.model_validate_json(line)
