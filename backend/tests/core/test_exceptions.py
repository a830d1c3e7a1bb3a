"""Tests for core exceptions.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

import pytest

from blitzumfrage.core.exceptions import (
    BlitzumfrageError,
    BodyReadError,
    CapacityError,
    ClientInputError,
    DecodeError,
    SerializationError,
    StorageError,
    ValidationError,
)

__all__ = ()


class TestBlitzumfrageError:
    """Tests for the base BlitzumfrageError."""

    def test_basic_creation(self) -> None:
        """Error should be created with message."""
        error = BlitzumfrageError("Test error")

        assert str(error) == "Test error"
        assert error.context == {}

    def test_defaults_to_server_error(self) -> None:
        """Base errors map to a 5xx status."""
        assert BlitzumfrageError("Test").status_code == 500


class TestClientInputErrors:
    """Tests for client-caused errors."""

    @pytest.mark.parametrize(
        "error",
        [
            BodyReadError("client disconnected"),
            DecodeError("unexpected end"),
            ValidationError(["name: too short"]),
        ],
    )
    def test_status_code(self, error: ClientInputError) -> None:
        """Client errors map to 400."""
        assert isinstance(error, ClientInputError)
        assert error.status_code == 400

    def test_decode_error_message(self) -> None:
        """Decode errors say that decoding failed."""
        error = DecodeError("EOF while parsing")

        assert str(error) == "decoding request: EOF while parsing"

    def test_validation_error_names_constraints(self) -> None:
        """Validation errors list every violated constraint."""
        error = ValidationError(["name: too short", "amount: too large"])

        assert error.errors == ["name: too short", "amount: too large"]
        assert "name: too short" in str(error)
        assert "amount: too large" in str(error)


class TestServerErrors:
    """Tests for storage, capacity and serialization errors."""

    @pytest.mark.parametrize(
        ("operation", "prefix"),
        [
            ("stat", "retrieving database file information"),
            ("open", "opening database file"),
            ("write", "writing to database file"),
            ("close", "closing database file"),
        ],
    )
    def test_storage_error_operation(self, operation: str, prefix: str) -> None:
        """Storage errors name the failed operation and the cause."""
        error = StorageError(operation, "data.jsonl", OSError("disk full"))  # type: ignore[arg-type]

        assert error.operation == operation
        assert str(error) == f"{prefix}: disk full"
        assert error.context["path"] == "data.jsonl"
        assert error.status_code == 500

    def test_capacity_error(self) -> None:
        """Capacity errors carry both sizes."""
        error = CapacityError(1_000_001, 1_000_000)

        assert error.current_size == 1_000_001
        assert error.max_size == 1_000_000
        assert "too large" in str(error)
        assert error.status_code == 500

    def test_serialization_error(self) -> None:
        """Serialization errors keep their cause."""
        cause = ValueError("bad value")
        error = SerializationError("bad value", cause=cause)

        assert error.cause is cause
        assert error.context == {"cause_type": "ValueError"}
        assert str(error) == "encoding request: bad value"

    def test_server_errors_are_not_client_errors(self) -> None:
        """Server-caused errors never look like client errors."""
        for error in (
            StorageError("open", "x", "denied"),
            CapacityError(2, 1),
            SerializationError("x"),
        ):
            assert not isinstance(error, ClientInputError)
