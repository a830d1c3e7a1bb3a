"""Shared test fixtures and helpers for Blitzumfrage tests.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

import logfire
import pytest
from fastapi.testclient import TestClient

from blitzumfrage.core.settings import BlitzumfrageSettings
from blitzumfrage.services.recorder import Recorder
from blitzumfrage.web.app import create_app

# Keep test runs local and quiet.
logfire.configure(send_to_logfire=False, console=False)

if TYPE_CHECKING:
    from collections.abc import Iterator


__all__ = ("TestEnv",)


class TestEnv:
    """Helper for managing environment variables in tests."""

    __test__ = False  # Prevent pytest from collecting this class

    def __init__(self) -> None:
        self.envars: dict[str, str | None] = {}

    def set(self, name: str, value: str) -> None:
        """Set an environment variable, saving the original value."""
        self.envars[name] = os.getenv(name)
        os.environ[name] = value

    def remove(self, name: str) -> None:
        """Remove an environment variable, saving the original value."""
        self.envars[name] = os.environ.pop(name, None)

    def reset(self) -> None:
        """Reset all modified environment variables to original values."""
        for name, value in self.envars.items():
            if value is None:
                os.environ.pop(name, None)
            else:
                os.environ[name] = value


@pytest.fixture
def env() -> Iterator[TestEnv]:
    """Fixture for managing environment variables in tests."""
    test_env = TestEnv()
    yield test_env
    test_env.reset()


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """Path of a log file that does not exist yet."""
    return tmp_path / "data.jsonl"


@pytest.fixture
def settings(data_file: Path) -> BlitzumfrageSettings:
    """Settings pointing at the temporary log file."""
    return BlitzumfrageSettings(
        data_file=data_file,
        data_file_max_size=1_000_000,
        send_to_logfire=False,
    )


@pytest.fixture
def recorder(data_file: Path) -> Recorder:
    """Recorder writing to the temporary log file."""
    return Recorder(data_file, max_size=1_000_000)


@pytest.fixture
def client(settings: BlitzumfrageSettings, recorder: Recorder) -> Iterator[TestClient]:
    """Test client for an app sharing the ``recorder`` fixture."""
    app = create_app(settings, recorder=recorder)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def valid_payload() -> dict[str, Any]:
    """A submission accepted by every constraint."""
    return {"name": "Alice", "child": "Bob", "amount": 5}
