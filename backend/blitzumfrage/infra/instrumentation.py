"""Centralized instrumentation for Blitzumfrage.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

# Standard library (alphabetical)
from typing import TYPE_CHECKING

# Third-party (alphabetical)
import logfire

# Local imports (core first, then alphabetical)
from ..core.constants import SERVICE_NAME

if TYPE_CHECKING:
    from fastapi import FastAPI

    from ..core.settings import BlitzumfrageSettings

__all__ = ("configure_instrumentation", "get_logger", "instrument_app")


def configure_instrumentation(settings: BlitzumfrageSettings) -> None:
    """Configure global instrumentation settings.

    This function should be called once at process startup, before the
    application is served.

    Args:
        settings: Runtime settings carrying environment and export options.
    """
    logfire.configure(
        service_name=SERVICE_NAME,
        environment=settings.environment,
        send_to_logfire=settings.send_to_logfire,
    )


def instrument_app(app: FastAPI) -> None:
    """Attach request spans to a FastAPI application."""
    logfire.instrument_fastapi(app)


def get_logger(name: str) -> logfire.Logfire:
    """Get a logger with component-specific settings.

    Args:
        name: Component name (e.g., 'services.recorder', 'web.app').

    Returns:
        Configured Logfire instance.
    """
    return logfire.with_settings(tags=[f"component:{name}"])
