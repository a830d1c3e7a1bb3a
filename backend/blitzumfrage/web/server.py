"""Process lifecycle for the Blitzumfrage server.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Standard library (alphabetical)
import os
import signal
from typing import TYPE_CHECKING

# Third-party (alphabetical)
import logfire
import uvicorn

# Local imports (core first, then alphabetical)
from ..core.settings import BlitzumfrageSettings, load_settings
from ..infra.instrumentation import configure_instrumentation, get_logger, instrument_app
from .app import create_app

if TYPE_CHECKING:
    from types import FrameType

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("GracefulServer", "serve", "main")

logger = get_logger("web.server")


# =============================================================================
# Section 11: Classes
# =============================================================================
class GracefulServer(uvicorn.Server):
    """Uvicorn server that drains on the first signal and aborts on a second SIGINT."""

    def handle_exit(self, sig: int, frame: FrameType | None) -> None:
        logger.info("Received operating system signal: {signal}", signal=signal.Signals(sig).name)
        if self.should_exit and sig == signal.SIGINT:
            logger.warn("Process aborted")
            logfire.force_flush()
            os._exit(1)
        if not self.should_exit:
            logger.info("Server is shutting down")
        super().handle_exit(sig, frame)
        # Handled signals must not be re-raised once serving ends.
        captured = getattr(self, "_captured_signals", None)
        if captured is not None:
            captured.clear()


# =============================================================================
# Section 12: Functions
# =============================================================================
def serve(settings: BlitzumfrageSettings | None = None) -> None:
    """Run the server until a signal stops it.

    In-flight requests are drained before returning.
    """
    settings = settings or load_settings()
    configure_instrumentation(settings)

    app = create_app(settings)
    instrument_app(app)

    config = uvicorn.Config(app, host=settings.host, port=settings.port)
    server = GracefulServer(config)

    logger.info('Server starts and listens on "{address}"', address=settings.address)
    server.run()
    if not server.started:
        logger.error("Server exited before it started listening")
        raise SystemExit(1)
    logger.info("Server is down")


def main() -> None:
    """Console entry point."""
    serve()
