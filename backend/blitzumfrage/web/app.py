"""FastAPI application for Blitzumfrage.

Provides the submission endpoint and serves the bundled static assets.
"""
from __future__ import annotations

from pathlib import Path
from typing import Annotated

from fastapi import Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles
from starlette.concurrency import run_in_threadpool
from starlette.requests import ClientDisconnect

from .._version import __version__
from ..core.constants import SAVE_PATH, SUCCESS_MESSAGE
from ..core.exceptions import BlitzumfrageError, BodyReadError, ClientInputError
from ..core.settings import BlitzumfrageSettings, load_settings
from ..infra.instrumentation import get_logger
from ..services.recorder import Recorder
from ..services.validator import Validator

__all__ = ['create_app', 'get_recorder', 'get_validator', 'read_body', 'PUBLIC_DIR']

PUBLIC_DIR = Path(__file__).parent / 'public'

logger = get_logger('web.app')


def get_recorder(request: Request) -> Recorder:
    """Recorder shared by every request of the application."""
    return request.app.state.recorder


def get_validator(request: Request) -> Validator:
    """Validator shared by every request of the application."""
    return request.app.state.validator


async def read_body(request: Request, validator: Validator) -> bytes:
    """Read the request body, stopping as soon as it passes the size limit."""
    content_length = request.headers.get('content-length', '')
    if content_length.isdigit():
        validator.check_size(int(content_length))

    body = bytearray()
    try:
        async for chunk in request.stream():
            body.extend(chunk)
            validator.check_size(len(body))
    except ClientDisconnect as exc:
        raise BodyReadError('client disconnected') from exc
    return bytes(body)


def create_app(
    settings: BlitzumfrageSettings | None = None,
    *,
    recorder: Recorder | None = None,
    validator: Validator | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    The recorder is created once here and owns the lock guarding the log
    file; pass one in to share it or to substitute it in tests.
    """
    settings = settings or load_settings()

    app = FastAPI(
        title='Blitzumfrage',
        description='Quick survey form that appends submissions to a JSON lines file',
        version=__version__,
    )
    app.state.settings = settings
    app.state.recorder = recorder or Recorder(
        settings.data_file,
        max_size=settings.data_file_max_size,
        size_guard=settings.size_guard,
    )
    app.state.validator = validator or Validator(max_body_bytes=settings.max_body_bytes)

    @app.exception_handler(BlitzumfrageError)
    async def handle_error(request: Request, exc: BlitzumfrageError) -> PlainTextResponse:
        """Turn a domain error into a plain-text error response."""
        if isinstance(exc, ClientInputError):
            logger.warn(
                'request rejected: {error}',
                error=str(exc),
                request_path=request.url.path,
                status_code=exc.status_code,
                **exc.context,
            )
        else:
            logger.error(
                'request failed: {error}',
                error=str(exc),
                request_path=request.url.path,
                status_code=exc.status_code,
                error_type=type(exc).__name__,
                **exc.context,
            )
        return PlainTextResponse(f'Error: {exc}', status_code=exc.status_code)

    @app.get('/health')
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {'status': 'healthy'}

    @app.post(SAVE_PATH, response_class=Response)
    async def save_data(
        request: Request,
        recorder: Annotated[Recorder, Depends(get_recorder)],
        validator: Annotated[Validator, Depends(get_validator)],
    ) -> Response:
        """Validate the body and append it to the log."""
        body = await read_body(request, validator)
        submission = validator(body)

        # A worker thread keeps running after a disconnect, so an append
        # holding the lock always completes.
        await run_in_threadpool(recorder.append, submission)

        logger.info(SUCCESS_MESSAGE)
        return Response(status_code=200)

    # Registered last so the routes above take precedence.
    app.mount('/', StaticFiles(directory=PUBLIC_DIR, html=True), name='public')

    return app
