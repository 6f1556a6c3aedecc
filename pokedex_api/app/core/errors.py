"""
Error taxonomy and HTTP error rendering.

Services raise the exceptions defined here; the handlers registered by
``register_exception_handlers`` translate them (and FastAPI's own
validation and HTTP errors) into the error envelope::

    {"success": false, "message": "...", "error": "NotFoundError"}

Unexpected exceptions are logged with their traceback and reported as
a generic 500 so that internals never leak to clients.
"""

import logging
from typing import List, Union

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Something went wrong"


class PokedexError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = DEFAULT_ERROR_MESSAGE

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class UpstreamFetchError(PokedexError):
    """The reference data service could not be reached or returned garbage."""

    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "Failed to fetch data"


class ValidationError(PokedexError):
    """Malformed pagination or identifier input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class ConflictError(PokedexError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Resource already exists"


class NotFoundError(PokedexError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


def _capitalize(text: str) -> str:
    if not text:
        return text
    return text[0].upper() + text[1:]


def format_message(message: Union[str, List[str]]) -> Union[str, List[str]]:
    """Capitalise the first letter of a message or of each message in a list."""
    if isinstance(message, list):
        return [_capitalize(item) for item in message]
    return _capitalize(message)


def error_response(status_code: int, message: Union[str, List[str]], error: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": format_message(message), "error": error},
    )


def _validation_messages(exc: RequestValidationError) -> List[str]:
    messages = []
    for err in exc.errors():
        # ``loc`` starts with the source ("query", "path", "body").
        field_path = ".".join(str(part) for part in err.get("loc", ())[1:])
        text = err.get("msg", "invalid value")
        messages.append(f"{field_path} {text.lower()}" if field_path else text)
    return messages


async def handle_pokedex_error(request: Request, exc: PokedexError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return error_response(exc.status_code, exc.message, type(exc).__name__)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        _validation_messages(exc),
        ValidationError.__name__,
    )


async def handle_http_exception(request: Request, exc: HTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), type(exc).__name__)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        DEFAULT_ERROR_MESSAGE,
        "InternalServerError",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error envelope handlers to ``app``."""
    app.add_exception_handler(PokedexError, handle_pokedex_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(HTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
