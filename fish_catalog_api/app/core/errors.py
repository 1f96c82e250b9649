"""
Error taxonomy for the fish catalog.

Every request-level failure is a ``CatalogError`` subclass carrying the
HTTP status it maps to.  The exception handler registered in
``main.create_app`` turns them into plain-text responses, so nothing
raised here ever escapes a request handler.  ``ConfigurationError`` is
the only fatal condition and is raised at startup, never per request.
"""

from fastapi import Request, status
from fastapi.responses import PlainTextResponse


class ConfigurationError(RuntimeError):
    """Startup misconfiguration; the process must not serve requests."""


class CatalogError(Exception):
    """Base class for errors converted to an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "internal error"

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class FishNotFound(CatalogError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "fish not found"


class CatalogEmpty(CatalogError):
    """Raised when a random pick is requested from an empty store."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "no fishes in the catalog"


class UnsupportedMediaType(CatalogError):
    status_code = status.HTTP_415_UNSUPPORTED_MEDIA_TYPE
    default_message = "need content-type 'application/json'"


class MalformedBody(CatalogError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "malformed request body"


class BodyReadFailure(CatalogError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "failed to read request body"


async def catalog_error_handler(request: Request, exc: CatalogError) -> PlainTextResponse:
    """Convert a ``CatalogError`` into a plain-text response."""
    return PlainTextResponse(exc.message, status_code=exc.status_code)
