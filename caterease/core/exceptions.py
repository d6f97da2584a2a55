# caterease/core/exceptions.py
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class CaterEaseError(Exception):
    """Base class for errors raised by domain operations."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class InvalidInputError(CaterEaseError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotAuthenticatedError(CaterEaseError):
    status_code = status.HTTP_401_UNAUTHORIZED


class PermissionDeniedError(CaterEaseError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(CaterEaseError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(CaterEaseError):
    status_code = status.HTTP_409_CONFLICT


async def caterease_error_handler(request: Request, exc: CaterEaseError):
    if isinstance(exc, PermissionDeniedError):
        logger.warning("%s %s denied: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


async def internal_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CaterEaseError, caterease_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)
