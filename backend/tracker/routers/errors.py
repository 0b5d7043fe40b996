"""
Map the core error taxonomy onto HTTP responses.

  ValidationError → 422
  DuplicateName   → 409
  StorageError    → 500

Every error body is {"error": <stable code>, "detail": <message>} so the
front-end can branch on `error` without parsing text.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from tracker.core.errors import (
    DuplicateName,
    StorageError,
    TrackerError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[TrackerError], int] = {
    ValidationError: 422,  # constant name differs across Starlette releases
    DuplicateName: status.HTTP_409_CONFLICT,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(exc: TrackerError) -> JSONResponse:
    status_code = _STATUS_BY_ERROR.get(
        type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.code, "detail": exc.message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(TrackerError)
    async def _tracker_error_handler(request: Request, exc: TrackerError) -> JSONResponse:
        logger.info(
            "%s %s failed: %s (%s)",
            request.method, request.url.path, exc.code, exc.message,
        )
        return error_response(exc)
