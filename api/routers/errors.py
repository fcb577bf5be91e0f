"""
Translation of application errors to HTTP responses.

Routers catch APPLICATION_ERRORS and re-raise http_error(e).
"""

from fastapi import HTTPException

from application.exceptions import (
    ConflictError,
    FieldValidationError,
    InvalidSessionTransitionError,
    NotFoundError,
    SessionClosedError,
)

APPLICATION_ERRORS = (
    NotFoundError,
    InvalidSessionTransitionError,
    SessionClosedError,
    ConflictError,
    FieldValidationError,
)


def http_error(error: Exception) -> HTTPException:
    """Map an application error to the matching HTTPException."""
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=404, detail=str(error))
    if isinstance(error, (SessionClosedError, ConflictError)):
        return HTTPException(status_code=409, detail=str(error))
    # Invalid transitions and field checks
    return HTTPException(status_code=400, detail=str(error))
