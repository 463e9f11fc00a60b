"""Centralized failure and exception handling for the FastAPI application.

Identity operations return outcomes instead of raising; this module maps
their failure kinds to HTTP responses with the same body format used for
unexpected exceptions.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from recipebook.presentation.api.schemas import ErrorResponse, UserResponse
from recipebook_identity import Failure, FailureKind, UserProjection

logger = logging.getLogger(__name__)

INTERNAL_ERROR_CODE = "INTERNAL_ERROR"

FAILURE_KIND_TO_STATUS: dict[FailureKind, int] = {
    FailureKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    FailureKind.USERNAME_TAKEN: status.HTTP_409_CONFLICT,
    FailureKind.PASSWORD_MISMATCH: status.HTTP_400_BAD_REQUEST,
    FailureKind.UNKNOWN: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for_failure(failure: Failure) -> int:
    return FAILURE_KIND_TO_STATUS.get(
        failure.kind,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def failure_response(
    failure: Failure,
    user: UserProjection | None = None,
) -> JSONResponse:
    """Create a standardized error response for a failed outcome."""
    body = ErrorResponse(
        detail=failure.message,
        code=failure.kind.value,
        user=UserResponse.from_projection(user) if user else None,
    )
    return JSONResponse(
        status_code=status_for_failure(failure),
        content=jsonable_encoder(body, exclude_none=True),
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions with consistent error format."""
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "An internal error occurred",
                "code": INTERNAL_ERROR_CODE,
            },
        )
