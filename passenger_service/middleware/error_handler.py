"""
Error handling middleware for the application.

This module provides centralized error handling for the application,
ensuring consistent error responses across all endpoints.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from passenger_service.utils.api_response import error_response
from passenger_service.exceptions import (
    NotFoundError,
    PassengerServiceError,
    StorageError,
    ValidationError,
)

# Configure logging
logger = logging.getLogger(__name__)


def add_error_handlers(app: FastAPI) -> None:
    """
    Add error handlers to the FastAPI application.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Handle HTTP exceptions."""
        logger.warning(f"HTTP exception: {exc.detail} (status_code={exc.status_code})")
        return JSONResponse(
            content=error_response(message=str(exc.detail), code="http_error"),
            status_code=exc.status_code
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Handle malformed request bodies and parameters."""
        error_messages = []
        for error in exc.errors():
            loc = " -> ".join(str(loc_item) for loc_item in error["loc"])
            error_messages.append(f"{loc}: {error['msg']}")

        logger.warning(f"Request validation error: {', '.join(error_messages)}")
        return JSONResponse(
            content=error_response(
                message="Request validation error",
                code="request_validation_error",
                details={"errors": error_messages}
            ),
            status_code=422
        )

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        """Handle domain validation errors."""
        logger.warning(f"Validation error: {str(exc)}")
        return JSONResponse(
            content=error_response(
                message="Validation error",
                code="validation_error",
                details={"errors": exc.errors}
            ),
            status_code=status.HTTP_400_BAD_REQUEST
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        """Handle lookups of records that do not exist."""
        logger.warning(f"Not found: {str(exc)}")
        return JSONResponse(
            content=error_response(message=str(exc) or "Not found", code="not_found"),
            status_code=status.HTTP_404_NOT_FOUND
        )

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        """Handle database errors."""
        logger.error(f"Storage error: {str(exc)}")
        return JSONResponse(
            content=error_response(message="Database error occurred", code="storage_error"),
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE
        )

    @app.exception_handler(PassengerServiceError)
    async def service_error_handler(request: Request, exc: PassengerServiceError) -> JSONResponse:
        """Handle any other service error."""
        logger.error(f"Service error: {str(exc)}")
        return JSONResponse(
            content=error_response(message=str(exc) or "Service error", code="service_error"),
            status_code=status.HTTP_400_BAD_REQUEST
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle all other exceptions."""
        logger.error(f"Unexpected error: {str(exc)}", exc_info=True)
        return JSONResponse(
            content=error_response(
                message="An unexpected error occurred",
                code="server_error",
                details={"type": type(exc).__name__}
            ),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
