"""
Error handling middleware for the application.

This module maps repository exceptions and validation failures to HTTP
responses, ensuring consistent error bodies across all endpoints.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_tracker.exceptions import NotFoundError, UnexpectedError
from todo_tracker.utils.api_response import error_response

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
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Handle request validation errors."""
        error_messages = []
        for error in exc.errors():
            loc = " -> ".join(str(loc_item) for loc_item in error["loc"])
            error_messages.append(f"{loc}: {error['msg']}")

        logger.warning(f"Validation error: {', '.join(error_messages)}")
        return JSONResponse(
            content=error_response(
                message="Validation error",
                code="validation_error",
                details={"errors": error_messages}
            ),
            status_code=422
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        """Handle missing todos and labels."""
        logger.info(f"{request.method} {request.url.path}: {exc}")
        return JSONResponse(
            content=error_response(message=str(exc), code="not_found"),
            status_code=status.HTTP_404_NOT_FOUND
        )

    @app.exception_handler(UnexpectedError)
    async def unexpected_error_handler(request: Request, exc: UnexpectedError) -> JSONResponse:
        """Handle storage failures."""
        logger.error(f"{request.method} {request.url.path}: {exc.detail}")
        return JSONResponse(
            content=error_response(message="Unexpected error", code="unexpected_error"),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
