"""
Domain exceptions and the FastAPI handlers that turn them into JSON responses.
"""
import logging
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class CreatorFlowError(Exception):
    """Base class for errors raised by the service layer."""
    status_code = status.HTTP_400_BAD_REQUEST
    code = "bad_request"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(CreatorFlowError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"


class CategoryExistsError(CreatorFlowError):
    status_code = status.HTTP_409_CONFLICT
    code = "category_exists"

    def __init__(self, name: str):
        super().__init__("Category already exists")
        self.name = name


class InvalidCategoryError(CreatorFlowError):
    code = "invalid_category"


class InvalidPaymentError(CreatorFlowError):
    code = "invalid_payment"


class InvalidProgressError(CreatorFlowError):
    code = "invalid_progress"


class DuplicateUserError(CreatorFlowError):
    status_code = status.HTTP_409_CONFLICT
    code = "duplicate_user"


class InvalidTransitionError(CreatorFlowError):
    status_code = status.HTTP_409_CONFLICT
    code = "invalid_transition"


class PersistenceError(CreatorFlowError):
    """A document store write failed and was rolled back."""
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    code = "persistence_error"


def creatorflow_error_handler(request: Request, exc: CreatorFlowError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "detail": exc.message},
    )


def server_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "internal_error", "detail": "An unexpected error occurred."},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the domain error handlers to the application."""
    app.add_exception_handler(CreatorFlowError, creatorflow_error_handler)
    app.add_exception_handler(Exception, server_error_handler)
