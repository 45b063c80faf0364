"""
Centralized Error Handling

Maps domain exceptions to HTTP responses with a consistent
{"error": <code>, "message": <text>} body and logs them.
Includes handlers for domain errors, database errors and anything else.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from typing import Dict, Any, Tuple
import logging
import traceback

from strategic_insight.core.exceptions import (
    InsightException,
    ConfigurationError,
    ValidationError,
    MissingOwnerError,
    UnsupportedFormatError,
    PayloadTooLargeError,
    NotFoundError,
    StorageWriteError,
    ExtractionError,
    GenerationError,
    PersistenceError,
)

logger = logging.getLogger(__name__)

# Most specific first: PayloadTooLargeError is also a ValidationError
ERROR_STATUS_MAP = [
    (PayloadTooLargeError, status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, "payload_too_large"),
    (MissingOwnerError, status.HTTP_400_BAD_REQUEST, "missing_owner"),
    (UnsupportedFormatError, status.HTTP_400_BAD_REQUEST, "unsupported_format"),
    (ValidationError, status.HTTP_400_BAD_REQUEST, "validation_error"),
    (NotFoundError, status.HTTP_404_NOT_FOUND, "not_found"),
    (StorageWriteError, status.HTTP_500_INTERNAL_SERVER_ERROR, "storage_write_failed"),
    (ExtractionError, status.HTTP_500_INTERNAL_SERVER_ERROR, "extraction_failed"),
    (PersistenceError, status.HTTP_500_INTERNAL_SERVER_ERROR, "persistence_failed"),
    (GenerationError, status.HTTP_502_BAD_GATEWAY, "generation_failed"),
    (ConfigurationError, status.HTTP_500_INTERNAL_SERVER_ERROR, "configuration_error"),
]


class ErrorHandler:
    """Centralized error handling"""

    @staticmethod
    def classify(error: InsightException) -> Tuple[int, str]:
        """
        Resolve status code and error code for a domain exception

        Args:
            error: Domain exception

        Returns:
            (HTTP status code, error code)
        """
        for exc_type, status_code, code in ERROR_STATUS_MAP:
            if isinstance(error, exc_type):
                return status_code, code
        return status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_error"

    @staticmethod
    def handle_insight_error(error: InsightException) -> Tuple[int, Dict[str, Any]]:
        """
        Handle domain errors

        Client errors are logged as warnings, server errors as errors.

        Args:
            error: Domain exception

        Returns:
            (HTTP status code, error dictionary)
        """
        status_code, code = ErrorHandler.classify(error)

        if status_code < 500:
            logger.warning(f"{type(error).__name__}: {error}")
        else:
            logger.error(f"{type(error).__name__}: {error}")

        return status_code, {
            "error": code,
            "message": str(error) or code.replace("_", " "),
        }

    @staticmethod
    def handle_database_error(error: Exception) -> Dict[str, Any]:
        """
        Handle database errors

        Args:
            error: Database exception

        Returns:
            Error dictionary with message and details
        """
        if isinstance(error, IntegrityError):
            logger.warning(f"Database integrity error: {error}")
            return {
                "error": "integrity_error",
                "message": "Data integrity violation. Duplicate entry or constraint failed."
            }

        elif isinstance(error, OperationalError):
            logger.error(f"Database operational error: {error}")
            return {
                "error": "database_error",
                "message": "Database connection or operational error."
            }

        else:
            logger.error(f"Database error: {error}")
            return {
                "error": "database_error",
                "message": "Database error occurred."
            }

    @staticmethod
    def handle_generic_error(error: Exception) -> Dict[str, Any]:
        """
        Handle generic/unknown errors

        Args:
            error: Exception

        Returns:
            Error dictionary
        """
        logger.error(f"Unexpected error: {error}\n{traceback.format_exc()}")
        return {
            "error": "internal_error",
            "message": "An unexpected error occurred. Please try again."
        }


# Global exception handlers for FastAPI

async def insight_error_handler(request: Request, exc: InsightException):
    """FastAPI exception handler for domain errors"""
    status_code, error_data = ErrorHandler.handle_insight_error(exc)
    return JSONResponse(status_code=status_code, content=error_data)


async def database_error_handler(request: Request, exc: SQLAlchemyError):
    """FastAPI exception handler for database errors"""
    error_data = ErrorHandler.handle_database_error(exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_data
    )


async def generic_error_handler(request: Request, exc: Exception):
    """FastAPI exception handler for generic errors"""
    error_data = ErrorHandler.handle_generic_error(exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_data
    )


# Setup function for FastAPI app
def setup_error_handlers(app):
    """
    Setup global error handlers for FastAPI app

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(InsightException, insight_error_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    logger.info("Error handlers registered")
