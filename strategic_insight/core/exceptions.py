"""
Custom exceptions for the Strategic Insight API
"""

from fastapi import HTTPException, status


class InsightException(Exception):
    """Base exception for Strategic Insight"""
    pass


class ConfigurationError(InsightException):
    """Required configuration is missing or invalid"""
    pass


class ValidationError(InsightException):
    """Bad or missing input"""
    pass


class MissingOwnerError(ValidationError):
    """Owner user ID was not supplied"""
    pass


class UnsupportedFormatError(ValidationError):
    """File extension is not one of the accepted document formats"""
    pass


class PayloadTooLargeError(ValidationError):
    """Uploaded file exceeds the size limit"""
    pass


class NotFoundError(InsightException):
    """Resource not found"""
    pass


class StorageWriteError(InsightException):
    """Uploaded bytes could not be written to storage"""
    pass


class ExtractionError(InsightException):
    """Text could not be extracted from a stored file"""
    pass


class GenerationError(InsightException):
    """The text-generation service call failed"""
    pass


class PersistenceError(InsightException):
    """Database write failed"""
    pass


# HTTP exception helpers
def http_404_not_found(detail: str = "Resource not found"):
    """Raise 404 Not Found"""
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=detail,
    )


def http_400_bad_request(detail: str = "Bad request"):
    """Raise 400 Bad Request"""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=detail,
    )


def http_409_conflict(detail: str = "Resource conflict"):
    """Raise 409 Conflict"""
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail=detail,
    )
