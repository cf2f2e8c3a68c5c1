"""Interface layer errors.

Domain errors carry an ``ErrorKind``; this module turns them into HTTP
responses with a ``{"message", "type", "details"?}`` body.
"""

from typing import Any

from fastapi import HTTPException, status

from roost.domain.error import DomainError, ErrorKind

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_PARENT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.MAX_DEPTH_EXCEEDED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorKind.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
}


def error_detail(
    message: str, kind: ErrorKind, details: str | None = None
) -> dict[str, Any]:
    """Build the error body shared by every route."""
    detail: dict[str, Any] = {"message": message, "type": kind.value}
    if details is not None:
        detail["details"] = details
    return detail


def to_http_exception(error: DomainError) -> HTTPException:
    """Map a domain error to the matching HTTP exception.

    Args:
        error: Error raised by a use case or service

    Returns:
        HTTPException with status code and structured detail
    """
    return HTTPException(
        status_code=STATUS_BY_KIND.get(error.kind, status.HTTP_500_INTERNAL_SERVER_ERROR),
        detail=error_detail(str(error), error.kind),
    )


def internal_error(message: str, error: Exception) -> HTTPException:
    """Wrap an unexpected failure as a 500 response."""
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=error_detail(message, ErrorKind.INTERNAL_ERROR, details=str(error)),
    )


def unauthorized(message: str) -> HTTPException:
    """Build a 401 response for missing or invalid credentials."""
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=message,
    )
