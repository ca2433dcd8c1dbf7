"""Translation of domain errors into HTTP responses."""

import logfire
from fastapi import HTTPException, status

from linkboard.domain.error import (
    BackingStoreError,
    DomainError,
    InvalidStateError,
    InvalidTransitionError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from linkboard.domain.service import JWTService

_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (UnauthorizedError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidTransitionError, status.HTTP_409_CONFLICT),
    (InvalidStateError, status.HTTP_409_CONFLICT),
]


def domain_error_to_http(error: DomainError, operation: str) -> HTTPException:
    """Build the HTTPException for a domain error, logging it on the way.

    Args:
        error: Raised domain error
        operation: Short name of the failing operation, for logs

    Returns:
        HTTPException to raise from the route
    """
    if isinstance(error, BackingStoreError):
        logfire.error(
            f"{operation} failed: backing store unavailable",
            error=str(error),
            cause=repr(error.__cause__),
        )
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Storage temporarily unavailable",
        )

    logfire.warn(f"{operation} refused", error=str(error), error_type=type(error).__name__)

    if isinstance(error, ValidationError):
        return HTTPException(
            status_code=422,  # Unprocessable content
            detail={"field": error.field, "message": error.message},
        )

    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))

    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


def unexpected_error_to_http(error: Exception, operation: str) -> HTTPException:
    """Log an unexpected failure and hide its details from the client."""
    logfire.error(
        f"Unexpected error during {operation}",
        error=str(error),
        error_type=type(error).__name__,
    )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {operation}",
    )


def require_user_id(jwt_service: JWTService, auth_token: str | None) -> str:
    """Extract the caller's user ID from the session cookie.

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user_id
