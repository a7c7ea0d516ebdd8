"""
Translation of domain exceptions into HTTP errors.
"""

from fastapi import HTTPException, status

from core.exceptions import (
    ApplicationException,
    DuplicateException,
    ExternalServiceException,
    NotFoundException,
    UnauthorizedException,
    ValidationException,
)

STATUS_BY_EXCEPTION = [
    (NotFoundException, status.HTTP_404_NOT_FOUND),
    (DuplicateException, status.HTTP_409_CONFLICT),
    (UnauthorizedException, status.HTTP_401_UNAUTHORIZED),
    (ValidationException, status.HTTP_400_BAD_REQUEST),
    # Upstream failures are reported to callers as a conflict
    (ExternalServiceException, status.HTTP_409_CONFLICT),
]


def to_http_exception(error: ApplicationException) -> HTTPException:
    for exception_class, status_code in STATUS_BY_EXCEPTION:
        if isinstance(error, exception_class):
            headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None
            return HTTPException(status_code=status_code, detail=error.message, headers=headers)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=error.message)


def no_fields_to_update() -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No fields to update")
