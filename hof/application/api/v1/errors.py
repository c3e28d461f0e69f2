"""Centralized error transformation for API routes.

Maps Hall of Fame errors (domain and infrastructure) to HTTPException responses.
"""

from typing import Any

import pydantic
from fastapi import HTTPException
from fastapi.exceptions import RequestValidationError

from hof.domain.shared.error import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    HofError,
    InfrastructureError,
    InvalidPayloadError,
    NotFoundError,
)

DOMAIN_ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    NotFoundError: 404,
    InvalidPayloadError: 400,
    AuthenticationError: 401,
    AuthorizationError: 403,
}


def map_hof_error(error: HofError) -> HTTPException:
    """Map a Hall of Fame error to an HTTPException.

    Args:
        error: The error to map.

    Returns:
        HTTPException with appropriate status code and detail.
    """
    detail: dict[str, Any] = {
        "code": error.code,
        "message": error.message,
    }

    if isinstance(error, InfrastructureError):
        # Infrastructure errors → 503 Service Unavailable
        return HTTPException(status_code=503, detail=detail)

    if isinstance(error, DomainError):
        status_code = DOMAIN_ERROR_STATUS_MAP.get(type(error), 400)
        if isinstance(error, InvalidPayloadError) and error.field is not None:
            detail["field"] = error.field
        if isinstance(error, AuthenticationError):
            return HTTPException(
                status_code=401,
                detail=detail,
                headers={"WWW-Authenticate": "Key"},
            )
        return HTTPException(status_code=status_code, detail=detail)

    # Fallback for unknown HofError subclasses
    return HTTPException(status_code=500, detail=detail)


def payload_error(
    exc: pydantic.ValidationError | RequestValidationError,
) -> InvalidPayloadError:
    """Collapse pydantic/FastAPI validation errors into one InvalidPayloadError.

    The first error names the field; the rest are appended to the message.
    """
    errors = exc.errors()
    if not errors:
        return InvalidPayloadError("Invalid payload")

    messages = []
    for err in errors:
        # FastAPI prefixes locations with "body"/"path"/"query"
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "path", "query")]
        where = ".".join(loc)
        messages.append(f"{where}: {err['msg']}" if where else err["msg"])

    first_loc = [str(p) for p in errors[0].get("loc", ()) if p not in ("body", "path", "query")]
    return InvalidPayloadError("; ".join(messages), field=first_loc[0] if first_loc else None)
