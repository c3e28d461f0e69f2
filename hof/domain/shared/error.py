"""Error hierarchy for Hall of Fame.

Error layers:
- HofError: Base class for all Hall of Fame errors
- DomainError: Authentication, payload and lookup failures (4xx responses)
- InfrastructureError: Storage and configuration failures (503 responses)

These errors are mapped to HTTP responses by the global exception handler in app.py.
"""


class HofError(Exception):
    """Base class for all Hall of Fame errors."""

    default_code: str | None = None

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.default_code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (request-level failures - typically 4xx)
# =============================================================================


class DomainError(HofError):
    """Base class for domain errors."""


class NotFoundError(DomainError):
    """Report (or route) not found."""

    default_code = "NotFound"


class InvalidPayloadError(DomainError):
    """Malformed JSON, missing required field, bad date or bad path id."""

    default_code = "InvalidPayload"

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class AuthenticationError(DomainError):
    """Missing or unknown admin key."""

    default_code = "Unauthorized"


class AuthorizationError(DomainError):
    """Principal not allowed to run this handler."""


# =============================================================================
# Infrastructure Errors (system-level failures - typically 503)
# =============================================================================


class InfrastructureError(HofError):
    """Base class for infrastructure/system errors."""


class StorageError(InfrastructureError):
    """Storage engine failed (I/O, corruption, driver error)."""

    default_code = "StorageError"


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
