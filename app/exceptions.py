from typing import Any, Mapping, Optional


class AppError(Exception):
    """Base class for errors raised by services and translated at the API boundary.

    Attributes:
        message: human-readable message, safe to show to the client
        details: optional mapping with extra context (field errors, record ids)
        code: machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Internal error"
    default_code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(AppError):
    """Raised when input data is invalid or a precondition for a service call is not met."""

    http_status = 400
    default_message = "Invalid input"
    default_code = "VALIDATION_ERROR"


class DuplicateUsernameError(ServiceValidationError):
    default_message = "Username already exists"
    default_code = "DUPLICATE_USERNAME"


class AlreadyActiveError(ServiceValidationError):
    """Raised when a user starts a fast while another one is still running."""

    default_message = "Already have an active fast"
    default_code = "ALREADY_ACTIVE"


class FastNotActiveError(ServiceValidationError):
    """Raised when ending, or logging a meal against, a fast that has ended."""

    default_message = "Fast has already ended"
    default_code = "FAST_NOT_ACTIVE"


class NotFoundError(AppError):
    """Raised when a requested resource was not found."""

    http_status = 404
    default_message = "Not found"
    default_code = "NOT_FOUND"


class UnauthorizedError(AppError):
    """Raised when the request carries no valid session."""

    http_status = 401
    default_message = "Authentication required"
    default_code = "AUTHENTICATION_REQUIRED"


class InvalidCredentialsError(UnauthorizedError):
    # Same message for unknown user and wrong password.
    default_message = "Invalid username or password"
    default_code = "INVALID_CREDENTIALS"


class NotOwnerError(AppError):
    """Raised when a fast belongs to another user."""

    http_status = 403
    default_message = "Not authorized to access this fast"
    default_code = "NOT_OWNER"
