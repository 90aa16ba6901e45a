"""Application error taxonomy.

Every error carries the HTTP status and the ``type`` string used in the JSON
error envelope, so handlers in ``middleware.error_handler`` stay generic.
"""

from enum import Enum


class AppError(Exception):
    status_code = 500
    error_type = "internal_error"
    default_message = "An unexpected error occurred"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    error_type = "validation_error"
    default_message = "Invalid request"


class Unauthenticated(AppError):
    status_code = 401
    error_type = "authentication_error"
    default_message = "Invalid or expired token"


class NotFound(AppError):
    status_code = 404
    error_type = "not_found"
    default_message = "Not found"


class ConflictError(AppError):
    # Duplicate registrations surface as a plain 400
    status_code = 400
    error_type = "conflict"
    default_message = "Resource already exists"


class InternalError(AppError):
    pass


class ProviderErrorKind(str, Enum):
    QUOTA_EXCEEDED = "quota_exceeded"
    OTHER = "other"


class ProviderError(AppError):
    """Failure reported by the completion provider."""

    status_code = 500
    error_type = "provider_error"
    default_message = "Failed to get AI guidance"

    def __init__(self, kind: ProviderErrorKind, message: str | None = None):
        self.kind = kind
        # Set by the orchestrator so a failed hint request still reports its count
        self.hint_count: int | None = None
        super().__init__(message)

    @property
    def is_quota(self) -> bool:
        return self.kind is ProviderErrorKind.QUOTA_EXCEEDED
