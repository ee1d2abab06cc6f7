# server/mindvault/errors.py

from typing import Optional


class MindVaultError(Exception):
    """Base class for errors that map onto an API response"""

    status_code = 500
    code = "INTERNAL_ERROR"
    default_message = "An unexpected error occurred"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None, code: Optional[str] = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code
        super().__init__(self.message)


class ValidationError(MindVaultError):
    status_code = 400
    code = "VALIDATION_ERROR"
    default_message = "Invalid request"


class ConflictError(MindVaultError):
    status_code = 409
    code = "CONFLICT"
    default_message = "Resource already exists"


class NotFoundError(MindVaultError):
    # Raised for both missing and foreign-owned resources.
    status_code = 404
    code = "NOT_FOUND"
    default_message = "The requested resource was not found"


class AuthError(MindVaultError):
    status_code = 401
    code = "UNAUTHORIZED"
    default_message = "Authentication required"

    @classmethod
    def missing(cls) -> "AuthError":
        return cls("Access token required", 401, "MISSING_TOKEN")

    @classmethod
    def invalid(cls) -> "AuthError":
        return cls("Invalid or expired token", 403, "INVALID_TOKEN")

    @classmethod
    def bad_credentials(cls) -> "AuthError":
        return cls("Invalid username or password", 401, "INVALID_CREDENTIALS")
