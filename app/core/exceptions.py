"""
Base exception classes for application-wide error handling.

This module provides a standardized exception hierarchy that enables:
- Consistent error responses across the application
- Machine-readable error codes for client handling
- An HTTP status code carried by every error

Exception Hierarchy:
    BaseApplicationError (base, 500)
    ├── ValidationError - Input validation failures (400)
    ├── AuthenticationError - Account may not authenticate (401)
    └── NotFoundError - Resource not found (404)

Usage:
    from core.exceptions import ValidationError, NotFoundError

    # Raise with message only
    raise NotFoundError("account not found")

    # Raise with error code for client handling
    raise ValidationError("Email already taken", error_code="EMAIL_TAKEN")

    # Convert to dict for API response
    try:
        ...
    except BaseApplicationError as e:
        return Response(e.to_dict(), status=e.status_code)

Note:
    These exceptions are for domain/business logic errors. Views do not need
    to catch them: core.views.api_exception_handler (configured as DRF's
    EXCEPTION_HANDLER) renders them with their status code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any


class BaseApplicationError(Exception):
    """
    Base exception for all application-specific errors.

    Provides a consistent interface for error handling across the application.
    All custom exceptions should inherit from this class.

    Attributes:
        message: Human-readable error description
        status_code: HTTP status the error maps to
        error_code: Machine-readable code for client-side handling
        details: Additional error context (field errors, metadata, etc.)
        is_operational: False for programming errors that should page someone

    Example:
        try:
            AuthService.verification(user_id, code)
        except NotFoundError as e:
            logger.warning(f"Verification failed: {e.error_code}")
            return Response(e.to_dict(), status=e.status_code)
    """

    default_status_code: int = 500
    default_error_code: str = "APPLICATION_ERROR"

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
        status_code: int | None = None,
        is_operational: bool = True,
    ):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description
            error_code: Machine-readable error code (defaults to class default)
            details: Additional error context
            status_code: HTTP status (defaults to class default)
            is_operational: Whether this is an expected, handled failure
        """
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        self.status_code = status_code or self.default_status_code
        self.is_operational = is_operational
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dict with error, error_code, and details keys

        Example:
            {
                "error": "account not found",
                "error_code": "NOT_FOUND",
            }
        """
        result: dict[str, Any] = {
            "error": self.message,
            "error_code": self.error_code,
        }
        if self.details:
            result["details"] = self.details
        return result

    def __str__(self) -> str:
        """Return string representation with error code."""
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code!r}, "
            f"error_code={self.error_code!r}, "
            f"details={self.details!r})"
        )


class ValidationError(BaseApplicationError):
    """
    Raised when input validation fails.

    Use for:
    - Invalid field formats
    - Business rule violations (email already registered, etc.)

    Example:
        raise ValidationError("Email already taken", error_code="EMAIL_TAKEN")

    Note:
        For DRF serializer validation, use DRF's built-in validation.
        Use this for service-layer validation logic.
    """

    default_status_code: int = 400
    default_error_code: str = "VALIDATION_ERROR"


class AuthenticationError(BaseApplicationError):
    """
    Raised when an account exists but may not authenticate.

    Use for:
    - Unverified, inactive, deleted or blocked accounts
    - Operations on behalf of a user that no longer exists

    Example:
        raise AuthenticationError(
            "Your account has been blocked. Please contact your admin.",
            error_code="ACCOUNT_BLOCKED",
        )
    """

    default_status_code: int = 401
    default_error_code: str = "UNAUTHORIZED"


class NotFoundError(BaseApplicationError):
    """
    Raised when a requested resource is not found.

    Also used for credential failures so that callers cannot tell a missing
    account from a wrong password.

    Example:
        user = User.objects.filter(email=email).first()
        if not user:
            raise NotFoundError("account not found")
    """

    default_status_code: int = 404
    default_error_code: str = "NOT_FOUND"

