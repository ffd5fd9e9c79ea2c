"""Authentication services package."""

from authentication.services.auth_service import AuthService
from authentication.services.session_service import SessionService

__all__ = ["AuthService", "SessionService"]
