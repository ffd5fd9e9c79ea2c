"""
Core Application - Infrastructure & Base Classes

This app contains infrastructure code that provides a foundation
for the domain apps:

- Generic, reusable base classes (no domain-specific logic)
- Clear extension points for domain apps
- Infrastructure concerns separated from business logic

Models (import from core.models):
    - BaseModel: Abstract model with timestamps (created_at, updated_at)

Model Mixins (import from core.model_mixins):
    - UUIDPrimaryKeyMixin: UUID as primary key

Exceptions (import from core.exceptions):
    - BaseApplicationError: Base exception with status and error codes
    - ValidationError: Input validation failures (400)
    - AuthenticationError: Account may not authenticate (401)
    - NotFoundError: Resource not found (404)

Helpers (import from core.helpers):
    - generate_numeric_code: One-time numeric codes
    - validate_uuid: UUID validation

Note:
    - Business logic should NOT go here. Extend core classes in your domain apps.
    - Django models and model mixins are NOT imported here to avoid AppRegistryNotReady
      errors. Import them directly from their modules.
"""

# Exceptions (no Django model dependencies)
from .exceptions import (
    AuthenticationError,
    BaseApplicationError,
    NotFoundError,
    ValidationError,
)

# Helpers (no Django model dependencies)
from .helpers import (
    generate_numeric_code,
    validate_uuid,
)

__all__ = [
    # Exceptions
    "BaseApplicationError",
    "ValidationError",
    "AuthenticationError",
    "NotFoundError",
    # Helpers
    "generate_numeric_code",
    "validate_uuid",
]
