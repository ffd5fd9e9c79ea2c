"""
Helper functions for common infrastructure operations.

This module provides domain-agnostic utility functions for:
- One-time numeric code generation
- UUID validation

These utilities are pure infrastructure - they have no knowledge
of domain concepts like users or accounts.

Usage:
    from core.helpers import generate_numeric_code, validate_uuid

    code = generate_numeric_code(4)
    is_valid = validate_uuid(value)
"""

from __future__ import annotations

import secrets
import uuid


def generate_numeric_code(length: int = 4) -> str:
    """
    Generate a random fixed-width numeric code.

    The first digit is never zero, so the code survives a round trip
    through clients that treat it as an integer.

    Args:
        length: Number of digits (must be at least 1)

    Returns:
        String of `length` decimal digits

    Example:
        code = generate_numeric_code(4)  # e.g. "5821"
    """
    if length < 1:
        raise ValueError("length must be at least 1")
    low = 10 ** (length - 1)
    return str(low + secrets.randbelow(9 * low))


def validate_uuid(value: str) -> bool:
    """
    Check if string is a valid UUID.

    Args:
        value: String to validate

    Returns:
        True if valid UUID format

    Example:
        is_valid = validate_uuid("550e8400-e29b-41d4-a716-446655440000")  # True
    """
    try:
        uuid.UUID(str(value))
        return True
    except (ValueError, TypeError, AttributeError):
        return False
