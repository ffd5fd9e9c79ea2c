"""
Custom managers for authentication models.

This module provides:
- UserManager: email-based user creation, plus social-only accounts
- SessionQuerySet: live/expired session filtering

Related files:
    - models.py: User and Session models that use these managers

Security:
    - Passwords are automatically hashed via set_password()
    - Email addresses are normalized (lowercase domain)
"""

from django.contrib.auth.models import BaseUserManager
from django.db import models
from django.utils import timezone


class UserManager(BaseUserManager):
    """
    Custom manager for User model with email-based authentication.

    Usage:
        # Create a regular user (pending until verified)
        user = User.objects.create_user(
            email='user@example.com',
            password='securepassword'
        )

        # Create an account from a social login (email may be missing)
        user = User.objects.create_social_user(
            auth_method=Provider.APPLE,
            email=None,
        )

        # Create a superuser
        admin = User.objects.create_superuser(
            email='admin@example.com',
            password='adminpassword'
        )
    """

    def create_user(self, email, password=None, **extra_fields):
        """
        Create and save a regular user with the given email and password.

        Args:
            email: User's email address (required)
            password: User's password (optional for social users)
            **extra_fields: Additional fields to set on the user

        Returns:
            User: The created user instance

        Raises:
            ValueError: If email is not provided
        """
        if not email:
            raise ValueError("The Email field must be set")

        email = self.normalize_email(email)

        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)

        user = self.model(email=email, **extra_fields)

        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()

        user.save(using=self._db)
        return user

    def create_social_user(self, auth_method, email=None, **extra_fields):
        """
        Create an account on first social login.

        Social accounts are pre-verified and active and never get a usable
        password. The email is optional because some providers only share it
        once, or never.

        Args:
            auth_method: Provider the account is created with
            email: Email reported by the provider, if any
            **extra_fields: Additional fields to set on the user

        Returns:
            User: The created user instance
        """
        from authentication.models import AccountStatus

        extra_fields.setdefault("is_email_verified", True)
        extra_fields.setdefault("status", AccountStatus.ACTIVE)

        user = self.model(
            email=self.normalize_email(email) if email else None,
            auth_method=auth_method,
            **extra_fields,
        )
        user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        """
        Create and save a superuser with the given email and password.

        Superusers skip the verification flow and start active.

        Raises:
            ValueError: If is_staff or is_superuser is not True
        """
        from authentication.models import AccountStatus

        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("is_email_verified", True)
        extra_fields.setdefault("status", AccountStatus.ACTIVE)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self.create_user(email, password, **extra_fields)

    def get_by_email(self, email):
        """Case-insensitive lookup by email; None when absent."""
        if not email:
            return None
        return self.filter(email__iexact=email.strip()).first()

    def is_email_taken(self, email) -> bool:
        """Whether any account already uses this email (case-insensitive)."""
        return bool(email) and self.filter(email__iexact=email.strip()).exists()


class SessionQuerySet(models.QuerySet):
    """QuerySet for Session with live/expired filters."""

    def active(self):
        """Sessions that have not been expired."""
        return self.filter(expired_at__isnull=True)

    def expire(self) -> int:
        """Mark every session in the queryset expired; returns the count."""
        now = timezone.now()
        return self.active().update(expired_at=now, updated_at=now)
