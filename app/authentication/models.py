"""
Authentication models.

This module defines the core authentication models:
- User: Custom user model with email-based authentication and account status
- LinkedAccount: Social provider identities linked to a user
- Session: Device/login records created on successful authentication

Related files:
    - managers.py: Custom user manager and session queryset
    - services/: AuthService and SessionService business logic
    - identities.py: SocialIdentity variants persisted as LinkedAccount rows

Security:
    - User passwords hashed with Django's configured password hasher
    - Social-only accounts get an unusable password
    - Access tokens are bound to a Session and die with it
"""

from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin
from django.conf import settings
from django.db import models

from core.models import BaseModel
from core.model_mixins import UUIDPrimaryKeyMixin
from authentication.managers import SessionQuerySet, UserManager


class AccountStatus(models.TextChoices):
    """
    Lifecycle status of an account.

    Only ACTIVE accounts may log in; every other status blocks login.
    Accounts are never hard-deleted, they move to DELETED instead.
    """

    PENDING = "pending", "Pending"
    ACTIVE = "active", "Active"
    INACTIVE = "inactive", "Inactive"
    DELETED = "deleted", "Deleted"
    BLOCKED = "blocked", "Blocked"


class Provider(models.TextChoices):
    """Authentication methods an account can be created or linked with."""

    EMAIL = "email", "Email"
    GOOGLE = "google", "Google"
    APPLE = "apple", "Apple"
    FACEBOOK = "facebook", "Facebook"


class DeviceType(models.TextChoices):
    """Client platforms a session can be opened from."""

    IOS = "ios", "iOS"
    ANDROID = "android", "Android"
    WEB = "web", "Web"


class User(UUIDPrimaryKeyMixin, AbstractBaseUser, PermissionsMixin):
    """
    Custom User model using email as the primary identifier.

    Fields:
        email: Primary identifier, unique; empty for social accounts whose
            provider never shared an address
        is_email_verified: Whether the one-time code has been confirmed
        status: AccountStatus gating login eligibility
        code: Outstanding one-time code (blank when none)
        auth_method: Provider the account was created with
        device_id, device_type, fcm_token: Most recent login device
        is_staff: Whether the user can access Django admin
        date_joined: When the user account was created
        updated_at: When the user record was last modified

    Usage:
        user = User.objects.create_user(
            email='user@example.com',
            password='securepassword'
        )
        user.is_usable  # False until verified and active
    """

    email = models.EmailField(
        unique=True,
        null=True,
        blank=True,
        max_length=254,
        help_text="User's email address (primary identifier)",
    )

    is_email_verified = models.BooleanField(
        default=False,
        help_text="Whether the user's email has been verified",
    )
    status = models.CharField(
        max_length=20,
        choices=AccountStatus.choices,
        default=AccountStatus.PENDING,
        db_index=True,
        help_text="Account lifecycle status",
    )
    code = models.CharField(
        max_length=12,
        blank=True,
        default="",
        help_text="Outstanding one-time code for verification or password reset",
    )
    auth_method = models.CharField(
        max_length=20,
        choices=Provider.choices,
        default=Provider.EMAIL,
        help_text="Authentication method the account was created with",
    )

    # Most recent login device
    device_id = models.CharField(max_length=255, blank=True, default="")
    device_type = models.CharField(
        max_length=20,
        choices=DeviceType.choices,
        blank=True,
        default="",
    )
    fcm_token = models.CharField(max_length=512, blank=True, default="")

    is_staff = models.BooleanField(
        default=False,
        help_text="Whether the user can access the admin site.",
    )

    date_joined = models.DateTimeField(
        auto_now_add=True,
        help_text="When the user account was created",
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="When the user record was last modified",
    )

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = []

    objects = UserManager()

    class Meta:
        verbose_name = "user"
        verbose_name_plural = "users"
        ordering = ["-date_joined"]

    def __str__(self):
        """Return the user's email, or the id for email-less accounts."""
        return self.email or str(self.pk)

    @property
    def is_active(self):
        """Django's auth flag, derived from the account status."""
        return self.status == AccountStatus.ACTIVE

    @property
    def is_usable(self):
        """An account is usable only when verified and active."""
        return self.is_email_verified and self.status == AccountStatus.ACTIVE

    def record_device(self, device) -> None:
        """Copy login device metadata onto the user (caller saves)."""
        self.device_id = device.device_id
        self.device_type = device.device_type
        self.fcm_token = device.fcm_token


class LinkedAccount(BaseModel):
    """
    A social provider identity linked to a user account.

    One row per (user, provider); the provider's user id is unique per
    provider, so the same social identity can never map to two accounts.

    Usage:
        # Find the account behind an Apple identity
        LinkedAccount.objects.select_related("user").get(
            provider=LinkedAccount.Provider.APPLE,
            provider_user_id="001234.abcd",
        )
    """

    Provider = Provider

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="linked_accounts",
        help_text="User this linked account belongs to",
    )

    provider = models.CharField(
        max_length=20,
        choices=Provider.choices,
        db_index=True,
        help_text="Authentication provider",
    )

    provider_user_id = models.CharField(
        max_length=255,
        help_text="Unique identifier from the provider",
    )

    class Meta:
        db_table = "authentication_linked_account"
        verbose_name = "linked account"
        verbose_name_plural = "linked accounts"
        constraints = [
            models.UniqueConstraint(
                fields=["provider", "provider_user_id"],
                name="unique_provider_user",
            ),
            models.UniqueConstraint(
                fields=["user", "provider"],
                name="unique_user_provider",
            ),
        ]

    def __str__(self):
        return f"{self.get_provider_display()} account for {self.user}"


class Session(UUIDPrimaryKeyMixin, BaseModel):
    """
    Device/login record created on successful authentication.

    A session is live while expired_at is null. Access tokens carry the
    session id, so expiring the session revokes them.

    Usage:
        Session.objects.active().filter(user=user)
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="sessions",
        help_text="User this session belongs to",
    )
    device_id = models.CharField(max_length=255, blank=True, default="")
    device_type = models.CharField(
        max_length=20,
        choices=DeviceType.choices,
        blank=True,
        default="",
    )
    fcm_token = models.CharField(max_length=512, blank=True, default="")
    expired_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="When this session was invalidated (null while live)",
    )

    objects = SessionQuerySet.as_manager()

    class Meta:
        db_table = "authentication_session"
        verbose_name = "session"
        verbose_name_plural = "sessions"
        ordering = ["-created_at"]
        indexes = [
            models.Index(
                fields=["user", "expired_at"],
                name="auth_session_user_expired_idx",
            ),
        ]

    def __str__(self):
        return f"Session {self.pk} for {self.user}"

    @property
    def is_live(self):
        return self.expired_at is None
