"""
Serializers for authentication requests and responses.

This module provides DRF serializers for:
- User model (read operations)
- Login/social-login responses (user plus session tokens)
- Request payloads for every AuthService operation

Related files:
    - models.py: User, LinkedAccount, Session
    - views.py: Views that use these serializers
    - services/: AuthService business logic

Security:
    - Password fields are write-only
    - New passwords go through Django's AUTH_PASSWORD_VALIDATORS
"""

from django.contrib.auth.password_validation import validate_password
from rest_framework import serializers

from authentication.identities import SOCIAL_PROVIDERS, DeviceInfo, build_identity
from authentication.models import DeviceType, User
from authentication.services import SessionService


class UserSerializer(serializers.ModelSerializer):
    """
    Serializer for User model (read operations).

    Used for the /api/v1/auth/me/ endpoint and embedded in login responses.
    """

    linked_providers = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            "id",
            "email",
            "is_email_verified",
            "status",
            "auth_method",
            "linked_providers",
            "device_id",
            "device_type",
            "date_joined",
        ]
        read_only_fields = fields

    def get_linked_providers(self, obj):
        """Return list of linked social providers."""
        return list(obj.linked_accounts.values_list("provider", flat=True))


class AuthenticatedUserSerializer(serializers.Serializer):
    """
    Response for a successful login: the user plus the session's tokens.

    Expects a User with `session` attached by AuthService.
    """

    def to_representation(self, instance):
        session = instance.session
        return {
            "user": UserSerializer(instance, context=self.context).data,
            "session": {
                "id": str(session.pk),
                "device_id": session.device_id,
                "device_type": session.device_type,
                "created_at": serializers.DateTimeField().to_representation(
                    session.created_at
                ),
            },
            "tokens": SessionService.issue_tokens(session),
        }


class DeviceSerializer(serializers.Serializer):
    """Device metadata accepted by login endpoints."""

    device_id = serializers.CharField(max_length=255, required=False, allow_blank=True)
    device_type = serializers.ChoiceField(
        choices=DeviceType.choices, required=False, allow_blank=True
    )
    fcm_token = serializers.CharField(max_length=512, required=False, allow_blank=True)

    def get_device(self) -> DeviceInfo:
        return DeviceInfo.from_data(self.validated_data)


class RegisterSerializer(serializers.Serializer):
    """Request body for registration."""

    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, style={"input_type": "password"})

    def validate_password(self, value):
        validate_password(value)
        return value


class LoginSerializer(DeviceSerializer):
    """Request body for email/password login."""

    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, style={"input_type": "password"})


class VerificationSerializer(serializers.Serializer):
    """Request body for one-time code verification."""

    id = serializers.UUIDField()
    code = serializers.CharField(max_length=12)


class ForgotPasswordSerializer(serializers.Serializer):
    email = serializers.EmailField()


class ResendCodeSerializer(serializers.Serializer):
    id = serializers.UUIDField()


class ResetPasswordSerializer(serializers.Serializer):
    """Request body for password reset with the emailed one-time code."""

    id = serializers.UUIDField()
    code = serializers.CharField(max_length=12)
    password = serializers.CharField(write_only=True, style={"input_type": "password"})

    def validate_password(self, value):
        validate_password(value)
        return value


class ChangePasswordSerializer(serializers.Serializer):
    """Request body for password change by an authenticated user."""

    old_password = serializers.CharField(write_only=True)
    new_password = serializers.CharField(write_only=True)

    def validate_new_password(self, value):
        validate_password(value, user=self.context.get("user"))
        return value


class SocialLoginSerializer(DeviceSerializer):
    """
    Request body for social login.

    `auth_method` selects the provider variant; `provider_user_id` is the
    provider's id for the user. `email` is optional because some providers
    only send it on the first login.
    """

    auth_method = serializers.ChoiceField(choices=[p.value for p in SOCIAL_PROVIDERS])
    provider_user_id = serializers.CharField(max_length=255)
    email = serializers.EmailField(required=False, allow_null=True, allow_blank=True)

    def validate(self, attrs):
        attrs["identity"] = build_identity(attrs["auth_method"], attrs["provider_user_id"])
        attrs["email"] = attrs.get("email") or None
        return attrs
