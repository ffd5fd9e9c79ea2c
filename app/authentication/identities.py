"""
Social identities and login device metadata.

A SocialIdentity is the tagged form of "who the provider says this is": each
variant fixes its provider and carries that provider's user id. It is what
social login looks accounts up by, and what gets persisted as a
LinkedAccount row.

Usage:
    from authentication.identities import DeviceInfo, build_identity

    identity = build_identity("apple", "001234.abcd")
    isinstance(identity, AppleIdentity)  # True
    identity.provider                    # Provider.APPLE

    device = DeviceInfo(device_id="abc", device_type="ios", fcm_token="tok")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from core.exceptions import ValidationError
from authentication.models import Provider


@dataclass(frozen=True)
class DeviceInfo:
    """Client device a login comes from."""

    device_id: str = ""
    device_type: str = ""
    fcm_token: str = ""

    @classmethod
    def from_data(cls, data: dict) -> DeviceInfo:
        return cls(
            device_id=data.get("device_id") or "",
            device_type=data.get("device_type") or "",
            fcm_token=data.get("fcm_token") or "",
        )


@dataclass(frozen=True)
class SocialIdentity:
    """Base variant; concrete subclasses set the provider tag."""

    provider: ClassVar[Provider]
    provider_user_id: str

    def lookup(self) -> dict:
        """LinkedAccount filter kwargs for this identity."""
        return {"provider": self.provider, "provider_user_id": self.provider_user_id}


@dataclass(frozen=True)
class GoogleIdentity(SocialIdentity):
    provider: ClassVar[Provider] = Provider.GOOGLE


@dataclass(frozen=True)
class AppleIdentity(SocialIdentity):
    """Apple shares the user's email on the first sign-in only."""

    provider: ClassVar[Provider] = Provider.APPLE


@dataclass(frozen=True)
class FacebookIdentity(SocialIdentity):
    """Facebook accounts may have been created without an email address."""

    provider: ClassVar[Provider] = Provider.FACEBOOK


IDENTITY_VARIANTS: dict[Provider, type[SocialIdentity]] = {
    variant.provider: variant
    for variant in (GoogleIdentity, AppleIdentity, FacebookIdentity)
}

SOCIAL_PROVIDERS = tuple(IDENTITY_VARIANTS)


def build_identity(provider: str, provider_user_id: str) -> SocialIdentity:
    """
    Build the identity variant for a provider.

    Raises:
        ValidationError: For the email method, unknown providers, or a
            missing provider user id
    """
    try:
        variant = IDENTITY_VARIANTS[Provider(provider)]
    except (KeyError, ValueError):
        raise ValidationError(
            f"Unsupported social provider: {provider}",
            error_code="UNSUPPORTED_PROVIDER",
        ) from None

    provider_user_id = (provider_user_id or "").strip()
    if not provider_user_id:
        raise ValidationError(
            "Provider user id is required",
            error_code="PROVIDER_ID_REQUIRED",
        )
    return variant(provider_user_id=provider_user_id)
