"""Tests for social identity variants and device metadata."""

import dataclasses

import pytest

from authentication.identities import (
    SOCIAL_PROVIDERS,
    AppleIdentity,
    DeviceInfo,
    FacebookIdentity,
    GoogleIdentity,
    build_identity,
)
from authentication.models import Provider
from core.exceptions import ValidationError


class TestBuildIdentity:
    @pytest.mark.parametrize(
        ("provider", "variant"),
        [
            ("google", GoogleIdentity),
            ("apple", AppleIdentity),
            ("facebook", FacebookIdentity),
        ],
    )
    def test_builds_variant_for_provider(self, provider, variant):
        identity = build_identity(provider, "uid-1")

        assert isinstance(identity, variant)
        assert identity.provider == Provider(provider)
        assert identity.provider_user_id == "uid-1"

    def test_strips_provider_user_id(self):
        assert build_identity("google", "  uid-1 ").provider_user_id == "uid-1"

    @pytest.mark.parametrize("provider", ["email", "twitter", ""])
    def test_unsupported_provider_raises(self, provider):
        with pytest.raises(ValidationError) as exc_info:
            build_identity(provider, "uid-1")

        assert exc_info.value.error_code == "UNSUPPORTED_PROVIDER"

    @pytest.mark.parametrize("provider_user_id", ["", "   ", None])
    def test_missing_provider_user_id_raises(self, provider_user_id):
        with pytest.raises(ValidationError) as exc_info:
            build_identity("apple", provider_user_id)

        assert exc_info.value.error_code == "PROVIDER_ID_REQUIRED"

    def test_email_is_not_a_social_provider(self):
        assert Provider.EMAIL not in SOCIAL_PROVIDERS
        assert set(SOCIAL_PROVIDERS) == {Provider.GOOGLE, Provider.APPLE, Provider.FACEBOOK}


class TestSocialIdentity:
    def test_lookup_returns_linked_account_filter(self):
        identity = AppleIdentity(provider_user_id="001234.abcd")

        assert identity.lookup() == {
            "provider": Provider.APPLE,
            "provider_user_id": "001234.abcd",
        }

    def test_identities_are_immutable(self):
        identity = GoogleIdentity(provider_user_id="g-1")

        with pytest.raises(dataclasses.FrozenInstanceError):
            identity.provider_user_id = "g-2"

    def test_equal_identities_compare_equal(self):
        assert GoogleIdentity("g-1") == GoogleIdentity("g-1")
        assert GoogleIdentity("g-1") != FacebookIdentity("g-1")


class TestDeviceInfo:
    def test_from_data_fills_missing_fields_with_blank(self):
        device = DeviceInfo.from_data({"device_id": "d-1"})

        assert device == DeviceInfo(device_id="d-1", device_type="", fcm_token="")

    def test_from_data_treats_none_as_blank(self):
        device = DeviceInfo.from_data({"device_type": None, "fcm_token": None})

        assert device.device_type == ""
        assert device.fcm_token == ""
