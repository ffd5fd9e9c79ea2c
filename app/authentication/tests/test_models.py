"""
Tests for authentication models and managers.

Covers:
- User: status-derived flags, device recording, string form
- UserManager: create_user, create_social_user, create_superuser, email lookups
- LinkedAccount: uniqueness per provider identity and per user/provider
- Session / SessionQuerySet: live filtering and bulk expiry
"""

import pytest
from django.db import IntegrityError
from freezegun import freeze_time

from authentication.identities import DeviceInfo
from authentication.models import AccountStatus, LinkedAccount, Provider, Session, User
from authentication.tests.factories import LinkedAccountFactory, SessionFactory, UserFactory


# =============================================================================
# TestUser
# =============================================================================


class TestUser:
    def test_new_user_is_pending_and_unusable(self, db):
        user = UserFactory()

        assert user.status == AccountStatus.PENDING
        assert user.is_active is False
        assert user.is_usable is False

    def test_active_verified_user_is_usable(self, active_user):
        assert active_user.is_active is True
        assert active_user.is_usable is True

    def test_active_unverified_user_is_not_usable(self, db):
        user = UserFactory(status=AccountStatus.ACTIVE, is_email_verified=False)

        assert user.is_active is True
        assert user.is_usable is False

    @pytest.mark.parametrize(
        "status",
        [AccountStatus.INACTIVE, AccountStatus.DELETED, AccountStatus.BLOCKED],
    )
    def test_disabled_statuses_are_not_active(self, db, status):
        user = UserFactory(active=True, status=status)

        assert user.is_active is False
        assert user.is_usable is False

    def test_record_device_copies_fields_without_saving(self, active_user):
        active_user.record_device(
            DeviceInfo(device_id="d-9", device_type="web", fcm_token="t-9")
        )

        assert active_user.device_id == "d-9"
        active_user.refresh_from_db()
        assert active_user.device_id == ""

    def test_str_falls_back_to_id_without_email(self, db):
        user = User.objects.create_social_user(auth_method=Provider.APPLE)

        assert str(user) == str(user.pk)


# =============================================================================
# TestUserManager
# =============================================================================


class TestUserManager:
    def test_create_user_requires_email(self, db):
        with pytest.raises(ValueError, match="Email"):
            User.objects.create_user(email="", password="x")

    def test_create_user_normalizes_email_domain(self, db):
        user = User.objects.create_user(email="Jane@EXAMPLE.COM", password="x")

        assert user.email == "Jane@example.com"

    def test_create_user_without_password_is_unusable(self, db):
        user = User.objects.create_user(email="nopass@example.com")

        assert not user.has_usable_password()

    def test_create_social_user_is_active_and_verified(self, db):
        user = User.objects.create_social_user(
            auth_method=Provider.FACEBOOK, email="fb@example.com"
        )

        assert user.is_usable
        assert user.auth_method == Provider.FACEBOOK
        assert not user.has_usable_password()

    def test_many_social_users_without_email_can_coexist(self, db):
        User.objects.create_social_user(auth_method=Provider.APPLE)
        User.objects.create_social_user(auth_method=Provider.APPLE)

        assert User.objects.filter(email__isnull=True).count() == 2

    def test_create_superuser_is_staff_and_usable(self, superuser):
        assert superuser.is_staff
        assert superuser.is_superuser
        assert superuser.is_usable

    def test_create_superuser_rejects_non_staff(self, db):
        with pytest.raises(ValueError, match="is_staff"):
            User.objects.create_superuser(
                email="admin@example.com", password="x", is_staff=False
            )

    def test_get_by_email_is_case_insensitive(self, active_user):
        assert User.objects.get_by_email(active_user.email.upper()) == active_user

    def test_get_by_email_returns_none_for_empty_input(self, db):
        assert User.objects.get_by_email(None) is None
        assert User.objects.get_by_email("") is None

    def test_is_email_taken(self, active_user):
        assert User.objects.is_email_taken(active_user.email)
        assert not User.objects.is_email_taken("free@example.com")


# =============================================================================
# TestLinkedAccount
# =============================================================================


class TestLinkedAccount:
    def test_provider_identity_is_unique(self, db):
        LinkedAccountFactory(provider=Provider.GOOGLE, provider_user_id="g-1")

        with pytest.raises(IntegrityError):
            LinkedAccountFactory(provider=Provider.GOOGLE, provider_user_id="g-1")

    def test_one_link_per_provider_per_user(self, active_user):
        LinkedAccountFactory(user=active_user, provider=Provider.GOOGLE)

        with pytest.raises(IntegrityError):
            LinkedAccountFactory(user=active_user, provider=Provider.GOOGLE)

    def test_same_provider_id_allowed_across_providers(self, db):
        LinkedAccountFactory(provider=Provider.GOOGLE, provider_user_id="shared")
        LinkedAccountFactory(provider=Provider.APPLE, provider_user_id="shared")

        assert LinkedAccount.objects.filter(provider_user_id="shared").count() == 2


# =============================================================================
# TestSession
# =============================================================================


class TestSession:
    def test_new_session_is_live(self, session):
        assert session.is_live
        assert Session.objects.active().filter(pk=session.pk).exists()

    @freeze_time("2026-05-05 10:00:00")
    def test_expire_marks_only_live_sessions(self, active_user):
        live = SessionFactory.create_batch(2, user=active_user)
        SessionFactory(user=active_user, expired_at="2026-01-01T00:00:00Z")

        count = Session.objects.filter(user=active_user).expire()

        assert count == 2
        for session in live:
            session.refresh_from_db()
            assert not session.is_live

    def test_deleting_user_cascades_to_sessions(self, session):
        session.user.delete()

        assert not Session.objects.exists()
