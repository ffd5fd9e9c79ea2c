"""
Factory Boy factories for authentication models.

Provides realistic test data generation for:
- User: Custom user model with email-based authentication
- LinkedAccount: Social provider identities
- Session: Login sessions

Usage:
    from authentication.tests.factories import UserFactory, SessionFactory

    # Pending, unverified user (fresh registration)
    user = UserFactory()

    # Verified, active user that can log in
    user = UserFactory(active=True)

    session = SessionFactory(user=user)
"""

import factory

from authentication.models import (
    AccountStatus,
    DeviceType,
    LinkedAccount,
    Provider,
    Session,
    User,
)

DEFAULT_PASSWORD = "TestPass123!"


class UserFactory(factory.django.DjangoModelFactory):
    """
    Factory for User model.

    By default users are pending and unverified, the state registration
    leaves them in. Pass `active=True` for a verified, active account.

    Examples:
        user = UserFactory()
        user = UserFactory(active=True)
        user = UserFactory(active=True, status=AccountStatus.BLOCKED)
        user = UserFactory(code="1234")
    """

    class Meta:
        model = User
        skip_postgeneration_save = True

    class Params:
        active = factory.Trait(
            is_email_verified=True,
            status=AccountStatus.ACTIVE,
        )

    email = factory.Sequence(lambda n: f"user{n}@example.com")
    is_email_verified = False
    status = AccountStatus.PENDING
    is_staff = False

    @classmethod
    def _create(cls, model_class, *args, **kwargs):
        """Override create to use UserManager.create_user()."""
        password = kwargs.pop("password", DEFAULT_PASSWORD)
        return model_class.objects.create_user(
            email=kwargs.pop("email"), password=password, **kwargs
        )


class LinkedAccountFactory(factory.django.DjangoModelFactory):
    """
    Factory for LinkedAccount model.

    Examples:
        LinkedAccountFactory(user=user, provider=Provider.APPLE)
    """

    class Meta:
        model = LinkedAccount

    user = factory.SubFactory(UserFactory, active=True)
    provider = Provider.GOOGLE
    provider_user_id = factory.Sequence(lambda n: f"provider-uid-{n}")


class SessionFactory(factory.django.DjangoModelFactory):
    """Factory for Session model (live by default)."""

    class Meta:
        model = Session

    user = factory.SubFactory(UserFactory, active=True)
    device_id = factory.Sequence(lambda n: f"device-{n}")
    device_type = DeviceType.IOS
    fcm_token = factory.Sequence(lambda n: f"fcm-token-{n}")
    expired_at = None
