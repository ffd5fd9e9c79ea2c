"""
Test configuration and fixtures for authentication tests.

This module provides:
- Users in each account state
- Device metadata and social identities
- API client helpers for session-bound JWT requests

Usage:
    def test_example(active_user, authenticated_client):
        response = authenticated_client.get('/api/v1/auth/me/')
        assert response.status_code == 200
"""

import pytest
from rest_framework.test import APIClient

from authentication.identities import AppleIdentity, DeviceInfo, GoogleIdentity
from authentication.models import AccountStatus, User
from authentication.services import SessionService
from authentication.tests.factories import DEFAULT_PASSWORD, SessionFactory, UserFactory


# =============================================================================
# User Fixtures
# =============================================================================


@pytest.fixture
def password():
    """Password every factory-built user is created with."""
    return DEFAULT_PASSWORD


@pytest.fixture
def pending_user(db):
    """Freshly registered user: pending, unverified, with a code."""
    return UserFactory(code="5821")


@pytest.fixture
def active_user(db):
    """Verified, active user that can log in."""
    return UserFactory(active=True)


@pytest.fixture
def blocked_user(db):
    """Verified user whose account has been blocked."""
    return UserFactory(active=True, status=AccountStatus.BLOCKED)


@pytest.fixture
def superuser(db):
    """Create a superuser with admin privileges."""
    return User.objects.create_superuser(
        email="admin@example.com", password="AdminPass123!"
    )


# =============================================================================
# Device / Identity Fixtures
# =============================================================================


@pytest.fixture
def device():
    """Login device metadata."""
    return DeviceInfo(device_id="device-abc", device_type="ios", fcm_token="fcm-abc")


@pytest.fixture
def google_identity():
    return GoogleIdentity(provider_user_id="google-uid-123")


@pytest.fixture
def apple_identity():
    return AppleIdentity(provider_user_id="001234.abcd")


# =============================================================================
# API Client Fixtures
# =============================================================================


@pytest.fixture
def api_client():
    """Unauthenticated API client."""
    return APIClient()


@pytest.fixture
def session(active_user):
    """Live session for the active user."""
    return SessionFactory(user=active_user)


@pytest.fixture
def tokens(session):
    """JWT pair bound to the live session."""
    return SessionService.issue_tokens(session)


@pytest.fixture
def authenticated_client(tokens):
    """API client carrying a session-bound access token."""
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {tokens['access']}")
    return client
