"""
Tests for SessionJWTAuthentication.

A token authenticates only while its session is live and its account is
usable; these tests drive the class directly with validated tokens.
"""

import pytest
from rest_framework_simplejwt.exceptions import AuthenticationFailed
from rest_framework_simplejwt.tokens import AccessToken

from authentication.authentication import SessionJWTAuthentication
from authentication.models import AccountStatus
from authentication.services import SessionService
from authentication.tests.factories import SessionFactory


def access_token_for(session):
    return AccessToken(SessionService.issue_tokens(session)["access"])


class TestSessionJWTAuthentication:
    def test_live_session_returns_user_with_session(self, session):
        user = SessionJWTAuthentication().get_user(access_token_for(session))

        assert user == session.user
        assert user.session == session

    def test_expired_session_is_rejected(self, session):
        token = access_token_for(session)
        SessionService.expire_sessions(session.user)

        with pytest.raises(AuthenticationFailed):
            SessionJWTAuthentication().get_user(token)

    def test_token_without_session_claim_is_rejected(self, active_user):
        token = AccessToken.for_user(active_user)

        with pytest.raises(AuthenticationFailed):
            SessionJWTAuthentication().get_user(token)

    def test_token_for_other_users_session_is_rejected(self, session):
        other = SessionFactory()
        token = access_token_for(session)
        token["sid"] = str(other.pk)

        with pytest.raises(AuthenticationFailed):
            SessionJWTAuthentication().get_user(token)

    def test_blocked_account_is_rejected(self, session):
        token = access_token_for(session)
        session.user.status = AccountStatus.BLOCKED
        session.user.save()

        with pytest.raises(AuthenticationFailed):
            SessionJWTAuthentication().get_user(token)

    def test_other_sessions_survive_expiry_of_another_user(self, session):
        other = SessionFactory()
        SessionService.expire_sessions(other.user)

        assert SessionJWTAuthentication().get_user(access_token_for(session))
