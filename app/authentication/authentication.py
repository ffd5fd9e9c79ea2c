"""
DRF authentication backed by login sessions.

Access tokens are simplejwt tokens carrying the session id in the `sid`
claim. A token authenticates only while its session is live and its account
is usable, so logging out (expiring the sessions) revokes every token that
was issued for them.

Configured in settings:
    REST_FRAMEWORK["DEFAULT_AUTHENTICATION_CLASSES"] = [
        "authentication.authentication.SessionJWTAuthentication",
    ]
"""

from django.utils.translation import gettext_lazy as _
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import AuthenticationFailed
from rest_framework_simplejwt.settings import api_settings

from authentication.services.session_service import SESSION_CLAIM, SessionService


class SessionJWTAuthentication(JWTAuthentication):
    """JWTAuthentication that also requires a live session."""

    def get_user(self, validated_token):
        session = SessionService.get_live_session(validated_token.get(SESSION_CLAIM))
        if session is None:
            raise AuthenticationFailed(_("Session has expired"), code="session_expired")

        user = session.user
        if str(user.pk) != str(validated_token.get(api_settings.USER_ID_CLAIM)):
            raise AuthenticationFailed(_("Token does not match session"), code="session_mismatch")
        if not user.is_usable:
            raise AuthenticationFailed(_("User is inactive"), code="user_inactive")

        user.session = session
        return user
