"""
Session service.

Sessions are the device/login records created on successful authentication.
Access tokens issued for a session carry its id in the `sid` claim;
SessionJWTAuthentication rejects tokens whose session has been expired.

Related files:
    - models.py: Session model
    - authentication.py: SessionJWTAuthentication
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rest_framework_simplejwt.tokens import RefreshToken

from core.helpers import validate_uuid

if TYPE_CHECKING:
    from authentication.identities import DeviceInfo
    from authentication.models import Session, User

logger = logging.getLogger(__name__)

SESSION_CLAIM = "sid"


class SessionService:
    """
    Create, expire and tokenize login sessions.

    Usage:
        session = SessionService.create_session(user, device)
        tokens = SessionService.issue_tokens(session)
        SessionService.expire_sessions(user)
    """

    @staticmethod
    def create_session(user: User, device: DeviceInfo) -> Session:
        """
        Persist a new live session for the given device.

        Args:
            user: Account that authenticated
            device: Device the login came from

        Returns:
            The created Session
        """
        from authentication.models import Session

        session = Session.objects.create(
            user=user,
            device_id=device.device_id,
            device_type=device.device_type,
            fcm_token=device.fcm_token,
        )
        logger.info(
            "Session created",
            extra={"user_id": str(user.pk), "session_id": str(session.pk)},
        )
        return session

    @staticmethod
    def expire_sessions(user: User) -> int:
        """
        Expire every live session of the user.

        Returns:
            Number of sessions expired
        """
        from authentication.models import Session

        expired = Session.objects.filter(user=user).expire()
        logger.info(
            f"Expired {expired} session(s)",
            extra={"user_id": str(user.pk)},
        )
        return expired

    @staticmethod
    def issue_tokens(session: Session) -> dict[str, str]:
        """
        Issue a JWT refresh/access pair bound to the session.

        Returns:
            {"refresh": "...", "access": "..."}
        """
        refresh = RefreshToken.for_user(session.user)
        refresh[SESSION_CLAIM] = str(session.pk)
        return {
            "refresh": str(refresh),
            "access": str(refresh.access_token),
        }

    @staticmethod
    def get_live_session(session_id) -> Session | None:
        """Return the live session with this id, or None."""
        from authentication.models import Session

        if not session_id or not validate_uuid(session_id):
            return None
        return (
            Session.objects.active()
            .select_related("user")
            .filter(pk=session_id)
            .first()
        )
