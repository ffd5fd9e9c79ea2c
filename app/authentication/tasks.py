"""
Celery tasks for authentication.

This module defines async tasks for:
- Sending the one-time code for email verification and password reset

Related files:
    - services/auth_service.py: AuthService queues these tasks on commit

Usage:
    from authentication.tasks import send_verification_code_email
    send_verification_code_email.delay(user_id="...")
"""

import logging

from celery import shared_task

logger = logging.getLogger(__name__)


@shared_task(
    bind=True,
    autoretry_for=(Exception,),
    retry_backoff=True,
    retry_kwargs={"max_retries": 3},
)
def send_verification_code_email(self, user_id: str) -> bool:
    """
    Email the user's current one-time code.

    Args:
        user_id: ID of the user to send the code to

    Returns:
        True if an email was sent, False if there was nothing to send
    """
    from authentication.models import User
    from toolkit.services.email import EmailService

    user = User.objects.filter(pk=user_id).first()
    if user is None:
        logger.error(f"User {user_id} not found for verification code email")
        return False
    if not user.email or not user.code:
        logger.info(f"No code to send for user_id={user_id}")
        return False

    return EmailService.send_raw(
        to=user.email,
        subject="Your verification code",
        body_text=(
            f"Your verification code is {user.code}.\n\n"
            "If you did not request this code, you can ignore this email."
        ),
    )
