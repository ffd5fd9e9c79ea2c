"""
Email service for centralized email sending.

This module provides the EmailService class for sending plain-text emails
with an optional HTML alternative through Django's mail framework.

Configuration:
    Email settings are read from Django settings:
    - EMAIL_BACKEND
    - EMAIL_HOST, EMAIL_PORT
    - DEFAULT_FROM_EMAIL

Usage:
    from toolkit.services.email import EmailService

    EmailService.send_raw(
        to="user@example.com",
        subject="Your verification code",
        body_text="Your code is 4821",
    )
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.core.mail import EmailMultiAlternatives

logger = logging.getLogger(__name__)


class EmailService:
    """
    Centralized email sending.

    Errors from the mail backend propagate to the caller; Celery tasks that
    use this service retry on them.
    """

    @staticmethod
    def send_raw(
        to: str | list[str],
        subject: str,
        body_text: str,
        body_html: str | None = None,
        from_email: str | None = None,
        reply_to: str | None = None,
    ) -> bool:
        """
        Send email with raw content (no template).

        Args:
            to: Recipient email address(es)
            subject: Email subject line
            body_text: Plain text email body
            body_html: HTML email body (optional)
            from_email: Sender email (defaults to DEFAULT_FROM_EMAIL)
            reply_to: Reply-to address

        Returns:
            True if the backend accepted the message
        """
        if isinstance(to, str):
            to = [to]

        email = EmailMultiAlternatives(
            subject=subject,
            body=body_text,
            from_email=from_email or settings.DEFAULT_FROM_EMAIL,
            to=to,
            reply_to=[reply_to] if reply_to else None,
        )
        if body_html:
            email.attach_alternative(body_html, "text/html")

        sent = email.send(fail_silently=False)
        logger.info(f"Email sent to {len(to)} recipient(s): {subject}")
        return bool(sent)
