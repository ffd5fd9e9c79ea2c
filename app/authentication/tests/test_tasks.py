"""
Tests for authentication Celery tasks.

Tasks run eagerly in tests (CELERY_TASK_ALWAYS_EAGER); calling the task
function directly exercises the body without the broker.
"""

import uuid

from authentication.tasks import send_verification_code_email
from authentication.tests.factories import UserFactory


class TestSendVerificationCodeEmail:
    def test_sends_code_to_user(self, db, mailoutbox):
        user = UserFactory(code="6043")

        assert send_verification_code_email(str(user.pk)) is True

        assert len(mailoutbox) == 1
        assert mailoutbox[0].to == [user.email]
        assert mailoutbox[0].subject == "Your verification code"
        assert "6043" in mailoutbox[0].body

    def test_missing_user_sends_nothing(self, db, mailoutbox):
        assert send_verification_code_email(str(uuid.uuid4())) is False
        assert mailoutbox == []

    def test_user_without_code_sends_nothing(self, db, mailoutbox):
        user = UserFactory(code="")

        assert send_verification_code_email(str(user.pk)) is False
        assert mailoutbox == []

    def test_delay_runs_eagerly(self, db, mailoutbox):
        user = UserFactory(code="1987")

        send_verification_code_email.delay(str(user.pk))

        assert len(mailoutbox) == 1
