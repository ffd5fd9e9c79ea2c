"""
Authentication services.

This module provides the AuthService class for registration, login, email
verification, password reset/change, logout and social login.

Related files:
    - models.py: User, LinkedAccount, Session
    - session_service.py: Session creation and expiry
    - tasks.py: Async one-time code email

Security:
    - Login failures are reported as a generic "account not found" so the
      response never reveals which half of the credentials was wrong
    - Passwords hashed by the User model (set_password / check_password)
    - One-time codes are random numeric codes, cleared once consumed
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, assert_never

from django.conf import settings
from django.db import transaction

from core.exceptions import AuthenticationError, NotFoundError, ValidationError
from core.helpers import generate_numeric_code, validate_uuid
from authentication.services.session_service import SessionService

if TYPE_CHECKING:
    from authentication.identities import DeviceInfo, SocialIdentity
    from authentication.models import User

logger = logging.getLogger(__name__)

ACCOUNT_NOT_FOUND = "account not found"
USER_NOT_FOUND = "user not found"
INVALID_CREDENTIALS = "Invalid email and password"


class AuthService:
    """
    Centralized authentication business logic.

    Every operation is an independent unit of work: look the account up,
    validate its state, mutate, persist. Failures raise a
    core.exceptions.BaseApplicationError subclass carrying the HTTP status.

    Usage:
        from authentication.services import AuthService

        user = AuthService.register("jane@example.com", "s3cret-pass")
        AuthService.verification(user.id, "4821")
        user = AuthService.account_login("jane@example.com", "s3cret-pass", device)
        user.session  # Session created for this login
    """

    @staticmethod
    def get_user(user_id) -> User | None:
        """
        Look an account up by id.

        Returns:
            The User, or None for unknown or malformed ids
        """
        from authentication.models import User

        if not validate_uuid(user_id):
            return None
        return User.objects.filter(pk=user_id).first()

    @staticmethod
    def register(email: str, password: str, **extra_fields) -> User:
        """
        Register a new email/password account.

        The account starts pending and unverified; a one-time code is
        generated and emailed for verification.

        Raises:
            ValidationError: If the email is already registered
        """
        from authentication.models import User

        if User.objects.is_email_taken(email):
            raise ValidationError("Email already taken", error_code="EMAIL_TAKEN")

        with transaction.atomic():
            user = User.objects.create_user(
                email=email.strip(),
                password=password,
                code=AuthService._new_code(),
                **extra_fields,
            )
            AuthService._queue_code_email(user)

        logger.info(f"User registered: {user.email}", extra={"user_id": str(user.pk)})
        return user

    @staticmethod
    def account_login(email: str, password: str, device: DeviceInfo) -> User:
        """
        Log in with email and password.

        Returns:
            The User with the new session attached as `user.session`

        Raises:
            NotFoundError: Missing, unverified or pending account, or wrong
                password (same message for all)
            AuthenticationError: Inactive, deleted or blocked account
        """
        from authentication.models import AccountStatus, User

        user = User.objects.get_by_email(email)
        if (
            user is None
            or not user.is_email_verified
            or user.status == AccountStatus.PENDING
            or not user.check_password(password)
        ):
            logger.debug("Login rejected: unknown account or bad credentials")
            raise NotFoundError(ACCOUNT_NOT_FOUND)

        AuthService.validate_account_status(user)
        return AuthService._start_session(user, device)

    @staticmethod
    def verification(user_id, code: str) -> str:
        """
        Confirm an account with its one-time code.

        The configured VERIFICATION_BYPASS_CODE, when non-empty, is accepted
        regardless of the stored code.

        Raises:
            NotFoundError: Missing account or code mismatch
        """
        user = AuthService.get_user(user_id)
        if user is None:
            raise NotFoundError(ACCOUNT_NOT_FOUND)

        code = str(code).strip()
        if not AuthService._code_matches(user, code):
            logger.warning(
                "Verification rejected: code mismatch",
                extra={"user_id": str(user.pk)},
            )
            raise NotFoundError(ACCOUNT_NOT_FOUND)

        from authentication.models import AccountStatus

        user.is_email_verified = True
        user.status = AccountStatus.ACTIVE
        user.code = ""
        user.save(update_fields=["is_email_verified", "status", "code", "updated_at"])

        logger.info(f"Account verified: {user.email}", extra={"user_id": str(user.pk)})
        return "account verified successfully"

    @staticmethod
    def forgot_password(email: str) -> User:
        """
        Start a password reset by issuing a fresh one-time code.

        Raises:
            NotFoundError: If no account uses the email
        """
        from authentication.models import User

        user = User.objects.get_by_email(email)
        if user is None:
            raise NotFoundError(ACCOUNT_NOT_FOUND)

        AuthService._reissue_code(user)
        logger.info(
            f"Password reset code issued for: {user.email}",
            extra={"user_id": str(user.pk)},
        )
        return user

    @staticmethod
    def resend_code(user_id) -> str:
        """
        Regenerate and resend the one-time code.

        Raises:
            NotFoundError: If the account does not exist
        """
        user = AuthService.get_user(user_id)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)

        AuthService._reissue_code(user)
        logger.info("One-time code resent", extra={"user_id": str(user.pk)})
        return "OTP resent successfully"

    @staticmethod
    def reset_password(user_id, new_password: str) -> str:
        """
        Overwrite the password without checking the old one.

        Raises:
            NotFoundError: If the account does not exist
        """
        user = AuthService.get_user(user_id)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)

        user.set_password(new_password)
        user.save(update_fields=["password", "updated_at"])

        logger.info(f"Password reset for user: {user.email}", extra={"user_id": str(user.pk)})
        return "password successfully reset"

    @staticmethod
    def confirm_password_reset(user_id, code: str, new_password: str) -> str:
        """
        Reset the password of an account that proved it holds its code.

        The code issued by forgot_password is consumed. The verification
        bypass code is not accepted here.

        Raises:
            NotFoundError: Missing account or code mismatch
        """
        user = AuthService.get_user(user_id)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)

        if not AuthService._code_matches(user, str(code).strip(), allow_bypass=False):
            logger.warning(
                "Password reset rejected: code mismatch",
                extra={"user_id": str(user.pk)},
            )
            raise NotFoundError(ACCOUNT_NOT_FOUND)

        with transaction.atomic():
            user.code = ""
            user.save(update_fields=["code", "updated_at"])
            return AuthService.reset_password(user.pk, new_password)

    @staticmethod
    def change_password(user_id, old_password: str, new_password: str) -> str:
        """
        Change the password after confirming the current one.

        Raises:
            NotFoundError: Missing account, or old password does not match
        """
        user = AuthService.get_user(user_id)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND)

        if not user.check_password(old_password):
            logger.warning(
                "Password change rejected: old password mismatch",
                extra={"user_id": str(user.pk)},
            )
            raise NotFoundError(INVALID_CREDENTIALS)

        user.set_password(new_password)
        user.save(update_fields=["password", "updated_at"])

        logger.info(f"Password changed for user: {user.email}", extra={"user_id": str(user.pk)})
        return "password updated successfully"

    @staticmethod
    def user_logout(user_id) -> str:
        """
        Log out everywhere by expiring all live sessions of the account.

        Raises:
            AuthenticationError: If the account does not exist
        """
        user = AuthService.get_user(user_id)
        if user is None:
            raise AuthenticationError("Oops! User not found")

        SessionService.expire_sessions(user)
        return "User logout successfully!"

    @staticmethod
    def social_login_account(
        identity: SocialIdentity,
        device: DeviceInfo,
        email: str | None = None,
    ) -> User:
        """
        Log in (or sign up) with a social provider identity.

        Lookup order:
            1. By email, when the provider sent one
            2. By provider user id, for providers that omit the email on
               repeat logins or never share it

        An account found either way is reused and the identity is linked to
        it. A new active, pre-verified account is created only when neither
        lookup finds one.

        Returns:
            The User with the new session attached as `user.session`

        Raises:
            AuthenticationError: Found account is not in a usable state
            NotFoundError: Found account is linked to a different id for
                this provider, or the identity belongs to another account
        """
        from authentication.models import LinkedAccount, User

        with transaction.atomic():
            user = User.objects.get_by_email(email)
            if user is None:
                link = (
                    LinkedAccount.objects.select_related("user")
                    .filter(**identity.lookup())
                    .first()
                )
                user = link.user if link else None

            if user is not None:
                AuthService.validate_account_status(user)
                AuthService._link_identity(user, identity)
            else:
                user = User.objects.create_social_user(
                    auth_method=identity.provider,
                    email=email,
                )
                LinkedAccount.objects.create(user=user, **identity.lookup())
                logger.info(
                    f"Account created from {identity.provider} login",
                    extra={"user_id": str(user.pk), "provider": identity.provider},
                )

            return AuthService._start_session(user, device)

    @staticmethod
    def validate_account_status(user: User) -> None:
        """
        Raise unless the account is verified and active.

        Raises:
            AuthenticationError: With a status-specific message
        """
        from authentication.models import AccountStatus

        status = AccountStatus(user.status)
        match status:
            case AccountStatus.ACTIVE:
                if not user.is_email_verified:
                    raise AuthenticationError(
                        "This user is not verified yet!",
                        error_code="ACCOUNT_NOT_VERIFIED",
                    )
            case AccountStatus.PENDING:
                raise AuthenticationError(
                    "This user is not verified yet!",
                    error_code="ACCOUNT_NOT_VERIFIED",
                )
            case AccountStatus.INACTIVE | AccountStatus.DELETED | AccountStatus.BLOCKED:
                logger.warning(
                    f"Rejected {status.value} account",
                    extra={"user_id": str(user.pk)},
                )
                raise AuthenticationError(
                    f"Your account has been {status.value}. Please contact your admin.",
                    error_code=f"ACCOUNT_{status.name}",
                )
            case _:
                assert_never(status)

    # -------------------------------------------------------------------------
    # Internal helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _new_code() -> str:
        return generate_numeric_code(settings.VERIFICATION_CODE_LENGTH)

    @staticmethod
    def _code_matches(user: User, code: str, allow_bypass: bool = True) -> bool:
        bypass = settings.VERIFICATION_BYPASS_CODE
        if allow_bypass and bypass and code == bypass:
            return True
        return bool(user.code) and code == user.code

    @staticmethod
    def _reissue_code(user: User) -> None:
        with transaction.atomic():
            user.code = AuthService._new_code()
            user.save(update_fields=["code", "updated_at"])
            AuthService._queue_code_email(user)

    @staticmethod
    def _queue_code_email(user: User) -> None:
        from authentication.tasks import send_verification_code_email

        if not user.email:
            return
        user_id = str(user.pk)
        transaction.on_commit(lambda: send_verification_code_email.delay(user_id))

    @staticmethod
    def _link_identity(user: User, identity: SocialIdentity) -> None:
        from authentication.models import LinkedAccount

        link = user.linked_accounts.filter(provider=identity.provider).first()
        if link is None:
            if LinkedAccount.objects.filter(**identity.lookup()).exclude(user=user).exists():
                logger.warning(
                    f"{identity.provider} id already linked to another account",
                    extra={"user_id": str(user.pk)},
                )
                raise NotFoundError(ACCOUNT_NOT_FOUND)
            LinkedAccount.objects.create(user=user, **identity.lookup())
            logger.info(
                f"Linked {identity.provider} account",
                extra={"user_id": str(user.pk), "provider": identity.provider},
            )
        elif link.provider_user_id != identity.provider_user_id:
            logger.warning(
                f"{identity.provider} id mismatch for existing account",
                extra={"user_id": str(user.pk)},
            )
            raise NotFoundError(ACCOUNT_NOT_FOUND)

    @staticmethod
    def _start_session(user: User, device: DeviceInfo) -> User:
        user.record_device(device)
        user.save(update_fields=["device_id", "device_type", "fcm_token", "updated_at"])
        user.session = SessionService.create_session(user, device)
        logger.info(f"User logged in: {user}", extra={"user_id": str(user.pk)})
        return user
