"""
Authentication views.

This module provides API views for:
- Registration and email/password login
- One-time code verification and resend
- Password reset (forgot / reset) and change
- Logout (expire every session of the account)
- Social login (Google, Apple, Facebook)
- Current user

Related files:
    - serializers.py: Request/response serialization
    - services/: Business logic (AuthService, SessionService)
    - urls.py: URL routing

Note:
    Views only translate HTTP to service calls. Service failures raise
    core.exceptions errors, rendered by core.views.api_exception_handler
    with their own status code.
"""

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.serializers import (
    AuthenticatedUserSerializer,
    ChangePasswordSerializer,
    ForgotPasswordSerializer,
    LoginSerializer,
    RegisterSerializer,
    ResendCodeSerializer,
    ResetPasswordSerializer,
    SocialLoginSerializer,
    UserSerializer,
    VerificationSerializer,
)
from authentication.services import AuthService


class RegisterView(APIView):
    """
    POST: Register an email/password account.

    URL: /api/v1/auth/register/

    The account starts pending; a one-time code is emailed for verification.
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        summary="Register",
        tags=["Auth"],
        request=RegisterSerializer,
        responses={201: UserSerializer},
    )
    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = AuthService.register(**serializer.validated_data)
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    """
    POST: Log in with email and password.

    URL: /api/v1/auth/login/

    Returns:
        {"user": {...}, "session": {...}, "tokens": {"access", "refresh"}}
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(summary="Log in", tags=["Auth"], request=LoginSerializer)
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = AuthService.account_login(
            serializer.validated_data["email"],
            serializer.validated_data["password"],
            serializer.get_device(),
        )
        return Response(AuthenticatedUserSerializer(user).data)


class VerificationView(APIView):
    """
    POST: Confirm an account with its one-time code.

    URL: /api/v1/auth/verify/
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(summary="Verify one-time code", tags=["Auth"], request=VerificationSerializer)
    def post(self, request):
        serializer = VerificationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        message = AuthService.verification(
            serializer.validated_data["id"],
            serializer.validated_data["code"],
        )
        return Response({"detail": message})


class ForgotPasswordView(APIView):
    """
    POST: Email a fresh one-time code for password reset.

    URL: /api/v1/auth/forgot-password/

    Returns the account id the reset must be completed against.
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(summary="Forgot password", tags=["Auth"], request=ForgotPasswordSerializer)
    def post(self, request):
        serializer = ForgotPasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = AuthService.forgot_password(serializer.validated_data["email"])
        return Response({"id": str(user.pk), "detail": "Verification code sent"})


class ResendCodeView(APIView):
    """
    POST: Regenerate and resend the one-time code.

    URL: /api/v1/auth/resend-code/
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(summary="Resend one-time code", tags=["Auth"], request=ResendCodeSerializer)
    def post(self, request):
        serializer = ResendCodeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        message = AuthService.resend_code(serializer.validated_data["id"])
        return Response({"detail": message})


class ResetPasswordView(APIView):
    """
    POST: Overwrite the password of an account.

    URL: /api/v1/auth/reset-password/

    Requires the one-time code sent by forgot-password; the code is consumed.
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(summary="Reset password", tags=["Auth"], request=ResetPasswordSerializer)
    def post(self, request):
        serializer = ResetPasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        message = AuthService.confirm_password_reset(
            serializer.validated_data["id"],
            serializer.validated_data["code"],
            serializer.validated_data["password"],
        )
        return Response({"detail": message})


class ChangePasswordView(APIView):
    """
    POST: Change the current user's password.

    URL: /api/v1/auth/change-password/
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(summary="Change password", tags=["Auth"], request=ChangePasswordSerializer)
    def post(self, request):
        serializer = ChangePasswordSerializer(
            data=request.data, context={"user": request.user}
        )
        serializer.is_valid(raise_exception=True)
        message = AuthService.change_password(
            request.user.pk,
            serializer.validated_data["old_password"],
            serializer.validated_data["new_password"],
        )
        return Response({"detail": message})


class LogoutView(APIView):
    """
    POST: Log out from every device.

    URL: /api/v1/auth/logout/

    Expires all sessions of the current user; tokens issued for them stop
    authenticating.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(summary="Log out", tags=["Auth"], request=None)
    def post(self, request):
        message = AuthService.user_logout(request.user.pk)
        return Response({"detail": message})


class SocialLoginView(APIView):
    """
    POST: Log in or sign up with a social provider identity.

    URL: /api/v1/auth/social-login/

    Request body:
        {
            "auth_method": "apple",
            "provider_user_id": "001234.abcd",
            "email": "user@privaterelay.appleid.com",  // optional
            "device_id": "...", "device_type": "ios", "fcm_token": "..."
        }
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(summary="Social login", tags=["Auth"], request=SocialLoginSerializer)
    def post(self, request):
        serializer = SocialLoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = AuthService.social_login_account(
            serializer.validated_data["identity"],
            serializer.get_device(),
            email=serializer.validated_data["email"],
        )
        return Response(AuthenticatedUserSerializer(user).data)


class MeView(APIView):
    """
    GET: Current user.

    URL: /api/v1/auth/me/
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(summary="Current user", tags=["Auth"], responses={200: UserSerializer})
    def get(self, request):
        return Response(UserSerializer(request.user).data)
