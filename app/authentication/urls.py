"""
URL configuration for authentication app.

Mounted under /api/v1/auth/ by config.urls.

Endpoints:
    register/          - Register an email/password account
    login/             - Email/password login
    verify/            - Confirm the one-time code
    forgot-password/   - Email a password reset code
    resend-code/       - Resend the one-time code
    reset-password/    - Overwrite the password
    change-password/   - Change password (authenticated)
    logout/            - Expire all sessions (authenticated)
    social-login/      - Google / Apple / Facebook login
    me/                - Current user (authenticated)
"""

from django.urls import path

from authentication import views

app_name = "authentication"

urlpatterns = [
    path("register/", views.RegisterView.as_view(), name="register"),
    path("login/", views.LoginView.as_view(), name="login"),
    path("verify/", views.VerificationView.as_view(), name="verify"),
    path("forgot-password/", views.ForgotPasswordView.as_view(), name="forgot-password"),
    path("resend-code/", views.ResendCodeView.as_view(), name="resend-code"),
    path("reset-password/", views.ResetPasswordView.as_view(), name="reset-password"),
    path("change-password/", views.ChangePasswordView.as_view(), name="change-password"),
    path("logout/", views.LogoutView.as_view(), name="logout"),
    path("social-login/", views.SocialLoginView.as_view(), name="social-login"),
    path("me/", views.MeView.as_view(), name="me"),
]
