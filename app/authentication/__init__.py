"""
Authentication application.

This app provides account registration, login, one-time code verification,
password reset/change, logout and social-login account linking.

Key components:
    - User model: Email-based account with a lifecycle status
    - LinkedAccount: Social provider identities linked to a user
    - Session: Device/login records; tokens die with their session
    - AuthService: Business logic for every auth flow
    - SessionService: Session creation, expiry and token issuing

Usage:
    from authentication.models import User
    from authentication.services import AuthService
"""
