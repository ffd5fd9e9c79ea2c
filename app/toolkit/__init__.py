"""
Toolkit - Shared application services.

Key components:
    - services/email.py: EmailService class

Usage:
    from toolkit.services.email import EmailService

Note:
    - This app has no models.
    - For generic infrastructure (tokens, codes, exceptions), see core/
"""
