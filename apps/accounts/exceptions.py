"""
Domain-specific exceptions for Accounts app.

These extend the shared business taxonomy, so the API exception handler maps
them to HTTP statuses without knowing about accounts.
"""

from apps.shared.exceptions import AuthenticationError
from apps.shared.exceptions import ConflictError


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when an account with the same email already exists."""

    def __init__(self, email: str = None):
        super().__init__(
            'User already exists with this email',
            error_code='email_already_registered',
            context={'email': email},
        )


class InvalidCredentialsError(AuthenticationError):
    """Raised on login when the email is unknown or the password does not match."""

    def __init__(self):
        super().__init__('Invalid credentials', error_code='invalid_credentials')
