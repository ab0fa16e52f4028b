"""
Core business exception hierarchy for CampusConnect.

These exceptions represent BUSINESS failures, not HTTP responses.
Translation flows DAL (Django exceptions) -> Service -> API handler, and the
HTTP status for each class is chosen in the API exception handler only.
"""


class AppError(Exception):
    """
    Base class for all business logic errors in the application.

    Carries a human readable message, a machine readable ``error_code`` and
    optional context that is logged but never rendered to the client.
    """

    def __init__(self, message: str, error_code: str = None, context: dict = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}

    def __str__(self) -> str:
        return self.message

    def get_context(self) -> dict:
        """Get additional error context for logging/debugging"""
        return self.context


class ValidationError(AppError):
    """
    Raised when input is missing or malformed.

    HTTP Mapping: 400 BAD REQUEST
    """

    def __init__(self, message: str, field_errors: dict = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field_errors = field_errors or {}


class AuthenticationError(AppError):
    """
    Raised when a bearer token is missing, invalid or expired, or when
    credentials do not match.

    HTTP Mapping: 401 UNAUTHORIZED
    """


class PermissionDeniedError(AppError):
    """
    Raised when an authenticated user's role does not allow the operation.

    HTTP Mapping: 403 FORBIDDEN
    """


class ResourceNotFoundError(AppError):
    """
    Raised when a requested resource doesn't exist.

    HTTP Mapping: 404 NOT FOUND
    """


class ConflictError(AppError):
    """
    Raised when a write would break a uniqueness rule.

    Examples:
    - Registering an account with an email already in use
    - Registering for the same event twice

    HTTP Mapping: 400 BAD REQUEST
    """


class StoreError(AppError):
    """
    Raised when the underlying database fails.

    The message is passed through to the client.

    HTTP Mapping: 500 INTERNAL SERVER ERROR
    """


# Convenience functions for common patterns
def role_required(allowed_roles, user_role: str = None, **context) -> PermissionDeniedError:
    """Factory function for role gate rejections"""
    roles = ' or '.join(str(role) for role in allowed_roles)
    return PermissionDeniedError(
        message=f'Access denied. Required role: {roles}',
        error_code='role_permission_denied',
        context={'allowed_roles': list(allowed_roles), 'user_role': user_role, **context},
    )
