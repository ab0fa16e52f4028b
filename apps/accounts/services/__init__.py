from apps.accounts.services.auth_service import AuthService

__all__ = [
    'AuthService',
]
