"""
Shared exceptions for the CampusConnect application.

Import business exceptions from here; HTTP translation lives in
``apps.shared.exceptions.api_handler``.
"""

from apps.shared.exceptions.core_exceptions import AppError
from apps.shared.exceptions.core_exceptions import AuthenticationError
from apps.shared.exceptions.core_exceptions import ConflictError
from apps.shared.exceptions.core_exceptions import PermissionDeniedError
from apps.shared.exceptions.core_exceptions import ResourceNotFoundError
from apps.shared.exceptions.core_exceptions import role_required
from apps.shared.exceptions.core_exceptions import StoreError
from apps.shared.exceptions.core_exceptions import ValidationError

__all__ = [
    'AppError',
    'AuthenticationError',
    'ConflictError',
    'PermissionDeniedError',
    'ResourceNotFoundError',
    'StoreError',
    'ValidationError',
    'role_required',
]
