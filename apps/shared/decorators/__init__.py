"""
Shared decorators for the CampusConnect application.

- Database error handling (Django exceptions -> business exceptions)
"""

from apps.shared.decorators.database import handle_db_errors

__all__ = [
    'handle_db_errors',
]
