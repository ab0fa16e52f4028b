import logging

from django.db import IntegrityError
from django.db.models import Count
from django.db.models import Q
from django.db.models import QuerySet

from apps.accounts.exceptions import EmailAlreadyRegisteredError
from apps.accounts.models.custom_user import CustomUser
from apps.shared.decorators.database import handle_db_errors

logger = logging.getLogger(__name__)


def _duplicate_email(error: IntegrityError, context: dict) -> EmailAlreadyRegisteredError:
    logger.info(f"Duplicate email rejected by the store: {error}")
    return EmailAlreadyRegisteredError(context.get("email"))


class UserDAL:
    """Data Access Layer for CustomUser operations"""

    @handle_db_errors(operation_type="read", model_name="User")
    def get_by_id(self, user_id: int) -> CustomUser | None:
        """Get user by ID, ``None`` when the account no longer exists"""
        return CustomUser.objects.filter(id=user_id).first()

    @handle_db_errors(operation_type="read", model_name="User")
    def get_by_email(self, email: str) -> CustomUser | None:
        """Get user by email with case-insensitive lookup"""
        if not email:
            return None
        return CustomUser.objects.filter(email__iexact=email.strip()).first()

    @handle_db_errors(operation_type="read", model_name="User")
    def email_exists(self, email: str) -> bool:
        return CustomUser.objects.filter(email__iexact=email.strip()).exists()

    @handle_db_errors(
        operation_type="create",
        model_name="User",
        custom_mappings={IntegrityError: _duplicate_email},
    )
    def create_user(self, email: str, password: str, name: str, role: str) -> CustomUser:
        """Create user with hashed password; a duplicate email raises EmailAlreadyRegisteredError"""
        return CustomUser.objects.create_user(email=email, password=password, name=name, role=role)

    def list_users(self) -> QuerySet[CustomUser]:
        """All users, newest first"""
        return CustomUser.objects.order_by("-created_at", "-id")

    @handle_db_errors(operation_type="read", model_name="User")
    def get_role_counts(self) -> dict[str, int]:
        """Total users plus the per-role breakdown in one query"""
        return CustomUser.objects.aggregate(
            total=Count("id"),
            students=Count("id", filter=Q(role=CustomUser.Role.STUDENT)),
            admins=Count("id", filter=Q(role=CustomUser.Role.ADMIN)),
        )
