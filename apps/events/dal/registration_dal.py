"""
Registration Data Access Layer - Focused on Registration Model Only

The unique (user, event) constraint is the authoritative duplicate guard;
its IntegrityError is translated to AlreadyRegisteredError here.
"""

import logging

from django.db import IntegrityError

from apps.events.exceptions import AlreadyRegisteredError
from apps.events.models.event import Event
from apps.events.models.registration import Registration
from apps.shared.decorators.database import handle_db_errors

logger = logging.getLogger(__name__)


def _duplicate_registration(error: IntegrityError, context: dict) -> AlreadyRegisteredError:
    logger.warning(f"Duplicate registration rejected by the store: {error}")
    return AlreadyRegisteredError()


class RegistrationDAL:
    """Data Access Layer for Registration model operations only"""

    @handle_db_errors(
        operation_type="create",
        model_name="Registration",
        custom_mappings={IntegrityError: _duplicate_registration},
    )
    def create_registration(self, user, event: Event) -> Registration:
        return Registration.objects.create(user=user, event=event)

    @handle_db_errors(operation_type="read", model_name="Registration")
    def registration_exists(self, user_id: int, event_id: int) -> bool:
        return Registration.objects.filter(user_id=user_id, event_id=event_id).exists()

    @handle_db_errors(operation_type="read", model_name="Registration")
    def get_user_registration(self, user_id: int, event_id: int) -> Registration | None:
        """Registration for the pair, ``None`` if the user is not registered"""
        return Registration.objects.filter(user_id=user_id, event_id=event_id).first()

    @handle_db_errors(operation_type="read", model_name="Registration")
    def get_registration_detail(self, registration_id: int) -> Registration:
        return Registration.objects.with_related().get(id=registration_id)

    @handle_db_errors(operation_type="delete", model_name="Registration")
    def delete_registration(self, registration: Registration) -> bool:
        registration.delete()
        return True

    @handle_db_errors(operation_type="delete", model_name="Registration")
    def delete_event_registrations(self, event: Event) -> int:
        """Delete every registration of ``event``; returns how many were removed"""
        deleted, _ = Registration.objects.for_event(event.id).delete()
        return deleted

    @handle_db_errors(operation_type="read", model_name="Registration")
    def list_user_registrations(self, user) -> list[Registration]:
        """User's registrations, newest first"""
        return list(Registration.objects.for_user(user).with_related().newest_first())

    @handle_db_errors(operation_type="read", model_name="Registration")
    def list_all_registrations(self) -> list[Registration]:
        return list(Registration.objects.with_related().newest_first())

    @handle_db_errors(operation_type="read", model_name="Registration")
    def list_event_registrations(self, event_id: int) -> list[Registration]:
        return list(Registration.objects.for_event(event_id).with_related().newest_first())
