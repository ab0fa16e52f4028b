import logging
from typing import Any

from django.db import transaction

from apps.events.dal.event_dal import EventDAL
from apps.events.dal.registration_dal import RegistrationDAL
from apps.events.exceptions import AlreadyRegisteredError
from apps.events.exceptions import EventNotFoundError
from apps.events.exceptions import RegistrationNotFoundError
from apps.events.models.registration import Registration

logger = logging.getLogger(__name__)


class RegistrationService:
    """Student registrations for events; one registration per user per event"""

    def __init__(self, dal: RegistrationDAL = None, event_dal: EventDAL = None):
        self.dal = dal or RegistrationDAL()
        self.event_dal = event_dal or EventDAL()

    @transaction.atomic
    def register(self, user, event_id: int) -> Registration:
        """
        Register ``user`` for the event.

        The event row stays locked until commit, so a concurrent event delete
        cannot leave the new registration orphaned. The existence check only
        gives a fast answer; the unique constraint decides races.

        Raises:
            EventNotFoundError: unknown event
            AlreadyRegisteredError: the pair already exists
        """
        event = self.event_dal.get_event_for_update(event_id)

        if self.dal.registration_exists(user.id, event.id):
            raise AlreadyRegisteredError(event_id=event.id, user_id=user.id)

        registration = self.dal.create_registration(user, event)
        logger.info(f'User {user.id} registered for event {event.id}')
        return self.dal.get_registration_detail(registration.id)

    @transaction.atomic
    def cancel(self, user, event_id: int) -> None:
        registration = self.dal.get_user_registration(user.id, event_id)
        if registration is None:
            raise RegistrationNotFoundError(event_id=event_id, user_id=user.id)

        self.dal.delete_registration(registration)
        logger.info(f'User {user.id} cancelled registration for event {event_id}')

    def list_mine(self, user) -> list[Registration]:
        return self.dal.list_user_registrations(user)

    def list_all(self) -> list[Registration]:
        return self.dal.list_all_registrations()

    def list_for_event(self, event_id: int) -> dict[str, Any]:
        """
        Registrations of one event.

        Returns:
            ``{'event': <event title>, 'registrations': [...]}``
        """
        title = self.event_dal.get_event_title(event_id)
        if title is None:
            raise EventNotFoundError(event_id)

        return {
            'event': title,
            'registrations': self.dal.list_event_registrations(event_id),
        }
