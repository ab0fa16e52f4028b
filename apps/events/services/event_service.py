import logging
from typing import Any

from django.db import transaction

from apps.events.dal.event_dal import EventDAL
from apps.events.dal.registration_dal import RegistrationDAL
from apps.events.models.event import Event
from apps.shared.exceptions import ValidationError

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ('title', 'description', 'date')


class EventService:
    """Service for event business logic operations"""

    def __init__(self, dal: EventDAL = None, registration_dal: RegistrationDAL = None):
        self.dal = dal or EventDAL()
        self.registration_dal = registration_dal or RegistrationDAL()

    def list_events(self) -> list[Event]:
        return self.dal.list_events()

    def get_event(self, event_id: int) -> Event:
        """Raises EventNotFoundError when the id is unknown"""
        return self.dal.get_event(event_id)

    def create_event(self, creator, validated_data: dict[str, Any]) -> Event:
        """Create event owned by ``creator``; title and date are required"""
        title = (validated_data.get('title') or '').strip()
        date = validated_data.get('date')
        if not title or not date:
            raise ValidationError('Please provide title and date', error_code='missing_fields')

        event = self.dal.create_event(
            {
                'title': title,
                'description': validated_data.get('description') or '',
                'date': date,
                'created_by': creator,
            }
        )
        logger.info(f'Event {event.id} created by user {creator.id}')
        return event

    @transaction.atomic
    def update_event(self, event_id: int, validated_data: dict[str, Any]) -> Event:
        """
        Partial update: only supplied fields change.

        Raises:
            EventNotFoundError: unknown id
            ValidationError: blank title or null date supplied
        """
        changes = {field: validated_data[field] for field in EDITABLE_FIELDS if field in validated_data}

        field_errors = {}
        if 'title' in changes and not (changes['title'] or '').strip():
            field_errors['title'] = ['Title cannot be blank']
        if 'date' in changes and changes['date'] is None:
            field_errors['date'] = ['Date cannot be null']
        if field_errors:
            raise ValidationError('Validation Error', field_errors=field_errors, error_code='invalid_event')

        if changes.get('description') is None and 'description' in changes:
            changes['description'] = ''

        event = self.dal.get_event_for_update(event_id)
        event = self.dal.update_event(event, changes)
        logger.info(f'Event {event.id} updated: {sorted(changes)}')
        return self.dal.get_event(event.id)

    @transaction.atomic
    def delete_event(self, event_id: int) -> int:
        """
        Delete event and all its registrations in one transaction.

        The event row is locked first so no registration can be added between
        the two deletes.

        Returns:
            Number of registrations removed
        """
        event = self.dal.get_event_for_update(event_id)
        removed = self.registration_dal.delete_event_registrations(event)
        self.dal.delete_event(event)
        logger.info(f'Event {event_id} deleted with {removed} registration(s)')
        return removed
