from typing import Any

from django.core.exceptions import ObjectDoesNotExist

from apps.events.exceptions import EventNotFoundError
from apps.events.models.event import Event
from apps.shared.decorators.database import handle_db_errors


def _event_not_found(error: ObjectDoesNotExist, context: dict) -> EventNotFoundError:
    return EventNotFoundError(context.get("event_id"))


class EventDAL:
    """Data Access Layer for Event model operations only"""

    @handle_db_errors(operation_type="read", model_name="Event")
    def list_events(self) -> list[Event]:
        """All events, soonest first, with creator joined"""
        return list(Event.objects.with_creator().chronological())

    @handle_db_errors(
        operation_type="read",
        model_name="Event",
        custom_mappings={ObjectDoesNotExist: _event_not_found},
    )
    def get_event(self, event_id: int) -> Event:
        """Get event by id with creator joined"""
        return Event.objects.with_creator().get(id=event_id)

    @handle_db_errors(
        operation_type="read",
        model_name="Event",
        custom_mappings={ObjectDoesNotExist: _event_not_found},
    )
    def get_event_for_update(self, event_id: int) -> Event:
        """Get event and lock its row; must run inside ``transaction.atomic``"""
        return Event.objects.select_for_update().get(id=event_id)

    @handle_db_errors(operation_type="read", model_name="Event")
    def get_event_title(self, event_id: int) -> str | None:
        return Event.objects.filter(id=event_id).values_list("title", flat=True).first()

    @handle_db_errors(operation_type="create", model_name="Event")
    def create_event(self, event_data: dict[str, Any]) -> Event:
        """Create new event"""
        return Event.objects.create(**event_data)

    @handle_db_errors(operation_type="update", model_name="Event")
    def update_event(self, event: Event, validated_data: dict[str, Any]) -> Event:
        """Update event fields"""
        for field, value in validated_data.items():
            setattr(event, field, value)
        event.save()
        return event

    @handle_db_errors(operation_type="delete", model_name="Event")
    def delete_event(self, event: Event) -> bool:
        """Delete event"""
        event.delete()
        return True
