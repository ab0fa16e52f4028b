"""
Event Analytics Data Access Layer - Focused on Dashboard Statistics Only

Read-only aggregate queries; nothing here is cached.
"""

from datetime import datetime

from django.db.models import Count
from django.db.models import Q

from apps.events.models.event import Event
from apps.events.models.registration import Registration
from apps.shared.decorators.database import handle_db_errors


class EventAnalyticsDAL:
    """Data Access Layer for event and registration statistics only"""

    @handle_db_errors(operation_type="read", model_name="Event")
    def get_event_counts(self, now: datetime) -> dict[str, int]:
        """Total, upcoming (date >= now) and past (date < now) events in one query"""
        return Event.objects.aggregate(
            total=Count("id"),
            upcoming=Count("id", filter=Q(date__gte=now)),
            past=Count("id", filter=Q(date__lt=now)),
        )

    @handle_db_errors(operation_type="read", model_name="Registration")
    def get_registration_counts(self, since: datetime) -> dict[str, int]:
        """Total registrations and those created at or after ``since``"""
        return Registration.objects.aggregate(
            total=Count("id"),
            recent=Count("id", filter=Q(created_at__gte=since)),
        )

    @handle_db_errors(operation_type="read", model_name="Event")
    def get_popular_events(self, limit: int = 5) -> list[Event]:
        """
        Events with the most registrations, annotated with ``registration_count``.

        Events without registrations are left out. Ties keep the older event
        (lower id) first.
        """
        return list(
            Event.objects.annotate(registration_count=Count("registrations"))
            .filter(registration_count__gt=0)
            .order_by("-registration_count", "id")[:limit]
        )
