import logging
from datetime import datetime
from datetime import timedelta
from typing import Any

from django.utils import timezone

from apps.accounts.dal.user_dal import UserDAL
from apps.events.dal.event_analytics_dal import EventAnalyticsDAL

logger = logging.getLogger(__name__)

RECENT_REGISTRATIONS_WINDOW = timedelta(days=7)
POPULAR_EVENTS_LIMIT = 5


class DashboardService:
    """Admin dashboard aggregates, computed fresh on every call"""

    def __init__(self, analytics_dal: EventAnalyticsDAL = None, user_dal: UserDAL = None):
        self.analytics_dal = analytics_dal or EventAnalyticsDAL()
        self.user_dal = user_dal or UserDAL()

    def get_stats(self, now: datetime = None) -> dict[str, Any]:
        """
        Collect dashboard statistics.

        Args:
            now: Reference time for the upcoming/past split and the
                seven-day window; captured once so both use the same instant
        """
        now = now or timezone.now()

        users = self.user_dal.get_role_counts()
        events = self.analytics_dal.get_event_counts(now)
        registrations = self.analytics_dal.get_registration_counts(now - RECENT_REGISTRATIONS_WINDOW)
        popular = self.analytics_dal.get_popular_events(POPULAR_EVENTS_LIMIT)

        return {
            'overview': {
                'totalUsers': users['total'],
                'totalEvents': events['total'],
                'totalRegistrations': registrations['total'],
            },
            'users': {
                'total': users['total'],
                'students': users['students'],
                'admins': users['admins'],
            },
            'events': {
                'total': events['total'],
                'upcoming': events['upcoming'],
                'past': events['past'],
            },
            'registrations': {
                'total': registrations['total'],
                'lastSevenDays': registrations['recent'],
            },
            'popularEvents': [
                {
                    'id': event.id,
                    'title': event.title,
                    'date': event.date,
                    'registrationCount': event.registration_count,
                }
                for event in popular
            ],
        }
