from .admin_views import AllRegistrationsAPIView
from .admin_views import DashboardStatsAPIView
from .admin_views import EventRegistrationsAPIView
from .event_views import EventDetailAPIView
from .event_views import EventListCreateAPIView
from .registration_views import EventRegistrationAPIView
from .registration_views import MyRegistrationsAPIView

__all__ = [
    'AllRegistrationsAPIView',
    'DashboardStatsAPIView',
    'EventDetailAPIView',
    'EventListCreateAPIView',
    'EventRegistrationAPIView',
    'EventRegistrationsAPIView',
    'MyRegistrationsAPIView',
]
