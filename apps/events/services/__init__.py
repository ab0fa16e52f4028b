from apps.events.services.dashboard_service import DashboardService
from apps.events.services.event_service import EventService
from apps.events.services.registration_service import RegistrationService

__all__ = [
    'DashboardService',
    'EventService',
    'RegistrationService',
]
