import logging

from drf_spectacular.utils import extend_schema
from rest_framework.permissions import IsAuthenticated

from apps.events.serializers import DashboardStatsSerializer
from apps.events.serializers import RegistrationSerializer
from apps.shared.auth.permissions import IsAdmin
from apps.shared.base.base_api_view import BaseAPIView
from apps.shared.container import get_dashboard_service
from apps.shared.container import get_registration_service
from apps.shared.utils.identifiers import parse_object_id

logger = logging.getLogger(__name__)


class BaseAdminAPIView(BaseAPIView):
    permission_classes = [IsAuthenticated, IsAdmin]


@extend_schema(tags=["Admin"], responses={200: DashboardStatsSerializer})
class DashboardStatsAPIView(BaseAdminAPIView):
    """Aggregate counts for the admin dashboard"""

    def get_service(self):
        return get_dashboard_service()

    def get(self, request):
        return self.success_response(self.get_service().get_stats())


@extend_schema(tags=["Admin"], responses={200: RegistrationSerializer(many=True)})
class AllRegistrationsAPIView(BaseAdminAPIView):
    """Every registration, newest first"""

    def get_service(self):
        return get_registration_service()

    def get(self, request):
        registrations = self.get_service().list_all()
        return self.success_response(
            RegistrationSerializer(registrations, many=True).data,
            count=len(registrations),
        )


@extend_schema(tags=["Admin"], responses={200: RegistrationSerializer(many=True)})
class EventRegistrationsAPIView(BaseAdminAPIView):
    """Registrations of one event, with the event title echoed back"""

    def get_service(self):
        return get_registration_service()

    def get(self, request, event_id):
        result = self.get_service().list_for_event(parse_object_id(event_id))
        registrations = result["registrations"]
        return self.success_response(
            RegistrationSerializer(registrations, many=True).data,
            count=len(registrations),
            event=result["event"],
        )
