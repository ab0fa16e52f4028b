from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated

from apps.events.serializers import RegistrationSerializer
from apps.shared.auth.permissions import IsStudent
from apps.shared.base.base_api_view import BaseAPIView
from apps.shared.container import get_registration_service
from apps.shared.utils.identifiers import parse_object_id


class BaseRegistrationAPIView(BaseAPIView):
    """Student-only registration endpoints"""

    permission_classes = [IsAuthenticated, IsStudent]
    _registration_service = None

    def get_service(self):
        if self._registration_service is None:
            self._registration_service = get_registration_service()
        return self._registration_service


@extend_schema(tags=["Registrations"])
class EventRegistrationAPIView(BaseRegistrationAPIView):
    """Register for an event or cancel the registration"""

    @extend_schema(request=None, responses={201: RegistrationSerializer})
    def post(self, request, event_id):
        registration = self.get_service().register(request.user, parse_object_id(event_id))
        return self.success_response(
            RegistrationSerializer(registration).data,
            message="Successfully registered for the event",
            status_code=status.HTTP_201_CREATED,
        )

    def delete(self, request, event_id):
        self.get_service().cancel(request.user, parse_object_id(event_id))
        return self.success_response(message="Registration cancelled successfully")


@extend_schema(tags=["Registrations"], responses={200: RegistrationSerializer(many=True)})
class MyRegistrationsAPIView(BaseRegistrationAPIView):
    def get(self, request):
        registrations = self.get_service().list_mine(request.user)
        return self.success_response(
            RegistrationSerializer(registrations, many=True).data,
            count=len(registrations),
        )
