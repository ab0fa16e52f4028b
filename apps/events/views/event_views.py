import logging

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated

from apps.events.serializers import EventSerializer
from apps.events.serializers import EventWriteSerializer
from apps.shared.auth.permissions import IsAdmin
from apps.shared.base.base_api_view import BaseAPIView
from apps.shared.container import get_event_service
from apps.shared.utils.identifiers import parse_object_id

logger = logging.getLogger(__name__)


class BaseEventAPIView(BaseAPIView):
    """Base view for event operations: reads for any user, writes for admins"""

    _event_service = None
    write_methods = ("POST", "PUT", "PATCH", "DELETE")

    def get_service(self):
        if self._event_service is None:
            self._event_service = get_event_service()
        return self._event_service

    def get_permissions(self):
        if self.request.method in self.write_methods:
            return [IsAuthenticated(), IsAdmin()]
        return [IsAuthenticated()]


@extend_schema(tags=["Events"])
class EventListCreateAPIView(BaseEventAPIView):
    """List all events or create one"""

    @extend_schema(responses={200: EventSerializer(many=True)})
    def get(self, request):
        events = self.get_service().list_events()
        return self.success_response(EventSerializer(events, many=True).data, count=len(events))

    @extend_schema(request=EventWriteSerializer, responses={201: EventSerializer})
    def post(self, request):
        serializer = EventWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        event = self.get_service().create_event(creator=request.user, validated_data=serializer.validated_data)

        return self.success_response(
            EventSerializer(event).data,
            message="Event created successfully",
            status_code=status.HTTP_201_CREATED,
        )


@extend_schema(tags=["Events"])
class EventDetailAPIView(BaseEventAPIView):
    """Read, update or delete a single event"""

    @extend_schema(responses={200: EventSerializer})
    def get(self, request, event_id):
        event = self.get_service().get_event(parse_object_id(event_id))
        return self.success_response(EventSerializer(event).data)

    @extend_schema(request=EventWriteSerializer, responses={200: EventSerializer})
    def put(self, request, event_id):
        event_id = parse_object_id(event_id)
        serializer = EventWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        event = self.get_service().update_event(event_id, serializer.validated_data)
        return self.success_response(EventSerializer(event).data, message="Event updated successfully")

    def delete(self, request, event_id):
        removed = self.get_service().delete_event(parse_object_id(event_id))
        return self.success_response(
            {"registrationsDeleted": removed},
            message="Event and associated registrations deleted successfully",
        )
