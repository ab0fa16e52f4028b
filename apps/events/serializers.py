"""
Event and registration serializers.

Input serializers only check types; required-field rules live in the
services so every caller gets the same messages.
"""

from rest_framework import serializers

from apps.events.models.event import Event
from apps.events.models.registration import Registration

# =============================================================================
# EVENT SERIALIZERS
# =============================================================================


class EventCreatorSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    email = serializers.EmailField(read_only=True)


class EventWriteSerializer(serializers.Serializer):
    """Create or partially update an event"""

    title = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    date = serializers.DateTimeField(required=False, allow_null=True)


class EventSerializer(serializers.ModelSerializer):
    """Event with its creator's public fields"""

    createdBy = EventCreatorSerializer(source="created_by", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Event
        fields = ["id", "title", "description", "date", "createdBy", "createdAt", "updatedAt"]
        read_only_fields = fields


class EventSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Event
        fields = ["id", "title", "description", "date"]
        read_only_fields = fields


# =============================================================================
# REGISTRATION SERIALIZERS
# =============================================================================


class RegistrantSerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    email = serializers.EmailField(read_only=True)
    role = serializers.CharField(read_only=True)


class RegistrationSerializer(serializers.ModelSerializer):
    """Registration joined with user and event summaries"""

    user = RegistrantSerializer(read_only=True)
    event = EventSummarySerializer(read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Registration
        fields = ["id", "user", "event", "createdAt"]
        read_only_fields = fields


# =============================================================================
# DASHBOARD SERIALIZERS (schema only)
# =============================================================================


class PopularEventSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    title = serializers.CharField()
    date = serializers.DateTimeField()
    registrationCount = serializers.IntegerField()


class DashboardStatsSerializer(serializers.Serializer):
    overview = serializers.DictField(child=serializers.IntegerField())
    users = serializers.DictField(child=serializers.IntegerField())
    events = serializers.DictField(child=serializers.IntegerField())
    registrations = serializers.DictField(child=serializers.IntegerField())
    popularEvents = PopularEventSerializer(many=True)
