from rest_framework import serializers

from .models import CustomUser


class UserRegistrationSerializer(serializers.Serializer):
    """Input for account registration; presence and role checks live in AuthService"""

    name = serializers.CharField(required=False, allow_blank=True, max_length=150)
    email = serializers.EmailField(required=False, allow_blank=True)
    password = serializers.CharField(required=False, allow_blank=True, write_only=True, trim_whitespace=False)
    role = serializers.CharField(required=False, allow_blank=True, allow_null=True)


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField(required=False, allow_blank=True)
    password = serializers.CharField(required=False, allow_blank=True, write_only=True, trim_whitespace=False)


class UserPublicSerializer(serializers.ModelSerializer):
    """Public user fields, never the password hash"""

    class Meta:
        model = CustomUser
        fields = ("id", "name", "email", "role")
        read_only_fields = fields


class UserListSerializer(serializers.ModelSerializer):
    """User row for the admin users list"""

    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = CustomUser
        fields = ("id", "name", "email", "role", "createdAt")
        read_only_fields = fields


class AuthPayloadSerializer(serializers.Serializer):
    """``data`` of register/login responses"""

    user = UserPublicSerializer()
    token = serializers.CharField()
