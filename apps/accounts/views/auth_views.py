import logging

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.permissions import IsAuthenticated

from apps.accounts.serializers import AuthPayloadSerializer
from apps.accounts.serializers import LoginSerializer
from apps.accounts.serializers import UserListSerializer
from apps.accounts.serializers import UserPublicSerializer
from apps.accounts.serializers import UserRegistrationSerializer
from apps.shared.auth.permissions import IsAdmin
from apps.shared.base.base_api_view import BaseAPIView
from apps.shared.container import get_auth_service

logger = logging.getLogger(__name__)


class BaseAuthAPIView(BaseAPIView):
    """Base view for authentication operations"""

    def __init__(self, auth_service=None, **kwargs):
        super().__init__(**kwargs)
        self._auth_service = auth_service

    def get_service(self):
        if self._auth_service is None:
            self._auth_service = get_auth_service()
        return self._auth_service


@extend_schema(tags=["Authentication"], request=UserRegistrationSerializer, responses={201: AuthPayloadSerializer})
class UserRegistrationView(BaseAuthAPIView):
    """Create an account and return a bearer token"""

    authentication_classes = ()
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = UserRegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().register(
            name=serializer.validated_data.get("name"),
            email=serializer.validated_data.get("email"),
            password=serializer.validated_data.get("password"),
            role=serializer.validated_data.get("role"),
        )

        return self.success_response(
            AuthPayloadSerializer(result).data,
            message="User registered successfully",
            status_code=status.HTTP_201_CREATED,
        )


@extend_schema(tags=["Authentication"], request=LoginSerializer, responses={200: AuthPayloadSerializer})
class LoginView(BaseAuthAPIView):
    """Exchange email and password for a bearer token"""

    authentication_classes = ()
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = self.get_service().login(
            email=serializer.validated_data.get("email"),
            password=serializer.validated_data.get("password"),
        )

        return self.success_response(AuthPayloadSerializer(result).data, message="Login successful")


@extend_schema(tags=["Authentication"], responses={200: UserPublicSerializer})
class CurrentUserView(BaseAuthAPIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        return self.success_response({"user": UserPublicSerializer(request.user).data})


@extend_schema(tags=["Admin"], responses={200: UserListSerializer(many=True)})
class UserListView(BaseAuthAPIView):
    """All accounts, newest first"""

    permission_classes = [IsAuthenticated, IsAdmin]

    def get(self, request):
        users = self.get_service().list_users()
        return self.success_response(UserListSerializer(users, many=True).data, count=len(users))
