from collections.abc import Callable

from django.conf import settings

from apps.accounts.dal.user_dal import UserDAL
from apps.accounts.services.auth_service import AuthService
from apps.events.dal.event_analytics_dal import EventAnalyticsDAL
from apps.events.dal.event_dal import EventDAL
from apps.events.dal.registration_dal import RegistrationDAL
from apps.events.services.dashboard_service import DashboardService
from apps.events.services.event_service import EventService
from apps.events.services.registration_service import RegistrationService
from apps.shared.auth.jwt_service import JWTService


def build_jwt_service() -> JWTService:
    """JWTService configured from Django settings"""
    return JWTService(
        secret_key=settings.JWT_SECRET,
        lifetime=settings.JWT_ACCESS_TOKEN_LIFETIME,
        algorithm=settings.JWT_ALGORITHM,
        issuer=settings.JWT_ISSUER,
    )


class Container:
    """
    Simple DI Container for managing service dependencies.

    Factories can be overridden in tests and restored with ``reset_to_defaults``.
    """

    def __init__(self):
        self._dal_factories = {}
        self._service_factories = {}
        self._setup_default_factories()

    def _setup_default_factories(self):
        """Set up default factory functions for services"""
        self._dal_factories = {
            'user_dal': UserDAL,
            'event_dal': EventDAL,
            'registration_dal': RegistrationDAL,
            'analytics_dal': EventAnalyticsDAL,
        }

        self._service_factories = {
            'jwt_service': build_jwt_service,
        }

    def auth_service(self) -> AuthService:
        """Create AuthService with user DAL and token service injected"""
        return AuthService(
            user_dal=self._dal_factories['user_dal'](),
            jwt_service=self._service_factories['jwt_service'](),
        )

    def event_service(self) -> EventService:
        return EventService(
            dal=self._dal_factories['event_dal'](),
            registration_dal=self._dal_factories['registration_dal'](),
        )

    def registration_service(self) -> RegistrationService:
        return RegistrationService(
            dal=self._dal_factories['registration_dal'](),
            event_dal=self._dal_factories['event_dal'](),
        )

    def dashboard_service(self) -> DashboardService:
        return DashboardService(
            analytics_dal=self._dal_factories['analytics_dal'](),
            user_dal=self._dal_factories['user_dal'](),
        )

    # Override methods for testing
    def override_dal(self, name: str, factory: Callable):
        """Override a DAL factory (``user_dal``, ``event_dal``, ...) for testing"""
        self._dal_factories[name] = factory

    def override_jwt_service(self, factory: Callable):
        """Override JWTService factory for testing"""
        self._service_factories['jwt_service'] = factory

    def reset_to_defaults(self):
        """Reset all factories to defaults - useful for test cleanup"""
        self._setup_default_factories()


# Global container instance
_container = Container()


def get_container() -> Container:
    """Get the global container instance"""
    return _container


def get_auth_service() -> AuthService:
    return get_container().auth_service()


def get_event_service() -> EventService:
    return get_container().event_service()


def get_registration_service() -> RegistrationService:
    return get_container().registration_service()


def get_dashboard_service() -> DashboardService:
    return get_container().dashboard_service()
