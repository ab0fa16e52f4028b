import logging

from django.http import JsonResponse
from django.utils import timezone
from drf_spectacular.utils import extend_schema
from rest_framework.permissions import AllowAny

from apps.shared.base.base_api_view import BaseAPIView

logger = logging.getLogger(__name__)


@extend_schema(tags=['System'])
class HealthCheckAPIView(BaseAPIView):
    """Liveness probe"""

    authentication_classes = ()
    permission_classes = [AllowAny]

    def get(self, request):
        return self.success_response(
            message='CampusConnect Lite API is running',
            timestamp=timezone.now().isoformat(),
        )


def route_not_found(request, exception=None):
    """JSON body for any path no route matches"""
    return JsonResponse(
        {'success': False, 'message': 'Route not found', 'path': request.path},
        status=404,
    )


def server_error(request):
    """JSON body for errors raised outside DRF views"""
    logger.error(f'Unhandled server error on {request.method} {request.path}')
    return JsonResponse(
        {
            'success': False,
            'message': 'Internal Server Error',
            'error_code': 'internal_server_error',
            'timestamp': timezone.now().isoformat(),
        },
        status=500,
    )
