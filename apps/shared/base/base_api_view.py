from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.shared.auth.authentication import BearerTokenAuthentication


class BaseAPIView(APIView):
    """
    Unified base class for all API views in CampusConnect.

    Features:
    - Bearer token authentication
    - Service layer integration
    - Success envelope helper

    Note: Error responses are built by the DRF exception handler, views never
    catch business exceptions themselves.
    """

    authentication_classes = (BearerTokenAuthentication,)

    def get_service(self):
        """
        Subclasses must implement this to return appropriate service instance.

        Raises:
            NotImplementedError: If not implemented by subclass
        """
        raise NotImplementedError("Subclasses must implement get_service()")

    def success_response(self, data=None, message: str = None, status_code: int = status.HTTP_200_OK, **extra):
        """Wrap ``data`` as ``{"success": true, "message"?, ..., "data"?}``"""
        body = {"success": True}
        if message:
            body["message"] = message
        body.update(extra)
        if data is not None:
            body["data"] = data
        return Response(body, status=status_code)
