"""
Bearer token authentication for API endpoints
"""

import logging

from rest_framework import exceptions
from rest_framework.authentication import BaseAuthentication
from rest_framework.authentication import get_authorization_header

from apps.shared.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


class BearerTokenAuthentication(BaseAuthentication):
    """
    Authenticate ``Authorization: Bearer <token>`` headers.

    No header means "not authenticated" (``None``) so public views still
    work; DRF then answers 401 for protected views. A header that is present
    but unusable fails immediately with 401.
    """

    keyword = 'Bearer'

    def __init__(self, auth_service=None):
        self._auth_service = auth_service

    def get_auth_service(self):
        if self._auth_service is None:
            from apps.shared.container import get_auth_service

            self._auth_service = get_auth_service()
        return self._auth_service

    def authenticate(self, request):
        auth = get_authorization_header(request).split()

        if not auth or auth[0].lower() != self.keyword.lower().encode():
            return None

        if len(auth) != 2:
            raise exceptions.AuthenticationFailed('Invalid token.', code='invalid_token')

        try:
            token = auth[1].decode()
        except UnicodeError:
            raise exceptions.AuthenticationFailed('Invalid token.', code='invalid_token')

        try:
            user = self.get_auth_service().get_current_user(token)
        except AuthenticationError as e:
            raise exceptions.AuthenticationFailed(str(e), code=e.error_code)

        return user, token

    def authenticate_header(self, request):
        """Makes DRF answer 401 (not 403) for unauthenticated requests"""
        return f'{self.keyword} realm="api"'
