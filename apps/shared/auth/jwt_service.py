"""
Bearer token service built on PyJWT.

Tokens are signed access tokens only: there is no refresh flow, no
blacklist and no server-side session. A token carries the user id and
expires after a fixed lifetime.
"""

import logging
from datetime import timedelta
from typing import Any

import jwt
from django.utils import timezone

from apps.shared.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


class InvalidTokenError(AuthenticationError):
    """Raised when a token is malformed, tampered with or of the wrong type."""

    def __init__(self, message: str = 'Invalid token.', **kwargs):
        super().__init__(message, error_code='invalid_token', **kwargs)


class ExpiredTokenError(AuthenticationError):
    """Raised when a token's ``exp`` claim is in the past."""

    def __init__(self, message: str = 'Token expired.', **kwargs):
        super().__init__(message, error_code='token_expired', **kwargs)


class JWTService:
    """
    Issue and verify signed access tokens.

    All configuration is passed in by the caller (see ``apps.shared.container``);
    the service never reads settings on its own.
    """

    token_type = 'access'

    def __init__(self, secret_key: str, lifetime: timedelta, algorithm: str = 'HS256', issuer: str = None):
        if not secret_key:
            msg = 'JWT secret key must not be empty'
            raise ValueError(msg)
        self.secret_key = secret_key
        self.lifetime = lifetime
        self.algorithm = algorithm
        self.issuer = issuer

    def create_access_token(self, user) -> str:
        """
        Create access token for user

        Args:
            user: User instance (only ``id`` is read)

        Returns:
            JWT access token string
        """
        now = timezone.now()
        payload = {
            'user_id': user.id,
            'token_type': self.token_type,
            'iat': int(now.timestamp()),
            'exp': int((now + self.lifetime).timestamp()),
            'sub': str(user.id),
        }
        if self.issuer:
            payload['iss'] = self.issuer

        token = jwt.encode(payload, self.secret_key, algorithm=self.algorithm)
        logger.debug(f'Created access token for user {user.id}')
        return token

    def verify_token(self, token: str) -> dict[str, Any]:
        """
        Verify a token and return its payload.

        Raises:
            ExpiredTokenError: signature is valid but the token has expired
            InvalidTokenError: anything else wrong with the token
        """
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                options={'require': ['exp', 'user_id']},
            )
        except jwt.ExpiredSignatureError:
            logger.info('Access token has expired')
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            logger.warning(f'Invalid access token: {e!s}')
            raise InvalidTokenError()

        if payload.get('token_type') != self.token_type:
            logger.warning(f"Token type mismatch: expected {self.token_type}, got {payload.get('token_type')}")
            raise InvalidTokenError()

        return payload

    def get_user_id(self, token: str) -> int:
        """Verify token and return the user id it was issued for"""
        return self.verify_token(token)['user_id']

    @property
    def expires_in(self) -> int:
        """Token lifetime in seconds, reported to clients on login"""
        return int(self.lifetime.total_seconds())
