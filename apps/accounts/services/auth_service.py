import logging
from typing import Any

from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoValidationError

from apps.accounts.dal.user_dal import UserDAL
from apps.accounts.exceptions import EmailAlreadyRegisteredError
from apps.accounts.exceptions import InvalidCredentialsError
from apps.accounts.models.custom_user import CustomUser
from apps.shared.auth.jwt_service import JWTService
from apps.shared.exceptions import AuthenticationError
from apps.shared.exceptions import ValidationError

logger = logging.getLogger(__name__)


class AuthService:
    """Account registration, login and bearer token resolution"""

    def __init__(self, user_dal: UserDAL = None, jwt_service: JWTService = None):
        if jwt_service is None:
            from apps.shared.container import build_jwt_service

            jwt_service = build_jwt_service()
        self.user_dal = user_dal or UserDAL()
        self.jwt_service = jwt_service

    def register(self, name: str, email: str, password: str, role: str = None) -> dict[str, Any]:
        """
        Create an account and sign the user in.

        Returns:
            ``{'user': CustomUser, 'token': str}``

        Raises:
            ValidationError: missing fields, unknown role or weak password
            EmailAlreadyRegisteredError: email already in use
        """
        name = (name or '').strip()
        email = (email or '').strip().lower()
        if not name or not email or not password:
            raise ValidationError('Please provide name, email, and password', error_code='missing_fields')

        role = self._parse_role(role)

        try:
            validate_password(password)
        except DjangoValidationError as e:
            raise ValidationError('Validation Error', field_errors={'password': e.messages})

        if self.user_dal.email_exists(email):
            raise EmailAlreadyRegisteredError(email)

        user = self.user_dal.create_user(email=email, password=password, name=name, role=role)
        logger.info(f'Registered user {user.id} ({user.role})')

        return {'user': user, 'token': self.jwt_service.create_access_token(user)}

    def login(self, email: str, password: str) -> dict[str, Any]:
        """
        Check credentials and issue a token.

        Unknown email and wrong password fail with the same message.
        """
        email = (email or '').strip()
        if not email or not password:
            raise ValidationError('Please provide email and password', error_code='missing_fields')

        user = self.user_dal.get_by_email(email)
        if user is None or not user.is_active or not user.check_password(password):
            logger.info('Failed login attempt')
            raise InvalidCredentialsError()

        logger.info(f'Successful login for user {user.id}')
        return {'user': user, 'token': self.jwt_service.create_access_token(user)}

    def get_current_user(self, token: str) -> CustomUser:
        """
        Resolve a bearer token to its user.

        Raises:
            AuthenticationError: token missing, invalid or expired, or the user is gone
        """
        if not token:
            raise AuthenticationError('Access denied. No token provided.', error_code='not_authenticated')

        user_id = self.jwt_service.get_user_id(token)
        user = self.user_dal.get_by_id(user_id)
        if user is None or not user.is_active:
            raise AuthenticationError('Invalid token. User not found.', error_code='user_not_found')
        return user

    def list_users(self) -> list[CustomUser]:
        return list(self.user_dal.list_users())

    @staticmethod
    def _parse_role(role) -> str:
        if not role:
            return CustomUser.Role.STUDENT
        try:
            return CustomUser.Role(role)
        except ValueError:
            allowed = ', '.join(CustomUser.Role.values)
            raise ValidationError(
                'Validation Error',
                field_errors={'role': [f'Role must be one of: {allowed}']},
                error_code='invalid_role',
            )
