import factory

from apps.accounts.models import CustomUser
from apps.shared.container import build_jwt_service

TEST_PASSWORD = 'testpass123'  # nosec  # noqa: S105


class UserFactory(factory.django.DjangoModelFactory):
    """Student account with ``TEST_PASSWORD``"""

    class Meta:
        model = CustomUser

    name = factory.Faker('name')
    email = factory.Sequence(lambda n: f'student{n}@campus.test')
    role = CustomUser.Role.STUDENT
    password = factory.django.Password(TEST_PASSWORD)


class AdminFactory(UserFactory):
    email = factory.Sequence(lambda n: f'admin{n}@campus.test')
    role = CustomUser.Role.ADMIN


def auth_header(user) -> dict:
    """Credentials kwargs for ``APIClient.credentials``"""
    token = build_jwt_service().create_access_token(user)
    return {'HTTP_AUTHORIZATION': f'Bearer {token}'}
