from datetime import timedelta

from django.conf import settings
from rest_framework import status
from rest_framework.test import APITestCase

from apps.accounts.models import CustomUser
from apps.accounts.tests.factories import TEST_PASSWORD
from apps.accounts.tests.factories import AdminFactory
from apps.accounts.tests.factories import UserFactory
from apps.accounts.tests.factories import auth_header
from apps.shared.auth.jwt_service import JWTService


class RegisterAPITest(APITestCase):
    url = '/api/auth/register'

    def test_register_returns_user_and_token(self):
        response = self.client.post(
            self.url,
            {'name': 'Ada Lovelace', 'email': 'ada@campus.test', 'password': 'secret123'},
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        body = response.json()
        self.assertTrue(body['success'])
        self.assertEqual(body['message'], 'User registered successfully')
        self.assertEqual(
            body['data']['user'],
            {
                'id': CustomUser.objects.get(email='ada@campus.test').id,
                'name': 'Ada Lovelace',
                'email': 'ada@campus.test',
                'role': 'student',
            },
        )
        self.assertTrue(body['data']['token'])

    def test_trailing_slash_is_accepted(self):
        response = self.client.post(
            self.url + '/',
            {'name': 'Ada', 'email': 'ada@campus.test', 'password': 'secret123', 'role': 'admin'},
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.json()['data']['user']['role'], 'admin')

    def test_missing_fields(self):
        response = self.client.post(self.url, {'email': 'ada@campus.test'})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        body = response.json()
        self.assertFalse(body['success'])
        self.assertEqual(body['message'], 'Please provide name, email, and password')

    def test_duplicate_email(self):
        UserFactory(email='ada@campus.test')

        response = self.client.post(
            self.url,
            {'name': 'Ada', 'email': 'ada@campus.test', 'password': 'secret123'},
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()['message'], 'User already exists with this email')

    def test_unknown_role(self):
        response = self.client.post(
            self.url,
            {'name': 'Ada', 'email': 'ada@campus.test', 'password': 'secret123', 'role': 'dean'},
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertTrue(any(error.startswith('role:') for error in response.json()['errors']))

    def test_malformed_email(self):
        response = self.client.post(self.url, {'name': 'Ada', 'email': 'not-an-email', 'password': 'secret123'})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()['message'], 'Validation Error')


class LoginAPITest(APITestCase):
    url = '/api/auth/login'

    def setUp(self):
        self.user = UserFactory(email='bob@campus.test')

    def test_login_returns_token_for_same_user(self):
        response = self.client.post(self.url, {'email': 'bob@campus.test', 'password': TEST_PASSWORD})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        body = response.json()
        self.assertEqual(body['message'], 'Login successful')
        self.assertEqual(body['data']['user']['id'], self.user.id)

        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {body['data']['token']}")
        me = self.client.get('/api/auth/me')
        self.assertEqual(me.json()['data']['user']['id'], self.user.id)

    def test_wrong_password(self):
        response = self.client.post(self.url, {'email': 'bob@campus.test', 'password': 'wrong-password'})

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.json()['message'], 'Invalid credentials')

    def test_unknown_email(self):
        response = self.client.post(self.url, {'email': 'nobody@campus.test', 'password': TEST_PASSWORD})

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.json()['message'], 'Invalid credentials')

    def test_missing_password(self):
        response = self.client.post(self.url, {'email': 'bob@campus.test'})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()['message'], 'Please provide email and password')


class CurrentUserAPITest(APITestCase):
    url = '/api/auth/me'

    def test_me(self):
        user = UserFactory()
        self.client.credentials(**auth_header(user))

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json()['data']['user']['email'], user.email)
        self.assertNotIn('password', response.json()['data']['user'])

    def test_no_token(self):
        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.json()['message'], 'Access denied. No token provided.')

    def test_invalid_token(self):
        self.client.credentials(HTTP_AUTHORIZATION='Bearer not-a-token')

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.json()['message'], 'Invalid token.')

    def test_expired_token(self):
        user = UserFactory()
        expired = JWTService(
            settings.JWT_SECRET,
            timedelta(seconds=-10),
            algorithm=settings.JWT_ALGORITHM,
            issuer=settings.JWT_ISSUER,
        )
        self.client.credentials(HTTP_AUTHORIZATION=f'Bearer {expired.create_access_token(user)}')

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.json()['message'], 'Token expired.')

    def test_token_of_deleted_user(self):
        user = UserFactory()
        self.client.credentials(**auth_header(user))
        user.delete()

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.json()['message'], 'Invalid token. User not found.')


class AdminUserListAPITest(APITestCase):
    url = '/api/admin/users'

    def test_admin_lists_users_without_passwords(self):
        admin = AdminFactory()
        student = UserFactory()
        self.client.credentials(**auth_header(admin))

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        body = response.json()
        self.assertEqual(body['count'], 2)
        self.assertEqual({row['id'] for row in body['data']}, {admin.id, student.id})
        for row in body['data']:
            self.assertNotIn('password', row)

    def test_student_is_forbidden(self):
        self.client.credentials(**auth_header(UserFactory()))

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.json()['message'], 'Access denied. Required role: admin')
