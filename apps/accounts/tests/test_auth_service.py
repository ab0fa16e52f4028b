from datetime import timedelta

from django.db import transaction
from django.test import TestCase

from apps.accounts.dal.user_dal import UserDAL
from apps.accounts.exceptions import EmailAlreadyRegisteredError
from apps.accounts.exceptions import InvalidCredentialsError
from apps.accounts.models import CustomUser
from apps.accounts.services.auth_service import AuthService
from apps.accounts.tests.factories import TEST_PASSWORD
from apps.accounts.tests.factories import UserFactory
from apps.shared.auth.jwt_service import JWTService
from apps.shared.exceptions import AuthenticationError
from apps.shared.exceptions import ValidationError


class AuthServiceTest(TestCase):
    def setUp(self):
        self.jwt_service = JWTService('service-test-secret', timedelta(hours=1))
        self.service = AuthService(user_dal=UserDAL(), jwt_service=self.jwt_service)

    def test_register_then_login_resolves_same_user(self):
        registered = self.service.register('Ada Lovelace', 'ada@campus.test', 'secret123')
        logged_in = self.service.login('ada@campus.test', 'secret123')

        user = self.service.get_current_user(logged_in['token'])
        self.assertEqual(user.id, registered['user'].id)
        self.assertEqual(self.service.get_current_user(registered['token']).id, user.id)

    def test_register_defaults_to_student_and_hashes_password(self):
        user = self.service.register('Ada', 'ada@campus.test', 'secret123')['user']

        self.assertEqual(user.role, CustomUser.Role.STUDENT)
        self.assertNotEqual(user.password, 'secret123')
        self.assertTrue(user.check_password('secret123'))

    def test_register_admin_role(self):
        user = self.service.register('Grace', 'grace@campus.test', 'secret123', role='admin')['user']

        self.assertEqual(user.role, CustomUser.Role.ADMIN)

    def test_email_is_stored_lowercase(self):
        self.service.register('Ada', 'Ada@Campus.Test', 'secret123')

        result = self.service.login('ada@campus.test', 'secret123')
        self.assertEqual(result['user'].email, 'ada@campus.test')

    def test_register_requires_all_fields(self):
        for name, email, password in [('', 'a@campus.test', 'secret123'), ('A', '', 'secret123'), ('A', 'a@campus.test', '')]:
            with self.subTest(name=name, email=email), self.assertRaises(ValidationError) as ctx:
                self.service.register(name, email, password)
            self.assertEqual(ctx.exception.message, 'Please provide name, email, and password')

    def test_register_rejects_unknown_role(self):
        with self.assertRaises(ValidationError) as ctx:
            self.service.register('Ada', 'ada@campus.test', 'secret123', role='professor')
        self.assertIn('role', ctx.exception.field_errors)

    def test_register_rejects_short_password(self):
        with self.assertRaises(ValidationError) as ctx:
            self.service.register('Ada', 'ada@campus.test', '123')
        self.assertIn('password', ctx.exception.field_errors)

    def test_second_registration_with_same_email_conflicts(self):
        self.service.register('Ada', 'ada@campus.test', 'secret123')

        with self.assertRaises(EmailAlreadyRegisteredError) as ctx:
            self.service.register('Other Ada', 'ADA@campus.test', 'secret456')
        self.assertEqual(ctx.exception.message, 'User already exists with this email')

    def test_login_failures_share_one_message(self):
        UserFactory(email='bob@campus.test')

        with self.assertRaises(InvalidCredentialsError) as wrong_password:
            self.service.login('bob@campus.test', 'not-the-password')
        with self.assertRaises(InvalidCredentialsError) as unknown_email:
            self.service.login('nobody@campus.test', TEST_PASSWORD)

        self.assertEqual(wrong_password.exception.message, 'Invalid credentials')
        self.assertEqual(unknown_email.exception.message, wrong_password.exception.message)

    def test_login_requires_email_and_password(self):
        with self.assertRaises(ValidationError):
            self.service.login('bob@campus.test', '')

    def test_token_of_deleted_user_is_rejected(self):
        user = UserFactory()
        token = self.jwt_service.create_access_token(user)
        user.delete()

        with self.assertRaises(AuthenticationError) as ctx:
            self.service.get_current_user(token)
        self.assertEqual(ctx.exception.message, 'Invalid token. User not found.')

    def test_missing_token_is_rejected(self):
        with self.assertRaises(AuthenticationError) as ctx:
            self.service.get_current_user('')
        self.assertEqual(ctx.exception.message, 'Access denied. No token provided.')

    def test_list_users_newest_first(self):
        first = UserFactory()
        second = UserFactory()

        users = self.service.list_users()
        self.assertEqual([u.id for u in users], [second.id, first.id])


class UserDALTest(TestCase):
    def test_duplicate_email_rejected_by_store(self):
        dal = UserDAL()
        dal.create_user(email='dup@campus.test', password='secret123', name='Dup', role='student')

        with self.assertRaises(EmailAlreadyRegisteredError), transaction.atomic():
            dal.create_user(email='dup@campus.test', password='secret123', name='Dup', role='student')

    def test_role_counts(self):
        UserFactory.create_batch(2)
        UserFactory(role=CustomUser.Role.ADMIN)

        self.assertEqual(UserDAL().get_role_counts(), {'total': 3, 'students': 2, 'admins': 1})
