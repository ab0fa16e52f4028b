from types import SimpleNamespace

from django.test import SimpleTestCase

from apps.accounts.models import CustomUser
from apps.shared.auth.permissions import HasRole
from apps.shared.auth.permissions import IsAdmin
from apps.shared.auth.permissions import IsStudent
from apps.shared.auth.permissions import require_roles


def _request(role=None, authenticated=True):
    return SimpleNamespace(user=SimpleNamespace(is_authenticated=authenticated, role=role))


class RoleGateTest(SimpleTestCase):
    def test_admin_gate(self):
        self.assertTrue(IsAdmin().has_permission(_request('admin'), None))
        self.assertFalse(IsAdmin().has_permission(_request('student'), None))

    def test_student_gate(self):
        self.assertTrue(IsStudent().has_permission(_request('student'), None))
        self.assertFalse(IsStudent().has_permission(_request('admin'), None))

    def test_anonymous_is_rejected(self):
        self.assertFalse(IsAdmin().has_permission(_request(authenticated=False), None))

    def test_denial_message_names_required_role(self):
        self.assertEqual(IsAdmin().message, 'Access denied. Required role: admin')

    def test_require_roles_accepts_any_listed_role(self):
        gate = require_roles('student', 'admin')()

        self.assertTrue(gate.has_permission(_request('student'), None))
        self.assertTrue(gate.has_permission(_request('admin'), None))
        self.assertEqual(gate.message, 'Access denied. Required role: student or admin')

    def test_unknown_role_fails_at_class_creation(self):
        with self.assertRaises(ValueError):

            class IsProfessor(HasRole):
                allowed_roles = ('professor',)

    def test_roles_are_coerced_to_enum(self):
        self.assertEqual(require_roles('admin').allowed_roles, (CustomUser.Role.ADMIN,))
