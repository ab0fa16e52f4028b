from unittest import mock

from django.db import transaction
from django.test import TestCase

from apps.accounts.tests.factories import UserFactory
from apps.events.dal.registration_dal import RegistrationDAL
from apps.events.exceptions import AlreadyRegisteredError
from apps.events.exceptions import EventNotFoundError
from apps.events.exceptions import RegistrationNotFoundError
from apps.events.models import Registration
from apps.events.services.event_service import EventService
from apps.events.services.registration_service import RegistrationService
from apps.events.tests.factories import EventFactory
from apps.events.tests.factories import RegistrationFactory


class RegistrationServiceTest(TestCase):
    def setUp(self):
        self.service = RegistrationService()
        self.student = UserFactory()
        self.event = EventFactory()

    def test_register_returns_joined_registration(self):
        registration = self.service.register(self.student, self.event.id)

        self.assertEqual(registration.user, self.student)
        self.assertEqual(registration.event, self.event)

    def test_register_twice_conflicts(self):
        self.service.register(self.student, self.event.id)

        with self.assertRaises(AlreadyRegisteredError) as ctx:
            self.service.register(self.student, self.event.id)
        self.assertEqual(ctx.exception.message, 'You are already registered for this event')
        self.assertEqual(Registration.objects.count(), 1)

    def test_unique_constraint_decides_when_precheck_misses(self):
        RegistrationFactory(user=self.student, event=self.event)

        with mock.patch.object(RegistrationDAL, 'registration_exists', return_value=False):
            with self.assertRaises(AlreadyRegisteredError):
                self.service.register(self.student, self.event.id)

        self.assertEqual(Registration.objects.count(), 1)

    def test_dal_translates_duplicate_insert(self):
        dal = RegistrationDAL()
        dal.create_registration(self.student, self.event)

        with self.assertRaises(AlreadyRegisteredError), transaction.atomic():
            dal.create_registration(self.student, self.event)

    def test_register_for_missing_event(self):
        with self.assertRaises(EventNotFoundError):
            self.service.register(self.student, 999999)

    def test_register_again_after_cancel(self):
        self.service.register(self.student, self.event.id)
        self.service.cancel(self.student, self.event.id)

        self.service.register(self.student, self.event.id)

        self.assertEqual(Registration.objects.filter(user=self.student).count(), 1)

    def test_cancel_without_registration(self):
        with self.assertRaises(RegistrationNotFoundError) as ctx:
            self.service.cancel(self.student, self.event.id)
        self.assertEqual(ctx.exception.message, 'Registration not found')

    def test_cancel_only_removes_own_registration(self):
        other = RegistrationFactory(event=self.event)
        RegistrationFactory(user=self.student, event=self.event)

        self.service.cancel(self.student, self.event.id)

        self.assertEqual(list(Registration.objects.all()), [other])

    def test_list_mine_newest_first(self):
        first = RegistrationFactory(user=self.student)
        second = RegistrationFactory(user=self.student)
        RegistrationFactory()

        self.assertEqual([r.id for r in self.service.list_mine(self.student)], [second.id, first.id])

    def test_list_for_event_echoes_title(self):
        registration = RegistrationFactory(event=self.event)
        RegistrationFactory()

        result = self.service.list_for_event(self.event.id)

        self.assertEqual(result['event'], self.event.title)
        self.assertEqual(result['registrations'], [registration])

    def test_list_for_missing_event(self):
        with self.assertRaises(EventNotFoundError):
            self.service.list_for_event(999999)

    def test_event_delete_leaves_no_registration_behind(self):
        RegistrationFactory.create_batch(2, event=self.event)
        RegistrationFactory()

        EventService().delete_event(self.event.id)

        self.assertFalse(any(r.event_id == self.event.id for r in self.service.list_all()))
        self.assertEqual(len(self.service.list_all()), 1)
