from datetime import timedelta

from django.test import TestCase
from django.utils import timezone

from apps.accounts.tests.factories import AdminFactory
from apps.events.exceptions import EventNotFoundError
from apps.events.models import Event
from apps.events.models import Registration
from apps.events.services.event_service import EventService
from apps.events.tests.factories import EventFactory
from apps.events.tests.factories import RegistrationFactory
from apps.shared.exceptions import ValidationError


class EventServiceTest(TestCase):
    def setUp(self):
        self.service = EventService()
        self.admin = AdminFactory()

    def test_create_event(self):
        date = timezone.now() + timedelta(days=3)

        event = self.service.create_event(self.admin, {'title': '  Tech Talk ', 'date': date})

        self.assertEqual(event.title, 'Tech Talk')
        self.assertEqual(event.description, '')
        self.assertEqual(event.created_by, self.admin)

    def test_create_requires_title_and_date(self):
        for data in ({'date': timezone.now()}, {'title': 'Tech Talk'}, {'title': '   ', 'date': timezone.now()}):
            with self.subTest(data=data), self.assertRaises(ValidationError):
                self.service.create_event(self.admin, data)
        self.assertFalse(Event.objects.exists())

    def test_list_is_ordered_by_date(self):
        later = EventFactory(date=timezone.now() + timedelta(days=10))
        sooner = EventFactory(date=timezone.now() + timedelta(days=1))
        past = EventFactory(date=timezone.now() - timedelta(days=1))

        self.assertEqual([e.id for e in self.service.list_events()], [past.id, sooner.id, later.id])

    def test_get_unknown_event(self):
        with self.assertRaises(EventNotFoundError) as ctx:
            self.service.get_event(999999)
        self.assertEqual(ctx.exception.message, 'Event not found')

    def test_update_only_touches_supplied_fields(self):
        event = EventFactory(title='Old title', description='Keep me')

        updated = self.service.update_event(event.id, {'title': 'New title'})

        self.assertEqual(updated.title, 'New title')
        self.assertEqual(updated.description, 'Keep me')
        self.assertEqual(updated.date, event.date)

    def test_update_rejects_blank_title_and_null_date(self):
        event = EventFactory(title='Stays')

        with self.assertRaises(ValidationError) as ctx:
            self.service.update_event(event.id, {'title': '', 'date': None})

        self.assertEqual(set(ctx.exception.field_errors), {'title', 'date'})
        event.refresh_from_db()
        self.assertEqual(event.title, 'Stays')

    def test_update_unknown_event(self):
        with self.assertRaises(EventNotFoundError):
            self.service.update_event(999999, {'title': 'x'})

    def test_delete_cascades_registrations(self):
        event = EventFactory()
        other = EventFactory()
        RegistrationFactory.create_batch(3, event=event)
        kept = RegistrationFactory(event=other)

        removed = self.service.delete_event(event.id)

        self.assertEqual(removed, 3)
        self.assertFalse(Event.objects.filter(id=event.id).exists())
        self.assertEqual(list(Registration.objects.all()), [kept])

    def test_delete_unknown_event(self):
        with self.assertRaises(EventNotFoundError):
            self.service.delete_event(999999)
