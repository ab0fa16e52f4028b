from datetime import timedelta

from django.test import TestCase
from django.utils import timezone

from apps.accounts.tests.factories import AdminFactory
from apps.accounts.tests.factories import UserFactory
from apps.events.models import Registration
from apps.events.services.dashboard_service import DashboardService
from apps.events.services.registration_service import RegistrationService
from apps.events.tests.factories import EventFactory
from apps.events.tests.factories import PastEventFactory
from apps.events.tests.factories import RegistrationFactory


class DashboardServiceTest(TestCase):
    def setUp(self):
        self.service = DashboardService()
        self.now = timezone.now()
        self.admin = AdminFactory()

    def test_empty_database(self):
        stats = DashboardService().get_stats(self.now)

        self.assertEqual(stats['overview'], {'totalUsers': 1, 'totalEvents': 0, 'totalRegistrations': 0})
        self.assertEqual(stats['popularEvents'], [])

    def test_user_breakdown(self):
        UserFactory.create_batch(3)

        stats = self.service.get_stats(self.now)

        self.assertEqual(stats['users'], {'total': 4, 'students': 3, 'admins': 1})
        self.assertEqual(stats['overview']['totalUsers'], 4)

    def test_event_split_uses_one_instant(self):
        EventFactory(created_by=self.admin, date=self.now)
        EventFactory(created_by=self.admin, date=self.now + timedelta(days=1))
        PastEventFactory(created_by=self.admin, date=self.now - timedelta(microseconds=1))

        events = self.service.get_stats(self.now)['events']

        self.assertEqual(events, {'total': 3, 'upcoming': 2, 'past': 1})
        self.assertEqual(events['upcoming'] + events['past'], events['total'])

    def test_registrations_in_last_seven_days(self):
        recent = RegistrationFactory.create_batch(2)
        old = RegistrationFactory()
        Registration.objects.filter(id=old.id).update(created_at=self.now - timedelta(days=8))

        registrations = self.service.get_stats(self.now)['registrations']

        self.assertEqual(registrations, {'total': len(recent) + 1, 'lastSevenDays': 2})

    def test_total_registrations_matches_admin_listing(self):
        RegistrationFactory.create_batch(4)

        stats = self.service.get_stats(self.now)

        self.assertEqual(stats['overview']['totalRegistrations'], len(RegistrationService().list_all()))

    def test_popular_events_ranking(self):
        busy = EventFactory(created_by=self.admin, title='Busy')
        tied_first = EventFactory(created_by=self.admin, title='Tied first')
        tied_second = EventFactory(created_by=self.admin, title='Tied second')
        EventFactory(created_by=self.admin, title='Empty')
        RegistrationFactory.create_batch(3, event=busy)
        RegistrationFactory(event=tied_second)
        RegistrationFactory(event=tied_first)

        popular = self.service.get_stats(self.now)['popularEvents']

        self.assertEqual([p['id'] for p in popular], [busy.id, tied_first.id, tied_second.id])
        self.assertEqual(popular[0], {'id': busy.id, 'title': 'Busy', 'date': busy.date, 'registrationCount': 3})

    def test_popular_events_limited_to_five(self):
        for _ in range(7):
            RegistrationFactory(event=EventFactory(created_by=self.admin))

        self.assertEqual(len(self.service.get_stats(self.now)['popularEvents']), 5)
