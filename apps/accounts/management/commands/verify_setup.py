import os

from django.conf import settings
from django.core.management import BaseCommand
from django.core.management import CommandError
from django.db import DatabaseError
from django.db import connection

REQUIRED_ENV_VARS = ("JWT_SECRET", "DATABASE_URL", "FRONTEND_URL")


class Command(BaseCommand):
    help = "Verify configuration and database connectivity"

    def handle(self, *args, **options):  # noqa: ARG002
        has_errors = False

        self.stdout.write("1. Checking environment variables...")
        for name in REQUIRED_ENV_VARS:
            if os.environ.get(name):
                self.stdout.write(self.style.SUCCESS(f"   OK  {name}"))
            else:
                self.stdout.write(self.style.ERROR(f"   MISSING  {name}"))
                has_errors = True

        self.stdout.write("2. Checking token settings...")
        if settings.JWT_SECRET and settings.JWT_ACCESS_TOKEN_LIFETIME.total_seconds() > 0:
            hours = settings.JWT_ACCESS_TOKEN_LIFETIME.total_seconds() / 3600
            self.stdout.write(self.style.SUCCESS(f"   OK  tokens expire after {hours:g}h"))
        else:
            self.stdout.write(self.style.ERROR("   JWT_SECRET is empty or token lifetime is not positive"))
            has_errors = True

        self.stdout.write("3. Checking database connectivity...")
        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
            self.stdout.write(self.style.SUCCESS(f"   OK  {connection.vendor} database reachable"))
        except DatabaseError as e:
            self.stdout.write(self.style.ERROR(f"   Database error: {e}"))
            has_errors = True

        if has_errors:
            msg = "Setup verification failed. Fix the errors above."
            raise CommandError(msg)

        self.stdout.write(self.style.SUCCESS("All checks passed. Run: python manage.py runserver"))
