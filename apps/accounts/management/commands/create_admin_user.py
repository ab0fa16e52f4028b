from django.contrib.auth import get_user_model
from django.core.management import BaseCommand


class Command(BaseCommand):
    ADMIN_EMAIL = "admin@campusconnect.local"
    ADMIN_PASSWORD = "admin123"  # nosec  # noqa: S105
    ADMIN_NAME = "Administrator"
    help = "Create or update an admin account (role admin, staff, superuser)"

    def add_arguments(self, parser):
        parser.add_argument("--email", default=self.ADMIN_EMAIL)
        parser.add_argument("--password", default=self.ADMIN_PASSWORD)
        parser.add_argument("--name", default=self.ADMIN_NAME)

    def handle(self, *args, **options):  # noqa: ARG002
        user_class = get_user_model()

        user, created = user_class.objects.update_or_create(
            email=options["email"].strip().lower(),
            defaults={
                "name": options["name"],
                "role": user_class.Role.ADMIN,
                "is_staff": True,
                "is_active": True,
                "is_superuser": True,
            },
        )
        user.set_password(options["password"])
        user.save()

        action = "created" if created else "updated"
        self.stdout.write(self.style.SUCCESS(f"Admin user {user.email} has been {action}!"))
