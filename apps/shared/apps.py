"""Shared app configuration."""

from django.apps import AppConfig


class SharedConfig(AppConfig):
    """Configuration for the Shared app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.shared"
    verbose_name = "Shared"

    def ready(self):
        # Registers the bearer scheme with drf-spectacular
        from apps.shared.auth import schema  # noqa: F401
