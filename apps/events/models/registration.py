from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.shared.base.models import BaseModel


class RegistrationQuerySet(models.QuerySet):
    """Custom QuerySet for event registrations"""

    def for_user(self, user):
        return self.filter(user=user)

    def for_event(self, event_id):
        return self.filter(event_id=event_id)

    def with_related(self):
        """Join user and event summaries in the same query"""
        return self.select_related("user", "event")

    def newest_first(self):
        return self.order_by("-created_at", "-id")

    def created_since(self, since):
        return self.filter(created_at__gte=since)


class Registration(BaseModel):
    """A student's registration for one event; the (user, event) pair is unique"""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="registrations",
        verbose_name=_("User"),
    )
    event = models.ForeignKey(
        "events.Event",
        on_delete=models.CASCADE,
        related_name="registrations",
        verbose_name=_("Event"),
    )

    objects = RegistrationQuerySet.as_manager()

    class Meta:
        verbose_name = _("Registration")
        verbose_name_plural = _("Registrations")
        ordering = ["-created_at", "-id"]
        constraints = [
            models.UniqueConstraint(fields=["user", "event"], name="unique_user_event_registration"),
        ]
        indexes = [
            models.Index(fields=["event"], name="registration_event_idx"),
            models.Index(fields=["user"], name="registration_user_idx"),
        ]

    def __str__(self):
        return f"{self.user_id} -> {self.event_id}"
