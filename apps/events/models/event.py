from django.conf import settings
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from apps.shared.base.models import BaseModel


class EventQuerySet(models.QuerySet):
    """QuerySet for events with creator join and date filtering"""

    def with_creator(self):
        """Join the creating admin in the same query"""
        return self.select_related("created_by")

    def upcoming(self, now=None):
        """Events dated at or after ``now``"""
        return self.filter(date__gte=now or timezone.now())

    def past(self, now=None):
        """Events dated strictly before ``now``"""
        return self.filter(date__lt=now or timezone.now())

    def chronological(self):
        return self.order_by("date", "id")


class Event(BaseModel):
    """Campus event created and managed by admins"""

    title = models.CharField(_("Title"), max_length=255)
    description = models.TextField(_("Description"), blank=True, default="")
    date = models.DateTimeField(_("Date"))
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="created_events",
        verbose_name=_("Created by"),
    )

    objects = EventQuerySet.as_manager()

    class Meta:
        verbose_name = _("Event")
        verbose_name_plural = _("Events")
        ordering = ["date", "id"]
        indexes = [
            models.Index(fields=["date"], name="event_date_idx"),
            models.Index(fields=["created_by"], name="event_created_by_idx"),
        ]

    def __str__(self):
        return f"{self.title} ({self.date:%Y-%m-%d})"

    def save(self, *args, **kwargs):
        self.title = (self.title or "").strip()
        self.description = (self.description or "").strip()
        super().save(*args, **kwargs)

    @property
    def is_upcoming(self) -> bool:
        return self.date >= timezone.now()
