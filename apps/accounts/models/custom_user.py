"""CampusConnect user account: students and admins."""

from typing import ClassVar

from django.contrib.auth.models import AbstractUser
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.accounts.managers.custom_user_manager import CustomUserManager
from apps.shared.base.models import BaseModel


class CustomUser(AbstractUser, BaseModel):
    """
    Account identified by email.

    ``role`` drives API access; ``is_staff``/``is_superuser`` only matter for
    the Django admin site.
    """

    class Role(models.TextChoices):
        STUDENT = 'student', _('Student')
        ADMIN = 'admin', _('Admin')

    username = None
    first_name = None
    last_name = None

    name = models.CharField(_('name'), max_length=150)
    email = models.EmailField(_('email address'), unique=True)
    role = models.CharField(
        _('role'),
        max_length=20,
        choices=Role.choices,
        default=Role.STUDENT,
        db_index=True,
    )

    # Authentication configuration
    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS: ClassVar[list[str]] = ['name']

    objects = CustomUserManager()

    class Meta:
        db_table = 'accounts_customuser'
        verbose_name = _('User')
        verbose_name_plural = _('Users')
        ordering: ClassVar[list[str]] = ['-created_at']

    def __str__(self):
        return f'{self.name} <{self.email}>'

    def save(self, *args, **kwargs):
        if self.email:
            self.email = self.email.strip().lower()
        if self.name:
            self.name = self.name.strip()
        super().save(*args, **kwargs)

    def get_full_name(self):
        return self.name

    def get_short_name(self):
        return self.name

    @property
    def is_admin(self) -> bool:
        return self.role == self.Role.ADMIN

    @property
    def is_student(self) -> bool:
        return self.role == self.Role.STUDENT
