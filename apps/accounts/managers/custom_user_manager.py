from django.contrib.auth.models import BaseUserManager


class CustomUserManager(BaseUserManager):
    """Manager for email-identified CustomUser accounts"""

    use_in_migrations = True

    def create_user(self, email: str, password: str = None, **extra_fields):
        """
        Create and return a user with a hashed password.

        Args:
            email: Login email, stored lowercased
            password: Raw password; ``None`` leaves the account unusable
            **extra_fields: ``name``, ``role`` and other model fields

        Raises:
            ValueError: If email is missing
        """
        if not email:
            raise ValueError('Users must have an email address')

        email = self.normalize_email(email).lower()
        extra_fields.setdefault('is_active', True)
        extra_fields.setdefault('role', self.model.Role.STUDENT)

        user = self.model(email=email, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_superuser(self, email: str, password: str, **extra_fields):
        """Create an admin that can also sign in to the Django admin site"""
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('role', self.model.Role.ADMIN)

        if not extra_fields.get('is_staff'):
            raise ValueError('Superuser must have is_staff=True')
        if not extra_fields.get('is_superuser'):
            raise ValueError('Superuser must have is_superuser=True')

        return self.create_user(email, password, **extra_fields)
