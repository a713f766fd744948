# base/models/user.py
from __future__ import annotations
from django.db import models
from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.core.exceptions import ValidationError
from django.db.models.functions import Lower
from django.db.models import Q
from .mixins import TimeStampedMixin


class UserManager(BaseUserManager):
    use_in_migrations = True

    def _create_user(self, email, password, **extra):
        if not email:
            raise ValueError("Users must have an email address")
        email = self.normalize_email(email).lower().strip()
        # AbstractUser still needs a username; derive it when not supplied
        extra.setdefault("username", email)
        user = self.model(email=email, **extra)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email, password=None, **extra):
        extra.setdefault("is_staff", False)
        extra.setdefault("is_superuser", False)
        return self._create_user(email, password, **extra)

    def create_superuser(self, email, password=None, **extra):
        extra.setdefault("is_staff", True)
        extra.setdefault("is_superuser", True)
        return self._create_user(email, password, **extra)

    def get_by_natural_key(self, email):
        """
        Look users up by EMAIL (the login field).
        Django relies on this for createsuperuser/login.
        """
        return self.get(email__iexact=email.strip().lower())


class User(TimeStampedMixin, AbstractUser):
    """
    Field-operations user:
    - login by email (USERNAME_FIELD = email), username kept for Django
    - exactly one operational ``role``; area of responsibility comes from ``access.Grant`` rows
    - national id / phone used by the field teams
    """
    email = models.EmailField(unique=True, db_index=True)
    dni = models.CharField(max_length=16, blank=True)
    phone = models.CharField(max_length=32, blank=True)

    role = models.ForeignKey(
        "base.Role",
        on_delete=models.PROTECT,
        related_name="users",
        null=True,
        blank=True,
    )
    objects = UserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["username"]

    class Meta:
        db_table = "users"
        ordering = ("last_name", "first_name")
        indexes = [
            models.Index(Lower("email"), name="user_email_ci_idx"),
            models.Index(fields=["role"], name="user_role_idx"),
            models.Index(fields=["is_active", "date_joined"], name="user_active_joined_idx"),
        ]
        constraints = [
            models.UniqueConstraint(Lower("email"), name="uniq_user_email_ci"),
            models.CheckConstraint(condition=~Q(email=""), name="user_email_not_empty"),
        ]

    @property
    def display_name(self) -> str:
        full = self.get_full_name().strip()
        return full or self.email

    @property
    def role_name(self) -> str:
        return self.role.name if self.role_id else ""

    def __str__(self):
        return self.display_name

    def clean(self):
        super().clean()
        if self.email:
            self.email = self.__class__.objects.normalize_email(self.email).lower().strip()

    def save(self, *args, **kwargs):
        # never deactivate the last active superuser
        if self.pk and not self.is_active and self.is_superuser:
            qs = type(self).objects.filter(is_superuser=True, is_active=True).exclude(pk=self.pk)
            if not qs.exists():
                raise ValidationError("Cannot deactivate the last active superuser.")
        if self.email:
            self.email = self.email.strip().lower()
        super().save(*args, **kwargs)
