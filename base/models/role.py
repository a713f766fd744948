# base/models/role.py
from django.db import models

from .mixins import TimeStampedMixin, StatusMixin


class Role(TimeStampedMixin, StatusMixin, models.Model):
    """
    A named operational role (admin, jefe_campana, fiscal_general, fiscal_mesa, ...).

    Roles carry no entitlement by themselves: visibility comes from the user's
    grants, except for the roles listed in ``settings.FIELDOPS_UNRESTRICTED_ROLES``.
    """
    name = models.CharField(max_length=64, unique=True)
    display_name = models.CharField(max_length=128, blank=True)
    description = models.TextField(blank=True)
    is_system = models.BooleanField(default=False)

    class Meta:
        db_table = "roles"
        ordering = ("name",)

    def __str__(self):
        return self.display_name or self.name
