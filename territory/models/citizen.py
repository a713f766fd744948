# territory/models/citizen.py
from django.db import models

from access.filters import AccessManager
from base.models.mixins import TimeStampedMixin, StatusMixin


class Citizen(TimeStampedMixin, StatusMixin, models.Model):
    """
    Roster entry: a voter registered on one table.

    Citizens have no grant type of their own; they are visible wherever
    their table is.
    """

    class Gender(models.TextChoices):
        MALE = "masculino", "Male"
        FEMALE = "femenino", "Female"
        OTHER = "otro", "Other"

    first_name = models.CharField(max_length=255)
    last_name = models.CharField(max_length=255)
    dni = models.BigIntegerField(unique=True)
    nationality = models.CharField(max_length=128, blank=True)
    gender = models.CharField(max_length=16, choices=Gender.choices, blank=True)
    address = models.CharField(max_length=255, blank=True)
    postal_code = models.CharField(max_length=16, blank=True)
    order_number = models.PositiveIntegerField(null=True, blank=True)
    table = models.ForeignKey(
        "territory.Table",
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="citizens",
    )

    access_target = "citizen"

    objects = AccessManager()

    class Meta:
        db_table = "ciudadanos"
        ordering = ("last_name", "first_name")
        indexes = [
            models.Index(fields=["last_name", "first_name"], name="citizen_name_idx"),
            models.Index(fields=["order_number"], name="citizen_order_idx"),
            models.Index(fields=["table"], name="citizen_table_idx"),
        ]

    def __str__(self):
        return f"{self.last_name}, {self.first_name}"
