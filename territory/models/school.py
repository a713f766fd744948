# territory/models/school.py
from django.db import models

from access.filters import AccessManager
from base.models.mixins import TimeStampedMixin


class School(TimeStampedMixin, models.Model):
    """Polling place. Holds the voting tables."""
    name = models.CharField(max_length=255)
    street = models.CharField(max_length=255, blank=True)
    circuit = models.ForeignKey(
        "territory.Circuit",
        on_delete=models.PROTECT,
        related_name="schools",
    )

    access_target = "school"

    objects = AccessManager()

    class Meta:
        db_table = "escuelas"
        ordering = ("name",)
        indexes = [
            models.Index(fields=["circuit"], name="school_circuit_idx"),
        ]

    def __str__(self):
        return self.name
