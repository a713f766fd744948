# territory/models/circuit.py
from django.db import models

from access.filters import AccessManager
from base.models.mixins import TimeStampedMixin


class Circuit(TimeStampedMixin, models.Model):
    name = models.CharField(max_length=255)
    locality = models.ForeignKey(
        "territory.Locality",
        on_delete=models.PROTECT,
        related_name="circuits",
    )

    access_target = "circuit"

    objects = AccessManager()

    class Meta:
        db_table = "circuitos"
        ordering = ("name",)
        indexes = [
            models.Index(fields=["locality"], name="circuit_locality_idx"),
        ]

    def __str__(self):
        return self.name
