# territory/models/locality.py
from django.db import models

from access.filters import AccessManager
from base.models.mixins import TimeStampedMixin


class Locality(TimeStampedMixin, models.Model):
    """
    Locality (town/district).

    ``section`` is nullable: localities loaded before sections were modelled
    have no parent and are only reachable through direct Locality grants.
    """
    name = models.CharField(max_length=255)
    section = models.ForeignKey(
        "territory.Section",
        null=True,
        blank=True,
        on_delete=models.PROTECT,
        related_name="localities",
    )

    access_target = "locality"

    objects = AccessManager()

    class Meta:
        db_table = "localidades"
        ordering = ("name",)
        indexes = [
            models.Index(fields=["section"], name="locality_section_idx"),
        ]

    def __str__(self):
        return self.name
