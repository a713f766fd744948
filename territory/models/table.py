# territory/models/table.py
from django.db import models

from access.filters import AccessManager
from base.models.mixins import TimeStampedMixin, StatusMixin


class Table(TimeStampedMixin, StatusMixin, models.Model):
    """Voting table inside a school (the finest hierarchy level)."""
    number = models.PositiveIntegerField()
    school = models.ForeignKey(
        "territory.School",
        on_delete=models.PROTECT,
        related_name="tables",
    )
    is_witness = models.BooleanField(default=False)
    is_foreigners = models.BooleanField(default=False)
    opened = models.BooleanField(default=False)

    access_target = "table"

    objects = AccessManager()

    class Meta:
        db_table = "mesas"
        ordering = ("number",)
        indexes = [
            models.Index(fields=["school"], name="table_school_idx"),
            models.Index(fields=["number"], name="table_number_idx"),
        ]

    def __str__(self):
        return f"Table {self.number}"
