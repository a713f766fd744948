# territory/models/section.py
from django.db import models

from access.filters import AccessManager
from base.models.mixins import TimeStampedMixin


class Section(TimeStampedMixin, models.Model):
    """Electoral section: top of the territorial hierarchy."""
    number = models.PositiveIntegerField(null=True, blank=True)
    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, blank=True)

    access_target = "section"

    objects = AccessManager()

    class Meta:
        db_table = "secciones"
        ordering = ("number", "name")
        indexes = [
            models.Index(fields=["slug"], name="section_slug_idx"),
        ]

    def __str__(self):
        return self.name
