# access/models.py
from __future__ import annotations

from typing import Optional

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q

from base.models.mixins import TimeStampedMixin, StatusMixin, UserStampedMixin


# one nullable FK per hierarchy level, coarse -> fine
LEVEL_FIELDS: tuple[str, ...] = ("section", "locality", "circuit", "school", "table")


def exactly_one_entity() -> Q:
    """Q that holds when exactly one of LEVEL_FIELDS is populated."""
    check = Q()
    for field in LEVEL_FIELDS:
        branch = Q(**{f"{field}__isnull": False})
        for other in LEVEL_FIELDS:
            if other != field:
                branch &= Q(**{f"{other}__isnull": True})
        check |= branch
    return check


class Grant(TimeStampedMixin, StatusMixin, UserStampedMixin, models.Model):
    """
    Binds a user to exactly one hierarchy entity.

    - access flows down: a Circuit grant covers its schools, tables and citizens
    - only ``active`` rows take part in resolution
    - a user may hold many grants, at any mix of levels
    """

    # ----------------------------- Principal ---------------------------------
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="grants",
    )

    # ------------------------------- Target ----------------------------------
    section = models.ForeignKey("territory.Section", null=True, blank=True,
                                on_delete=models.CASCADE, related_name="grants")
    locality = models.ForeignKey("territory.Locality", null=True, blank=True,
                                 on_delete=models.CASCADE, related_name="grants")
    circuit = models.ForeignKey("territory.Circuit", null=True, blank=True,
                                on_delete=models.CASCADE, related_name="grants")
    school = models.ForeignKey("territory.School", null=True, blank=True,
                               on_delete=models.CASCADE, related_name="grants")
    table = models.ForeignKey("territory.Table", null=True, blank=True,
                              on_delete=models.CASCADE, related_name="grants")

    class Meta:
        db_table = "users_access"
        indexes = [
            models.Index(fields=["user", "status"], name="grant_user_status_idx"),
            models.Index(fields=["school", "status"], name="grant_school_status_idx"),
            models.Index(fields=["table", "status"], name="grant_table_status_idx"),
        ]
        constraints = [
            models.CheckConstraint(condition=exactly_one_entity(), name="grant_exactly_one_entity"),
        ]

    # ------------------------------ Helpers ----------------------------------
    @property
    def populated_levels(self) -> list[str]:
        return [field for field in LEVEL_FIELDS if getattr(self, f"{field}_id", None)]

    @property
    def level(self) -> Optional[str]:
        levels = self.populated_levels
        return levels[0] if len(levels) == 1 else None

    @property
    def entity_id(self) -> Optional[int]:
        level = self.level
        return getattr(self, f"{level}_id") if level else None

    def __str__(self) -> str:
        target = f"{self.level}:{self.entity_id}" if self.level else "?"
        return f"Grant({self.user_id} → {target} [{self.status}])"

    def clean(self):
        super().clean()
        levels = self.populated_levels
        if len(levels) != 1:
            raise ValidationError(
                "A grant must reference exactly one of: " + ", ".join(LEVEL_FIELDS)
                + f" (got {len(levels)})."
            )
