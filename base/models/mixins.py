# base/models/mixins.py
from django.db import models


# ---------- basic (timestamps / status) ----------
class TimeStampedMixin(models.Model):
    """Creation/modification stamps with indexes."""
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True, db_index=True)

    class Meta:
        abstract = True


class Status(models.TextChoices):
    ACTIVE = "active", "Active"
    INACTIVE = "inactive", "Inactive"


class StatusMixin(models.Model):
    """``status`` column (active/inactive) with an index, as used across the field-ops tables."""
    status = models.CharField(
        max_length=16,
        choices=Status.choices,
        default=Status.ACTIVE,
        db_index=True,
    )

    class Meta:
        abstract = True

    @property
    def is_enabled(self) -> bool:
        return self.status == Status.ACTIVE


# ---------- user tracking (created_by / updated_by) ----------
class UserStampedMixin(models.Model):
    """created_by / updated_by pointing at base.User."""
    created_by = models.ForeignKey(
        "base.User",
        null=True, blank=True,
        on_delete=models.SET_NULL,
        related_name="%(class)s_created",
    )
    updated_by = models.ForeignKey(
        "base.User",
        null=True, blank=True,
        on_delete=models.SET_NULL,
        related_name="%(class)s_updated",
    )

    class Meta:
        abstract = True
