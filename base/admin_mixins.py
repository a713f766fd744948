# base/admin_mixins.py
# Reusable admin mixins for every app
from typing import Sequence
from django.contrib import admin


class HideAuditFieldsMixin:
    """
    Hides audit fields (created_by/updated_by/created_at/updated_at) from forms when present.
    Safe when the model lacks them.
    """
    AUDIT_FIELDS: Sequence[str] = ("created_by", "updated_by", "created_at", "updated_at")

    def get_exclude(self, request, obj=None):
        base_exclude = list(super().get_exclude(request, obj) or [])
        present = [f for f in self.AUDIT_FIELDS if f in {fld.name for fld in self.model._meta.get_fields()}]
        return list(set(base_exclude + present))


class AppAdmin(HideAuditFieldsMixin, admin.ModelAdmin):
    pass
