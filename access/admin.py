# access/admin.py
from __future__ import annotations

from django.contrib import admin

from base.admin_mixins import AppAdmin
from .models import Grant


@admin.register(Grant)
class GrantAdmin(AppAdmin):
    list_display = ("user", "level_display", "entity_display", "status", "created_at")
    list_filter = ("status",)
    search_fields = ("user__email", "user__first_name", "user__last_name")
    list_select_related = ("user", "section", "locality", "circuit", "school", "table")
    autocomplete_fields = ("user", "section", "locality", "circuit", "school", "table")
    ordering = ("-created_at",)

    def level_display(self, obj):
        return obj.level or "-"
    level_display.short_description = "Level"

    def entity_display(self, obj):
        return getattr(obj, obj.level) if obj.level else "-"
    entity_display.short_description = "Entity"


class GrantInline(admin.TabularInline):
    model = Grant
    fk_name = "user"
    extra = 0
    fields = ("section", "locality", "circuit", "school", "table", "status")
    autocomplete_fields = ("section", "locality", "circuit", "school", "table")
    verbose_name = "Access grant"
    verbose_name_plural = "Access grants"
