# territory/admin.py
from __future__ import annotations

from django.contrib import admin

from base.admin_mixins import AppAdmin
from . import models


@admin.register(models.Section)
class SectionAdmin(AppAdmin):
    list_display = ("number", "name", "slug")
    search_fields = ("name", "slug")
    ordering = ("number", "name")


@admin.register(models.Locality)
class LocalityAdmin(AppAdmin):
    list_display = ("name", "section")
    list_filter = ("section",)
    search_fields = ("name",)
    list_select_related = ("section",)
    autocomplete_fields = ("section",)


@admin.register(models.Circuit)
class CircuitAdmin(AppAdmin):
    list_display = ("name", "locality")
    search_fields = ("name", "locality__name")
    list_select_related = ("locality",)
    autocomplete_fields = ("locality",)


@admin.register(models.School)
class SchoolAdmin(AppAdmin):
    list_display = ("name", "street", "circuit")
    search_fields = ("name", "street")
    list_select_related = ("circuit",)
    autocomplete_fields = ("circuit",)


@admin.register(models.Table)
class TableAdmin(AppAdmin):
    list_display = ("number", "school", "status", "is_witness", "is_foreigners", "opened")
    list_filter = ("status", "is_witness", "is_foreigners", "opened")
    search_fields = ("=number", "school__name")
    list_select_related = ("school",)
    autocomplete_fields = ("school",)


@admin.register(models.Citizen)
class CitizenAdmin(AppAdmin):
    list_display = ("last_name", "first_name", "dni", "table", "status")
    list_filter = ("status", "gender")
    search_fields = ("last_name", "first_name", "=dni", "address")
    list_select_related = ("table",)
    autocomplete_fields = ("table",)
