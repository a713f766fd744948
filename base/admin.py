# base/admin.py
from __future__ import annotations

from django.contrib import admin
from django.contrib.auth import get_user_model
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin

from access.admin import GrantInline
from base.admin_mixins import AppAdmin, HideAuditFieldsMixin
from . import models


# ------------------------------------------------------------
# Role
# ------------------------------------------------------------
@admin.register(models.Role)
class RoleAdmin(AppAdmin):
    list_display = ("name", "display_name", "is_system", "status")
    list_filter = ("is_system", "status")
    search_fields = ("name", "display_name")
    ordering = ("name",)


# ------------------------------------------------------------
# User (extends Django's UserAdmin)
# ------------------------------------------------------------
User = get_user_model()


@admin.register(User)
class UserAdmin(HideAuditFieldsMixin, DjangoUserAdmin):
    """
    User admin with the role selector and the user's access grants inline.
    """
    list_display = ("id", "display_name", "email", "role", "is_active", "is_staff")
    list_filter = ("is_active", "is_staff", "is_superuser", "role")
    search_fields = ("email", "username", "first_name", "last_name", "dni")
    list_select_related = ("role",)
    ordering = ("last_name", "first_name")
    autocomplete_fields = ("role",)

    readonly_fields = ("last_login", "date_joined")

    fieldsets = (
        ("Identity", {"fields": ("email", "username", "password")}),
        ("Profile", {"fields": ("first_name", "last_name", "dni", "phone")}),
        ("Role", {"fields": ("role",)}),
        ("Status", {"fields": ("is_active", "is_staff", "is_superuser", "groups", "user_permissions")}),
        ("Timestamps", {"fields": ("last_login", "date_joined")}),
    )

    add_fieldsets = (
        (None, {
            "classes": ("wide",),
            "fields": (
                "email", "username", "password1", "password2",
                "first_name", "last_name", "role",
                "is_active", "is_staff",
            ),
        }),
    )

    inlines = [GrantInline]


admin.site.empty_value_display = "-"
