# base/management/commands/init_base.py
from __future__ import annotations

from typing import Any
from django.core.management.base import BaseCommand, CommandError
from django.conf import settings
from django.db import transaction
from django.apps import apps

# Import directly from concrete modules to avoid any circulars
from base.models.role import Role
from base.models.user import User


# name -> display name; the fixed operational roles of a campaign
DEFAULT_ROLES: tuple[tuple[str, str], ...] = (
    ("admin", "Administrator"),
    ("jefe_campana", "Campaign Manager"),
    ("responsable_localidad", "Locality Lead"),
    ("responsable_seccion", "Section Lead"),
    ("responsable_circuito", "Circuit Lead"),
    ("fiscal_general", "School Supervisor"),
    ("fiscal_mesa", "Table Supervisor"),
    ("logistica", "Logistics"),
)


class Command(BaseCommand):
    help = "Initialize base data: the fixed roles and an admin user holding the admin role."

    def add_arguments(self, parser):
        parser.add_argument("--email", default="admin@fieldops.local",
                            help="Admin email (also the login/USERNAME_FIELD).")
        parser.add_argument("--password", default="admin",
                            help="Admin password.")
        parser.add_argument("--first-name", default="Admin",
                            help="Admin first name.")
        parser.add_argument("--force", action="store_true",
                            help="Reset password/role even if the admin already exists.")

    def _assert_auth_user_model(self):
        auth_user_model = settings.AUTH_USER_MODEL
        if auth_user_model.lower() != "base.user":
            raise CommandError(
                f"AUTH_USER_MODEL is '{auth_user_model}', expected 'base.User'. "
                "Set AUTH_USER_MODEL='base.User' in settings.py before first migrate."
            )
        model = apps.get_model(auth_user_model)
        if model is not User:
            raise CommandError(
                "AUTH_USER_MODEL points to a different class than base.models.user.User."
            )

    @transaction.atomic
    def handle(self, *args: Any, **options: Any):
        self._assert_auth_user_model()

        email = options["email"].strip().lower()
        password = options["password"]
        first_name = options["first_name"].strip()
        force = options["force"]

        # 1) Roles
        created_roles = 0
        for name, display_name in DEFAULT_ROLES:
            _, created = Role.objects.get_or_create(
                name=name,
                defaults={"display_name": display_name, "is_system": True},
            )
            created_roles += int(created)
        self.stdout.write(self.style.SUCCESS(
            f"Roles: {len(DEFAULT_ROLES)} ({created_roles} created)"
        ))

        admin_role = Role.objects.get(name="admin")
        unrestricted = set(getattr(settings, "FIELDOPS_UNRESTRICTED_ROLES", ()))
        if admin_role.name not in unrestricted:
            self.stdout.write(self.style.WARNING(
                "Role 'admin' is not listed in FIELDOPS_UNRESTRICTED_ROLES; "
                "the admin user will only see what its grants allow."
            ))

        # 2) Admin user
        user = User.objects.filter(email=email).first()
        if user is None:
            user = User.objects.create_superuser(
                email=email,
                password=password,
                first_name=first_name,
                role=admin_role,
            )
            user_status = "created"
        else:
            if force:
                user.role = admin_role
                user.is_staff = True
                user.is_superuser = True
                if password:
                    user.set_password(password)
                user.full_clean()
                user.save()
            user_status = "existing"

        self.stdout.write("")
        self.stdout.write(self.style.SUCCESS("✔ Initialization complete"))
        self.stdout.write(f" Admin email: {email}")
        self.stdout.write(f" User:        {user.display_name} ({user_status})")
