"""
Tests for the management commands.
"""

from io import StringIO

import pytest
from django.core.management import CommandError, call_command

from base.models import Role, User
from territory.models import Circuit, Locality, School, Section, Table


pytestmark = pytest.mark.django_db


def run(*args, **kwargs):
    out = StringIO()
    call_command(*args, stdout=out, **kwargs)
    return out.getvalue()


class TestInitBase:

    def test_creates_roles_and_admin(self):
        output = run("init_base", "--email", "Jefa@Campana.test", "--password", "s3cret")

        assert Role.objects.count() == 8
        assert Role.objects.filter(is_system=True, name="fiscal_mesa").exists()

        admin = User.objects.get(email="jefa@campana.test")
        assert admin.is_superuser and admin.is_staff
        assert admin.role_name == "admin"
        assert admin.check_password("s3cret")
        assert "Initialization complete" in output

    def test_is_idempotent(self):
        run("init_base")
        output = run("init_base")
        assert Role.objects.count() == 8
        assert User.objects.count() == 1
        assert "existing" in output

    def test_force_resets_password_and_role(self, roles):
        User.objects.create_user(email="admin@fieldops.local", password="old", role=roles["fiscal_mesa"])
        run("init_base", "--password", "new", "--force")
        admin = User.objects.get(email="admin@fieldops.local")
        assert admin.role_name == "admin"
        assert admin.check_password("new")

    def test_warns_when_admin_is_restricted(self, settings):
        settings.FIELDOPS_UNRESTRICTED_ROLES = ["jefe_campana"]
        assert "not listed in FIELDOPS_UNRESTRICTED_ROLES" in run("init_base")


class TestSeedTerritory:

    def test_seeds_demo_tree(self):
        output = run("seed_territory")
        assert Section.objects.count() == 1
        assert Locality.objects.count() == 2
        assert Circuit.objects.count() == 3
        assert School.objects.count() == 4
        assert Table.objects.count() == 10
        assert "tables=10" in output

    def test_is_idempotent(self):
        run("seed_territory")
        output = run("seed_territory")
        assert Table.objects.count() == 10
        assert "tables=0" in output

    def test_dry_run_writes_nothing(self):
        output = run("seed_territory", "--dry-run")
        assert Section.objects.count() == 0
        assert Table.objects.count() == 0
        assert "rolled back" in output


class TestAccessReport:

    def test_restricted_user(self, tree, make_user, make_grant):
        user = make_user("fiscal_mesa", email="mesa@fieldops.test")
        make_grant(user, tree.loc7)

        output = run("access_report", "--email", "MESA@fieldops.test", "--show-ids")

        assert "role: fiscal_mesa" in output
        assert "section   0 ids" in output
        assert "table     2 ids: 21, 22" in output
        assert "citizen   2 table ids: 21, 22" in output
        assert "schools   total=1 with=0 without=1" in output
        assert "tables    total=2 with=0 without=2" in output

    def test_unrestricted_user(self, tree, make_user):
        make_user("admin", email="boss@fieldops.test")
        output = run("access_report", "--email", "boss@fieldops.test")
        assert "school    unrestricted" in output
        assert "schools   total=4" in output

    def test_unknown_user(self, db):
        with pytest.raises(CommandError):
            run("access_report", "--email", "nobody@fieldops.test")


class TestSystemChecks:

    def test_project_checks_pass(self):
        run("check")
