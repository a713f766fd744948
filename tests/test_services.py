"""
Tests for the Grant model and the grant issuing helpers.
"""

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from access.models import Grant
from access.services import deactivate_access, grant_access, level_of, revoke_access
from territory.models import Citizen, School


pytestmark = pytest.mark.django_db


class TestGrantModel:

    def test_level_and_entity(self, tree, make_user):
        grant = Grant.objects.create(user=make_user(), school=tree.s9)
        assert grant.level == "school"
        assert grant.entity_id == 9
        assert grant.is_enabled
        assert "school:9" in str(grant)

    def test_clean_rejects_two_entities(self, tree, make_user):
        grant = Grant(user=make_user(), school=tree.s9, table=tree.t21)
        assert grant.level is None
        with pytest.raises(ValidationError):
            grant.clean()

    def test_clean_rejects_no_entity(self, make_user):
        with pytest.raises(ValidationError):
            Grant(user=make_user()).clean()

    def test_database_rejects_two_entities(self, tree, make_user):
        user = make_user()
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                Grant.objects.create(user=user, school=tree.s9, table=tree.t21)

    def test_cascade_on_entity_delete(self, tree, make_user):
        Grant.objects.create(user=make_user(), table=tree.t31)
        tree.t31.delete()
        assert not Grant.objects.filter(table_id=31).exists()


class TestLevelOf:

    def test_levels(self, tree):
        assert level_of(tree.section) == "section"
        assert level_of(tree.t21) == "table"

    def test_citizens_cannot_be_granted(self, tree):
        with pytest.raises(ValidationError):
            level_of(tree.cit1)

    def test_unsaved_entity(self):
        with pytest.raises(ValidationError):
            level_of(School(name="Nueva"))

    def test_other_objects(self):
        with pytest.raises(ValidationError):
            level_of(object())


class TestGrantAccess:

    def test_creates_grant(self, tree, make_user):
        user, issuer = make_user(), make_user("admin")
        grant = grant_access(user, tree.c3, issued_by=issuer)
        assert grant.pk
        assert (grant.level, grant.entity_id, grant.status) == ("circuit", 3, "active")
        assert grant.created_by == issuer

    def test_upsert_updates_status(self, tree, make_user):
        user = make_user()
        first = grant_access(user, tree.s9)
        second = grant_access(user, tree.s9, status="inactive")
        assert first.pk == second.pk
        assert Grant.objects.get(pk=first.pk).status == "inactive"
        assert Grant.objects.filter(user=user).count() == 1

    def test_unknown_status(self, tree, make_user):
        with pytest.raises(ValidationError):
            grant_access(make_user(), tree.s9, status="pending")

    def test_citizen_is_rejected(self, tree, make_user):
        with pytest.raises(ValidationError):
            grant_access(make_user(), Citizen.objects.get(pk=501))


class TestRevokeAndDeactivate:

    def test_revoke_one(self, tree, make_user):
        user = make_user()
        grant_access(user, tree.s9)
        grant_access(user, tree.t23)
        assert revoke_access(user, tree.s9) == 1
        assert list(Grant.objects.filter(user=user).values_list("table_id", flat=True)) == [23]

    def test_revoke_all(self, tree, make_user):
        user, other = make_user(), make_user()
        grant_access(user, tree.s9)
        grant_access(user, tree.loc8)
        grant_access(other, tree.s9)
        assert revoke_access(user) == 2
        assert Grant.objects.filter(user=other).count() == 1

    def test_revoke_missing(self, tree, make_user):
        assert revoke_access(make_user(), tree.s9) == 0

    def test_deactivate(self, tree, make_user):
        user = make_user()
        grant_access(user, tree.s9)
        grant = deactivate_access(user, tree.s9)
        assert grant.status == "inactive"
        assert not grant.is_enabled
        assert deactivate_access(user, tree.s10) is None
