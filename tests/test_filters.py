"""
Tests for the query filter builder and the access-scoped querysets.
"""

import pytest
from django.db.models import Q

from access.exceptions import AccessError
from access.filters import build_filter, combine, parse_ids
from access.resolver import Resolution
from territory.models import Circuit, Citizen, School, Table


class TestBuildFilter:

    def test_unrestricted_matches_everything(self):
        assert build_filter(Resolution.everything("school")) == Q()

    def test_denied_matches_nothing(self):
        assert build_filter(Resolution.nothing("school")) == Q(pk__in=[])

    def test_ids(self):
        assert build_filter(Resolution("school", False, frozenset({11, 9}))) == Q(pk__in=[9, 11])

    def test_citizens_filter_on_table(self):
        assert build_filter(Resolution("citizen", False, frozenset({22, 21}))) == Q(table_id__in=[21, 22])


class TestCombine:

    def test_and_semantics(self):
        predicate = Q(pk__in=[9, 11])
        combined = combine(predicate, Q(name__icontains="escuela"), {"street": ""})
        assert combined == predicate & Q(name__icontains="escuela") & Q(street="")

    def test_none_filters_are_ignored(self):
        assert combine(Q(pk__in=[1]), None) == Q(pk__in=[1])

    def test_explicit_ids_are_intersected(self):
        assert combine(Q(pk__in=[9]), ids=[9, 10]) == Q(pk__in=[9]) & Q(pk__in=[9, 10])

    def test_rejects_other_filter_types(self):
        with pytest.raises(TypeError):
            combine(Q(), "name = 'x'")


class TestParseIds:

    @pytest.mark.parametrize("raw, expected", [
        ("1, 2,x,3", [1, 2, 3]),
        ("", []),
        (None, []),
        ([4, "5", "six"], [4, 5]),
        (" 7 ", [7]),
    ])
    def test_parse_ids(self, raw, expected):
        assert parse_ids(raw) == expected


@pytest.mark.django_db
class TestAccessQuerySet:

    def test_visible_schools(self, tree, principal):
        p = principal(("locality", 8, "active"))
        assert set(School.objects.visible_to(p).values_list("pk", flat=True)) == {10, 11}

    def test_visible_citizens(self, tree, principal):
        p = principal(("school", 9, "active"))
        assert set(Citizen.objects.visible_to(p).values_list("pk", flat=True)) == {501, 502}

    def test_citizens_without_table_only_for_unrestricted(self, tree, principal):
        restricted = principal(("section", 1, "active"))
        assert 504 not in set(Citizen.objects.visible_to(restricted).values_list("pk", flat=True))
        admin = principal(role_name="admin")
        assert Citizen.objects.visible_to(admin).count() == 4

    def test_explicit_ids_never_widen(self, tree, principal):
        p = principal(("table", 21, "active"))
        rows = Table.objects.visible_to(p, ids=parse_ids("21,23,99"))
        assert list(rows.values_list("pk", flat=True)) == [21]

    def test_caller_filters_narrow(self, tree, principal):
        p = principal(("locality", 7, "active"))
        rows = Circuit.objects.visible_to(p, Q(name__endswith="4"))
        assert list(rows.values_list("pk", flat=True)) == [4]

    def test_caller_filters_cannot_override_access(self, tree, principal):
        p = principal(("locality", 7, "active"))
        rows = Circuit.objects.visible_to(p, Q(pk=5) | Q(pk=3))
        assert list(rows.values_list("pk", flat=True)) == [3]

    def test_denied_returns_empty_queryset_without_query(self, tree, principal, django_assert_num_queries):
        p = principal()
        with django_assert_num_queries(0):
            qs = Table.objects.visible_to(p)
            assert list(qs) == []

    def test_unrestricted_sees_everything(self, tree, principal):
        assert Table.objects.visible_to(principal(role_name="admin")).count() == 5

    def test_restrict_rejects_foreign_resolution(self, tree):
        with pytest.raises(AccessError):
            School.objects.restrict(Resolution("table", False, frozenset({21})))

    def test_restrict_with_resolution(self, tree):
        resolution = Resolution("citizen", False, frozenset({21, 22}))
        assert set(Citizen.objects.restrict(resolution).values_list("pk", flat=True)) == {501, 502}

    def test_for_principal(self, tree, principal):
        p = principal(("school", 11, "active"))
        assert list(Table.objects.for_principal(p).values_list("pk", flat=True)) == [99]

    def test_chains_after_other_filters(self, tree, principal):
        p = principal(("section", 1, "active"))
        qs = School.objects.filter(name__contains="1").visible_to(p)
        assert set(qs.values_list("pk", flat=True)) == {10, 11}
