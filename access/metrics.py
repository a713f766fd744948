# access/metrics.py
# ============================================================
# Coverage metrics over the accessible subset
#
# "Does this school/table have someone assigned?" is answered with an
# Exists() subquery, and the totals with one conditional aggregate():
#
#   SELECT COUNT(id), COUNT(id) FILTER (WHERE EXISTS (...active grant...))
#   FROM escuelas WHERE id IN (...accessible...)
#
# One round trip per entity type, however many rows are accessible.
# ============================================================

from __future__ import annotations

import logging
from dataclasses import dataclass

from django.conf import settings
from django.db import DatabaseError
from django.db.models import Count, Exists, F, IntegerField, OuterRef, Q, Subquery, Value
from django.db.models.functions import Coalesce

from access.exceptions import AccessError, EntitlementLookupError
from access.resolver import Resolution, resolve_all
from base.models.mixins import Status
from territory import hierarchy
from territory.hierarchy import Level

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Counts:
    total: int = 0
    with_assignment: int = 0
    without_assignment: int = 0

    def as_dict(self) -> dict:
        return {
            "total": self.total,
            "withAssignment": self.with_assignment,
            "withoutAssignment": self.without_assignment,
        }


@dataclass(frozen=True)
class MetricSpec:
    """
    An entity counts as "assigned" when it has an active grant at its own
    level held by a user whose role is one of ``role_names``.
    """
    level: str
    role_names: tuple[str, ...]
    label: str = ""

    def assignments(self, entity_ref=None):
        """Active qualifying grants on ``entity_ref`` (defaults to OuterRef("pk"))."""
        from access.models import Grant

        return Grant.objects.filter(
            status=Status.ACTIVE,
            user__role__name__in=list(self.role_names),
            **{self.level: entity_ref if entity_ref is not None else OuterRef("pk")},
        )


def school_coverage() -> MetricSpec:
    roles = getattr(settings, "FIELDOPS_SCHOOL_ASSIGNMENT_ROLES", ["fiscal_general"])
    return MetricSpec(Level.SCHOOL.value, tuple(roles), label="schools")


def table_coverage() -> MetricSpec:
    roles = getattr(settings, "FIELDOPS_TABLE_ASSIGNMENT_ROLES", ["fiscal_mesa"])
    return MetricSpec(Level.TABLE.value, tuple(roles), label="tables")


# ============================================================
# Aggregation
# ============================================================

def aggregate(resolution: Resolution, spec: MetricSpec) -> Counts:
    """
    total / with / without counts for the entities ``resolution`` admits.
    """
    level = hierarchy.parse_target(spec.level)
    if resolution.target != level:
        raise AccessError(f"Resolution for {resolution.target!r} cannot feed a {level!r} metric.")
    if resolution.is_denied:
        return Counts()

    qs = hierarchy.model_for(level)._base_manager.all()
    if not resolution.unrestricted:
        qs = qs.filter(pk__in=sorted(resolution.ids))

    try:
        row = (
            qs.annotate(assigned=Exists(spec.assignments()))
            .aggregate(
                total=Count("pk"),
                with_assignment=Count("pk", filter=Q(assigned=True)),
            )
        )
    except DatabaseError as exc:
        logger.error("Coverage aggregation failed for %s.", level, exc_info=True)
        raise EntitlementLookupError(f"Could not aggregate {level} coverage: {exc}", level=level) from exc

    total = row["total"] or 0
    assigned = row["with_assignment"] or 0
    return Counts(total=total, with_assignment=assigned, without_assignment=total - assigned)


def dashboard(principal) -> dict[str, Counts]:
    """School and table coverage for ``principal`` (one shared resolution)."""
    resolutions = resolve_all(principal)
    out = {}
    for spec in (school_coverage(), table_coverage()):
        out[spec.label] = aggregate(resolutions[spec.level], spec)
    return out


# ============================================================
# Per-school counters (list pages)
# ============================================================

def _count(subquery, group_field: str):
    return Coalesce(
        Subquery(
            subquery.order_by().values(group_field).annotate(c=Count("pk")).values("c")[:1],
            output_field=IntegerField(),
        ),
        Value(0),
    )


def annotate_school_coverage(queryset, *, general=None, table=None):
    """
    Add per-school counters to a School queryset, computed inside the same query:

    - table_count
    - general_supervisor_count (distinct users holding a qualifying school grant)
    - tables_with_supervisor / tables_without_supervisor
    """
    from territory.models import Table

    general = general or school_coverage()
    table = table or table_coverage()

    supervisors = (
        general.assignments()
        .order_by()
        .values(general.level)
        .annotate(c=Count("user", distinct=True))
        .values("c")[:1]
    )
    covered_tables = Table._base_manager.filter(school=OuterRef("pk")).filter(Exists(table.assignments()))

    return queryset.annotate(
        table_count=_count(Table._base_manager.filter(school=OuterRef("pk")), "school"),
        general_supervisor_count=Coalesce(Subquery(supervisors, output_field=IntegerField()), Value(0)),
        tables_with_supervisor=_count(covered_tables, "school"),
    ).annotate(
        tables_without_supervisor=F("table_count") - F("tables_with_supervisor"),
    )
