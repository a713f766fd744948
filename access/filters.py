# access/filters.py
# ============================================================
# Query filters built from a Resolution
#
# - unrestricted  → Q()                (matches everything)
# - denied        → Q(pk__in=[])       (matches nothing, never "no filter")
# - otherwise     → pk ∈ ids           (citizens: table ∈ ids)
#
# Caller filters (search, status, explicit ids from multi-selects) are
# always AND-ed on top: they can narrow the access predicate, never widen it.
# ============================================================

from __future__ import annotations

from collections.abc import Mapping
from typing import Iterable, Optional

from django.db import models
from django.db.models import Q

from access.exceptions import AccessError
from access.resolver import Resolution, resolve
from territory.hierarchy import CITIZEN, ROSTER_EDGE, parse_target


def build_filter(resolution: Resolution) -> Q:
    if resolution.unrestricted:
        return Q()
    if not resolution.ids:
        return Q(pk__in=[])
    field = f"{ROSTER_EDGE.fk_column}__in" if resolution.target == CITIZEN else "pk__in"
    return Q(**{field: sorted(resolution.ids)})


def _as_q(value) -> Q:
    if isinstance(value, Q):
        return value
    if isinstance(value, Mapping):
        return Q(**value)
    raise TypeError(f"Caller filters must be Q objects or mappings, got {type(value).__name__}.")


def combine(predicate: Q, *caller_filters, ids: Optional[Iterable[int]] = None) -> Q:
    """
    AND the access predicate with caller filters.

    ``ids`` (an explicit id list) is intersected with the predicate, so an id
    outside the accessible set is never returned even when asked for.
    """
    combined = predicate & Q()
    for extra in caller_filters:
        if extra is None:
            continue
        combined &= _as_q(extra)
    if ids is not None:
        combined &= Q(pk__in=list(ids))
    return combined


def parse_ids(raw) -> list[int]:
    """
    "1, 2,x,3" → [1, 2, 3]. Non-numeric tokens are dropped; lists pass through.
    """
    if raw is None:
        return []
    tokens = raw.split(",") if isinstance(raw, str) else raw
    out: list[int] = []
    for token in tokens:
        try:
            out.append(int(str(token).strip()))
        except (TypeError, ValueError):
            continue
    return out


# ======================================================================================
#  Access-aware QuerySet/Manager
# ======================================================================================

class AccessQuerySet(models.QuerySet):
    """
    .visible_to(principal) / .restrict(resolution) narrow the queryset to the
    rows the principal may see. Models declare their target with
    ``access_target`` ("section", ..., "citizen").
    """

    def _target(self) -> str:
        target = getattr(self.model, "access_target", None)
        if not target:
            raise AccessError(f"{self.model.__name__} does not declare an access_target.")
        return parse_target(target)

    def restrict(self, resolution: Resolution, *caller_filters, ids: Optional[Iterable[int]] = None):
        target = self._target()
        if resolution.target != target:
            raise AccessError(
                f"Resolution for {resolution.target!r} cannot filter {self.model.__name__} ({target!r})."
            )
        if resolution.is_denied:
            return self.none()
        return self.filter(combine(build_filter(resolution), *caller_filters, ids=ids))

    def visible_to(self, principal, *caller_filters, ids: Optional[Iterable[int]] = None):
        return self.restrict(resolve(principal, self._target()), *caller_filters, ids=ids)


class AccessManager(models.Manager.from_queryset(AccessQuerySet)):

    def for_principal(self, principal):
        return self.get_queryset().visible_to(principal)
