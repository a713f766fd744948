# access/resolver.py
# ============================================================
# Entitlement resolution
#
# - Unrestricted roles short-circuit: no set is computed.
# - Active grants are partitioned per level; no grants at all = total deny,
#   answered without touching the database.
# - The closure is walked top-down, one batched query per level:
#       level N = children of (level N-1 frontier)  ∪  ids granted at level N
#   so grants below the target never leak upwards, and ids that no longer
#   exist simply drop out.
# - Citizens are resolved through their Table ids.
# ============================================================

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from django.db import DatabaseError
from django.db.models import Q

from access.exceptions import EntitlementLookupError
from territory import hierarchy
from territory.hierarchy import CITIZEN, LEVELS, Edge, Level

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolution:
    """
    Outcome of resolving one principal against one target.

    ``unrestricted`` means "apply no filter"; otherwise ``ids`` is the
    complete accessible set (for citizens: the accessible Table ids).
    """
    target: str
    unrestricted: bool
    ids: frozenset = frozenset()

    @classmethod
    def everything(cls, target: str) -> "Resolution":
        return cls(target=target, unrestricted=True)

    @classmethod
    def nothing(cls, target: str) -> "Resolution":
        return cls(target=target, unrestricted=False, ids=frozenset())

    @property
    def is_denied(self) -> bool:
        return not self.unrestricted and not self.ids

    def allows(self, pk) -> bool:
        return self.unrestricted or pk in self.ids


# ============================================================
# Store lookups
# ============================================================

def _lookup(level: str, edge: Optional[Edge], parent_ids: Iterable[int], granted_ids: Iterable[int]) -> frozenset:
    """
    One query: rows at ``level`` under ``parent_ids`` (through ``edge``) or
    directly listed in ``granted_ids``.
    """
    parent_ids = sorted(parent_ids)
    granted_ids = sorted(granted_ids)
    if not parent_ids and not granted_ids:
        return frozenset()

    condition = Q()
    if parent_ids and edge is not None:
        condition |= Q(**{f"{edge.fk}__in": parent_ids})
    if granted_ids:
        condition |= Q(pk__in=granted_ids)
    if not condition:
        return frozenset()

    model = hierarchy.model_for(level)
    try:
        return frozenset(model._base_manager.filter(condition).values_list("pk", flat=True))
    except DatabaseError as exc:
        logger.error("Hierarchy lookup failed at level %s.", level, exc_info=True)
        raise EntitlementLookupError(f"Could not resolve {level} access: {exc}", level=level) from exc


def _cascade(direct: dict, until: str) -> dict[str, frozenset]:
    """
    Accessible ids for every level from the top down to ``until`` (inclusive).
    """
    reached: dict[str, frozenset] = {}
    frontier: frozenset = frozenset()
    edge: Optional[Edge] = None

    for level in LEVELS[: hierarchy.depth(until) + 1]:
        frontier = _lookup(level, edge, frontier, direct.get(level, ()))
        reached[level] = frontier
        edge = hierarchy.child_edge(level)
        if edge is None:
            # disabled edge (or bottom): nothing flows further down from here
            frontier = frozenset()
    return reached


def descend(level: str, ids: Iterable[int], target: str) -> frozenset:
    """
    Ids at ``target`` reachable from ``ids`` at ``level`` (one query per hop).

    ``target`` equal to ``level`` returns the ids that exist; a target above
    ``level`` returns the empty set.
    """
    level, target = hierarchy.parse_target(level), hierarchy.parse_target(target)
    frontier = frozenset(ids)
    if level == target:
        return _lookup(level, None, (), frontier)
    path = hierarchy.path_between(level, target)
    if not path:
        return frozenset()
    for edge in path:
        frontier = _lookup(edge.child, edge, frontier, ())
        if not frontier:
            break
    return frontier


# ============================================================
# Public API
# ============================================================

def resolve(principal, target: str) -> Resolution:
    """
    Resolve what ``principal`` may see at ``target``.

    Raises UnknownTargetError for unknown targets and EntitlementLookupError
    when the store fails; never degrades a failure into an empty result.
    """
    target = hierarchy.parse_target(target)

    if principal.is_unrestricted():
        return Resolution.everything(target)

    direct = principal.partition()
    if not any(direct.values()):
        logger.debug("User %s has no active grants: deny %s.", principal.user_id, target)
        return Resolution.nothing(target)

    level = Level.TABLE.value if target == CITIZEN else target
    ids = _cascade(direct, level)[level]
    logger.debug("User %s resolved %d %s id(s).", principal.user_id, len(ids), level)
    return Resolution(target=target, unrestricted=False, ids=ids)


def resolve_all(principal) -> dict[str, Resolution]:
    """
    Resolutions for every level plus the citizen roster, sharing one cascade.
    """
    targets = LEVELS + (CITIZEN,)

    if principal.is_unrestricted():
        return {t: Resolution.everything(t) for t in targets}

    direct = principal.partition()
    if not any(direct.values()):
        return {t: Resolution.nothing(t) for t in targets}

    reached = _cascade(direct, Level.TABLE.value)
    out = {level: Resolution(level, False, reached[level]) for level in LEVELS}
    out[CITIZEN] = Resolution(CITIZEN, False, reached[Level.TABLE.value])
    return out
