# access/principal.py
# ------------------------------------------------------------
# The principal whose visibility is computed: a role name plus grant records.
# Passed explicitly to the resolver; nothing here reads request/thread state.
# ------------------------------------------------------------

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Iterable, Optional

from django.conf import settings

from access.exceptions import MalformedGrantError, UnknownTargetError
from base.models.mixins import Status
from territory.hierarchy import LEVELS, parse_target

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GrantRef:
    level: str
    entity_id: int
    status: str = Status.ACTIVE.value

    @property
    def is_active(self) -> bool:
        return self.status == Status.ACTIVE


def _read(record, name):
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _grant_level(value) -> Optional[str]:
    """Canonical level name, or None for citizens and unknown names."""
    try:
        level = parse_target(value)
    except UnknownTargetError:
        return None
    return level if level in LEVELS else None


def _coerce(record) -> GrantRef:
    """
    Accept a GrantRef, a ``{"level", "entity_id", "status"}`` mapping, or a
    grant row (model instance / ``values()`` dict with ``<level>_id`` keys).
    Raises MalformedGrantError for records that reference zero or several
    entities, or carry no recognised status.
    """
    if isinstance(record, GrantRef):
        return record

    status = _read(record, "status")
    # a row without a known status never counts as active
    if status not in Status.values:
        raise MalformedGrantError(f"unknown status {status!r}")

    level = _read(record, "level")
    if level:
        entity_id = _read(record, "entity_id")
        try:
            level = parse_target(level)
        except UnknownTargetError as exc:
            raise MalformedGrantError(f"unknown level {level!r}") from exc
        # citizens are never granted directly
        if level not in LEVELS:
            raise MalformedGrantError(f"{level} cannot be granted")
        if entity_id is None:
            raise MalformedGrantError(f"{level} grant without an entity id")
        return GrantRef(level, int(entity_id), str(status))

    populated = [(name, _read(record, f"{name}_id")) for name in LEVELS if _read(record, f"{name}_id")]
    if len(populated) != 1:
        raise MalformedGrantError(f"expected exactly one entity reference, got {len(populated)}")
    name, value = populated[0]
    return GrantRef(name, int(value), str(status))


@dataclass(frozen=True)
class Principal:
    role_name: str
    grants: tuple[GrantRef, ...] = field(default_factory=tuple)
    user_id: Optional[int] = None

    # ---------------------------------------------------------------- builders
    @classmethod
    def from_records(cls, role_name: str, records: Iterable, *, user_id: Optional[int] = None) -> "Principal":
        """
        Build a principal from raw grant records.

        Malformed records are skipped and logged; they are rejected when issued,
        so seeing one here means the data was written around the model.
        """
        refs = []
        for record in records:
            try:
                refs.append(_coerce(record))
            except MalformedGrantError as exc:
                logger.warning(
                    "Skipping malformed grant %s for user %s: %s.",
                    _read(record, "id") or _read(record, "pk") or "?", user_id, exc,
                )
        return cls(role_name=role_name or "", grants=tuple(refs), user_id=user_id)

    @classmethod
    def from_user(cls, user) -> "Principal":
        """Load the user's active grants in one query."""
        from access.models import Grant, LEVEL_FIELDS

        rows = (
            Grant.objects
            .filter(user_id=user.pk, status=Status.ACTIVE)
            .values("id", "status", *[f"{name}_id" for name in LEVEL_FIELDS])
        )
        return cls.from_records(getattr(user, "role_name", ""), rows, user_id=user.pk)

    # ----------------------------------------------------------------- queries
    def is_unrestricted(self) -> bool:
        return self.role_name in set(getattr(settings, "FIELDOPS_UNRESTRICTED_ROLES", ()))

    def active_grants(self) -> tuple[GrantRef, ...]:
        return tuple(g for g in self.grants if g.is_active)

    def partition(self) -> dict[str, frozenset[int]]:
        """Active grant ids per level (every level present, possibly empty)."""
        buckets: dict[str, set[int]] = {level: set() for level in LEVELS}
        for grant in self.active_grants():
            level = _grant_level(grant.level)
            if level is None:
                logger.warning(
                    "Skipping grant on %r %s for user %s: not a grantable level.",
                    grant.level, grant.entity_id, self.user_id,
                )
                continue
            buckets[level].add(grant.entity_id)
        return {level: frozenset(ids) for level, ids in buckets.items()}
