# access/services.py
# ============================================================
# Grant issuing helpers (admin / seed tooling)
#
# - grant_access(): upsert the (user, entity) grant and set its status.
# - revoke_access(): delete one grant or every grant of the user.
# The resolver never writes; these are the only writers of Grant rows.
# ============================================================

from __future__ import annotations

from typing import Optional

from django.core.exceptions import ValidationError
from django.db import transaction

from access.models import Grant, LEVEL_FIELDS
from base.models.mixins import Status


def level_of(entity) -> str:
    """Hierarchy level a model instance lives at ("school", "table", ...)."""
    level = getattr(entity, "access_target", None)
    if level not in LEVEL_FIELDS:
        raise ValidationError(
            f"{type(entity).__name__} cannot be granted; grants target one of: {', '.join(LEVEL_FIELDS)}."
        )
    if entity.pk is None:
        raise ValidationError(f"{type(entity).__name__} must be saved before it can be granted.")
    return level


@transaction.atomic
def grant_access(user, entity, *, status: str = Status.ACTIVE, issued_by=None) -> Grant:
    """
    Upsert the grant binding ``user`` to ``entity`` and set its status.
    """
    if status not in Status.values:
        raise ValidationError(f"Unknown grant status {status!r}.")

    level = level_of(entity)
    grant = Grant.objects.filter(user=user, **{level: entity}).first()
    if grant is None:
        grant = Grant(user=user, status=status, created_by=issued_by, **{level: entity})
        grant.full_clean()
        grant.save()
        return grant

    if grant.status != status or issued_by is not None:
        grant.status = status
        grant.updated_by = issued_by
        grant.save(update_fields=["status", "updated_by", "updated_at"])
    return grant


def revoke_access(user, entity=None) -> int:
    """
    Delete the user's grant on ``entity`` (or all of the user's grants when
    ``entity`` is None). Returns the number of rows removed.
    """
    qs = Grant.objects.filter(user=user)
    if entity is not None:
        qs = qs.filter(**{level_of(entity): entity})
    deleted, _ = qs.delete()
    return deleted


def deactivate_access(user, entity) -> Optional[Grant]:
    """Keep the row but take it out of resolution."""
    grant = Grant.objects.filter(user=user, **{level_of(entity): entity}).first()
    if grant is None:
        return None
    if grant.status != Status.INACTIVE:
        grant.status = Status.INACTIVE
        grant.save(update_fields=["status", "updated_at"])
    return grant
