# territory/hierarchy.py
# ------------------------------------------------------------
# Static description of the electoral hierarchy:
#   Section -> Locality -> Circuit -> School -> Table  (+ Citizen roster on Table)
#
# Pure data + lookups. Models are resolved lazily via apps.get_model()
# so this module stays import-safe for access.* and territory.models alike.
# ------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from django.apps import apps
from django.conf import settings
from django.db import models

from access.exceptions import UnknownTargetError


class Level(models.TextChoices):
    SECTION = "section", "Section"
    LOCALITY = "locality", "Locality"
    CIRCUIT = "circuit", "Circuit"
    SCHOOL = "school", "School"
    TABLE = "table", "Table"


# coarse -> fine
LEVELS: tuple[str, ...] = (
    Level.SECTION.value,
    Level.LOCALITY.value,
    Level.CIRCUIT.value,
    Level.SCHOOL.value,
    Level.TABLE.value,
)

# roster target: filtered through Table access, never granted directly
CITIZEN = "citizen"
TARGETS: tuple[str, ...] = LEVELS + (CITIZEN,)


@dataclass(frozen=True)
class Edge:
    """parent -> child link, carried by ``fk`` on the child model."""
    parent: str
    child: str
    fk: str

    @property
    def fk_column(self) -> str:
        return f"{self.fk}_id"


EDGES: tuple[Edge, ...] = (
    Edge(Level.SECTION.value, Level.LOCALITY.value, "section"),
    Edge(Level.LOCALITY.value, Level.CIRCUIT.value, "locality"),
    Edge(Level.CIRCUIT.value, Level.SCHOOL.value, "circuit"),
    Edge(Level.SCHOOL.value, Level.TABLE.value, "school"),
)

ROSTER_EDGE = Edge(Level.TABLE.value, CITIZEN, "table")

_MODEL_NAMES = {
    Level.SECTION.value: "Section",
    Level.LOCALITY.value: "Locality",
    Level.CIRCUIT.value: "Circuit",
    Level.SCHOOL.value: "School",
    Level.TABLE.value: "Table",
    CITIZEN: "Citizen",
}


# ============================================================
# Lookups
# ============================================================

def parse_target(value) -> str:
    """
    Normalize a target name ("School", " table ") to its canonical value.
    Unknown names are a programming error and fail fast.
    """
    name = str(value or "").strip().lower()
    if name not in TARGETS:
        raise UnknownTargetError(value)
    return name


def model_for(target: str):
    return apps.get_model("territory", _MODEL_NAMES[parse_target(target)])


def depth(level: str) -> int:
    level = parse_target(level)
    if level == CITIZEN:
        return len(LEVELS)
    return LEVELS.index(level)


def section_propagates() -> bool:
    return bool(getattr(settings, "FIELDOPS_SECTION_PROPAGATES", True))


def child_edge(level: str) -> Optional[Edge]:
    """
    Edge leading one hop down from ``level``; None at the bottom of the
    hierarchy or when Section propagation is switched off.
    """
    level = parse_target(level)
    for edge in EDGES:
        if edge.parent == level:
            if edge.parent == Level.SECTION.value and not section_propagates():
                return None
            return edge
    return None


def path_between(ancestor: str, descendant: str) -> tuple[Edge, ...]:
    """
    Edges walked from ``ancestor`` down to ``descendant`` (empty when equal).
    Returns () when the descent is impossible (descendant above ancestor, or a
    disabled edge on the way).
    """
    ancestor, descendant = parse_target(ancestor), parse_target(descendant)
    if descendant == CITIZEN:
        head = path_between(ancestor, Level.TABLE.value) if ancestor != CITIZEN else ()
        if ancestor == Level.TABLE.value or head:
            return head + (ROSTER_EDGE,)
        return ()
    if ancestor == CITIZEN or depth(ancestor) > depth(descendant):
        return ()

    path: list[Edge] = []
    current = ancestor
    while current != descendant:
        edge = child_edge(current)
        if edge is None:
            return ()
        path.append(edge)
        current = edge.child
    return tuple(path)


def is_ancestor(ancestor: str, descendant: str) -> bool:
    """True when access granted at ``ancestor`` flows down to ``descendant``."""
    if parse_target(ancestor) == parse_target(descendant):
        return False
    return bool(path_between(ancestor, descendant))
