# access/exceptions.py
from __future__ import annotations


class AccessError(Exception):
    """Base class for entitlement errors."""


class UnknownTargetError(AccessError, ValueError):
    """A target name outside section/locality/circuit/school/table/citizen."""

    def __init__(self, target):
        self.target = target
        super().__init__(
            f"Unknown access target {target!r}; expected one of "
            "section, locality, circuit, school, table, citizen."
        )


class EntitlementLookupError(AccessError):
    """
    The store failed while walking the hierarchy.

    Distinct from a legitimate empty result: callers should retry or answer
    with an internal error, never with an empty list.
    """
    retryable = True

    def __init__(self, message: str, *, level: str | None = None):
        self.level = level
        super().__init__(message)


class MalformedGrantError(AccessError, ValueError):
    """A grant referencing zero or several hierarchy entities."""
