"""Outcome of a guarded setter.

Guarded setters never raise.  They return an :class:`Outcome` that is
truthy on success, so ``if door.set_position(50):`` reads naturally, while
still carrying the rejection category and any cascade adjustments the
transition made along the way.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class OutcomeStatus(str, Enum):
    SUCCESS = "success"
    ADJUSTED = "adjusted"
    REJECTED = "rejected"


class ErrorKind(str, Enum):
    """Reporting category for a rejected operation."""

    NOT_FOUND = "not_found"
    """Named entity absent from a collection."""
    INVALID_INSTANCE = "invalid_instance"
    """Wrong entity type supplied."""
    INVALID_CONFIG = "invalid_config"
    """Aggregate-level constraint failed on attachment."""
    NOT_OPERABLE = "not_operable"
    """Mutation attempted on a non-operable part."""
    NO_CHANGE = "no_change"
    """New value equals the current one."""
    NOT_VALID = "not_valid"
    """Value outside a catalog range or set."""
    CANNOT_WHILE = "cannot_while"
    """Transition blocked by a conflicting current state."""
    MUST_BE = "must_be"
    """Precondition on another field not met."""
    DOES_NOT_HAVE = "does_not_have"
    """Capability absent."""


@dataclass(frozen=True)
class Adjustment:
    """A field a transition changed as a side effect of the requested change."""

    field: str
    value: Any
    cause: str


@dataclass(frozen=True)
class Outcome:
    status: OutcomeStatus
    kind: ErrorKind | None = None
    message: str = ""
    adjustments: tuple[Adjustment, ...] = ()
    surface: bool = False
    """True when a presentation layer should show ``message`` to the user."""

    @classmethod
    def success(cls, adjustments: tuple[Adjustment, ...] | list[Adjustment] = ()) -> Outcome:
        adjustments = tuple(adjustments)
        status = OutcomeStatus.ADJUSTED if adjustments else OutcomeStatus.SUCCESS
        return cls(status=status, adjustments=adjustments)

    @classmethod
    def rejected(cls, kind: ErrorKind, message: str, surface: bool = False) -> Outcome:
        return cls(status=OutcomeStatus.REJECTED, kind=kind, message=message, surface=surface)

    @property
    def ok(self) -> bool:
        return self.status is not OutcomeStatus.REJECTED

    @property
    def adjusted(self) -> bool:
        return self.status is OutcomeStatus.ADJUSTED

    def __bool__(self) -> bool:
        return self.ok
