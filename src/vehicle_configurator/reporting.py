"""Classified rejection messages.

One factory per reporting category.  Each builds the rejected
:class:`~vehicle_configurator.models.outcome.Outcome` and logs its
message: no-change signals at DEBUG, other log-only messages at INFO, and
messages meant for the user (``surface=True``) at WARNING.
"""

from __future__ import annotations

import logging
from typing import Any

from vehicle_configurator.models.outcome import Adjustment, ErrorKind, Outcome

logger = logging.getLogger(__name__)


def _reject(kind: ErrorKind, message: str, surface: bool = False) -> Outcome:
    if kind is ErrorKind.NO_CHANGE:
        logger.debug(message)
    elif surface:
        logger.warning(message)
    else:
        logger.info(message)
    return Outcome.rejected(kind, message, surface=surface)


def not_found(item: str) -> Outcome:
    return _reject(ErrorKind.NOT_FOUND, f"invalid request - {item} not found")


def invalid_instance(item: str) -> Outcome:
    return _reject(ErrorKind.INVALID_INSTANCE, f"invalid {item} instance")


def invalid_config(item: str, detail: str = "") -> Outcome:
    message = f"invalid {item} configuration"
    if detail:
        message = f"{message}: {detail}"
    return _reject(ErrorKind.INVALID_CONFIG, message)


def not_operable(item: str) -> Outcome:
    return _reject(ErrorKind.NOT_OPERABLE, f"{item} is not operable")


def no_change(value: str) -> Outcome:
    return _reject(ErrorKind.NO_CHANGE, f"new {value} is equal to current value")


def already(item: str, state: str) -> Outcome:
    """No-change signal for on/off style flags ("the engine is already on")."""
    return _reject(ErrorKind.NO_CHANGE, f"the {item} is already {state}")


def does_not_have(item: str, capability: str) -> Outcome:
    return _reject(ErrorKind.DOES_NOT_HAVE, f"{item} does not have {capability}")


def cannot_while(item: str, action: str, condition: str) -> Outcome:
    return _reject(ErrorKind.CANNOT_WHILE, f"{item} cannot be {action} while {condition}", surface=True)


def must_be(item: str, condition: str, action: str) -> Outcome:
    return _reject(ErrorKind.MUST_BE, f"{item} must be {condition} to {action}", surface=True)


def not_valid(item: str, context: str) -> Outcome:
    return _reject(ErrorKind.NOT_VALID, f"new {item} not valid for current {context}")


def out_of_range(item: str, minimum: float, maximum: float, unit: str = "%") -> Outcome:
    return _reject(ErrorKind.NOT_VALID, f"{item} must be {minimum:g}-{maximum:g}{unit}", surface=True)


def updated(field: str, value: Any, cause: str) -> Adjustment:
    """Record (and log) a field reset made to keep a component valid."""
    logger.info("%s updated to %s for new %s", field, value, cause)
    return Adjustment(field=field, value=value, cause=cause)
