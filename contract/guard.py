from __future__ import annotations

from typing import overload

from contract.combinators import name_of
from contract.logging import get_logger
from contract.types import AnyPredicate, Predicate, T

_logger = get_logger(__name__)


class GuardError(TypeError):
    """Raised by :func:`guard` when a value fails its predicate.

    Subclasses ``TypeError`` so callers may catch either. The message is the
    caller's own when one was given; the attributes always describe the
    failing check.
    """

    def __init__(self, message: str, *, predicate_name: str, value_type: str) -> None:
        super().__init__(message)
        self.predicate_name = predicate_name
        self.value_type = value_type


@overload
def guard(predicate: Predicate[T], value: object, message: str | None = None) -> T: ...


@overload
def guard(predicate: AnyPredicate, value: T, message: str | None = None) -> T: ...


def guard(predicate: AnyPredicate, value: object, message: str | None = None) -> object:
    """Return ``value`` unchanged if ``predicate`` holds, else raise GuardError."""
    if predicate(value):
        return value
    predicate_name = name_of(predicate)
    value_type = type(value).__name__
    _logger.debug(
        "guard rejected value",
        extra={"predicate": predicate_name, "value_type": value_type},
    )
    if message is None:
        message = f"Value didn't pass guard with predicate {predicate_name}"
    raise GuardError(message, predicate_name=predicate_name, value_type=value_type)
