"""Primitive predicates classifying a value's fundamental kind.

Every predicate here is total: it accepts any value, returns a ``bool`` and
never raises.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Final, TypeGuard


class Symbol:
    """Unique opaque token, equal only to itself."""

    __slots__ = ("description",)

    def __init__(self, description: str | None = None) -> None:
        self.description = description

    def __repr__(self) -> str:
        return f"Symbol({self.description})" if self.description else "Symbol()"


class UndefinedType:
    """Marker for an absent value, distinct from ``None``."""

    _instance: UndefinedType | None = None

    def __new__(cls) -> UndefinedType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self) -> str:
        return "UNDEFINED"

    def __copy__(self) -> UndefinedType:
        return self

    def __deepcopy__(self, memo: dict[int, object]) -> UndefinedType:
        return self


UNDEFINED: Final = UndefinedType()

# Scalars that are never "objects"; bool is covered by int.
_PRIMITIVES: Final = (str, bytes, int, float, complex, Symbol)


def is_string(value: object) -> TypeGuard[str]:
    return isinstance(value, str)


def is_number(value: object) -> TypeGuard[int | float]:
    """Int or float, NaN and infinities included; bools are not numbers."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_bigint(value: object) -> TypeGuard[int]:
    return isinstance(value, int) and not isinstance(value, bool)


def is_boolean(value: object) -> TypeGuard[bool]:
    return isinstance(value, bool)


is_bool = is_boolean


def is_nullish(value: object) -> TypeGuard[None | UndefinedType]:
    return value is None or value is UNDEFINED


def is_object(value: object) -> TypeGuard[object]:
    """Anything composite: containers, instances, classes and functions.

    Nullish values and primitive scalars are rejected.
    """
    return not is_nullish(value) and not isinstance(value, _PRIMITIVES)


def is_function(value: object) -> TypeGuard[Callable[..., object]]:
    return callable(value)


def is_symbol(value: object) -> TypeGuard[Symbol]:
    return isinstance(value, Symbol)


def is_array(value: object) -> TypeGuard[list[object] | tuple[object, ...]]:
    return isinstance(value, (list, tuple))
