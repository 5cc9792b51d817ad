"""Composable runtime type predicates.

Primitive checks (``is_string``, ``is_array``, ...), combinators that build
new predicates from existing ones (``maybe``, ``instance``,
``constructor_of``, ``shape``, ``array``) and ``guard``, which enforces a
predicate and raises :class:`GuardError` on failure. Every predicate is a
pure ``TypeGuard`` function and can be nested inside any combinator.
"""
from __future__ import annotations

from contract.combinators import (
    array,
    constructor,
    constructor_of,
    instance,
    maybe,
    name_of,
    shape,
)
from contract.guard import GuardError, guard
from contract.predicates import (
    UNDEFINED,
    Symbol,
    UndefinedType,
    is_array,
    is_bigint,
    is_bool,
    is_boolean,
    is_function,
    is_nullish,
    is_number,
    is_object,
    is_string,
    is_symbol,
)
from contract.types import AnyPredicate, Predicate, ShapeDescriptor

__all__ = [
    "UNDEFINED",
    "AnyPredicate",
    "GuardError",
    "Predicate",
    "ShapeDescriptor",
    "Symbol",
    "UndefinedType",
    "array",
    "constructor",
    "constructor_of",
    "guard",
    "instance",
    "is_array",
    "is_bigint",
    "is_bool",
    "is_boolean",
    "is_function",
    "is_nullish",
    "is_number",
    "is_object",
    "is_string",
    "is_symbol",
    "maybe",
    "name_of",
    "shape",
]
