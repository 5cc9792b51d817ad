"""Higher-order combinators building new predicates from existing ones.

Each combinator returns a fresh, stateless predicate named after its
composition (``maybe(is_string)``, ``array(shape(a=is_number))``) so that
failures reported by :func:`contract.guard.guard` can be read without a
custom message.
"""
from __future__ import annotations

import types
import typing
from collections.abc import Mapping, Sequence
from typing import TypeGuard

from contract.predicates import UNDEFINED, is_array, is_nullish, is_object
from contract.types import AnyPredicate, ClassInfo, Predicate, ShapeDescriptor, T

ANONYMOUS = "anonymous"

_PROTOCOL_META = type(typing.Protocol)


def name_of(predicate: object) -> str:
    """Return the predicate's ``__name__``, or ``anonymous`` when it has none."""
    name = getattr(predicate, "__name__", None)
    if isinstance(name, str) and name:
        return name
    return ANONYMOUS


def _is_classinfo(cls: object) -> TypeGuard[ClassInfo]:
    # Anything accepted here can be handed to isinstance() without raising.
    if isinstance(cls, tuple):
        return all(_is_classinfo(item) for item in cls)
    if isinstance(cls, types.UnionType) or typing.get_origin(cls) is typing.Union:
        return all(_is_classinfo(item) for item in typing.get_args(cls))
    if isinstance(cls, types.GenericAlias) or not isinstance(cls, type):
        return False
    if getattr(cls, "_is_protocol", False):
        return bool(getattr(cls, "_is_runtime_protocol", False))
    # typing metaclasses other than Protocol's (TypedDict, Any) refuse isinstance.
    meta = type(cls)
    return meta.__module__ != "typing" or issubclass(meta, _PROTOCOL_META)


def _describe(cls: object) -> str:
    if isinstance(cls, tuple):
        return "(" + ", ".join(_describe(item) for item in cls) + ")"
    if isinstance(cls, type):
        return cls.__name__
    return repr(cls)


def maybe(predicate: Predicate[T]) -> Predicate[T | None]:
    """Widen ``predicate`` to also accept ``None`` and ``UNDEFINED``."""

    def is_maybe(value: object) -> TypeGuard[T | None]:
        return is_nullish(value) or predicate(value)

    is_maybe.__name__ = is_maybe.__qualname__ = f"maybe({name_of(predicate)})"
    return is_maybe


def instance(cls: object) -> Predicate[object]:
    """Ancestry check: true for instances of ``cls`` or any subclass.

    A ``cls`` that ``isinstance`` would reject (plain values, parameterized
    generics, protocols not marked ``runtime_checkable``, ``TypedDict``
    classes) yields a predicate that never matches.
    """
    # An empty tuple is valid class-info that matches nothing.
    classinfo: ClassInfo = cls if _is_classinfo(cls) else ()

    def is_instance_of(value: object) -> TypeGuard[object]:
        return isinstance(value, classinfo)

    name = f"instance({_describe(cls)})"
    is_instance_of.__name__ = is_instance_of.__qualname__ = name
    return is_instance_of


def constructor_of(cls: object) -> Predicate[object]:
    """Exact-identity check: true only when ``type(value) is cls``."""

    def is_constructor_of(value: object) -> TypeGuard[object]:
        return type(value) is cls

    is_constructor_of.__name__ = is_constructor_of.__qualname__ = (
        f"constructor_of({_describe(cls)})"
    )
    return is_constructor_of


constructor = constructor_of


def _is_index(key: str) -> bool:
    return key.isascii() and key.isdigit() and (key == "0" or key[0] != "0")


def _field(value: object, key: str) -> object:
    if isinstance(value, Mapping):
        return value[key] if key in value else UNDEFINED
    if isinstance(value, Sequence) and _is_index(key):
        index = int(key)
        return value[index] if index < len(value) else UNDEFINED
    return getattr(value, key, UNDEFINED)


def shape(
    descriptor: ShapeDescriptor | None = None, /, **fields: AnyPredicate
) -> Predicate[object]:
    """Structural check over the declared fields only.

    Mappings are read by key, sequences by index for canonical decimal keys
    (``"0"``, ``"12"``), other objects by attribute; an absent field is passed
    to its predicate as ``UNDEFINED``. Undeclared fields are ignored.
    """
    defn: dict[str, AnyPredicate] = {**(descriptor or {}), **fields}

    def is_shape_of(value: object) -> TypeGuard[object]:
        if not is_object(value):
            return False
        return all(predicate(_field(value, key)) for key, predicate in defn.items())

    inner = ", ".join(f"{key}={name_of(predicate)}" for key, predicate in defn.items())
    is_shape_of.__name__ = is_shape_of.__qualname__ = f"shape({inner})"
    return is_shape_of


def array(predicate: Predicate[T]) -> Predicate[list[T] | tuple[T, ...]]:
    """True for a list or tuple whose every element satisfies ``predicate``."""

    def is_array_of(value: object) -> TypeGuard[list[T] | tuple[T, ...]]:
        if not is_array(value):
            return False
        return all(predicate(item) for item in value)

    is_array_of.__name__ = is_array_of.__qualname__ = f"array({name_of(predicate)})"
    return is_array_of
