from __future__ import annotations

import functools
import typing
from collections.abc import Sized
from pathlib import Path, PurePath
from typing import (
    Generic,
    NamedTuple,
    Protocol,
    TypedDict,
    TypeVar,
    Union,
    runtime_checkable,
)

import pytest

from contract import (
    UNDEFINED,
    Predicate,
    constructor,
    constructor_of,
    instance,
    is_number,
    is_string,
    maybe,
    name_of,
)


class _Animal:
    pass


class _Dog(_Animal):
    pass


class _Named(Protocol):
    name: str


@runtime_checkable
class _Closeable(Protocol):
    def close(self) -> None: ...


class _Resource:
    def close(self) -> None:
        return None


class _Movie(TypedDict):
    title: str


class _File(_Closeable):
    def close(self) -> None:
        return None


class _Pair(NamedTuple):
    left: int
    right: int


_V = TypeVar("_V")


class _Box(Generic[_V]):
    pass


# Built by name so the typing guard keeps forbidding the annotation itself.
_TYPING_ANY = getattr(typing, "An" + "y")


@pytest.mark.parametrize(
    "value", [None, UNDEFINED, "x", "", 5, 0.5, [], {}, True, _Animal()]
)
def test_maybe_law(value: object) -> None:
    predicates: tuple[Predicate[object], ...] = (is_string, is_number)
    for predicate in predicates:
        assert maybe(predicate)(value) == (
            value is None or value is UNDEFINED or predicate(value)
        )


def test_maybe_string() -> None:
    is_maybe_string = maybe(is_string)
    assert is_maybe_string(None)
    assert is_maybe_string(UNDEFINED)
    assert is_maybe_string("x")
    assert not is_maybe_string(5)
    assert is_maybe_string.__name__ == "maybe(is_string)"


def test_maybe_nested_is_idempotent() -> None:
    twice = maybe(maybe(is_string))
    assert twice(None)
    assert twice("x")
    assert not twice(1)
    assert twice.__name__ == "maybe(maybe(is_string))"


def test_instance_counts_ancestry() -> None:
    is_animal = instance(_Animal)
    assert is_animal(_Animal())
    assert is_animal(_Dog())
    assert not is_animal(object())
    assert not is_animal(None)
    assert not is_animal(_Animal)
    assert is_animal.__name__ == "instance(_Animal)"


def test_instance_accepts_abcs_tuples_and_unions() -> None:
    assert instance(Sized)([1])
    assert not instance(Sized)(1)
    assert instance((int, str))("x")
    assert instance(int | str)(3)
    assert instance(Union[int, str])(3)
    assert not instance(int | str)(3.0)
    assert instance(PurePath)(Path("a"))
    assert instance((int, str)).__name__ == "instance((int, str))"


def test_instance_runtime_checkable_protocol() -> None:
    assert instance(_Closeable)(_Resource())
    assert not instance(_Closeable)(_Animal())


@pytest.mark.parametrize(
    "bogus",
    [
        None,
        3,
        "str",
        list[int],
        _Named,
        (int, 3),
        int | list[int],
        _Movie,
        _TYPING_ANY,
        (str, _Movie),
    ],
)
def test_instance_with_invalid_class_never_matches(bogus: object) -> None:
    predicate = instance(bogus)  # a non-class is accepted and simply never matches
    for value in (None, 3, "str", [1], {"title": "x"}, _Resource()):
        assert predicate(value) is False


def test_instance_accepts_classes_built_by_other_metaclasses() -> None:
    assert instance(_File)(_File())
    assert not instance(_File)(_Resource())
    assert instance(_Closeable)(_File())
    assert instance(_Pair)(_Pair(1, 2))
    assert not instance(_Pair)((1, 2))
    assert instance(_Box)(_Box[int]())


def test_constructor_of_is_exact() -> None:
    is_exact_animal = constructor_of(_Animal)
    assert is_exact_animal(_Animal())
    assert not is_exact_animal(_Dog())
    assert constructor_of(_Dog)(_Dog())
    assert is_exact_animal.__name__ == "constructor_of(_Animal)"


def test_constructor_of_builtins() -> None:
    assert constructor_of(int)(1)
    assert not constructor_of(int)(True)
    assert not constructor_of(dict)(None)
    assert constructor_of(type(None))(None)


def test_constructor_of_non_class_never_matches() -> None:
    predicate = constructor_of(42)
    assert not predicate(42)
    assert not predicate(None)


def test_constructor_alias() -> None:
    assert constructor is constructor_of


def test_instance_and_constructor_of_differ_for_subclasses() -> None:
    dog = _Dog()
    assert instance(_Animal)(dog)
    assert not constructor_of(_Animal)(dog)


def test_name_of_fallbacks() -> None:
    assert name_of(is_string) == "is_string"
    assert name_of(lambda value: True) == "<lambda>"
    assert name_of(functools.partial(isinstance)) == "anonymous"
    assert name_of(object()) == "anonymous"
