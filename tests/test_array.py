from __future__ import annotations

from typing import TypeGuard

from contract import array, is_number, is_string


def test_array_of_numbers() -> None:
    is_numbers = array(is_number)
    assert is_numbers([1, 2, 3])
    assert not is_numbers([1, "2", 3])
    assert is_numbers([])
    assert is_numbers((1.5, 2))
    assert not is_numbers("123")
    assert not is_numbers(None)
    assert not is_numbers({0: 1})
    assert not is_numbers({1, 2})
    assert is_numbers.__name__ == "array(is_number)"


def test_array_rejects_bools_as_numbers() -> None:
    assert not array(is_number)([1, True])


def test_array_result_is_order_independent() -> None:
    is_strings = array(is_string)
    assert is_strings(["a", 1]) is is_strings([1, "a"]) is False
    assert is_strings(["a", "b"]) is is_strings(["b", "a"]) is True


def test_array_short_circuits() -> None:
    calls: list[object] = []

    def first_only(value: object) -> TypeGuard[object]:
        calls.append(value)
        return False

    assert not array(first_only)([1, 2, 3])
    assert calls == [1]


def test_array_of_arrays() -> None:
    is_matrix = array(array(is_number))
    assert is_matrix([[1, 2], [], [3]])
    assert not is_matrix([[1, 2], 3])
    assert is_matrix.__name__ == "array(array(is_number))"
