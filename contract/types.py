from __future__ import annotations

import types
from collections.abc import Callable, Mapping
from typing import TypeAlias, TypeGuard, TypeVar

T = TypeVar("T")

Predicate = Callable[[object], TypeGuard[T]]
AnyPredicate = Callable[[object], bool]
ShapeDescriptor = Mapping[str, AnyPredicate]

ClassInfo: TypeAlias = "type | types.UnionType | tuple[ClassInfo, ...]"
