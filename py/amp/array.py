# Copyright (c) 2025 Old River Creative. MIT LICENSE.
#
# Array utilities
# - move: move an item within a list, in place.
# - unique: first occurrence of each item, in order.


from typing import *


# The standard undefined value for this language.
UNDEF = None


def _spliceindex(index: int, length: int) -> int:
    "Normalise an index the way a splice start is normalised."
    if index < 0:
        return max(length + index, 0)
    return min(index, length)


def move(array: List[Any], from_: int, to: int) -> List[Any]:
    """
    Move an item within a list. The list is modified and returned.

    Indices out of range are clamped, not rejected: negative indices
    count from the end. If from_ is past the end nothing is removed, and
    UNDEF is inserted at to.
    """
    start = _spliceindex(from_, len(array))
    el = array.pop(start) if start < len(array) else UNDEF
    array.insert(to, el)
    return array


# Values compared by value in unique; anything else compares by identity.
SCALARS = (type(None), bool, int, float, str)


def _kind(val: Any) -> type:
    "Scalar kind: bool apart from numbers, int and float as one number kind."
    if isinstance(val, bool):
        return bool
    if isinstance(val, (int, float)):
        return float
    return str if isinstance(val, str) else type(val)


def _same(a: Any, b: Any) -> bool:
    "Strict equality: scalars of the same kind by value, other values by identity."
    if isinstance(a, SCALARS) and isinstance(b, SCALARS):
        return _kind(a) is _kind(b) and a == b
    return a is b


def unique(arr: Iterable[Any]) -> List[Any]:
    """
    Unique items of a list, keeping the first occurrence of each. Lists,
    maps and other objects are only duplicates if they are the same object.
    """
    out = []
    for elem in arr:
        if not any(_same(elem, seen) for seen in out):
            out.append(elem)
    return out


__all__ = [
    'move',
    'unique',
]
