# Copyright (c) 2025 Old River Creative. MIT LICENSE.
#
# Sort utilities
# - natural: natural order comparator ('img2' before 'img10').
# - natural_sorted: sort a list in natural order.


from typing import *
import functools
import locale
import re


R_TOKEN = re.compile(r'\d+|\D+')

# Strings with this prefix sort before all others.
S_HALF = '1/2 '


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _tokens(s: str) -> List[Union[int, str]]:
    return [int(t) if t.isdecimal() else t for t in R_TOKEN.findall(s)]


def natural(a: Any, b: Any) -> int:
    """
    Compare two strings in natural order: runs of digits compare as
    numbers, other runs compare by locale. Returns -1, 0 or 1.
    """
    a = str(a)
    b = str(b)

    ahalf = a.startswith(S_HALF)
    bhalf = b.startswith(S_HALF)
    if ahalf != bhalf:
        return -1 if ahalf else 1

    atokens = _tokens(a)
    btokens = _tokens(b)

    for at, bt in zip(atokens, btokens):
        if isinstance(at, int) and isinstance(bt, int):
            out = _cmp(at, bt)
        else:
            out = _cmp(locale.strcoll(str(at), str(bt)), 0)
        if 0 != out:
            return out

    return _cmp(len(atokens), len(btokens))


def natural_sorted(items: Iterable[Any], reverse: bool = False) -> List[Any]:
    "New list of the items in natural order."
    return sorted(items, key=functools.cmp_to_key(natural), reverse=reverse)


__all__ = [
    'natural',
    'natural_sorted',
]
