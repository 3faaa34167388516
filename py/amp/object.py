# Copyright (c) 2025 Old River Creative. MIT LICENSE.
#
# Object utilities
# - is_: value is a map (dict), and not a list.
# - clone: deep copy of a JSON-like value.
# - equal: compare two JSON-like values.
# - merge: deep merge maps into a target map.
# - options: build a new options map from defaults and config.
# - by_path: get or set a value by key path ('parent.child.grandchild').
#
# clone and equal follow the mode in amp.config. In CLONE_JSON mode the
# value makes a full JSON round trip: tuples come back as lists, keys
# come back as strings, NaN and Infinity become None, integral floats
# become ints (JSON has one number type), and values JSON cannot encode
# (functions, cycles) raise whatever the json module raises.


from typing import *
import copy
import json
import logging
import math

from .config import CLONE_JSON, resolve_mode


logger = logging.getLogger(__name__)

# The standard undefined value for this language.
UNDEF = None

# Marks an omitted by_path value, so that None can be set.
_MISSING = object()

S_DT = '.'


def is_(el: Any = UNDEF) -> bool:
    "Value is a map (dict): non-null, key-value, not a sequence."
    return isinstance(el, dict)


def _jsonsafe(val: Any, _seen: Optional[Set[int]] = None) -> Any:
    """
    Numbers as JSON holds them: non-finite floats become None and
    integral floats become ints. Other values are left for json.dumps.
    """
    if isinstance(val, float):
        if not math.isfinite(val):
            return UNDEF
        return int(val) if val.is_integer() else val

    if not isinstance(val, (dict, list, tuple)):
        return val

    _seen = _seen or set()
    if id(val) in _seen:
        raise ValueError('Circular reference detected')
    _seen = _seen | {id(val)}

    if isinstance(val, dict):
        return {k: _jsonsafe(v, _seen) for k, v in val.items()}
    return [_jsonsafe(v, _seen) for v in val]


def clone(obj: Any = UNDEF, mode: Optional[str] = None) -> Any:
    "Clone the given value."
    if CLONE_JSON == resolve_mode(mode):
        return json.loads(json.dumps(_jsonsafe(obj), allow_nan=False))
    return copy.deepcopy(obj)


def equal(a: Any, b: Any, mode: Optional[str] = None) -> bool:
    """
    Compare two values for equality. In CLONE_JSON mode the JSON
    encodings are compared, so maps with the same entries in a different
    insertion order are *not* equal.
    """
    if CLONE_JSON == resolve_mode(mode):
        return (json.dumps(_jsonsafe(a), allow_nan=False) ==
                json.dumps(_jsonsafe(b), allow_nan=False))
    return a == b


def _isblank(val: Any) -> bool:
    "Scalar with no content, which a nested map may replace."
    if val is UNDEF or val is False:
        return True
    if isinstance(val, (int, float)) and not isinstance(val, bool):
        return 0 == val
    return isinstance(val, str) and '' == val


def merge(target: Any, *sources: Any) -> Any:
    """
    Deep merge one or more maps into the target map, left to right.
    Nested maps merge key by key; lists and scalars replace. Sources (or
    a target) that are not maps are skipped. The target is modified and
    returned.
    """
    for source in sources:
        if not (is_(target) and is_(source)):
            continue

        for key, val in source.items():
            if is_(val):
                if _isblank(target.get(key)):
                    target[key] = {}
                merge(target[key], val)
            else:
                target[key] = val

    return target


def options(defaults: Optional[Dict[str, Any]] = None,
            config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    "Build an options map from default values and config. Neither input is modified."
    return merge({}, defaults or {}, config or {})


def _splitpath(path: Any) -> List[Any]:
    if isinstance(path, str):
        return path.split(S_DT)
    if isinstance(path, (list, tuple)):
        return list(path)
    raise TypeError(f'Path must be a string or a list of keys, not: {type(path).__name__}')


def _listindex(node: List[Any], key: Any) -> Optional[int]:
    if isinstance(key, bool):
        return UNDEF
    if isinstance(key, int):
        index = key
    elif isinstance(key, str) and key.lstrip('-').isdigit():
        index = int(key)
    else:
        return UNDEF
    if index < 0:
        index = len(node) + index
    return index if 0 <= index < len(node) else UNDEF


def _child(node: Any, key: Any, alt: Any = UNDEF) -> Any:
    "Child of a map or list by key, or alt if there is none."
    if is_(node):
        return node.get(key, alt)
    if isinstance(node, list):
        index = _listindex(node, key)
        return alt if index is UNDEF else node[index]
    return alt


def by_path(obj: Any, path: Any, value: Any = _MISSING) -> Any:
    """
    Get or set a value by key path.

    The path is a dot separated string ('a.b.c') or a list of keys. List
    nodes are indexed by integer keys (or digit strings).

    Get (no value): return the value at the path, or UNDEF if any part
    of the path is missing. Missing parts never raise.

    Set (value given, including None): empty maps are created for
    missing intermediate keys, the value is assigned, and the *value* is
    returned (not obj). A scalar in the middle of the path raises
    TypeError.
    """
    parts = _splitpath(path)

    if _MISSING is value:
        node = obj
        for pI, part in enumerate(parts):
            node = _child(node, part, _MISSING)
            if _MISSING is node:
                logger.debug('by_path: no %r at %r', part, S_DT.join(map(str, parts[:pI + 1])))
                return UNDEF
        return node

    # An empty path addresses obj itself, which cannot be replaced.
    if 0 == len(parts):
        return obj

    node = obj
    for pI, part in enumerate(parts[:-1]):
        child = _child(node, part, _MISSING)
        if _MISSING is child or child is UNDEF:
            if not is_(node):
                raise TypeError(
                    f'Cannot create {part!r} at {S_DT.join(map(str, parts[:pI]))!r}: '
                    f'parent is a {type(node).__name__}')
            child = node[part] = {}
        elif not isinstance(child, (dict, list)):
            raise TypeError(
                f'Cannot descend into {S_DT.join(map(str, parts[:pI + 1]))!r}: '
                f'value is a {type(child).__name__}')
        node = child

    key = parts[-1]
    if isinstance(node, list):
        index = _listindex(node, key)
        if index is UNDEF:
            raise TypeError(f'Invalid list index: {key!r}')
        node[index] = value
    elif is_(node):
        node[key] = value
    else:
        raise TypeError(f'Cannot set {key!r} on a {type(node).__name__}')

    return value


__all__ = [
    'by_path',
    'clone',
    'equal',
    'is_',
    'merge',
    'options',
]
