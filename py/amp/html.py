# Copyright (c) 2025 Old River Creative. MIT LICENSE.
#
# HTML utilities
# - matches: does an element match a CSS selector?
# - closest: nearest ancestor matching a CSS selector.
#
# There is no DOM here. Elements are reached through a DomAdapter, which
# knows how to find the parent of an element and how to test an element
# against a selector. AttrAdapter handles elements that carry these as
# attributes and methods (browser-like or tree-like objects).


from typing import *
import logging


logger = logging.getLogger(__name__)

# The standard undefined value for this language.
UNDEF = None

# Attributes holding the parent element, in order of preference.
PARENT_ATTRS = (
    'parentElement',
    'parent_element',
    'parent',
)

# Selector test methods, in order of preference.
MATCH_METHODS = (
    'matches',
    'matchesSelector',
    'msMatchesSelector',
    'mozMatchesSelector',
    'webkitMatchesSelector',
    'oMatchesSelector',
    'matches_selector',
)


@runtime_checkable
class DomAdapter(Protocol):
    "Capability to walk up an element tree and test elements against selectors."

    def parent_of(self, element: Any) -> Any:
        ...

    def matches_selector(self, element: Any, selector: str) -> bool:
        ...


class AttrAdapter:
    "DomAdapter for elements exposing a parent attribute and a match method."

    def parent_of(self, element: Any) -> Any:
        for attr in PARENT_ATTRS:
            if hasattr(element, attr):
                return getattr(element, attr)
        return UNDEF

    def matches_selector(self, element: Any, selector: str) -> bool:
        for name in MATCH_METHODS:
            method = getattr(element, name, UNDEF)
            if callable(method):
                return bool(method(selector))
        raise TypeError(f'Element cannot match selectors: {type(element).__name__}')


DEFAULT_ADAPTER = AttrAdapter()


def matches(el: Any, selector: str, adapter: Optional[DomAdapter] = None) -> bool:
    "Does this element match the CSS selector?"
    adapter = adapter or DEFAULT_ADAPTER
    return adapter.matches_selector(el, selector)


def closest(start: Any, selector: str, adapter: Optional[DomAdapter] = None) -> Any:
    """
    Closest ancestor of start matching the CSS selector, or None if the
    root is reached. The start element itself is not tested.
    """
    adapter = adapter or DEFAULT_ADAPTER
    el = start
    while el is not UNDEF:
        parent = adapter.parent_of(el)
        if parent is not UNDEF and matches(parent, selector, adapter):
            return parent
        el = parent
    logger.debug('closest: no ancestor matches %r', selector)
    return UNDEF


__all__ = [
    'AttrAdapter',
    'DomAdapter',
    'closest',
    'matches',
]
