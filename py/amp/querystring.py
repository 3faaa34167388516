# Copyright (c) 2025 Old River Creative. MIT LICENSE.
#
# Query string utilities
# - get: parse a query string for a parameter value.
# - set: update (or append) a parameter value in a query string.
#
# The uri is treated as text; it is not parsed into parts. Values are
# decoded by get, but set does *not* encode them.
#
# The names parse and update are deprecated aliases of get and set.


from typing import *
import logging
import re
import urllib.parse
import warnings


logger = logging.getLogger(__name__)

S_QM = '?'
S_AMP = '&'


def get(uri: str, key: str) -> Optional[str]:
    """
    Value of the key parameter in the query string of uri. None if the
    key is absent, '' if it has no value. '+' decodes to a space.
    """
    regex = re.compile(r'[?&]' + re.escape(key) + r'(=([^&#]*)|&|#|$)')
    results = regex.search(uri)
    if results is None:
        return None
    if not results.group(2):
        return ''
    return urllib.parse.unquote(results.group(2).replace('+', ' '))


def set(uri: str, key: str, value: Any) -> str:
    """
    Update the key parameter in the query string of uri, or append it
    if missing. The value is used as given.
    """
    assignment = f'{key}={value}'
    regex = re.compile(r'([?&])' + re.escape(key) + r'=.*?(&|$)', re.IGNORECASE)
    if regex.search(uri):
        return regex.sub(lambda m: m.group(1) + assignment + m.group(2), uri, count=1)
    separator = S_AMP if S_QM in uri else S_QM
    return f'{uri}{separator}{assignment}'


def parse(name: str, url: str) -> Optional[str]:
    "Deprecated: use get(url, name)."
    warnings.warn('querystring.parse is deprecated, use querystring.get',
                  DeprecationWarning, stacklevel=2)
    logger.debug('deprecated alias: parse')
    return get(url, name)


def update(uri: str, key: str, value: Any) -> str:
    "Deprecated: use set(uri, key, value)."
    warnings.warn('querystring.update is deprecated, use querystring.set',
                  DeprecationWarning, stacklevel=2)
    logger.debug('deprecated alias: update')
    return set(uri, key, value)


__all__ = [
    'get',
    'parse',
    'set',
    'update',
]
