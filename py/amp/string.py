# Copyright (c) 2025 Old River Creative. MIT LICENSE.
#
# String utilities
# - slug: lowercase, hyphen separated, URL safe version of a string.
# - title_case: capitalise each word.
# - trim_slashes: remove one leading and one trailing slash.


from typing import *
import re


# Word characters are ASCII only, as in a URL slug.
R_SPACES = re.compile(r'\s+')
R_NOT_WORD = re.compile(r'[^A-Za-z0-9_-]+')
R_HYPHENS = re.compile(r'--+')
R_LEAD_HYPHENS = re.compile(r'^-+')
R_TRAIL_HYPHENS = re.compile(r'-+$')
R_WORD = re.compile(r'[A-Za-z0-9_]\S*')
R_EDGE_SLASH = re.compile(r'^/|/\Z')

S_MT = ''
S_HY = '-'


def slug(s: Any = S_MT) -> str:
    "Slugify the given string. The order of the steps matters."
    s = str(s).lower()
    s = R_SPACES.sub(S_HY, s)
    s = R_NOT_WORD.sub(S_MT, s)
    s = R_HYPHENS.sub(S_HY, s)
    s = R_LEAD_HYPHENS.sub(S_MT, s)
    return R_TRAIL_HYPHENS.sub(S_MT, s)


def title_case(s: str) -> str:
    "Transform a string to title case."
    return R_WORD.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), s)


def trim_slashes(path: str = S_MT) -> str:
    "Trim one slash from each end of a path. Inner slashes are kept."
    return R_EDGE_SLASH.sub(S_MT, path)


__all__ = [
    'slug',
    'title_case',
    'trim_slashes',
]
