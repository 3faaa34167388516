# amp init

import logging

from . import array
from . import config
from . import html
from . import object
from . import querystring
from . import sort
from . import string

from .object import options


logging.getLogger(__name__).addHandler(logging.NullHandler())


class AmpUtility:
    "All the utility groups, as attributes of one object."
    def __init__(self):
        self.array = array
        self.config = config
        self.html = html
        self.object = object
        self.options = options
        self.querystring = querystring
        self.sort = sort
        self.string = string


__all__ = [
    'AmpUtility',
    'array',
    'config',
    'html',
    'object',
    'options',
    'querystring',
    'sort',
    'string',
]
