"""
Composable accessors for nested mappings and key-value lists.

    >>> import enhanced_access as ea
    >>> d = {'a': {'b': 1}, 'c': {'b': 2}, 'd': {'b': 3}}
    >>> ea.get_in(d, [ea.skip_keys(['d']), 'b'])
    [1, 2]
    >>> ea.update_in(d, '*.b', lambda v: v * 10)
    {'a': {'b': 10}, 'c': {'b': 20}, 'd': {'b': 30}}
"""
from .access import key, all_keys, skip_keys, optional_key, quote
from .access import Key, AllKeys, SkipKeys, OptionalKey
from .api import (
    ParseError, parse, to_path, assemble,
    get_in, get_and_update_in, update_in, put_in, pop_in,
)
from .base import Accessor
from .path import Path
from .utypes import Mode, GET, GET_AND_UPDATE, POP

__all__ = [
    'key', 'all_keys', 'skip_keys', 'optional_key', 'quote',
    'Key', 'AllKeys', 'SkipKeys', 'OptionalKey',
    'ParseError', 'parse', 'to_path', 'assemble',
    'get_in', 'get_and_update_in', 'update_in', 'put_in', 'pop_in',
    'Accessor', 'Path', 'Mode', 'GET', 'GET_AND_UPDATE', 'POP',
]
