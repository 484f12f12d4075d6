"""
Main api
"""
import functools

import pyparsing as pp

from . import engine, grammar
from . import path as pth

CACHE_SIZE = 300


class ParseError(ValueError):
    """
    Raised when a path notation string cannot be parsed.
    """


@functools.lru_cache(CACHE_SIZE)
def _parse(notation):
    try:
        results = grammar.template.parse_string(notation, parse_all=True)
    except pp.ParseException as e:
        raise ParseError(f'invalid path {notation!r}: {e}') from None
    return pth.Path(results)


def parse(key):
    """
    Parse path notation
    >>> parse('*.b?')
    Path([*, 'b'?])
    >>> parse('!(d).b')
    Path([!(d), 'b'])
    """
    if isinstance(key, pth.Path):
        return key
    return _parse(key)


def to_path(key):
    """
    Normalize `key` to a Path: notation strings are parsed, lists and tuples
    are taken element-wise with plain elements wrapped as keys.
    >>> to_path(['a', 'b'])
    Path(['a', 'b'])
    """
    if isinstance(key, (str, pth.Path)):
        return parse(key)
    return pth.Path(key)


def assemble(key):
    """
    Assemble a path back into notation
    >>> assemble(['a', 'has.dot', 7])
    "a.'has.dot'.7"
    """
    return to_path(key).assemble()


def get_in(obj, key):
    """
    Get the value(s) at `key`. all_keys and skip_keys segments collect a list
    >>> d = {'a': {'b': 1}, 'c': {'b': 2}}
    >>> get_in(d, '*.b')
    [1, 2]
    >>> get_in(d, ['a', 'b'])
    1
    >>> get_in({'a': {'b': 1}, 'c': {'d': 2}}, '*.b?')
    [1, None]
    """
    return engine.gets(to_path(key), obj)


def get_and_update_in(obj, key, fn):
    """
    Call `fn` on each value at `key`; `fn` returns (got, new_value) or POP.
    Returns (got, new_obj); `obj` is left untouched
    >>> get_and_update_in({'a': {'b': 1}, 'c': {'b': 2}}, '*.b', lambda v: (v, v + 1))
    ([1, 2], {'a': {'b': 2}, 'c': {'b': 3}})
    """
    return engine.get_and_updates(to_path(key), obj, fn)


def update_in(obj, key, fn):
    """
    Replace each value at `key` with fn(value)
    >>> update_in([('a', {'b': 1}), ('c', {'b': 2})], '*.b', lambda v: v + 1)
    [('a', {'b': 2}), ('c', {'b': 3})]
    """
    return engine.updates(to_path(key), obj, fn)


def put_in(obj, key, val):
    """
    Set each value at `key` to `val`
    >>> put_in({'a': {'b': 1}, 'c': {'b': 2}}, '!(c).b', 0)
    {'a': {'b': 0}, 'c': {'b': 2}}
    """
    return update_in(obj, key, lambda _: val)


def pop_in(obj, key):
    """
    Remove each value at `key`. Returns (popped, new_obj)
    >>> pop_in({'a': {'b': 1}, 'c': {'b': 2}}, '*.b')
    ([1, 2], {'a': {}, 'c': {}})
    >>> pop_in({'a': {'b': 1}, 'c': {'d': 2}}, '*.b?')
    ([1, None], {'a': {}, 'c': {'d': 2}})
    """
    return engine.pops(to_path(key), obj)
