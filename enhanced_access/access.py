"""
Accessors: Key, AllKeys, SkipKeys, OptionalKey.

Each accessor is called as ``accessor(mode, data, next)`` where ``next`` is
the continuation for the rest of the path:

  get             next(value) returns what to collect
  get_and_update  next(value) returns (got, new_value) or POP
"""
import re

from . import base, containers
from .utils import is_container
from .utypes import POP, marker


# ---- quoting utilities ----

_RESERVED = frozenset('.*!?(),\'"')
_INTEGER_RE = re.compile(r'-?[0-9]+$')


def _needs_quoting(s):
    """
    Return True if a string key must be quoted in path notation.
    """
    if not s:
        return True
    # would otherwise read back as an int
    if _INTEGER_RE.match(s):
        return True
    return any(c in _RESERVED or c.isspace() for c in s)


def _quote_str(s):
    """
    Wrap a string in single quotes, escaping backslashes and single quotes.
    """
    s = s.replace('\\', '\\\\').replace("'", "\\'")
    return f"'{s}'"


def quote(key):
    """
    Quote a key for use in a path notation string.
    >>> quote('hello')
    'hello'
    >>> quote('has.dot')
    "'has.dot'"
    >>> quote('7')
    "'7'"
    >>> quote(7)
    '7'
    """
    if isinstance(key, bool):
        raise NotImplementedError(f'cannot express {key!r} in path notation')
    if isinstance(key, str):
        return _quote_str(key) if _needs_quoting(key) else key
    if isinstance(key, int):
        return str(key)
    raise NotImplementedError(f'cannot express {key!r} in path notation')


class Key(base.Accessor):
    """
    A single key. Absent keys read as None and are inserted on update.
    """
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.key = self.args[0]

    def __repr__(self):
        return repr(self.key)

    def operator(self):
        return quote(self.key)

    def _check(self, data):
        if not is_container(data):
            raise TypeError(
                f"Cannot access key {self.key!r} on {type(data).__name__} - "
                "use a mapping or a list of (key, value) pairs"
            )

    def get(self, data, next):
        if data is None:
            return next(None)
        self._check(data)
        val = containers.lookup(data, self.key)
        return next(None if val is marker else val)

    def get_and_update(self, data, next):
        self._check(data)
        val = containers.lookup(data, self.key)
        val = None if val is marker else val
        result = base.outcome(next(val))
        if result is POP:
            return val, containers.delete(data, self.key)
        got, update = result
        return got, containers.put(data, self.key, update)


class AllKeys(base.Accessor):
    """
    Every entry of a mapping or key-value list; keys are ignored.
    """
    def __repr__(self):
        return '*'

    def operator(self):
        return '*'

    def skips(self, key):
        return False

    def get(self, data, next):
        return [next(v) for k, v in containers.entries(data) if not self.skips(k)]

    def get_and_update(self, data, next):
        gets = []
        updates = []
        for k, v in containers.entries(data):
            if self.skips(k):
                updates.append((k, v))
                continue
            result = base.outcome(next(v))
            if result is POP:
                gets.append(v)
                continue
            got, update = result
            gets.append(got)
            updates.append((k, update))
        return gets, containers.rebuild(data, updates)


class SkipKeys(AllKeys):
    """
    Every entry except those whose key is in the exclusion set; excluded
    entries are carried over untouched and contribute no result.
    """
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.keys = self.args

    def __repr__(self):
        return self.operator()

    def operator(self):
        return '!(' + ','.join(quote(k) for k in self.keys) + ')'

    def skips(self, key):
        return key in self.keys

    def _keyset(self):
        # exclusion is a set: order and repeats don't count
        try:
            return frozenset(self.keys)
        except TypeError:
            return self.keys
    def __hash__(self):
        return hash((self.__class__, self._keyset()))
    def __eq__(self, op):
        return self.__class__ == op.__class__ and self._keyset() == op._keyset()


class OptionalKey(base.Accessor):
    """
    A single key that may be missing. An absent or None value ends the
    path with None instead of calling the continuation.
    """
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.key = self.args[0]

    def __repr__(self):
        return repr(self.key) + '?'

    def operator(self):
        return quote(self.key) + '?'

    def _value(self, data):
        if not is_container(data):
            return None
        val = containers.lookup(data, self.key)
        return None if val is marker else val

    def get(self, data, next):
        val = self._value(data)
        if val is None:
            return None
        return next(val)

    def get_and_update(self, data, next):
        val = self._value(data)
        if val is None:
            return None, data
        result = base.outcome(next(val))
        if result is POP:
            return val, containers.delete(data, self.key)
        got, update = result
        return got, containers.put(data, self.key, update)


def key(k):
    """
    Accessor for the single key `k`
    >>> from enhanced_access import get_in
    >>> get_in({'a': {'b': 1}}, [key('a'), key('b')])
    1
    """
    return Key(k)


def all_keys():
    """
    Accessor for every value of a mapping or key-value list
    >>> from enhanced_access import get_in
    >>> get_in({'a': {'b': 1}, 'c': {'b': 2}}, [all_keys(), 'b'])
    [1, 2]
    >>> get_in([('a', {'b': 1}), ('c', {'b': 2})], [all_keys()])
    [{'b': 1}, {'b': 2}]
    """
    return AllKeys()


def skip_keys(keys):
    """
    Accessor for every value except those under `keys`
    >>> from enhanced_access import get_in, update_in
    >>> d = {'a': {'b': 1}, 'c': {'b': 2}, 'd': {'b': 3}}
    >>> get_in(d, [skip_keys(['d']), 'b'])
    [1, 2]
    >>> update_in(d, [skip_keys(['d']), 'b'], lambda v: v + 1)
    {'a': {'b': 2}, 'c': {'b': 3}, 'd': {'b': 3}}
    """
    if isinstance(keys, (str, bytes)):
        raise TypeError(f'skip_keys expects a collection of keys, got {keys!r}')
    return SkipKeys(*keys)


def optional_key(k):
    """
    Accessor for a key that may be absent
    >>> from enhanced_access import get_in
    >>> get_in({'a': {'b': 1}, 'c': 1}, [all_keys(), optional_key('b')])
    [1, None]
    """
    return OptionalKey(k)
