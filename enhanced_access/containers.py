"""
Ordered-entries view over the two container kinds.

Mappings and ordered key-value lists are both handled as a sequence of
(key, value) entries, so accessors are written once against these helpers:

  entries  — the container's entries in iteration order
  rebuild  — a new container of the same kind from entries
  lookup   — first value bound to a key, or marker
  put      — a copy with a key bound to a value
  delete   — a copy without a key

None of these mutate their input.
"""
import copy

from .utils import is_dict_like, is_keyword_like
from .utypes import marker


def _describe(node):
    return type(node).__name__


def entries(node):
    """
    Return the (key, value) entries of node as a list.
    >>> entries({'a': 1, 'b': 2})
    [('a', 1), ('b', 2)]
    >>> entries([('a', 1), ('a', 2)])
    [('a', 1), ('a', 2)]
    """
    if is_dict_like(node):
        if hasattr(node, 'items') and callable(node.items):
            return list(node.items())
        return [(k, node[k]) for k in node.keys()]
    if is_keyword_like(node):
        return list(node)
    raise TypeError(
        f"Cannot traverse {_describe(node)} - "
        "use a mapping or a list of (key, value) pairs"
    )


def _empty_like(node):
    """
    Return an empty mapping of node's concrete type, or None when the type
    can't be copied and cleared (read-only mappings) or stays non-empty
    after clear() (a ChainMap keeps its parent maps).
    """
    try:
        built = copy.copy(node)
        built.clear()
    except (AttributeError, TypeError):
        return None
    if len(built):
        return None
    return built


def rebuild(node, items):
    """
    Build a container of the same kind as node holding items, in order.
    Key-value lists keep duplicate keys; mappings keep the last binding.
    >>> rebuild({'x': 0}, [('a', 1)])
    {'a': 1}
    >>> rebuild((), [('a', 1), ('a', 2)])
    (('a', 1), ('a', 2))
    """
    if not is_dict_like(node):
        return type(node)(items)
    built = _empty_like(node)
    if built is None:
        return type(node)(dict(items))
    for k, v in items:
        built[k] = v
    return built


def lookup(node, key):
    """
    Return the value bound to key in node, or marker if key is absent.
    Key-value lists answer with their first matching entry.
    """
    if is_dict_like(node):
        # membership first: subscripting a defaultdict would insert the key
        if key not in node:
            return marker
        return node[key]
    for k, v in node:
        if k == key:
            return v
    return marker


def put(node, key, val):
    """
    Return a copy of node with key bound to val.
    On key-value lists the first matching entry is replaced in place and
    later duplicates are dropped; an absent key is appended.
    """
    if is_dict_like(node):
        built = _empty_like(node)
        if built is None:
            return type(node)(dict(_put_items(entries(node), key, val)))
        built.update(node)
        built[key] = val
        return built
    return type(node)(_put_items(node, key, val))


def _put_items(items, key, val):
    found = False
    out = []
    for k, v in items:
        if k != key:
            out.append((k, v))
        elif not found:
            out.append((k, val))
            found = True
    if not found:
        out.append((key, val))
    return out


def delete(node, key):
    """
    Return a copy of node without key (every matching entry for key-value lists).
    """
    return rebuild(node, ((k, v) for k, v in entries(node) if k != key))
