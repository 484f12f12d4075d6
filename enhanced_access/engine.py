"""
Path driver: chains accessors, handing each one a continuation for the
rest of the path (gets, get_and_updates, updates, pops).
"""
from .base import outcome
from .utypes import GET, GET_AND_UPDATE, POP


def gets(ops, node):
    """
    Read through ops. An empty path reads the node itself.
    """
    if not ops:
        return node
    cur, *ops = ops
    return cur(GET, node, lambda v: gets(ops, v))


def get_and_updates(ops, node, fn):
    """
    Read-and-update through ops, calling fn at the leaf. Returns (got, new_node).
    """
    if not ops:
        result = outcome(fn(node))
        if result is POP:
            return node, None
        return result
    cur, *ops = ops
    if not ops:
        return cur(GET_AND_UPDATE, node, fn)
    return cur(GET_AND_UPDATE, node, lambda v: get_and_updates(ops, v, fn))


def updates(ops, node, fn):
    _, node = get_and_updates(ops, node, lambda v: (None, fn(v)))
    return node


def _pop(ops, node):
    # a missing intermediate value removes its parent entry
    if node is None:
        return POP
    cur, *ops = ops
    if not ops:
        return cur(GET_AND_UPDATE, node, lambda _: POP)
    return cur(GET_AND_UPDATE, node, lambda v: _pop(ops, v))


def pops(ops, node):
    """
    Remove every leaf ops reaches. Returns (popped, new_node).
    """
    if node is None:
        return None, None
    if not ops:
        return node, None
    return _pop(ops, node)
