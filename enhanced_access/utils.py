"""
Shared type-checking helpers (duck-typing).
"""


def is_dict_like(node):
    """
    True if node is dict-like: has .keys() and __getitem__.
    """
    return (
        hasattr(node, 'keys') and callable(node.keys)
        and hasattr(node, '__getitem__')
    )


def is_pair(item):
    return isinstance(item, tuple) and len(item) == 2


def is_keyword_like(node):
    """
    True if node is an ordered key-value list: a list or tuple whose
    every element is a (key, value) 2-tuple. Empty lists qualify.
    """
    return isinstance(node, (list, tuple)) and all(is_pair(item) for item in node)


def is_container(node):
    """
    True if node is one of the two traversable shapes.
    """
    return is_dict_like(node) or is_keyword_like(node)
