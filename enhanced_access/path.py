"""
Path model: an immutable sequence of accessors.
"""
from . import base
from .access import Key


def as_op(elem):
    """
    Accessors (any callable) pass through; anything else is a plain key.
    """
    if callable(elem):
        return elem
    return Key(elem)


class Path:
    def __init__(self, ops=()):
        self.ops = tuple(as_op(op) for op in ops)

    def assemble(self):
        return assemble(self.ops)
    def __repr__(self):
        return f'{self.__class__.__name__}({list(self.ops)})'
    def __hash__(self):
        return hash(self.ops)
    def __len__(self):
        return len(self.ops)
    def __iter__(self):
        return iter(self.ops)
    def __eq__(self, other):
        if not isinstance(other, Path):
            return NotImplemented
        return self.ops == other.ops
    def __getitem__(self, idx):
        if isinstance(idx, slice):
            return Path(self.ops[idx])
        return self.ops[idx]
    def __add__(self, other):
        # a bare string would be split into one key per character
        if isinstance(other, (str, bytes)):
            raise TypeError(f'cannot add {other!r} to a Path; parse it first')
        return Path(self.ops + tuple(other))


def assemble(ops):
    """
    Reassemble accessors into a path notation string.
    Only built-in accessors have a notation; custom callables raise TypeError.
    """
    parts = []
    for op in ops:
        if not isinstance(op, base.Accessor):
            raise TypeError(f'{op!r} has no path notation')
        parts.append(op.operator())
    return '.'.join(parts)
