"""
Base classes for accessors.

An accessor is any callable ``accessor(mode, data, next)``. The classes here
give the built-in accessors value semantics (equality and hashing by their
configuration) and dispatch the two modes to ``get``/``get_and_update``.
"""
import pyparsing as pp

from .utypes import Mode, POP


class Op:
    def __init__(self, *args, **kwargs):
        # Called either directly or as a pyparsing parse action (s, loc, toks)
        if len(args) == 3 and isinstance(args[2], pp.ParseResults):
            self.args = tuple(args[2].as_list())
            self.parsed = args
        else:
            self.args = tuple(args)
            self.parsed = kwargs.get('parsed', ())
    def __repr__(self):
        return f'{self.__class__.__name__}:{self.args}'
    def __hash__(self):
        return hash((self.__class__, self.args))
    def __eq__(self, op):
        return self.__class__ == op.__class__ and self.args == op.args


def outcome(result):
    """
    Validate what a get-and-update continuation returned: POP or a
    (got, new) pair.
    """
    if result is POP:
        return result
    if isinstance(result, tuple) and len(result) == 2:
        return result
    raise ValueError(
        f'the given function must return a two-element tuple or POP, got: {result!r}'
    )


class Accessor(Op):
    """
    Base for the built-in accessors. Subclasses implement get(data, next)
    and get_and_update(data, next), plus operator() for path notation.
    """
    def __call__(self, mode, data, next):
        mode = Mode(mode)
        if mode is Mode.GET:
            return self.get(data, next)
        return self.get_and_update(data, next)

    def get(self, data, next):
        raise NotImplementedError

    def get_and_update(self, data, next):
        raise NotImplementedError

    def operator(self):
        raise NotImplementedError
