"""
Access modes and sentinels shared by accessors and the path driver.
"""
import enum

# Missing-key marker; distinct from None so "absent" and "present as None" differ.
marker = object()


class Mode(enum.Enum):
    """
    The two traversal modes an accessor is called with.
    """
    GET = 'get'
    GET_AND_UPDATE = 'get_and_update'


GET = Mode.GET
GET_AND_UPDATE = Mode.GET_AND_UPDATE


class MetaPOP(type):
    def __repr__(cls):
        return '<POP>'


class POP(metaclass=MetaPOP):
    """
    Returned by a get-and-update continuation to remove the current entry.
    Use the class itself; it is never instantiated.
    """
    def __new__(cls, *args, **kwargs):
        raise TypeError('POP is a sentinel and cannot be instantiated')
