"""
Zippers over sequences.

The sequence itself is the node and its items are the children, so
``down()`` enters the sequence and ``left()``/``right()`` walk it. Items
that are themselves sequences of the same kind are branches.

>>> loc = array_zipper(['a', 'b', 'c'])
>>> loc.down().right().right().replace('z').root()
['a', 'b', 'z']
"""

from functools import partial

from . import stream
from .zipper import Path, zipper


def _children(s):
    return s if stream.is_stream(s) else stream.NIL


def _construct(_, children):
    return children


list_zipper = partial(zipper, _children, _construct)


def list_zipper_in(lefts, focus, rights):
    """
    Returns a list zipper already positioned on focus, with lefts (nearest
    first) and rights as its siblings. This is the inverse of reading
    lefts(), node() and rights() off an existing list zipper; root() gives
    back the whole stream.
    """
    lefts = stream.from_iterable(lefts)
    rights = stream.from_iterable(rights)
    whole = stream.append(stream.reverse(lefts), stream.cons(focus, rights))

    loc = list_zipper(whole)
    return loc._replace(current=focus, path=Path(
        lefts=lefts,
        rights=rights,
        parent=whole,
        ppath=None,
        changed=False,
    ))


_INDEXED = (list, tuple)


def _array_children(a):
    if isinstance(a, _INDEXED):
        return stream.from_iterable(a)
    return stream.NIL


def _array_construct(a, children):
    # keep the caller's container, a list stays a list
    cls = type(a)
    make = getattr(cls, '_make', cls)
    return make(children)


array_zipper = partial(zipper, _array_children, _array_construct)
