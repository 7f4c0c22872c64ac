"""
Lazy, memoized, persistent streams.

A stream is either NIL or a Stream cell holding a value and the rest of the
stream. The rest may be given as a zero argument function which is called
the first time it's needed and remembered after that.

>>> s = stream(1, 2, 3)
>>> to_tuple(s)
(1, 2, 3)
>>> to_tuple(reverse(s))
(3, 2, 1)
>>> to_tuple(take(3, map(lambda x: x * 2, from_iterable(naturals()))))
(0, 2, 4)

Thunks other than the ones from_iterable makes should be pure: two threads
racing to force the same cell may both run its thunk, and either result
can end up remembered.
"""

import itertools
import threading


class _Nil(object):
    __slots__ = ()

    def __bool__(self):
        return False

    def __iter__(self):
        return iter(())

    def __repr__(self):
        return 'NIL'


NIL = _Nil()


class Stream(object):
    __slots__ = ('first', '_rest')

    def __init__(self, first, rest):
        self.first = first
        self._rest = rest

    @property
    def rest(self):
        rest = self._rest
        if not is_stream(rest):
            rest = rest()
            self._rest = rest
        return rest

    def __iter__(self):
        s = self
        while s:
            yield s.first
            s = s.rest

    def __repr__(self):
        return '<stream.Stream({!r}, ...) object at {}>'.format(
            self.first, id(self),
        )


class _Delayed(object):
    """
    A stream that isn't known yet. Asking it anything (truth, first, rest)
    forces it.
    """
    __slots__ = ('_thunk', '_stream')

    def __init__(self, thunk):
        self._thunk = thunk
        self._stream = None

    def force(self):
        s = self._stream
        if s is None:
            s = self._thunk()
            while isinstance(s, _Delayed):
                s = s.force()
            self._stream = s
        return s

    def __bool__(self):
        return bool(self.force())

    @property
    def first(self):
        return first(self.force())

    @property
    def rest(self):
        return rest(self.force())

    def __iter__(self):
        return iter(self.force())

    def __repr__(self):
        return '<stream._Delayed object at {}>'.format(id(self))


def is_stream(obj):
    return isinstance(obj, (Stream, _Nil, _Delayed))


def is_empty(s):
    return not s


def first(s):
    if not s:
        raise IndexError('first of empty stream')
    return s.first


def rest(s):
    if not s:
        raise IndexError('rest of empty stream')
    return s.rest


def tail(s):
    """
    The rest of a non-empty stream, without forcing anything that hasn't
    been forced already.
    """
    if isinstance(s, _Delayed):
        s = s.force()
    if not s:
        raise IndexError('tail of empty stream')
    if is_stream(s._rest):
        return s._rest
    return _Delayed(lambda: s.rest)


def cons(item, s):
    return Stream(item, s)


def stream(*items):
    return from_iterable(items)


def from_iterable(iterable):
    """
    Wraps any iterable in a stream. Items are pulled from the underlying
    iterator only as the stream is walked, so generators may be infinite.

    Each cell pulls from the iterator at most once, even when several
    threads walk the stream. Only walkers of this stream wait on each
    other.
    """
    if is_stream(iterable):
        return iterable

    it = iter(iterable)
    lock = threading.Lock()

    def pull():
        for item in it:
            return Stream(item, cell())
        return NIL

    def cell():
        pulled = []

        def force():
            with lock:
                if not pulled:
                    pulled.append(pull())
            return pulled[0]
        return force

    return cell()()


def naturals():
    return itertools.count()


def to_tuple(s):
    return tuple(s)


def to_list(s):
    return list(s)


def count(s):
    n = 0
    while s:
        n += 1
        s = s.rest
    return n


def map(f, s):
    if not s:
        return NIL
    return Stream(f(s.first), lambda: map(f, s.rest))


def take(n, s):
    if n <= 0 or not s:
        return NIL
    if n == 1:
        return Stream(s.first, NIL)
    return Stream(s.first, lambda: take(n - 1, s.rest))


def _concat(s, others):
    while not s:
        if not others:
            return NIL
        s, others = others[0], others[1:]
    if not others:
        # the last piece is shared as is, never wrapped again
        return s
    return Stream(s.first, lambda: _concat(s.rest, others))


def append(*streams):
    """Lazily joins streams end to end."""
    return _concat(NIL, streams)


def reverse(s):
    """Reverses a finite stream. Forces every cell."""
    r = NIL
    for item in s:
        r = Stream(item, r)
    return r
