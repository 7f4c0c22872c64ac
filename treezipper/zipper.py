"""
A persistent zipper over any branching structure.

see http://en.wikipedia.org/wiki/Zipper_(data_structure)

A zipper is built from two hooks:

  children(node) -> stream of the node's children, NIL for a leaf
  make_node(node, children) -> a copy of node with the given children

Every move returns a new Loc; nothing is ever modified in place. A move that
can't be made returns a Failure, which is falsy, so

    loc = loc.down() or loc

reads "go down if you can, otherwise stay put".
"""

import logging
from collections import namedtuple

from . import stream
from .stream import NIL

log = logging.getLogger(__name__)


class ZipperError(Exception):
    """Base class for the ways a move can fail."""


class NoChildren(ZipperError):
    def __init__(self):
        super(NoChildren, self).__init__('Node has no children')


class NoSuchChild(ZipperError):
    def __init__(self, key):
        self.key = key
        msg = 'Node has no child at {!r}'.format(key)
        super(NoSuchChild, self).__init__(msg)


class NoLeftSibling(ZipperError):
    def __init__(self):
        super(NoLeftSibling, self).__init__('Already at the leftmost sibling')


class NoRightSibling(ZipperError):
    def __init__(self):
        msg = 'Already at the rightmost sibling'
        super(NoRightSibling, self).__init__(msg)


class AtRoot(ZipperError):
    def __init__(self):
        super(AtRoot, self).__init__('Already at the root')


class Failure(namedtuple('Failure', ['error', 'loc'])):
    """
    The result of a move that couldn't be made. `error` says why and `loc`
    is where the move was attempted from.
    """

    def __bool__(self):
        return False

    def __repr__(self):
        return '<zipper.Failure({}) object at {}>'.format(
            type(self.error).__name__, id(self),
        )


def fail(error, loc):
    log.debug('%s from %r: %s', type(error).__name__, loc, error)
    return Failure(error, loc)


def must(result):
    """
    Returns the loc of a successful move and raises the error of a failed
    one.
    """
    if isinstance(result, Failure):
        log.debug('Escalating %r', result)
        raise result.error
    return result


# lefts are nearest first, so the head of lefts is the left sibling
Path = namedtuple('Path', 'lefts, rights, parent, ppath, changed')


def zipper(children, make_node, root):
    return Loc(root, None, children, make_node)


_Loc = namedtuple(
    'Loc',
    ['current', 'path', 'get_children', 'make_node'],
)


class Loc(_Loc):

    def __repr__(self):
        return '<zipper.Loc({!r}) object at {}>'.format(
            self.current, id(self),
        )

    # Context
    def node(self):
        return self.current

    def children(self):
        return self.get_children(self.current)

    def lefts(self):
        return self.path.lefts if self.path else NIL

    def rights(self):
        return self.path.rights if self.path else NIL

    def siblings(self):
        """All nodes at this level in order, including the current one."""
        return stream.append(
            stream.reverse(self.lefts()),
            stream.cons(self.current, self.rights()),
        )

    def depth(self):
        n = 0
        path = self.path
        while path:
            n += 1
            path = path.ppath
        return n

    def is_root(self):
        return self.path is None

    def is_leaf(self):
        return stream.is_empty(self.children())

    def is_first(self):
        return not self.lefts()

    def is_last(self):
        return not self.rights()

    def root(self):
        return self.top().node()

    # Navigation
    def down(self):
        children = self.children()
        if not children:
            return fail(NoChildren(), self)

        path = Path(
            lefts=NIL,
            rights=stream.tail(children),
            parent=self.current,
            ppath=self.path,
            changed=False,
        )
        return self._replace(current=children.first, path=path)

    def up(self):
        if not self.path:
            return fail(AtRoot(), self)

        lefts, rights, parent, ppath, changed = self.path
        if changed:
            children = stream.append(
                stream.reverse(lefts),
                stream.cons(self.current, rights),
            )
            return self._replace(
                current=self.make_node(parent, children),
                path=ppath and ppath._replace(changed=True),
            )
        else:
            return self._replace(current=parent, path=ppath)

    def top(self):
        loc = self
        while loc.path:
            loc = loc.up()
        return loc

    def left(self):
        path = self.path
        if not (path and path.lefts):
            return fail(NoLeftSibling(), self)

        lefts = path.lefts
        return self._replace(current=lefts.first, path=path._replace(
            lefts=stream.tail(lefts),
            rights=stream.cons(self.current, path.rights),
        ))

    def right(self):
        path = self.path
        if not (path and path.rights):
            return fail(NoRightSibling(), self)

        rights = path.rights
        return self._replace(current=rights.first, path=path._replace(
            lefts=stream.cons(self.current, path.lefts),
            rights=stream.tail(rights),
        ))

    def leftmost(self):
        """Returns the left most sibling at this location or self"""
        path = self.path
        if not path:
            return self

        t = self.siblings()
        return self._replace(current=t.first, path=path._replace(
            lefts=NIL,
            rights=stream.tail(t),
        ))

    def rightmost(self):
        """Returns the right most sibling at this location or self"""
        path = self.path
        if not path:
            return self

        t = stream.reverse(stream.cons(self.current, path.rights))
        return self._replace(current=t.first, path=path._replace(
            lefts=stream.append(t.rest, path.lefts),
            rights=NIL,
        ))

    def leftmost_descendant(self):
        loc = self
        while True:
            d = loc.down()
            if not d:
                return loc
            loc = d

    def rightmost_descendant(self):
        loc = self
        while True:
            d = loc.down()
            if not d:
                return loc
            loc = d.rightmost()

    def ancestor(self, filter):
        """
        Walks up from here and returns the first ancestor loc for which
        filter(loc) is true, or None once the top has been passed.
        """
        u = self.up()
        while u:
            if filter(u):
                return u
            u = u.up()

    def move_to(self, dest):
        """
        Replays dest's route from the top (downs and rights) on this
        zipper's tree. Whatever sits at that spot now is returned, which
        need not be dest's node if the tree was edited since. Returns a
        Failure if the spot no longer exists.
        """
        moves = []
        path = dest.path

        while path:
            moves.extend(stream.count(path.lefts) * ['r'])
            moves.append('d')
            path = path.ppath

        moves.reverse()

        loc = self.top()
        for m in moves:
            if m == 'd':
                loc = loc.down()
            else:
                loc = loc.right()
            if not loc:
                return loc

        return loc

    # Enumeration
    def preorder_next(self):
        """
        The next loc of a depth-first, parents-before-children walk, or
        None when the walk is over.

                  a
                /   \\
               b     e
               ^     ^
              c d   f g

        Stepping from a yields b c d e f g.
        """
        n = self.down() or self.right()
        if n:
            return n

        u = self.up()
        while u:
            r = u.right()
            if r:
                return r
            u = u.up()

    def preorder_iter(self):
        loc = self
        while loc:
            yield loc
            loc = loc.preorder_next()

    def postorder_next(self):
        """
        The next loc of a depth-first, children-before-parents walk. For
        the tree drawn in preorder_next the order is c d b f g e a.

        The walk finishes on the root, whose next is an AtRoot Failure.
        postorder_iter starts it from the leftmost leaf.
        """
        r = self.right()
        if r:
            return r.leftmost_descendant()
        else:
            return self.up()

    def postorder_iter(self):
        loc = self.leftmost_descendant()

        while loc:
            yield loc
            loc = loc.postorder_next()

    def find(self, func):
        for loc in self.postorder_iter():
            if func(loc):
                return loc

    # Editing
    def _with_current(self, current):
        if self.path:
            return self._replace(
                current=current,
                path=self.path._replace(changed=True),
            )
        else:
            return self._replace(current=current)

    def replace(self, value):
        return self._with_current(value)

    set_focus = replace

    def edit(self, f, *args):
        """Replace the node at this loc with the value of f(node, *args)"""
        return self.replace(f(self.node(), *args))

    def set_lefts(self, lefts):
        """Replaces the left siblings, given nearest first."""
        path = self.path
        if not path:
            raise IndexError("Can't set siblings at top")

        return self._replace(path=path._replace(
            lefts=stream.from_iterable(lefts),
            changed=True,
        ))

    def set_rights(self, rights):
        path = self.path
        if not path:
            raise IndexError("Can't set siblings at top")

        return self._replace(path=path._replace(
            rights=stream.from_iterable(rights),
            changed=True,
        ))

    def insert_left(self, item):
        """Insert item as left sibling of node without moving"""
        return self.set_lefts(stream.cons(item, self.lefts()))

    def insert_right(self, item):
        """Insert item as right sibling of node without moving"""
        return self.set_rights(stream.cons(item, self.rights()))

    def insert(self, item):
        """
        Inserts the item as the leftmost child of the node at this loc,
        without moving.
        """
        return self._with_current(
            self.make_node(self.current, stream.cons(item, self.children())),
        )

    def append(self, item):
        """
        Inserts the item as the rightmost child of the node at this loc,
        without moving.
        """
        children = stream.append(self.children(), stream.stream(item))
        return self._with_current(self.make_node(self.current, children))

    def remove(self):
        """
        Drops the focused node and returns the loc a depth-first walk would
        have visited just before it: the deepest rightmost descendant of
        the left sibling, or the rebuilt parent when there is no left
        sibling.
        """
        path = self.path
        if not path:
            raise IndexError('Remove at top')

        lefts, rights, parent, ppath, changed = path

        if lefts:
            return self._replace(current=lefts.first, path=path._replace(
                lefts=stream.tail(lefts),
                changed=True,
            )).rightmost_descendant()

        else:
            return self._replace(
                current=self.make_node(parent, rights),
                path=ppath and ppath._replace(changed=True),
            )


del _Loc
