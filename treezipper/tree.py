"""
Zippers over trees whose children are picked out by key.

Three hooks describe the tree:

  child_keys(node) -> the keys of the children node has, in order
  get_child(node, key) -> the child stored under key
  make_node(node, children) -> a copy of node whose children are the
      key -> child dict given

Keys can differ from node to node, a binary node with only a left child
would report ['left']. Positional trees just use indexes as keys.

>>> loc = dict_zipper({'a': {'b': 1, 'c': 2}})
>>> loc.down_to('a').down_to('c').replace(3).root()
{'a': {'b': 1, 'c': 3}}
"""

import copy
import operator
from collections import namedtuple
from functools import partial

from . import stream
from .fn import curry
from .zipper import Loc, NoSuchChild, fail

Pair = namedtuple('Pair', ['key', 'value'])


@curry
def _pair(get_child, node, key):
    return Pair(key, get_child(node, key))


def tree_zipper(child_keys, get_child, make_node, root):

    def children(pair):
        node = pair.value
        keys = stream.from_iterable(child_keys(node))
        return stream.map(_pair(get_child, node), keys)

    def construct(pair, children):
        by_key = dict((c.key, c.value) for c in children)
        return pair._replace(value=make_node(pair.value, by_key))

    return TreeLoc(Pair(None, root), None, children, construct)


class TreeLoc(Loc):
    """
    A Loc whose focus is a (key, value) Pair. node() and replace() deal in
    values so callers rarely see the pairs; lefts(), rights() and
    children() still hold pairs.
    """

    def __repr__(self):
        return '<tree.TreeLoc({!r}: {!r}) object at {}>'.format(
            self.current.key, self.current.value, id(self),
        )

    def node(self):
        return self.current.value

    def key(self):
        """The key this node sits under in its parent, None at the top."""
        return self.current.key

    def keys(self):
        return [c.key for c in self.children()]

    def down_to(self, key):
        loc = self.down()
        while loc:
            if loc.key() == key:
                return loc
            loc = loc.right()
        return fail(NoSuchChild(key), self)

    def replace(self, value):
        return self._with_current(self.current._replace(value=value))

    set_focus = replace

    def insert_left(self, key, value):
        return Loc.insert_left(self, Pair(key, value))

    def insert_right(self, key, value):
        return Loc.insert_right(self, Pair(key, value))

    def insert(self, key, value):
        return Loc.insert(self, Pair(key, value))

    def append(self, key, value):
        return Loc.append(self, Pair(key, value))


def _dict_keys(node):
    if isinstance(node, dict):
        return tuple(node)
    return ()


def _dict_construct(node, children):
    # a copy keeps the mapping type and any default_factory
    new = copy.copy(node)
    new.clear()
    new.update(children)
    return new


dict_zipper = partial(
    tree_zipper, _dict_keys, operator.getitem, _dict_construct,
)
