import itertools
import logging
from collections import namedtuple

import pytest

from treezipper import stream, zipper
from treezipper.zipper import (
    AtRoot, Failure, NoChildren, NoLeftSibling, NoRightSibling, must,
)

Node = namedtuple('Node', ['name', 'children'])


def node(name, *children):
    return Node(name, children)


#         a
#       /   \
#      b     e
#      ^     ^
#     c d   f g
tree = node(
    'a',
    node('b', node('c'), node('d')),
    node('e', node('f'), node('g')),
)


def _children(n):
    return stream.from_iterable(n.children)


def _make_node(n, children):
    return n._replace(children=tuple(children))


def _zipper(root=tree, make_node=_make_node):
    return zipper(_children, make_node, root)


def names(nodes):
    return [n.name for n in nodes]


def test_root_is_focus():
    loc = _zipper()
    assert loc.node() is tree
    assert loc.is_root()
    assert loc.depth() == 0
    assert loc.root() is tree


def test_round_trip_without_edits():
    loc = _zipper().down().right().down().right()
    assert loc.node().name == 'g'
    assert loc.depth() == 2
    assert loc.root() == tree
    assert loc.root() is tree
    assert loc.up().up().node() is tree


def test_down_then_right():
    loc = _zipper().down()
    assert loc.node().name == 'b'
    assert loc.right().node().name == 'e'
    assert loc.right().left().node().name == 'b'
    assert loc.down().right().node().name == 'd'


def test_edit_rebuilds_only_the_path():
    loc = _zipper().down().down().right()
    new = loc.replace(node('D')).root()

    assert new != tree
    assert names(new.children[0].children) == ['c', 'D']
    # untouched subtrees are shared
    assert new.children[1] is tree.children[1]
    assert new.children[0].children[0] is tree.children[0].children[0]


def test_reconstruction_is_deferred():
    calls = []

    def make_node(n, children):
        calls.append(n.name)
        return _make_node(n, children)

    loc = _zipper(make_node=make_node).down().down().right()
    assert loc.up().up().root() is tree
    assert calls == []

    edited = loc.set_focus(node('x'))
    assert calls == []

    edited.up()
    assert calls == ['b']

    del calls[:]
    edited.root()
    assert calls == ['b', 'a']


def test_sibling_order_is_preserved():
    items = stream.stream(*[node(str(i)) for i in range(5)])
    loc = _zipper(root=Node('top', tuple(items))).down().right().right()
    lefts = names(loc.lefts())
    rights = names(loc.rights())
    assert lefts == ['1', '0']
    assert rights == ['3', '4']

    moved = loc.right().left().left().left().right().right()
    assert moved.node() == loc.node()
    assert names(moved.lefts()) == lefts
    assert names(moved.rights()) == rights
    assert names(moved.siblings()) == ['0', '1', '2', '3', '4']


def test_down_on_leaf():
    leaf = _zipper().down().down()
    assert leaf.is_leaf()

    result = leaf.down()
    assert not result
    assert isinstance(result, Failure)
    assert isinstance(result.error, NoChildren)
    assert result.loc is leaf


def test_up_at_root():
    result = _zipper().up()
    assert not result
    assert isinstance(result.error, AtRoot)


def test_left_at_first():
    first = _zipper().down()
    assert first.is_first()
    assert isinstance(first.left().error, NoLeftSibling)


def test_right_at_last():
    last = _zipper().down().right()
    assert last.is_last()
    assert isinstance(last.right().error, NoRightSibling)


def test_left_right_at_root():
    loc = _zipper()
    assert isinstance(loc.left().error, NoLeftSibling)
    assert isinstance(loc.right().error, NoRightSibling)


def test_stay_put_on_failure():
    leaf = _zipper().down().down()
    assert (leaf.down() or leaf) is leaf


def test_must():
    loc = _zipper()
    assert must(loc.down()).node().name == 'b'
    with pytest.raises(AtRoot):
        must(loc.up())


def test_failure_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger='treezipper.zipper'):
        _zipper().up()
    assert 'AtRoot' in caplog.text


def test_infinite_children():
    def children(n):
        if n == 'root':
            return stream.from_iterable(itertools.count())
        return stream.NIL

    loc = zipper(children, None, 'root').down().right().right()
    assert loc.node() == 2
    assert stream.to_tuple(loc.lefts()) == (1, 0)


def test_edit():
    loc = _zipper().down().edit(
        lambda n, suffix: n._replace(name=n.name + suffix), '!',
    )
    assert names(loc.root().children) == ['b!', 'e']


def test_set_lefts_and_rights():
    d = _zipper().down().down().right()
    new = d.set_lefts([node('y'), node('x')]).root()
    assert names(new.children[0].children) == ['x', 'y', 'd']

    c = d.left()
    new = c.set_rights(stream.stream(node('z'))).root()
    assert names(new.children[0].children) == ['c', 'z']


def test_set_siblings_at_top():
    with pytest.raises(IndexError):
        _zipper().set_lefts([])
    with pytest.raises(IndexError):
        _zipper().set_rights([])


def test_insert_siblings():
    c = _zipper().down().down()
    new = c.insert_right(node('x')).insert_left(node('w')).root()
    assert names(new.children[0].children) == ['w', 'c', 'x', 'd']

    with pytest.raises(IndexError):
        _zipper().insert_left(node('x'))


def test_insert_and_append_children():
    e = _zipper().down().right()
    new = e.insert(node('first')).append(node('last')).root()
    assert names(new.children[1].children) == ['first', 'f', 'g', 'last']


def test_leftmost_rightmost():
    c = _zipper().down().down()
    d = c.rightmost()
    assert d.node().name == 'd'
    assert names(d.lefts()) == ['c']
    assert d.leftmost().node().name == 'c'
    assert _zipper().leftmost().node() is tree


def test_descendants():
    loc = _zipper()
    assert loc.leftmost_descendant().node().name == 'c'
    assert loc.rightmost_descendant().node().name == 'g'


def test_preorder():
    assert [l.node().name for l in _zipper().preorder_iter()] == [
        'a', 'b', 'c', 'd', 'e', 'f', 'g',
    ]


def test_postorder():
    assert [l.node().name for l in _zipper().postorder_iter()] == [
        'c', 'd', 'b', 'f', 'g', 'e', 'a',
    ]


def test_find():
    loc = _zipper().find(lambda l: l.node().name == 'f')
    assert loc.node().name == 'f'
    assert loc.depth() == 2
    assert _zipper().find(lambda l: l.node().name == 'nope') is None


def test_ancestor():
    c = _zipper().down().down()
    assert c.ancestor(lambda l: l.node().name == 'a').is_root()
    assert c.ancestor(lambda l: l.node().name == 'nope') is None


def test_move_to():
    f = _zipper().find(lambda l: l.node().name == 'f')
    edited = _zipper().down().edit(lambda n: n._replace(name='B'))
    moved = edited.move_to(f)
    assert moved.node().name == 'f'
    assert moved.root().children[0].name == 'B'


def test_remove_with_left_sibling():
    d = _zipper().down().down().right()
    prev = d.remove()
    assert prev.node().name == 'c'
    assert names(prev.root().children[0].children) == ['c']


def test_remove_first_child():
    c = _zipper().down().down()
    prev = c.remove()
    assert prev.node().name == 'b'
    assert names(prev.node().children) == ['d']
    assert names(prev.root().children) == ['b', 'e']


def test_remove_subtree():
    e = _zipper().down().right()
    prev = e.remove()
    # the node before e in a depth-first walk
    assert prev.node().name == 'd'
    assert names(prev.root().children) == ['b']


def test_remove_at_top():
    with pytest.raises(IndexError):
        _zipper().remove()
