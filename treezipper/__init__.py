import logging

from . import stream
from .list import array_zipper, list_zipper, list_zipper_in
from .tree import TreeLoc, dict_zipper, tree_zipper
from .zipper import (
    AtRoot, Failure, Loc, NoChildren, NoLeftSibling, NoRightSibling,
    NoSuchChild, ZipperError, must, zipper,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'AtRoot', 'Failure', 'Loc', 'NoChildren', 'NoLeftSibling',
    'NoRightSibling', 'NoSuchChild', 'TreeLoc', 'ZipperError',
    'array_zipper', 'dict_zipper', 'list_zipper', 'list_zipper_in', 'must',
    'stream', 'tree_zipper', 'zipper',
]
