"""
Ready made zippers for trees built out of plain python values.
"""
from collections.abc import Mapping

from .zipper import isa, zipper

is_sequence = isa((list, tuple))


def list_zipper(root):
    """
    Zipper over nested lists (and tuples). Every sequence is a branch and
    rebuilt nodes are always lists.

    >>> list_zipper([1, [2, 3]]).down().right().append_child(4).root()
    [1, [2, 3, 4]]
    """
    return zipper(root, is_sequence, tuple, _make_list)


def _make_list(node, children):
    return list(children)


def dict_zipper(root):
    """
    Zipper over nested mappings.

    The root is the mapping itself, every other node is a (key, value)
    pair. A pair is a branch when its value is a mapping.

    >>> loc = dict_zipper({'a': 1, 'b': {'c': 2}})
    >>> loc.down().right().node()
    ('b', {'c': 2})
    >>> loc.down().right().down().replace(('c', 3)).root()
    {'a': 1, 'b': {'c': 3}}
    """
    return zipper(root, _is_mapping_node, _mapping_children, _make_mapping)


def _is_mapping_node(node):
    if isinstance(node, Mapping):
        return True
    return isinstance(node, tuple) and isinstance(node[1], Mapping)


def _mapping_children(node):
    if isinstance(node, Mapping):
        return tuple(node.items())
    return tuple(node[1].items())


def _make_mapping(node, children):
    if isinstance(node, Mapping):
        return dict(children)
    # a leaf pair becomes a branch holding the new children under its key
    key = node[0]
    return key, dict(children)
