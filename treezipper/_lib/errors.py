"""
values returned in place of a Loc when a move or edit is undefined
"""
from collections import namedtuple


class ZipperError(namedtuple('ZipperError', ['kind'])):
    """
    The result of an operation that can't be performed at the current
    location.

    Errors are always falsy so that moves can be chained the same way
    optional results are:

    >>> bool(DOWN_FROM_LEAF)
    False
    >>> DOWN_FROM_LEAF or 'fallback'
    'fallback'
    """

    def __bool__(self):
        return False

    def __repr__(self):
        return '<zipper error: {}>'.format(self.kind)


def is_error(value):
    return isinstance(value, ZipperError)


DOWN_FROM_LEAF = ZipperError('down_from_leaf')
DOWN_FROM_EMPTY_BRANCH = ZipperError('down_from_empty_branch')
UP_FROM_ROOT = ZipperError('up_from_root')
RIGHT_FROM_ROOT = ZipperError('right_from_root')
RIGHT_FROM_RIGHTMOST = ZipperError('right_from_rightmost')
LEFT_FROM_ROOT = ZipperError('left_from_root')
LEFT_FROM_LEFTMOST = ZipperError('left_from_leftmost')
RIGHTMOST_FROM_ROOT = ZipperError('rightmost_from_root')
LEFTMOST_FROM_ROOT = ZipperError('leftmost_from_root')
LEFTS_OF_ROOT = ZipperError('lefts_of_root')
RIGHTS_OF_ROOT = ZipperError('rights_of_root')
CHILDREN_OF_LEAF = ZipperError('children_of_leaf')
INSERT_LEFT_OF_ROOT = ZipperError('insert_left_of_root')
INSERT_RIGHT_OF_ROOT = ZipperError('insert_right_of_root')
INSERT_CHILD_OF_LEAF = ZipperError('insert_child_of_leaf')
APPEND_CHILD_OF_LEAF = ZipperError('append_child_of_leaf')
REMOVE_ROOT = ZipperError('remove_root')
PREVIOUS_OF_END = ZipperError('previous_of_end')
