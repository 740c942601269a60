from ._lib import errors, fn
from ._lib.errors import ZipperError, is_error
from ._lib.trees import dict_zipper, list_zipper
from ._lib.zipper import END, Capabilities, Loc, Path, isa, zipper

__all__ = [
    'Capabilities',
    'END',
    'Loc',
    'Path',
    'ZipperError',
    'dict_zipper',
    'errors',
    'fn',
    'is_error',
    'isa',
    'list_zipper',
    'zipper',
]
