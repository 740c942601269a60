# Functional idioms for chaining zipper moves.
# Every move returns either a new Loc or a falsy error value, so a chain
# of moves stops at the first error and hands it back to the caller.

from functools import reduce as ft_reduce

from .errors import is_error


def thread(loc, *fns):
    """
    Applies each function to the result of the previous one, starting
    with loc. Stops at the first error and returns it; any other result,
    falsy or not, is passed on.

    >>> from treezipper import list_zipper
    >>> thread(list_zipper([1, [2]]), down, right, down).node()
    2
    >>> thread(list_zipper([1, [2]]), down, down)
    <zipper error: down_from_leaf>
    """
    def apply_(v, f):
        if is_error(v):
            return v
        return f(v)

    return ft_reduce(apply_, fns, loc)


def method(name, *args):
    """
    Returns a function calling loc.<name>(*args).

    >>> from treezipper import list_zipper
    >>> method('replace', 3)(method('down')(list_zipper([1]))).root()
    [3]
    """
    def method_(loc):
        return getattr(loc, name)(*args)
    method_.__name__ = name
    return method_


def compose(*fns):
    """
    Given a list of functions such as f, g, h, that each take a single loc
    return a function that is equivalent of f(g(h(loc))), short circuiting
    on errors.
    """
    ordered = list(reversed(fns))

    def compose_(loc):
        return thread(loc, *ordered)
    return compose_


down = method('down')
up = method('up')
right = method('right')
left = method('left')
rightmost = method('rightmost')
leftmost = method('leftmost')
top = method('top')
next = method('next')
prev = method('prev')
remove = method('remove')
