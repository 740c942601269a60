from collections import namedtuple

from . import errors

Capabilities = namedtuple('Capabilities', ['is_branch', 'children', 'make_node'])

Path = namedtuple('Path', 'l, r, pnode, ppath')


class _End(object):
    """Path of a location whose depth-first walk has been exhausted."""

    def __bool__(self):
        return False

    def __repr__(self):
        return 'END'


END = _End()


def zipper(root, is_branch, children, make_node):
    """
    Returns a location focused on root.

    is_branch(node) tells whether a node may have children, children(node)
    returns them in order and make_node(node, children) builds a new node
    like node holding children (always passed as a tuple).

    >>> loc = zipper([1, [2, 3]], isa(list), tuple, lambda n, ch: list(ch))
    >>> loc.down().right().down().replace(20).root()
    [1, [20, 3]]
    """
    return Loc(root, None, Capabilities(is_branch, children, make_node))


def isa(type):
    """
    Returns a predicate, named is_<type>, telling whether its argument
    is an instance of type (or of one of a tuple of types).
    """
    def f(obj):
        return isinstance(obj, type)

    f.__name__ = 'is_{0}'.format(getattr(type, '__name__', 'instance'))
    return f


_Loc = namedtuple('Loc', ['current', 'path', 'caps'])


class Loc(_Loc):

    def __repr__(self):
        return '<treezipper.Loc({!r}) object at {}>'.format(
            self.current, id(self),
        )

    # Context

    def node(self):
        return self.current

    def branch(self):
        return self.caps.is_branch(self.current)

    def children(self):
        if not self.branch():
            return errors.CHILDREN_OF_LEAF
        return self.caps.children(self.current)

    def make_node(self, node, children):
        return self.caps.make_node(node, tuple(children))

    def root(self):
        return self.top().current

    def ancestor_path(self):
        """The nodes from the root down to the parent of the focus."""
        nodes = []
        path = self.path or None
        while path:
            nodes.append(path.pnode)
            path = path.ppath
        nodes.reverse()
        return nodes

    def lefts(self):
        if not self.path:
            return errors.LEFTS_OF_ROOT
        return list(reversed(self.path.l))

    def rights(self):
        if not self.path:
            return errors.RIGHTS_OF_ROOT
        return list(self.path.r)

    # Navigation

    def down(self):
        if not self.branch():
            return errors.DOWN_FROM_LEAF

        children = tuple(self.caps.children(self.current))
        if not children:
            return errors.DOWN_FROM_EMPTY_BRANCH

        path = Path(
            l=(), r=children[1:], pnode=self.current, ppath=self.path or None,
        )
        return self._replace(current=children[0], path=path)

    def up(self):
        if not self.path:
            return errors.UP_FROM_ROOT

        l, r, pnode, ppath = self.path
        children = tuple(reversed(l)) + (self.current,) + r
        return self._replace(
            current=self.make_node(pnode, children),
            path=ppath,
        )

    def top(self):
        loc = self
        while loc.path:
            loc = loc.up()
        return loc

    def right(self):
        path = self.path
        if not path:
            return errors.RIGHT_FROM_ROOT
        if not path.r:
            return errors.RIGHT_FROM_RIGHTMOST

        current, rnext = path.r[0], path.r[1:]
        return self._replace(current=current, path=path._replace(
            l=(self.current,) + path.l,
            r=rnext,
        ))

    def left(self):
        path = self.path
        if not path:
            return errors.LEFT_FROM_ROOT
        if not path.l:
            return errors.LEFT_FROM_LEFTMOST

        current, lnext = path.l[0], path.l[1:]
        return self._replace(current=current, path=path._replace(
            l=lnext,
            r=(self.current,) + path.r,
        ))

    def rightmost(self):
        """Returns the right most sibling at this location or self"""
        path = self.path
        if not path:
            return errors.RIGHTMOST_FROM_ROOT
        if not path.r:
            return self

        rs, current = path.r[:-1], path.r[-1]
        return self._replace(current=current, path=path._replace(
            l=tuple(reversed(rs)) + (self.current,) + path.l,
            r=(),
        ))

    def leftmost(self):
        """Returns the left most sibling at this location or self"""
        path = self.path
        if not path:
            return errors.LEFTMOST_FROM_ROOT
        if not path.l:
            return self

        ls, current = path.l[:-1], path.l[-1]
        return self._replace(current=current, path=path._replace(
            l=(),
            r=tuple(reversed(ls)) + (self.current,) + path.r,
        ))

    def leftmost_descendant(self):
        loc = self
        d = loc.down()
        while d:
            loc = d
            d = loc.down()
        return loc

    def rightmost_descendant(self):
        loc = self
        d = loc.down()
        while d:
            loc = d.rightmost()
            d = loc.down()
        return loc

    def ancestor(self, filter):
        """
        Return the first ancestor preceding the current loc that
        matches the filter(ancestor) function.

        The filter function is invoked with the location of the
        next ancestor. If the filter function returns true then
        the ancestor will be returned to the invoker of
        loc.ancestor(filter) method. Otherwise the search will move
        to the next ancestor until the top of the tree is reached.
        """
        u = self.up()
        while u:
            if filter(u):
                return u
            u = u.up()

    def move_to(self, dest):
        """
        Move to the same 'position' in the tree as the given loc and return
        the loc found there now. Only the position is replayed, so if the
        node or its ancestors have been edited since, the node found may
        differ from the one at dest.

        If the position no longer exists the error of the first move that
        failed is returned.
        """
        moves = []
        path = dest.path or None

        while path:
            moves.extend(len(path.l) * ['r'])
            moves.append('d')
            path = path.ppath

        moves.reverse()

        loc = self.top()
        for m in moves:
            loc = loc.down() if m == 'd' else loc.right()
            if not loc:
                break

        return loc

    # Enumeration

    def at_end(self):
        return self.path is END

    def next(self):
        """
        Visit's nodes in depth-first pre-order.

        For example given the following tree:

                  a
                /   \\
               b     e
               ^     ^
              c d   f g

        next() starting at a will visit b, c, d, e, f, g and then
        return a location at the end of the walk, focused on a.
        Calling next() at the end returns the same location.
        """
        if self.at_end():
            return self

        n = self.down() or self.right()
        if n:
            return n

        loc = self
        while True:
            u = loc.up()
            if not u:
                return loc._replace(path=END)
            r = u.right()
            if r:
                return r
            loc = u

    def prev(self):
        """
        Steps back one node in a depth-first pre-order walk. The root is
        its own predecessor; a walk that has ended can't be stepped back.
        """
        if self.at_end():
            return errors.PREVIOUS_OF_END
        if not self.path:
            return self

        l = self.left()
        if not l:
            return self.up()
        return l.rightmost_descendant()

    def preorder_iter(self):
        loc = self
        while not loc.at_end():
            yield loc
            loc = loc.next()

    def to_list(self):
        return [loc.current for loc in self.preorder_iter()]

    def postorder_next(self):
        """
        Visit's nodes in depth-first post-order.

        For example given the following tree:

                  a
                /   \\
               b     e
               ^     ^
              c d   f g

        postorder next will visit the nodes in the following order
        c, d, b, f, g, e a

        Note this method ends when it reaches the root node. To
        start traversal from the root call leftmost_descendant()
        first. See postorder_iter for an example.
        """
        r = self.right()
        if r:
            return r.leftmost_descendant()
        return self.up()

    def postorder_iter(self):
        loc = self.leftmost_descendant()

        while loc:
            yield loc
            loc = loc.postorder_next()

    def find(self, func):
        for loc in self.preorder_iter():
            if func(loc):
                return loc

    # Editing

    def replace(self, value):
        return self._replace(current=value)

    def edit(self, f, *args):
        """Replace the node at this loc with the value of f(node, *args)"""
        return self.replace(f(self.current, *args))

    def insert_left(self, item):
        """Insert item as left sibling of node without moving"""
        path = self.path
        if not path:
            return errors.INSERT_LEFT_OF_ROOT
        return self._replace(path=path._replace(l=(item,) + path.l))

    def insert_right(self, item):
        """Insert item as right sibling of node without moving"""
        path = self.path
        if not path:
            return errors.INSERT_RIGHT_OF_ROOT
        return self._replace(path=path._replace(r=(item,) + path.r))

    def insert_child(self, item):
        """
        Inserts the item as the leftmost child of the node at this loc,
        without moving.
        """
        if not self.branch():
            return errors.INSERT_CHILD_OF_LEAF
        children = tuple(self.caps.children(self.current))
        return self.replace(self.make_node(self.current, (item,) + children))

    def append_child(self, item):
        """
        Inserts the item as the rightmost child of the node at this loc,
        without moving.
        """
        if not self.branch():
            return errors.APPEND_CHILD_OF_LEAF
        children = tuple(self.caps.children(self.current))
        return self.replace(self.make_node(self.current, children + (item,)))

    def remove(self):
        """
        Removes the node at the current location.

        When the node has a left sibling that sibling becomes the focus,
        otherwise the focus moves to the rebuilt parent.

        For example given the following tree:

                  a
                /   \\
               b     e
               ^     ^
              c d   f g

        Removing d would return c, removing c would return b holding
        only d.
        """
        path = self.path
        if not path:
            return errors.REMOVE_ROOT

        l, r, pnode, ppath = path

        if l:
            return self._replace(current=l[0], path=path._replace(l=l[1:]))

        return self._replace(
            current=self.make_node(pnode, r),
            path=ppath,
        )


del _Loc
