from collections import namedtuple


class RoseTreeError(Exception):
    """
    Base class for everything rosezip raises.
    """


class InvalidArgument(RoseTreeError, ValueError):
    """
    A constructor was handed something that isn't what it
    asked for, e.g. a sibling that isn't a Tree.
    """


class InvariantViolation(RoseTreeError, ValueError):
    """
    A caller supplied mapping function returned a value of the
    wrong shape.
    """


class InvalidChild(InvalidArgument, InvariantViolation):
    pass


def build(payload=None, children=()):
    """
    Creates a new Tree, wrapping any child that isn't already a
    Tree in a leaf.

    >>> build(1, [2])
    Tree(payload=1, children=(Tree(payload=2, children=()),))
    """
    return Tree(payload, _wrap_all(children))


def empty():
    return Tree(None, ())


def is_tree(value):
    return isinstance(value, Tree)


def all_trees(values):
    return all(is_tree(v) for v in values)


def _wrap(value):
    if is_tree(value):
        return value
    return Tree(value, ())


def _wrap_all(values):
    return tuple(_wrap(v) for v in values)


_Tree = namedtuple('Tree', ['payload', 'children'])


class Tree(_Tree):
    """
    An immutable n-ary tree node. Every "mutation" returns a new Tree.

    children is always a tuple of Trees, use build() rather than the
    constructor when that isn't already guaranteed.
    """

    new = staticmethod(build)
    empty = staticmethod(empty)

    def is_empty(self):
        return self.payload is None and not self.children

    def is_leaf(self):
        return not self.children and not self.is_empty()

    def is_parent(self):
        return bool(self.children)

    def set_payload(self, payload):
        return self._replace(payload=payload)

    def map_payload(self, fn):
        return self._replace(payload=fn(self.payload))

    def set_children(self, children):
        return self._replace(children=_wrap_all(children))

    def map_children(self, fn):
        children = tuple(fn(child) for child in self.children)
        if not all_trees(children):
            raise InvalidChild('map function must return a Tree')
        return self._replace(children=children)

    def has_child(self, predicate):
        return any(predicate(child) for child in self.children)

    def prepend_child(self, child):
        return self._replace(children=(_wrap(child),) + self.children)

    def append_child(self, child):
        return self._replace(children=self.children + (_wrap(child),))

    def insert_child(self, child, index):
        """
        Inserts child before index. Indices past either end clamp
        to that end, negative ones count back from the last child.
        """
        children = self.children
        return self._replace(
            children=children[:index] + (_wrap(child),) + children[index:],
        )

    def remove_child(self, index):
        """
        Returns a tuple of the new tree and the removed child, or the
        unchanged tree and None when index is out of range.

        >>> tree, removed = build(0, [8, 6, 4, 2]).remove_child(2)
        >>> [c.payload for c in tree.children], removed.payload
        ([8, 6, 2], 4)
        """
        children = self.children
        if index < 0:
            index += len(children)
        if not 0 <= index < len(children):
            return self, None

        removed = children[index]
        new_children = children[:index] + children[index + 1:]
        return self._replace(children=new_children), removed

    def pop_first_child(self):
        if not self.children:
            return self, None
        return self._replace(children=self.children[1:]), self.children[0]

    def pop_last_child(self):
        if not self.children:
            return self, None
        return self._replace(children=self.children[:-1]), self.children[-1]

    def preorder_iter(self):
        """
        Lazily yields every payload depth-first, left to right. Each
        call starts a fresh walk; an empty tree yields nothing.

        >>> list(build(1, [build(2, [3]), 4]).preorder_iter())
        [1, 2, 3, 4]
        """
        if self.is_empty():
            return

        stack = [self]
        while stack:
            tree = stack.pop()
            yield tree.payload
            stack.extend(reversed(tree.children))

    def __contains__(self, payload):
        """
        Membership looks at every payload in the tree, not at the two
        tuple fields.

        >>> 4 in build(1, [build(2, [3]), 4])
        True
        """
        return any(p == payload for p in self.preorder_iter())

    def count(self):
        """
        The number of nodes. Unlike tuple.count this takes no argument.
        """
        return sum(1 for _ in self.preorder_iter())


del _Tree


_exhausted = object()


# seed -> (seed -> (payload, [seed])) -> Tree
def unfold(seed, expand):
    """
    Grows a tree from seed. expand turns a seed into its payload and
    the seeds for its children. The work is kept on an explicit stack
    so deep trees don't run into the recursion limit.

    expand must eventually stop producing seeds.

    >>> tree = unfold(2, lambda x: (str(x), range(x)))
    >>> list(tree.preorder_iter())
    ['2', '0', '1', '0']
    """
    payload, seeds = expand(seed)
    stack = [(payload, iter(seeds), [])]

    while True:
        payload, todo, done = stack[-1]
        next_seed = next(todo, _exhausted)

        if next_seed is _exhausted:
            stack.pop()
            tree = Tree(payload, tuple(done))
            if not stack:
                return tree
            stack[-1][2].append(tree)
        else:
            child_payload, child_seeds = expand(next_seed)
            stack.append((child_payload, iter(child_seeds), []))
