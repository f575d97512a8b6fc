from collections import namedtuple

from .fn import always, split_at, split_when
from .location import Location, all_locations
from .tree import (
    InvalidArgument, InvariantViolation, Tree, all_trees, build, is_tree,
)
from .tree import empty as empty_tree


class InvalidFocus(InvalidArgument):
    pass


class InvalidPrev(InvalidArgument):
    pass


class InvalidNext(InvalidArgument):
    pass


class InvalidPath(InvalidArgument):
    pass


def wrap(tree, prev=(), next=(), path=()):
    """
    Creates a zipper focused on tree.

    Unlike the zipper's own prev field, prev is given here in natural
    order (leftmost sibling first). path is nearest ancestor first.
    """
    if not is_tree(tree):
        raise InvalidFocus('focus must be a Tree')

    prev, next, path = tuple(prev), tuple(next), tuple(path)
    if not all_trees(prev):
        raise InvalidPrev('invalid element in prev')
    if not all_trees(next):
        raise InvalidNext('invalid element in next')
    if not all_locations(path):
        raise InvalidPath('invalid element in path')

    return Zipper(tree, prev[::-1], next, path)


def empty():
    return Zipper(empty_tree(), (), (), ())


def from_locations(locations):
    """
    Rebuilds a zipper from a list of Locations, nearest first. The first
    one becomes the focus, a leaf, and the rest become its path.
    """
    locations = tuple(locations)
    if not locations or not all_locations(locations):
        raise InvalidPath('expected a non empty list of Locations')

    loc, path = locations[0], locations[1:]
    return Zipper(Tree(loc.payload, ()), loc.prev, loc.next, path)


def _wrap(value):
    if is_tree(value):
        return value
    return build(value)


def _pop_at(items, index):
    if index < 0:
        index += len(items)
    if not 0 <= index < len(items):
        return items, None
    return items[:index] + items[index + 1:], items[index]


_Zipper = namedtuple('Zipper', ['focus', 'prev', 'next', 'path'])


class Zipper(_Zipper):
    """
    A cursor into a Tree.

    Given the following tree, focused on c:

                    a
                /   |   \\
               b    c    d
                    ^
                   e f

    focus is the subtree rooted at c, prev is (b,), next is (d,) and
    path holds a single Location for a. prev is kept nearest sibling
    first, so reversed(prev) + (focus,) + next is always the complete
    list of children of the parent.

    Moves return a new Zipper or None when there is nowhere to go.
    """

    new = staticmethod(wrap)
    empty = staticmethod(empty)

    # Queries

    def is_root(self):
        return not self.path

    def is_empty(self):
        return (
            self.focus.is_empty() and
            not self.prev and not self.next and not self.path
        )

    def has_children(self):
        return bool(self.focus.children)

    def has_siblings(self):
        return bool(self.prev or self.next)

    def focused_payload(self):
        return self.focus.payload

    def focused_children(self):
        return self.focus.children

    def depth_of_focus(self):
        return len(self.path)

    def index_of_focus(self):
        return len(self.prev)

    def index_of_parent(self):
        if self.path:
            return self.path[0].index_of()

    def index_of_grandparent(self):
        if len(self.path) > 1:
            return self.path[1].index_of()

    def parent_location(self):
        if self.path:
            return self.path[0]

    def parent_payload(self):
        if self.path:
            return self.path[0].payload

    def previous_siblings(self):
        return self.prev[::-1]

    def next_siblings(self):
        return self.next

    def new_location(self):
        return Location(self.prev, self.focus.payload, self.next)

    def to_tree(self):
        return self.rewind_to_root().focus

    def to_forest(self):
        """
        Returns the trees before the root and the root followed by
        the trees after it, both in natural order.
        """
        root = self.rewind_to_root()
        return root.prev[::-1], (root.focus,) + root.next

    def rewind_to_root(self):
        z = self
        while z.path:
            z = z.parent()
        return z

    # Edits

    def set_focus(self, tree):
        if not is_tree(tree):
            raise InvalidFocus('focus must be a Tree')
        return self._replace(focus=tree)

    def map_focus(self, fn):
        focus = fn(self.focus)
        if not is_tree(focus):
            raise InvariantViolation('map function must return a Tree')
        return self._replace(focus=focus)

    def set_focused_payload(self, payload):
        return self._replace(focus=self.focus.set_payload(payload))

    def map_focused_payload(self, fn):
        return self._replace(focus=self.focus.map_payload(fn))

    def set_focused_children(self, children):
        return self._replace(focus=self.focus.set_children(children))

    def map_focused_children(self, fn):
        return self._replace(focus=self.focus.map_children(fn))

    def map_path(self, fn):
        path = tuple(fn(loc) for loc in self.path)
        if not all_locations(path):
            raise InvariantViolation('map function must return a Location')
        return self._replace(path=path)

    def map_previous_siblings(self, fn):
        prev = tuple(fn(sibling) for sibling in self.prev)
        if not all_trees(prev):
            raise InvariantViolation('map function must return a Tree')
        return self._replace(prev=prev)

    def map_next_siblings(self, fn):
        next = tuple(fn(sibling) for sibling in self.next)
        if not all_trees(next):
            raise InvariantViolation('map function must return a Tree')
        return self._replace(next=next)

    def remove_focus(self):
        """
        Removes the focus, returning the new zipper and the removed tree.

        The focus moves to the next sibling, or the previous sibling when
        there is no next one, or the parent when there are no siblings.
        Removing the only node leaves an empty zipper and returns None.
        """
        if self.is_empty():
            return self, None

        if not self.prev and not self.next:
            if not self.path:
                return empty(), None
            return self._ascend(()), self.focus

        if not self.next:
            return self._replace(
                focus=self.prev[0],
                prev=self.prev[1:],
            ), self.focus

        return self._replace(
            focus=self.next[0],
            next=self.next[1:],
        ), self.focus

    def prepend_first_sibling(self, sibling):
        return self._replace(prev=self.prev + (_wrap(sibling),))

    def append_last_sibling(self, sibling):
        return self._replace(next=self.next + (_wrap(sibling),))

    def append_previous_sibling(self, sibling):
        return self._replace(prev=(_wrap(sibling),) + self.prev)

    def prepend_next_sibling(self, sibling):
        return self._replace(next=(_wrap(sibling),) + self.next)

    def insert_previous_sibling_at(self, sibling, index):
        """
        Inserts sibling at index among the previous siblings, counting
        from the leftmost one.
        """
        siblings = self.prev[::-1]
        siblings = siblings[:index] + (_wrap(sibling),) + siblings[index:]
        return self._replace(prev=siblings[::-1])

    def insert_next_sibling_at(self, sibling, index):
        next = self.next
        next = next[:index] + (_wrap(sibling),) + next[index:]
        return self._replace(next=next)

    def pop_first_sibling(self):
        if not self.prev:
            return self, None
        return self._replace(prev=self.prev[:-1]), self.prev[-1]

    def pop_previous_sibling(self):
        if not self.prev:
            return self, None
        return self._replace(prev=self.prev[1:]), self.prev[0]

    def pop_last_sibling(self):
        if not self.next:
            return self, None
        return self._replace(next=self.next[:-1]), self.next[-1]

    def pop_next_sibling(self):
        if not self.next:
            return self, None
        return self._replace(next=self.next[1:]), self.next[0]

    def pop_previous_sibling_at(self, index):
        siblings, removed = _pop_at(self.prev[::-1], index)
        if removed is None:
            return self, None
        return self._replace(prev=siblings[::-1]), removed

    def pop_next_sibling_at(self, index):
        next, removed = _pop_at(self.next, index)
        if removed is None:
            return self, None
        return self._replace(next=next), removed

    # Moves

    def _ascend(self, children):
        loc, path = self.path[0], self.path[1:]
        return Zipper(Tree(loc.payload, children), loc.prev, loc.next, path)

    def _descend(self, prev, rest):
        if rest:
            return Zipper(
                rest[0], prev, rest[1:], (self.new_location(),) + self.path,
            )

    def parent(self):
        if self.path:
            return self._ascend(self.prev[::-1] + (self.focus,) + self.next)

    def first_child(self, predicate=always):
        prev, rest = split_when(self.focus.children, predicate)
        return self._descend(prev, rest)

    def last_child(self, predicate=always):
        next, rest = split_when(self.focus.children[::-1], predicate)
        if rest:
            return Zipper(
                rest[0], rest[1:], next, (self.new_location(),) + self.path,
            )

    def child_at(self, index):
        prev, rest = split_at(self.focus.children, index)
        return self._descend(prev, rest)

    def first_sibling(self, predicate=always):
        prev, rest = split_when(self.prev[::-1], predicate)
        if rest:
            return self._replace(
                focus=rest[0],
                prev=prev,
                next=rest[1:] + (self.focus,) + self.next,
            )

    def previous_sibling(self, predicate=always):
        next, rest = split_when(self.prev, predicate)
        if rest:
            return self._replace(
                focus=rest[0],
                prev=rest[1:],
                next=next + (self.focus,) + self.next,
            )

    def next_sibling(self, predicate=always):
        prev, rest = split_when(self.next, predicate)
        if rest:
            return self._replace(
                focus=rest[0],
                prev=prev + (self.focus,) + self.prev,
                next=rest[1:],
            )

    def last_sibling(self, predicate=always):
        next, rest = split_when(self.next[::-1], predicate)
        if rest:
            return self._replace(
                focus=rest[0],
                prev=rest[1:] + (self.focus,) + self.prev,
                next=next,
            )

    def sibling_at(self, index):
        """
        Moves to the sibling at index. Asking for the focus' own index
        counts as not found.
        """
        if not self.has_siblings() or index == self.index_of_focus():
            return None

        siblings = self.prev[::-1] + (self.focus,) + self.next
        prev, rest = split_at(siblings, index)
        if rest:
            return self._replace(focus=rest[0], prev=prev, next=rest[1:])

    def leftmost_descendant(self, predicate=None):
        """
        Follows first children down to a leaf, or until predicate
        accepts one of the trees on the way. None when the focus has
        no children.
        """
        return self._descendant(Zipper.first_child, predicate)

    def rightmost_descendant(self, predicate=None):
        return self._descendant(Zipper.last_child, predicate)

    def _descendant(self, down, predicate):
        if not self.focus.children:
            return None

        z = self
        while True:
            child = down(z)
            if child is None:
                return z
            if predicate is not None and predicate(child.focus):
                return child
            z = child


del _Zipper
