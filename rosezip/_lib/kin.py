"""
Family relations between nodes, all built from the primitive moves on
Zipper.

Every function takes a zipper and, where it makes sense, a predicate
that is handed the candidate Tree. They return the zipper focused on the
relative that was found or None.

Some vocabulary:

  pibling  : a sibling of the parent (aunt or uncle)
  nibling  : a child of a sibling (niece or nephew)
  extended cousin : any node at the same depth that doesn't share the
    focus' parent, however distant the common ancestor is
"""

from .fn import always, compose
from .tree import Tree
from .zipper import Zipper


def _first_match(zippers, predicate):
    for z in zippers:
        if predicate(z.focus):
            return z


def _level(z, levels, reverse=False):
    """
    Yields the descendants of z that are exactly levels below it, left to
    right (right to left when reverse is set). Never leaves the subtree
    rooted at z.
    """
    if levels == 0:
        yield z
        return

    if reverse:
        down, across = Zipper.last_child, Zipper.previous_sibling
    else:
        down, across = Zipper.first_child, Zipper.next_sibling

    depth = 0
    while True:
        below = down(z) if depth < levels else None
        if below is not None:
            z, depth = below, depth + 1
        else:
            while depth > 0:
                beside = across(z)
                if beside is not None:
                    z = beside
                    break
                z, depth = z.parent(), depth - 1
            else:
                return

        if depth == levels:
            yield z


def _lineage(z):
    """
    The zippers for every ancestor of z, the root level first, so that
    lineage[i] sits at depth i.
    """
    lineage = []
    parent = z.parent()
    while parent is not None:
        lineage.append(parent)
        parent = parent.parent()
    lineage.reverse()
    return lineage


def _ancestral(z, relation, predicate):
    while z is not None:
        found = relation(z, predicate)
        if found is not None:
            return found
        z = z.parent()


def _deepest(z, down, predicate):
    match = None
    if z is not None:
        z = down(z)
    while z is not None:
        if predicate(z.focus):
            match = z
        z = down(z)
    return match


def _then(z, move, *args):
    if z is not None:
        return move(z, *args)


# Ancestors

grandparent = compose(Zipper.parent, Zipper.parent)

great_grandparent = compose(Zipper.parent, grandparent)


# Descendants

def first_grandchild(z, predicate=always):
    """
    The first grandchild satisfying predicate, looking through every
    child's children from left to right.
    """
    return _first_match(_level(z, 2), predicate)


def last_grandchild(z, predicate=always):
    return _first_match(_level(z, 2, reverse=True), predicate)


def first_great_grandchild(z, predicate=always):
    return _first_match(_level(z, 3), predicate)


def last_great_grandchild(z, predicate=always):
    return _first_match(_level(z, 3, reverse=True), predicate)


# Niblings

def first_nibling(z, predicate=always):
    sibling = z.first_sibling(Tree.is_parent)
    return _then(sibling, Zipper.first_child, predicate)


def last_nibling(z, predicate=always):
    return _then(z.last_sibling(Tree.is_parent), Zipper.last_child, predicate)


def previous_nibling(z, predicate=always):
    sibling = z.previous_sibling(Tree.is_parent)
    return _then(sibling, Zipper.last_child, predicate)


def next_nibling(z, predicate=always):
    return _then(z.next_sibling(Tree.is_parent), Zipper.first_child, predicate)


def first_nibling_at_sibling(z, index, predicate=always):
    return _then(z.sibling_at(index), Zipper.first_child, predicate)


def last_nibling_at_sibling(z, index, predicate=always):
    return _then(z.sibling_at(index), Zipper.last_child, predicate)


def previous_grandnibling(z, predicate=always):
    """
    The last matching grandchild of the nearest previous sibling that
    has one.
    """
    sibling = z.previous_sibling(Tree.is_parent)
    while sibling is not None:
        found = last_grandchild(sibling, predicate)
        if found is not None:
            return found
        sibling = sibling.previous_sibling(Tree.is_parent)


def next_grandnibling(z, predicate=always):
    sibling = z.next_sibling(Tree.is_parent)
    while sibling is not None:
        found = first_grandchild(sibling, predicate)
        if found is not None:
            return found
        sibling = sibling.next_sibling(Tree.is_parent)


def first_descendant_nibling(z, predicate=always):
    """
    Follows the first child chain down from the first sibling and returns
    the deepest node on it that satisfies predicate.
    """
    return _deepest(z.first_sibling(), Zipper.first_child, predicate)


def last_descendant_nibling(z, predicate=always):
    return _deepest(z.last_sibling(), Zipper.last_child, predicate)


def previous_descendant_nibling(z, predicate=always):
    return _deepest(z.previous_sibling(), Zipper.last_child, predicate)


def next_descendant_nibling(z, predicate=always):
    return _deepest(z.next_sibling(), Zipper.first_child, predicate)


def _parent_of(predicate):
    def has_match(tree):
        return tree.has_child(predicate)
    return has_match


def first_extended_nibling(z, predicate=always):
    cousin = first_extended_cousin(z, _parent_of(predicate))
    return _then(cousin, Zipper.first_child, predicate)


def last_extended_nibling(z, predicate=always):
    cousin = last_extended_cousin(z, _parent_of(predicate))
    return _then(cousin, Zipper.last_child, predicate)


def previous_extended_nibling(z, predicate=always):
    cousin = previous_extended_cousin(z, _parent_of(predicate))
    return _then(cousin, Zipper.last_child, predicate)


def next_extended_nibling(z, predicate=always):
    cousin = next_extended_cousin(z, _parent_of(predicate))
    return _then(cousin, Zipper.first_child, predicate)


# Piblings

def first_pibling(z, predicate=always):
    return _then(z.parent(), Zipper.first_sibling, predicate)


def last_pibling(z, predicate=always):
    return _then(z.parent(), Zipper.last_sibling, predicate)


def previous_pibling(z, predicate=always):
    return _then(z.parent(), Zipper.previous_sibling, predicate)


def next_pibling(z, predicate=always):
    return _then(z.parent(), Zipper.next_sibling, predicate)


def pibling_at(z, index):
    return _then(z.parent(), Zipper.sibling_at, index)


def first_grandpibling(z, predicate=always):
    return _then(grandparent(z), Zipper.first_sibling, predicate)


def last_grandpibling(z, predicate=always):
    return _then(grandparent(z), Zipper.last_sibling, predicate)


def previous_grandpibling(z, predicate=always):
    return _then(grandparent(z), Zipper.previous_sibling, predicate)


def next_grandpibling(z, predicate=always):
    return _then(grandparent(z), Zipper.next_sibling, predicate)


def first_extended_pibling(z, predicate=always):
    return _then(z.parent(), first_extended_cousin, predicate)


def last_extended_pibling(z, predicate=always):
    return _then(z.parent(), last_extended_cousin, predicate)


def previous_extended_pibling(z, predicate=always):
    return _then(z.parent(), previous_extended_cousin, predicate)


def next_extended_pibling(z, predicate=always):
    return _then(z.parent(), next_extended_cousin, predicate)


def first_ancestral_pibling(z, predicate=always):
    """
    The first pibling satisfying predicate, trying the parent's level
    first and then each level above it in turn.
    """
    return _ancestral(z, first_pibling, predicate)


def last_ancestral_pibling(z, predicate=always):
    return _ancestral(z, last_pibling, predicate)


def previous_ancestral_pibling(z, predicate=always):
    return _ancestral(z, previous_pibling, predicate)


def next_ancestral_pibling(z, predicate=always):
    return _ancestral(z, next_pibling, predicate)


# First and second cousins

def _cousin(start, down, across, predicate, within=always):
    z = start
    while z is not None and within(z):
        found = down(z, predicate)
        if found is not None:
            return found
        z = across(z, Tree.is_parent)


def _before(index):
    def before(z):
        return z.index_of_focus() < index
    return before


def _after(index):
    def after(z):
        return z.index_of_focus() > index
    return after


def first_first_cousin(z, predicate=always):
    return _cousin(
        first_pibling(z, Tree.is_parent), Zipper.first_child,
        Zipper.next_sibling, predicate, _before(z.index_of_parent()),
    )


def last_first_cousin(z, predicate=always):
    return _cousin(
        last_pibling(z, Tree.is_parent), Zipper.last_child,
        Zipper.previous_sibling, predicate, _after(z.index_of_parent()),
    )


def previous_first_cousin(z, predicate=always):
    return _cousin(
        previous_pibling(z, Tree.is_parent), Zipper.last_child,
        Zipper.previous_sibling, predicate,
    )


def next_first_cousin(z, predicate=always):
    return _cousin(
        next_pibling(z, Tree.is_parent), Zipper.first_child,
        Zipper.next_sibling, predicate,
    )


def first_second_cousin(z, predicate=always):
    return _cousin(
        first_grandpibling(z, Tree.is_parent), first_grandchild,
        Zipper.next_sibling, predicate, _before(z.index_of_grandparent()),
    )


def last_second_cousin(z, predicate=always):
    return _cousin(
        last_grandpibling(z, Tree.is_parent), last_grandchild,
        Zipper.previous_sibling, predicate, _after(z.index_of_grandparent()),
    )


def previous_second_cousin(z, predicate=always):
    return _cousin(
        previous_grandpibling(z, Tree.is_parent), last_grandchild,
        Zipper.previous_sibling, predicate,
    )


def next_second_cousin(z, predicate=always):
    return _cousin(
        next_grandpibling(z, Tree.is_parent), first_grandchild,
        Zipper.next_sibling, predicate,
    )


# Extended cousins

def first_extended_cousin(z, predicate=always):
    """
    The leftmost node at the focus' depth that satisfies predicate and
    lies to the left of the focus' own line of ancestors.

    For example, focused on x:

                    r
                /   |   \\
               a    b    c
               ^    |    ^
              d e   x   g h

    the extended cousins of x are d, e, g and h. The search only looks to
    the left of b so it finds d, use last_extended_cousin for the other
    side.

    The siblings before each ancestor are swept one subtree at a time,
    starting at the level of the root, so no node is visited twice.
    """
    depth = z.depth_of_focus()
    for level, ancestor in enumerate(_lineage(z)):
        stop = ancestor.index_of_focus()
        sibling = ancestor.first_sibling()
        while sibling is not None and sibling.index_of_focus() < stop:
            found = _first_match(_level(sibling, depth - level), predicate)
            if found is not None:
                return found
            sibling = sibling.next_sibling()


def last_extended_cousin(z, predicate=always):
    """
    The rightmost node at the focus' depth that satisfies predicate and
    lies to the right of the focus' own line of ancestors.
    """
    depth = z.depth_of_focus()
    for level, ancestor in enumerate(_lineage(z)):
        stop = ancestor.index_of_focus()
        sibling = ancestor.last_sibling()
        while sibling is not None and sibling.index_of_focus() > stop:
            levels = depth - level
            found = _first_match(
                _level(sibling, levels, reverse=True), predicate,
            )
            if found is not None:
                return found
            sibling = sibling.previous_sibling()


def previous_extended_cousin(z, predicate=always):
    """
    The nearest node to the left of the focus, at the same depth, that
    satisfies predicate and isn't one of its siblings.
    """
    depth = z.depth_of_focus()
    pibling = previous_ancestral_pibling(z, Tree.is_parent)
    while pibling is not None:
        levels = depth - pibling.depth_of_focus()
        found = _first_match(
            _level(pibling, levels, reverse=True), predicate,
        )
        if found is not None:
            return found

        sibling = pibling.previous_sibling(Tree.is_parent)
        if sibling is None:
            sibling = previous_ancestral_pibling(pibling, Tree.is_parent)
        pibling = sibling


def next_extended_cousin(z, predicate=always):
    depth = z.depth_of_focus()
    pibling = next_ancestral_pibling(z, Tree.is_parent)
    while pibling is not None:
        levels = depth - pibling.depth_of_focus()
        found = _first_match(_level(pibling, levels), predicate)
        if found is not None:
            return found

        sibling = pibling.next_sibling(Tree.is_parent)
        if sibling is None:
            sibling = next_ancestral_pibling(pibling, Tree.is_parent)
        pibling = sibling
