"""
Generic ways of repeating a move, and the four whole-tree walks built
on them.

A move is any function that takes a zipper and returns another zipper
or None, e.g. Zipper.parent or kin.next_extended_cousin. Unlike the
family relations the predicates here are handed zippers, not trees.
"""

from . import kin
from .fn import always, first_of
from .zipper import Zipper


# Zipper -> (Zipper -> Zipper | None) -> int -> Zipper | None
def move_for(z, move, reps):
    """Applies move reps times. None if any step fails or reps < 1."""
    if reps < 1:
        return None

    for _ in range(reps):
        z = move(z)
        if z is None:
            return None
    return z


def move_if(z, move, predicate):
    """
    Takes a single step, keeping it only if predicate accepts where it
    landed.
    """
    z = move(z)
    if z is not None and predicate(z):
        return z


def move_until(z, move, predicate):
    z = move(z)
    while z is not None:
        if predicate(z):
            return z
        z = move(z)


def move_while(z, move, predicate=always):
    """
    Keeps moving while predicate accepts the current zipper and returns
    the last one reached. With the default predicate it keeps going until
    move itself gives up.
    """
    while predicate(z):
        next_z = move(z)
        if next_z is None:
            break
        z = next_z
    return z


def find(z, move, predicate):
    """
    Returns the first zipper, starting with z itself, that predicate
    accepts.
    """
    while z is not None:
        if predicate(z):
            return z
        z = move(z)


def map(z, move, fn):
    """
    Replaces the focus with fn(focus) at z and at every zipper move
    reaches, returning the last one.
    """
    z = z.map_focus(fn)
    while True:
        next_z = move(z)
        if next_z is None:
            return z
        z = next_z.map_focus(fn)


def accumulate(z, move, acc, fn):
    """
    Folds fn(zipper, acc) over z and every zipper move reaches. Returns
    the last zipper and the final accumulator.

    >>> from rosezip import build, wrap
    >>> z = wrap(build(1, [2, 3]))
    >>> add = lambda z, acc: acc + z.focus.payload
    >>> last, total = accumulate(z, descend, 0, add)
    >>> last.focus.payload, total
    (3, 6)
    """
    while True:
        acc = fn(z, acc)
        next_z = move(z)
        if next_z is None:
            return z, acc
        z = next_z


def walk(z, move):
    """
    Lazily yields z followed by every zipper move reaches.
    """
    while z is not None:
        yield z
        z = move(z)


# Path traversal

def rewind_for(z, reps):
    return move_for(z, Zipper.parent, reps)


def rewind_if(z, predicate):
    return move_if(z, Zipper.parent, predicate)


def rewind_until(z, predicate):
    return move_until(z, Zipper.parent, predicate)


def rewind_while(z, predicate=always):
    return move_while(z, Zipper.parent, predicate)


def rewind_to_root(z):
    return rewind_while(z)


def rewind_find(z, predicate):
    return find(z, Zipper.parent, predicate)


def rewind_map(z, fn):
    return map(z, Zipper.parent, fn)


def rewind_accumulate(z, acc, fn):
    return accumulate(z, Zipper.parent, acc, fn)


# Breadth first

def forward(z):
    """
    The next node in breadth first order: the rest of the current level,
    then the level below starting from its leftmost node.
    """
    return first_of(z, [
        Zipper.next_sibling,
        kin.next_extended_cousin,
        kin.first_extended_nibling,
        kin.first_nibling,
        Zipper.first_child,
    ])


def forward_for(z, reps):
    return move_for(z, forward, reps)


def forward_if(z, predicate):
    return move_if(z, forward, predicate)


def forward_until(z, predicate):
    return move_until(z, forward, predicate)


def forward_while(z, predicate=always):
    return move_while(z, forward, predicate)


def forward_to_last(z):
    return forward_while(z)


def forward_find(z, predicate):
    return find(z, forward, predicate)


def forward_map(z, fn):
    return map(z, forward, fn)


def forward_accumulate(z, acc, fn):
    return accumulate(z, forward, acc, fn)


def backward(z):
    """
    The previous node in breadth first order, the mirror image of
    forward. None at the very first node.
    """
    if not z.prev and not z.path:
        return None

    return first_of(z, [
        Zipper.previous_sibling,
        kin.previous_extended_cousin,
        kin.last_extended_pibling,
        kin.last_pibling,
        Zipper.parent,
    ])


def backward_for(z, reps):
    return move_for(z, backward, reps)


def backward_if(z, predicate):
    return move_if(z, backward, predicate)


def backward_until(z, predicate):
    return move_until(z, backward, predicate)


def backward_while(z, predicate=always):
    return move_while(z, backward, predicate)


def backward_to_root(z):
    return backward_while(z)


def backward_find(z, predicate):
    return find(z, backward, predicate)


def backward_map(z, fn):
    return map(z, backward, fn)


def backward_accumulate(z, acc, fn):
    return accumulate(z, backward, acc, fn)


# Depth first

def descend(z):
    """The next node in a depth first, pre-order walk."""
    return first_of(z, [
        Zipper.first_child,
        Zipper.next_sibling,
        kin.next_ancestral_pibling,
    ])


def descend_for(z, reps):
    return move_for(z, descend, reps)


def descend_if(z, predicate):
    return move_if(z, descend, predicate)


def descend_until(z, predicate):
    return move_until(z, descend, predicate)


def descend_while(z, predicate=always):
    return move_while(z, descend, predicate)


def descend_to_last(z):
    return descend_while(z)


def descend_find(z, predicate):
    return find(z, descend, predicate)


def descend_map(z, fn):
    return map(z, descend, fn)


def descend_accumulate(z, acc, fn):
    return accumulate(z, descend, acc, fn)


def ascend(z):
    """The previous node in a depth first, pre-order walk."""
    return first_of(z, [
        kin.previous_descendant_nibling,
        Zipper.previous_sibling,
        Zipper.parent,
    ])


def ascend_for(z, reps):
    return move_for(z, ascend, reps)


def ascend_if(z, predicate):
    return move_if(z, ascend, predicate)


def ascend_until(z, predicate):
    return move_until(z, ascend, predicate)


def ascend_while(z, predicate=always):
    return move_while(z, ascend, predicate)


def ascend_to_root(z):
    return ascend_while(z)


def ascend_find(z, predicate):
    return find(z, ascend, predicate)


def ascend_map(z, fn):
    return map(z, ascend, fn)


def ascend_accumulate(z, acc, fn):
    return accumulate(z, ascend, acc, fn)
