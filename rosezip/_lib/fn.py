# Collection of our favorite functional idioms.
# Moves are plain functions of a single zipper that return the next
# zipper or None, so most helpers here treat None as "stop".

from functools import reduce as ft_reduce


def always(_):
    """
    >>> always(None)
    True
    """
    return True


# a -> [(a -> b | None)] -> b | None
def first_of(value, fns):
    """
    Applies each function in fns to value, returning the first
    result that isn't None.

    >>> first_of(3, [lambda x: None, lambda x: x * 2, lambda x: x * 3])
    6
    >>> first_of(3, []) is None
    True
    """
    for f in fns:
        result = f(value)
        if result is not None:
            return result


def compose(*fns):
    """
    Given a list of moves such as f, g, h, that each take a single value
    return a function that is equivalent of f(g(h(v))), stopping as soon
    as one of them returns None.

    >>> inc = lambda x: x + 1
    >>> compose(inc, inc)(1)
    3
    >>> compose(inc, lambda x: None)(1) is None
    True
    """

    ordered = list(reversed(fns))
    reduce = ft_reduce

    def apply_(v, f):
        if v is not None:
            return f(v)

    def compose_(v):
        return reduce(apply_, ordered, v)
    return compose_


def split_at(elements, index):
    """
    Splits elements around index. The items before index come back
    nearest first, which is the order a zipper keeps its previous
    siblings in. Negative or out of range indices don't split at all.

    >>> split_at([1, 2, 3, 4, 5], 2)
    ((2, 1), (3, 4, 5))
    >>> split_at([1, 2, 3, 4, 5], 10)
    ((), ())
    >>> split_at([1, 2, 3], -1)
    ((), ())
    """
    elements = tuple(elements)
    if index < 0 or index >= len(elements):
        return (), ()
    return elements[:index][::-1], elements[index:]


def split_when(elements, predicate):
    """
    Splits elements at the first one satisfying predicate, which becomes
    the head of the second tuple. Like split_at the leading items are
    reversed. No match means no split.

    >>> split_when([1, 2, 3, 4, 5], lambda x: x == 3)
    ((2, 1), (3, 4, 5))
    >>> split_when([1, 2], lambda x: x == 3)
    ((), ())
    """
    elements = tuple(elements)
    for i, element in enumerate(elements):
        if predicate(element):
            return elements[:i][::-1], elements[i:]
    return (), ()


def merge(d1, d2):
    d = d1.copy()
    d.update(d2)
    return d
