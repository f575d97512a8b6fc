from collections import namedtuple

from .tree import InvalidArgument, all_trees, is_tree


class InvalidSibling(InvalidArgument):
    pass


def location(payload, prev=(), next=()):
    """
    Creates a Location. When given a Tree only its payload is kept, the
    children are rebuilt from the zipper on the way back up.

    prev is expected nearest sibling first, next in natural order.
    """
    if is_tree(payload):
        payload = payload.payload

    prev, next = tuple(prev), tuple(next)
    if not all_trees(prev):
        raise InvalidSibling('invalid element in prev')
    if not all_trees(next):
        raise InvalidSibling('invalid element in next')

    return Location(prev, payload, next)


def is_location(value):
    return isinstance(value, Location)


def all_locations(values):
    return all(is_location(v) for v in values)


_Location = namedtuple('Location', ['prev', 'payload', 'next'])


class Location(_Location):
    """
    One level of ancestor context: the ancestor's payload and its
    siblings. reverse(prev) + [ancestor] + next is the full list of
    children one level above.
    """

    new = staticmethod(location)

    def index_of(self):
        return len(self.prev)

    def siblings(self):
        """The ancestor's siblings in natural order, without the ancestor."""
        return self.prev[::-1] + self.next

    def map_payload(self, fn):
        return self._replace(payload=fn(self.payload))


del _Location
