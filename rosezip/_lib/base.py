from . import kin, traversal
from .zipper import Zipper

ORDERS = {
    'descend': traversal.descend,
    'ascend': traversal.ascend,
    'forward': traversal.forward,
    'backward': traversal.backward,
}

# walks that run back to front start from the node they would end on
_STARTS = {
    'ascend': traversal.descend_to_last,
    'backward': traversal.forward_to_last,
}

_PRIMITIVES = [
    'parent', 'first_child', 'last_child', 'first_sibling',
    'previous_sibling', 'next_sibling', 'last_sibling',
    'leftmost_descendant', 'rightmost_descendant',
]

_RELATIONS = [
    'grandparent', 'great_grandparent',
    'first_grandchild', 'last_grandchild',
    'first_great_grandchild', 'last_great_grandchild',
    'first_nibling', 'last_nibling', 'previous_nibling', 'next_nibling',
    'previous_grandnibling', 'next_grandnibling',
    'first_descendant_nibling', 'last_descendant_nibling',
    'previous_descendant_nibling', 'next_descendant_nibling',
    'first_extended_nibling', 'last_extended_nibling',
    'previous_extended_nibling', 'next_extended_nibling',
    'first_pibling', 'last_pibling', 'previous_pibling', 'next_pibling',
    'first_grandpibling', 'last_grandpibling',
    'previous_grandpibling', 'next_grandpibling',
    'first_extended_pibling', 'last_extended_pibling',
    'previous_extended_pibling', 'next_extended_pibling',
    'first_ancestral_pibling', 'last_ancestral_pibling',
    'previous_ancestral_pibling', 'next_ancestral_pibling',
    'first_first_cousin', 'last_first_cousin',
    'previous_first_cousin', 'next_first_cousin',
    'first_second_cousin', 'last_second_cousin',
    'previous_second_cousin', 'next_second_cousin',
    'first_extended_cousin', 'last_extended_cousin',
    'previous_extended_cousin', 'next_extended_cousin',
]

MOVES = dict(
    [(name, getattr(Zipper, name)) for name in _PRIMITIVES] +
    [(name, getattr(kin, name)) for name in _RELATIONS] +
    [(name, ORDERS[name]) for name in ORDERS]
)


def _position(z):
    return {
        'payload': z.focused_payload(),
        'depth': z.depth_of_focus(),
        'index': z.index_of_focus(),
    }


class Navigator(object):
    """
    Runs commands against a zipper, reporting each step as an event
    dict.
    """

    def __init__(self, zipper):
        self.zipper = zipper

    def start(self):
        """The leftmost tree at the top level."""
        z = self.zipper.rewind_to_root()
        return z.first_sibling() or z

    def walk(self, order):
        move = ORDERS[order]
        z = self.start()
        if order in _STARTS:
            z = _STARTS[order](z)

        if z.is_empty():
            return

        for visited in traversal.walk(z, move):
            evt = _position(visited)
            evt['event'] = 'visit'
            yield evt

    def moves(self, names):
        z = self.start()
        for name in names:
            next_z = MOVES[name](z)
            if next_z is None:
                msg = 'no {0} from {1!r}'.format(name, z.focused_payload())
                yield {
                    'event': 'move',
                    'move': name,
                    'error': msg,
                    'errorDetail': {'message': msg},
                }
                return

            z = next_z
            evt = _position(z)
            evt.update({'event': 'move', 'move': name})
            yield evt
