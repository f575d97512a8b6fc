import pytest

from rosezip import InvalidArgument, InvalidSibling, Location, build, location
from rosezip._lib.location import all_locations, is_location


def test_location_unwraps_trees():
    loc = location(build(1, [2, 3]))
    assert loc == Location((), 1, ())


def test_location_keeps_payloads():
    loc = location(1, prev=[build(0)], next=[build(2)])
    assert loc.payload == 1
    assert loc.prev == (build(0),)
    assert loc.next == (build(2),)


def test_location_rejects_bad_prev():
    with pytest.raises(InvalidSibling) as e:
        location(1, prev=[build(0), 'nope'])
    assert 'prev' in str(e.value)


def test_location_rejects_bad_next():
    with pytest.raises(InvalidArgument) as e:
        location(1, next=['nope'])
    assert 'next' in str(e.value)


def test_index_of():
    assert location(1).index_of() == 0
    assert location(1, prev=[build(3), build(2)]).index_of() == 2


def test_siblings():
    loc = location(5, prev=[build(4), build(3)], next=[build(6)])
    assert [t.payload for t in loc.siblings()] == [3, 4, 6]


def test_map_payload():
    assert location(1).map_payload(lambda p: p + 1).payload == 2


def test_is_location():
    assert is_location(location(1))
    assert all_locations([location(1), location(2)])
    assert not all_locations([location(1), build(2)])


def test_new_is_location():
    assert Location.new(build(1)) == location(1)
