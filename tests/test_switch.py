from rosezip._lib.cli import switch

unhandled = {
    'event': 'unhandled',
}


def test_unhandled_record():
    assert switch(unhandled) == '{"event": "unhandled"}'


def test_visit():
    assert switch({
        'event': 'visit', 'payload': 'x', 'depth': 2, 'index': 0,
    }) == '    "x"'


def test_visit_root():
    assert switch({
        'event': 'visit', 'payload': {'n': 1}, 'depth': 0, 'index': 0,
    }) == '{"n": 1}'


def test_move():
    assert switch({
        'event': 'move', 'move': 'parent', 'payload': 3, 'depth': 1,
        'index': 2,
    }) == 'parent -> 3 (depth 1)'


def test_error():
    assert switch({
        'event': 'move',
        'move': 'parent',
        'error': "no parent from 'a'",
        'errorDetail': {'message': "no parent from 'a'"},
    }) == "[ERROR] no parent from 'a'"
