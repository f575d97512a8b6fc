import json

import pytest

TREE = {
    'payload': 'a',
    'children': [
        {'payload': 'b', 'children': ['d', 'e']},
        {'payload': 'c', 'children': ['f']},
    ],
}


@pytest.fixture
def tree_file(tmpdir):
    tmpdir.join('tree.json').write(json.dumps(TREE))
    return tmpdir
