import json
import os

from .fn import merge
from .tree import unfold
from .zipper import empty, wrap

CONFIG_FILE = '.rosezip.json'

DEFAULTS = {
    'order': 'descend',
    'payload_key': 'payload',
    'children_key': 'children',
}


def load_config(path, environ):
    """
    Reads .rosezip.json from path, falling back to ROSEZIP_ORDER in the
    environment when there is no such file. Anything missing is filled
    in from DEFAULTS.
    """
    try:
        with open(os.path.join(path, CONFIG_FILE)) as fp:
            config = json.load(fp)
    except IOError:
        config = {
            'order': environ.get('ROSEZIP_ORDER'),
        }

    return merge(DEFAULTS, {k: v for k, v in config.items() if v is not None})


def tree_from_json(document, payload_key='payload', children_key='children'):
    """
    Converts a decoded JSON document into a Tree. Nodes are objects
    holding a payload and a list of children; any other value is taken
    as the payload of a leaf.

    >>> doc = {'payload': 1, 'children': [2, {'payload': 3}]}
    >>> list(tree_from_json(doc).preorder_iter())
    [1, 2, 3]
    """

    def expand(node):
        if isinstance(node, dict) and payload_key in node:
            return node[payload_key], node.get(children_key) or []
        return node, []

    return unfold(document, expand)


def load_zipper(fp, config=DEFAULTS):
    """
    Reads a tree from the JSON file fp and returns a zipper focused on
    its root. A top level list is read as a forest, focused on the first
    tree.
    """
    document = json.load(fp)
    keys = config['payload_key'], config['children_key']

    if not isinstance(document, list):
        return wrap(tree_from_json(document, *keys))

    trees = [tree_from_json(node, *keys) for node in document]
    if not trees:
        return empty()
    return wrap(trees[0], next=trees[1:])
