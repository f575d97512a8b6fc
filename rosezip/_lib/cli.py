# -*- coding: utf-8 -*-
"""
Environment Variables:

  ROSEZIP_ORDER : The order `rosezip walk` visits nodes in when neither
    --order nor a .rosezip.json config file says otherwise.

Examples:

  Given a tree.json that looks like this.

  {"payload": "a", "children": [
      {"payload": "b", "children": ["d", "e"]},
      {"payload": "c", "children": ["f"]}
  ]}

  Visit every node depth first:

    $ rosezip walk tree.json

  Visit every node breadth first, a level at a time:

    $ rosezip walk tree.json --order forward

  Go to d and then jump across to its cousin f:

    $ rosezip moves tree.json first_child first_child next_first_cousin

"""

import argparse
import json
import os
import sys

from . import source
from .base import MOVES, ORDERS, Navigator


def argparser():
    desc = 'Walks and navigates trees stored as JSON'
    parser = argparse.ArgumentParser(description=desc)
    parser.add_argument(
        '--dump-file',
        help='Save raw events to json to FILE, Useful for debugging',
        type=argparse.FileType('w'),
    )

    subparsers = parser.add_subparsers(help='sub-command help', dest='command')
    subparsers.required = True

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        'tree',
        help='JSON file holding the tree',
    )

    walk = subparsers.add_parser(
        'walk', help='visits every node', parents=[common],
    )
    walk.add_argument(
        '--order',
        choices=sorted(ORDERS),
        help='Override the order from .rosezip.json or ROSEZIP_ORDER',
    )

    moves = subparsers.add_parser(
        'moves', help='applies moves starting at the root', parents=[common],
    )
    moves.add_argument(
        'moves',
        nargs='+',
        choices=sorted(MOVES),
        metavar='MOVE',
        help='one of: ' + ', '.join(sorted(MOVES)),
    )

    return parser


def main():
    arguments = argparser().parse_args()
    return run(
        path=os.getcwd(),
        arguments=arguments,
        environ=os.environ,
    )


def process_arguments(path, arguments, environ):
    config = source.load_config(path, environ)

    order = getattr(arguments, 'order', None) or config['order']
    if order not in ORDERS:
        exit(
            'Unknown order {0!r}, expected one of {1}.\n'
            'Check .rosezip.json and ROSEZIP_ORDER.'.format(
                order, ', '.join(sorted(ORDERS)),
            ),
        )

    tree_path = os.path.join(path, arguments.tree)
    try:
        with open(tree_path) as fp:
            zipper = source.load_zipper(fp, config)
    except IOError as e:
        exit('Unable to read {0}: {1}'.format(arguments.tree, e))
    except ValueError as e:
        exit('{0} is not valid JSON: {1}'.format(arguments.tree, e))

    return arguments.command, order, arguments.dump_file, zipper


def run(path, arguments, environ):
    command_name, order, dump_file, zipper = process_arguments(
        path, arguments, environ,
    )

    navigator = Navigator(zipper)
    if command_name == 'walk':
        events = navigator.walk(order)
    else:
        events = navigator.moves(arguments.moves)

    errors = []

    for event in events:
        if dump_file:
            json.dump(event, dump_file)
            dump_file.write('\n')
        if 'error' in event:
            errors.append(event)
        msg = switch(event)
        if msg is not None:
            print(msg)

    if errors:
        print('The following errors occurred:', file=sys.stdout)
        for msg in sorted(switch(error) for error in errors):
            print(msg, file=sys.stdout)
        sys.exit(1)


def exit(msg):
    print(msg)
    sys.exit(1)


def switch(rec):

    if 'error' in rec:
        return '[ERROR] {0}'.format(rec['errorDetail']['message'])
    elif rec['event'] == 'visit':
        return '{indent}{payload}'.format(
            indent='  ' * rec['depth'],
            payload=json.dumps(rec['payload']),
        )
    elif rec['event'] == 'move':
        fmt = '{rec[move]} -> {payload} (depth {rec[depth]})'
        return fmt.format(rec=rec, payload=json.dumps(rec['payload']))
    else:
        return json.dumps(rec)
