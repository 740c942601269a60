# -*- coding: utf-8 -*-
"""
Environment Variables:

  TREEZIPPER_MODE : Which zipper to read the document with, list or dict.
    Ignored when a .treezipper.json file is present in the working
    directory. When neither is set the mode follows the type of the
    document's top level value.

Examples:

  Given a document tree.json containing:

    [1, [], 2, [3, 4, [5, 6], [7]], 8]

  Print every node in depth-first order:

    $ treezipper walk -f tree.json

  Insert 11 as the first child of [3, 4, [5, 6], [7]]:

    $ treezipper edit -f tree.json down right right right insert_child=11
    [1, [], 2, [11, 3, 4, [5, 6], [7]], 8]

  Show only the node under the cursor:

    $ treezipper edit -f tree.json --focus down rightmost
    8

"""
import argparse
import json
import os
import sys

from .errors import is_error
from .trees import dict_zipper, list_zipper

ZIPPERS = {
    'list': list_zipper,
    'dict': dict_zipper,
}

MOVES = (
    'down', 'up', 'right', 'left', 'rightmost', 'leftmost', 'top',
    'next', 'prev', 'remove',
)

EDITS = (
    'replace', 'insert_left', 'insert_right', 'insert_child', 'append_child',
)


def argparser():
    desc = 'Walks and edits JSON documents one node at a time'
    parser = argparse.ArgumentParser(description=desc)
    parser.add_argument(
        '--dump-file',
        help='Save raw events to json to FILE, Useful for debugging',
        type=argparse.FileType('w'),
    )
    parser.add_argument(
        '--mode',
        choices=sorted(ZIPPERS),
        help="Override TREEZIPPER_MODE if it's set in the environment.",
    )
    parser.add_argument(
        '--indent',
        type=int,
        help='Indent JSON output by INDENT spaces',
    )

    subparsers = parser.add_subparsers(help='sub-command help', dest='command')
    subparsers.required = True

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        '-f', '--file',
        default='-',
        type=argparse.FileType('r'),
        help='JSON document to read, defaults to stdin',
    )

    subparsers.add_parser(
        'walk', help='prints every node in depth-first order',
        parents=[common],
    )

    edit_parser = subparsers.add_parser(
        'edit', help='applies moves and edits, prints the document',
        parents=[common],
    )
    edit_parser.add_argument(
        '--focus',
        action='store_true',
        help='Print the node under the cursor instead of the whole document',
    )
    edit_parser.add_argument(
        'ops', nargs='+', metavar='OP',
        help=(
            'one of {} or NAME=JSON where NAME is one of {}'.format(
                ', '.join(MOVES), ', '.join(EDITS),
            )
        ),
    )

    return parser


def main():
    arguments = argparser().parse_args()
    return run(
        path=os.getcwd(),
        arguments=arguments,
        environ=os.environ,
    )


def parse_op(token):
    name, sep, value = token.partition('=')
    if name in MOVES and not sep:
        return token, name, ()
    if name in EDITS and sep:
        try:
            return token, name, (json.loads(value),)
        except ValueError as e:
            exit("Invalid JSON in '{}': {}".format(token, e))
    exit(
        "Unknown operation '{}'.\n"
        'Run treezipper edit --help for the list of operations.'.format(token),
    )


def process_arguments(path, arguments, environ):
    try:
        with open(os.path.join(path, '.treezipper.json')) as f:
            config = json.load(f)
    except IOError:
        config = {
            'mode': environ.get('TREEZIPPER_MODE'),
        }

    mode = arguments.mode or config.get('mode')
    if mode is not None and mode not in ZIPPERS:
        exit(
            "Unknown mode '{}' in the .treezipper.json config file\n"
            'or TREEZIPPER_MODE, expected one of: {}'.format(
                mode, ', '.join(sorted(ZIPPERS)),
            ),
        )

    indent = arguments.indent
    if indent is None:
        indent = config.get('indent')

    try:
        document = json.load(arguments.file)
    except ValueError as e:
        exit('Could not read the JSON document: {}'.format(e))

    ops = [parse_op(token) for token in getattr(arguments, 'ops', [])]
    show_focus = getattr(arguments, 'focus', False)

    return document, mode, indent, ops, show_focus, arguments.dump_file


def resolve_mode(document, mode):
    if mode is None:
        mode = 'dict' if isinstance(document, dict) else 'list'
    return mode


def list_value(loc, name, value):
    return value


def dict_value(loc, name, value):
    """
    Every node of a dict document but the root is a (key, value) pair,
    and the root itself stays a mapping.

    >>> dict_value(dict_zipper({'a': 1}).down(), 'replace', ['a', 2])
    ('a', 2)
    >>> dict_value(dict_zipper({'a': 1}), 'replace', {'b': 2})
    {'b': 2}
    """
    if name == 'replace' and not loc.path:
        if isinstance(value, dict):
            return value
        raise ValueError('the root of a dict document must be an object')

    is_pair = (
        isinstance(value, list) and len(value) == 2 and
        isinstance(value[0], str)
    )
    if not is_pair:
        raise ValueError('expected a [key, value] pair')
    return tuple(value)


VALUES = {
    'list': list_value,
    'dict': dict_value,
}


def walk(loc, ops, show_focus, check):
    for l in loc.preorder_iter():
        yield {'event': 'node', 'node': l.node()}


def edit(loc, ops, show_focus, check):
    for token, name, args in ops:
        try:
            args = tuple(check(loc, name, value) for value in args)
        except ValueError as e:
            yield {'event': 'op', 'op': token, 'error': str(e)}
            return

        result = getattr(loc, name)(*args)
        if is_error(result):
            yield {'event': 'op', 'op': token, 'error': result.kind}
            return
        loc = result
        yield {'event': 'op', 'op': token, 'focus': loc.node()}

    node = loc.node() if show_focus else loc.root()
    yield {'event': 'result', 'node': node}


COMMANDS = {
    'walk': walk,
    'edit': edit,
}


def run(path, arguments, environ):
    args = process_arguments(path, arguments, environ)
    document, mode, indent, ops, show_focus, dump_file = args

    mode = resolve_mode(document, mode)
    loc = ZIPPERS[mode](document)
    command = COMMANDS[arguments.command]

    errors = []

    for event in command(loc, ops, show_focus, VALUES[mode]):
        if dump_file:
            json.dump(event, dump_file)
            dump_file.write('\n')
        if 'error' in event:
            errors.append(event)
        msg = switch(event, indent)
        if msg is not None:
            print(msg)

    if errors:
        sys.exit(1)


def exit(msg):
    print(msg)
    sys.exit(1)


def switch(rec, indent=None):

    if 'error' in rec:
        return '[ERROR] {0}: {1}'.format(rec['op'], rec['error'])
    elif rec['event'] in ('node', 'result'):
        return json.dumps(rec['node'], indent=indent)
    elif rec['event'] == 'op':
        return None
    else:
        return json.dumps(rec)
