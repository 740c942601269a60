import json

import pytest

from treezipper._lib import cli

TREE = [1, [], 2, [3, 4, [5, 6], [7]], 8]


def write_tree(tmpdir, tree=TREE):
    path = tmpdir.join('tree.json')
    path.write(json.dumps(tree))
    return str(path)


def run(tmpdir, argv, environ=None):
    arguments = cli.argparser().parse_args(argv)
    return cli.run(
        path=str(tmpdir),
        arguments=arguments,
        environ=environ or {},
    )


def test_walk(tmpdir, capsys):
    tree = write_tree(tmpdir)
    run(tmpdir, ['walk', '-f', tree])
    lines = capsys.readouterr().out.splitlines()
    assert [json.loads(l) for l in lines] == [
        TREE, 1, [], 2, [3, 4, [5, 6], [7]], 3, 4, [5, 6], 5, 6, [7], 7, 8,
    ]


def test_edit(tmpdir, capsys):
    tree = write_tree(tmpdir)
    run(tmpdir, [
        'edit', '-f', tree, 'down', 'right', 'right', 'right',
        'insert_child=11',
    ])
    out = capsys.readouterr().out
    assert json.loads(out) == [1, [], 2, [11, 3, 4, [5, 6], [7]], 8]


def test_edit_focus(tmpdir, capsys):
    tree = write_tree(tmpdir)
    run(tmpdir, ['edit', '-f', tree, '--focus', 'down', 'rightmost'])
    assert capsys.readouterr().out == '8\n'


def test_edit_remove(tmpdir, capsys):
    tree = write_tree(tmpdir)
    run(tmpdir, ['edit', '-f', tree, 'down', 'remove'])
    out = capsys.readouterr().out
    assert json.loads(out) == [[], 2, [3, 4, [5, 6], [7]], 8]


def test_edit_error(tmpdir, capsys):
    tree = write_tree(tmpdir)
    with pytest.raises(SystemExit) as exc:
        run(tmpdir, ['edit', '-f', tree, 'down', 'down'])
    assert exc.value.code == 1
    assert capsys.readouterr().out == '[ERROR] down: down_from_leaf\n'


def test_unknown_operation(tmpdir):
    tree = write_tree(tmpdir)
    with pytest.raises(SystemExit):
        run(tmpdir, ['edit', '-f', tree, 'sideways'])


def test_edit_needs_a_value(tmpdir):
    tree = write_tree(tmpdir)
    with pytest.raises(SystemExit):
        run(tmpdir, ['edit', '-f', tree, 'down', 'replace'])


def test_bad_json_value(tmpdir):
    tree = write_tree(tmpdir)
    with pytest.raises(SystemExit):
        run(tmpdir, ['edit', '-f', tree, 'down', 'replace={'])


def test_bad_document(tmpdir):
    path = tmpdir.join('broken.json')
    path.write('[1, 2')
    with pytest.raises(SystemExit):
        run(tmpdir, ['walk', '-f', str(path)])


def test_dict_document(tmpdir, capsys):
    tree = write_tree(tmpdir, {'a': 1, 'b': {'c': 2}})
    run(tmpdir, ['edit', '-f', tree, 'down', 'right', 'down', 'replace=["c", 3]'])
    out = capsys.readouterr().out
    assert json.loads(out) == {'a': 1, 'b': {'c': 3}}


def test_dict_edit_needs_a_pair(tmpdir, capsys):
    tree = write_tree(tmpdir, {'a': 1, 'b': 2})
    with pytest.raises(SystemExit) as exc:
        run(tmpdir, ['edit', '-f', tree, 'down', 'replace=5'])
    assert exc.value.code == 1
    assert capsys.readouterr().out == (
        '[ERROR] replace=5: expected a [key, value] pair\n'
    )


def test_dict_insert_child_needs_a_pair(tmpdir, capsys):
    tree = write_tree(tmpdir, {'a': 1, 'b': 2})
    with pytest.raises(SystemExit) as exc:
        run(tmpdir, ['edit', '-f', tree, 'insert_child=5'])
    assert exc.value.code == 1
    assert capsys.readouterr().out == (
        '[ERROR] insert_child=5: expected a [key, value] pair\n'
    )


def test_dict_root_replaced_by_an_object(tmpdir, capsys):
    tree = write_tree(tmpdir, {'a': 1})
    run(tmpdir, ['edit', '-f', tree, 'replace={"x": 1}', 'append_child=["y", 2]'])
    assert json.loads(capsys.readouterr().out) == {'x': 1, 'y': 2}

    with pytest.raises(SystemExit):
        run(tmpdir, ['edit', '-f', tree, 'replace=[1, 2]'])
    assert capsys.readouterr().out == (
        '[ERROR] replace=[1, 2]: the root of a dict document must be an object\n'
    )


def test_mode_from_environment(tmpdir, capsys):
    tree = write_tree(tmpdir, {'a': [1, 2]})
    run(tmpdir, ['walk', '-f', tree], environ={'TREEZIPPER_MODE': 'list'})
    lines = capsys.readouterr().out.splitlines()
    assert [json.loads(l) for l in lines] == [{'a': [1, 2]}]


def test_unknown_mode_from_environment(tmpdir):
    tree = write_tree(tmpdir)
    with pytest.raises(SystemExit):
        run(tmpdir, ['walk', '-f', tree], environ={'TREEZIPPER_MODE': 'yaml'})


def test_config_file(tmpdir, capsys):
    tmpdir.join('.treezipper.json').write(json.dumps({
        'mode': 'list',
        'indent': 2,
    }))
    tree = write_tree(tmpdir, [1])
    run(
        tmpdir, ['edit', '-f', tree, 'down', 'replace=2'],
        environ={'TREEZIPPER_MODE': 'dict'},
    )
    assert capsys.readouterr().out == '[\n  2\n]\n'


def test_indent_flag_overrides_config(tmpdir, capsys):
    tmpdir.join('.treezipper.json').write(json.dumps({'indent': 2}))
    tree = write_tree(tmpdir, [1])
    run(tmpdir, ['--indent', '0', 'edit', '-f', tree, 'down'])
    assert capsys.readouterr().out == '[\n1\n]\n'


def test_dump_file(tmpdir, capsys):
    tree = write_tree(tmpdir)
    dump = tmpdir.join('events.json')
    arguments = cli.argparser().parse_args([
        '--dump-file', str(dump), 'edit', '-f', tree, 'down', 'right',
    ])
    cli.run(path=str(tmpdir), arguments=arguments, environ={})
    arguments.dump_file.close()

    events = [json.loads(l) for l in dump.read().splitlines()]
    assert events == [
        {'event': 'op', 'op': 'down', 'focus': 1},
        {'event': 'op', 'op': 'right', 'focus': []},
        {'event': 'result', 'node': TREE},
    ]


def test_switch():
    assert cli.switch({'event': 'op', 'op': 'down', 'focus': 1}) is None
    assert cli.switch({'event': 'node', 'node': [1]}) == '[1]'
    assert cli.switch({'event': 'unhandled'}) == '{"event": "unhandled"}'
    assert cli.switch({
        'event': 'op', 'op': 'up', 'error': 'up_from_root',
    }) == '[ERROR] up: up_from_root'
