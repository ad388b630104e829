
import pytest

from argot import (Spec,
                   Command,
                   Option,
                   Positional,
                   Parser,
                   bind,
                   LIST,
                   COMMAND_SELECTED,
                   BUILTIN_REQUESTED,
                   PARSE_ERROR,
                   ArgumentParseError,
                   InvalidCommand,
                   InvalidOption,
                   MissingArgument)


def get_calc_parser():
    args = {'verbose': False, 'a': 0, 'b': 0, 'nums': [], 'target': 0}
    add_spec = Spec([Positional('A', bind(args, 'a', int)),
                     Positional('B', bind(args, 'b', int))])
    sub_spec = Spec([Positional('A', bind(args, 'a', int)),
                     Positional('B', bind(args, 'b', int))])
    sum_spec = Spec([Option('verbose', bind(args, 'verbose'), char='v'),
                     Positional('NUMS', bind(args, 'nums', float), required=LIST)])
    int_spec = Spec([Command('is-odd', Spec([Positional('N', bind(args, 'target', int))]))])

    spec = Spec([Option('verbose', bind(args, 'verbose'), char='v', doc='print more'),
                 Command('add', add_spec, doc='add two integers'),
                 Command('sub', sub_spec, doc='subtract two integers'),
                 Command('sum', sum_spec, doc='sum any number of decimals'),
                 Command('int', int_spec, doc='integer utilities')],
                doc='a tiny calculator')
    return Parser(spec), args


def _run(res, args):
    "dispatch the way a caller would, on the selected command path"
    handlers = {('add',): lambda: args['a'] + args['b'],
                ('sub',): lambda: args['a'] - args['b'],
                ('sum',): lambda: sum(args['nums']),
                ('int', 'is-odd'): lambda: bool(args['target'] % 2)}
    return handlers[res.raise_for_error().subcmds]()


def test_calc_basic():
    prs, args = get_calc_parser()

    res = prs.parse(['add', '2', '3'])
    assert res.kind is COMMAND_SELECTED
    assert res.ok
    assert res.command == 'add'
    assert res.subcmds == ('add',)
    assert (args['a'], args['b']) == (2, 3)
    assert _run(res, args) == 5

    res = prs.parse(['sub', '2', '3'])
    assert _run(res, args) == -1

    res = prs.parse(['sum', '1.5', '2.5', '-v'])
    assert _run(res, args) == 4.0
    assert args['verbose'] is True


def test_calc_errors():
    prs, args = get_calc_parser()

    res = prs.parse(['mul', '2', '3'])
    assert res.kind is PARSE_ERROR
    assert res.error == InvalidCommand.from_parse('mul')
    assert res.error.message == "unrecognized command 'mul'"
    assert res.command is None

    res = prs.parse([])
    assert isinstance(res.error, MissingArgument)
    assert res.error.message == 'missing command'

    res = prs.parse(['-v'])
    assert res.error.message == 'missing command'

    # errors inside a command keep the command path for reporting
    res = prs.parse(['add', '1'])
    assert res.error.name == 'B'
    assert res.subcmds == ('add',)
    assert res.posargs_consumed == 1

    with pytest.raises(ArgumentParseError):
        _run(prs.parse(['add', 'one', 'two']), args)
    with pytest.raises(ArgumentParseError):
        _run(prs.parse(['add', '1', '2', '3']), args)

    with pytest.raises(TypeError):
        prs.parse(['int', 'is-odd', 3])  # fails bc 3 isn't a str


def test_calc_options_scoped_to_level():
    prs, args = get_calc_parser()

    # top-level options before the command
    assert prs.parse(['-v', 'add', '1', '2']).ok
    assert args['verbose'] is True

    # but not after, add doesn't declare --verbose
    res = prs.parse(['add', '1', '2', '--verbose'])
    assert isinstance(res.error, InvalidOption)
    assert res.subcmds == ('add',)


def test_calc_nested():
    prs, args = get_calc_parser()

    res = prs.parse(['int', 'is-odd', '3'])
    assert res.subcmds == ('int', 'is-odd')
    assert res.command == 'is-odd'
    assert _run(res, args) is True

    res = prs.parse(['int'])
    assert res.error == MissingArgument.from_parse('command')
    assert res.subcmds == ('int',)

    res = prs.parse(['int', 'is-even', '3'])
    assert isinstance(res.error, InvalidCommand)
    assert res.error.name == 'is-even'


def test_calc_command_names_exact():
    prs, args = get_calc_parser()
    assert isinstance(prs.parse(['ADD', '1', '2']).error, InvalidCommand)
    assert isinstance(prs.parse(['int', 'is_odd', '1']).error, InvalidCommand)


def test_calc_builtins():
    prs, args = get_calc_parser()

    res = prs.parse(['--help'])
    assert res.kind is BUILTIN_REQUESTED
    assert res.builtin == 'help'
    assert res.subcmds == ()

    res = prs.parse(['int', 'is-odd', '--help'])
    assert res.builtin == 'help'
    assert res.subcmds == ('int', 'is-odd')


def test_calc_positionals_beside_commands():
    args = {'top': None, 'a': 0}
    add_spec = Spec([Positional('A', bind(args, 'a', int))])
    spec = Spec([Command('add', add_spec),
                 Positional('TOP', bind(args, 'top'))])
    prs = Parser(spec)

    # the command's spec takes over, TOP is neither bound nor required
    res = prs.parse(['add', '1'])
    assert res.kind is COMMAND_SELECTED
    assert res.command == 'add'
    assert args['a'] == 1
    assert args['top'] is None

    # the first positional is never bound to TOP, it picks the command
    res = prs.parse(['hello'])
    assert res.error == InvalidCommand.from_parse('hello')
    assert args['top'] is None

    res = prs.parse([])
    assert res.error == MissingArgument.from_parse('command')
