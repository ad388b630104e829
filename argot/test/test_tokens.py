import pytest

from argot import (Scanner,
                   to_token,
                   TERMINATOR,
                   OPTION,
                   POSITIONAL,
                   LETTERS,
                   WORD)


@pytest.mark.parametrize(
    "raw, kind, option_kind, key, value",
    [('--', TERMINATOR, None, None, None),
     ('--verbose', OPTION, WORD, 'verbose', None),
     ('--level=3', OPTION, WORD, 'level', '3'),
     ('--expr=a=b', OPTION, WORD, 'expr', 'a=b'),
     ('--name=', OPTION, WORD, 'name', ''),
     ('--=x', OPTION, WORD, '', 'x'),
     ('---', OPTION, WORD, '-', None),
     ('-v', OPTION, LETTERS, 'v', None),
     ('-ftx=5', OPTION, LETTERS, 'ftx', '5'),
     ('-', POSITIONAL, None, None, '-'),
     ('', POSITIONAL, None, None, ''),
     ('file.txt', POSITIONAL, None, None, 'file.txt'),
     ('a-b', POSITIONAL, None, None, 'a-b')])
def test_to_token(raw, kind, option_kind, key, value):
    token = to_token(raw)
    assert token.raw == raw
    assert token.kind is kind
    assert token.option_kind is option_kind
    assert token.key == key
    assert token.value == value
    assert repr(token)


def test_scanner_next_and_peek():
    scanner = Scanner(['-d', 'x', '--', '--name'])
    assert scanner.token is None
    assert scanner.peek_kind() is OPTION

    assert scanner.next()
    assert scanner.token.raw == '-d'
    assert scanner.peek_kind() is POSITIONAL
    assert scanner.remaining == ['x', '--', '--name']

    assert scanner.next()
    assert scanner.peek_kind() is TERMINATOR
    assert scanner.next()
    assert scanner.peek_kind() is OPTION
    assert scanner.next()
    assert scanner.peek_kind() is None

    assert not scanner.next()
    assert scanner.token is None
    assert not scanner.next()
    assert scanner.remaining == []


def test_scanner_empty():
    scanner = Scanner([])
    assert scanner.peek_kind() is None
    assert not scanner.next()


def test_iter_letters():
    scanner = Scanner(['-ftx=5'])
    scanner.next()
    assert list(scanner.iter_letters()) == [('f', False), ('t', False), ('x', True)]
    assert scanner.token.value == '5'

    scanner = Scanner(['-v'])
    scanner.next()
    assert list(scanner.iter_letters()) == [('v', True)]


def test_iter_letters_requires_letters():
    scanner = Scanner(['--verbose'])
    scanner.next()
    with pytest.raises(ValueError):
        list(scanner.iter_letters())
