"""Lexical classification of argv elements.

The grammar is small and exact::

  --                 terminator
  --KEY[=VALUE]      word option (KEY may be empty, which the Parser rejects)
  -LETTERS[=VALUE]   letters option, VALUE belongs to the last letter
  anything else      positional (including '-' and '')

"""

from boltons.typeutils import make_sentinel
from boltons.funcutils import format_exp_repr


TERMINATOR = make_sentinel('TERMINATOR', var_name='TERMINATOR')
OPTION = make_sentinel('OPTION', var_name='OPTION')
POSITIONAL = make_sentinel('POSITIONAL', var_name='POSITIONAL')

LETTERS = make_sentinel('LETTERS', var_name='LETTERS')
WORD = make_sentinel('WORD', var_name='WORD')


class Token(object):
    """One classified argv element.

    Args:
       raw (str): The argument exactly as passed.
       kind: ``TERMINATOR``, ``OPTION`` or ``POSITIONAL``.
       option_kind: ``LETTERS`` or ``WORD`` for options, else None.
       key (str): For options, the text after the dashes up to any '='.
       value (str): For options, the text after the first '=', or None
          if no '=' was present. For positionals, the raw text.
    """
    def __init__(self, raw, kind, option_kind=None, key=None, value=None):
        self.raw = raw
        self.kind = kind
        self.option_kind = option_kind
        self.key = key
        self.value = value

    def __repr__(self):
        return format_exp_repr(self, ['raw'], opt_names=['kind', 'option_kind', 'key', 'value'])


def to_token(raw):
    if raw == '--':
        return Token(raw, TERMINATOR)
    if raw.startswith('-') and len(raw) > 1:
        if raw.startswith('--'):
            option_kind, body = WORD, raw[2:]
        else:
            option_kind, body = LETTERS, raw[1:]
        key, sep, value = body.partition('=')
        return Token(raw, OPTION, option_kind, key, value if sep else None)
    return Token(raw, POSITIONAL, value=raw)


class Scanner(object):
    """Walks an argument slice one Token at a time, for the lifetime of
    a single parse call.

    Starts positioned before the first argument; call :meth:`next`
    to advance.
    """
    def __init__(self, args):
        self.args = list(args)
        self.index = -1
        self.token = None

    def next(self):
        "Advance to the next argument. Returns False at end of input."
        if self.index + 1 >= len(self.args):
            self.index = len(self.args)
            self.token = None
            return False
        self.index += 1
        self.token = to_token(self.args[self.index])
        return True

    def peek_kind(self):
        """The kind of the next unconsumed argument, without
        advancing. None at end of input."""
        next_index = self.index + 1
        if next_index >= len(self.args):
            return None
        return to_token(self.args[next_index]).kind

    def iter_letters(self):
        """Yield ``(letter, is_last)`` pairs for the current letters
        cluster. For ``-ftx=5``, yields f, t, then x marked last; the
        5 is the current token's value.
        """
        token = self.token
        if token is None or token.option_kind is not LETTERS:
            raise ValueError('expected current token to be a letters option, not: %r' % (token,))
        letters = token.key
        last_index = len(letters) - 1
        for i, letter in enumerate(letters):
            yield letter, i == last_index

    @property
    def remaining(self):
        "The arguments not yet consumed."
        return self.args[self.index + 1:]

    def __repr__(self):
        cn = self.__class__.__name__
        return '<%s index=%r args=%r>' % (cn, self.index, self.args)
