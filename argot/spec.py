
from boltons.typeutils import make_sentinel
from boltons.funcutils import format_nonexp_repr

from argot.binding import Binding, ListBinding
from argot.utils import (process_char,
                         process_option_name,
                         process_command_name)


REQUIRED = make_sentinel('REQUIRED', var_name='REQUIRED')
OPTIONAL = make_sentinel('OPTIONAL', var_name='OPTIONAL')
LIST = make_sentinel('LIST', var_name='LIST')

_REQUIREDNESS = (REQUIRED, OPTIONAL, LIST)


def _check_binding(bind):
    if not isinstance(bind, Binding):
        raise TypeError('expected Binding instance for bind, not: %r' % (bind,))
    return bind


class Option(object):
    """An argument identified by a key, either a long word
    (``--debug``), a short char (``-d``), or both.

    Args:
       name (str): The long key, with or without leading dashes.
          Letters, digits, '-', and '_', starting with a letter.
       bind (Binding): Where the option's value goes. ``bool``
          bindings make the option a flag, which takes no value
          unless one is attached with '='.
       char (str): A single-character short key, optionally prefixed
          by a dash. Defaults to None.
       doc (str): A summary of the option, used in help output.
       display_name (str): The name used in diagnostics such as
          ``invalid level: 'x'``. Defaults to the long key, else the
          char.

    One of *name* or *char* is required.
    """
    def __init__(self, name=None, bind=None, char=None, doc=None, display_name=None):
        if name is None and char is None:
            raise ValueError('expected option name, char, or both, not neither')
        self.name = process_option_name(name) if name is not None else None
        self.char = process_char(char) if char is not None else None
        self.bind = _check_binding(bind)
        self.doc = doc or ''
        self.display_name = display_name or self.name or self.char

    @property
    def is_flag(self):
        return self.bind.is_flag

    def __repr__(self):
        return format_nonexp_repr(self, ['name'], ['char', 'bind'])


class Positional(object):
    """An argument identified by its position among the positional
    tokens.

    Args:
       name (str): The display name, e.g., ``NUM_0``.
       bind (Binding): Where the value goes.
       required: ``REQUIRED`` (the default), ``OPTIONAL``, or ``LIST``.
          ``OPTIONAL`` and ``LIST`` positionals are trailing
          collectors: nothing may be declared after them. ``LIST``
          takes a ListBinding and accepts zero or more values.
       doc (str): A summary, used in help output.
    """
    def __init__(self, name, bind, required=REQUIRED, doc=None):
        if not name or not isinstance(name, str):
            raise ValueError('expected non-zero length string for positional name, not: %r' % (name,))
        if required not in _REQUIREDNESS:
            raise ValueError('expected required to be one of REQUIRED, OPTIONAL,'
                             ' or LIST, not: %r' % (required,))
        bind = _check_binding(bind)
        is_list = isinstance(bind, ListBinding)
        if (required is LIST) != is_list:
            raise TypeError('LIST positionals require a ListBinding, and only'
                            ' they may have one (%r got %r)' % (name, bind))
        self.name = name
        self.bind = bind
        self.required = required
        self.doc = doc or ''

    @property
    def display_name(self):
        return self.name

    @property
    def is_required(self):
        return self.required is REQUIRED

    @property
    def is_collector(self):
        return self.required is not REQUIRED

    def __repr__(self):
        return format_nonexp_repr(self, ['name', 'required'])


class Command(object):
    """A named subcommand, owning the Spec its arguments are parsed
    with once it is selected.

    Args:
       name (str): Matched exactly against the first positional token.
       spec (Spec): The nested specification. Defaults to an empty Spec.
       doc (str): A summary, used in help output.
    """
    def __init__(self, name, spec=None, doc=None):
        self.name = process_command_name(name)
        if spec is None:
            spec = Spec()
        elif not isinstance(spec, Spec):
            raise TypeError('expected Spec instance for spec, not: %r' % (spec,))
        self.spec = spec
        self.doc = doc or ''

    def __repr__(self):
        return format_nonexp_repr(self, ['name'])


class Spec(object):
    """The declarative, ordered table of Options, Positionals, and
    Commands a Parser resolves argv against.

    Args:
       entries (list): Option, Positional, and Command instances.
          Optional, as entries can be added with :meth:`Spec.add()`.
       doc (str): A description, used as the first line of help output.
       epilogue (str): Text appended to help output.

    Entries are validated as they are added, and a ValueError is
    raised on duplicate keys or names, and on positionals declared
    after a trailing collector.

    A Spec with Commands always reads its first positional token as
    a command name. Positionals declared alongside Commands are legal,
    but are never filled, as parsing continues in the selected
    Command's Spec.

    Build a Spec once, before parsing. It is not modified during
    parsing and can be reused across parse calls.
    """
    def __init__(self, entries=None, doc=None, epilogue=None):
        self.doc = doc or ''
        self.epilogue = epilogue or ''
        self.entries = []
        self._char_map = {}
        self._word_map = {}
        self._cmd_map = {}
        for entry in (entries or []):
            self.add(entry)

    def add(self, entry):
        """Add an Option, Positional, or Command, checking it for
        conflicts with what is already present. Returns the entry.
        """
        if isinstance(entry, Option):
            self._add_option(entry)
        elif isinstance(entry, Positional):
            self._add_positional(entry)
        elif isinstance(entry, Command):
            self._add_command(entry)
        else:
            raise TypeError('expected Option, Positional, or Command, not: %r' % (entry,))
        self.entries.append(entry)
        return entry

    def _add_option(self, option):
        if option.name is not None and option.name in self._word_map:
            raise ValueError('duplicate definition for option name: %r' % option.name)
        if option.char is not None and option.char in self._char_map:
            raise ValueError('conflicting short form for option %r: %r'
                             % (option.display_name, option.char))
        if option.name is not None:
            self._word_map[option.name] = option
        if option.char is not None:
            self._char_map[option.char] = option

    def _add_positional(self, positional):
        trailing = self.trailing_collector
        if trailing is not None:
            raise ValueError('cannot add positional %r after trailing %r'
                             % (positional.name, trailing.name))

    def _add_command(self, command):
        if command.name in self._cmd_map:
            raise ValueError('conflicting command name: %r' % command.name)
        self._cmd_map[command.name] = command

    @property
    def options(self):
        return [e for e in self.entries if isinstance(e, Option)]

    @property
    def positionals(self):
        return [e for e in self.entries if isinstance(e, Positional)]

    @property
    def commands(self):
        return [e for e in self.entries if isinstance(e, Command)]

    @property
    def has_commands(self):
        return bool(self._cmd_map)

    @property
    def trailing_collector(self):
        "The trailing OPTIONAL or LIST Positional, if one was declared."
        positionals = self.positionals
        if positionals and positionals[-1].is_collector:
            return positionals[-1]
        return None

    def find_char(self, char):
        return self._char_map.get(char)

    def find_word(self, word):
        return self._word_map.get(word)

    def find_command(self, name):
        return self._cmd_map.get(name)

    def __repr__(self):
        cn = self.__class__.__name__
        return '<%s options=%r positionals=%r commands=%r>' % (
            cn,
            [o.display_name for o in self.options],
            [p.name for p in self.positionals],
            [c.name for c in self.commands])
