
from boltons.typeutils import make_sentinel
from boltons.funcutils import format_nonexp_repr


SUCCESS = make_sentinel('SUCCESS', var_name='SUCCESS')
PARSE_ERROR = make_sentinel('PARSE_ERROR', var_name='PARSE_ERROR')
BUILTIN_REQUESTED = make_sentinel('BUILTIN_REQUESTED', var_name='BUILTIN_REQUESTED')
COMMAND_SELECTED = make_sentinel('COMMAND_SELECTED', var_name='COMMAND_SELECTED')


class ArgotException(Exception):
    """The basest base exception argot has. Rarely directly instantiated
    if ever, but useful for catching.
    """
    pass


class ArgumentParseError(ArgotException):
    """A base exception used for all errors produced during argument
    parsing.

    The Parser does not raise these, it returns them inside a
    :class:`ParseResult`. Each subtype has a ``.from_parse()``
    classmethod that creates the one-line diagnostic from the values
    available during the parse process, and keeps those values as
    attributes (``key``, ``name``, ``value``) for custom rendering.
    """
    show_help_hint = True

    def __init__(self, msg, key=None, name=None, value=None):
        super(ArgumentParseError, self).__init__(msg)
        self.key = key
        self.name = name
        self.value = value

    @property
    def message(self):
        return self.args[0] if self.args else ''

    def __eq__(self, other):
        return (type(self) is type(other)
                and self.args == other.args
                and (self.key, self.name, self.value) == (other.key, other.name, other.value))

    def __ne__(self, other):
        return not self == other

    __hash__ = Exception.__hash__


class InvalidCommand(ArgumentParseError):
    """
    Produced when the first positional token at a level with commands
    does not name one of them.
    """
    @classmethod
    def from_parse(cls, name):
        return cls("unrecognized command '%s'" % name, key=name, name=name)


class InvalidOption(ArgumentParseError):
    """
    Produced when an option key matches no Option in the active Spec.
    """
    @classmethod
    def from_parse(cls, key, is_letter=False):
        if is_letter:
            msg = "invalid option -- '%s'" % key
        else:
            msg = "unrecognized option '--%s'" % key
        return cls(msg, key=key, name=key)


class InvalidValue(ArgumentParseError):
    """Produced when a value fails its Binding's conversion, e.g., "3.14x"
    for a float. No "try --help" hint accompanies it, as help does not
    document value syntax.
    """
    show_help_hint = False

    @classmethod
    def from_parse(cls, name, value, key=None):
        return cls("invalid %s: '%s'" % (name, value), key=key, name=name, value=value)


class MissingArgument(ArgumentParseError):
    """Produced when an option requires a value that was not supplied,
    when a required positional was never filled, or when a command was
    expected but none was given.
    """
    @classmethod
    def from_parse(cls, name):
        return cls('missing %s' % name, name=name)

    @classmethod
    def from_option(cls, key, name=None):
        if len(key) == 1:
            msg = "option requires an argument -- '%s'" % key
        else:
            msg = "option '%s' requires an argument" % key
        return cls(msg, key=key, name=name if name is not None else key)


class ExtraneousArgument(ArgumentParseError):
    """
    Produced when a positional token arrives after every Positional has
    been filled and there is no trailing list to collect it.
    """
    @classmethod
    def from_parse(cls, value):
        return cls("extraneous argument '%s'" % value, value=value)


class ParseResult(object):
    """The result of :meth:`Parser.parse`. Exactly one of four kinds:

    * ``SUCCESS``: every token bound, all required values present.
    * ``COMMAND_SELECTED``: as success, with the selected command name
      in *command*, so that the caller can dispatch.
    * ``BUILTIN_REQUESTED``: a builtin keyword (e.g., ``--help``) was
      seen and parsing stopped there. Not an error, but the command
      body should not run.
    * ``PARSE_ERROR``: parsing stopped at the first failure, carried
      in *error*.

    Args:
       kind: One of the sentinels above.
       error (ArgumentParseError): The failure, for ``PARSE_ERROR``.
       builtin (str): The builtin keyword, for ``BUILTIN_REQUESTED``.
       subcmds (tuple): Names of the commands selected, outermost
          first. Also set when parsing stops inside a command, so
          diagnostics can name it.
       posargs_consumed (int): How many declared positionals were
          consumed at the active level when parsing stopped.
    """
    def __init__(self, kind, error=None, builtin=None, subcmds=(),
                 posargs_consumed=0):
        self.kind = kind
        self.error = error
        self.builtin = builtin
        self.subcmds = tuple(subcmds)
        self.posargs_consumed = posargs_consumed

    @property
    def command(self):
        "The innermost selected command name, or None."
        return self.subcmds[-1] if self.subcmds else None

    @classmethod
    def from_error(cls, error, **kw):
        return cls(PARSE_ERROR, error=error, **kw)

    @classmethod
    def from_builtin(cls, name, **kw):
        return cls(BUILTIN_REQUESTED, builtin=name, **kw)

    @property
    def ok(self):
        "True when the caller should go on to execute the command body."
        return self.kind is SUCCESS or self.kind is COMMAND_SELECTED

    @property
    def early_return(self):
        return not self.ok

    def raise_for_error(self):
        """Raise the carried ArgumentParseError, if any. Returns self
        otherwise, for chaining."""
        if self.error is not None:
            raise self.error
        return self

    def __eq__(self, other):
        if not isinstance(other, ParseResult):
            return NotImplemented
        return ((self.kind, self.error, self.builtin, self.subcmds)
                == (other.kind, other.error, other.builtin, other.subcmds))

    def __ne__(self, other):
        ret = self.__eq__(other)
        return ret if ret is NotImplemented else not ret

    __hash__ = None

    def __repr__(self):
        return format_nonexp_repr(self, ['kind'], ['error', 'builtin', 'subcmds'],
                                  opt_key=lambda v: not v)
