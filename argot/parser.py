
from boltons.iterutils import unique

from argot.spec import Spec, LIST
from argot.tokens import (Scanner,
                          TERMINATOR,
                          POSITIONAL,
                          LETTERS,
                          WORD)
from argot.errors import (ParseResult,
                          SUCCESS,
                          COMMAND_SELECTED,
                          InvalidCommand,
                          InvalidOption,
                          InvalidValue,
                          MissingArgument,
                          ExtraneousArgument)


DEFAULT_BUILTINS = ('help', 'usage', 'version')


class _Cursor(object):
    "Per-call parse position. Created fresh by every Parser.parse()."
    def __init__(self, spec):
        self.subcmds = []
        self.force_positional = False
        self.enter(spec)

    def enter(self, spec):
        self.spec = spec
        self.positionals = spec.positionals
        self.next_positional = 0

    def select(self, command):
        # the rest of argv is parsed against the command's own spec
        self.subcmds.append(command.name)
        self.enter(command.spec)

    @property
    def expects_command(self):
        # with commands, the first positional token is always the
        # selector, even if the level declares positionals
        return self.spec.has_commands


class Parser(object):
    """The Parser drives a Scanner over argv, resolving each token
    against a :class:`Spec` and writing values through each entry's
    Binding.

    Args:
       spec (Spec): The specification to resolve arguments against.
       builtins (tuple): Long option keywords (without dashes) which
          stop parsing and are reported back as
          ``BUILTIN_REQUESTED``, for the caller to act on (e.g.,
          print help). Checked before regular option lookup.
          Defaults to ``('help', 'usage', 'version')``. Pass an empty
          tuple to disable.

    Once initialized, parsing is performed by calling
    :meth:`Parser.parse()` with the argument list, minus the program
    name. The same Parser and Spec can parse any number of argument
    lists, but bound values are not reset between calls.
    """
    def __init__(self, spec, builtins=DEFAULT_BUILTINS):
        if not isinstance(spec, Spec):
            raise TypeError('expected Spec instance, not: %r' % (spec,))
        builtins = tuple(builtins or ())
        for builtin in builtins:
            if not builtin or not isinstance(builtin, str):
                raise ValueError('expected builtins to be non-empty strings, not: %r' % (builtin,))
        self.spec = spec
        self.builtins = tuple(unique(builtins))
        self.last_posargs_consumed = 0

    def parse(self, args):
        """Parse a list of strings, returning a :class:`ParseResult`.

        Parsing is fail-fast: the first problem ends the parse and is
        returned as a ``PARSE_ERROR`` result. Values bound before the
        failure stay bound. No ArgumentParseError is raised, use
        :meth:`ParseResult.raise_for_error()` for that.

        Args:
           args (list): Strings to parse, *not* including the program
              name (i.e., ``sys.argv[1:]``).
        """
        if isinstance(args, str) or args is None:
            raise TypeError('expected a sequence of strings, not: %r' % (args,))
        args = list(args)
        for arg in args:
            if not isinstance(arg, str):
                raise TypeError('expected all arguments to be strings, not: %r' % (arg,))

        scanner = Scanner(args)
        cursor = _Cursor(self.spec)
        ret = None

        while ret is None and scanner.next():
            token = scanner.token
            if cursor.force_positional or token.kind is POSITIONAL:
                ret = self._handle_positional(cursor, token.raw)
            elif token.kind is TERMINATOR:
                cursor.force_positional = True
            else:
                ret = self._handle_option(cursor, scanner)

        if ret is None:
            ret = self._check_required(cursor)

        self.last_posargs_consumed = cursor.next_positional
        if isinstance(ret, ParseResult):
            return ret
        if ret is not None:
            return ParseResult.from_error(ret, **self._result_kw(cursor))
        kind = COMMAND_SELECTED if cursor.subcmds else SUCCESS
        return ParseResult(kind, **self._result_kw(cursor))

    def _result_kw(self, cursor):
        return {'subcmds': cursor.subcmds,
                'posargs_consumed': cursor.next_positional}

    def _handle_positional(self, cursor, text):
        if cursor.expects_command:
            command = cursor.spec.find_command(text)
            if command is None:
                return InvalidCommand.from_parse(text)
            cursor.select(command)
            return None

        positionals = cursor.positionals
        if cursor.next_positional >= len(positionals):
            return ExtraneousArgument.from_parse(text)
        posarg = positionals[cursor.next_positional]
        if posarg.required is not LIST:
            # lists stay put and collect the rest
            cursor.next_positional += 1

        if not posarg.bind.assign(text):
            return InvalidValue.from_parse(posarg.name, text)
        return None

    def _handle_option(self, cursor, scanner):
        option_kind = scanner.token.option_kind
        if option_kind is LETTERS:
            return self._handle_letters(cursor, scanner)
        elif option_kind is WORD:
            return self._handle_word(cursor, scanner)
        raise ValueError('unexpected option kind: %r' % (option_kind,))

    def _handle_letters(self, cursor, scanner):
        if not scanner.token.key:
            return InvalidOption.from_parse('', is_letter=True)
        for letter, is_last in scanner.iter_letters():
            option = cursor.spec.find_char(letter)
            if option is None:
                return InvalidOption.from_parse(letter, is_letter=True)
            if is_last:
                return self._resolve_value(scanner, option, letter)
            if not option.is_flag:
                # no way to attach a value mid-cluster
                return MissingArgument.from_option(letter, option.display_name)
            option.bind.assign(None)
        return None

    def _handle_word(self, cursor, scanner):
        key = scanner.token.key
        if key in self.builtins:
            return ParseResult.from_builtin(key, **self._result_kw(cursor))
        option = cursor.spec.find_word(key) if key else None
        if option is None:
            return InvalidOption.from_parse(key)
        return self._resolve_value(scanner, option, key)

    def _resolve_value(self, scanner, option, key):
        value = scanner.token.value
        if value is None and not option.is_flag:
            # only a plain positional can be a value, never an option or '--'
            if scanner.peek_kind() is not POSITIONAL:
                return MissingArgument.from_option(key, option.display_name)
            scanner.next()
            value = scanner.token.raw

        if not option.bind.assign(value):
            return InvalidValue.from_parse(option.display_name, value, key=key)
        return None

    def _check_required(self, cursor):
        if cursor.expects_command:
            return MissingArgument.from_parse('command')
        for posarg in cursor.positionals[cursor.next_positional:]:
            if posarg.is_required:
                return MissingArgument.from_parse(posarg.name)
        return None


def parse(spec, args, builtins=DEFAULT_BUILTINS):
    """Parse *args* against *spec* in one go. See :class:`Parser` for
    details on arguments and the returned :class:`ParseResult`.
    """
    return Parser(spec, builtins=builtins).parse(args)
