from argot.tokens import (Token,
                          Scanner,
                          to_token,
                          TERMINATOR,
                          OPTION,
                          POSITIONAL,
                          LETTERS,
                          WORD)

from argot.binding import Binding, ListBinding, bind

from argot.spec import (Spec,
                        Option,
                        Positional,
                        Command,
                        REQUIRED,
                        OPTIONAL,
                        LIST)

from argot.errors import (ArgotException,
                          ArgumentParseError,
                          InvalidCommand,
                          InvalidOption,
                          InvalidValue,
                          MissingArgument,
                          ExtraneousArgument,
                          ParseResult,
                          SUCCESS,
                          PARSE_ERROR,
                          BUILTIN_REQUESTED,
                          COMMAND_SELECTED)

from argot.parser import Parser, parse, DEFAULT_BUILTINS
from argot.helpers import HelpFormatter, format_error, format_result_error
from argot.utils import get_exe_name
