import re
import os.path


# keep it just to subset of valid ASCII identifiers for now
VALID_NAME_RE = re.compile(r"^[A-Za-z][-_A-Za-z0-9]*\Z")

VALID_CHARS = 'abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789!*+./?@_'


def process_option_name(name):
    """Validate an Option's long key, stripping up to two leading
    dashes. Unlike command names, the result is not normalized:
    lookup against argv is exact.

    Valid input strings include only letters, numbers, '-', and/or
    '_', must begin with a letter and may not end with a dash or
    underscore.
    """
    orig_name = name
    if not name or not isinstance(name, str):
        raise ValueError('expected non-zero length string for option name, not: %r' % (name,))

    if name.endswith('-') or name.endswith('_'):
        raise ValueError('expected option name without trailing dashes'
                         ' or underscores, not: %r' % orig_name)

    if name[:2] == '--':
        name = name[2:]

    if not VALID_NAME_RE.match(name):
        raise ValueError('valid option names must begin with a letter, optionally'
                         ' prefixed by two dashes, and consist only of letters,'
                         ' digits, underscores, and dashes, not: %r' % orig_name)
    if len(name) < 2:
        raise ValueError('single-character option names should be passed'
                         ' as char, not: %r' % orig_name)
    return name


def process_char(char):
    orig_char = char
    if not char or not isinstance(char, str):
        raise ValueError('expected non-zero length string for char, not: %r' % (char,))
    if char[0] == '-' and len(char) > 1:
        char = char[1:]
    if len(char) > 1:
        raise ValueError('char options must be exactly one character, optionally'
                         ' prefixed by a dash, not: %r' % orig_char)
    if char not in VALID_CHARS:
        raise ValueError('expected valid option character (ASCII letters, numbers,'
                         ' or shell-compatible punctuation), not: %r' % orig_char)
    return char


def process_command_name(name):
    """Validate a Command's name on construction. Like
    ``process_option_name()``, only letters, numbers, '-', and/or
    '_'. Must begin with a letter, and no trailing underscores or
    dashes.

    Command names are matched exactly against argv, so no
    normalization is performed.
    """
    if not name or not isinstance(name, str):
        raise ValueError('expected non-zero length string for command name, not: %r' % (name,))

    if name.endswith('-') or name.endswith('_'):
        raise ValueError('expected command name without trailing dashes'
                         ' or underscores, not: %r' % name)

    if not VALID_NAME_RE.match(name):
        raise ValueError('valid command name must begin with a letter, and'
                         ' consist only of letters, digits, underscores, and'
                         ' dashes, not: %r' % name)
    return name


def get_exe_name(arg0, default='<app>'):
    """Turn ``sys.argv[0]`` into the short program name used to prefix
    diagnostics, e.g., ``/usr/local/bin/calc`` -> ``calc``.
    """
    if not arg0:
        return default
    return os.path.basename(arg0.replace('\\', '/')) or default


def format_key_label(char=None, word=None, sep=', '):
    "The default option key label, used in help and usage output"
    parts = []
    if char:
        parts.append('-' + char)
    if word:
        parts.append('--' + word)
    return sep.join(parts)
