"""Rendering for the caller's side of a parse: one-line diagnostics for
parse errors, and usage/help text for builtin requests. Nothing here
performs I/O, the caller decides where the text goes.
"""
import os
import sys
import array
import textwrap

from argot.spec import REQUIRED, OPTIONAL
from argot.utils import format_key_label


BUILTIN_DOCS = {'help': 'display this help and exit',
                'usage': 'display usage',
                'version': 'output version information and exit'}


def get_winsize():
    "(rows, columns) of the terminal on stdout, or (None, None)"
    try:
        import fcntl
        import termios
        winsize = array.array('H', [0, 0, 0, 0])
        fcntl.ioctl(sys.stdout, termios.TIOCGWINSZ, winsize)
        return winsize[0], winsize[1]
    except (ImportError, AttributeError, TypeError, ValueError, OSError):
        pass
    # ROWS/COLUMNS are shell variables, not always exported
    try:
        return int(os.environ['ROWS']), int(os.environ['COLUMNS'])
    except (KeyError, ValueError):
        return None, None


def get_layout(labels, indent, sep, width=None, max_width=120, min_doc_width=40):
    """Column positions for a label/doc section. Docs start right after
    the longest label, unless that would leave them less than
    *min_doc_width* columns, in which case labels too long for the
    label column get a line to themselves.
    """
    if width is None:
        width = min(get_winsize()[1] or 80, max_width) - 2

    label_width = max([len(label) for label in labels] or [0])
    doc_start = len(indent) + label_width + len(sep)
    if doc_start + min_doc_width >= width:
        doc_start = max(width - min_doc_width, len(indent) + len(sep))

    return {'width': width,
            'label_width': label_width,
            'doc_width': max(width - doc_start, 1),
            'doc_start': doc_start}


def _format_pair(indent, label, sep, doc, doc_start, doc_width):
    lhs = indent + label
    doc_lines = textwrap.wrap(doc, doc_width) if doc else []
    if not doc_lines:
        return [lhs]

    pad = ' ' * doc_start
    if len(lhs) + len(sep) > doc_start:
        return [lhs] + [pad + line for line in doc_lines]
    first = lhs.ljust(doc_start - len(sep)) + sep + doc_lines[0]
    return [first] + [pad + line for line in doc_lines[1:]]


def get_program_label(exe_name, subcmds=()):
    "``calc add``, the prefix shared by diagnostics and usage lines"
    return ' '.join((exe_name,) + tuple(subcmds or ()))


def format_error(error, exe_name, subcmds=()):
    """Format an ArgumentParseError the way command-line tools
    conventionally report it::

      calc add: missing NUM_1
      Try 'calc add --help' for more information.

    The "Try" line is left off for errors that set
    ``show_help_hint`` to False (i.e., InvalidValue), since help does
    not document value syntax.
    """
    prog = get_program_label(exe_name, subcmds)
    lines = ['%s: %s' % (prog, error.message)]
    if error.show_help_hint:
        lines.append("Try '%s --help' for more information." % prog)
    return '\n'.join(lines)


def format_result_error(result, exe_name):
    "Like format_error(), but takes a ParseResult. Returns '' on no error."
    if result.error is None:
        return ''
    return format_error(result.error, exe_name, result.subcmds)


def format_posarg_label(posarg):
    if posarg.required is REQUIRED:
        return '<%s>' % posarg.name
    if posarg.required is OPTIONAL:
        return '[%s]' % posarg.name
    return '[%s...]' % posarg.name


def format_option_label(option):
    "The default option label, used in help output"
    return format_key_label(option.char, option.name)


class HelpFormatter(object):
    """Builds usage and help text for a :class:`Spec`. All layout
    settings can be overridden by keyword argument, see
    ``default_context`` for the available keys.

    Args:
       builtins (tuple): Builtin keywords to list alongside options,
          usually the same ones passed to the Parser.
    """
    default_context = {
        'usage_label': 'Usage:',
        'options_section_heading': 'OPTIONS',
        'arguments_section_heading': 'ARGUMENTS',
        'commands_section_heading': 'COMMANDS',
        'options_placeholder': '[OPTION...]',
        'command_placeholder': '<COMMAND>',
        'section_break': '',
        'width': None,
        'max_width': 120,
        'min_doc_width': 40,
        'doc_separator': '    ',
        'section_indent': '  ',
    }

    def __init__(self, builtins=(), **kwargs):
        ctx = {}
        for key, val in self.default_context.items():
            ctx[key] = kwargs.pop(key, val)
        if kwargs:
            raise TypeError('unexpected keyword arguments: %r' % sorted(kwargs.keys()))
        self.ctx = ctx
        self.builtins = tuple(builtins or ())

    def _get_layout(self, labels):
        ctx = self.ctx
        return get_layout(labels=labels,
                          indent=ctx['section_indent'],
                          sep=ctx['doc_separator'],
                          width=ctx['width'],
                          max_width=ctx['max_width'],
                          min_doc_width=ctx['min_doc_width'])

    def _get_section(self, heading, pairs):
        ctx = self.ctx
        layout = self._get_layout([label for label, _ in pairs])
        ret = [ctx['section_break'], heading]
        for label, doc in pairs:
            ret.extend(_format_pair(indent=ctx['section_indent'],
                                    label=label,
                                    sep=ctx['doc_separator'],
                                    doc=doc,
                                    doc_start=layout['doc_start'],
                                    doc_width=layout['doc_width']))
        return ret

    def get_usage_line(self, spec, exe_name, subcmds=()):
        """The one-line synopsis at the top of help output::

          Usage: calc [OPTION...] <NUM_0> <NUM_1>
        """
        ctx = self.ctx
        parts = [ctx['usage_label']] if ctx['usage_label'] else []
        parts.append(get_program_label(exe_name, subcmds))
        if spec.options:
            parts.append(ctx['options_placeholder'])
        if spec.has_commands:
            parts.append(ctx['command_placeholder'])
        parts.extend([format_posarg_label(p) for p in spec.positionals])
        return ' '.join(parts)

    def get_usage_text(self, spec, exe_name, subcmds=()):
        """The compact usage listing each option with its current
        value, as rendered by its Binding::

          Usage: mul [-d|--debug(=false)] [-s|--symbol(="x")] <NUM_0> <NUM_1>
        """
        ctx = self.ctx
        parts = [ctx['usage_label']] if ctx['usage_label'] else []
        parts.append(get_program_label(exe_name, subcmds))
        for option in spec.options:
            key_label = format_key_label(option.char, option.name, sep='|')
            parts.append('[%s(=%s)]' % (key_label, option.bind.default_repr()))
        if spec.has_commands:
            parts.append(ctx['command_placeholder'])
        parts.extend([format_posarg_label(p) for p in spec.positionals])
        return ' '.join(parts)

    def get_help_text(self, spec, exe_name, subcmds=()):
        ret = []
        if spec.doc:
            ret.append(spec.doc)
        ret.append(self.get_usage_line(spec, exe_name, subcmds))

        option_pairs = [(format_option_label(o), o.doc) for o in spec.options]
        option_pairs.extend([(format_key_label(word=b), BUILTIN_DOCS.get(b, ''))
                             for b in self.builtins])
        if option_pairs:
            ret.extend(self._get_section(self.ctx['options_section_heading'], option_pairs))

        posarg_pairs = [(p.name, p.doc) for p in spec.positionals if p.doc]
        if posarg_pairs:
            ret.extend(self._get_section(self.ctx['arguments_section_heading'], posarg_pairs))

        if spec.commands:
            command_pairs = [(c.name, c.doc) for c in spec.commands]
            ret.extend(self._get_section(self.ctx['commands_section_heading'], command_pairs))

        if spec.epilogue:
            ret.append(self.ctx['section_break'])
            ret.append(spec.epilogue)

        return '\n'.join(ret) + '\n'
