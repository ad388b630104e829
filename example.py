"""A small multiplication program showing the full argot round trip:
declare, bind, parse, then act on the result.

  $ python example.py 3 4
  3 x 4 = 12
"""

import sys

from argot import (Spec,
                   Option,
                   Positional,
                   Parser,
                   bind,
                   HelpFormatter,
                   format_result_error,
                   get_exe_name,
                   PARSE_ERROR)


__version__ = '1.0.0'


class MulArgs(object):
    debug = False
    symbol = 'x'
    num_0 = 0
    num_1 = 0


def get_spec(args):
    return Spec([Option('debug', bind(args, 'debug'), char='d', doc='print all parameters'),
                 Option('symbol', bind(args, 'symbol'), char='s', doc='multiplication symbol'),
                 Positional('NUM_0', bind(args, 'num_0'), doc='integer 0'),
                 Positional('NUM_1', bind(args, 'num_1'), doc='integer 1')],
                doc='multiply two integers')


def main(argv=None):
    argv = sys.argv if argv is None else argv
    exe_name = get_exe_name(argv[0] if argv else None)
    args = MulArgs()
    spec = get_spec(args)
    prs = Parser(spec)

    res = prs.parse(argv[1:])
    if res.kind is PARSE_ERROR:
        print(format_result_error(res, exe_name), file=sys.stderr)
        return 1
    if res.builtin == 'version':
        print('%s %s' % (exe_name, __version__))
        return 0
    if res.builtin:
        helper = HelpFormatter(builtins=prs.builtins)
        if res.builtin == 'usage':
            print(helper.get_usage_text(spec, exe_name))
        else:
            print(helper.get_help_text(spec, exe_name), end='')
        return 0

    if args.debug:
        print('debug=%r symbol=%r num_0=%r num_1=%r'
              % (args.debug, args.symbol, args.num_0, args.num_1))
    print('%s %s %s = %s' % (args.num_0, args.symbol, args.num_1, args.num_0 * args.num_1))
    return 0


if __name__ == '__main__':
    sys.exit(main())
