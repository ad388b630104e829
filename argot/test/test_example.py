"""Covers the demo program in example.py. example.py is not part of the
installed package, so this module imports it from the source root and
is meant to be run from a checkout (pytest adds the root to sys.path,
as argot/ and argot/test/ are packages).
"""
import pytest

import example


@pytest.mark.parametrize(
    "argv, exit_code, out_contains, err_contains",
    [(['mul', '3', '4'], 0, '3 x 4 = 12', ''),
     (['mul', '-s', '*', '3', '4'], 0, '3 * 4 = 12', ''),
     (['mul', '-d', '3', '4'], 0, 'debug=True', ''),
     (['mul', '--version'], 0, 'mul 1.0.0', ''),
     (['mul', '--usage'], 0, '[-d|--debug(=false)]', ''),
     (['mul', '--help'], 0, 'multiply two integers', ''),
     (['mul', '3'], 1, '', 'mul: missing NUM_1'),
     (['mul', '3', '4', '5'], 1, '', "Try 'mul --help'"),
     (['mul', 'three', '4'], 1, '', "invalid NUM_0: 'three'")])
def test_example_main(argv, exit_code, out_contains, err_contains, capsys):
    assert example.main(argv) == exit_code
    out, err = capsys.readouterr()
    assert out_contains in out
    assert err_contains in err
