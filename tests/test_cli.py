'''
Command line interface tests
'''

import io
import sys

from devcalc.cli import format_step
from devcalc.evaluator import Step
from devcalc.number import Number, NumberBase
from devcalc.operators import Operator

from pytest import raises


def test_single_literal(cli, capsys):
    assert cli.run(args=['42', '--base', 'hex']) == 0
    out, err = capsys.readouterr()
    assert out == '\nResult: 0x2A\n'
    assert err == ''


def test_steps(cli, capsys):
    assert cli.run(args=['2 + 3 << 1']) == 0
    out, _ = capsys.readouterr()
    assert out.splitlines() == [
        'Executing: 2 + 3 << 1',
        '',
        '0b10 + 0b11 = 0b101 (2 + 3 = 5)',
        '0b101 << 0b1 = 0b1010 (5 << 1 = 10)',
        '',
        'Result: 10',
    ]


def test_steps_in_output_base(cli, capsys):
    assert cli.run(args=['-b', '16', '0xFF + 1']) == 0
    out, _ = capsys.readouterr()
    assert '0b11111111 + 0b1 = 0b100000000 (0xFF + 0x1 = 0x100)' in out
    assert out.endswith('\nResult: 0x100\n')


def test_mismatched_parenthesis_prints_no_result(cli, capsys):
    assert cli.run(args=['(1 + 2']) == 1
    out, err = capsys.readouterr()
    assert out == ''
    assert 'Error mismatched parenthesis' in err


def test_invalid_literal_diagnostic(cli, capsys):
    assert cli.run(args=['0b12']) == 1
    out, err = capsys.readouterr()
    assert out == ''
    assert err.splitlines() == [
        'Error parsing in column 4: Invalid BIN number',
        '0b12',
        '   ^',
        '   Error here',
    ]


def test_malformed(cli, capsys):
    assert cli.run(args=['+ 1']) == 1
    out, err = capsys.readouterr()
    assert out == ''
    assert 'Error malformed expression' in err


def test_dump(cli, capsys):
    assert cli.run(args=['-D', '2 + (3 << 1)']) == 0
    out, _ = capsys.readouterr()
    assert out == '2 3 1 << +\n'


def test_raw_grammar(cli, capsys):
    assert cli.run(args=['-G']) == 0
    out, _ = capsys.readouterr()
    assert 'operator' in out


def test_reads_lines_from_stdin(cli, capsys, monkeypatch):
    monkeypatch.setattr(sys, 'stdin', io.StringIO('1 + 1\n\n0b12\n5\n'))
    assert cli.run(args=['-b', 'bin']) == 1
    out, err = capsys.readouterr()
    assert 'Result: 0b10' in out
    assert 'Result: 0b101' in out
    assert 'Invalid BIN number' in err


def test_unknown_base(cli, capsys):
    with raises(SystemExit):
        cli.run(args=['-b', 'ternary', '1'])


def test_version(cli, capsys):
    with raises(SystemExit) as e:
        cli.run(args=['--version'])
    assert e.value.code == 0
    out, _ = capsys.readouterr()
    assert out.startswith('devcalc ')


def test_format_step():
    step = Step(Number(12, NumberBase.HEX), Operator.XOR, Number(10),
                Number(6, NumberBase.HEX))
    assert format_step(step, NumberBase.OCT) == \
        '0b1100 ^ 0b1010 = 0b110 (0o14 ^ 0o12 = 0o6)'
