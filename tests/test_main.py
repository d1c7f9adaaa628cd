import datetime

import pytest

from cmdargs.__main__ import ReportArgs, main
from cmdargs.accessor import OptionAccessor


def test_report(capsys):
    assert main(['-s', '2024-01-02', '-n', '5']) == 0

    assert capsys.readouterr().out == 'report 2024-01-02..2024-01-02, 5 rows\n'


def test_verbose_report(capsys):
    status = main(['--start-date', '2024-01-02', '--end-date', '2024-01-09',
                   '-t', 'red', 'blue', '-v', '-l', 'debug'])

    assert status == 0
    out = capsys.readouterr().out
    assert 'report 2024-01-02..2024-01-09, 10 rows' in out
    assert 'tags: red, blue' in out
    assert 'log level: debug' in out


def test_help(capsys):
    assert main(['-h']) == 0

    out = capsys.readouterr().out
    assert out.startswith('usage: cmdargs')
    assert '--start-date' in out


@pytest.mark.parametrize('argv, message', [
    ([], 'Missing required option: s.'),
    (['-s', 'soon'], "Invalid date 'soon' for argument s."),
    (['-s', '2024-01-02', '-n', '0'],
     'Integer 0 for argument n is out of range. Expected value in range 1..100.'),
    (['-s', '2024-01-05', '-e', '2024-01-01'],
     'The end date must not be before the start date.'),
    (['-s', '2024-01-02', '--colour'], 'Unrecognized option: --colour'),
    (['-s', '2024-01-02', '-l', 'loud'], "Unknown log level: 'loud'"),
])
def test_usage_errors(capsys, argv, message):
    assert main(argv) == 2

    assert message in capsys.readouterr().err


def test_report_args_defaults():
    args = ReportArgs()
    OptionAccessor(args).parse(['-s', '2020-02-29'])

    assert args.start_date == datetime.date(2020, 2, 29)
    assert args.end_date == args.start_date
    assert args.count == 10
    assert args.tags == []
    assert not args.verbose
