import pytest

from cmdargs.errors import InternalStateError, UsageError
from cmdargs.flag import Arity, FlagParser, Option, OptionSchema


@pytest.fixture
def schema():
    schema = OptionSchema()
    schema.add_option('v', 'verbose', 'talk more.')
    schema.add_option('f', 'file', 'input file.', Arity.ONE, 'path')
    schema.add_option('i', 'include', 'extra paths.', Arity.MANY)
    return schema


def test_option_needs_short_name():
    with pytest.raises(ValueError):
        Option('')


def test_option_strings():
    assert Option('f', 'file').option_strings() == ['-f', '--file']
    assert Option('f').option_strings() == ['-f']


def test_schema_lookup(schema):
    assert schema.resolve('file') == 'f'
    assert schema.resolve('f') == 'f'
    assert schema.resolve('nope') is None
    assert 'include' in schema
    assert [o.short_name for o in schema] == ['v', 'f', 'i']


@pytest.mark.parametrize('short_name, long_name', [
    ('v', None),
    ('x', 'verbose'),
    ('file', None),
    ('x', 'f'),
])
def test_schema_rejects_duplicate_names(schema, short_name, long_name):
    with pytest.raises(ValueError, match='Duplicate option name'):
        schema.add_option(short_name, long_name)


def test_frozen_schema(schema):
    schema.freeze()

    assert schema.is_frozen()
    with pytest.raises(InternalStateError):
        schema.add_option('z')


def test_parse_values(schema):
    result = FlagParser(schema).parse_args(
        ['-v', '--file', 'a.txt', '-i', 'x', 'y', '--include=z'])

    assert result.has_option('v')
    assert result.has_option('verbose')
    assert result.get_option_value('v') is None
    assert result.get_option_values('v') is None
    assert result.get_option_value('file') == 'a.txt'
    assert result.get_option_values('f') == ['a.txt']
    assert result.get_option_values('i') == ['x', 'y', 'z']
    assert result.get_option_value('i') == 'x'


def test_absent_and_unknown_names(schema):
    result = FlagParser(schema).parse_args([])

    assert not result.has_option('v')
    assert result.get_option_value('f') is None
    assert result.get_option_values('i') is None
    assert not result.has_option('unknown')
    assert result.get_option_values('unknown') is None


def test_single_value_option_keeps_every_occurrence(schema):
    result = FlagParser(schema).parse_args(['-f', 'one', '-f', 'two'])

    assert result.get_option_value('f') == 'one'
    assert result.get_option_values('f') == ['one', 'two']


def test_leftover_tokens_are_kept(schema):
    result = FlagParser(schema).parse_args(['', '-f', 'a', 'rest', '-'])

    assert result.args == ['', 'rest', '-']
    assert result.get_option_value('f') == 'a'


@pytest.mark.parametrize('argv, message', [
    (['-q'], '^Unrecognized option: -q$'),
    (['--quiet'], '^Unrecognized option: --quiet$'),
    (['--verb'], '^Unrecognized option: --verb$'),
    (['-f'], 'expected one argument'),
    (['--verbose=yes'], 'ignored explicit argument'),
])
def test_rejected_command_lines(schema, argv, message):
    with pytest.raises(UsageError, match=message):
        FlagParser(schema).parse_args(argv)


def test_help_text(schema):
    schema.add_option('p', 'percent', 'share in %.', Arity.ONE)
    text = FlagParser(schema, prog='tool').format_help()

    assert text.startswith('usage: tool')
    assert '--file path' in text
    assert 'share in %.' in text
