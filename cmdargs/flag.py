"""
    flag.py: the option schema and the argparse based parser behind it
"""

from typing import Dict, Iterator, List, Optional, Sequence
import argparse
import enum
import logging

from .constants import FROZEN_SCHEMA_MESSAGE, UNRECOGNIZED_OPTION_MESSAGE
from .errors import InternalStateError, UsageError

logger = logging.getLogger(__name__)


class Arity(enum.Enum):
    NONE = 'none'
    ONE = 'one'
    MANY = 'many'


class Option:

    def __init__(
            self,
            short_name: str,
            long_name: Optional[str] = None,
            description: str = '',
            arity: Arity = Arity.NONE,
            arg_name: Optional[str] = None
    ):
        if not short_name:
            raise ValueError('An option needs a short name')
        self.short_name = short_name
        self.long_name = long_name
        self.description = description
        self.arity = arity
        self.arg_name = arg_name

    def takes_value(self) -> bool:
        return self.arity is not Arity.NONE

    def option_strings(self) -> List[str]:
        names = ['-' + self.short_name]
        if self.long_name:
            names.append('--' + self.long_name)
        return names

    def __repr__(self):
        return 'Option(%r, %r, arity=%s)' % (
            self.short_name, self.long_name, self.arity.value)


class OptionSchema:
    """The set of options a command line is parsed against.

    Options are looked up by their short or their long name. Once frozen
    the schema refuses new options.
    """

    def __init__(self):
        self._options: Dict[str, Option] = {}
        self._long_names: Dict[str, str] = {}
        self._frozen = False

    def add_option(
            self,
            short_name: str,
            long_name: Optional[str] = None,
            description: str = '',
            arity: Arity = Arity.NONE,
            arg_name: Optional[str] = None
    ) -> Option:
        return self.add(
            Option(short_name, long_name, description, arity, arg_name))

    def add(self, option: Option) -> Option:
        if self._frozen:
            raise InternalStateError(FROZEN_SCHEMA_MESSAGE)
        names = [option.short_name]
        if option.long_name:
            names.append(option.long_name)
        for name in names:
            if self.resolve(name) is not None:
                raise ValueError('Duplicate option name: %s' % name)
        self._options[option.short_name] = option
        if option.long_name:
            self._long_names[option.long_name] = option.short_name
        return option

    def freeze(self):
        self._frozen = True

    def is_frozen(self) -> bool:
        return self._frozen

    def resolve(self, name: str) -> Optional[str]:
        if name in self._options:
            return name
        return self._long_names.get(name)

    def get_option(self, name: str) -> Optional[Option]:
        short_name = self.resolve(name)
        if short_name is None:
            return None
        return self._options[short_name]

    def __contains__(self, name):
        return self.resolve(name) is not None

    def __iter__(self) -> Iterator[Option]:
        return iter(list(self._options.values()))

    def __len__(self):
        return len(self._options)


class ParseResult:
    """The options found by one parse of a command line.

    Tokens that are neither options nor option values are kept, untouched,
    in ``args``.
    """

    def __init__(self, schema: OptionSchema, namespace: argparse.Namespace,
                 args: List[str]):
        self.schema = schema
        self.namespace = namespace
        self.args = args

    def _lookup(self, name: str):
        option = self.schema.get_option(name)
        if option is None:
            return None, None
        return option, getattr(self.namespace, option.short_name, None)

    def has_option(self, name: str) -> bool:
        _, value = self._lookup(name)
        return value is not None

    def get_option_value(self, name: str) -> Optional[str]:
        values = self.get_option_values(name)
        if not values:
            return None
        return values[0]

    def get_option_values(self, name: str) -> Optional[List[str]]:
        option, values = self._lookup(name)
        if option is None or not option.takes_value() or values is None:
            return None
        return list(values)


class _ArgumentParser(argparse.ArgumentParser):

    def error(self, message):
        raise UsageError(message)


class FlagParser:

    def __init__(self, schema: OptionSchema, prog: Optional[str] = None):
        self.schema = schema
        self.parser = _ArgumentParser(
            prog=prog, add_help=False, allow_abbrev=False)
        for option in schema:
            self.add_argument(option)

    def add_argument(self, option: Option):
        kwargs = {
            'dest': option.short_name,
            'help': option.description.replace('%', '%%'),
        }
        if option.arity is Arity.NONE:
            kwargs['action'] = 'count'
        elif option.arity is Arity.ONE:
            kwargs['action'] = 'append'
            kwargs['metavar'] = option.arg_name or 'arg'
        else:
            kwargs['action'] = 'extend'
            kwargs['nargs'] = '*'
            kwargs['metavar'] = option.arg_name or 'arg'
        self.parser.add_argument(*option.option_strings(), **kwargs)

    def parse_args(self, argv: Sequence[str]) -> ParseResult:
        try:
            namespace, extras = self.parser.parse_known_args(list(argv))
        except argparse.ArgumentError as e:
            raise UsageError(str(e)) from e
        for token in extras:
            if token == '--':
                break
            if token.startswith('-') and token != '-':
                logger.debug('Unrecognized option %r', token)
                raise UsageError(
                    UNRECOGNIZED_OPTION_MESSAGE.format(token=token))
        return ParseResult(self.schema, namespace, extras)

    def format_help(self) -> str:
        return self.parser.format_help()
