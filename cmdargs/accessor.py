"""
    accessor.py: parse a command line and read typed option values from it
"""

from typing import List, Optional, Sequence
import datetime
import logging
import re
import sys

from .constants import (
    HELP_DESCRIPTION,
    HELP_LONG_OPTION,
    HELP_OPTION,
    INTEGER_BELOW_MINIMUM_MESSAGE,
    INTEGER_OUT_OF_RANGE_MESSAGE,
    INVALID_DATE_MESSAGE,
    INVALID_INTEGER_MESSAGE,
    MISSING_OPTION_MESSAGE,
    NOT_PARSED_MESSAGE,
)
from .errors import InternalStateError, MissingOptionError, UsageError
from .flag import FlagParser, OptionSchema, ParseResult

logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')


class CustomOptions:
    """The options an application adds on top of the built in help option."""

    def add_custom_options(self, schema: OptionSchema):
        """Register the application's options on ``schema``."""
        raise NotImplementedError

    def extract_custom_options(self, accessor: 'OptionAccessor'):
        """Read the parsed values through the accessor's getters.

        Called once per parse in which help was not requested. A
        ``UsageError`` raised here fails the parse.
        """
        raise NotImplementedError


class OptionAccessor:
    """Declares, parses and type converts command line options.

    The application's options come either from a ``CustomOptions`` given to
    the constructor, or from a subclass overriding ``add_custom_options`` and
    ``extract_custom_options``.
    """

    def __init__(self, custom_options: Optional[CustomOptions] = None,
                 prog: Optional[str] = None):
        self.custom_options = custom_options
        self.prog = prog
        self._schema: Optional[OptionSchema] = None
        self._parser: Optional[FlagParser] = None
        self._result: Optional[ParseResult] = None
        self._help_requested = True

    def add_custom_options(self, schema: OptionSchema):
        if self.custom_options is not None:
            self.custom_options.add_custom_options(schema)

    def extract_custom_options(self):
        if self.custom_options is not None:
            self.custom_options.extract_custom_options(self)

    def options(self) -> OptionSchema:
        if self._schema is None:
            schema = OptionSchema()
            schema.add_option(HELP_OPTION, HELP_LONG_OPTION, HELP_DESCRIPTION)
            self.add_custom_options(schema)
            schema.freeze()
            self._schema = schema
            logger.debug('Built option schema with %d options', len(schema))
        return self._schema

    def flag_parser(self) -> FlagParser:
        if self._parser is None:
            self._parser = FlagParser(self.options(), prog=self.prog)
        return self._parser

    def is_help_requested(self) -> bool:
        return self._help_requested

    def parse(self, args: Sequence[str]):
        """Parse ``args`` and, unless help was requested, extract the custom
        options from them.

        Raises ``UsageError`` when the arguments do not fit the options, or
        when the extracted values fail validation.
        """
        argv = list(args)
        try:
            result = self.flag_parser().parse_args(argv)
        except UsageError as e:
            logger.debug('Rejected command line %r: %s', argv, e)
            raise
        self._result = result
        self._help_requested = self.has_arg(HELP_OPTION)
        logger.debug('Parsed %d arguments, help requested: %s',
                     len(argv), self._help_requested)
        if not self._help_requested:
            self.extract_custom_options()

    def format_help(self) -> str:
        return self.flag_parser().format_help()

    def print_help(self, file=None):
        if file is None:
            file = sys.stdout
        file.write(self.format_help())

    def _parsed(self) -> ParseResult:
        if self._result is None:
            raise InternalStateError(NOT_PARSED_MESSAGE)
        return self._result

    def has_arg(self, option: str) -> bool:
        return self._parsed().has_option(option)

    def get_optional_string_arg(self, option: str) -> Optional[str]:
        return self._parsed().get_option_value(option)

    def get_optional_string_arg_list(self, option: str) -> Optional[List[str]]:
        return self._parsed().get_option_values(option)

    def get_optional_int_arg(
            self,
            option: str,
            minimum_value: Optional[int] = None,
            maximum_value: Optional[int] = None
    ) -> Optional[int]:
        """Read an integer option, ``None`` when it was not given.

        With ``minimum_value`` alone the value must be at least that much,
        with both bounds it must fall inside them, inclusive.
        """
        if maximum_value is not None and minimum_value is None:
            raise ValueError('maximum_value needs a minimum_value')
        text = self.get_optional_string_arg(option)
        if text is None:
            return None
        if not _INTEGER_PATTERN.fullmatch(text):
            raise UsageError(
                INVALID_INTEGER_MESSAGE.format(value=text, option=option))
        value = int(text)
        if maximum_value is not None:
            if not minimum_value <= value <= maximum_value:
                raise UsageError(INTEGER_OUT_OF_RANGE_MESSAGE.format(
                    value=value, option=option,
                    minimum=minimum_value, maximum=maximum_value))
        elif minimum_value is not None and value < minimum_value:
            raise UsageError(INTEGER_BELOW_MINIMUM_MESSAGE.format(
                value=value, option=option, minimum=minimum_value))
        return value

    def get_optional_date_arg(self, option: str) -> Optional[datetime.date]:
        text = self.get_optional_string_arg(option)
        if text is None:
            return None
        try:
            return datetime.date.fromisoformat(text)
        except ValueError:
            raise UsageError(
                INVALID_DATE_MESSAGE.format(value=text, option=option)) from None

    def get_required_string_arg(self, option: str) -> str:
        return self._required(option, self.get_optional_string_arg(option))

    def get_required_string_arg_list(self, option: str) -> List[str]:
        return self._required(
            option, self.get_optional_string_arg_list(option))

    def get_required_int_arg(
            self,
            option: str,
            minimum_value: Optional[int] = None,
            maximum_value: Optional[int] = None
    ) -> int:
        return self._required(
            option,
            self.get_optional_int_arg(option, minimum_value, maximum_value))

    def get_required_date_arg(self, option: str) -> datetime.date:
        return self._required(option, self.get_optional_date_arg(option))

    @staticmethod
    def _required(option: str, value):
        if value is None:
            raise MissingOptionError(
                option, MISSING_OPTION_MESSAGE.format(option=option))
        return value
