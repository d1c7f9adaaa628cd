"""
    constants.py: define some useful constants.
"""

HELP_OPTION = 'h'
HELP_LONG_OPTION = 'help'
HELP_DESCRIPTION = 'shows this help message.'

MISSING_OPTION_MESSAGE = 'Missing required option: {option}.'
INVALID_INTEGER_MESSAGE = "Invalid integer '{value}' for argument {option}."
INTEGER_BELOW_MINIMUM_MESSAGE = (
    'Integer {value} for argument {option} is out of range.'
    ' Value must be at least {minimum}.')
INTEGER_OUT_OF_RANGE_MESSAGE = (
    'Integer {value} for argument {option} is out of range.'
    ' Expected value in range {minimum}..{maximum}.')
INVALID_DATE_MESSAGE = "Invalid date '{value}' for argument {option}."
UNRECOGNIZED_OPTION_MESSAGE = 'Unrecognized option: {token}'
NOT_PARSED_MESSAGE = (
    'You must parse the command line arguments before they can be used.')
FROZEN_SCHEMA_MESSAGE = 'Options can not be added once the schema is built.'

# Exit status used for usage errors, same as argparse
USAGE_ERROR_EXIT_STATUS = 2

DEFAULT_LOG_FILE = None
DEFAULT_LOG_FORMAT = '%(asctime)s - pid:%(process)d [%(levelname)-.1s] %(module)s.%(funcName)s:%(lineno)d - %(message)s'
DEFAULT_LOG_LEVEL = 'WARNING'
