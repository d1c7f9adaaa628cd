#!/usr/bin/env python

"""
    __main__.py: a small report command showing how options are declared
    and read
"""

from typing import List, Optional
import datetime
import logging
import sys

from .accessor import CustomOptions, OptionAccessor
from .constants import DEFAULT_LOG_LEVEL, USAGE_ERROR_EXIT_STATUS
from .errors import UsageError
from .flag import Arity, OptionSchema
from .logger import Logger

logger = logging.getLogger(__name__)


class ReportArgs(CustomOptions):

    def __init__(self):
        self.start_date: Optional[datetime.date] = None
        self.end_date: Optional[datetime.date] = None
        self.count = 10
        self.tags: List[str] = []
        self.log_level = DEFAULT_LOG_LEVEL
        self.verbose = False

    def add_custom_options(self, schema: OptionSchema):
        schema.add_option('s', 'start-date', 'first day of the report.',
                          Arity.ONE, 'date')
        schema.add_option('e', 'end-date',
                          'last day of the report, defaults to the start date.',
                          Arity.ONE, 'date')
        schema.add_option('n', 'count', 'number of rows to show, 1 to 100.',
                          Arity.ONE, 'rows')
        schema.add_option('t', 'tag', 'only report rows with these tags.',
                          Arity.MANY, 'tag')
        schema.add_option('l', 'log-level', 'D, I, W, E or C.',
                          Arity.ONE, 'level')
        schema.add_option('v', 'verbose', 'print every setting.')

    def extract_custom_options(self, accessor: OptionAccessor):
        self.start_date = accessor.get_required_date_arg('s')
        self.end_date = accessor.get_optional_date_arg('e') or self.start_date
        if self.end_date < self.start_date:
            raise UsageError('The end date must not be before the start date.')
        count = accessor.get_optional_int_arg('n', 1, 100)
        if count is not None:
            self.count = count
        self.tags = accessor.get_optional_string_arg_list('t') or []
        self.log_level = accessor.get_optional_string_arg('l') or self.log_level
        self.verbose = accessor.has_arg('v')


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    args = ReportArgs()
    accessor = OptionAccessor(args, prog='cmdargs')
    try:
        accessor.parse(argv)
    except UsageError as e:
        sys.stderr.write('%s\n\n' % e)
        accessor.print_help(sys.stderr)
        return USAGE_ERROR_EXIT_STATUS
    if accessor.is_help_requested():
        accessor.print_help()
        return 0

    try:
        Logger.setup(log_level=args.log_level)
    except ValueError as e:
        sys.stderr.write('%s\n' % e)
        return USAGE_ERROR_EXIT_STATUS
    logger.info('Report from %s to %s', args.start_date, args.end_date)

    print('report %s..%s, %d rows' % (
        args.start_date.isoformat(), args.end_date.isoformat(), args.count))
    if args.verbose:
        print('tags: %s' % (', '.join(args.tags) or '(any)'))
        print('log level: %s' % args.log_level)
    return 0


if __name__ == '__main__':
    sys.exit(main())
