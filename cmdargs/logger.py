"""
    logger.py: A logging helper
"""

from typing import Optional, Any
import logging

from .constants import DEFAULT_LOG_FILE, DEFAULT_LOG_LEVEL, DEFAULT_LOG_FORMAT


SINGLE_CHAR_TO_LEVEL = {
    'D': 'DEBUG',
    'I': 'INFO',
    'W': 'WARNING',
    'E': 'ERROR',
    'C': 'CRITICAL',
}


def single_char_to_level(char: str) -> Any:
    """Map a level name, or just its first letter, to a logging level."""
    key = char.upper()[:1]
    if key not in SINGLE_CHAR_TO_LEVEL:
        raise ValueError('Unknown log level: %r' % char)
    return getattr(logging, SINGLE_CHAR_TO_LEVEL[key])


class Logger:
    """Common logging setup for programs built on cmdargs."""

    @staticmethod
    def setup(
            log_file: Optional[str] = DEFAULT_LOG_FILE,
            log_level: str = DEFAULT_LOG_LEVEL,
            log_format: str = DEFAULT_LOG_FORMAT,
            add_console_logger: bool = False
    ) -> None:
        level = single_char_to_level(log_level)
        if log_file:
            logging.basicConfig(
                filename=log_file,
                filemode='a',
                level=level,
                format=log_format,
            )
        else:
            logging.basicConfig(
                level=level,
                format=log_format,
            )
        if add_console_logger and log_file:
            root_logger = logging.getLogger()
            root_logger.setLevel(level)
            console = logging.StreamHandler()
            console.setFormatter(logging.Formatter(log_format))
            root_logger.addHandler(console)
