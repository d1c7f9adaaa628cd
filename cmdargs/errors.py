"""
    errors.py: exceptions raised while parsing and reading options
"""


class UsageError(Exception):
    """The command line given by the user can not be used.

    The message is meant to be shown to the end user as is.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingOptionError(UsageError):

    def __init__(self, option: str, message: str):
        super().__init__(message)
        self.option = option


class InternalStateError(RuntimeError):
    """The accessor was used in a way its owner never should."""
