"""Error handling for lambdastep. Only GenericExceptions should be encountered during stepping: if another type of
error makes it all the way to ErrorHandler, it is assumed to be an internal issue.

Diagnostics carry a message only. Tokens do not record where they came from, so no line/column is ever reported.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Base class for every error lambdastep reports to a user."""

    def __init__(self, msg, internal=False):
        super().__init__(msg)
        self.msg = msg
        self.internal = internal

    def __str__(self):
        return self.msg


class LambdaSyntaxError(GenericException):
    """Raised on malformed λ-term input. Parsing stops at the first one."""


class ErrorHandler:
    """Context manager that will silently suppress Python errors and print lambdastep errors/warnings instead."""
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True, file=None):
        self.fatal = fatal
        self.file = file

    def _print(self, msg):
        print(msg, file=self.file if self.file is not None else sys.stdout)

    def warn(self, msg):
        """Prints a warning. Warnings never stop the stepper."""
        self._print(colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + msg)

    def throw(self, error):
        """Prints error, then exits if this handler is fatal."""
        error_msg = ""
        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        self._print(error_msg)

        if self.fatal:
            sys.exit(1)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GenericException("term is nested too deeply, maximum recursion depth exceeded"))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True))
            do_exit = True

        return not do_exit
