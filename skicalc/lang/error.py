"""Error handling for skicalc. Only GenericExceptions are expected while reducing terms: if another type of error is
raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error/warning message so that it can be used to throw a skicalc error/warning."""

    def __init__(self, msg, exprs=None, internal=False):
        if exprs is None:
            exprs = []
        if isinstance(exprs, str) or not isinstance(exprs, (list, tuple)):
            exprs = [exprs]

        self.plain = msg.format(*exprs)
        self.msg = msg.format(*(colored(str(expr), attrs=["bold"]) for expr in exprs))  # color expr snippets
        self.exprs = list(exprs)
        self.internal = internal

        super().__init__(self.plain)


class PayloadError(GenericException):
    """A foreign primitive expected a payload of one kind and got another kind, or no payload at all."""

    def __init__(self, primitive, position, expected, received, term):
        self.primitive = primitive
        self.position = position  # 0-based index of the offending argument
        self.expected = expected
        self.received = received  # None when the term carries no payload
        self.term = term

        if received is None:
            msg = "'{}' expected a {} payload for argument {}, but '{}' has no payload"
            super().__init__(msg, [primitive, expected, position, term])
        else:
            msg = "'{}' expected a {} payload for argument {}, got {} from '{}'"
            super().__init__(msg, [primitive, expected, position, received, term])


class ErrorHandler:
    """Context manager that will silently suppress Python errors and print skicalc errors/warnings instead."""
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True, file=None):
        self.fatal = fatal
        self.file = file
        self.traceback = []

    @property
    def out(self):
        return self.file if self.file is not None else sys.stdout

    def register(self, program, term):
        """Registers a reduction in the traceback. Should be called before reducing term."""
        self.traceback.append((program, term))

    def remove(self):
        """Removes the most recent reduction from the traceback. Should be called after a successful reduction."""
        if self.traceback:
            self.traceback.pop()

    def warn(self, *args, **kwargs):
        """Generates and prints a runtime warning message based on args."""
        warning = GenericException(*args, **kwargs)
        print(colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + warning.msg, file=self.out)

    def throw(self, error):
        """Prints error, a GenericException, below the reductions registered in self.traceback."""
        error_msg = ""
        for program, term in self.traceback:
            error_msg += f"  Program '{program}':\n"
            error_msg += f"    {term}\n"

        if len(self.traceback) > 1:
            error_msg = "Traceback:\n" + error_msg

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg, file=self.out)

        if self.fatal:
            sys.exit(1)
        self.traceback = []  # if error occurred, reset traceback (no need if error is fatal)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GenericException("reduction may not terminate: maximum recursion depth exceeded"))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException("unknown error: '{}: {}'", [exc_type.__name__, str(exc_val)], internal=True))
            do_exit = True

        return not do_exit
