"""Error handling for the Arith interpreter. Only GenericExceptions should be encountered during running: if another
type of error is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

Three kinds of GenericException are raised by the pipeline:
    - ArithSyntaxError: lexical error, carries the 1-based position of the offending character/word
    - ParseError: the token sequence is not a valid program
    - EvalError: no reduction rule applies to a term. Only used internally by the evaluator to detect normal forms,
      never shown to the user
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error/warning message so that it can be used to throw an Arith error/warning. str() of the
    exception is the plain message, without any coloring.
    """

    def __init__(self, msg, exprs=None, line="", start=0, end=-1, diagnosis=True, internal=False):
        """Parses args for GenericException or warning. start/end are 0-based offsets into line, the source line
        that caused the error (end=-1 means end of line).
        """
        if exprs is None:
            exprs = []
        if isinstance(exprs, str):
            exprs = [exprs]

        self.msg = msg.format(*exprs)
        self.line = line
        self.start = start
        self._end = end

        self.diagnosis = diagnosis
        self.internal = internal

        super().__init__(self.msg)

    @property
    def end(self):
        return self._end if self._end != -1 else len(self.line)

    def locate(self, line):
        """Attaches line as the offending source line if this error was raised without one. Returns self."""
        if not self.line:
            self.line = line
        return self


class ArithSyntaxError(GenericException):
    """Lexical error. position is 1-based, length is the number of offending characters starting at position."""

    def __init__(self, msg, exprs, position, line="", length=1):
        super().__init__(msg, exprs, line=line, start=position - 1, end=position - 1 + length)
        self.position = position


class ParseError(GenericException):
    """Syntactic error: the whole offending line is highlighted."""

    def __init__(self, msg, exprs=None, line=""):
        super().__init__(msg, exprs, line=line)


class EvalError(GenericException):
    """Raised when no reduction rule applies to a term."""

    def __init__(self, msg, exprs=None):
        super().__init__(msg, exprs, diagnosis=False, internal=True)


class ErrorHandler:
    """Context manager that will silently suppress Python errors and raise custom Arith errors. Also prints
    reduction steps when tracing is turned on.
    """
    ERROR = "red"
    WARNING = "magenta"
    TRACE = "cyan"

    def __init__(self, fatal=True, color=True, trace=False):
        self.fatal = fatal
        self.color = color
        self.trace = trace
        self.traceback = {}

    def colored(self, text, color=None, attrs=None):
        """termcolor.colored, unless coloring is turned off."""
        if not self.color:
            return text
        return colored(text, color, attrs=attrs)

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = (None, None)

    def register_line(self, path, line, line_num):
        """Registers line in traceback given path. Should be called prior to Session add/run."""
        self.traceback[path] = (line, line_num)

    def remove_line(self, path):
        """Removes line from traceback given path. Should be called after successful Session add/run."""
        self.traceback[path] = (None, None)

    def register_step(self, label, expr):
        """Prints a single reduction step if tracing is on."""
        if self.trace:
            print("  " + self.colored(label, ErrorHandler.TRACE, attrs=["bold"]) + " " + expr)

    def diagnose(self, error, warning=False):
        """Returns offending part of error.line highlighted and bolded."""
        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR

        diagnosis = "  " + error.line[:error.start]

        end = max(error.end, error.start + 1)
        diagnosis += self.colored(error.line[error.start:end], color, attrs=["bold"])
        diagnosis += error.line[end:] + "\n"

        diagnosis += "  " + " " * error.start
        diagnosis += self.colored("^" + "~" * (end - error.start - 1), color, attrs=["bold"])

        return diagnosis

    def throw(self, error):
        """Throws error using error and self.traceback. error must be a GenericException, and self.traceback must be a
        dict of file: (line, line_num) representing origination of error.
        """
        error_msg = ""
        lines = 0
        for file, (line, line_num) in self.traceback.items():  # assumes dict is insertion-ordered
            if line:
                error_msg += f"  File '{file}', line {line_num}:\n"
                error_msg += f"    {line}\n"
                lines += 1
                error.locate(line)

        if lines > 1:
            error_msg = "Traceback:\n" + error_msg

        if error.internal:
            error_msg += self.colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += self.colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg)

        if not error.internal and error.line and error.diagnosis:
            print(self.diagnose(error))

        if self.fatal:
            sys.exit(1)
        self.traceback = {path: (None, None) for path in self.traceback}  # if error occurred, reset traceback

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is None:
            return False

        if issubclass(exc_type, KeyboardInterrupt):
            self.throw(GenericException("keyboard interrupt", diagnosis=False))
        elif issubclass(exc_type, SystemExit):
            do_exit = True
        elif issubclass(exc_type, RecursionError):
            self.throw(GenericException("term is nested too deeply to evaluate", diagnosis=False))
        elif issubclass(exc_type, GenericException):
            self.throw(exc_val)
        else:
            self.throw(GenericException(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True))
            do_exit = True

        return not do_exit
