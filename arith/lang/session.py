"""Session control for the Arith interpreter, either in command-line mode or file interpretation mode. Every line is
an independent program: a session only keeps the lines still waiting to be run and the results not yet collected.
"""

from arith.interpreter import evaluate
from arith.lang.error import GenericException


class Session:
    """Governs an Arith session: queues source lines, runs them, and collects their results."""
    SH_FILE = "<in>"  # command-line interpreter filename
    COMMENT = ";;"

    def __init__(self, error_handler, path, cmd_line):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode

        self.to_exec = {}   # dict of line num: source lines to run
        self.results = []   # rendered normal forms, one entry per run line

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            try:
                with open(path, "r") as file:
                    lines = list(file)
            except OSError:
                raise GenericException("'{}' could not be opened", path, diagnosis=False)

            for line_num, line in enumerate(lines):
                self.add(line, line_num + 1)

        elif not cmd_line:
            raise GenericException("'{}' is a reserved filename", Session.SH_FILE)

    @staticmethod
    def preprocess_line(line):
        """Removes comments and trailing whitespace from a line of source."""
        if Session.COMMENT in line:
            line = line[:line.index(Session.COMMENT)]
        return line.rstrip()

    def add(self, line, line_num):
        """Adds a line of source to the current session. Blank lines (after removing comments) are ignored. Evaluation
        is delayed until run is called.
        """
        line = Session.preprocess_line(line)
        if line.strip():
            self.to_exec[line_num] = line

    def run(self):
        """Evaluates every queued line in order, appending each line's output to self.results. Will raise any errors
        that are encountered; lines after the offending one stay queued.
        """
        for line_num, line in list(self.to_exec.items()):
            self.error_handler.register_line(self.path, line, line_num)  # in case error is raised

            try:
                self.results.append(evaluate(line, self.error_handler))
            except GenericException:
                if self.cmd_line:
                    del self.to_exec[line_num]  # the shell never retries a failed line
                raise

            del self.to_exec[line_num]
            self.error_handler.remove_line(self.path)  # error was not raised

    def pop(self):
        """Removes and returns the oldest result."""
        return self.results.pop(0)
