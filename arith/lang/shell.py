"""Handles interactive/command-line mode for the Arith interpreter. Uses cmd as backend, which records input history
through readline when it is available.
"""

import cmd
import os

try:
    import readline
except ImportError:  # e.g. Windows
    readline = None

from arith.pure.grammar import parse
from arith.pure.lexical import tokenize


class Shell(cmd.Cmd):
    """Arith interpreter shell."""
    intro = "\nWelcome to the Arith REPL!\nType 'help' for more information."
    prompt = "> "
    HISTORY_FILE = os.path.join(os.path.expanduser("~"), ".arith_history")

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        self.line_num = 0

    def preloop(self):
        """Loads input history, if there is any."""
        if readline is not None and os.path.exists(Shell.HISTORY_FILE):
            try:
                readline.read_history_file(Shell.HISTORY_FILE)
            except OSError:
                pass

    def cmdloop(self, intro=None):
        """Runs the shell. Input history is saved however the loop ends, including on a keyboard interrupt."""
        try:
            super().cmdloop(intro)
        finally:
            if readline is not None:
                try:
                    readline.write_history_file(Shell.HISTORY_FILE)
                except OSError:
                    pass

    def default(self, line):
        """Evaluates an arbitrary line of Arith and prints the normal form of every term in it."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            self.sess.add(line, self.line_num)
            self.sess.run()

            while self.sess.results:
                print(self.sess.pop())

    def do_tree(self, arg):
        """Displays the syntax tree of every term in a line of Arith, without evaluating it."""
        with self.sess.error_handler:
            self.sess.error_handler.register_line(self.sess.path, arg, self.line_num)
            for tree in parse(tokenize(arg)):
                print(tree.display())
            self.sess.error_handler.remove_line(self.sess.path)

    def do_trace(self, arg):
        """Toggles printing of every reduction step."""
        self.sess.error_handler.trace = not self.sess.error_handler.trace
        print(f"trace {'on' if self.sess.error_handler.trace else 'off'}")

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the Arith interpreter!\n\n"
              "Arith is a tiny language of booleans and natural numbers. Terms are built from \n"
              "'true', 'false', 'zero', 'succ', 'pred', 'is_zero' and 'if ... then ... else'. \n"
              "Each line is reduced step by step until no rule applies.\n\n"
              "Try it out by typing 'if is_zero pred succ zero then succ zero else zero'. \n"
              "This will print '1'. Type 'trace' to see every reduction step, 'tree' followed \n"
              "by a term to see its syntax tree, and 'exit' to leave.")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
