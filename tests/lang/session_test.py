import os
import tempfile
import unittest

from arith.lang.error import ErrorHandler, GenericException, ParseError
from arith.lang.session import Session


class SessionTestCase(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmp_dir.cleanup()

    def write(self, text):
        path = os.path.join(self.tmp_dir.name, "program.arith")
        with open(path, "w") as file:
            file.write(text)
        return path

    def test_preprocess_line(self):
        cases = {
            "succ zero\n": "succ zero",
            "succ zero ;; one": "succ zero",
            ";; only a comment": "",
            "  zero  \t": "  zero",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, Session.preprocess_line(case), case)

    def test_file(self):
        path = self.write(";; numbers\n"
                          "succ succ zero\n"
                          "\n"
                          "is_zero pred succ zero  ;; true\n"
                          "zero is_zero true\n")
        sess = Session(ErrorHandler(color=False), path, cmd_line=False)
        self.assertEqual({2: "succ succ zero", 4: "is_zero pred succ zero", 5: "zero is_zero true"}, sess.to_exec)

        sess.run()
        self.assertEqual(["2", "true", "0\nis_zero true"], sess.results)
        self.assertEqual({}, sess.to_exec)
        self.assertEqual("2", sess.pop())
        self.assertEqual(["true", "0\nis_zero true"], sess.results)

    def test_file_error(self):
        path = self.write("succ zero\nif true then zero\n")
        handler = ErrorHandler(color=False)
        sess = Session(handler, path, cmd_line=False)

        with self.assertRaises(ParseError):
            sess.run()
        self.assertEqual(("if true then zero", 2), handler.traceback[path])
        self.assertEqual({2: "if true then zero"}, sess.to_exec)

    def test_missing_file(self):
        path = os.path.join(self.tmp_dir.name, "missing.arith")
        with self.assertRaises(GenericException) as context:
            Session(ErrorHandler(color=False), path, cmd_line=False)
        self.assertEqual(f"'{path}' could not be opened", str(context.exception))

    def test_reserved_filename(self):
        self.assertRaises(GenericException, Session, ErrorHandler(color=False), Session.SH_FILE, False)

    def test_cmd_line(self):
        handler = ErrorHandler(color=False)
        sess = Session(handler, Session.SH_FILE, cmd_line=True)
        self.assertFalse(handler.fatal)

        sess.add("succ zero pred succ zero", 1)
        sess.run()
        self.assertEqual("1\n0", sess.pop())

        sess.add("succ", 2)
        self.assertRaises(ParseError, sess.run)
        self.assertEqual({}, sess.to_exec)

        sess.add("   ", 3)
        sess.run()
        self.assertEqual([], sess.results)


if __name__ == '__main__':
    unittest.main()
