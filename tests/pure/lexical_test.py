import unittest

from arith.lang.error import ArithSyntaxError
from arith.pure.lexical import Token, tokenize


class TokenizeTestCase(unittest.TestCase):

    def test_tokenize(self):
        cases = {
            "": [],
            "   \t\n": [],
            "zero": [Token.Zero],
            "succ zero": [Token.Succ, Token.Zero],
            "succ succ succ succ succ zero": [Token.Succ] * 5 + [Token.Zero],
            "is_zero zero": [Token.IsZero, Token.Zero],
            "is_zero succ zero": [Token.IsZero, Token.Succ, Token.Zero],
            "  true\tfalse\n": [Token.True_, Token.False_],
            "if true then zero else pred zero": [
                Token.If, Token.True_, Token.Then, Token.Zero, Token.Else, Token.Pred, Token.Zero
            ],
        }
        for case, expected in cases.items():
            self.assertEqual(expected, tokenize(case), case)

    def test_keywords_are_case_sensitive(self):
        should_raise = ["Zero", "SUCC zero", "True"]
        for case in should_raise:
            self.assertRaises(ArithSyntaxError, tokenize, case)

    def test_invalid_character(self):
        # offending character: position (1-based)
        cases = {
            "1": ("1", 1),
            "succ 3": ("3", 6),
            "zero;": (";", 5),
            "succ3 zero": ("3", 5),
            "(succ zero)": ("(", 1),
            "  _zero": ("_", 3),
            "zero λ": ("λ", 6),
        }
        for case, (char, position) in cases.items():
            with self.assertRaises(ArithSyntaxError, msg=case) as context:
                tokenize(case)
            self.assertEqual(f"Invalid character : {char}", str(context.exception), case)
            self.assertEqual(position, context.exception.position, case)
            self.assertEqual(case.index(char) + 1, context.exception.position, case)

    def test_invalid_keyword(self):
        # offending word: position where the word starts
        cases = {
            "foo": ("foo", 1),
            "succ succc zero": ("succc", 6),
            "zero is_zeroo": ("is_zeroo", 6),
            "isZero zero": ("isZero", 1),
        }
        for case, (word, position) in cases.items():
            with self.assertRaises(ArithSyntaxError, msg=case) as context:
                tokenize(case)
            self.assertEqual(f"Invalid keyword : {word}", str(context.exception), case)
            self.assertEqual(position, context.exception.position, case)

    def test_error_span(self):
        with self.assertRaises(ArithSyntaxError) as context:
            tokenize("succ blah")
        error = context.exception
        self.assertEqual("succ blah", error.line)
        self.assertEqual((5, 9), (error.start, error.end))

    def test_token_str(self):
        cases = {Token.True_: "True", Token.False_: "False", Token.Then: "Then", Token.IsZero: "IsZero"}
        for case, expected in cases.items():
            self.assertEqual(expected, str(case))


if __name__ == '__main__':
    unittest.main()
