"""Lexical analysis for Arith: converts source text into a flat list of Tokens. Whitespace only separates words, and
every word must be a keyword, so the lexical grammar is just

```
<word>  ::= <letter> (<letter> | "_")*  ; ASCII letters only, must be one of the keywords below
<space> ::= <whitespace>+              ; ignored
```

Any other character is a syntax error. Errors report 1-based positions into the source.
"""

from enum import Enum
import string

from arith.lang.error import ArithSyntaxError


class Token(Enum):
    """Arith tokens. Tokens have no payload: each value is the keyword that produces the token."""
    Succ = "succ"
    Pred = "pred"
    Zero = "zero"
    True_ = "true"
    False_ = "false"
    If = "if"
    Then = "then"
    Else = "else"
    IsZero = "is_zero"

    def __str__(self):
        return self.name.rstrip("_")


KEYWORDS = {token.value: token for token in Token}


def is_letter(char):
    return char in string.ascii_letters


def tokenize(source):
    """Returns the list of Tokens in source, in source order. Raises an ArithSyntaxError on the first invalid
    character or word. Empty (or all-whitespace) source gives an empty list.
    """
    tokens = []
    chars = iter(enumerate(source))

    for idx, char in chars:
        if is_letter(char):
            word = char
            for next_idx, next_char in chars:  # shares chars with the outer loop: consumed characters are not rescanned
                if is_letter(next_char) or next_char == "_":
                    word += next_char
                elif next_char.isspace():
                    break
                else:
                    raise ArithSyntaxError("Invalid character : {}", next_char, position=next_idx + 1, line=source)

            if word not in KEYWORDS:
                raise ArithSyntaxError("Invalid keyword : {}", word, position=idx + 1, line=source, length=len(word))
            tokens.append(KEYWORDS[word])

        elif not char.isspace():
            raise ArithSyntaxError("Invalid character : {}", char, position=idx + 1, line=source)

    return tokens
