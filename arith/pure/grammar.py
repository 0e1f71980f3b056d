"""Predictive parser: turns a list of Tokens into a list of Arith terms.

A program is a sequence of top-level terms with no separator between them: each term consumes exactly the tokens
it needs and the next token (if any) starts a new term, so `succ zero pred succ zero` parses as two terms. One token
of lookahead, no backtracking, and the first error aborts the whole parse.

```
<program> ::= <term>*
<term>    ::= "true" | "false" | "zero"
            | ("succ" | "pred" | "is_zero") <term>
            | "if" <term> "then" <term> "else" <term>
```
"""

from arith import term
from arith.lang.error import ParseError
from arith.pure.lexical import Token


LEAVES = {
    Token.True_: term.TrueTerm,
    Token.False_: term.FalseTerm,
    Token.Zero: term.Zero
}

UNARY = {
    Token.Succ: term.Succ,
    Token.Pred: term.Pred,
    Token.IsZero: term.IsZero
}


# keyword that must come before the sub-term an unfinished if is waiting for, by number of sub-terms parsed so far
IF_CLAUSES = {
    1: (Token.Then, "Invalid If statement. Missing 'then' clause."),
    2: (Token.Else, "Invalid If statement. Missing 'else' clause.")
}


def parse(tokens):
    """Returns the list of top-level terms in tokens. Raises a ParseError if tokens is not a valid program."""
    terms = []
    tokens = iter(tokens)

    for token in tokens:
        terms.append(parse_term(token, tokens))

    return terms


def parse_term(token, tokens):
    """Parses the term starting with token, consuming its sub-terms from the tokens iterator.

    Unfinished terms are kept on an explicit stack of (former, sub-terms so far) frames, innermost last, so nesting
    depth is not limited by the interpreter's recursion limit.
    """
    pending = []
    while True:
        if token in LEAVES:
            tree = LEAVES[token]()
        elif token in UNARY:
            pending.append((UNARY[token], []))
            token = next_token(tokens)
            continue
        elif token is Token.If:
            pending.append((term.If, []))
            token = next_token(tokens)
            continue
        else:
            raise ParseError("Unknown token : {}", str(token))

        # hand the finished term up until some frame still needs more sub-terms
        while pending:
            former, nodes = pending[-1]
            nodes.append(tree)
            if len(nodes) < former.ARITY:
                break
            pending.pop()
            tree = former(*nodes)
        else:
            return tree

        if former is term.If:
            keyword, msg = IF_CLAUSES[len(nodes)]
            if next(tokens, None) is not keyword:
                raise ParseError(msg)
        token = next_token(tokens)


def next_token(tokens):
    """Returns the first token of a required sub-term."""
    token = next(tokens, None)
    if token is None:
        raise ParseError("Invalid program!")
    return token
