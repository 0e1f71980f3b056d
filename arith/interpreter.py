"""Arith interpreter.

Basic program flow for a single line of source:
    1. Lexical analysis: the source is split into Tokens (see arith/pure/lexical.py)
    2. Parsing: the Tokens are parsed into a list of top-level terms (see arith/pure/grammar.py)
        - Will fail if the program is invalid: nothing is evaluated in that case
    3. Evaluation: each term is reduced to normal form with small-step semantics (see arith/pure/reduction.py)
        - Never fails: a term that gets stuck is its own (meaningless) normal form
    4. Each normal form is rendered on its own line

Lines are independent: no state survives from one evaluated line to the next.
"""

from arith.lang.error import GenericException
from arith.pure.grammar import parse
from arith.pure.lexical import tokenize
from arith.pure.reduction import reduce_to_normal_form


def evaluate(source, error_handler=None):
    """Returns the normal forms of all terms in source, one per line. Raises an ArithSyntaxError or ParseError (whose
    str() is the human-readable message) if source is not a valid program. Empty source gives an empty string.
    """
    terms = parse(tokenize(source))
    return "\n".join(str(reduce_to_normal_form(tree, error_handler)) for tree in terms)


def run(source):
    """Same as evaluate, but returns an (ok, text) tuple instead of raising: text is the error message if not ok."""
    try:
        return True, evaluate(source)
    except GenericException as error:
        return False, str(error)
