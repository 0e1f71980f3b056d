"""Arith terms. The abstract syntax tree built by the parser is also the runtime value representation: there is no
separate "value" type, reduction just rewrites one term into another.

Formally, Arith can be defined as

```
<term> ::= "true" | "false" | "zero"                    ; leaves
         | "succ" <term>                                ; numerals are built from zero and succ
         | "pred" <term>
         | "is_zero" <term>
         | "if" <term> "then" <term> "else" <term>
```

A term is a numeric value iff it is `zero` or `succ` applied to a numeric value. Terms are immutable and strictly
owned trees: reduction always builds a new tree and never mutates an existing one.

Source: Pierce, "Types and Programming Languages", chapter 3 (untyped arithmetic expressions)
"""


from abc import ABC, abstractmethod


def flatten(tree, parts):
    """Joins the pieces parts(node) returns for every node of tree, where pieces are strings or further items to
    expand. Uses an explicit stack, so arbitrarily deep terms can be rendered.
    """
    result = []
    pending = [tree]
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            result.append(item)
        else:
            pending.extend(reversed(parts(item)))
    return "".join(result)


class Term(ABC):
    """Superclass representing any Arith term. Subclasses set NAME (used by repr) and ARITY (number of sub-terms)."""
    NAME = None
    ARITY = 0

    def __init__(self, *nodes):
        assert len(nodes) == self.ARITY, f"{self.NAME} expects {self.ARITY} sub-terms, got {len(nodes)}"
        assert all(isinstance(node, Term) for node in nodes), f"{self.NAME} sub-terms must be Terms"

        self.nodes = tuple(nodes)
        self._hash = hash((self.NAME, self.nodes))  # sub-terms already hold theirs

    @property
    def is_numeric_value(self):
        """Whether or not this term is a numeral (zero wrapped in any number of succs). Checked structurally."""
        node = self
        while isinstance(node, Succ):
            node = node.nodes[0]
        return isinstance(node, Zero)

    @abstractmethod
    def parts(self):
        """Returns the source rendering of this term as a list of strings and sub-terms, in order."""

    def __str__(self):
        """Renders this term as Arith source (numerals are rendered as decimal numbers)."""
        return flatten(self, lambda tree: tree.parts())

    def display(self, indents=0):
        """Displays term tree with readable format.

        Format:
        <Term>(expr='<expr>', nodes=[
            <Term>(expr='<expr>', nodes=[
                ...
                <Term>(expr='<expr>')  # <-- if nodes is empty
            ])
        ])
        """
        def parts(item):
            tree, depth = item
            head = f"{'    ' * depth}{tree.NAME}(expr='{tree}'"
            if not tree.nodes:
                return [head + ")"]

            result = [head + ", nodes=[\n"]
            for node in tree.nodes:
                result += [(node, depth + 1), ",\n"]
            return result[:-1] + [f"\n{'    ' * depth}])"]

        return flatten((self, indents), parts)

    def __repr__(self):
        def parts(tree):
            if not tree.nodes:
                return [tree.NAME]

            result = [tree.NAME + "("]
            for node in tree.nodes:
                result += [node, ", "]
            return result[:-1] + [")"]

        return flatten(self, parts)

    def __eq__(self, other):
        pending = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left is right:
                continue
            if type(left) is not type(right) or hash(left) != hash(right):
                return False
            pending.extend(zip(left.nodes, right.nodes))
        return True

    def __hash__(self):
        return self._hash


class TrueTerm(Term):
    NAME = "True"

    def parts(self):
        return ["true"]


class FalseTerm(Term):
    NAME = "False"

    def parts(self):
        return ["false"]


class Zero(Term):
    NAME = "Zero"

    def parts(self):
        return ["0"]


class Succ(Term):
    """Successor of a term. Rendered as a decimal number when the chain of succs/preds below it ends in zero."""
    NAME = "Succ"
    ARITY = 1

    def parts(self):
        num, node = 1, self.nodes[0]
        while isinstance(node, (Succ, Pred)):
            num += 1 if isinstance(node, Succ) else -1
            node = node.nodes[0]

        if isinstance(node, Zero):
            return [str(num)]
        return ["(succ ", node, ")"]  # walked succs/preds are not shown


class Pred(Term):
    NAME = "Pred"
    ARITY = 1

    def parts(self):
        return ["pred ", self.nodes[0]]


class IsZero(Term):
    NAME = "IsZero"
    ARITY = 1

    def parts(self):
        return ["is_zero ", self.nodes[0]]


class If(Term):
    """Conditional: nodes are (condition, then-branch, else-branch)."""
    NAME = "If"
    ARITY = 3

    def parts(self):
        cond, then, else_ = self.nodes
        return ["if ", cond, " then ", then, " else ", else_]
