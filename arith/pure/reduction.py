"""Small-step operational semantics for Arith.

`step` is the one-step reduction relation. Rules are tried in this order, first match wins:

```
if true then t2 else t3         ->  t2
if false then t2 else t3        ->  t3
if t1 then t2 else t3           ->  if t1' then t2 else t3       (t1 -> t1')
succ t1                         ->  succ t1'                     (t1 -> t1')
pred zero                       ->  zero
pred (succ nv)                  ->  nv                           (nv numeric)
pred t1                         ->  pred t1'                     (t1 -> t1')
is_zero zero                    ->  true
is_zero (succ nv)               ->  false                        (nv numeric)
is_zero t1                      ->  is_zero t1'                  (t1 -> t1')
```

Anything else is stuck, signaled by an EvalError. `step` walks down the congruence positions (the condition of an
if, the operand of succ/pred/is_zero) until some rule rewrites the node it reached, then rebuilds the enclosing terms
around the result. A stuck term is detected before anything is rebuilt, so a step either builds one complete new
term or fails without building anything. The walk uses an explicit stack, so nesting depth is not limited by the
interpreter's recursion limit.

Note that the succ rule does not check whether t1 is already a numeral: on a numeral it walks down to zero, which
is stuck, so the whole step fails exactly as a guarded rule would.
"""

from arith.lang.error import EvalError
from arith.term import FalseTerm, If, IsZero, Pred, Succ, TrueTerm, Zero


CONGRUENCES = (If, Succ, Pred, IsZero)  # all of them reduce their first sub-term


def rewrite(tree):
    """Applies the rule that rewrites tree itself, if any. Returns None if only a congruence rule (or none) applies."""
    if isinstance(tree, If):
        condition, true_case, false_case = tree.nodes
        if isinstance(condition, TrueTerm):
            return true_case
        elif isinstance(condition, FalseTerm):
            return false_case

    elif isinstance(tree, Pred):
        node, = tree.nodes
        if isinstance(node, Zero):
            return Zero()
        elif isinstance(node, Succ) and node.nodes[0].is_numeric_value:
            return node.nodes[0]

    elif isinstance(tree, IsZero):
        node, = tree.nodes
        if isinstance(node, Zero):
            return TrueTerm()
        elif isinstance(node, Succ) and node.nodes[0].is_numeric_value:
            return FalseTerm()

    return None


def step(tree):
    """Returns the result of reducing tree by one step. Raises an EvalError if no rule applies."""
    spine = []
    node = tree
    while True:
        result = rewrite(node)
        if result is not None:
            break
        if not isinstance(node, CONGRUENCES):
            raise EvalError("No rule applies for {}", node.NAME)
        spine.append(node)
        node = node.nodes[0]

    for parent in reversed(spine):
        result = type(parent)(result, *parent.nodes[1:])
    return result


class SmallStepReducer:
    """Drives a term to normal form by applying step until it gets stuck. Stuck terms are their own normal form,
    so reduction never fails.
    """

    def __init__(self, tree):
        self.tree = tree
        self.steps = 0
        self.reduced = False

    def reduce(self, error_handler=None):
        """Reduces self.tree to normal form and returns it. If error_handler is given, every step is registered with
        it (printed when tracing is on).
        """
        while True:
            try:
                self.tree = step(self.tree)
            except EvalError:
                break

            self.steps += 1
            if error_handler is not None:
                error_handler.register_step("→", str(self.tree))

        self.reduced = True
        return self.tree

    def __repr__(self):
        return f"SmallStepReducer({repr(self.tree)})"


def reduce_to_normal_form(tree, error_handler=None):
    """Returns the normal form of tree: the last term reached before no rule applies."""
    return SmallStepReducer(tree).reduce(error_handler)
