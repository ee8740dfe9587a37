"""Serializes terms back to λ-term notation.

Parentheses are added only where re-parsing would otherwise build a different tree:

- an abstraction in function position, because its body would swallow the argument: `(λx.x) y`
- anything but a variable in argument position, because application associates by left: `f (g x)`, `f (λx.x)`
"""

from lambdastep.term import Abstraction, Application, Variable

LAMBDA = "λ"


def print_term(term):
    """Returns the canonical text of term."""
    if isinstance(term, Variable):
        return term.name

    elif isinstance(term, Abstraction):
        return f"{LAMBDA}{term.parameter}.{print_term(term.body)}"

    function = print_term(term.function)
    if isinstance(term.function, Abstraction):
        function = f"({function})"

    argument = print_term(term.argument)
    if not isinstance(term.argument, Variable):
        argument = f"({argument})"

    return f"{function} {argument}"
