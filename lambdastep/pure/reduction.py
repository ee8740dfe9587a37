"""Capture-avoiding substitution and single-step normal-order beta reduction.

A redex is an application whose function is an abstraction, `(λx.M) N`, and contracting it gives `M[x := N]`. The
normal-order strategy always contracts the leftmost outermost redex first, which also means reducing under binders.

Substitution renames a binder whenever one of the replacement's free variables would otherwise be captured by it:

```
(λy.x)[x := y]  =  λy1.y    ; not λy.y
```

Sources: https://plato.stanford.edu/entries/lambda-calculus/#Com,
         http://pages.cs.wisc.edu/~horwitz/CS704-NOTES/1.LAMBDA-CALCULUS.html#NOR
"""

import logging
from itertools import count

from lambdastep.term import Abstraction, Application, Variable

logger = logging.getLogger(__name__)


def free_variables(term):
    """Returns the set of names that occur free in term."""
    if isinstance(term, Variable):
        return {term.name}
    elif isinstance(term, Application):
        return free_variables(term.function) | free_variables(term.argument)
    return free_variables(term.body) - {term.parameter}


def fresh_name(avoid, base):
    """Returns base if it isn't in avoid, else the first of base1, base2, ... that isn't."""
    if base not in avoid:
        return base
    for suffix in count(1):
        name = f"{base}{suffix}"
        if name not in avoid:
            return name


def substitute(term, var, replacement):
    """Returns term[var := replacement]. Bound variables of term are renamed where replacement would be captured."""
    if isinstance(term, Variable):
        return replacement if term.name == var else term

    elif isinstance(term, Application):
        return Application(substitute(term.function, var, replacement), substitute(term.argument, var, replacement))

    if term.parameter == var:
        return term  # var is shadowed, nothing below is free

    replacement_free = free_variables(replacement)
    if term.parameter in replacement_free:
        # the new binder must not be var either, or the renamed occurrences would be substituted next
        new_parameter = fresh_name(replacement_free | free_variables(term.body) | {var}, term.parameter)
        logger.debug("α: renaming %s to %s to avoid capture", term.parameter, new_parameter)

        body = substitute(term.body, term.parameter, Variable(new_parameter))
        return Abstraction(new_parameter, substitute(body, var, replacement))

    return Abstraction(term.parameter, substitute(term.body, var, replacement))


def is_redex(term):
    return isinstance(term, Application) and isinstance(term.function, Abstraction)


def contract(redex):
    """Contracts (λx.M) N into M[x := N]."""
    abstraction = redex.function
    return substitute(abstraction.body, abstraction.parameter, redex.argument)


def step_once(term):
    """Performs at most one normal-order beta reduction on term. Returns (whether a redex was contracted, new term);
    if nothing was contracted, the new term is term itself.
    """
    if isinstance(term, Application):
        if is_redex(term):
            logger.debug("β: contracting redex with parameter %s", term.function.parameter)
            return True, contract(term)

        reduced, function = step_once(term.function)
        if reduced:
            return True, Application(function, term.argument)

        reduced, argument = step_once(term.argument)
        if reduced:
            return True, Application(term.function, argument)

    elif isinstance(term, Abstraction):
        reduced, body = step_once(term.body)
        if reduced:
            return True, Abstraction(term.parameter, body)

    return False, term


def find_redex(term, path=()):
    """Returns the path to the leftmost outermost redex, if there is one. A path is a tuple of the attribute names
    ("function", "argument" or "body") leading from term to the redex; () is term itself.
    """
    if is_redex(term):
        return path

    if isinstance(term, Application):
        found = find_redex(term.function, path + ("function",))
        if found is None:
            found = find_redex(term.argument, path + ("argument",))
        return found

    elif isinstance(term, Abstraction):
        return find_redex(term.body, path + ("body",))

    return None