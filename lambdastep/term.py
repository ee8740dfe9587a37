"""Immutable λ-terms.

A term is one of three shapes:

```
Variable(name)                  ; reference to a binder or a free name
Application(function, argument) ; juxtaposition, associating by left: a b c = ((a b) c)
Abstraction(parameter, body)    ; binds parameter within body
```

Terms are frozen, so a new tree is built for every transformation and untouched subtrees can be shared between the
old and the new tree. Code that needs to tell the shapes apart does so with isinstance checks rather than methods on
the node classes.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Variable:
    name: str


@dataclass(frozen=True)
class Application:
    function: "Term"
    argument: "Term"


@dataclass(frozen=True)
class Abstraction:
    parameter: str
    body: "Term"


Term = Union[Variable, Application, Abstraction]


def _binder_index(name, bound):
    """Position of the innermost binder of name in bound, or None if name is free."""
    for idx, parameter in enumerate(bound):
        if parameter == name:
            return idx
    return None


def alpha_equals(term, other, bound=(), other_bound=()):
    """Whether or not two terms are alpha-equivalent. bound and other_bound are the enclosing parameters of each side,
    innermost first.
    """
    if isinstance(term, Variable) and isinstance(other, Variable):
        idx = _binder_index(term.name, bound)
        other_idx = _binder_index(other.name, other_bound)
        if idx is None and other_idx is None:
            return term.name == other.name
        return idx == other_idx

    if isinstance(term, Abstraction) and isinstance(other, Abstraction):
        return alpha_equals(term.body, other.body, (term.parameter,) + bound, (other.parameter,) + other_bound)

    if isinstance(term, Application) and isinstance(other, Application):
        return (alpha_equals(term.function, other.function, bound, other_bound)
                and alpha_equals(term.argument, other.argument, bound, other_bound))

    return False
