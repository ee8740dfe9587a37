"""Session control for the stepper. A session holds named expressions, the term currently being reduced, and the
history of steps taken so far.

Lines given to a session can be loosely defined as follows:

```
<named_term> ::= <name> ":=" <λ-term>   ; saves <λ-term> under <name>, which must be a single identifier
<exec_term>  ::= <λ-term>               ; becomes the current term, free occurrences of names are expanded
```
"""

import logging
from dataclasses import dataclass
from typing import Tuple

from lambdastep.lang.error import GenericException, LambdaSyntaxError
from lambdastep.pure.lexical import TokenType, parse, tokenize
from lambdastep.pure.printer import print_term
from lambdastep.pure.reduction import find_redex, free_variables, step_once, substitute
from lambdastep.term import Term

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Step:
    """One contracted redex: the term before and after, and the path to the redex in before."""
    before: Term
    after: Term
    redex_path: Tuple[str, ...] = ()

    def __str__(self):
        return f"{print_term(self.before)} → {print_term(self.after)}"


class Session:
    """Governs a stepper session, with control over the scope of named expressions."""
    DECLARE = ":="

    def __init__(self):
        self.namespace = {}  # dict of name: expanded Term, in definition order
        self.history = []    # list of Steps taken since the last clear
        self.current = None  # Term being reduced

    @staticmethod
    def is_definition(line):
        return Session.DECLARE in line

    def add(self, line):
        """Adds a line to the current session. A definition is saved and returns None; a λ-term is loaded and stepped
        once, returning that Step (None if the term is already in normal form).
        """
        if Session.is_definition(line):
            name, __, expr = line.partition(Session.DECLARE)
            self.define(name, expr)
            return None

        self.load(line)
        return self.step()

    def define(self, name, expr):
        """Saves expr under name. expr is expanded with the names defined so far."""
        name = name.strip()
        tokens = tokenize(name)
        if len(tokens) != 1 or tokens[0].type is not TokenType.IDENTIFIER or tokens[0].name != name:
            raise LambdaSyntaxError(f"'{name}' is not a valid name")

        term = parse(tokenize(expr))
        if name in free_variables(term):
            raise LambdaSyntaxError("recursive definitions not supported")

        self.namespace[name] = self.expand(term)
        logger.debug("defined %s := %s", name, print_term(self.namespace[name]))

    def undefine(self, name):
        try:
            del self.namespace[name]
        except KeyError:
            raise GenericException(f"'{name}' is not defined")

    @property
    def definitions(self):
        """dict of name: printed term."""
        return {name: print_term(term) for name, term in self.namespace.items()}

    def expand(self, term):
        """Replaces every free occurrence of a defined name in term with its definition."""
        for name, definition in self.namespace.items():
            term = substitute(term, name, definition)
        return term

    def load(self, expr):
        """Parses and expands expr, then makes it the current term."""
        self.current = self.expand(parse(tokenize(expr)))
        logger.debug("loaded %s", print_term(self.current))
        return self.current

    def step(self):
        """Contracts the leftmost outermost redex of the current term. Returns the Step, or None if the current term is
        already in normal form.
        """
        if self.current is None:
            raise GenericException("no term loaded, enter a λ-term first")

        redex_path = find_redex(self.current)
        reduced, term = step_once(self.current)
        if not reduced:
            return None

        step = Step(self.current, term, redex_path)
        self.history.append(step)
        self.current = term
        return step

    def clear_history(self):
        self.history = []
