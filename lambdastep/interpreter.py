"""Single-step lambda calculus interpreter.

For reference:
- "Pure lambda calculus": lambda calculus as defined by Church, see lambdastep/pure
- "lang": the stepper built on top of it (named expressions, history, shell), see lambdastep/lang

Basic program flow of one call:
    1. Tokenizer: splits the text into λ, ., (, ) and identifiers, dropping everything else
    2. Parser: produces a lambda calculus AST by recursive descent over the tokens
        - For grammar rules, see lambdastep/pure/lexical.py
    3. Reduction: contracts the leftmost outermost redex, if any, using capture-avoiding substitution
    4. Printer: renders the resulting AST with minimal parentheses

Every call is a pure function of its input; nothing is kept between calls.
"""

from lambdastep.lang.error import LambdaSyntaxError
from lambdastep.pure.lexical import parse, tokenize
from lambdastep.pure.printer import print_term
from lambdastep.pure.reduction import step_once

NESTED_TOO_DEEPLY = "Expression is nested too deeply"


def reduce_step(expr):
    """Parses expr and performs one normal-order reduction step. Returns (whether a redex was contracted, term).
    Raises LambdaSyntaxError if expr is malformed.
    """
    return step_once(parse(tokenize(expr)))


def next_beta_reduction(expr):
    """String in, string out: the printed result of one reduction step, or the error message if expr is malformed.

    A term in normal form comes back unchanged (modulo canonical printing). Callers cannot tell an error message from a
    term apart by the return value alone.
    """
    try:
        __, term = reduce_step(expr)
        return print_term(term)
    except LambdaSyntaxError as error:
        return error.msg
    except RecursionError:
        return NESTED_TOO_DEEPLY
