"""Pure lambda calculus tokenizer and recursive-descent parser.

Formally, the accepted grammar is

```
<application> ::= <factor> <factor>*                    ; associating by left: a b c d = (((a b) c) d)
<factor>      ::= <identifier>                          ; "variable"
                | "λ" <identifier> "." <application>    ; "abstraction"
                                                        ; - abstraction bodies are greedy: λx.x y = λx.(x y)
                | "(" <application> ")"
```

`\\` may be written instead of `λ`. Identifiers are maximal runs of alphanumeric characters and underscores, so
they can be several characters long and may start with a digit. Consequently, function application must be
separated by spaces or parentheses: `xy` is a single variable.

Tokenizing never fails: characters that are not part of the grammar are dropped and left for the parser to trip
over. The parser raises a LambdaSyntaxError at the first problem it finds; anything after a complete term is
ignored, so `x )` parses as `x`.
"""

import enum
from dataclasses import dataclass
from typing import Optional

from lambdastep.lang.error import LambdaSyntaxError
from lambdastep.term import Abstraction, Application, Variable


class TokenType(enum.Enum):
    LAMBDA = "λ"
    DOT = "."
    OPEN_PAREN = "("
    CLOSE_PAREN = ")"
    IDENTIFIER = "<identifier>"


@dataclass(frozen=True)
class Token:
    type: TokenType
    name: Optional[str] = None

    def __str__(self):
        if self.type is TokenType.IDENTIFIER:
            return self.name
        return self.type.value

    def describe(self):
        """Name of the token as shown in diagnostics, e.g. RParen or Identifier("x")."""
        if self.type is TokenType.IDENTIFIER:
            return f'Identifier("{self.name}")'
        return DIAGNOSTIC_NAMES[self.type]


DIAGNOSTIC_NAMES = {
    TokenType.LAMBDA: "Lambda",
    TokenType.DOT: "Dot",
    TokenType.OPEN_PAREN: "LParen",
    TokenType.CLOSE_PAREN: "RParen",
}

BUILTINS = {
    "(": TokenType.OPEN_PAREN,
    ")": TokenType.CLOSE_PAREN,
    ".": TokenType.DOT,
    "\\": TokenType.LAMBDA,
    "λ": TokenType.LAMBDA,
}


def is_identifier_char(char):
    """λ is alphabetic, but it always starts an abstraction."""
    return (char.isalnum() or char == "_") and char not in BUILTINS


def tokenize(expr):
    """Scans expr left to right and returns its list of Tokens."""
    tokens = []
    idx = 0
    while idx < len(expr):
        char = expr[idx]
        if char in BUILTINS:
            tokens.append(Token(BUILTINS[char]))
            idx += 1
        elif is_identifier_char(char):
            end = idx
            while end < len(expr) and is_identifier_char(expr[end]):
                end += 1
            tokens.append(Token(TokenType.IDENTIFIER, expr[idx:end]))
            idx = end
        else:
            idx += 1  # whitespace and unknown characters
    return tokens


class Parser:
    """Recursive-descent parser over a list of Tokens. Each instance parses one token list once."""
    FACTOR_START = (TokenType.IDENTIFIER, TokenType.LAMBDA, TokenType.OPEN_PAREN)

    def __init__(self, tokens):
        self.tokens = list(tokens)
        self.pos = 0

    def peek(self):
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def next(self):
        token = self.peek()
        self.pos += 1
        return token

    def parse(self):
        """Parses one application from the start of the token list. Tokens left over after it are ignored."""
        return self.parse_application()

    def parse_application(self):
        term = self.parse_factor()
        while self.peek() is not None and self.peek().type in Parser.FACTOR_START:
            term = Application(term, self.parse_factor())
        return term

    def parse_factor(self):
        token = self.next()

        if token is None:
            raise LambdaSyntaxError("Unexpected end of input")

        elif token.type is TokenType.IDENTIFIER:
            return Variable(token.name)

        elif token.type is TokenType.LAMBDA:
            parameter = self.next()
            if parameter is None or parameter.type is not TokenType.IDENTIFIER:
                raise LambdaSyntaxError("Expected identifier after lambda")

            dot = self.next()
            if dot is None or dot.type is not TokenType.DOT:
                raise LambdaSyntaxError("Expected '.' after lambda parameter")

            return Abstraction(parameter.name, self.parse_application())

        elif token.type is TokenType.OPEN_PAREN:
            term = self.parse_application()

            close = self.next()
            if close is None or close.type is not TokenType.CLOSE_PAREN:
                raise LambdaSyntaxError("Expected ')'")
            return term

        raise LambdaSyntaxError(f"Unexpected token: {token.describe()}")


def parse(tokens):
    """Builds a term from tokens, raises LambdaSyntaxError if they are not valid λ-term grammar."""
    return Parser(tokens).parse()
