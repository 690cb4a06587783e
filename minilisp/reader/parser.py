"""
  Lisp Reader: lexer and parser

- Streaming, lazy parsing: tokens are pulled only as the datum needs them,
  so `read_from_string` can report where the first datum ended.
- Emits minilisp values directly:

    - nil, () -> Nil
    - lists -> chains of Pair ending in Nil
    - dotted lists (a b . c) -> chains of Pair ending in c
    - [+-]digits -> int (64-bit range; anything wider stays a Symbol)
    - any other atom -> Symbol
    - 'x -> (quote x)
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple, Optional

from minilisp import SExpression
from minilisp.errors import EndOfFile, UnexpectedChar, UnmatchedClosedParen
from minilisp.types.nil import Nil
from minilisp.types.pair import Pair, list_to_pair
from minilisp.types.values import INTEGER_BITS, make_symbol


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<quote>')"  # quote shorthand
    r"|(?P<atom>[^\s()']+)"  # numbers and symbols
    r")"
)

INTEGER_RE = re.compile(r"[+-]?[0-9]+")

_INT_MIN = -(1 << (INTEGER_BITS - 1))
_INT_MAX = (1 << (INTEGER_BITS - 1)) - 1


class Token(NamedTuple):
    kind: str
    text: str
    end: int


def lex(source: str, pos: int = 0) -> Iterator[Token]:
    """Token generator: yields Token(kind, text, end) tuples."""
    while True:
        m = TOKEN_RE.match(source, pos)
        if m is None:
            # only whitespace (or nothing) left
            return
        pos = m.end()
        yield Token(m.lastgroup, m.group(m.lastgroup), pos)


def parse_atom(text: str) -> SExpression:
    if INTEGER_RE.fullmatch(text):
        n = int(text)
        if _INT_MIN <= n <= _INT_MAX:
            return n
    return make_symbol(text)


class TokenStream:
    def __init__(self, token_iter: Iterator[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []
        # Offset just past the last consumed token
        self.position: int = 0

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Token:
        tok = self.peek()
        if tok is None:
            raise EndOfFile()
        self.buffer.pop(0)
        self.position = tok.end
        return tok

    def at_end(self) -> bool:
        return self.peek() is None

    def parse_expr(self) -> SExpression:
        """Read one datum. Raises EndOfFile if the tokens run out first."""
        tok = self.advance()

        if tok.kind == "atom":
            return parse_atom(tok.text)

        if tok.kind == "quote":
            expr = self.parse_expr()
            return Pair(make_symbol("quote"), Pair(expr, Nil))

        if tok.kind == "rparen":
            raise UnmatchedClosedParen()

        # List or dotted list
        items: list[SExpression] = []
        while True:
            nxt = self.peek()
            if nxt is None:
                raise EndOfFile()
            if nxt.kind == "rparen":
                self.advance()
                return list_to_pair(items)
            if items and nxt.kind == "atom" and nxt.text == ".":
                self.advance()
                cdr_expr = self.parse_expr()
                close = self.peek()
                if close is None:
                    raise EndOfFile()
                if close.kind != "rparen":
                    raise UnexpectedChar(close.text[0], ")")
                self.advance()
                return list_to_pair(items, cdr_expr)
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def read_from_string(source: str) -> tuple[SExpression, int]:
    """Read the first datum in `source`; return it with the offset just past it."""
    stream = TokenStream(lex(source))
    expr = stream.parse_expr()
    return expr, stream.position


def parse(source: str) -> SExpression:
    """Read exactly the first datum in `source`."""
    return read_from_string(source)[0]


def read_all(source: str) -> Iterator[SExpression]:
    """Yield every datum in `source`, in order."""
    return TokenStream(lex(source)).parse_all()
