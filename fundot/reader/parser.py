"""
  fundot Reader: Lexer and Parser

- The lexer scans text left to right into a flat list of atom Tokens.
  Atoms are already Values: numbers, strings, null/true/false and symbols.
  Punctuation becomes one-character Symbols, brackets included.
- The parser is a recursive-descent reader over an explicit cursor into
  that token list and builds one Value tree per form:

    - ( a b c )        -> List
    - [ a, b, c ]      -> Vector
    - { k: v, k2: v2 } -> Map
    - anything else    -> the atom itself
"""

from __future__ import annotations

import re
import string
import sys
from typing import Callable, Iterable, Iterator, NamedTuple, Optional

from fundot.config import get_max_depth
from fundot.errors import (
    InvalidEscape,
    InvalidNumericLiteral,
    MalformedMapPair,
    MalformedVectorElement,
    NestingTooDeep,
    UnbalancedDelimiter,
    UnexpectedEndOfInput,
    UnterminatedString,
)
from fundot.types import (
    FALSE,
    INT64_MAX,
    TRUE,
    Float,
    Integer,
    List,
    Map,
    Null,
    String,
    Symbol,
    Value,
    Vector,
)
from fundot.types.scalars import UNESCAPES


# Every ASCII punctuation character but '_' splits tokens and stands alone.
PUNCTUATION = frozenset(string.punctuation) - {"_"}

LPAREN = Symbol("(")
RPAREN = Symbol(")")
LBRACKET = Symbol("[")
RBRACKET = Symbol("]")
LBRACE = Symbol("{")
RBRACE = Symbol("}")
COMMA = Symbol(",")
COLON = Symbol(":")

LITERALS: dict[str, Value] = {
    "null": Null,
    "true": TRUE,
    "false": FALSE,
}

INTEGER_RE = re.compile(r"[0-9]+\Z")
FLOAT_RE = re.compile(r"[0-9]+(?:\.[0-9]*)?(?:[eE][0-9]+)?\Z")

# Longest decimal text (without leading zeros) that can fit in 64 bits.
_MAX_INT_DIGITS = len(str(INT64_MAX))


class Token(NamedTuple):
    value: Value
    offset: int


def classify(text: str, offset: int = 0) -> Token:
    """Turn a non-empty accumulated word into an atom Token."""
    if text[0].isdigit():
        if INTEGER_RE.match(text):
            digits = text.lstrip("0") or "0"
            if len(digits) <= _MAX_INT_DIGITS and int(digits) <= INT64_MAX:
                return Token(Integer(int(digits)), offset)
        if FLOAT_RE.match(text):
            return Token(Float(float(text)), offset)
        raise InvalidNumericLiteral(f"Invalid numeric literal {text!r}", offset)
    if text in LITERALS:
        return Token(LITERALS[text], offset)
    return Token(Symbol(text), offset)


def read_string(source: str, start: int) -> tuple[String, int]:
    """Read the string literal whose opening quote is at `start`.

    Returns the String and the offset just past the closing quote.
    """
    chars: list[str] = []
    pos = start + 1
    n = len(source)
    while pos < n:
        c = source[pos]
        if c == "\\":
            if pos + 1 >= n:
                break
            escaped = source[pos + 1]
            if escaped not in UNESCAPES:
                raise InvalidEscape(f"Invalid escape sequence \\{escaped}", pos)
            chars.append(UNESCAPES[escaped])
            pos += 2
        elif c == '"':
            return String("".join(chars)), pos + 1
        else:
            chars.append(c)
            pos += 1
    raise UnterminatedString("Unterminated string literal", start)


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields atom Tokens in source order."""
    buffer: list[str] = []
    start = 0
    pos = 0
    n = len(source)

    def flush() -> Iterator[Token]:
        if buffer:
            token = classify("".join(buffer), start)
            buffer.clear()
            yield token

    while pos < n:
        c = source[pos]
        if c == '"':
            yield from flush()
            value, end = read_string(source, pos)
            yield Token(value, pos)
            pos = end
            continue
        if c.isspace():
            yield from flush()
        elif c == "." and buffer and buffer[0].isdigit():
            buffer.append(c)
        elif c in PUNCTUATION:
            yield from flush()
            yield Token(Symbol(c), pos)
        else:
            if not buffer:
                start = pos
            buffer.append(c)
        pos += 1

    # A word running up to the end of input has no delimiter to flush it.
    yield from flush()


class TokenStream:
    """Cursor over a list of Tokens with a recursive-descent form reader."""

    def __init__(self, tokens: Iterable[Token], max_depth: int | None = None):
        self.tokens: list[Token] = list(tokens)
        self.pos = 0
        self.depth = 0
        self.max_depth = max_depth if max_depth is not None else get_max_depth()

    def peek(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Optional[Token]:
        token = self.peek()
        if token is not None:
            self.pos += 1
        return token

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def offset(self) -> int:
        """Offset of the next token, or just past the last one at the end."""
        token = self.peek()
        if token is not None:
            return token.offset
        if self.tokens:
            return self.tokens[-1].offset + 1
        return 0

    def parse_expr(self) -> Value:
        if self.depth:
            return self._read_form()
        # max_depth may be set beyond what the interpreter stack can hold
        start = self.offset()
        try:
            return self._read_form()
        except RecursionError:
            raise NestingTooDeep(
                f"Nesting exceeds the interpreter recursion limit ({sys.getrecursionlimit()})", start
            ) from None

    def _read_form(self) -> Value:
        token = self.advance()
        if token is None:
            raise UnexpectedEndOfInput("Unexpected end of input", self.offset())

        head = token.value
        if head == LPAREN:
            return self._nested(self._parse_list, token)
        if head == LBRACKET:
            return self._nested(self._parse_vector, token)
        if head == LBRACE:
            return self._nested(self._parse_map, token)
        return head

    def parse_all(self) -> Iterator[Value]:
        while not self.at_end():
            yield self.parse_expr()

    # ------------------------
    # Bracket forms
    # ------------------------
    def _nested(self, reader: Callable[[Token], Value], opening: Token) -> Value:
        self.depth += 1
        try:
            if self.depth > self.max_depth:
                raise NestingTooDeep(
                    f"Nesting exceeds the limit of {self.max_depth}", opening.offset
                )
            return reader(opening)
        finally:
            self.depth -= 1

    def _collect(self, is_delimiter: Callable[[Value], bool], opening: Token) -> list[Value]:
        """Read forms until `is_delimiter` matches the next token, leaving it unread."""
        items: list[Value] = []
        while not self.at_end():
            if is_delimiter(self.peek().value):
                return items
            items.append(self.parse_expr())
        raise UnbalancedDelimiter(f"Unclosed '{opening.value}'", opening.offset)

    def _parse_list(self, opening: Token) -> List:
        items = self._collect(lambda value: value == RPAREN, opening)
        self.advance()  # consume ')'
        return List(items)

    def _segments(self, closing: Symbol, opening: Token) -> Iterator[tuple[list[Value], int]]:
        """Yield each comma-separated segment up to `closing` with its offset."""
        while not self.at_end():
            if self.peek().value == closing:
                self.advance()
                return
            if self.peek().value == COMMA:
                self.advance()
            offset = self.offset()
            segment = self._collect(
                lambda value: value == COMMA or value == closing, opening
            )
            yield segment, offset
        raise UnbalancedDelimiter(f"Unclosed '{opening.value}'", opening.offset)

    def _parse_vector(self, opening: Token) -> Vector:
        elements: list[Value] = []
        for segment, offset in self._segments(RBRACKET, opening):
            if len(segment) != 1:
                raise MalformedVectorElement(
                    f"Vector element must be exactly one value, got {len(segment)}",
                    offset,
                )
            elements.append(segment[0])
        return Vector(elements)

    def _parse_map(self, opening: Token) -> Map:
        pairs: list[tuple[Value, Value]] = []
        for segment, offset in self._segments(RBRACE, opening):
            if len(segment) != 3 or segment[1] != COLON:
                raise MalformedMapPair(
                    "Map entry must have the form 'key : value'", offset
                )
            pairs.append((segment[0], segment[2]))
        return Map(pairs)


def parse(source: str, max_depth: int | None = None) -> Value:
    """Read the first form in `source`; anything after it is ignored."""
    return TokenStream(lex(source), max_depth).parse_expr()


def parse_all(source: str, max_depth: int | None = None) -> list[Value]:
    """Read every form in `source`."""
    return list(TokenStream(lex(source), max_depth).parse_all())
