"""Recursive-descent parser for glisp S-expressions.

The parser keeps an explicit stack of syntactic contexts. Each frame records
where the construct started, and a failure is reported as a span from the
start of the attributed frame to the point where parsing stopped. When the
innermost frame is a list, the frame below it is used instead, so an
unterminated list is reported against the declaration or construct that
contains it.
"""

import logging
import string
from enum import Enum
from typing import Callable, NoReturn, Optional

from .diagnostics import Diagnostic, Location, ParseError, Position, Severity
from .syntax import KeyNameNode, ListNode, Located, NumberNode, StringNode, SymbolNode, SyntaxNode
from .types import ParseOptions

logger = logging.getLogger(__name__)

_DIGITS = frozenset(string.digits)
_ALNUM = frozenset(string.ascii_letters + string.digits)
_SYMBOL_PUNCT = frozenset("+-*/<>=?!_")
_SYMBOL_START = frozenset(string.ascii_letters) | _SYMBOL_PUNCT
_SYMBOL_CHARS = _ALNUM | _SYMBOL_PUNCT
_DELIMITERS = frozenset(string.whitespace + '()"')
# Characters that may not directly follow a number literal.
_NUMBER_JUNK = _ALNUM | _SYMBOL_PUNCT | frozenset(".@")

_ESCAPES = {
    "n": "\n",
    "t": "\t",
    '"': '"',
    "\\": "\\",
}


class Context(Enum):
    TOP_LEVEL = "top-level"
    LIST = "inside-list"
    STRING = "inside-string"
    KEY_NAME = "inside-key-name"


class _Parser:
    def __init__(self, src: str, options: ParseOptions):
        self.src = src
        self.options = options
        self.index = 0
        self.row = 1
        self.col = 1
        self.depth = 0
        self.contexts: list[tuple[Context, Position]] = []

    # --- cursor ---

    def position(self) -> Position:
        return Position(self.row, self.col)

    def peek(self, offset: int = 0) -> Optional[str]:
        i = self.index + offset
        if i >= len(self.src):
            return None
        return self.src[i]

    def advance(self):
        if self.src[self.index] == "\n":
            self.row += 1
            self.col = 1
        else:
            self.col += 1
        self.index += 1

    def take_while(self, pred: Callable[[str], bool]) -> str:
        begin = self.index
        while self.index < len(self.src) and pred(self.src[self.index]):
            self.advance()
        return self.src[begin:self.index]

    def skip_whitespace(self):
        self.take_while(str.isspace)

    # --- contexts ---

    def push(self, kind: Context, start: Position):
        self.contexts.append((kind, start))

    def pop(self):
        self.contexts.pop()

    def attributed_context(self) -> tuple[Context, Position]:
        kind, start = self.contexts[-1]
        if kind is Context.LIST and len(self.contexts) > 1:
            return self.contexts[-2]
        return kind, start

    def fail(self, message: str, severity: Severity = Severity.NONRECOVERABLE) -> NoReturn:
        kind, start = self.attributed_context()
        diag = Diagnostic(severity, Location(start, self.position()), message)
        logger.debug("parse failed %s: %s", kind.value, diag)
        raise ParseError(diag)

    # --- grammar ---

    def parse_program(self) -> tuple[Located[SyntaxNode], ...]:
        nodes = []
        while True:
            self.skip_whitespace()
            ch = self.peek()
            if ch is None:
                break
            self.push(Context.TOP_LEVEL, self.position())
            if ch == ")":
                self.advance()
                self.fail("unexpected `)`")
            nodes.append(self.parse_expr())
            self.pop()
        return tuple(nodes)

    def parse_expr(self) -> Located[SyntaxNode]:
        ch = self.peek()
        if ch == "(":
            return self.parse_list()
        if ch == '"':
            return self.parse_string()
        if ch == "@":
            return self.parse_key_name()
        if ch in _DIGITS or (ch in "+-" and self.peek(1) in _DIGITS):
            return self.parse_number()
        if ch in _SYMBOL_START:
            return self.parse_symbol()
        self.advance()
        self.fail(f"expected an expression, found `{ch}`")

    def parse_list(self) -> Located[ListNode]:
        start = self.position()
        if self.depth >= self.options.max_depth:
            self.advance()
            self.fail("maximum nesting depth exceeded")
        self.push(Context.LIST, start)
        self.depth += 1
        self.advance()
        children = []
        while True:
            self.skip_whitespace()
            ch = self.peek()
            if ch is None:
                self.fail("expected list terminator", Severity.RECOVERABLE)
            if ch == ")":
                self.advance()
                break
            children.append(self.parse_expr())
        self.depth -= 1
        self.pop()
        return Located(Location(start, self.position()), ListNode(tuple(children)))

    def parse_string(self) -> Located[StringNode]:
        start = self.position()
        self.push(Context.STRING, start)
        self.advance()
        chunks = []
        while True:
            run = self.take_while(lambda c: c not in '\\"')
            if run:
                chunks.append(run)
            ch = self.peek()
            if ch is None:
                self.fail("unterminated string")
            if ch == '"':
                self.advance()
                break
            # backslash
            self.advance()
            esc = self.peek()
            if esc is None:
                self.fail("unterminated string")
            self.advance()
            if esc not in _ESCAPES:
                self.fail(f"invalid escape sequence `\\{esc}`")
            chunks.append(_ESCAPES[esc])
        self.pop()
        return Located(Location(start, self.position()), StringNode("".join(chunks)))

    def parse_key_name(self) -> Located[KeyNameNode]:
        start = self.position()
        self.push(Context.KEY_NAME, start)
        self.advance()
        name = self.take_while(lambda c: c in _ALNUM)
        if not name:
            self.fail("expected key name")
        self.pop()
        return Located(Location(start, self.position()), KeyNameNode(name))

    def parse_number(self) -> Located[NumberNode]:
        start = self.position()
        begin = self.index
        if self.peek() in ("+", "-"):
            self.advance()
        self.take_while(lambda c: c in _DIGITS)
        well_formed = True
        if self.peek() == ".":
            self.advance()
            well_formed = bool(self.take_while(lambda c: c in _DIGITS))
        if well_formed and self.peek() in ("e", "E"):
            self.advance()
            if self.peek() in ("+", "-"):
                self.advance()
            well_formed = bool(self.take_while(lambda c: c in _DIGITS))
        if not well_formed or self.peek() in _NUMBER_JUNK:
            self.take_while(lambda c: c not in _DELIMITERS)
            self.fail(f"malformed number `{self.src[begin:self.index]}`")
        text = self.src[begin:self.index]
        return Located(Location(start, self.position()), NumberNode(float(text)))

    def parse_symbol(self) -> Located[SymbolNode]:
        start = self.position()
        name = self.take_while(lambda c: c in _SYMBOL_CHARS)
        return Located(Location(start, self.position()), SymbolNode(name))


def parse(src: str, options: Optional[ParseOptions] = None) -> tuple[Located[SyntaxNode], ...]:
    """Parse glisp source into a tuple of top-level syntax nodes.

    Raises ParseError carrying a Diagnostic on the first failure.
    """
    parser = _Parser(src, options or ParseOptions())
    nodes = parser.parse_program()
    logger.debug("parsed %d top-level forms", len(nodes))
    return nodes
