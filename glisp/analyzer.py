"""Semantic analysis: validate special forms and assemble a Program."""

import dataclasses
import logging
from typing import Iterable, NoReturn, Optional

from .diagnostics import Diagnostic, Location, SemanticError, Severity
from .keys import DEFAULT_KEYS, KeyTable
from .syntax import KeyNameNode, ListNode, Located, NumberNode, StringNode, SymbolNode, SyntaxNode
from .types import (
    HANDLERS, Body, Expr, FuncCall, GetVar, If, KeyLit, NumberLit, Program, SetVar, StringLit,
)

logger = logging.getLogger(__name__)


def _fail(location: Location, message: str) -> NoReturn:
    diag = Diagnostic(Severity.NONRECOVERABLE, location, message)
    logger.debug("analysis failed: %s", diag)
    raise SemanticError(diag)


def _alternatives(names: tuple[str, ...]) -> str:
    return " or ".join(f"`{n}`" for n in names)


def process_program(
    nodes: Iterable[Located[SyntaxNode]],
    keys: Optional[KeyTable] = None,
) -> Program:
    """Fold top-level syntax nodes into a Program, stopping at the first error."""
    if keys is None:
        keys = DEFAULT_KEYS
    program = Program()
    for node in nodes:
        program = process_top_level(program, node, keys)
    logger.debug(
        "assembled program with handlers: %s",
        ", ".join(h for h in HANDLERS if getattr(program, h) is not None) or "none",
    )
    return program


def process_top_level(
    program: Program,
    node: Located[SyntaxNode],
    keys: Optional[KeyTable] = None,
) -> Program:
    if keys is None:
        keys = DEFAULT_KEYS
    form = node.value
    if (
        not isinstance(form, ListNode)
        or not form.children
        or not isinstance(form.children[0].value, SymbolNode)
        or form.children[0].value.name not in HANDLERS
    ):
        _fail(node.location, "top-level expression must be an init, update, or draw declaration")

    name = form.children[0].value.name
    body = process_body(form.children[1:], keys)
    if getattr(program, name) is not None:
        _fail(node.location, f"duplicate `{name}` declaration")
    return dataclasses.replace(program, **{name: body})


def process_body(nodes: Iterable[Located[SyntaxNode]], keys: Optional[KeyTable] = None) -> Body:
    if keys is None:
        keys = DEFAULT_KEYS
    body = []
    for node in nodes:
        body.append(process_expr(node, keys))
    return tuple(body)


def process_expr(node: Located[SyntaxNode], keys: Optional[KeyTable] = None) -> Located[Expr]:
    if keys is None:
        keys = DEFAULT_KEYS
    value = node.value
    if isinstance(value, StringNode):
        expr = StringLit(value.value)
    elif isinstance(value, NumberNode):
        expr = NumberLit(value.value)
    elif isinstance(value, SymbolNode):
        expr = GetVar(value.name)
    elif isinstance(value, KeyNameNode):
        code = keys.resolve(value.name)
        if code is None:
            message = f"unknown key name `{value.name}`"
            suggestions = keys.suggest(value.name)
            if suggestions:
                message += f", did you mean {_alternatives(suggestions)}?"
            _fail(node.location, message)
        expr = KeyLit(code)
    elif isinstance(value, ListNode):
        expr = _list_expr(node.location, value.children, keys)
    else:
        raise TypeError(f"not a syntax node: {value!r}")
    return Located(node.location, expr)


def _list_expr(
    location: Location,
    children: tuple[Located[SyntaxNode], ...],
    keys: KeyTable,
) -> Expr:
    if not children:
        _fail(location, "empty list is not a valid expression")

    head, rest = children[0], children[1:]
    if not isinstance(head.value, SymbolNode):
        _fail(head.location, "first element of a list must be a symbol")
    name = head.value.name

    if name == "if":
        if not rest:
            _fail(location, "if missing condition")
        cond = process_expr(rest[0], keys)
        return If(cond, process_body(rest[1:], keys))

    if name == "set":
        if len(rest) == 0:
            _fail(location, "missing operands to set")
        if len(rest) == 1:
            _fail(location, "missing value to set the variable to")
        if len(rest) > 2:
            _fail(location, "too many operands to set")
        target, value = rest
        if not isinstance(target.value, SymbolNode):
            _fail(target.location, "first operand to set must be a symbol")
        return SetVar(Located(target.location, target.value.name), process_expr(value, keys))

    return FuncCall(Located(head.location, name), process_body(rest, keys))
