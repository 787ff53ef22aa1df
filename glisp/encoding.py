"""JSON encoding of locations, diagnostics and syntax trees for editor tooling."""

import json
from typing import Any, Iterable

from .diagnostics import Diagnostic, Location
from .syntax import KeyNameNode, ListNode, Located, NumberNode, StringNode, SymbolNode, SyntaxNode


def encode_location(loc: Location) -> dict[str, int]:
    return {
        "startRow": loc.start.row,
        "startCol": loc.start.col,
        "endRow": loc.end.row,
        "endCol": loc.end.col,
    }


def encode_diagnostic(diag: Diagnostic) -> dict[str, Any]:
    out: dict[str, Any] = encode_location(diag.location)
    out["recoverable"] = diag.recoverable
    out["msg"] = diag.message
    return out


def encode_node(node: Located[SyntaxNode]) -> dict[str, Any]:
    out: dict[str, Any] = encode_location(node.location)
    value = node.value
    if isinstance(value, ListNode):
        out["type"] = "list"
        out["children"] = [encode_node(c) for c in value.children]
    elif isinstance(value, SymbolNode):
        out["type"] = "symbol"
        out["ident"] = value.name
    elif isinstance(value, StringNode):
        out["type"] = "str"
        out["value"] = value.value
    elif isinstance(value, NumberNode):
        out["type"] = "num"
        out["value"] = value.value
    elif isinstance(value, KeyNameNode):
        out["type"] = "key"
        out["name"] = value.name
    else:
        raise TypeError(f"not a syntax node: {value!r}")
    return out


def encode_tree(nodes: Iterable[Located[SyntaxNode]]) -> list[dict[str, Any]]:
    return [encode_node(n) for n in nodes]


def dumps(obj: Any) -> str:
    return json.dumps(obj, separators=(",", ":"))
