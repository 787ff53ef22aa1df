"""Location-tagged S-expression tree produced by the parser."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from .diagnostics import Location

T = TypeVar("T")


@dataclass(frozen=True)
class Located(Generic[T]):
    location: Location
    value: T


@dataclass(frozen=True)
class ListNode:
    children: tuple["Located[SyntaxNode]", ...] = ()


@dataclass(frozen=True)
class SymbolNode:
    name: str


@dataclass(frozen=True)
class StringNode:
    value: str


@dataclass(frozen=True)
class NumberNode:
    value: float


@dataclass(frozen=True)
class KeyNameNode:
    # Raw name as written after '@'; resolved by the analyzer.
    name: str


SyntaxNode = ListNode | SymbolNode | StringNode | NumberNode | KeyNameNode
