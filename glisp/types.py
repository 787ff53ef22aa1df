from dataclasses import dataclass
from typing import Optional

from .syntax import Located

DEFAULT_MAX_DEPTH = 64

# Expression nodes produced by the analyzer. Every node travels wrapped in
# Located so diagnostics from later stages can point back at the source.


@dataclass(frozen=True)
class SetVar:
    target: Located[str]
    value: "Located[Expr]"


@dataclass(frozen=True)
class GetVar:
    name: str


@dataclass(frozen=True)
class FuncCall:
    name: Located[str]
    args: tuple["Located[Expr]", ...] = ()


@dataclass(frozen=True)
class If:
    cond: "Located[Expr]"
    body: tuple["Located[Expr]", ...] = ()


@dataclass(frozen=True)
class StringLit:
    value: str


@dataclass(frozen=True)
class NumberLit:
    value: float


@dataclass(frozen=True)
class KeyLit:
    code: int


Expr = SetVar | GetVar | FuncCall | If | StringLit | NumberLit | KeyLit

Body = tuple[Located[Expr], ...]

HANDLERS = ("init", "update", "draw")


@dataclass(frozen=True)
class Program:
    vars: tuple[str, ...] = ()
    init: Optional[Body] = None
    update: Optional[Body] = None
    draw: Optional[Body] = None


@dataclass(frozen=True)
class ParseOptions:
    max_depth: int = DEFAULT_MAX_DEPTH
