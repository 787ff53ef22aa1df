"""Top-level compile API: source text in, Program or Diagnostic out."""

from typing import Optional

from .analyzer import process_program
from .diagnostics import CompileError, Diagnostic
from .keys import KeyTable
from .parser import parse
from .types import ParseOptions, Program


def compile_source(
    src: str,
    options: Optional[ParseOptions] = None,
    keys: Optional[KeyTable] = None,
) -> Program:
    """Parse and analyze a glisp program.

    Raises ParseError or SemanticError (both CompileError) on the first failure.
    """
    return process_program(parse(src, options), keys)


def check_source(
    src: str,
    options: Optional[ParseOptions] = None,
    keys: Optional[KeyTable] = None,
) -> Optional[Diagnostic]:
    """Compile `src` and return its diagnostic, or None if it compiles cleanly."""
    try:
        compile_source(src, options, keys)
    except CompileError as e:
        return e.diagnostic
    return None
