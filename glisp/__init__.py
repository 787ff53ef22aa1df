from .parser import parse
from .analyzer import process_program
from .compiler import compile_source, check_source
from .diagnostics import CompileError, Diagnostic, ParseError, SemanticError, Severity
from .types import ParseOptions, Program

__all__ = [
    "parse", "process_program", "compile_source", "check_source",
    "CompileError", "Diagnostic", "ParseError", "SemanticError", "Severity",
    "ParseOptions", "Program",
]
