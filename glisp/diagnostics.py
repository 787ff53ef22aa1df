"""Source locations and the diagnostic shape shared by parser and analyzer."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, order=True)
class Position:
    row: int
    col: int

    def __str__(self) -> str:
        return f"{self.row}:{self.col}"


@dataclass(frozen=True)
class Location:
    """Half-open span: ``end`` is the position just past the last character."""

    start: Position
    end: Position

    def __post_init__(self):
        if self.end < self.start:
            raise ValueError(f"location ends before it starts: {self.start}-{self.end}")

    def contains(self, other: "Location") -> bool:
        return self.start <= other.start and other.end <= self.end

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


class Severity(Enum):
    RECOVERABLE = "recoverable"
    NONRECOVERABLE = "nonrecoverable"


@dataclass(frozen=True)
class Diagnostic:
    severity: Severity
    location: Location
    message: str

    @property
    def recoverable(self) -> bool:
        return self.severity is Severity.RECOVERABLE

    def __str__(self) -> str:
        return f"{self.location.start}: {self.message}"


class CompileError(Exception):
    """Raised when a program cannot be compiled. Carries exactly one diagnostic."""

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(str(diagnostic))
        self.diagnostic = diagnostic


class ParseError(CompileError):
    pass


class SemanticError(CompileError):
    pass
