from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TokenKind(str, Enum):
    """Category of a single raw argument token."""

    LONG_OPTION = "Long Option"
    LONG_FLAG = "Long Flag"
    SHORT_FLAG = "Short Flag"
    POSITIONAL = "Positional"

    @property
    def label(self) -> str:
        return f"({self.value})"


class ScalarType(str, Enum):
    """Inferred data type of a positional token."""

    INTEGER = "integer"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    STRING = "string"


@dataclass(slots=True, frozen=True)
class ParsedArguments:
    """Tokens partitioned into flags, options and positional values."""

    flags: dict[str, bool] = field(default_factory=dict)
    options: dict[str, str] = field(default_factory=dict)
    positional: tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class ArgumentStatistics:
    total: int = 0
    flags: int = 0
    options: int = 0
    positional: int = 0
    average_length: float = 0.0
    longest: str | None = None
    longest_length: int = 0
    shortest: str | None = None
    shortest_length: int = 0


@dataclass(slots=True, frozen=True)
class ValidationCounts:
    emails: int = 0
    urls: int = 0
    numbers: int = 0

    @property
    def any_match(self) -> bool:
        return bool(self.emails or self.urls or self.numbers)


@dataclass(slots=True, frozen=True)
class LexicalPatterns:
    uppercase: int = 0
    lowercase: int = 0
    mixed_case: int = 0
    extensions: dict[str, int] = field(default_factory=dict)

    @property
    def any_case(self) -> bool:
        return bool(self.uppercase or self.lowercase or self.mixed_case)


@dataclass(slots=True, frozen=True)
class DataTypeCounts:
    integers: int = 0
    decimals: int = 0
    booleans: int = 0
    strings: int = 0

    @property
    def total(self) -> int:
        """Number of tokens that went through type detection."""
        return self.integers + self.decimals + self.booleans + self.strings


@dataclass(slots=True, frozen=True)
class AnalysisResult:
    """Everything derived from one invocation's argument list."""

    arguments: tuple[str, ...]
    parsed: ParsedArguments
    statistics: ArgumentStatistics
    validation: ValidationCounts
    patterns: LexicalPatterns
    data_types: DataTypeCounts

    @property
    def flags(self) -> dict[str, bool]:
        return self.parsed.flags

    @property
    def options(self) -> dict[str, str]:
        return self.parsed.options

    @property
    def positional(self) -> tuple[str, ...]:
        return self.parsed.positional
