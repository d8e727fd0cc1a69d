"""
Parse result types for metatrace

A parse either yields a TraceConfig or exactly one ArgumentError. User input
problems are reported through these values, never raised.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..config import TraceConfig


class ArgumentErrorKind(Enum):
    """Reasons a parse can end without a configuration"""

    MISSING_ARGUMENT = "missing_argument"
    INVALID_NUMBER = "invalid_number"
    UNKNOWN_ARGUMENT = "unknown_argument"
    HELP_REQUESTED = "help_requested"
    INVALID_CONFIGURATION = "invalid_configuration"


@dataclass(frozen=True)
class ArgumentError:
    """First problem found while parsing the argument list"""

    kind: ArgumentErrorKind
    message: str
    # Flag or token the error refers to, if any
    argument: Optional[str] = None

    @property
    def is_help(self) -> bool:
        return self.kind is ArgumentErrorKind.HELP_REQUESTED

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ParseResult:
    """Tagged result: exactly one of config or error is set"""

    config: Optional[TraceConfig] = None
    error: Optional[ArgumentError] = None

    def __post_init__(self):
        if (self.config is None) == (self.error is None):
            raise ValueError("ParseResult needs exactly one of config or error")

    @classmethod
    def success(cls, config: TraceConfig) -> "ParseResult":
        return cls(config=config)

    @classmethod
    def failure(
        cls, kind: ArgumentErrorKind, message: str, argument: Optional[str] = None
    ) -> "ParseResult":
        return cls(error=ArgumentError(kind, message, argument))

    @property
    def ok(self) -> bool:
        return self.error is None
