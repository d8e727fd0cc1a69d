"""
metatrace.args - Command line argument parsing module

Provides argument parsing, value validation and optional configuration checks
for the metatrace front end.
"""

from .base import ArgumentParser, parse
from .options import OPTIONS, OptionSpec, format_help
from .result import ArgumentError, ArgumentErrorKind, ParseResult
from .validator import ArgumentValidator, ConfigValidator

# Primary export
__all__ = [
    "ArgumentParser",      # Main public interface
    "parse",
    "ParseResult",
    "ArgumentError",
    "ArgumentErrorKind",
    "ArgumentValidator",   # For testing/validation
    "ConfigValidator",     # Optional configuration checks
    "OPTIONS",
    "OptionSpec",
    "format_help",
]
