"""
metatrace - Meta trace processing front end

Parses and validates the options of a trace processing run (trace path,
number of output files, object ID randomization and access interval) and
reports the resolved configuration.
"""

__version__ = "0.1.0"
__author__ = "metatrace contributors"
__license__ = "GPL-3.0"

from .args import (
    ArgumentParser,
    ArgumentError,
    ArgumentErrorKind,
    ConfigValidator,
    ParseResult,
    parse,
)
from .config import TraceConfig

__all__ = [
    "ArgumentParser",
    "ArgumentError",
    "ArgumentErrorKind",
    "ConfigValidator",
    "ParseResult",
    "TraceConfig",
    "parse",
]
