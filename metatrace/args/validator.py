"""
Argument validation module for metatrace

Handles validation of numeric option values and the optional checks that can
be run on a fully parsed configuration.
"""

import re
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from ..config import MAX_UINT32, TraceConfig

ValidationResult = Tuple[bool, Optional[str]]
ConfigHook = Callable[[TraceConfig], ValidationResult]


class ArgumentValidator:
    """Validates command-line option values"""

    # Validation patterns: base-10 digits with an optional "+", "_" allowed between digits; "-0" is zero
    UINT_PATTERN = re.compile(r"\+?[0-9](?:[0-9_]*[0-9])?|-0(?:[0_]*0)?")

    @classmethod
    def parse_uint32(cls, value: str) -> Optional[int]:
        """
        Parse an unsigned 32-bit integer

        Args:
            value: Raw option value from the command line

        Returns:
            The integer, or None if the text is not a valid value
        """
        if not cls.UINT_PATTERN.fullmatch(value):
            return None

        number = int(value.replace("_", ""), 10)
        if number > MAX_UINT32:
            return None

        return number

    @classmethod
    def validate_uint32(cls, flag: str, value: str) -> ValidationResult:
        """
        Validate an unsigned 32-bit integer option value

        Args:
            flag: Flag as typed by the user, used in the error message
            value: Raw option value

        Returns:
            Tuple of (is_valid, error_message)
        """
        if cls.parse_uint32(value) is None:
            return False, f"Invalid number for {flag}: '{value}'"

        return True, None


class ConfigValidator:
    """Optional checks on a parsed configuration, none enabled by default"""

    @staticmethod
    def validate_range(config: TraceConfig) -> ValidationResult:
        """Access interval must satisfy start <= end <= 100"""
        if config.end > 100:
            return False, f"Parameter [--end] must be 0-100, got: {config.end}"

        if config.start > config.end:
            return False, (
                f"Parameter [--start] must not exceed [--end], "
                f"got: {config.start} > {config.end}"
            )

        return True, None

    @staticmethod
    def validate_num_out(config: TraceConfig) -> ValidationResult:
        """At least one output file"""
        if config.num_out < 1:
            return False, f"Parameter [--num-out] must be at least 1, got: {config.num_out}"

        return True, None

    @staticmethod
    def validate_trace_exists(config: TraceConfig) -> ValidationResult:
        """Trace path must point to an existing file"""
        if not Path(config.trace_path).is_file():
            return False, f"Trace file not found: {config.trace_path}"

        return True, None

    @classmethod
    def all_validators(cls) -> List[ConfigHook]:
        return [cls.validate_range, cls.validate_num_out, cls.validate_trace_exists]
