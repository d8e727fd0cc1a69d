"""
Main argument parser module for metatrace

Scans the argument list left to right and stops at the first problem. The
outcome is returned as a ParseResult; diagnostics and help text are written
to the diagnostic stream (stderr unless another stream is given).
"""

import logging
import sys
from typing import Iterable, List, Optional, Sequence, TextIO

from ..config import TraceConfig
from .options import OptionSpec, build_option_index, format_help
from .result import ArgumentErrorKind, ParseResult
from .validator import ArgumentValidator, ConfigHook

logger = logging.getLogger(__name__)

TRACE_FLAG = "-t/--trace"


class ArgumentParser:
    """Command line argument parser for metatrace"""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        validators: Optional[Iterable[ConfigHook]] = None,
        prog: str = "metatrace",
    ):
        self.prog = prog
        self._stream = stream
        self.validators: List[ConfigHook] = list(validators or [])
        self.validator = ArgumentValidator()
        self.options = build_option_index()

    @property
    def stream(self) -> TextIO:
        # Resolved on use so a replaced sys.stderr is honoured
        return self._stream if self._stream is not None else sys.stderr

    def format_help(self) -> str:
        return format_help(self.prog)

    def print_help(self):
        self.stream.write(self.format_help())

    def parse(self, argv: Optional[Sequence[str]] = None) -> ParseResult:
        """
        Parse a full argument list

        Args:
            argv: Argument list including the program name at index 0,
                defaults to sys.argv

        Returns:
            ParseResult holding either a TraceConfig or the first error found
        """
        if argv is None:
            argv = sys.argv
        tokens = list(argv[1:])

        # Nothing to work with: show usage and fail
        if not tokens:
            self.print_help()
            return self._fail(
                ArgumentErrorKind.MISSING_ARGUMENT,
                f"Missing argument for {TRACE_FLAG}",
                TRACE_FLAG,
            )

        values = {}
        i = 0
        while i < len(tokens):
            token = tokens[i]
            option = self.options.get(token)

            if option is None:
                return self._fail(
                    ArgumentErrorKind.UNKNOWN_ARGUMENT, f"Unknown argument: {token}", token
                )

            if option.dest == "help":
                self.print_help()
                return ParseResult.failure(
                    ArgumentErrorKind.HELP_REQUESTED, "Help requested", token
                )

            if not option.takes_value:
                logger.debug("Option %s set", option.display)
                values[option.dest] = True
                i += 1
                continue

            i += 1
            if i >= len(tokens) or (not option.numeric and tokens[i] in self.options):
                return self._fail(
                    ArgumentErrorKind.MISSING_ARGUMENT, f"Missing argument for {token}", token
                )

            error = self._store_value(option, token, tokens[i], values)
            if error is not None:
                return error
            i += 1

        if "trace_path" not in values:
            return self._fail(
                ArgumentErrorKind.MISSING_ARGUMENT,
                f"Missing argument for {TRACE_FLAG}",
                TRACE_FLAG,
            )

        config = TraceConfig(**values)
        return self._run_validators(config)

    def _store_value(
        self, option: OptionSpec, flag: str, value: str, values: dict
    ) -> Optional[ParseResult]:
        """Store an option value, returning a failure if it does not validate"""
        if not option.numeric:
            values[option.dest] = value
            logger.debug("Option %s = %s", option.display, value)
            return None

        valid, error = self.validator.validate_uint32(flag, value)
        if not valid:
            return self._fail(ArgumentErrorKind.INVALID_NUMBER, error, flag)

        values[option.dest] = self.validator.parse_uint32(value)
        logger.debug("Option %s = %d", option.display, values[option.dest])
        return None

    def _run_validators(self, config: TraceConfig) -> ParseResult:
        """Run configured validation hooks, stopping at the first failure"""
        for hook in self.validators:
            valid, error = hook(config)
            if not valid:
                return self._fail(ArgumentErrorKind.INVALID_CONFIGURATION, error)

        return ParseResult.success(config)

    def _fail(
        self, kind: ArgumentErrorKind, message: str, argument: Optional[str] = None
    ) -> ParseResult:
        """Report an error on the diagnostic stream and wrap it in a result"""
        logger.debug("Argument parsing failed (%s): %s", kind.value, message)
        self.stream.write(message + "\n")
        return ParseResult.failure(kind, message, argument)


def parse(argv: Optional[Sequence[str]] = None, stream: Optional[TextIO] = None) -> ParseResult:
    """Parse an argument list with the default parser"""
    return ArgumentParser(stream=stream).parse(argv)
