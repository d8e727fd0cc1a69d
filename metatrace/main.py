#!/usr/bin/env python3
"""
metatrace - Meta trace processing front end

Parses the command line, reports the resolved configuration on stdout and maps
the parse outcome to the process exit status.
"""

import logging
import sys
from typing import Optional, Sequence

from .args import ArgumentParser, ParseResult

# Package version
from . import __version__

EXIT_OK = 0
EXIT_HELP = 1
EXIT_USAGE_ERROR = 2
EXIT_INTERNAL_ERROR = 3


def setup_logging(logging_config: dict):
    """Setup console logging according to specified level"""
    # Determine logging level based on mode
    if logging_config["level"] == "warning":
        level = logging.WARNING
    elif logging_config["level"] == "debug":
        level = logging.DEBUG
    else:  # default
        level = logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    # Logs go to stderr, the configuration report goes to stdout
    if not logging_config.get("quiet", False):
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        formatter = logging.Formatter("%(levelname)s: %(message)s")
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)


def exit_code_for(result: ParseResult) -> int:
    """Map a parse outcome to a process exit status"""
    if result.ok:
        return EXIT_OK
    if result.error.is_help:
        return EXIT_HELP
    return EXIT_USAGE_ERROR


def main(argv: Optional[Sequence[str]] = None, log_level: str = "default") -> int:
    """Main application entry point"""
    if argv is None:
        argv = sys.argv

    setup_logging({"level": log_level})

    try:
        logging.debug("metatrace %s started with %d argument(s)", __version__, len(argv) - 1)

        result = ArgumentParser().parse(argv)
        if not result.ok:
            logging.debug("No configuration produced: %s", result.error.kind.value)
            return exit_code_for(result)

        config = result.config
        logging.info("Configuration resolved for trace: %s", config.trace_path)
        logging.debug("Resolved configuration: %s", config.to_dict())
        print(config)
        return EXIT_OK

    except KeyboardInterrupt:
        logging.info("Interrupted by user")
        return EXIT_INTERNAL_ERROR
    except Exception as e:
        logging.exception("Critical error: %s", str(e))
        return EXIT_INTERNAL_ERROR


if __name__ == "__main__":
    sys.exit(main())
