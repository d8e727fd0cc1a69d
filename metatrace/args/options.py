"""
Option table for metatrace

Every recognized flag is declared once here. The scanner in base.py and the
help text rendered below are both built from OPTIONS.
"""

import argparse
from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class OptionSpec:
    """One command line option, in short and long form"""

    dest: str
    short: str
    long: str
    help: str
    takes_value: bool = False
    numeric: bool = False
    metavar: Optional[str] = None

    @property
    def flags(self) -> Tuple[str, str]:
        return (self.short, self.long)

    @property
    def display(self) -> str:
        return f"{self.short}/{self.long}"


OPTIONS = (
    OptionSpec("help", "-h", "--help", "Print this help message"),
    OptionSpec(
        "trace_path", "-t", "--trace", "Path to the meta trace file",
        takes_value=True, metavar="PATH",
    ),
    OptionSpec(
        "num_out", "-n", "--num-out",
        "Number of output files to split the trace into (default: 1)",
        takes_value=True, numeric=True, metavar="N",
    ),
    OptionSpec("randomize", "-r", "--randomize", "Randomize the object IDs"),
    OptionSpec(
        "start", "-s", "--start",
        "Start of the interval to keep in percentage of accesses (default: 0)",
        takes_value=True, numeric=True, metavar="PERCENT",
    ),
    OptionSpec(
        "end", "-e", "--end",
        "End of the interval to keep in percentage of accesses (default: 100)",
        takes_value=True, numeric=True, metavar="PERCENT",
    ),
)


def build_option_index() -> Dict[str, OptionSpec]:
    """Map every short and long flag to its option"""
    index = {}
    for option in OPTIONS:
        for flag in option.flags:
            index[flag] = option
    return index


def _get_epilog_text() -> str:
    """Get the epilog help text"""
    return """
Examples:
  metatrace -t meta.trace
  metatrace -t meta.trace -n 4 -r
  metatrace --trace meta.trace --start 20 --end 80

Access interval:
  -s 0 -e 100     The entire trace is kept
  -s 20 -e 80     Objects accounting from 20 to 80 percent of accesses are kept
        """


def create_help_parser(prog: str = "metatrace") -> argparse.ArgumentParser:
    """Create an argparse parser mirroring OPTIONS, used to render help text"""
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Processing meta trace files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_get_epilog_text(),
        add_help=False,
    )

    for option in OPTIONS:
        if option.takes_value:
            parser.add_argument(
                option.short, option.long, dest=option.dest,
                metavar=option.metavar, help=option.help,
            )
        else:
            parser.add_argument(
                option.short, option.long, dest=option.dest,
                action="store_true", help=option.help,
            )

    return parser


def format_help(prog: str = "metatrace") -> str:
    """Full usage text"""
    return create_help_parser(prog).format_help()
