"""
Configuration record for metatrace

Holds the resolved settings a trace processing run is started with.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict

# Largest value accepted for numeric options (unsigned 32-bit)
MAX_UINT32 = 2**32 - 1

DEFAULT_NUM_OUT = 1
DEFAULT_START = 0
DEFAULT_END = 100


@dataclass(frozen=True)
class TraceConfig:
    """Validated configuration for one metatrace invocation"""

    trace_path: str
    num_out: int = DEFAULT_NUM_OUT
    randomize: bool = False
    start: int = DEFAULT_START
    end: int = DEFAULT_END

    def to_dict(self) -> Dict[str, Any]:
        """Configuration as a plain dictionary"""
        return asdict(self)

    def __str__(self) -> str:
        lines = [
            "TraceConfig{",
            f"\ttrace: {self.trace_path},",
            f"\tnum_out_files: {self.num_out},",
            f"\trandomize: {str(self.randomize).lower()},",
            f"\trange: {self.start}%-{self.end}%,",
            "}",
        ]
        return "\n".join(lines)
