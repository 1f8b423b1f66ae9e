"""Configuration for overflower.

Only platform facts live here. The overflow policy is always chosen by the
caller through the entry point it calls, never read from configuration.
"""

import os
import struct
from dataclasses import dataclass, field

# Environment variable overriding the pointer width used for usize/isize
POINTER_WIDTH_ENV = "OVERFLOWER_POINTER_WIDTH"

SUPPORTED_POINTER_WIDTHS = (16, 32, 64)


def platform_pointer_width() -> int:
    """Pointer width of the running interpreter, in bits."""
    return struct.calcsize("P") * 8


def pointer_width_from_env() -> int:
    """Read the pointer width from the environment.

    Falls back to the interpreter's pointer width when the variable is unset.

    Raises:
        ValueError: If the variable is not an integer
    """
    raw = os.environ.get(POINTER_WIDTH_ENV)
    if raw is None or not raw.strip():
        return platform_pointer_width()
    try:
        return int(raw)
    except ValueError as err:
        raise ValueError(f"{POINTER_WIDTH_ENV} must be an integer, got '{raw}'") from err


@dataclass(frozen=True)
class OverflowConfig:
    """Platform configuration for the fixed-width integer kinds.

    Attributes:
        pointer_width: Bit width of usize/isize (16, 32 or 64). Defaults to
            $OVERFLOWER_POINTER_WIDTH, else the interpreter's pointer width.
    """

    pointer_width: int = field(default_factory=pointer_width_from_env)

    def __post_init__(self) -> None:
        if self.pointer_width not in SUPPORTED_POINTER_WIDTHS:
            raise ValueError(
                f"Unsupported pointer width: {self.pointer_width} "
                f"(expected one of {SUPPORTED_POINTER_WIDTHS})"
            )


# Default configuration instance
DEFAULT_CONFIG = OverflowConfig()
