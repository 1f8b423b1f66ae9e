"""Fixed-width integer kinds.

An IntKind describes one two's-complement integer representation: its bit
width and signedness. Everything else (MIN, MAX, mask, shiftable width) is
derived, so the semantics table is written once and parameterised by kind.
"""

from __future__ import annotations

from dataclasses import dataclass

from overflower.config import DEFAULT_CONFIG, OverflowConfig
from overflower.errors import ArithmeticOverflow

__all__ = [
    "IntKind",
    "U8",
    "U16",
    "U32",
    "U64",
    "USIZE",
    "I8",
    "I16",
    "I32",
    "I64",
    "ISIZE",
    "KINDS",
    "kind_by_name",
    "kind_for",
    "pointer_kinds",
]


@dataclass(frozen=True)
class IntKind:
    """A fixed-width integer representation.

    Attributes:
        name: Short type name (e.g. "u8", "isize")
        bits: Bit width
        signed: True for two's-complement signed kinds
    """

    name: str
    bits: int
    signed: bool

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1

    @property
    def shift_bits(self) -> int:
        """Width available to a left shift before the sign bit is reached."""
        return self.bits - 1 if self.signed else self.bits

    def contains(self, value: int) -> bool:
        """Check if value is representable without raising."""
        return self.min <= value <= self.max

    def wrap(self, value: int) -> int:
        """Reduce value modulo 2^bits and reinterpret it in this kind."""
        value &= self.mask
        if self.signed and value > self.max:
            value -= 1 << self.bits
        return value

    def clamp(self, value: int) -> int:
        """Clamp value to [min, max]."""
        return max(self.min, min(value, self.max))

    def check(self, value: int, expression: str) -> int:
        """Return value if representable.

        Raises:
            ArithmeticOverflow: If value is outside [min, max]
        """
        if not self.contains(value):
            raise ArithmeticOverflow(
                f"arithmetic overflow: {expression} = {value} does not fit in {self.name}"
            )
        return value

    def __str__(self) -> str:
        return self.name


def pointer_kinds(config: OverflowConfig = DEFAULT_CONFIG) -> tuple[IntKind, IntKind]:
    """Build the (usize, isize) kinds for a configuration."""
    return (
        IntKind("usize", config.pointer_width, signed=False),
        IntKind("isize", config.pointer_width, signed=True),
    )


U8 = IntKind("u8", 8, signed=False)
U16 = IntKind("u16", 16, signed=False)
U32 = IntKind("u32", 32, signed=False)
U64 = IntKind("u64", 64, signed=False)
I8 = IntKind("i8", 8, signed=True)
I16 = IntKind("i16", 16, signed=True)
I32 = IntKind("i32", 32, signed=True)
I64 = IntKind("i64", 64, signed=True)
USIZE, ISIZE = pointer_kinds()

KINDS: dict[str, IntKind] = {
    kind.name: kind for kind in (U8, U16, U32, U64, USIZE, I8, I16, I32, I64, ISIZE)
}

# Sized kinds keyed by (bits, signed), for foreign integer types such as numpy
_SIZED: dict[tuple[int, bool], IntKind] = {
    (kind.bits, kind.signed): kind for kind in (U8, U16, U32, U64, I8, I16, I32, I64)
}


def kind_by_name(name: str) -> IntKind:
    """Look up a kind by its name.

    Raises:
        KeyError: If no kind has that name
    """
    try:
        return KINDS[name.lower()]
    except KeyError:
        raise KeyError(f"Unknown integer kind: '{name}' (known: {', '.join(KINDS)})") from None


def kind_for(bits: int, signed: bool) -> IntKind:
    """Look up the sized kind with the given width and signedness.

    Raises:
        KeyError: If no 8/16/32/64-bit kind matches
    """
    try:
        return _SIZED[(bits, signed)]
    except KeyError:
        raise KeyError(f"No {'signed' if signed else 'unsigned'} {bits}-bit kind") from None
