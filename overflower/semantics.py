"""Checked-arithmetic semantics table.

One pure function per (operation, policy), parameterised by the IntKind of
the operands. Operands and results are plain Python ints already known to be
in range for the kind; each rule either returns an in-range int or raises.

Policies:
- wrapping_*: keep the low `bits` bits of the true result (two's complement)
- panicking_*: return the true result, raise ArithmeticOverflow if it does not fit
- saturating_*: clamp the true result to [MIN, MAX]

Division and remainder truncate toward zero, not toward
negative infinity like Python's // and %. Division by zero raises
DivisionByZero under wrap and panic and has a defined value under saturate.

Shift counts are non-negative ints. A left shift may use `shift_bits` bits
of the kind (the sign bit is not shiftable for signed kinds).
"""

from __future__ import annotations

from collections.abc import Callable

from overflower.errors import ArithmeticOverflow, DivisionByZero
from overflower.kinds import IntKind
from overflower.types import Operation, Policy

__all__ = [
    "BinaryRule",
    "UnaryRule",
    "RULES",
    "rule",
    "div_trunc",
    "rem_trunc",
]

BinaryRule = Callable[[IntKind, int, int], int]
UnaryRule = Callable[[IntKind, int], int]


# =============================================================================
# Helpers
# =============================================================================


def div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero.

    Python's // rounds toward negative infinity. Fixed-width integer division
    truncates toward zero, which differs when the operands have different signs:
    -7 // 2 == -4, but div_trunc(-7, 2) == -3.

    Raises:
        ZeroDivisionError: If b is zero
    """
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def rem_trunc(a: int, b: int) -> int:
    """Remainder matching div_trunc (sign follows the dividend)."""
    return a - b * div_trunc(a, b)


def _nonzero_divisor(kind: IntKind, a: int, b: int, symbol: str) -> None:
    if b == 0:
        what = "divide" if symbol == "/" else "calculate the remainder"
        raise DivisionByZero(
            f"attempt to {what} with a divisor of zero: {a} {symbol} 0 ({kind.name})"
        )


def _shl_fits(kind: IntKind, value: int, count: int) -> bool:
    """Check that value << count keeps every significant bit.

    value must be non-zero.
    """
    if count >= kind.shift_bits:
        return False
    if value > 0:
        return (kind.max >> count) >= value
    return (kind.min >> count) <= value


# =============================================================================
# Add / Sub / Mul
# =============================================================================


def wrapping_add(kind: IntKind, a: int, b: int) -> int:
    return kind.wrap(a + b)


def panicking_add(kind: IntKind, a: int, b: int) -> int:
    return kind.check(a + b, f"{a} + {b}")


def saturating_add(kind: IntKind, a: int, b: int) -> int:
    return kind.clamp(a + b)


def wrapping_sub(kind: IntKind, a: int, b: int) -> int:
    return kind.wrap(a - b)


def panicking_sub(kind: IntKind, a: int, b: int) -> int:
    return kind.check(a - b, f"{a} - {b}")


def saturating_sub(kind: IntKind, a: int, b: int) -> int:
    return kind.clamp(a - b)


def wrapping_mul(kind: IntKind, a: int, b: int) -> int:
    return kind.wrap(a * b)


def panicking_mul(kind: IntKind, a: int, b: int) -> int:
    return kind.check(a * b, f"{a} * {b}")


def saturating_mul(kind: IntKind, a: int, b: int) -> int:
    return kind.clamp(a * b)


# =============================================================================
# Div / Rem
# =============================================================================


def wrapping_div(kind: IntKind, a: int, b: int) -> int:
    """Truncating division; MIN / -1 wraps back to MIN."""
    _nonzero_divisor(kind, a, b, "/")
    return kind.wrap(div_trunc(a, b))


def panicking_div(kind: IntKind, a: int, b: int) -> int:
    _nonzero_divisor(kind, a, b, "/")
    return kind.check(div_trunc(a, b), f"{a} / {b}")


def saturating_div(kind: IntKind, a: int, b: int) -> int:
    """Truncating division that never raises.

    Division by zero gives MAX for a positive dividend, MIN for a negative
    one and 0 for zero. MIN / -1 gives MAX.
    """
    if b == 0:
        if a > 0:
            return kind.max
        if a < 0:
            return kind.min
        return 0
    return kind.clamp(div_trunc(a, b))


def wrapping_rem(kind: IntKind, a: int, b: int) -> int:
    # MIN % -1 is 0, which is always representable
    _nonzero_divisor(kind, a, b, "%")
    return rem_trunc(a, b)


def panicking_rem(kind: IntKind, a: int, b: int) -> int:
    _nonzero_divisor(kind, a, b, "%")
    if kind.signed and a == kind.min and b == -1:
        raise ArithmeticOverflow(
            f"arithmetic overflow: {a} % {b} overflows the quotient in {kind.name}"
        )
    return rem_trunc(a, b)


def saturating_rem(kind: IntKind, a: int, b: int) -> int:
    if b == 0:
        return 0 if a == 0 else kind.max
    return rem_trunc(a, b)


# =============================================================================
# Shl / Shr
# =============================================================================


def wrapping_shl(kind: IntKind, value: int, count: int) -> int:
    """Left shift with the count taken modulo the bit width."""
    return kind.wrap(value << (count % kind.bits))


def panicking_shl(kind: IntKind, value: int, count: int) -> int:
    if value == 0:
        return 0
    if not _shl_fits(kind, value, count):
        raise ArithmeticOverflow(
            f"arithmetic overflow: {value} << {count} shifts set bits out of {kind.name}"
        )
    return value << count


def saturating_shl(kind: IntKind, value: int, count: int) -> int:
    if value == 0:
        return 0
    if not _shl_fits(kind, value, count):
        return kind.max if value > 0 else kind.min
    return value << count


def wrapping_shr(kind: IntKind, value: int, count: int) -> int:
    """Arithmetic right shift; a count of at least the bit width gives 0."""
    if count >= kind.bits:
        return 0
    return value >> count


def panicking_shr(kind: IntKind, value: int, count: int) -> int:
    if count >= kind.bits:
        raise ArithmeticOverflow(
            f"arithmetic overflow: {value} >> {count} shifts past the width of {kind.name}"
        )
    return value >> count


# Right shifts cannot overflow, so saturating and wrapping agree
saturating_shr = wrapping_shr


# =============================================================================
# Neg / Abs
# =============================================================================


def wrapping_neg(kind: IntKind, value: int) -> int:
    if not kind.signed:
        return value
    return kind.wrap(-value)


def panicking_neg(kind: IntKind, value: int) -> int:
    if not kind.signed:
        return value
    return kind.check(-value, f"-({value})")


def saturating_neg(kind: IntKind, value: int) -> int:
    if not kind.signed:
        return value
    return kind.clamp(-value)


def wrapping_abs(kind: IntKind, value: int) -> int:
    return wrapping_sub(kind, 0, value) if value < 0 else value


def panicking_abs(kind: IntKind, value: int) -> int:
    return panicking_sub(kind, 0, value) if value < 0 else value


def saturating_abs(kind: IntKind, value: int) -> int:
    return saturating_sub(kind, 0, value) if value < 0 else value


# =============================================================================
# Table
# =============================================================================

RULES: dict[tuple[Operation, Policy], BinaryRule | UnaryRule] = {
    (Operation.ADD, Policy.WRAP): wrapping_add,
    (Operation.ADD, Policy.PANIC): panicking_add,
    (Operation.ADD, Policy.SATURATE): saturating_add,
    (Operation.SUB, Policy.WRAP): wrapping_sub,
    (Operation.SUB, Policy.PANIC): panicking_sub,
    (Operation.SUB, Policy.SATURATE): saturating_sub,
    (Operation.MUL, Policy.WRAP): wrapping_mul,
    (Operation.MUL, Policy.PANIC): panicking_mul,
    (Operation.MUL, Policy.SATURATE): saturating_mul,
    (Operation.DIV, Policy.WRAP): wrapping_div,
    (Operation.DIV, Policy.PANIC): panicking_div,
    (Operation.DIV, Policy.SATURATE): saturating_div,
    (Operation.REM, Policy.WRAP): wrapping_rem,
    (Operation.REM, Policy.PANIC): panicking_rem,
    (Operation.REM, Policy.SATURATE): saturating_rem,
    (Operation.SHL, Policy.WRAP): wrapping_shl,
    (Operation.SHL, Policy.PANIC): panicking_shl,
    (Operation.SHL, Policy.SATURATE): saturating_shl,
    (Operation.SHR, Policy.WRAP): wrapping_shr,
    (Operation.SHR, Policy.PANIC): panicking_shr,
    (Operation.SHR, Policy.SATURATE): saturating_shr,
    (Operation.NEG, Policy.WRAP): wrapping_neg,
    (Operation.NEG, Policy.PANIC): panicking_neg,
    (Operation.NEG, Policy.SATURATE): saturating_neg,
    (Operation.ABS, Policy.WRAP): wrapping_abs,
    (Operation.ABS, Policy.PANIC): panicking_abs,
    (Operation.ABS, Policy.SATURATE): saturating_abs,
}


def rule(operation: Operation, policy: Policy) -> BinaryRule | UnaryRule:
    """Get the table entry for an operation and policy.

    Sum has no entry of its own: it folds the Add rule of the same policy.

    Raises:
        KeyError: If the pair has no entry
    """
    try:
        return RULES[(operation, policy)]
    except KeyError:
        raise KeyError(f"No checked rule for {operation.value}_{policy.value}") from None
