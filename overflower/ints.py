"""Fixed-width integer value types.

Python ints are arbitrary precision, so a value only has a width when it is
wrapped in one of the types below. Each FixedInt subclass is bound to one
IntKind and always holds a value in that kind's range.

The ordinary operators behave like a debug build of a systems language:
every arithmetic operator uses the panic policy and raises ArithmeticOverflow
when the true result does not fit. Use the policy-qualified functions in
overflower.ops to wrap or saturate instead.

Usage pattern:
    from overflower.ints import U8, I32

    U8(200) + U8(50)   # U8(250)
    U8(200) + 100      # raises ArithmeticOverflow
    I32(-7) / I32(2)   # I32(-3), truncating division
"""

from __future__ import annotations

import operator
from typing import Any, ClassVar

from overflower import kinds, semantics
from overflower.errors import ResolutionError
from overflower.kinds import IntKind

__all__ = [
    "FixedInt",
    "U8",
    "U16",
    "U32",
    "U64",
    "USize",
    "I8",
    "I16",
    "I32",
    "I64",
    "ISize",
    "fixed_type",
    "is_int_literal",
    "shift_count",
]

# Shift counts are reinterpreted as unsigned 32-bit values
SHIFT_COUNT_MASK = 0xFFFF_FFFF

_FIXED_TYPES: dict[IntKind, type[FixedInt]] = {}


class FixedInt:
    """Integer constrained to a fixed-width kind.

    Subclasses declare their kind with a class keyword:

        class U8(FixedInt, kind=kinds.U8):
            pass

    Attributes:
        KIND: The IntKind of the type
        MIN: Smallest value of the type
        MAX: Largest value of the type
        value: The underlying integer value (read-only)
    """

    KIND: ClassVar[IntKind]
    MIN: ClassVar[FixedInt]
    MAX: ClassVar[FixedInt]

    __slots__ = ("_value",)
    _value: int

    def __init_subclass__(cls, kind: IntKind | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if kind is None:
            return
        cls.KIND = kind
        cls.MIN = cls._new(kind.min)
        cls.MAX = cls._new(kind.max)
        _FIXED_TYPES.setdefault(kind, cls)

    def __init__(self, value: Any) -> None:
        """Create a fixed-width integer from an int-like value.

        Args:
            value: int, FixedInt, or any object implementing __index__

        Raises:
            TypeError: If value is not integer-like
            ValueError: If value is out of range for the kind
        """
        if not hasattr(type(self), "KIND"):
            raise TypeError("FixedInt is abstract; use a sized subclass such as U8")
        if isinstance(value, FixedInt):
            raw = value._value
        else:
            try:
                raw = operator.index(value)
            except TypeError:
                raise TypeError(
                    f"{type(self).__name__} requires an integer, got {type(value).__name__}"
                ) from None
        kind = self.KIND
        if not kind.contains(raw):
            raise ValueError(f"{raw} out of range for {kind.name} [{kind.min}, {kind.max}]")
        self._value = raw

    @classmethod
    def _new(cls, value: int) -> Any:
        """Build an instance from a value already known to be in range."""
        obj = object.__new__(cls)
        obj._value = value
        return obj

    @classmethod
    def wrapping(cls, value: int) -> Any:
        """Create from any int, keeping its low bits (two's complement)."""
        return cls._new(cls.KIND.wrap(operator.index(value)))

    @classmethod
    def saturating(cls, value: int) -> Any:
        """Create from any int, clamping it to [MIN, MAX]."""
        return cls._new(cls.KIND.clamp(operator.index(value)))

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    # --- Arithmetic operations (panic policy) ---

    def _operand(self, other: Any) -> int | None:
        """Extract the value of a same-type operand or an in-range int literal.

        Returns None for operands of other types so the caller can return
        NotImplemented.

        Raises:
            ResolutionError: If an int literal does not fit in the kind
        """
        if type(other) is type(self):
            return other._value
        if is_int_literal(other):
            if not self.KIND.contains(other):
                raise ResolutionError(f"literal {other} out of range for {self.KIND.name}")
            return int(other)
        return None

    def _binary(self, other: Any, rule: semantics.BinaryRule, reflected: bool = False) -> Any:
        other_val = self._operand(other)
        if other_val is None:
            return NotImplemented
        if reflected:
            return self._new(rule(self.KIND, other_val, self._value))
        return self._new(rule(self.KIND, self._value, other_val))

    def __add__(self, other: Any) -> Any:
        """Add two values.

        Raises:
            ArithmeticOverflow: If the sum does not fit in the kind
        """
        return self._binary(other, semantics.panicking_add)

    def __radd__(self, other: Any) -> Any:
        return self._binary(other, semantics.panicking_add, reflected=True)

    def __sub__(self, other: Any) -> Any:
        """Subtract other from self.

        Raises:
            ArithmeticOverflow: If the difference does not fit in the kind
        """
        return self._binary(other, semantics.panicking_sub)

    def __rsub__(self, other: Any) -> Any:
        return self._binary(other, semantics.panicking_sub, reflected=True)

    def __mul__(self, other: Any) -> Any:
        return self._binary(other, semantics.panicking_mul)

    def __rmul__(self, other: Any) -> Any:
        return self._binary(other, semantics.panicking_mul, reflected=True)

    def __truediv__(self, other: Any) -> Any:
        """Integer division, truncating toward zero.

        Raises:
            DivisionByZero: If other is zero
            ArithmeticOverflow: For MIN / -1 on signed kinds
        """
        return self._binary(other, semantics.panicking_div)

    def __rtruediv__(self, other: Any) -> Any:
        return self._binary(other, semantics.panicking_div, reflected=True)

    def __floordiv__(self, other: Any) -> Any:
        """Floor division is not defined for fixed-width integers."""
        raise TypeError(
            f"{type(self).__name__} division truncates toward zero; use / instead of //"
        )

    def __rfloordiv__(self, other: Any) -> Any:
        raise TypeError(
            f"{type(self).__name__} division truncates toward zero; use / instead of //"
        )

    def __mod__(self, other: Any) -> Any:
        """Remainder of truncating division (sign follows the dividend).

        Raises:
            DivisionByZero: If other is zero
        """
        return self._binary(other, semantics.panicking_rem)

    def __rmod__(self, other: Any) -> Any:
        return self._binary(other, semantics.panicking_rem, reflected=True)

    def __lshift__(self, count: Any) -> Any:
        return self._new(semantics.panicking_shl(self.KIND, self._value, shift_count(count)))

    def __rshift__(self, count: Any) -> Any:
        return self._new(semantics.panicking_shr(self.KIND, self._value, shift_count(count)))

    def __neg__(self) -> Any:
        """Negate the value (identity for unsigned kinds).

        Raises:
            ArithmeticOverflow: If the value is MIN of a signed kind
        """
        return self._new(semantics.panicking_neg(self.KIND, self._value))

    def __pos__(self) -> Any:
        return self

    def __abs__(self) -> Any:
        return self._new(semantics.panicking_abs(self.KIND, self._value))

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if type(other) is type(self):
            return self._value == other._value  # type: ignore[attr-defined]
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def _compare_value(self, other: Any) -> int | None:
        if type(other) is type(self):
            return other._value
        if isinstance(other, int):
            return other
        return None

    def __lt__(self, other: Any) -> bool:
        other_val = self._compare_value(other)
        if other_val is None:
            return NotImplemented
        return self._value < other_val

    def __le__(self, other: Any) -> bool:
        other_val = self._compare_value(other)
        if other_val is None:
            return NotImplemented
        return self._value <= other_val

    def __gt__(self, other: Any) -> bool:
        other_val = self._compare_value(other)
        if other_val is None:
            return NotImplemented
        return self._value > other_val

    def __ge__(self, other: Any) -> bool:
        other_val = self._compare_value(other)
        if other_val is None:
            return NotImplemented
        return self._value >= other_val

    # --- Conversion ---

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0


class U8(FixedInt, kind=kinds.U8):
    __slots__ = ()


class U16(FixedInt, kind=kinds.U16):
    __slots__ = ()


class U32(FixedInt, kind=kinds.U32):
    __slots__ = ()


class U64(FixedInt, kind=kinds.U64):
    __slots__ = ()


class USize(FixedInt, kind=kinds.USIZE):
    __slots__ = ()


class I8(FixedInt, kind=kinds.I8):
    __slots__ = ()


class I16(FixedInt, kind=kinds.I16):
    __slots__ = ()


class I32(FixedInt, kind=kinds.I32):
    __slots__ = ()


class I64(FixedInt, kind=kinds.I64):
    __slots__ = ()


class ISize(FixedInt, kind=kinds.ISIZE):
    __slots__ = ()


def fixed_type(kind: IntKind) -> type[FixedInt]:
    """Get the FixedInt class for a kind.

    Raises:
        KeyError: If no class is bound to the kind
    """
    try:
        return _FIXED_TYPES[kind]
    except KeyError:
        raise KeyError(f"No fixed-width type for kind {kind.name}") from None


def shift_count(count: Any) -> int:
    """Convert a shift amount of any integer type to a non-negative count.

    Negative counts are reinterpreted as unsigned 32-bit values, so they are
    always out of range for a shift.

    Raises:
        TypeError: If count is not integer-like
    """
    return operator.index(count) & SHIFT_COUNT_MASK


def is_int_literal(value: Any) -> bool:
    """Check if value is a plain Python integer (int, bool, IntEnum members).

    Such values carry no width of their own and take the kind of the
    fixed-width operand they are combined with.
    """
    return isinstance(value, int)
