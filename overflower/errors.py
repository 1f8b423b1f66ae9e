"""Overflower error classes.

Every error raised by overflower derives from OverflowerError and from the
builtin exception a caller would already expect for the failure, so
``except OverflowError`` or ``except ZeroDivisionError`` keep working.
"""


class OverflowerError(Exception):
    """Base class for overflower errors."""

    pass


class ArithmeticOverflow(OverflowerError, OverflowError):
    """Result of a panicking operation is not representable in its kind."""

    pass


class DivisionByZero(OverflowerError, ZeroDivisionError):
    """Division or remainder by zero under the wrap or panic policy."""

    pass


class ResolutionError(OverflowerError, TypeError):
    """No implementation of an operation exists for the operand type(s)."""

    pass
