"""Operation and policy enumerations shared by the resolver and the table."""

from enum import Enum


class Arity(str, Enum):
    """How many operands an operation takes."""

    UNARY = "unary"
    BINARY = "binary"
    SHIFT = "shift"  # binary, right operand is a bit count of any integer type
    REDUCTION = "reduction"


class Policy(str, Enum):
    """Overflow handling policy."""

    WRAP = "wrap"
    PANIC = "panic"
    SATURATE = "saturate"


class Operation(str, Enum):
    """Arithmetic operation with a policy-qualified entry point."""

    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    REM = "rem"
    SHL = "shl"
    SHR = "shr"
    NEG = "neg"
    ABS = "abs"
    SUM = "sum"

    @property
    def arity(self) -> Arity:
        return _ARITY[self]

    @property
    def policies(self) -> tuple[Policy, ...]:
        """Policies that have an entry point for this operation."""
        if self is Operation.SUM:
            return (Policy.WRAP, Policy.PANIC)
        return tuple(Policy)


_ARITY = {
    Operation.ADD: Arity.BINARY,
    Operation.SUB: Arity.BINARY,
    Operation.MUL: Arity.BINARY,
    Operation.DIV: Arity.BINARY,
    Operation.REM: Arity.BINARY,
    Operation.SHL: Arity.SHIFT,
    Operation.SHR: Arity.SHIFT,
    Operation.NEG: Arity.UNARY,
    Operation.ABS: Arity.UNARY,
    Operation.SUM: Arity.REDUCTION,
}


__all__ = ["Arity", "Operation", "Policy"]
