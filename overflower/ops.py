"""Policy-qualified entry points.

Each operation has one function per policy, named `<operation>_<policy>`.
They are drop-in replacements for the native operator:

    add_wrap(U8(250), U8(10))      # U8(4)
    add_saturate(U8(250), U8(10))  # U8(255)
    add_panic(U8(250), U8(10))     # raises ArithmeticOverflow
    add_panic(1.5, 2.25)           # 3.75, floats use the native operator

For binary operations other than shifts the operand type is the left
operand's type, unless the left operand is a plain int literal and the right
one is fixed-width, in which case the literal adopts the right operand's kind.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from overflower.dispatch import has_checked_capability, is_untyped_literal, resolve
from overflower.errors import ResolutionError
from overflower.reduction import sum_panic, sum_wrap
from overflower.types import Operation, Policy

__all__ = [
    "ENTRY_POINTS",
    "entry_point",
    "add_wrap",
    "add_panic",
    "add_saturate",
    "sub_wrap",
    "sub_panic",
    "sub_saturate",
    "mul_wrap",
    "mul_panic",
    "mul_saturate",
    "div_wrap",
    "div_panic",
    "div_saturate",
    "rem_wrap",
    "rem_panic",
    "rem_saturate",
    "shl_wrap",
    "shl_panic",
    "shl_saturate",
    "shr_wrap",
    "shr_panic",
    "shr_saturate",
    "neg_wrap",
    "neg_panic",
    "neg_saturate",
    "abs_wrap",
    "abs_panic",
    "abs_saturate",
    "sum_wrap",
    "sum_panic",
]


def _binary_operand_type(lhs: Any, rhs: Any) -> type:
    if is_untyped_literal(lhs) and has_checked_capability(type(rhs)):
        return type(rhs)
    return type(lhs)


def _name(operation: Operation, policy: Policy) -> str:
    return f"{operation.value}_{policy.value}"


def _binary_entry(operation: Operation, policy: Policy) -> Callable[[Any, Any], Any]:
    def entry(lhs: Any, rhs: Any) -> Any:
        return resolve(operation, policy, _binary_operand_type(lhs, rhs))(lhs, rhs)

    entry.__name__ = entry.__qualname__ = _name(operation, policy)
    entry.__doc__ = f"Compute {operation.value}(lhs, rhs) under the {policy.value} policy."
    return entry


def _shift_entry(operation: Operation, policy: Policy) -> Callable[[Any, Any], Any]:
    def entry(value: Any, count: Any) -> Any:
        return resolve(operation, policy, type(value))(value, count)

    entry.__name__ = entry.__qualname__ = _name(operation, policy)
    entry.__doc__ = (
        f"Compute {operation.value}(value, count) under the {policy.value} policy.\n\n"
        "count may be of any integer type."
    )
    return entry


def _unary_entry(operation: Operation, policy: Policy) -> Callable[[Any], Any]:
    def entry(value: Any) -> Any:
        return resolve(operation, policy, type(value))(value)

    entry.__name__ = entry.__qualname__ = _name(operation, policy)
    entry.__doc__ = f"Compute {operation.value}(value) under the {policy.value} policy."
    return entry


add_wrap = _binary_entry(Operation.ADD, Policy.WRAP)
add_panic = _binary_entry(Operation.ADD, Policy.PANIC)
add_saturate = _binary_entry(Operation.ADD, Policy.SATURATE)
sub_wrap = _binary_entry(Operation.SUB, Policy.WRAP)
sub_panic = _binary_entry(Operation.SUB, Policy.PANIC)
sub_saturate = _binary_entry(Operation.SUB, Policy.SATURATE)
mul_wrap = _binary_entry(Operation.MUL, Policy.WRAP)
mul_panic = _binary_entry(Operation.MUL, Policy.PANIC)
mul_saturate = _binary_entry(Operation.MUL, Policy.SATURATE)
div_wrap = _binary_entry(Operation.DIV, Policy.WRAP)
div_panic = _binary_entry(Operation.DIV, Policy.PANIC)
div_saturate = _binary_entry(Operation.DIV, Policy.SATURATE)
rem_wrap = _binary_entry(Operation.REM, Policy.WRAP)
rem_panic = _binary_entry(Operation.REM, Policy.PANIC)
rem_saturate = _binary_entry(Operation.REM, Policy.SATURATE)
shl_wrap = _shift_entry(Operation.SHL, Policy.WRAP)
shl_panic = _shift_entry(Operation.SHL, Policy.PANIC)
shl_saturate = _shift_entry(Operation.SHL, Policy.SATURATE)
shr_wrap = _shift_entry(Operation.SHR, Policy.WRAP)
shr_panic = _shift_entry(Operation.SHR, Policy.PANIC)
shr_saturate = _shift_entry(Operation.SHR, Policy.SATURATE)
neg_wrap = _unary_entry(Operation.NEG, Policy.WRAP)
neg_panic = _unary_entry(Operation.NEG, Policy.PANIC)
neg_saturate = _unary_entry(Operation.NEG, Policy.SATURATE)
abs_wrap = _unary_entry(Operation.ABS, Policy.WRAP)
abs_panic = _unary_entry(Operation.ABS, Policy.PANIC)
abs_saturate = _unary_entry(Operation.ABS, Policy.SATURATE)

ENTRY_POINTS: dict[tuple[Operation, Policy], Callable[..., Any]] = {
    (Operation.ADD, Policy.WRAP): add_wrap,
    (Operation.ADD, Policy.PANIC): add_panic,
    (Operation.ADD, Policy.SATURATE): add_saturate,
    (Operation.SUB, Policy.WRAP): sub_wrap,
    (Operation.SUB, Policy.PANIC): sub_panic,
    (Operation.SUB, Policy.SATURATE): sub_saturate,
    (Operation.MUL, Policy.WRAP): mul_wrap,
    (Operation.MUL, Policy.PANIC): mul_panic,
    (Operation.MUL, Policy.SATURATE): mul_saturate,
    (Operation.DIV, Policy.WRAP): div_wrap,
    (Operation.DIV, Policy.PANIC): div_panic,
    (Operation.DIV, Policy.SATURATE): div_saturate,
    (Operation.REM, Policy.WRAP): rem_wrap,
    (Operation.REM, Policy.PANIC): rem_panic,
    (Operation.REM, Policy.SATURATE): rem_saturate,
    (Operation.SHL, Policy.WRAP): shl_wrap,
    (Operation.SHL, Policy.PANIC): shl_panic,
    (Operation.SHL, Policy.SATURATE): shl_saturate,
    (Operation.SHR, Policy.WRAP): shr_wrap,
    (Operation.SHR, Policy.PANIC): shr_panic,
    (Operation.SHR, Policy.SATURATE): shr_saturate,
    (Operation.NEG, Policy.WRAP): neg_wrap,
    (Operation.NEG, Policy.PANIC): neg_panic,
    (Operation.NEG, Policy.SATURATE): neg_saturate,
    (Operation.ABS, Policy.WRAP): abs_wrap,
    (Operation.ABS, Policy.PANIC): abs_panic,
    (Operation.ABS, Policy.SATURATE): abs_saturate,
    (Operation.SUM, Policy.WRAP): sum_wrap,
    (Operation.SUM, Policy.PANIC): sum_panic,
}


def entry_point(operation: Operation | str, policy: Policy | str) -> Callable[..., Any]:
    """Look up the entry point for an operation and policy.

    Accepts enum members or their string values ("add", "wrap").

    Raises:
        ResolutionError: If the pair has no entry point (e.g. sum/saturate)
        ValueError: If a string is not a known operation or policy
    """
    operation = Operation(operation)
    policy = Policy(policy)
    try:
        return ENTRY_POINTS[(operation, policy)]
    except KeyError:
        raise ResolutionError(f"{operation.value} has no {policy.value} entry point") from None
