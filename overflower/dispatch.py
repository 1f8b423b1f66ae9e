"""Dispatch resolver.

Chooses, for an operation, a policy and an operand type, the implementation
a call binds to. There are two capability tiers:

- broad: every type. The operation is the type's native operator and the
  policy is ignored (floats, Decimal, Fraction, plain Python ints, user types).
- narrow: fixed-width integer types (FixedInt subclasses, numpy integer
  scalars, and anything added with register_checked_type). The operation runs
  the checked rule from the semantics table for the operand's kind.

The tier is picked with functools.singledispatch over the operand class, so
the most specific registered capability in the MRO always wins and a
fixed-width type can never fall through to the native operator. resolve() is
cached per (operation, policy, type): the lookup happens once per type, and
the returned callable does no further type branching beyond operand coercion.
"""

from __future__ import annotations

import functools
import operator
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

import numpy as np
import structlog

from overflower import semantics
from overflower.errors import ResolutionError
from overflower.ints import FixedInt, is_int_literal, shift_count
from overflower.kinds import IntKind, kind_for
from overflower.types import Arity, Operation, Policy

logger = structlog.get_logger()

__all__ = [
    "CheckedCapability",
    "capability_of",
    "has_checked_capability",
    "is_untyped_literal",
    "register_checked_type",
    "resolve",
]

_NATIVE_OPERATORS: dict[Operation, Callable[..., Any]] = {
    Operation.ADD: operator.add,
    Operation.SUB: operator.sub,
    Operation.MUL: operator.mul,
    Operation.DIV: operator.truediv,
    Operation.REM: operator.mod,
    Operation.SHL: operator.lshift,
    Operation.SHR: operator.rshift,
    Operation.NEG: operator.neg,
    Operation.ABS: operator.abs,
    Operation.SUM: sum,
}

# Unary operators are checked up front; binary ones may be reflected, so the
# native operator call itself reports a missing implementation.
_UNARY_METHODS = {
    Operation.NEG: "__neg__",
    Operation.ABS: "__abs__",
}


@dataclass(frozen=True)
class CheckedCapability:
    """How to run checked rules for one fixed-width type.

    Attributes:
        kind: Integer kind of the type
        unwrap: Converts a value of the type to a Python int
        rebuild: Converts an in-range Python int back to the type
    """

    kind: IntKind
    unwrap: Callable[[Any], int]
    rebuild: Callable[[int], Any]


# =============================================================================
# Capability tiers
# =============================================================================


@functools.singledispatch
def _capability_provider(operand_type: type) -> CheckedCapability | None:
    """Broad tier: no fixed width, use the native operator."""
    return None


def _fixed_int_capability(operand_type: type[FixedInt]) -> CheckedCapability:
    if not hasattr(operand_type, "KIND"):
        raise ResolutionError(f"{operand_type.__name__} has no integer kind")
    return CheckedCapability(
        kind=operand_type.KIND,
        unwrap=operator.attrgetter("value"),
        rebuild=operand_type._new,
    )


def _numpy_capability(operand_type: type[np.integer]) -> CheckedCapability:
    dtype = np.dtype(operand_type)
    try:
        kind = kind_for(dtype.itemsize * 8, signed=dtype.kind == "i")
    except KeyError as err:
        raise ResolutionError(f"numpy type {operand_type.__name__} has no integer kind") from err
    return CheckedCapability(kind=kind, unwrap=int, rebuild=operand_type)


_capability_provider.register(FixedInt, _fixed_int_capability)
_capability_provider.register(np.integer, _numpy_capability)


def capability_of(operand_type: type) -> CheckedCapability | None:
    """Get the checked capability of a type, or None for the broad tier.

    Raises:
        ResolutionError: If the type is registered as fixed-width but has no kind
    """
    return _capability_provider.dispatch(operand_type)(operand_type)


def has_checked_capability(operand_type: type) -> bool:
    """Check if a type resolves to the narrow tier without building the capability."""
    return _capability_provider.dispatch(operand_type) is not _capability_provider.registry[object]


def is_untyped_literal(value: Any) -> bool:
    """Check if value is an int literal that adopts the kind of a fixed-width operand.

    Integers of a type registered with checked semantics keep their own kind.
    """
    return is_int_literal(value) and not has_checked_capability(type(value))


def register_checked_type(
    operand_type: type,
    kind: IntKind,
    unwrap: Callable[[Any], int] = operator.index,
    rebuild: Callable[[int], Any] | None = None,
) -> None:
    """Give a user-defined fixed-width type (and its subclasses) checked semantics.

    Args:
        operand_type: The class to register
        kind: Integer kind its values belong to
        unwrap: Converts a value to a Python int (default: operator.index)
        rebuild: Converts an in-range int back to the type (default: the class)
    """
    capability = CheckedCapability(
        kind=kind,
        unwrap=unwrap,
        rebuild=rebuild if rebuild is not None else operand_type,
    )
    _capability_provider.register(operand_type, lambda _operand_type: capability)
    resolve.cache_clear()
    logger.debug(
        "checked_type_registered",
        operand_type=operand_type.__qualname__,
        kind=kind.name,
    )


# =============================================================================
# Implementations
# =============================================================================


def _native(operation: Operation, operand_type: type) -> Callable[..., Any]:
    method = _UNARY_METHODS.get(operation)
    if method is not None and not hasattr(operand_type, method):
        raise ResolutionError(
            f"{operation.value} is not supported by {operand_type.__qualname__} "
            f"(no {method} method)"
        )
    return _NATIVE_OPERATORS[operation]


def _operand_coercer(
    operation: Operation, operand_type: type, capability: CheckedCapability
) -> Callable[[Any], int]:
    """Build the function turning an operand into an int of the capability's kind.

    Accepts values of operand_type, and plain int literals that fit the kind.
    """
    kind = capability.kind
    unwrap = capability.unwrap

    def coerce(value: Any) -> int:
        value_type = type(value)
        if value_type is operand_type:
            return unwrap(value)
        if is_int_literal(value):
            if not kind.contains(value):
                raise ResolutionError(f"literal {value} out of range for {kind.name}")
            return int(value)
        raise ResolutionError(
            f"cannot {operation.value} {operand_type.__qualname__} "
            f"and {value_type.__qualname__}"
        )

    return coerce


def _checked(
    operation: Operation,
    policy: Policy,
    operand_type: type,
    capability: CheckedCapability,
) -> Callable[..., Any]:
    kind = capability.kind
    rebuild = capability.rebuild
    coerce = _operand_coercer(operation, operand_type, capability)
    arity = operation.arity

    if arity is Arity.REDUCTION:
        add = semantics.rule(Operation.ADD, policy)

        def checked_sum(values: Iterable[Any]) -> Any:
            total = 0
            for item in values:
                total = add(kind, total, coerce(item))
            return rebuild(total)

        return checked_sum

    rule = semantics.rule(operation, policy)

    if arity is Arity.UNARY:

        def checked_unary(value: Any) -> Any:
            return rebuild(rule(kind, coerce(value)))

        return checked_unary

    if arity is Arity.SHIFT:

        def checked_shift(value: Any, count: Any) -> Any:
            return rebuild(rule(kind, coerce(value), shift_count(count)))

        return checked_shift

    def checked_binary(lhs: Any, rhs: Any) -> Any:
        return rebuild(rule(kind, coerce(lhs), coerce(rhs)))

    return checked_binary


# =============================================================================
# Resolution
# =============================================================================


@functools.lru_cache(maxsize=None)
def resolve(operation: Operation, policy: Policy, operand_type: type) -> Callable[..., Any]:
    """Resolve the implementation of an operation for an operand type.

    Args:
        operation: The operation to perform
        policy: Overflow policy (ignored by the native tier)
        operand_type: Type of the (left) operand, or the element type for SUM

    Returns:
        Callable taking the operands (or the iterable for SUM)

    Raises:
        ResolutionError: If the operation has no entry point for the policy,
            or the type lacks a required unary operator
    """
    if policy not in operation.policies:
        raise ResolutionError(f"{operation.value} has no {policy.value} entry point")

    capability = capability_of(operand_type)
    if capability is None:
        impl = _native(operation, operand_type)
    else:
        impl = _checked(operation, policy, operand_type, capability)

    logger.debug(
        "overflow_op_resolved",
        operation=operation.value,
        policy=policy.value,
        operand_type=operand_type.__qualname__,
        tier="native" if capability is None else "checked",
        kind=capability.kind.name if capability is not None else None,
    )
    return impl
