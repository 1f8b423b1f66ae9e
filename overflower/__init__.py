"""Overflower - integer arithmetic under explicit overflow policies."""

from overflower.config import DEFAULT_CONFIG, OverflowConfig
from overflower.dispatch import CheckedCapability, register_checked_type, resolve
from overflower.errors import ArithmeticOverflow, DivisionByZero, OverflowerError, ResolutionError
from overflower.ints import I8, I16, I32, I64, U8, U16, U32, U64, FixedInt, ISize, USize, fixed_type
from overflower.kinds import IntKind, kind_by_name
from overflower.ops import (
    ENTRY_POINTS,
    abs_panic,
    abs_saturate,
    abs_wrap,
    add_panic,
    add_saturate,
    add_wrap,
    div_panic,
    div_saturate,
    div_wrap,
    entry_point,
    mul_panic,
    mul_saturate,
    mul_wrap,
    neg_panic,
    neg_saturate,
    neg_wrap,
    rem_panic,
    rem_saturate,
    rem_wrap,
    shl_panic,
    shl_saturate,
    shl_wrap,
    shr_panic,
    shr_saturate,
    shr_wrap,
    sub_panic,
    sub_saturate,
    sub_wrap,
    sum_panic,
    sum_wrap,
)
from overflower.types import Operation, Policy

__version__ = "0.1.0"
__all__ = [
    "ArithmeticOverflow",
    "CheckedCapability",
    "DEFAULT_CONFIG",
    "DivisionByZero",
    "ENTRY_POINTS",
    "FixedInt",
    "I8",
    "I16",
    "I32",
    "I64",
    "ISize",
    "IntKind",
    "Operation",
    "OverflowConfig",
    "OverflowerError",
    "Policy",
    "ResolutionError",
    "U8",
    "U16",
    "U32",
    "U64",
    "USize",
    "abs_panic",
    "abs_saturate",
    "abs_wrap",
    "add_panic",
    "add_saturate",
    "add_wrap",
    "div_panic",
    "div_saturate",
    "div_wrap",
    "entry_point",
    "fixed_type",
    "kind_by_name",
    "mul_panic",
    "mul_saturate",
    "mul_wrap",
    "neg_panic",
    "neg_saturate",
    "neg_wrap",
    "register_checked_type",
    "rem_panic",
    "rem_saturate",
    "rem_wrap",
    "resolve",
    "shl_panic",
    "shl_saturate",
    "shl_wrap",
    "shr_panic",
    "shr_saturate",
    "shr_wrap",
    "sub_panic",
    "sub_saturate",
    "sub_wrap",
    "sum_panic",
    "sum_wrap",
    "__version__",
]
