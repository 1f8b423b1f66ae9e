"""Tests for the policy-qualified entry points."""

from decimal import Decimal

import pytest

import overflower
from overflower import ops
from overflower.errors import ArithmeticOverflow, DivisionByZero, ResolutionError
from overflower.ints import I8, I32, U8, U16, U64
from overflower.types import Operation, Policy


class TestScenarios:
    """End-to-end examples through the public API."""

    def test_add_panic_overflow(self):
        with pytest.raises(ArithmeticOverflow):
            overflower.add_panic(U8(255), U8(2))

    def test_sub_wrap(self):
        assert overflower.sub_wrap(U8(1), U8(2)) == U8(255)

    def test_mul_saturate(self):
        assert overflower.mul_saturate(U8(16), U8(16)) == U8(255)

    def test_add_panic_in_range(self):
        assert overflower.add_panic(I32(1), I32(2)) == I32(3)

    def test_floats_use_native_operator(self):
        assert overflower.add_panic(1.5, 2.25) == 3.75
        assert overflower.div_wrap(1.0, 4.0) == 0.25
        assert overflower.neg_saturate(2.5) == -2.5

    def test_decimal_uses_native_operator(self):
        assert overflower.mul_wrap(Decimal("1.5"), Decimal("2")) == Decimal("3.0")
        assert overflower.rem_saturate(Decimal("7"), Decimal("-2")) == Decimal("1")

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZero):
            overflower.div_wrap(I32(5), I32(0))
        assert overflower.div_saturate(I32(5), I32(0)) == I32.MAX
        assert overflower.div_saturate(I32(-5), I32(0)) == I32.MIN
        assert overflower.div_saturate(I32(0), I32(0)) == I32(0)

    def test_neg_min(self):
        assert overflower.neg_wrap(I8(-128)) == I8(-128)
        assert overflower.neg_saturate(I8(-128)) == I8(127)
        with pytest.raises(ArithmeticOverflow):
            overflower.neg_panic(I8(-128))

    def test_abs_min(self):
        assert overflower.abs_wrap(I8(-128)) == I8(-128)
        assert overflower.abs_saturate(I8(-128)) == I8(127)
        with pytest.raises(ArithmeticOverflow):
            overflower.abs_panic(I8(-128))

    def test_shift_saturation(self):
        assert overflower.shl_saturate(U8(1), 10) == U8(255)
        assert overflower.shl_saturate(U8(0), 10) == U8(0)
        assert overflower.shr_saturate(U8(200), 10) == U8(0)

    def test_shr_panic_out_of_range(self):
        with pytest.raises(ArithmeticOverflow):
            overflower.shr_panic(U8(200), 10)

    def test_shl_wrap_masks_count(self):
        assert overflower.shl_wrap(U8(1), U16(9)) == U8(2)


class TestOperandTypes:
    """How the operand type is chosen for a call."""

    def test_literal_on_left_adopts_right_kind(self):
        result = overflower.sub_wrap(0, U8(1))
        assert type(result) is U8
        assert result == 255

    def test_literal_on_right(self):
        assert overflower.add_saturate(U8(250), 10) == U8(255)

    def test_both_literals_are_native(self):
        assert overflower.add_panic(255, 2) == 257

    def test_mixed_widths_rejected(self):
        with pytest.raises(ResolutionError):
            overflower.add_wrap(U8(1), U16(1))

    def test_literal_out_of_range(self):
        with pytest.raises(ResolutionError):
            overflower.add_wrap(U8(1), 1000)

    def test_result_type_preserved(self):
        assert type(overflower.mul_wrap(U64(2**63), U64(2))) is U64

    def test_neg_without_operator(self):
        with pytest.raises(ResolutionError):
            overflower.neg_wrap(object())


class TestEntryPointTable:
    """Every (operation, policy) pair has exactly one entry point."""

    def test_count(self):
        assert len(ops.ENTRY_POINTS) == 29

    def test_names(self):
        for (operation, policy), entry in ops.ENTRY_POINTS.items():
            name = f"{operation.value}_{policy.value}"
            assert entry.__name__ == name
            assert getattr(overflower, name) is entry

    def test_covers_every_policy(self):
        for operation in Operation:
            for policy in operation.policies:
                assert (operation, policy) in ops.ENTRY_POINTS

    def test_lookup_by_string(self):
        assert ops.entry_point("add", "wrap") is overflower.add_wrap
        assert ops.entry_point(Operation.SUM, Policy.PANIC) is overflower.sum_panic

    def test_sum_saturate_missing(self):
        with pytest.raises(ResolutionError, match="sum has no saturate"):
            ops.entry_point("sum", "saturate")
        assert not hasattr(overflower, "sum_saturate")

    def test_unknown_names(self):
        with pytest.raises(ValueError):
            ops.entry_point("pow", "wrap")
        with pytest.raises(ValueError):
            ops.entry_point("add", "trap")

    def test_docstrings(self):
        assert "saturate policy" in overflower.mul_saturate.__doc__
        assert "any integer type" in overflower.shl_panic.__doc__
