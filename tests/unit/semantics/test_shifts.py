"""Tests for the shl and shr rules of the semantics table."""

import pytest

from overflower import kinds, semantics
from overflower.errors import ArithmeticOverflow
from overflower.kinds import KINDS


class TestShiftLeft:
    """Left shifts keep every significant bit, or report that they could not."""

    def test_saturate_overflow(self):
        """1u8 << 10 saturates to 255."""
        assert semantics.saturating_shl(kinds.U8, 1, 10) == 255

    def test_zero_never_overflows(self):
        """0 << n is 0 under every policy, however large n is."""
        assert semantics.saturating_shl(kinds.U8, 0, 10) == 0
        assert semantics.panicking_shl(kinds.U8, 0, 10) == 0
        assert semantics.wrapping_shl(kinds.U8, 0, 10) == 0

    def test_wrap_masks_count(self):
        """The count is taken modulo the bit width."""
        assert semantics.wrapping_shl(kinds.U8, 1, 10) == 4
        assert semantics.wrapping_shl(kinds.U32, 1, 33) == 2

    def test_wrap_discards_high_bits(self):
        assert semantics.wrapping_shl(kinds.U8, 0b1100_0001, 1) == 0b1000_0010
        assert semantics.wrapping_shl(kinds.I8, 64, 1) == -128

    def test_panic_in_range(self):
        assert semantics.panicking_shl(kinds.U8, 1, 7) == 128
        assert semantics.panicking_shl(kinds.I8, 1, 6) == 64
        assert semantics.panicking_shl(kinds.I8, -1, 6) == -64

    def test_panic_sign_bit_unsigned_only(self):
        """The sign bit of a signed kind cannot receive a shifted 1."""
        with pytest.raises(ArithmeticOverflow) as exc_info:
            semantics.panicking_shl(kinds.I8, 1, 7)
        assert "1 << 7" in str(exc_info.value)

    def test_panic_lost_bits(self):
        with pytest.raises(ArithmeticOverflow):
            semantics.panicking_shl(kinds.U8, 3, 7)

    def test_panic_count_at_width(self):
        with pytest.raises(ArithmeticOverflow):
            semantics.panicking_shl(kinds.U8, 1, 8)

    def test_saturate_negative(self):
        """A negative value saturates toward MIN."""
        assert semantics.saturating_shl(kinds.I16, -3, 15) == kinds.I16.min
        assert semantics.saturating_shl(kinds.I16, -3, 2) == -12

    def test_saturate_positive_signed(self):
        assert semantics.saturating_shl(kinds.I32, 3, 30) == kinds.I32.max

    @pytest.mark.parametrize("kind_name", sorted(KINDS))
    def test_panic_agrees_with_true_shift(self, kind_name):
        kind = KINDS[kind_name]
        for value in (kind.min, -1, 0, 1, 5, kind.max):
            if not kind.contains(value):
                continue
            if value == 0:
                assert semantics.panicking_shl(kind, value, kind.bits + 1) == 0
                continue
            for count in range(kind.bits + 2):
                true_result = value << count
                if kind.contains(true_result) and count < kind.shift_bits:
                    assert semantics.panicking_shl(kind, value, count) == true_result
                    assert semantics.saturating_shl(kind, value, count) == true_result
                else:
                    with pytest.raises(ArithmeticOverflow):
                        semantics.panicking_shl(kind, value, count)


class TestShiftRight:
    """Right shifts are arithmetic and cannot overflow within the width."""

    def test_saturate_past_width(self):
        """200u8 >> 10 saturates to 0."""
        assert semantics.saturating_shr(kinds.U8, 200, 10) == 0

    def test_wrap_past_width(self):
        assert semantics.wrapping_shr(kinds.I32, -5, 40) == 0

    def test_panic_past_width(self):
        with pytest.raises(ArithmeticOverflow) as exc_info:
            semantics.panicking_shr(kinds.U8, 200, 8)
        assert "200 >> 8" in str(exc_info.value)

    def test_arithmetic_shift(self):
        """Signed values shift in copies of the sign bit."""
        assert semantics.wrapping_shr(kinds.I8, -128, 7) == -1
        assert semantics.panicking_shr(kinds.I8, -7, 1) == -4
        assert semantics.saturating_shr(kinds.I8, -1, 3) == -1

    def test_policies_agree_in_range(self):
        for count in range(8):
            expected = 200 >> count
            assert semantics.wrapping_shr(kinds.U8, 200, count) == expected
            assert semantics.panicking_shr(kinds.U8, 200, count) == expected
            assert semantics.saturating_shr(kinds.U8, 200, count) == expected
