"""Tests for the div and rem rules of the semantics table."""

import pytest

from overflower import kinds, semantics
from overflower.errors import ArithmeticOverflow, DivisionByZero
from overflower.kinds import KINDS
from tests.helpers import operand_pairs


class TestTruncation:
    """Division truncates toward zero."""

    @pytest.mark.parametrize(
        "a,b,quotient,remainder",
        [
            (7, 2, 3, 1),
            (-7, 2, -3, -1),
            (7, -2, -3, 1),
            (-7, -2, 3, -1),
            (0, -5, 0, 0),
            (6, 3, 2, 0),
        ],
    )
    def test_div_rem_trunc(self, a, b, quotient, remainder):
        assert semantics.div_trunc(a, b) == quotient
        assert semantics.rem_trunc(a, b) == remainder

    def test_differs_from_floor_division(self):
        """Python's // floors; div_trunc does not."""
        assert -7 // 2 == -4
        assert semantics.div_trunc(-7, 2) == -3

    def test_all_policies_agree_without_edge_cases(self):
        for rule in (semantics.wrapping_div, semantics.panicking_div, semantics.saturating_div):
            assert rule(kinds.I32, -7, 2) == -3
        for rule in (semantics.wrapping_rem, semantics.panicking_rem, semantics.saturating_rem):
            assert rule(kinds.I32, -7, 2) == -1


class TestDivisionByZero:
    """Division by zero raises under wrap and panic, and saturates otherwise."""

    @pytest.mark.parametrize(
        "rule",
        [semantics.wrapping_div, semantics.panicking_div, semantics.wrapping_rem, semantics.panicking_rem],
    )
    def test_wrap_and_panic_raise(self, rule):
        with pytest.raises(DivisionByZero) as exc_info:
            rule(kinds.I32, 5, 0)
        assert "divisor of zero" in str(exc_info.value)

    def test_is_zero_division_error(self):
        """DivisionByZero can be caught as the builtin ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            semantics.wrapping_div(kinds.U8, 1, 0)

    def test_saturate_div(self):
        assert semantics.saturating_div(kinds.I32, 5, 0) == kinds.I32.max
        assert semantics.saturating_div(kinds.I32, -5, 0) == kinds.I32.min
        assert semantics.saturating_div(kinds.I32, 0, 0) == 0

    def test_saturate_div_unsigned(self):
        assert semantics.saturating_div(kinds.U16, 5, 0) == kinds.U16.max
        assert semantics.saturating_div(kinds.U16, 0, 0) == 0

    def test_saturate_rem(self):
        assert semantics.saturating_rem(kinds.I32, 5, 0) == kinds.I32.max
        assert semantics.saturating_rem(kinds.I32, -5, 0) == kinds.I32.max
        assert semantics.saturating_rem(kinds.I32, 0, 0) == 0


class TestMinByMinusOne:
    """MIN / -1 and MIN % -1 for signed kinds."""

    @pytest.mark.parametrize("kind_name", ["i8", "i16", "i32", "i64", "isize"])
    def test_div(self, kind_name):
        kind = KINDS[kind_name]
        assert semantics.wrapping_div(kind, kind.min, -1) == kind.min
        assert semantics.saturating_div(kind, kind.min, -1) == kind.max
        with pytest.raises(ArithmeticOverflow):
            semantics.panicking_div(kind, kind.min, -1)

    @pytest.mark.parametrize("kind_name", ["i8", "i16", "i32", "i64", "isize"])
    def test_rem(self, kind_name):
        kind = KINDS[kind_name]
        assert semantics.wrapping_rem(kind, kind.min, -1) == 0
        assert semantics.saturating_rem(kind, kind.min, -1) == 0
        with pytest.raises(ArithmeticOverflow):
            semantics.panicking_rem(kind, kind.min, -1)

    def test_min_plus_one_is_fine(self):
        assert semantics.panicking_div(kinds.I8, -127, -1) == 127


@pytest.mark.parametrize("kind_name", sorted(KINDS))
def test_totality(kind_name):
    """Saturate never raises; wrap raises only for a zero divisor."""
    kind = KINDS[kind_name]
    for a, b in operand_pairs(kind):
        for rule in (semantics.saturating_div, semantics.saturating_rem):
            assert kind.contains(rule(kind, a, b))
        for rule in (semantics.wrapping_div, semantics.wrapping_rem):
            if b == 0:
                with pytest.raises(DivisionByZero):
                    rule(kind, a, b)
            else:
                assert kind.contains(rule(kind, a, b))
