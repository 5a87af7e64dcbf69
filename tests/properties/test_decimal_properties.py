"""
============================================================================
Property-Based Tests for the Decimal Value Type
============================================================================

Tests algebraic and formatting properties using Hypothesis.
Minimum 100 iterations per property.

Properties tested:
- Round-trip: to_string() then from_string() yields an equal value
- add/sub are exact inverses; 1 is the multiplicative identity
- add and mul commute
- compare_to is a strict total order and the derived predicates agree
- Equality ignores trailing zeros and display scale
- div by zero and sqrt of negatives always fail
- Float construction never produces a comma
- round() ties to even

============================================================================
"""

from decimal import Decimal as EngineDecimal

import pytest
from hypothesis import given, settings, assume
from hypothesis import strategies as st

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))

from bignumbers.big_decimal import Decimal
from bignumbers.errors import DivisionByZero, DomainError


# =============================================================================
# HYPOTHESIS STRATEGIES
# =============================================================================

# Engine values with up to 12 integer and 12 fractional digits
engine_strategy = st.decimals(
    min_value=EngineDecimal("-999999999999"),
    max_value=EngineDecimal("999999999999"),
    places=12,
    allow_nan=False,
    allow_infinity=False,
)

integer_strategy = st.integers(min_value=-(10 ** 30), max_value=10 ** 30)

float_strategy = st.floats(allow_nan=False, allow_infinity=False)

# Any supported construction input
value_strategy = st.one_of(
    engine_strategy.map(Decimal.create),
    integer_strategy.map(Decimal.create),
    float_strategy.map(Decimal.create),
)

scale_strategy = st.integers(min_value=0, max_value=20)


# =============================================================================
# ROUND-TRIP
# =============================================================================

class TestRoundTrip:

    @settings(max_examples=100)
    @given(value=value_strategy)
    def test_string_round_trip(self, value: Decimal) -> None:
        """from_string(to_string(x)) equals x."""
        assert Decimal.from_string(value.to_string()).equals(value)

    @settings(max_examples=100)
    @given(flt=float_strategy)
    def test_float_round_trip(self, flt: float) -> None:
        """A float rebuilt from the Decimal is the same double."""
        assert Decimal.from_float(flt).as_float() == flt

    @settings(max_examples=100)
    @given(value=integer_strategy)
    def test_integer_round_trip(self, value: int) -> None:
        assert Decimal.from_integer(value).as_integer() == value


# =============================================================================
# ALGEBRA
# =============================================================================

class TestAlgebra:

    @settings(max_examples=100)
    @given(a=value_strategy, b=value_strategy)
    def test_add_sub_inverse(self, a: Decimal, b: Decimal) -> None:
        assert a.add(b).sub(b).equals(a)

    @settings(max_examples=100)
    @given(a=value_strategy)
    def test_multiplicative_identity(self, a: Decimal) -> None:
        assert a.mul(Decimal.from_integer(1)).equals(a)

    @settings(max_examples=100)
    @given(a=value_strategy)
    def test_additive_inverse_sums_to_zero(self, a: Decimal) -> None:
        assert a.add(a.additive_inverse()).is_zero()

    @settings(max_examples=100)
    @given(a=value_strategy, b=value_strategy)
    def test_add_commutes(self, a: Decimal, b: Decimal) -> None:
        assert a.add(b).equals(b.add(a))

    @settings(max_examples=100)
    @given(a=value_strategy, b=value_strategy)
    def test_mul_commutes(self, a: Decimal, b: Decimal) -> None:
        assert a.mul(b).equals(b.mul(a))

    @settings(max_examples=100)
    @given(a=value_strategy, scale=scale_strategy, b=value_strategy)
    def test_display_scale_does_not_affect_arithmetic(
        self, a: Decimal, scale: int, b: Decimal
    ) -> None:
        scaled = Decimal.create(a, scale)
        assert scaled.add(b).equals(a.add(b))
        assert scaled.mul(b).equals(a.mul(b))


# =============================================================================
# ORDER
# =============================================================================

class TestOrder:

    @settings(max_examples=100)
    @given(a=value_strategy, b=value_strategy)
    def test_exactly_one_relation_holds(self, a: Decimal, b: Decimal) -> None:
        relations = [a.is_less_than(b), a.equals(b), a.is_greater_than(b)]
        assert relations.count(True) == 1

    @settings(max_examples=100)
    @given(a=value_strategy, b=value_strategy)
    def test_antisymmetry(self, a: Decimal, b: Decimal) -> None:
        assert a.compare_to(b) == -b.compare_to(a)

    @settings(max_examples=100)
    @given(a=value_strategy, b=value_strategy)
    def test_greater_or_equal_is_not_less(self, a: Decimal, b: Decimal) -> None:
        assert a.is_greater_or_equal_to(b) == (not a.is_less_than(b))
        assert a.is_less_or_equal_to(b) == (not a.is_greater_than(b))

    @settings(max_examples=100)
    @given(a=value_strategy, b=value_strategy, c=value_strategy)
    def test_transitivity(self, a: Decimal, b: Decimal, c: Decimal) -> None:
        low, mid, high = sorted([a, b, c])
        assert low.is_less_or_equal_to(mid)
        assert mid.is_less_or_equal_to(high)
        assert low.is_less_or_equal_to(high)

    @settings(max_examples=100)
    @given(a=value_strategy)
    def test_trailing_zeros_ignored(self, a: Decimal) -> None:
        padded = a.mul(Decimal.from_string("1.000"))
        assert padded.equals(a)
        assert hash(padded) == hash(a)

    @settings(max_examples=100)
    @given(a=value_strategy, b=value_strategy)
    def test_has_same_sign_matches_signs(self, a: Decimal, b: Decimal) -> None:
        expected = (a.is_positive() and b.is_positive()) or (
            a.is_negative() and b.is_negative()
        )
        assert a.has_same_sign(b) == expected
        assert a.has_same_sign(b) == b.has_same_sign(a)


# =============================================================================
# ERROR CASES
# =============================================================================

class TestErrorCases:

    @settings(max_examples=100)
    @given(a=value_strategy)
    def test_div_by_zero_always_fails(self, a: Decimal) -> None:
        with pytest.raises(DivisionByZero):
            a.div(Decimal.from_integer(0))

    @settings(max_examples=100)
    @given(a=value_strategy)
    def test_sqrt_of_negative_always_fails(self, a: Decimal) -> None:
        assume(a.is_negative())
        with pytest.raises(DomainError):
            a.sqrt()

    @settings(max_examples=100)
    @given(a=value_strategy)
    def test_log10_of_non_positive_always_fails(self, a: Decimal) -> None:
        assume(not a.is_positive())
        with pytest.raises(DomainError):
            a.log10()

    @settings(max_examples=100)
    @given(exponent=value_strategy)
    def test_zero_to_non_positive_always_fails(self, exponent: Decimal) -> None:
        zero = Decimal.from_integer(0)
        if exponent.is_positive():
            assert zero.pow(exponent).is_zero()
        else:
            with pytest.raises(DomainError):
                zero.pow(exponent)


# =============================================================================
# FORMATTING
# =============================================================================

class TestFormatting:

    @settings(max_examples=100)
    @given(flt=float_strategy)
    def test_float_never_renders_comma(self, flt: float) -> None:
        assert "," not in Decimal.from_float(flt).to_string()

    @settings(max_examples=100)
    @given(value=engine_strategy, scale=scale_strategy)
    def test_fixed_scale_digit_count(self, value: EngineDecimal, scale: int) -> None:
        rendered = Decimal.create(value, scale).to_string()
        if scale == 0:
            assert "." not in rendered
        else:
            assert len(rendered.split(".")[1]) == scale

    @settings(max_examples=100)
    @given(whole=st.integers(min_value=-(10 ** 9), max_value=10 ** 9))
    def test_round_ties_to_even(self, whole: int) -> None:
        tie = Decimal.from_string(f"{whole}.5")
        rounded = tie.round()
        assert rounded.as_integer() % 2 == 0
        assert tie.sub(rounded).abs().equals(Decimal.from_string("0.5"))
