# ============================================================================
# bignumbers v1.0.0
# Engine Binding - decimal.Decimal contexts
# ============================================================================
#
# Purpose: Fixes the decimal.Context every Decimal operation runs under
#
# Contexts:
#   - EXACT_CONTEXT: MAX_PREC, never rounds. Used for add, sub, mul, mod,
#     negate, abs, ceil, floor, round and fixed-scale rendering.
#   - WORKING_CONTEXT: 28 significant digits, ROUND_HALF_EVEN, same exponent
#     range as EXACT_CONTEXT. Used for the non-terminating operations div,
#     sqrt, pow, log10, exp.
#
# Operations always pass one of these contexts explicitly, so results never
# depend on the caller's thread-local decimal context.
#
# ============================================================================

from decimal import (
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    Overflow,
    ROUND_HALF_EVEN,
)

# Significant digits kept by div, sqrt, pow, log10 and exp
WORKING_PRECISION = 28

EXACT_CONTEXT = Context(
    prec=MAX_PREC,
    rounding=ROUND_HALF_EVEN,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)

WORKING_CONTEXT = Context(
    prec=WORKING_PRECISION,
    rounding=ROUND_HALF_EVEN,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)


def render_float(value: float) -> str:
    """
    Render a float as a decimal string.

    repr() gives the shortest string that round-trips to the same double and
    never consults the host locale, unlike locale.str() or '%n' formatting.
    float.__repr__ is called directly so float subclasses with their own
    repr (numpy.float64 prints as np.float64(1.5)) still render as digits.
    """
    return float.__repr__(value)


def quantum(scale: int) -> Decimal:
    """Return the Decimal 1E-<scale>, used as a quantize() template."""
    return Decimal((0, (1,), -scale))
