"""
============================================================================
bignumbers - Decimal Constants
============================================================================

Canonical Decimal values. Mathematical constants carry 32 digits after the
point; each accessor returns a fresh, immutable Decimal.

============================================================================
"""

from bignumbers.big_decimal import Decimal


# =============================================================================
# Constant Digits
# =============================================================================

PI_DIGITS = "3.14159265358979323846264338327950"
E_DIGITS = "2.71828182845904523536028747135266"
EULER_MASCHERONI_DIGITS = "0.57721566490153286060651209008240"
GOLDEN_RATIO_DIGITS = "1.61803398874989484820458683436564"
LN_10_DIGITS = "2.30258509299404568401799145468436"


class DecimalConstants:
    """Factory methods for frequently used Decimal values."""

    @staticmethod
    def zero() -> Decimal:
        return Decimal.from_integer(0)

    @staticmethod
    def one() -> Decimal:
        return Decimal.from_integer(1)

    @staticmethod
    def negative_one() -> Decimal:
        return Decimal.from_integer(-1)

    @staticmethod
    def pi() -> Decimal:
        """Ratio of a circle's circumference to its diameter."""
        return Decimal.from_string(PI_DIGITS)

    @staticmethod
    def e() -> Decimal:
        """Euler's number, the base of the natural logarithm."""
        return Decimal.from_string(E_DIGITS)

    @staticmethod
    def euler_mascheroni() -> Decimal:
        return Decimal.from_string(EULER_MASCHERONI_DIGITS)

    @staticmethod
    def golden_ratio() -> Decimal:
        return Decimal.from_string(GOLDEN_RATIO_DIGITS)

    @staticmethod
    def ln_10() -> Decimal:
        """Natural logarithm of 10."""
        return Decimal.from_string(LN_10_DIGITS)
