"""
============================================================================
bignumbers v1.0.0
Decimal - Immutable Arbitrary-Precision Decimal Number
============================================================================

Input Constraints: int, float, str, Decimal or decimal.Decimal
Side Effects: None (pure value type). Raised errors are logged at DEBUG with
    their error code unless BIGNUMBERS_LOG_ERRORS=false.

PURPOSE
-------
Wraps a finite decimal.Decimal together with an optional display scale.
Every operation returns a new Decimal; nothing is mutated after
construction, so instances can be shared freely between threads.

ROUNDING
--------
add, sub, mul, mod, additive_inverse, abs, ceil and floor are exact.
div, sqrt, pow, log10 and exp keep 28 significant digits, rounding
half-to-even. round() rounds half-to-even to the requested scale.

LOCALE INDEPENDENCE
-------------------
Floats are rendered with float.__repr__, which never consults the host locale, and
any comma in the rendering is replaced with a period before parsing.

ERROR CODES
-----------
    - BN-ARG-001: InvalidArgument
    - BN-DIV-001: DivisionByZero
    - BN-DOM-001: DomainError

============================================================================
"""

import logging
from dataclasses import dataclass
from decimal import (
    Decimal as EngineDecimal,
    InvalidOperation,
    Overflow,
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_EVEN,
)
from typing import Callable, Optional, Union

from bignumbers import engine
from bignumbers.config import get_config
from bignumbers.engine import EXACT_CONTEXT, WORKING_CONTEXT
from bignumbers.errors import (
    BigNumbersError,
    DivisionByZero,
    DomainError,
    InvalidArgument,
)

# Configure module logger
logger = logging.getLogger(__name__)


def _fail(error_cls, message: str) -> BigNumbersError:
    """Build an error, logging it with its code first when configured to."""
    error = error_cls(message)
    if get_config().log_errors:
        logger.debug(f"[{error.error_code}] {message}")
    return error


@dataclass(frozen=True, eq=False, repr=False)
class Decimal:
    """
    Immutable decimal number.

    Build instances through the factories (create, from_integer, from_float,
    from_string, from_decimal) rather than the dataclass constructor, which
    only accepts an engine value.

    Attributes:
        _value: Finite decimal.Decimal holding the exact magnitude
        _scale: Digits after the point used by to_string(), or None for the
            canonical rendering. Never affects arithmetic.

    Example Usage:
        price = Decimal.from_string("19.99")
        total = price.mul(Decimal.from_integer(3))   # Decimal('59.97')
        str(Decimal.create(total, 1))                 # '60.0'
    """
    _value: EngineDecimal
    _scale: Optional[int] = None

    def __post_init__(self) -> None:
        if not isinstance(self._value, EngineDecimal):
            raise _fail(
                InvalidArgument,
                f"Decimal wraps a decimal.Decimal, but received {type(self._value).__name__}; "
                f"use Decimal.create() for other kinds"
            )
        if not self._value.is_finite():
            raise _fail(
                InvalidArgument,
                f"Decimal only represents finite numbers, but received {self._value}"
            )
        if self._scale is not None and (
            isinstance(self._scale, bool)
            or not isinstance(self._scale, int)
            or self._scale < 0
        ):
            raise _fail(
                InvalidArgument,
                f"scale must be None or a non-negative int, but received {self._scale!r}"
            )
        # Zero has no sign
        if self._value.is_zero() and self._value.is_signed():
            object.__setattr__(self, "_value", self._value.copy_abs())

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def create(
        cls,
        value: Union[int, float, str, "Decimal", EngineDecimal],
        scale: Optional[int] = None,
    ) -> "Decimal":
        """
        Build a Decimal from any supported kind of value.

        Args:
            value: int, float, str, Decimal or decimal.Decimal
            scale: Optional number of digits rendered after the point

        Returns:
            New Decimal holding the exact value of the input

        Raises:
            InvalidArgument: Unsupported kind, unparseable or non-finite value,
                or an invalid scale (BN-ARG-001)
        """
        # bool is an int subclass but not a number here
        if isinstance(value, (int, str)) and not isinstance(value, bool):
            return cls(cls._parse(value), scale)
        if isinstance(value, float):
            converted = engine.render_float(value).replace(',', '.')
            return cls(cls._parse(converted), scale)
        if isinstance(value, Decimal):
            return cls(value._value, scale)
        if isinstance(value, EngineDecimal):
            return cls(value, scale)

        raise _fail(
            InvalidArgument,
            f"Expected (int, float, str, Decimal), but received {type(value).__name__}"
        )

    @staticmethod
    def _parse(raw: Union[int, str]) -> EngineDecimal:
        try:
            return EngineDecimal(raw, context=EXACT_CONTEXT)
        except InvalidOperation as e:
            raise _fail(
                InvalidArgument,
                f"Cannot parse {raw!r} as a decimal number"
            ) from e

    @classmethod
    def from_integer(cls, int_value: int) -> "Decimal":
        if isinstance(int_value, bool) or not isinstance(int_value, int):
            raise _fail(
                InvalidArgument,
                f"from_integer expects an int, but received {type(int_value).__name__}"
            )
        return cls.create(int_value)

    @classmethod
    def from_float(cls, flt_value: float, scale: Optional[int] = None) -> "Decimal":
        """Build a Decimal from a float; ints are widened to float first."""
        if isinstance(flt_value, bool) or not isinstance(flt_value, (int, float)):
            raise _fail(
                InvalidArgument,
                f"from_float expects a float, but received {type(flt_value).__name__}"
            )
        try:
            flt_value = float(flt_value)
        except OverflowError as e:
            raise _fail(
                InvalidArgument,
                f"from_float received an int too large for a float: {flt_value}"
            ) from e
        return cls.create(flt_value, scale)

    @classmethod
    def from_string(cls, str_value: str, scale: Optional[int] = None) -> "Decimal":
        if not isinstance(str_value, str):
            raise _fail(
                InvalidArgument,
                f"from_string expects a str, but received {type(str_value).__name__}"
            )
        return cls.create(str_value, scale)

    @classmethod
    def from_decimal(cls, dec_value: "Decimal") -> "Decimal":
        """
        Re-wrap the magnitude of an existing Decimal.

        The display scale of dec_value is not carried over: the result renders
        canonically.
        """
        if not isinstance(dec_value, Decimal):
            raise _fail(
                InvalidArgument,
                f"from_decimal expects a Decimal, but received {type(dec_value).__name__}"
            )
        return cls.create(dec_value._value)

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def _operand(self, other: "Decimal", operation: str) -> EngineDecimal:
        if not isinstance(other, Decimal):
            raise _fail(
                InvalidArgument,
                f"{operation} expects a Decimal operand, but received {type(other).__name__}"
            )
        return other._value

    @staticmethod
    def _working(operation: str, compute: Callable[[], EngineDecimal]) -> "Decimal":
        """Run a rounded engine operation, mapping engine signals to DomainError."""
        try:
            return Decimal(compute())
        except Overflow as e:
            raise _fail(
                DomainError,
                f"{operation} result exceeds the representable exponent range"
            ) from e
        except InvalidOperation as e:
            raise _fail(
                DomainError,
                f"{operation} is undefined for the given operands"
            ) from e

    def add(self, b: "Decimal") -> "Decimal":
        return Decimal(EXACT_CONTEXT.add(self._value, self._operand(b, "add")))

    def sub(self, b: "Decimal") -> "Decimal":
        return Decimal(EXACT_CONTEXT.subtract(self._value, self._operand(b, "sub")))

    def mul(self, b: "Decimal") -> "Decimal":
        return Decimal(EXACT_CONTEXT.multiply(self._value, self._operand(b, "mul")))

    def div(self, b: "Decimal") -> "Decimal":
        """
        Divide by b, keeping 28 significant digits (half-to-even).

        Note: the quotient is not an integer division; 7 / 2 is 3.5.

        Raises:
            DivisionByZero: If b is zero (BN-DIV-001)
        """
        divisor = self._operand(b, "div")
        if divisor.is_zero():
            raise _fail(
                DivisionByZero,
                f"Division by zero is not allowed | dividend={self._value}"
            )
        if self._value.is_zero():
            from bignumbers.constants import DecimalConstants
            return DecimalConstants.zero()
        return self._working("div", lambda: WORKING_CONTEXT.divide(self._value, divisor))

    def sqrt(self) -> "Decimal":
        """
        Square root, 28 significant digits.

        Raises:
            DomainError: If self is negative (BN-DOM-001)
        """
        if self.is_negative():
            raise _fail(
                DomainError,
                f"Square roots of negative numbers are not real numbers | value={self._value}"
            )
        if self.is_zero():
            from bignumbers.constants import DecimalConstants
            return DecimalConstants.zero()
        return self._working("sqrt", lambda: WORKING_CONTEXT.sqrt(self._value))

    def pow(self, b: "Decimal") -> "Decimal":
        """
        Raise self to the power b.

        Args:
            b: Exponent

        Raises:
            DomainError: If self is zero and b is not positive, or if the
                result is not real (negative base, fractional exponent)
        """
        exponent = self._operand(b, "pow")
        if self.is_zero():
            if b.is_positive():
                return Decimal.from_decimal(self)
            raise _fail(
                DomainError,
                f"Zero can't be powered to zero or negative numbers | exponent={exponent}"
            )
        return self._working("pow", lambda: WORKING_CONTEXT.power(self._value, exponent))

    def log10(self) -> "Decimal":
        """
        Base-10 logarithm.

        Raises:
            DomainError: If self is negative, or zero (the result would be
                infinite)
        """
        if self.is_negative():
            raise _fail(
                DomainError,
                f"Logarithms of negative numbers are not real numbers | value={self._value}"
            )
        if self.is_zero():
            raise _fail(
                DomainError,
                "The logarithm of zero is infinite and can't be represented"
            )
        return self._working("log10", lambda: WORKING_CONTEXT.log10(self._value))

    def mod(self, d: "Decimal") -> "Decimal":
        """
        Integer modulo: both operands are truncated toward zero first, and the
        result takes the sign of self (5.5 mod 2 is 1, -7 mod 3 is -1).

        Raises:
            DivisionByZero: If the integer part of d is zero (BN-DIV-001)
        """
        divisor = self._operand(d, "mod").to_integral_value(
            rounding=ROUND_DOWN, context=EXACT_CONTEXT
        )
        dividend = self._value.to_integral_value(rounding=ROUND_DOWN, context=EXACT_CONTEXT)
        if divisor.is_zero():
            raise _fail(
                DivisionByZero,
                f"Modulo by zero is not allowed | dividend={self._value}"
            )
        return Decimal(EXACT_CONTEXT.remainder(dividend, divisor))

    def exp(self) -> "Decimal":
        """e ** self, 28 significant digits."""
        return self._working("exp", lambda: WORKING_CONTEXT.exp(self._value))

    def additive_inverse(self) -> "Decimal":
        return Decimal(EXACT_CONTEXT.minus(self._value))

    # =========================================================================
    # Rounding
    # =========================================================================

    def round(self, scale: int = 0) -> "Decimal":
        """
        Round to at most `scale` digits after the point, ties to even.

        A value that already has fewer digits is returned unpadded. A negative
        scale rounds to tens, hundreds and so on.

        Args:
            scale: Digits kept after the point (default: 0)

        Returns:
            Rounded Decimal
        """
        if isinstance(scale, bool) or not isinstance(scale, int):
            raise _fail(
                InvalidArgument,
                f"round expects an int scale, but received {type(scale).__name__}"
            )
        if self._value.as_tuple().exponent >= -scale:
            return Decimal(self._value)
        return Decimal(
            self._value.quantize(
                engine.quantum(scale), rounding=ROUND_HALF_EVEN, context=EXACT_CONTEXT
            )
        )

    def ceil(self) -> "Decimal":
        return Decimal(
            self._value.to_integral_value(rounding=ROUND_CEILING, context=EXACT_CONTEXT)
        )

    def floor(self) -> "Decimal":
        return Decimal(
            self._value.to_integral_value(rounding=ROUND_FLOOR, context=EXACT_CONTEXT)
        )

    def abs(self) -> "Decimal":
        return Decimal(EXACT_CONTEXT.abs(self._value))

    # =========================================================================
    # Predicates
    # =========================================================================

    def is_zero(self) -> bool:
        return self._value.is_zero()

    def is_positive(self) -> bool:
        return not self._value.is_signed() and not self._value.is_zero()

    def is_negative(self) -> bool:
        return self._value.is_signed() and not self._value.is_zero()

    def is_integer(self) -> bool:
        return self._value == self._value.to_integral_value(context=EXACT_CONTEXT)

    def has_same_sign(self, b: "Decimal") -> bool:
        """
        True if both values are strictly positive or both strictly negative.

        Zero has no sign, so zero never shares a sign with anything.
        """
        self._operand(b, "has_same_sign")
        return (self.is_positive() and b.is_positive()) or (
            self.is_negative() and b.is_negative()
        )

    # =========================================================================
    # Comparison
    # =========================================================================

    def compare_to(self, b: "Decimal") -> int:
        """
        Three-way comparison by numeric value.

        Returns:
            1 if self > b, -1 if self < b, 0 if equal (1.0 equals 1.00)
        """
        other = self._operand(b, "compare_to")
        return int(self._value.compare(other, context=EXACT_CONTEXT))

    comp = compare_to

    def equals(self, b: "Decimal") -> bool:
        return self.compare_to(b) == 0

    def is_greater_than(self, b: "Decimal") -> bool:
        return self.compare_to(b) == 1

    def is_greater_or_equal_to(self, b: "Decimal") -> bool:
        comparison_result = self.compare_to(b)
        return comparison_result == 1 or comparison_result == 0

    def is_less_than(self, b: "Decimal") -> bool:
        return self.compare_to(b) == -1

    def is_less_or_equal_to(self, b: "Decimal") -> bool:
        comparison_result = self.compare_to(b)
        return comparison_result == -1 or comparison_result == 0

    # =========================================================================
    # Conversions
    # =========================================================================

    def as_float(self) -> float:
        """
        Nearest float to the value.

        Precision beyond a double is lost; magnitudes past the float range
        become +/-inf and tiny ones underflow to 0.0.
        """
        return float(self._value)

    def as_integer(self) -> int:
        """Integer part of the value, truncated toward zero (exact for any magnitude)."""
        return int(self._value)

    @property
    def engine_value(self) -> EngineDecimal:
        return self._value

    @property
    def scale(self) -> Optional[int]:
        return self._scale

    # =========================================================================
    # Rendering
    # =========================================================================

    def to_string(self) -> str:
        """
        Render the value as text.

        Without a display scale the engine's canonical form is used
        (Decimal('1.50') -> '1.50', Decimal('1E+3') -> '1E+3'). With a
        display scale exactly that many digits follow the point, rounding
        half-to-even and never using exponent notation.
        """
        if self._scale is None:
            return str(self._value)

        fixed = self._value.quantize(
            engine.quantum(self._scale), rounding=ROUND_HALF_EVEN, context=EXACT_CONTEXT
        )
        if fixed.is_zero():
            fixed = fixed.copy_abs()
        return format(fixed, "f")

    def inner_value(self) -> str:
        return self.to_string()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        if self._scale is None:
            return f"Decimal('{self._value}')"
        return f"Decimal('{self._value}', scale={self._scale})"

    # =========================================================================
    # Python numeric protocol
    # =========================================================================

    @classmethod
    def _coerce(cls, other):
        if isinstance(other, Decimal):
            return other
        if isinstance(other, (int, EngineDecimal)) and not isinstance(other, bool):
            return cls.create(other)
        return NotImplemented

    def __add__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self.add(other)

    def __radd__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other.add(self)

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self.sub(other)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other.sub(self)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self.mul(other)

    def __rmul__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other.mul(self)

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self.div(other)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other.div(self)

    def __mod__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self.mod(other)

    def __rmod__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other.mod(self)

    def __pow__(self, other, modulo=None):
        if modulo is not None:
            return NotImplemented
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self.pow(other)

    def __rpow__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other.pow(self)

    def __neg__(self) -> "Decimal":
        return self.additive_inverse()

    def __pos__(self) -> "Decimal":
        return self

    def __abs__(self) -> "Decimal":
        return self.abs()

    def __round__(self, ndigits: Optional[int] = None):
        if ndigits is None:
            return self.round(0).as_integer()
        return self.round(ndigits)

    def __ceil__(self) -> int:
        return self.ceil().as_integer()

    def __floor__(self) -> int:
        return self.floor().as_integer()

    def __trunc__(self) -> int:
        return self.as_integer()

    def __float__(self) -> float:
        return self.as_float()

    def __int__(self) -> int:
        return self.as_integer()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __eq__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self.equals(other)

    def __lt__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self.is_less_than(other)

    def __le__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self.is_less_or_equal_to(other)

    def __gt__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self.is_greater_than(other)

    def __ge__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self.is_greater_or_equal_to(other)

    def __hash__(self) -> int:
        # decimal.Decimal hashes by value, so 1.0 and 1.00 collide as they should
        return hash(self._value)
