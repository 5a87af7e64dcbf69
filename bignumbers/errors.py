# ============================================================================
# bignumbers v1.0.0
# Error Taxonomy
# ============================================================================
#
# Purpose: Exceptions raised by the Decimal value type
#
# Every error is raised synchronously at the offending call. Nothing in the
# library catches or retries its own errors.
#
# Error Codes:
#   - BN-ARG-001: Invalid argument (unsupported kind or unparseable value)
#   - BN-DIV-001: Division by zero
#   - BN-DOM-001: Operand outside the operation's domain
#   - BN-CFG-001: Invalid configuration
#
# ============================================================================


class BigNumbersErrorCode:
    """Error codes for audit logging."""
    INVALID_ARGUMENT = "BN-ARG-001"
    DIVISION_BY_ZERO = "BN-DIV-001"
    DOMAIN_ERROR = "BN-DOM-001"
    CONFIG_INVALID = "BN-CFG-001"


class BigNumbersError(Exception):
    """
    Base exception for all bignumbers errors.

    Carries the error code alongside the human-readable message so callers
    can branch on ``error_code`` without parsing text.
    """

    default_code = "BN-000"

    def __init__(self, message: str, error_code: str = None):
        """
        Initialize error.

        Args:
            message: Human-readable error message
            error_code: Error code (default: the class's default_code)
        """
        self.error_code = error_code or self.default_code
        self.message = message
        super().__init__(f"[{self.error_code}] {message}")


class InvalidArgument(BigNumbersError, TypeError):
    """Raised when a value of an unsupported kind reaches a Decimal factory."""

    default_code = BigNumbersErrorCode.INVALID_ARGUMENT


class DivisionByZero(BigNumbersError, ZeroDivisionError):
    """Raised when the divisor of div/mod is exactly zero."""

    default_code = BigNumbersErrorCode.DIVISION_BY_ZERO


class DomainError(BigNumbersError, ValueError):
    """
    Raised when an operand lies outside an operation's real domain.

    Covers square roots and logarithms of negative numbers, the logarithm of
    zero, and zero raised to a non-positive power.
    """

    default_code = BigNumbersErrorCode.DOMAIN_ERROR


class BigNumbersConfigurationError(BigNumbersError):
    """Raised when environment configuration is invalid."""

    default_code = BigNumbersErrorCode.CONFIG_INVALID
