# ============================================================================
# bignumbers v1.0.0
# Immutable Arbitrary-Precision Decimal Numbers
# ============================================================================
#
# Components:
#   - Decimal: Immutable decimal value type (exact add/sub/mul, half-to-even)
#   - DecimalConstants: Canonical values (zero, one, pi, e, ...)
#   - BigNumbersConfig: Environment-driven logging configuration
#   - InvalidArgument / DivisionByZero / DomainError: Error taxonomy
#
# ============================================================================

import logging

from bignumbers.errors import (
    BigNumbersError,
    BigNumbersErrorCode,
    BigNumbersConfigurationError,
    InvalidArgument,
    DivisionByZero,
    DomainError,
)
from bignumbers.config import (
    BigNumbersConfig,
    configure_logging,
    get_config,
    reset_config,
    set_config,
)
from bignumbers.big_decimal import Decimal
from bignumbers.constants import DecimalConstants

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Value type
    'Decimal',
    'DecimalConstants',
    # Errors
    'BigNumbersError',
    'BigNumbersErrorCode',
    'BigNumbersConfigurationError',
    'InvalidArgument',
    'DivisionByZero',
    'DomainError',
    # Configuration
    'BigNumbersConfig',
    'configure_logging',
    'get_config',
    'reset_config',
    'set_config',
]

__version__ = '1.0.0'
