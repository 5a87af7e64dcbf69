"""
============================================================================
bignumbers - Configuration
============================================================================

Configuration for the library's ambient behavior. Nothing configured here
changes a numeric result: precision and rounding are fixed by the engine
contexts in bignumbers.engine.

ENVIRONMENT VARIABLES:
    - BIGNUMBERS_LOG_LEVEL: Level of the "bignumbers" logger (default: WARNING)
    - BIGNUMBERS_LOG_ERRORS: Log every raised error before raising (default: true)

ERROR CODES:
    - BN-CFG-001: Invalid configuration

============================================================================
"""

from dataclasses import dataclass
from typing import List, Optional
import logging
import os

from dotenv import load_dotenv

from bignumbers.errors import BigNumbersConfigurationError, BigNumbersErrorCode

# Configure module logger
logger = logging.getLogger(__name__)

PACKAGE_LOGGER_NAME = "bignumbers"


# =============================================================================
# Default Values
# =============================================================================

DEFAULT_LOG_LEVEL = "WARNING"

DEFAULT_LOG_ERRORS = True

VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


# =============================================================================
# BigNumbersConfig Class
# =============================================================================

@dataclass
class BigNumbersConfig:
    """
    Library configuration.

    - log_level: Level applied to the "bignumbers" logger (default: WARNING)
    - log_errors: Whether raised errors are logged with their code (default: True)
    """

    log_level: str = DEFAULT_LOG_LEVEL

    log_errors: bool = DEFAULT_LOG_ERRORS

    def __post_init__(self) -> None:
        self.log_level = str(self.log_level).upper().strip()

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            BigNumbersConfigurationError: If any value is invalid (BN-CFG-001)
        """
        errors: List[str] = []

        if self.log_level not in VALID_LOG_LEVELS:
            errors.append(
                f"BIGNUMBERS_LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, "
                f"got: {self.log_level}"
            )

        if not isinstance(self.log_errors, bool):
            errors.append(
                f"BIGNUMBERS_LOG_ERRORS must be a boolean, got: {self.log_errors!r}"
            )

        if errors:
            error_msg = "bignumbers configuration validation failed: " + "; ".join(errors)
            logger.error(f"[{BigNumbersErrorCode.CONFIG_INVALID}] {error_msg}")
            raise BigNumbersConfigurationError(error_msg)

        logger.debug(
            f"[BN-CONFIG] Configuration validated | "
            f"log_level={self.log_level} | "
            f"log_errors={self.log_errors}"
        )

    @classmethod
    def from_environment(
        cls,
        validate: bool = True,
        dotenv_path: Optional[str] = None,
    ) -> "BigNumbersConfig":
        """
        Load configuration from environment variables.

        Args:
            validate: Whether to validate configuration after loading (default: True)
            dotenv_path: Optional .env file loaded first; existing environment
                variables take precedence over its entries

        Returns:
            BigNumbersConfig instance with values from environment

        Raises:
            BigNumbersConfigurationError: If validation fails (BN-CFG-001)
        """
        if dotenv_path is not None:
            load_dotenv(dotenv_path, override=False)

        level = os.environ.get("BIGNUMBERS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper().strip()
        if level not in VALID_LOG_LEVELS:
            logger.warning(
                f"[BN-CONFIG] Invalid BIGNUMBERS_LOG_LEVEL value: {level}, "
                f"using default: {DEFAULT_LOG_LEVEL}"
            )
            level = DEFAULT_LOG_LEVEL

        log_errors_str = os.environ.get("BIGNUMBERS_LOG_ERRORS", "true").lower().strip()
        log_errors = log_errors_str in ("true", "1", "yes", "on")

        config = cls(log_level=level, log_errors=log_errors)

        if validate:
            config.validate()

        return config

    def to_dict(self) -> dict:
        return {
            "log_level": self.log_level,
            "log_errors": self.log_errors,
        }


# =============================================================================
# Module-Level Configuration Instance
# =============================================================================

_config_instance: Optional[BigNumbersConfig] = None


def get_config() -> BigNumbersConfig:
    """
    Get the global configuration instance, loading it from the environment
    on first access.
    """
    global _config_instance

    if _config_instance is None:
        _config_instance = BigNumbersConfig.from_environment()

    return _config_instance


def set_config(config: BigNumbersConfig) -> None:
    """Replace the global configuration instance after validating it."""
    global _config_instance
    config.validate()
    _config_instance = config


def reset_config() -> None:
    """Clear the global configuration instance (used by tests)."""
    global _config_instance
    _config_instance = None
    logger.debug("[BN-CONFIG] Configuration instance reset")


def configure_logging(config: Optional[BigNumbersConfig] = None) -> logging.Logger:
    """
    Apply the configured level to the package logger.

    Args:
        config: Configuration to apply (default: the global instance)

    Returns:
        The "bignumbers" logger
    """
    if config is None:
        config = get_config()

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(config.log_level)
    return package_logger
