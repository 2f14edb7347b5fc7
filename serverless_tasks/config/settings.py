"""
Configuration settings for the serverless task functions.

Settings are sourced from environment variables once per Lambda container
(cold start) and are immutable afterwards.
"""
import logging
import math
from functools import lru_cache
from typing import Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MIN_CONFIDENCE = 90.0
MIN_CONFIDENCE_ENVIRONMENT_VARIABLE_NAME = "MinConfidence"

# Plain stdlib logger: log_config depends on this module, not the other way round
logger = logging.getLogger("serverless-tasks.config.settings")


def parse_min_confidence(raw_value: Any) -> float:
    """
    Resolve the minimum confidence threshold from its raw environment value.

    Missing, blank or invalid values fall back to the default; this never
    raises, so a bad value cannot prevent the function from starting.

    Args:
        raw_value: Raw value as read from the environment (usually a string)

    Returns:
        Minimum confidence in the range 0-100
    """
    if raw_value is None or (isinstance(raw_value, str) and not raw_value.strip()):
        logger.info(f"Using default minimum confidence of {DEFAULT_MIN_CONFIDENCE}")
        return DEFAULT_MIN_CONFIDENCE

    try:
        value = float(raw_value)
    except (TypeError, ValueError):
        value = None

    if value is None or not math.isfinite(value) or not 0.0 <= value <= 100.0:
        logger.warning(
            f"Failed to parse value {raw_value} for minimum confidence. "
            f"Reverting back to default of {DEFAULT_MIN_CONFIDENCE}"
        )
        return DEFAULT_MIN_CONFIDENCE

    logger.info(f"Setting minimum confidence to {value}")
    return value


class LambdaSettings(BaseSettings):
    """
    Configuration settings for the Lambda functions.

    Centralizes environment variable access and provides
    sensible defaults for Lambda execution.
    """

    # LABEL DETECTION
    min_confidence: float = Field(
        default=None,
        validate_default=True,
        validation_alias=AliasChoices(
            MIN_CONFIDENCE_ENVIRONMENT_VARIABLE_NAME, "MIN_CONFIDENCE", "min_confidence"
        ),
    )

    # ENVIRONMENT & LOGGING
    environment: str = "development"
    log_level: str = "INFO"
    service_name: str = "serverless-tasks"

    # AWS CLIENT CONFIGURATION
    aws_region: str = "us-east-1"
    aws_max_retry_attempts: int = 3
    aws_max_pool_connections: int = 10

    # PROCESSING
    object_timeout_seconds: float = Field(default=30.0, gt=0)
    timeout_safety_margin_ms: int = Field(default=1000, ge=0)
    max_workers: int = Field(default=1, ge=1)

    model_config = SettingsConfigDict(
        env_file=[".env", ".env.local"],
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    @field_validator("min_confidence", mode="before")
    @classmethod
    def validate_min_confidence(cls, v):
        return parse_min_confidence(v)

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"


def load_settings() -> LambdaSettings:
    """Build a fresh settings instance from the current environment."""
    return LambdaSettings()


@lru_cache(maxsize=1)
def get_settings() -> LambdaSettings:
    """Get the process-wide settings, read once at cold start."""
    return load_settings()
