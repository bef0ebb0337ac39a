"""
Configuration management for the timesheet checker.
"""

from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TimesheetConfig(BaseSettings):
    """Configuration settings for the timesheet checker."""

    # Application Configuration
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Calculation Configuration
    basic_threshold_minutes: int = Field(
        default=40 * 60, ge=0, alias="BASIC_THRESHOLD_MINUTES"
    )
    mismatch_tolerance_minutes: int = Field(
        default=1, ge=0, alias="MISMATCH_TOLERANCE_MINUTES"
    )

    # Submission Configuration
    submission_url: Optional[str] = Field(default=None, alias="SUBMISSION_URL")
    submission_timeout: float = Field(default=10.0, gt=0, alias="SUBMISSION_TIMEOUT")
    max_retries: int = Field(default=3, ge=0, alias="MAX_RETRIES")
    retry_delay: float = Field(default=1.0, ge=0, alias="RETRY_DELAY")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Ensure environment is valid."""
        valid_envs = ["development", "testing", "production"]
        if v.lower() not in valid_envs:
            raise ValueError(f"Environment must be one of: {valid_envs}")
        return v.lower()

    @field_validator("submission_url")
    @classmethod
    def validate_submission_url(cls, v):
        """Ensure the submission endpoint is an http(s) URL."""
        if v is None or not v.strip():
            return None
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("Submission URL must start with http:// or https://")
        return v


def load_config(env_file: Optional[str] = None) -> TimesheetConfig:
    """Load configuration from environment variables and .env file."""
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    return TimesheetConfig()


# Global configuration instance
_config: Optional[TimesheetConfig] = None


def get_config() -> TimesheetConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(env_file: Optional[str] = None) -> TimesheetConfig:
    """Reload configuration (useful for testing)."""
    global _config
    _config = load_config(env_file)
    return _config
