"""Application configuration model using pydantic-settings."""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_CHECKSUM_ALGORITHMS = ("md5", "sha1", "sha256", "sha512")


class Config(BaseSettings):
    """Application configuration loaded from BASICCLI_* environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_prefix="BASICCLI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "INFO"
    log_colors: bool | None = None
    default_iterations: int = 1000
    checksum_algorithm: str = "sha256"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Log level must be a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            msg = f"log_level must be one of {', '.join(sorted(valid_levels))}"
            raise ValueError(msg)
        return upper_value

    @field_validator("default_iterations")
    @classmethod
    def validate_default_iterations(cls, value: int) -> int:
        """Default iteration count must be positive."""
        if value < 1:
            msg = "default_iterations must be at least 1"
            raise ValueError(msg)
        return value

    @field_validator("checksum_algorithm")
    @classmethod
    def validate_checksum_algorithm(cls, value: str) -> str:
        """Checksum algorithm must be one the file handler supports."""
        lower_value = value.lower()
        if lower_value not in SUPPORTED_CHECKSUM_ALGORITHMS:
            msg = f"checksum_algorithm must be one of {', '.join(SUPPORTED_CHECKSUM_ALGORITHMS)}"
            raise ValueError(msg)
        return lower_value
