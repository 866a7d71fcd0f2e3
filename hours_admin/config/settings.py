from pathlib import Path

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_default_data_dir() -> Path:
    """Directory holding the locally persisted schedule and endpoint config.

    Defaults to ~/.restaurant-hours-admin so the CLI keeps state between runs
    regardless of the working directory it is started from.
    """
    return Path.home() / ".restaurant-hours-admin"


class Settings(BaseSettings):
    data_dir: Path = Field(
        default_factory=get_default_data_dir,
        validation_alias="HOURS_ADMIN_DATA_DIR",
    )
    log_level: str = Field(default="INFO", validation_alias="HOURS_ADMIN_LOG_LEVEL")
    log_file: str | None = Field(
        default=None,
        validation_alias="HOURS_ADMIN_LOG_FILE",
        description="Optional rotating log file; console only when unset",
    )
    http_timeout_seconds: float = Field(
        default=15.0,
        validation_alias="HOURS_ADMIN_HTTP_TIMEOUT_SECONDS",
        description="Timeout applied to every remote sync request",
    )
    card_logo_src: str = Field(
        default="images/image_001.webp",
        validation_alias="HOURS_ADMIN_CARD_LOGO_SRC",
        description="Logo image path embedded in the exported HTML card",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid HOURS_ADMIN_LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("http_timeout_seconds")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        if value <= 0:
            logger.warning(f"HOURS_ADMIN_HTTP_TIMEOUT_SECONDS must be positive, got {value}. Defaulting to 15 seconds.")
            return 15.0
        return value

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
