"""Application settings and configuration."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application (hardcoded constants)
    app_name: str = "Budget Validation API"
    app_version: str = "0.1.0"

    # Environment-specific settings
    debug: bool = False
    environment: str = "development"  # development, staging, production

    # API
    api_prefix: str = "/api"

    # Validation
    validation_max_form_fields: int = 100

    # Rate limiting (slowapi limit string)
    rate_limit_default: str = "120/minute"

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        valid_envs = {"development", "staging", "production"}
        env = str(v).lower()
        if env not in valid_envs:
            raise ValueError(f"Environment must be one of {valid_envs}, got {env}")
        return env

    @field_validator("log_format", mode="before")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format value."""
        fmt = str(v).lower()
        if fmt not in {"json", "text"}:
            raise ValueError(f"Log format must be 'json' or 'text', got {fmt}")
        return fmt

    @field_validator("validation_max_form_fields")
    @classmethod
    def validate_max_form_fields(cls, v: int) -> int:
        """Validate the form size limit."""
        if v < 1:
            raise ValueError("validation_max_form_fields must be at least 1")
        return v


settings = Settings()
