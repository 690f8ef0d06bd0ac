"""Configuration management."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings pulled from SHIPGEN_* environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="console", description="Logging format (console or json)")

    # Generation
    default_seed: str = Field(default="0", description="Seed used when none is given")

    # Output
    json_indent: int = Field(default=2, ge=0, description="Indent of JSON blueprint output")

    model_config = SettingsConfigDict(
        env_prefix="SHIPGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
