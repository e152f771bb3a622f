from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from pathlib import Path
from typing import Literal
from functools import lru_cache
from ..validators.config_validators import to_uppercase, to_lowercase, strip_message

DEFAULT_GENERIC_ERROR_MESSAGE = "Something went wrong."


class Settings(BaseSettings):
    """
    Library settings loaded from environment.

    Every variable is read with the `EXCEPTION_TRANSFORMER_` prefix, e.g.
    `EXCEPTION_TRANSFORMER_GENERIC_ERROR_MESSAGE="Please try again."`.
    """

    # Environment
    ENV: Literal["development", "testing", "staging", "production"] = "development"

    # Messages
    GENERIC_ERROR_MESSAGE: str = DEFAULT_GENERIC_ERROR_MESSAGE

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FORMAT: Literal["json", "text"] = "json"
    LOG_TO_STDOUT: bool = True
    LOG_DIR: Path = Path("/var/log/exception-transformer")
    LOG_MAX_BYTES: int = 10_000_000  # 10 MB
    LOG_BACKUP_COUNT: int = 5

    # --- Validators ---
    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: str | None) -> str | None:
        """
        Normalize the LOG_LEVEL value to uppercase so "debug" and "DEBUG" are both accepted.
        """
        return to_uppercase(v)

    @field_validator("LOG_FORMAT", mode="before")
    def normalize_log_format(cls, v: str | None) -> str | None:
        """
        Normalize the LOG_FORMAT value to lowercase.
        """
        return to_lowercase(v)

    @field_validator("GENERIC_ERROR_MESSAGE", mode="before")
    def normalize_generic_error_message(cls, v: str | None) -> str:
        """
        Trim the generic message; a blank value falls back to the built-in default.
        """
        return strip_message(v) or DEFAULT_GENERIC_ERROR_MESSAGE

    model_config = SettingsConfigDict(
        env_prefix="EXCEPTION_TRANSFORMER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# get_settings() takes no arguments and always returns the same settings from the environment,
# so it is cached.
@lru_cache()
def get_settings() -> Settings:
    return Settings()
