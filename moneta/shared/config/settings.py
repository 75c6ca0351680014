from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    LOG_LEVEL: str = Field(
        default="INFO", description="Logging level [DEBUG, INFO, WARNING, ERROR]"
    )

    JSON_LOGS: bool = Field(
        default=False,
        description="Should logs be in JSON format?",
    )

    MONEY_BACKEND: Literal["exact", "approximate"] = Field(
        default="exact",
        description="Arithmetic backend: exact decimal digits or native floats",
    )

    DEFAULT_LOCALE: str = Field(
        default="en",
        min_length=2,
        description="Locale used to pick currency symbols when none is given",
        examples=["en", "en_CA"],
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        if value.upper() not in valid_levels:
            raise ValueError(
                f"Invalid LOG_LEVEL '{value}'. Must be one of {valid_levels}"
            )
        return value.upper()

    @field_validator("MONEY_BACKEND", mode="before")
    @classmethod
    def normalize_backend(cls, value: str) -> str:
        if isinstance(value, str):
            return value.strip().lower()
        return value


@lru_cache()
def get_settings() -> Settings:
    from moneta.shared.logging import get_logger

    logger = get_logger(__name__)

    try:
        settings = Settings()
        logger.info(
            "settings_loaded",
            backend=settings.MONEY_BACKEND,
            log_level=settings.LOG_LEVEL,
        )
        return settings

    except Exception as e:
        logger.error("settings_load_failed", error=str(e), exc_info=True)
        raise
