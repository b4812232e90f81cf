from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_JSON: bool = False  # True for structured JSON, False for colored console

    # Defaults applied when validate() is called without options
    DEFAULT_ABORT_EARLY: bool = False
    DEFAULT_INCLUDE_RULES: bool = False
    DEFAULT_INCLUDE_LABEL: bool = False

    model_config = SettingsConfigDict(
        env_prefix="FORMGUARD_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
