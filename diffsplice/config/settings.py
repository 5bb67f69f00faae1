"""
Pydantic-based configuration management for diffsplice.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DIFFSPLICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    environment: str = Field("development", validation_alias="DIFFSPLICE_ENV")
    log_level: str = "INFO"
    validate_hunk_counts: bool = False
    host: str = "127.0.0.1"
    port: int = 8000


settings = AppSettings()


"""
Usage:
    from diffsplice.config.settings import settings

    if settings.validate_hunk_counts:
        ...
"""
