"""Application settings for the School CRM service."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven configuration values."""

    model_config = SettingsConfigDict(
        env_prefix="SCHOOLCRM_",
        env_file=".env",
        case_sensitive=False,
    )

    app_name: str = Field(default="School CRM API", description="Title shown in the OpenAPI document.")
    database_url: str = Field(
        default="sqlite+pysqlite:///:memory:",
        description="SQLAlchemy database URL. Defaults to a process-local in-memory store.",
    )
    seed_demo_data: bool = Field(
        default=True,
        description="Populate demo accounts, a group and marketplace products on startup.",
    )
    log_level: str = Field(default="INFO", description="Root logging level.")
    json_logs: bool = Field(default=False, description="Emit log records as JSON lines.")
    sql_echo: bool = Field(default=False, description="Log every SQL statement issued by the engine.")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()
