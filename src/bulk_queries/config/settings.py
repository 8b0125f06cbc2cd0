"""
Configuration management for bulk-queries.

Environment-based configuration using Pydantic BaseSettings. The statement
generators never read settings; they are consumed by the execution helper
and the logging setup only.

Environment variables use the BULKQ_ prefix, except for the uppercase
fields which are read without prefix:
- LOG_LEVEL: Logging level (default INFO)
- DATABASE_URL: SQLAlchemy URL used by BulkQueryExecutor when no engine is given
- DB_BATCH_SIZE: Rows per INSERT statement (0 = unbatched)
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bulk_queries.infrastructure.sql.core.types import DatabaseEngine

PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("BULKQ_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Example:
        BULKQ_DATABASE_ENGINE=sqlserver overrides ``database_engine``;
        DB_BATCH_SIZE=500 overrides ``DB_BATCH_SIZE``.
    """

    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )
    DATABASE_URL: Optional[str] = Field(
        default=None,
        validation_alias="DATABASE_URL",
        description="SQLAlchemy database URL for the execution helper",
    )
    DB_BATCH_SIZE: int = Field(
        default=100,
        ge=0,
        validation_alias="DB_BATCH_SIZE",
        description="Rows per generated INSERT statement (0 = one statement)",
    )

    database_engine: DatabaseEngine = Field(
        default=DatabaseEngine.POSTGRES,
        description="Dialect used by the execution helper",
    )
    param_prefix: str = Field(
        default="",
        description="Default parameter-name prefix for generated statements",
    )
    strict_conflict_policy: bool = Field(
        default=False,
        description=(
            "Raise instead of warning when a conflict policy is not supported "
            "by the configured dialect"
        ),
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()

    model_config = SettingsConfigDict(
        env_prefix="BULKQ_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get the cached settings instance.

    Tests that change environment variables should call
    ``get_settings.cache_clear()`` afterwards.
    """
    return Settings()
