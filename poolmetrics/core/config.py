"""Runtime settings for connection pool instrumentation.

Values are read from ``POOL_METRICS_*`` environment variables (or a local
``.env`` file) once at import time.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Instrumentation settings."""

    model_config = SettingsConfigDict(
        env_prefix="POOL_METRICS_",
        env_file=".env",
        extra="ignore",
    )

    INSTRUMENTATION_NAME: str = Field(
        default="poolmetrics.connection-pool",
        description="Instrumentation scope name attached to every pool counter.",
    )
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Level of the poolmetrics logger."
    )


settings = Settings()
