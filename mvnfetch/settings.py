"""Runtime configuration for mvnfetch."""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mvnfetch.constants import (
    DOWNLOAD_CHUNK_SIZE,
    MAVEN_CENTRAL_URL,
    S3_DEFAULT_REGION,
)


class Settings(BaseSettings):
    """Configuration values mapped from ``MVNFETCH_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MVNFETCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Repository
    mvn_server: str = Field(MAVEN_CENTRAL_URL, description="Base URL of the Maven repository (http(s):// or s3://)")
    repo_user: Optional[str] = Field(None, description="Basic auth user for HTTP repositories")
    repo_password: Optional[str] = Field(None, description="Basic auth password for HTTP repositories")

    # Output
    output_dir: Optional[str] = Field(None, description="Destination directory, defaults to the working directory")

    # Transports
    http_timeout: Optional[float] = Field(None, description="HTTP timeout in seconds, unset blocks indefinitely")
    s3_region: Optional[str] = Field(None, description="Skip region discovery and use this region")
    s3_default_region: str = Field(S3_DEFAULT_REGION, description="Region used when instance metadata has none")
    chunk_size: int = Field(DOWNLOAD_CHUNK_SIZE, gt=0)

    log_level: str = Field("INFO")

    def resolved_output_dir(self) -> str:
        return self.output_dir or os.getcwd()


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
