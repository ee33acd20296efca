"""
Base configuration settings.

Shared `.env` loading plus the application-level values read when the
FastAPI app is assembled and served.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Application settings read by create_app and its lifespan."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level installed at startup",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API (JSON list in CORS_ORIGINS)",
    )
    host: str = Field(default="0.0.0.0", description="Bind address for `python -m lecturelens.api.main`")
    port: int = Field(default=8000, description="Bind port for `python -m lecturelens.api.main`")
