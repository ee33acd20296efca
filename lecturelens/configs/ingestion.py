"""
Subtitle ingestion configuration settings.

Controls which uploaded files are parsed and how large an embeddable unit may be.

Dependencies: pydantic, pydantic_settings
System role: Ingestion and chunking configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class IngestionSettings(BaseSettings):
    """Settings for subtitle normalization and chunking."""

    model_config = SettingsConfigDict(
        env_prefix="INGESTION_",
        case_sensitive=False,
        extra="ignore",
    )

    max_chunk_size: int = Field(
        default=25000,
        ge=1,
        description="Maximum chunk size in characters (embedding payload limit)",
    )
    supported_extensions: list[str] = Field(
        default=[".srt", ".vtt"],
        description="Subtitle file extensions accepted for ingestion",
    )
