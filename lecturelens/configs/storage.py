"""
Session storage configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Session store backend selection
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Session store configuration (JSON files for dev, memory for tests)."""

    model_config = SettingsConfigDict(
        env_prefix="STORAGE_",
        case_sensitive=False,
        extra="ignore",
    )

    backend: str = Field(
        default="json",
        description="Session store type: 'json' for files on disk, 'memory' for in-process",
    )
    data_dir: str = Field(
        default="./data/processed",
        description="Directory holding documents_<id>.json and embeddings_<id>.json",
    )
