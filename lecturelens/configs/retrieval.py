"""
Retrieval configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Similarity search defaults
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RetrievalSettings(BaseSettings):
    """Similarity search configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RETRIEVAL_",
        case_sensitive=False,
        extra="ignore",
    )

    default_top_k: int = Field(default=5, ge=1, description="Results returned by search")
    chat_top_k: int = Field(default=3, ge=1, description="Results used to ground a chat answer")
