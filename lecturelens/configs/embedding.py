"""
Embedding generation configuration settings.

Covers the Gemini embedding model, batching, pacing delays and
backoff on provider rate limits.

Dependencies: pydantic, pydantic_settings
System role: Embedding batch manager configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EmbeddingSettings(BaseSettings):
    """Settings for the embedding batch manager and provider."""

    model_config = SettingsConfigDict(
        env_prefix="EMBEDDING_",
        case_sensitive=False,
        extra="ignore",
    )

    model: str = Field(
        default="models/gemini-embedding-001",
        description="Google Gemini embedding model ID",
    )
    dimension: int = Field(
        default=768,
        ge=1,
        description="Output dimensionality requested from the provider",
    )

    batch_size: int = Field(
        default=5,
        ge=1,
        description="Documents processed per batch",
    )
    item_delay_seconds: float = Field(
        default=2.0,
        ge=0.0,
        description="Pause after every chunk-level embedding call",
    )
    batch_delay_seconds: float = Field(
        default=5.0,
        ge=0.0,
        description="Pause after every batch",
    )

    # Backoff on explicit rate-limit errors
    max_attempts: int = Field(
        default=5,
        ge=1,
        description="Attempts per chunk when the provider reports a rate limit",
    )
    backoff_initial_seconds: float = Field(default=1.0, ge=0.0)
    backoff_max_seconds: float = Field(default=30.0, ge=0.0)
    backoff_jitter_seconds: float = Field(default=1.0, ge=0.0)
