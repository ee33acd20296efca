"""Embedding provider adapters."""

from lecturelens.boundary.embeddings.gemini_embeddings import GeminiEmbeddingProvider

__all__ = ["GeminiEmbeddingProvider"]
