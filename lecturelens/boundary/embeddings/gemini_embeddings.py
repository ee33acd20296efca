"""
Google Generative AI embedding provider with fixed output dimensionality.

Adapts GoogleGenerativeAIEmbeddings to the async embed function used by
the batch manager and query engine: (text, task_type) -> vector. Every
call requests the configured dimension so index-time and query-time
vectors stay comparable.

Dependencies: langchain_google_genai
System role: Embedding provider boundary
"""

import asyncio
import logging
import re

from dotenv import load_dotenv
from langchain_google_genai import GoogleGenerativeAIEmbeddings

from lecturelens.core.exceptions import EmbeddingCallError, RateLimitError
from lecturelens.core.ingestion.models import TaskType

logger = logging.getLogger(__name__)
load_dotenv()

_RATE_LIMIT_MARKERS = re.compile(r"429|RESOURCE_EXHAUSTED|quota|rate limit", re.IGNORECASE)


class GeminiEmbeddingProvider:
    """Async embed function backed by Gemini embeddings."""

    def __init__(
        self,
        model: str = "models/gemini-embedding-001",
        output_dimensionality: int = 768,
        embeddings: GoogleGenerativeAIEmbeddings | None = None,
    ) -> None:
        """
        Initialize provider.

        Args:
            model: Google embedding model ID
            output_dimensionality: Fixed dimension for all embeddings
            embeddings: Preconfigured client (built from model if None)

        Note:
            GOOGLE_API_KEY is read from the environment by the client.
        """
        self._embeddings = embeddings or GoogleGenerativeAIEmbeddings(model=model)
        self._output_dimensionality = output_dimensionality
        logger.info(
            f"{__name__}:__init__ - Initialized with model={model}, "
            f"output_dimensionality={output_dimensionality}"
        )

    @property
    def output_dimensionality(self) -> int:
        return self._output_dimensionality

    async def __call__(self, text: str, task_type: TaskType) -> list[float]:
        """
        Embed one text.

        Args:
            text: Text to embed
            task_type: RETRIEVAL_DOCUMENT at index time, RETRIEVAL_QUERY at query time

        Returns:
            list[float]: Embedding vector

        Raises:
            RateLimitError: When the provider reports quota exhaustion
            EmbeddingCallError: For any other provider failure
        """
        try:
            vector = await asyncio.to_thread(
                self._embeddings.embed_query,
                text,
                task_type=task_type.value,
                output_dimensionality=self._output_dimensionality,
            )
        except Exception as e:
            if _RATE_LIMIT_MARKERS.search(str(e)):
                raise RateLimitError(f"Embedding rate limited: {e}") from e
            raise EmbeddingCallError(f"Embedding call failed: {e}") from e

        return [float(value) for value in vector]
