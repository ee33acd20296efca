"""
Context assembly for answer generation.

Formats ranked search results into one delimited context block and a
parallel citation list. Pure formatting, no external calls.

Dependencies: lecturelens.core.retrieval.models
System role: Citation formatting business logic
"""

from collections.abc import Sequence

from lecturelens.core.retrieval.models import Citation, RetrievalContext, ScoredRecord

CONTEXT_DELIMITER = "\n\n---\n\n"


class ContextAssembler:
    """Build the grounding context and citations from search results."""

    def __init__(self, delimiter: str = CONTEXT_DELIMITER) -> None:
        self._delimiter = delimiter

    def assemble(self, results: Sequence[ScoredRecord]) -> RetrievalContext:
        """
        Build context block and citations in rank order.

        Args:
            results: Search results, best first

        Returns:
            RetrievalContext: Context block, citations and the results themselves
        """
        return RetrievalContext(
            context_block=self._delimiter.join(self.format_passage(r) for r in results),
            citations=[self.build_citation(r) for r in results],
            results=list(results),
        )

    @staticmethod
    def format_passage(result: ScoredRecord) -> str:
        """Label a passage with its source: "[course - chapter]\\ncontent"."""
        return f"[{result.metadata.course} - {result.metadata.chapter}]\n{result.content}"

    @staticmethod
    def build_citation(result: ScoredRecord) -> Citation:
        return Citation(
            course=result.metadata.course,
            chapter=result.metadata.chapter,
            filename=result.metadata.filename,
            score=result.score,
        )
