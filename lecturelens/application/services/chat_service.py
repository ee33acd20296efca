"""
Chat service for conversational Q&A with RAG.

Orchestrates the chat flow: retrieve course passages for the latest user
message, then generate an answer grounded in them. Retrieval problems
never fail the chat; the answer is generated without course content
instead.

Dependencies: lecturelens.core.agent, lecturelens.core.retrieval, lecturelens.boundary.storage
System role: Chat service orchestration layer
"""

import logging
from collections.abc import Sequence

from lecturelens.boundary.storage import SessionStore
from lecturelens.core.agent import AnswerGenerator, ChatAnswer, ChatTurn
from lecturelens.core.exceptions import DimensionMismatchError, ValidationError
from lecturelens.core.retrieval import QueryEngine, RetrievalContext
from lecturelens.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)

DEFAULT_CHAT_TOP_K = 3


class ChatService:
    """
    Chat service for conversational Q&A.

    Coordinates retrieval over the session's embeddings and answer
    generation for multi-turn conversations.
    """

    def __init__(
        self,
        query_engine: QueryEngine,
        generator: AnswerGenerator,
        store: SessionStore,
        top_k: int = DEFAULT_CHAT_TOP_K,
    ) -> None:
        """
        Initialize chat service.

        Args:
            query_engine: Retrieval over session records
            generator: Answer generator
            store: Session store
            top_k: Passages used to ground each answer
        """
        self.query_engine = query_engine
        self.generator = generator
        self.store = store
        self.top_k = top_k

    async def chat(self, session_id: str | None, messages: Sequence[ChatTurn]) -> ChatAnswer:
        """
        Answer the latest user message.

        Flow:
        1. Take the last user message as the retrieval query
        2. Retrieve top passages (skipped without a session)
        3. Generate the answer, grounded when passages were found

        Args:
            session_id: Session whose course content grounds the answer
            messages: Conversation so far, oldest first

        Returns:
            ChatAnswer: Answer text, citations and grounding flag

        Raises:
            ValidationError: If the conversation has no user message
            GenerationError: If the model call fails
        """
        question = next(
            (turn.content for turn in reversed(messages) if turn.role == "user"),
            None,
        )
        if question is None or not question.strip():
            raise ValidationError("Conversation must end with a user message", field="messages")

        context = await self._retrieve(session_id, question)

        answer = await self.generator.generate(messages, context.context_block)
        return ChatAnswer(
            answer=answer,
            citations=context.citations,
            grounded=not context.is_empty,
        )

    async def _retrieve(self, session_id: str | None, question: str) -> RetrievalContext:
        """Retrieve grounding context, degrading to an empty context on any failure."""
        if not session_id:
            return RetrievalContext()

        try:
            records = self.store.get_records(session_id)
            context = await self.query_engine.query(question, records, top_k=self.top_k)
        except DimensionMismatchError as e:
            log_exception_with_context(
                logger,
                f"{__name__}:_retrieve - Stored embeddings incompatible with query",
                e,
                session_id=session_id,
            )
            return RetrievalContext()
        except Exception as e:
            log_with_context(
                logger,
                logging.WARNING,
                f"{__name__}:_retrieve - Retrieval failed, answering without course content: "
                f"{type(e).__name__}: {e}",
                session_id=session_id,
            )
            return RetrievalContext()

        logger.info(
            f"{__name__}:_retrieve - Found {len(context.results)} relevant passages "
            f"for session {session_id}"
        )
        return context
