"""
Gemini answer generator.

Turns a chat history plus an optional retrieved context block into the
assistant's reply.

Dependencies: langchain_google_genai, langchain_core
System role: LLM call for the chat endpoint
"""

import logging
from collections.abc import Sequence

from dotenv import load_dotenv
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from lecturelens.core.agent.answer_prompt import ANSWER_PROMPT
from lecturelens.core.agent.answer_schema import ChatTurn
from lecturelens.core.exceptions import GenerationError

logger = logging.getLogger(__name__)
load_dotenv()

_MESSAGE_TYPES: dict[str, type[BaseMessage]] = {
    "user": HumanMessage,
    "assistant": AIMessage,
    "system": SystemMessage,
}


def build_messages(messages: Sequence[ChatTurn], context: str = "") -> list[BaseMessage]:
    """
    Convert chat turns to LangChain messages.

    Args:
        messages: Conversation so far, oldest first
        context: Retrieved context block ("" when retrieval found nothing)

    Returns:
        list[BaseMessage]: System prompt (only with context) followed by the history
    """
    converted: list[BaseMessage] = []
    if context.strip():
        converted.extend(ANSWER_PROMPT.format_messages(context=context))
    converted.extend(_MESSAGE_TYPES[turn.role](content=turn.content) for turn in messages)
    return converted


def _message_text(message: BaseMessage) -> str:
    content = message.content
    if isinstance(content, str):
        return content
    # Multi-part responses: keep text parts only
    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


class AnswerGenerator:
    """Generate course-assistant answers with Gemini."""

    def __init__(
        self,
        model: str = "gemini-2.5-flash",
        temperature: float = 0.7,
        max_output_tokens: int = 2000,
        llm: BaseChatModel | None = None,
    ) -> None:
        """
        Initialize generator with model settings.

        Args:
            model: Gemini chat model ID
            temperature: Sampling temperature
            max_output_tokens: Upper bound on answer length
            llm: Preconfigured chat model (built from the other args if None)
        """
        self._model_id = model
        self._llm = llm or ChatGoogleGenerativeAI(
            model=model,
            temperature=temperature,
            max_output_tokens=max_output_tokens,
        )

    async def generate(self, messages: Sequence[ChatTurn], context: str = "") -> str:
        """
        Answer the latest message.

        Args:
            messages: Conversation so far, oldest first
            context: Retrieved context block, may be empty

        Returns:
            str: Answer text

        Raises:
            GenerationError: When the model call fails
        """
        prompt = build_messages(messages, context)
        logger.info(
            f"{__name__}:generate - Calling {self._model_id} with {len(prompt)} messages, "
            f"grounded={bool(context.strip())}"
        )
        try:
            response = await self._llm.ainvoke(prompt)
        except Exception as e:
            raise GenerationError(
                f"Answer generation failed: {e}",
                {"model": self._model_id},
            ) from e

        return _message_text(response)
