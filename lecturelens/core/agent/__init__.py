"""Grounded answer generation."""

from lecturelens.core.agent.answer_generator import AnswerGenerator
from lecturelens.core.agent.answer_prompt import ANSWER_PROMPT, SYSTEM_PROMPT
from lecturelens.core.agent.answer_schema import ChatAnswer, ChatTurn

__all__ = ["ANSWER_PROMPT", "AnswerGenerator", "ChatAnswer", "ChatTurn", "SYSTEM_PROMPT"]
