from __future__ import annotations

import logging
from typing import Any, Sequence

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from mediachat.config import Settings, get_settings
from mediachat.errors import ConfigurationError
from mediachat.models import ProviderMessage

from .base import LLMProvider

logger = logging.getLogger(__name__)

_ROLE_TO_MESSAGE: dict[str, type[BaseMessage]] = {
    "system": SystemMessage,
    "user": HumanMessage,
    "assistant": AIMessage,
}


class OpenAIProvider(LLMProvider):
    name = "openai"

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        if not self._settings.openai_api_key:
            raise ConfigurationError("Missing OpenAI API key")
        # One attempt per request, default client timeout.
        self._llm = ChatOpenAI(
            model=self._settings.openai_model,
            api_key=self._settings.openai_api_key,
            max_tokens=self._settings.openai_max_tokens,
            max_retries=0,
        )

    def chat(self, messages: Sequence[ProviderMessage]) -> tuple[str, dict[str, Any]]:
        """Send the whole conversation in one synchronous call."""

        logger.debug("Sending %d message(s) to %s", len(messages), self._settings.openai_model)
        output = self._llm.invoke([to_langchain_message(m) for m in messages])

        reply = reply_text(output)
        usage = dict(getattr(output, "usage_metadata", None) or {})
        meta = {
            "model": self._settings.openai_model,
            "max_tokens": self._settings.openai_max_tokens,
            **usage,
        }
        logger.info("Received reply: %d chars", len(reply))
        return reply, meta


# ------------------------------------------------------------------
# Helper functions
# ------------------------------------------------------------------

def to_langchain_message(message: ProviderMessage) -> BaseMessage:
    if message.is_multipart:
        content: Any = [part.model_dump() for part in message.content]
    else:
        content = message.content
    return _ROLE_TO_MESSAGE[message.role](content=content)


def reply_text(output: Any) -> str:
    """Text of the first completion choice, or "" when there is none."""

    if output is None:
        return ""
    content = getattr(output, "content", None)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        chunks = []
        for block in content:
            if isinstance(block, str):
                chunks.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                chunks.append(block.get("text") or "")
        return "".join(chunks)
    return ""
