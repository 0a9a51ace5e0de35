"""Turn a client conversation into the provider's message shape.

A message without images keeps its content as a plain string. A message
with images becomes a list of parts: an optional leading text part (only
when the text is not blank) followed by one ``image_url`` part per image,
in order, carrying the data URI untouched.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, List

from pydantic import ValidationError as PydanticValidationError

from mediachat.errors import ValidationError
from mediachat.models import ChatMessage, ChatRequest, ImagePart, ImageURL, ProviderMessage, TextPart

logger = logging.getLogger(__name__)

INVALID_PAYLOAD = "Invalid payload"


def parse_chat_request(payload: Any) -> List[ChatMessage]:
    """Validate a decoded request body and return its messages."""

    if not isinstance(payload, dict) or not isinstance(payload.get("messages"), list):
        raise ValidationError(INVALID_PAYLOAD)
    try:
        request = ChatRequest.model_validate(payload)
    except PydanticValidationError as exc:
        logger.info("Rejected chat payload: %d validation error(s)", exc.error_count())
        raise ValidationError(INVALID_PAYLOAD) from exc
    return request.messages


def format_message(message: ChatMessage) -> ProviderMessage:
    if not message.has_images:
        return ProviderMessage(role=message.role, content=message.content)

    parts: list = []
    if message.content.strip():
        parts.append(TextPart(text=message.content))
    for image in message.images:
        parts.append(ImagePart(image_url=ImageURL(url=image)))
    return ProviderMessage(role=message.role, content=parts)


def format_messages(messages: Iterable[ChatMessage]) -> List[ProviderMessage]:
    return [format_message(m) for m in messages]
