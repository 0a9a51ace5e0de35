"""Chat endpoint relaying a conversation to the completion provider."""
from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool

from mediachat.config import Settings, get_settings
from mediachat.errors import ConfigurationError, ProviderError, ValidationError
from mediachat.models import ChatReply
from mediachat.services.formatter import INVALID_PAYLOAD, format_messages, parse_chat_request
from mediachat.services.llm import chat_completion

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/api/chat", response_model=ChatReply)
async def chat(request: Request, settings: Settings = Depends(get_settings)) -> ChatReply:
    if not settings.openai_api_key:
        raise ConfigurationError("Missing OpenAI API key")

    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValidationError(INVALID_PAYLOAD) from exc

    messages = parse_chat_request(payload)
    formatted = format_messages(messages)
    logger.debug("Relaying %d message(s) to the provider", len(formatted))

    try:
        reply, meta = await run_in_threadpool(chat_completion, formatted, settings)
    except Exception as exc:
        logger.exception("Error in chat completion: %s", exc)
        raise ProviderError(str(exc) or "Error") from exc

    logger.info("Chat reply ready (%d chars, usage=%s)", len(reply), meta)
    return ChatReply(reply=reply or "")
