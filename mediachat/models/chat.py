from __future__ import annotations

from pydantic import BaseModel, Field

from .message import ChatMessage


class ChatRequest(BaseModel):
    messages: list[ChatMessage] = Field(..., min_length=1)


class ChatReply(BaseModel):
    reply: str


class ErrorBody(BaseModel):
    error: str
