"""Async HTTP client for the chat endpoint."""
from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

import httpx

from mediachat.models import ChatMessage

logger = logging.getLogger(__name__)


class ChatAPIError(Exception):
    """Raised when the chat endpoint answers with an error status."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(f"Chat API error {status}: {message}")
        self.status = status
        self.message = message


class ChatAPIClient:
    """Posts the whole conversation to ``/api/chat`` and returns the reply."""

    _CHAT_PATH = "/api/chat"

    def __init__(self, base_url: str, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        # No timeout: an in-flight request can only resolve or fail.
        self._client = httpx.AsyncClient(base_url=base_url, timeout=None, transport=transport)

    async def send(self, messages: Sequence[ChatMessage]) -> str:
        payload = {"messages": [m.model_dump(mode="json") for m in messages]}
        logger.debug("POST %s with %d message(s)", self._CHAT_PATH, len(messages))
        resp = await self._client.post(self._CHAT_PATH, json=payload)
        if resp.status_code >= 400:
            raise ChatAPIError(resp.status_code, str(_error_json(resp).get("error") or resp.text))
        data = resp.json()
        return data.get("reply") or ""

    async def close(self) -> None:
        await self._client.aclose()


def _error_json(resp: httpx.Response) -> dict[str, Any]:
    try:
        data = resp.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}
