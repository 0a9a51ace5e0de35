from __future__ import annotations

from typing import Any, Sequence

from mediachat.config import Settings
from mediachat.models import ProviderMessage

from .registry import get_provider

__all__ = [
    "chat_completion",
    "get_provider",
]


def chat_completion(
    messages: Sequence[ProviderMessage],
    settings: Settings | None = None,
) -> tuple[str, dict[str, Any]]:
    """Facade for the configured LLM provider (synchronous).

    The provider is built on first use, so a missing credential never
    breaks import. The endpoint passes its own *settings* so the
    credential it checked is the one the provider uses.
    Returns (reply_text, usage_dict).
    """

    return get_provider(settings).chat(messages)
