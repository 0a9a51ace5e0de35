from __future__ import annotations

from functools import lru_cache

from mediachat.config import Settings, get_settings

from .openai_provider import OpenAIProvider
from .base import LLMProvider

_PROVIDERS: dict[str, type[LLMProvider]] = {
    "openai": OpenAIProvider,
}


@lru_cache()
def get_provider(settings: Settings | None = None) -> LLMProvider:
    """Build the provider named by *settings*; one instance per distinct settings."""

    settings = settings or get_settings()
    provider_key = settings.llm_provider.lower()
    if provider_key not in _PROVIDERS:
        raise ValueError(f"Unsupported LLM provider: {provider_key}")
    return _PROVIDERS[provider_key](settings)
