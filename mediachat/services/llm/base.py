from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

from mediachat.models import ProviderMessage


class LLMProvider(ABC):
    """Abstract interface for a language-model provider."""

    name: str = "abstract"

    @abstractmethod
    def chat(self, messages: Sequence[ProviderMessage]) -> tuple[str, dict[str, Any]]:
        """Run a single chat completion.

        Returns
        -------
        tuple[str, dict]
            reply text of the first choice ("" when absent), usage_metadata
        """
