from __future__ import annotations

from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from a .env file if present (local dev only)
load_dotenv()


class Settings(BaseSettings):
    """Application configuration loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore", frozen=True)

    # OpenAI. A missing key is reported per request, never at startup.
    openai_api_key: Optional[str] = Field(default=None, description="Credential for the completion provider.")
    openai_model: str = Field("gpt-4o", description="Vision-capable model used for every completion.")
    openai_max_tokens: int = Field(1000, ge=1, description="Output-token ceiling per completion.")

    # LLM provider selection
    llm_provider: str = Field("openai")

    log_level: str = Field("INFO")

    # Client side
    chat_api_url: str = Field("http://localhost:8000", description="Base URL of the chat service.")
    max_attachments: int = Field(4, ge=1, le=4)
    dictation_locale: str = Field("hi-IN", description="Locale used for every dictation session.")


@lru_cache()
def get_settings() -> Settings:  # pragma: no cover
    """Return a cached Settings instance so it is only parsed once."""

    return Settings()
