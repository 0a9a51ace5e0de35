from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

Role = Literal["user", "assistant", "system"]

MAX_IMAGES = 4


class ChatMessage(BaseModel):
    """A single chat turn as it travels over the wire."""

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str = ""
    images: list[str] = Field(default_factory=list, max_length=MAX_IMAGES)  # data URIs

    @field_validator("images", mode="before")
    @classmethod
    def _missing_images_as_empty(cls, value):
        return [] if value is None else value

    @model_validator(mode="after")
    def _require_text_or_images(self) -> "ChatMessage":
        # Only user turns are composed locally; other roles are relayed as received.
        if self.role == "user" and not self.content.strip() and not self.images:
            raise ValueError("user message needs text or at least one image")
        return self

    @property
    def has_images(self) -> bool:
        return bool(self.images)


class Message(ChatMessage):
    """A conversation entry owned by the client; ``id`` is its creation time in ms."""

    id: int


# ---------------------------------------------------------------------------
# Provider-side shape
# ---------------------------------------------------------------------------


class TextPart(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ImageURL(BaseModel):
    url: str


class ImagePart(BaseModel):
    type: Literal["image_url"] = "image_url"
    image_url: ImageURL


ContentPart = Annotated[Union[TextPart, ImagePart], Field(discriminator="type")]


class ProviderMessage(BaseModel):
    """Message content is plain text, or an ordered list of typed parts."""

    role: Role
    content: Union[str, list[ContentPart]]

    @property
    def is_multipart(self) -> bool:
        return not isinstance(self.content, str)
