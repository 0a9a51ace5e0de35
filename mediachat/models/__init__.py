from .chat import ChatReply, ChatRequest, ErrorBody
from .message import (
    MAX_IMAGES,
    ChatMessage,
    ContentPart,
    ImagePart,
    ImageURL,
    Message,
    ProviderMessage,
    Role,
    TextPart,
)

__all__ = [
    "MAX_IMAGES",
    "ChatMessage",
    "ChatReply",
    "ChatRequest",
    "ContentPart",
    "ErrorBody",
    "ImagePart",
    "ImageURL",
    "Message",
    "ProviderMessage",
    "Role",
    "TextPart",
]
