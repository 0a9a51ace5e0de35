from .api_client import ChatAPIClient, ChatAPIError
from .controller import UNSUPPORTED_DICTATION_NOTICE, ConversationController
from .encoding import encode_files, file_to_data_uri
from .speech import (
    DictationSession,
    SpeechRecognizer,
    SpeechSynthesizer,
    UnavailableRecognizer,
    UnavailableSynthesizer,
)

__all__ = [
    "UNSUPPORTED_DICTATION_NOTICE",
    "ChatAPIClient",
    "ChatAPIError",
    "ConversationController",
    "DictationSession",
    "SpeechRecognizer",
    "SpeechSynthesizer",
    "UnavailableRecognizer",
    "UnavailableSynthesizer",
    "encode_files",
    "file_to_data_uri",
]
