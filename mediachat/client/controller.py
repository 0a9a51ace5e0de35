"""Client-side conversation state and the send / dictation workflows."""
from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence

from mediachat.models import MAX_IMAGES, ChatMessage, Message

from .encoding import PathLike, encode_files
from .speech import (
    DictationSession,
    SpeechRecognizer,
    SpeechSynthesizer,
    UnavailableRecognizer,
    UnavailableSynthesizer,
)

logger = logging.getLogger(__name__)

UNSUPPORTED_DICTATION_NOTICE = "Voice recognition is not supported in this runtime"


class ConversationController:
    """Owns one conversation for the lifetime of the client session.

    Messages are only ever appended. A user message is added as soon as
    its attachments are encoded, before the service answers, and stays in
    place even if no reply arrives.
    """

    def __init__(
        self,
        api,
        *,
        synthesizer: Optional[SpeechSynthesizer] = None,
        recognizer: Optional[SpeechRecognizer] = None,
        notify: Optional[Callable[[str], None]] = None,
        locale: str = "hi-IN",
        max_attachments: int = MAX_IMAGES,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._api = api
        self._synthesizer = synthesizer or UnavailableSynthesizer()
        self._recognizer = recognizer or UnavailableRecognizer()
        self._notify = notify or logger.warning
        self._locale = locale
        self._max_attachments = min(max_attachments, MAX_IMAGES)
        self._clock = clock

        self._messages: List[Message] = []
        self._attachments: List[Path] = []
        self._session: Optional[DictationSession] = None
        self._last_id = 0

        self.input_text = ""
        self.is_sending = False
        self.is_recording = False

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def messages(self) -> Sequence[Message]:
        return tuple(self._messages)

    @property
    def attachments(self) -> Sequence[Path]:
        return tuple(self._attachments)

    def attach_files(self, paths: Iterable[PathLike]) -> None:
        """Replace pending attachments, keeping only the first few."""

        selected = [Path(p) for p in paths]
        if len(selected) > self._max_attachments:
            logger.debug("Dropping %d attachment(s) over the limit", len(selected) - self._max_attachments)
        self._attachments = selected[: self._max_attachments]

    def _next_id(self) -> int:
        now = int(self._clock() * 1000)
        self._last_id = max(now, self._last_id + 1)
        return self._last_id

    # ------------------------------------------------------------------
    # Sending
    # ------------------------------------------------------------------

    async def send_message(self) -> None:
        text = self.input_text.strip()
        if (not text and not self._attachments) or self.is_sending:
            return
        self.is_sending = True

        try:
            images = await encode_files(list(self._attachments))

            user_message = Message(id=self._next_id(), role="user", content=text, images=images)
            self._messages.append(user_message)
            self.input_text = ""
            self._attachments = []

            history: List[ChatMessage] = list(self._messages)
            reply = await self._api.send(history)
            if reply:
                self._messages.append(Message(id=self._next_id(), role="assistant", content=reply))
                if self._synthesizer.available:
                    self._synthesizer.speak(reply)
        except Exception as exc:
            logger.exception("Sending message failed: %s", exc)
        finally:
            self.is_sending = False

    # ------------------------------------------------------------------
    # Dictation
    # ------------------------------------------------------------------

    def start_recording(self) -> None:
        if self.is_recording or self._session is not None:
            return
        if not self._recognizer.available:
            self._notify(UNSUPPORTED_DICTATION_NOTICE)
            return

        try:
            self._session = self._recognizer.open_session(
                locale=self._locale,
                on_start=self._on_dictation_start,
                on_result=self._on_dictation_result,
                on_end=self._on_dictation_end,
                on_error=self._on_dictation_error,
            )
            self._session.start()
        except Exception as exc:
            logger.exception("Could not start dictation: %s", exc)
            self._on_dictation_end()

    def stop_recording(self) -> None:
        if self._session is not None:
            self._session.stop()

    def _on_dictation_start(self) -> None:
        self.is_recording = True

    def _on_dictation_result(self, alternatives: List[str]) -> None:
        if alternatives:
            self.input_text = alternatives[0]

    def _on_dictation_end(self) -> None:
        self.is_recording = False
        self._session = None

    def _on_dictation_error(self, exc: Exception) -> None:
        logger.warning("Dictation failed: %s", exc)
        self._on_dictation_end()
