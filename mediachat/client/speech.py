"""Speech capabilities the conversation controller can be given.

Both capabilities come in two variants: an available one supplied by the
host runtime, and an unavailable no-op. The controller only talks to
these interfaces and never probes the runtime itself.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, List

TranscriptCallback = Callable[[List[str]], None]
EventCallback = Callable[[], None]
ErrorCallback = Callable[[Exception], None]


class SpeechSynthesizer(ABC):
    """Reads text aloud. ``speak`` returns immediately."""

    available: bool = True

    @abstractmethod
    def speak(self, text: str) -> None:
        ...


class UnavailableSynthesizer(SpeechSynthesizer):
    available = False

    def speak(self, text: str) -> None:
        return None


class DictationSession(ABC):
    """A single-shot recognition session yielding final results only."""

    @abstractmethod
    def start(self) -> None:
        ...

    @abstractmethod
    def stop(self) -> None:
        """Ask the session to finish; ``on_end`` fires once it has."""


class SpeechRecognizer(ABC):
    available: bool = True

    @abstractmethod
    def open_session(
        self,
        *,
        locale: str,
        on_start: EventCallback,
        on_result: TranscriptCallback,
        on_end: EventCallback,
        on_error: ErrorCallback,
    ) -> DictationSession:
        """Create a session for *locale* that reports at most one alternative."""


class UnavailableRecognizer(SpeechRecognizer):
    available = False

    def open_session(self, **_: object) -> DictationSession:
        raise RuntimeError("Speech recognition is not available in this runtime")
