"""Dictation session.

Feeds an audio stream through a transcriber and keeps a live transcript
that a note can be created from once recording ends.
"""

import logging
import threading
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from .transcriber import Transcriber

if TYPE_CHECKING:
    from ..config import STTConfig

logger = logging.getLogger(__name__)


class DictationSession:
    """One dictation recording with a live-updating transcript.

    Finalized segments accumulate in order; the segment still being
    recognised is shown after them until it is finalized or replaced.
    """

    def __init__(
        self,
        transcriber: Transcriber,
        on_update: Callable[[str], None] | None = None,
        language: str | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            transcriber: Speech-to-text engine
            on_update: Called with the transcript after every partial result
            language: Language code to transcribe in, transcriber default if None
        """
        self._transcriber = transcriber
        if language:
            transcriber.set_language(language)
        self._on_update = on_update

        self._segments: list[str] = []
        self._partial = ""
        self._is_recording = False
        self._error_message: str | None = None

        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @classmethod
    def from_config(
        cls,
        transcriber: Transcriber,
        config: "STTConfig",
        on_update: Callable[[str], None] | None = None,
    ) -> "DictationSession":
        """Create a session using speech-to-text configuration."""
        return cls(transcriber, on_update=on_update, language=config.language)

    @property
    def transcript(self) -> str:
        """Get the transcript so far."""
        with self._lock:
            parts = [*self._segments, self._partial]
        return " ".join(part for part in parts if part)

    @property
    def is_recording(self) -> bool:
        """Check if audio is being transcribed."""
        return self._is_recording

    @property
    def error_message(self) -> str | None:
        """Get the transcription error that ended the last recording."""
        return self._error_message

    def record(self, audio_stream: Iterable[bytes]) -> str:
        """Transcribe an audio stream until it ends or stop() is called.

        Args:
            audio_stream: Audio chunks from the microphone

        Returns:
            The transcript when recording ends.
        """
        self._stop_event.clear()
        return self._record(audio_stream)

    def _record(self, audio_stream: Iterable[bytes]) -> str:
        self._error_message = None
        self._is_recording = True
        logger.info("Dictation started")

        try:
            for partial in self._transcriber.transcribe_stream(iter(audio_stream)):
                if self._stop_event.is_set():
                    break
                with self._lock:
                    if partial.is_final:
                        self._segments.append(partial.text.strip())
                        self._partial = ""
                    else:
                        self._partial = partial.text.strip()
                if self._on_update is not None:
                    self._on_update(self.transcript)
        except RuntimeError as e:
            self._error_message = str(e)
            logger.error("Transcription failed: %s", e)
        finally:
            self._is_recording = False

        logger.info("Dictation stopped")
        return self.transcript

    def start(self, audio_stream: Iterable[bytes]) -> None:
        """Record on a background thread.

        Args:
            audio_stream: Audio chunks from the microphone

        Raises:
            RuntimeError: If the session is already recording.
        """
        if self._thread is not None and self._thread.is_alive():
            raise RuntimeError("Dictation is already in progress")

        self._stop_event.clear()
        # Set before the thread runs so callers see the session as recording
        self._is_recording = True
        self._thread = threading.Thread(
            target=self._record,
            args=(audio_stream,),
            name="dictation",
            daemon=True,
        )
        self._thread.start()

    def stop(self, timeout: float = 2.0) -> None:
        """End recording, keeping what was transcribed."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=timeout)
            self._thread = None
        self._is_recording = False

    def reset(self) -> None:
        """Clear the transcript for a new recording."""
        with self._lock:
            self._segments.clear()
            self._partial = ""
        self._error_message = None


__all__ = ["DictationSession"]
